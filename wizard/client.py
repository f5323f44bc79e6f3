"""HTTP client for the Green Job Hunter API."""

import logging
from pathlib import Path

import httpx

from wizard.config import settings

logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


class ApiError(Exception):
    """A request to the API failed; the message is shown to the user as-is."""


class ApiClient:
    """
    Calls the four wizard endpoints in the order the wizard needs them.

    Args:
        base_url: API origin, defaults to the API_BASE_URL setting
        http: Pre-built httpx client (tests pass a FastAPI TestClient)
    """

    def __init__(self, base_url: str | None = None, http: httpx.Client | None = None):
        self._owns_http = http is None
        self.http = http or httpx.Client(
            base_url=base_url or settings.api_base_url,
            timeout=settings.request_timeout,
        )

    def close(self):
        if self._owns_http:
            self.http.close()

    def _request(self, method: str, path: str, failure: str, key: str, **kwargs):
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise ApiError(f"{failure}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.is_error:
            message = body.get("error") if isinstance(body, dict) else None
            logger.debug(f"{method} {path} -> {response.status_code}: {message}")
            raise ApiError(message or failure)

        if not isinstance(body, dict) or key not in body:
            raise ApiError(failure)
        return body[key]

    def health(self) -> str:
        return self._request("GET", "/api/health", "API is not reachable", "status")

    def upload_cv(self, path: str | Path) -> dict:
        """Upload a CV file and return the profile (``cvData``)."""
        path = Path(path)
        content_type = CONTENT_TYPES.get(path.suffix.lower(), "application/octet-stream")
        with open(path, "rb") as f:
            return self._request(
                "POST",
                "/api/upload-cv",
                "Failed to upload CV",
                "cvData",
                files={"cv": (path.name, f, content_type)},
            )

    def search_jobs(self, skills: list[str] | None = None) -> list[dict]:
        params = {"skills": skills} if skills else None
        return self._request("GET", "/api/search-jobs", "Failed to fetch jobs", "jobs", params=params)

    def generate_applications(self, cv_data: dict, selected_jobs: list[dict]) -> list[dict]:
        return self._request(
            "POST",
            "/api/generate-applications",
            "Failed to generate applications",
            "applications",
            json={"cvData": cv_data, "selectedJobs": selected_jobs},
        )

    def submit_applications(self, applications: list[dict]) -> list[dict]:
        return self._request(
            "POST",
            "/api/submit-applications",
            "Failed to submit applications",
            "results",
            json={"applications": applications},
        )
