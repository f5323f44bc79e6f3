"""
Remotive job board client.

Forwards a keyword search to the Remotive remote-jobs directory and
normalizes each hit into the JobListing shape used by the API.

Docs: https://remotive.com/api/remote-jobs
"""

import logging
import re

import httpx
from markdownify import markdownify

from backend.config import settings
from backend.exceptions import UpstreamError

logger = logging.getLogger(__name__)

HEADING_MARKER = re.compile(r"^#{1,6}\s+")


def humanize_job_type(job_type: str | None) -> str:
    """Turn Remotive's ``full_time`` style codes into ``Full-time``."""
    if not job_type:
        return ""
    return job_type.replace("_", "-").capitalize()


def html_to_text(html: str | None) -> str:
    """Convert an HTML job description to plain text."""
    if not html:
        return ""
    text = markdownify(
        html,
        strip=["a", "img", "strong", "b", "em", "i"],
        heading_style="ATX",
        bullets="-",
        escape_underscores=False,
        escape_asterisks=False,
        escape_misc=False,
    )
    # Collapse the blank lines markdownify leaves between blocks
    lines = [HEADING_MARKER.sub("", line.strip()) for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def normalize_job(hit: dict, index: int) -> dict:
    """Map one Remotive record to the JobListing field set."""
    job_id = hit.get("id")
    if job_id is None:
        job_id = index

    return {
        "id": job_id,
        "title": hit.get("title") or "",
        "company": hit.get("company_name") or "",
        "location": hit.get("candidate_required_location") or "Remote",
        "description": html_to_text(hit.get("description")),
        "requirements": [str(t) for t in (hit.get("tags") or [])],
        "salary": hit.get("salary") or "N/A",
        "type": humanize_job_type(hit.get("job_type")),
        "remote": True,
        "url": hit.get("url") or "",
    }


class RemotiveClient:
    """Thin synchronous client for the Remotive search endpoint."""

    def __init__(
        self,
        api_url: str | None = None,
        timeout: float | None = None,
        limit: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.api_url = api_url or settings.remotive_api_url
        self.timeout = timeout if timeout is not None else settings.search_timeout
        self.limit = limit if limit is not None else settings.max_search_results
        self.transport = transport

    def search(self, query: str) -> list[dict]:
        """
        Run one search against the directory.

        Args:
            query: Space-joined keywords

        Returns:
            Normalized job listings in upstream order

        Raises:
            UpstreamError: on transport errors, non-2xx status or a malformed body
        """
        params = {"search": query, "limit": self.limit}

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(self.api_url, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(
                f"Job search HTTP error: {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(str(e) or type(e).__name__) from e
        except ValueError as e:
            raise UpstreamError(f"Job search returned invalid JSON: {e}") from e

        hits = data.get("jobs") if isinstance(data, dict) else None
        if not isinstance(hits, list):
            raise UpstreamError("Job search returned an unexpected response body")

        jobs = [normalize_job(hit, i) for i, hit in enumerate(hits) if isinstance(hit, dict)]
        if len(jobs) != len(hits):
            raise UpstreamError("Job search returned malformed job records")

        logger.info(f"Remotive search={query!r} returned {len(jobs)} jobs")
        return jobs
