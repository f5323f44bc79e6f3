"""Shared fixtures: the real app, a temp upload dir and a fake Remotive upstream."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import httpx
import pytest
from fastapi.testclient import TestClient

from backend.api.app import app
from backend.api.limiter import limiter
from backend.api.routes.search import get_job_board
from backend.config import settings
from backend.tools.remotive import RemotiveClient

REMOTIVE_JOBS = [
    {
        "id": 1,
        "url": "https://remotive.com/remote-jobs/software-dev/green-software-engineer-1",
        "title": "Green Software Engineer",
        "company_name": "EcoTech Solutions",
        "category": "Software Development",
        "tags": ["javascript", "react", "aws"],
        "job_type": "full_time",
        "publication_date": "2026-10-01T10:00:00",
        "candidate_required_location": "USA",
        "salary": "$120k - $150k",
        "description": "<p>Build <strong>sustainable</strong> software solutions for climate tech companies.</p>",
    },
    {
        "id": 1902,
        "url": "https://remotive.com/remote-jobs/software-dev/sustainability-developer-1902",
        "title": "Sustainability Developer",
        "company_name": "GreenCloud Inc",
        "tags": ["python", "django"],
        "job_type": "contract",
        "candidate_required_location": "",
        "salary": "",
        "description": "<p>Develop applications that help companies reduce their carbon footprint</p>",
    },
    {
        "url": "https://remotive.com/remote-jobs/data/environmental-data-scientist",
        "title": "Environmental Data Scientist",
        "company_name": "EcoAnalytics",
        "job_type": "full_time",
        "candidate_required_location": "Worldwide",
        "description": "",
    },
]


class FakeRemotive:
    """Stands in for the Remotive API; tests set ``payload``/``status``/``error``."""

    def __init__(self):
        self.payload = {"job-count": len(REMOTIVE_JOBS), "jobs": REMOTIVE_JOBS}
        self.status = 200
        self.error: Exception | None = None
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.payload, bytes):
            return httpx.Response(self.status, content=self.payload)
        return httpx.Response(self.status, json=self.payload)


@pytest.fixture
def upload_dir(tmp_path, monkeypatch) -> Path:
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "upload_dir", str(path))
    return path


@pytest.fixture
def remotive():
    fake = FakeRemotive()
    app.dependency_overrides[get_job_board] = lambda: RemotiveClient(
        transport=httpx.MockTransport(fake.handler)
    )
    yield fake
    app.dependency_overrides.pop(get_job_board, None)


@pytest.fixture
def client(upload_dir, remotive):
    limiter.reset()
    with TestClient(app) as c:
        yield c
