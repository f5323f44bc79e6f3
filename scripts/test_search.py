"""
Tests for the job search endpoint against a fake Remotive upstream.

Usage: pytest scripts/test_search.py
"""

import httpx

from backend.api.routes.search import build_search_query
from backend.config import settings
from backend.tools.remotive import html_to_text, humanize_job_type, normalize_job


def test_search_normalizes_upstream_jobs(client, remotive):
    response = client.get("/api/search-jobs")
    assert response.status_code == 200, response.text
    jobs = response.json()["jobs"]

    assert len(jobs) == len(remotive.payload["jobs"])
    assert all(job["id"] is not None for job in jobs)

    first = jobs[0]
    assert first["id"] == 1
    assert first["title"] == "Green Software Engineer"
    assert first["company"] == "EcoTech Solutions"
    assert first["location"] == "USA"
    assert "sustainable software solutions" in first["description"]
    assert "<" not in first["description"]
    assert first["requirements"] == ["javascript", "react", "aws"]
    assert first["salary"] == "$120k - $150k"
    assert first["type"] == "Full-time"
    assert first["remote"] is True
    assert first["url"].startswith("https://remotive.com/")

    second = jobs[1]
    assert second["salary"] == "N/A"
    assert second["type"] == "Contract"
    assert second["location"] == "Remote"

    # Missing upstream id falls back to the loop index
    assert jobs[2]["id"] == 2
    assert jobs[2]["requirements"] == []
    print(f"[OK] Normalized {len(jobs)} jobs")


def test_search_defaults_to_fallback_query(client, remotive):
    client.get("/api/search-jobs")
    assert len(remotive.requests) == 1
    params = remotive.requests[0].url.params
    assert params["search"] == settings.default_search_query
    assert params["limit"] == str(settings.max_search_results)


def test_search_joins_repeated_skills(client, remotive):
    client.get("/api/search-jobs", params=[("skills", "python"), ("skills", "react")])
    assert remotive.requests[0].url.params["search"] == "python react"


def test_search_splits_comma_separated_skills(client, remotive):
    client.get("/api/search-jobs", params={"skills": "python, aws ,,"})
    assert remotive.requests[0].url.params["search"] == "python aws"


def test_search_returns_empty_list(client, remotive):
    remotive.payload = {"job-count": 0, "jobs": []}
    response = client.get("/api/search-jobs")
    assert response.status_code == 200
    assert response.json() == {"jobs": []}


def test_search_upstream_http_error(client, remotive):
    remotive.status = 503
    remotive.payload = {"message": "unavailable"}
    response = client.get("/api/search-jobs")
    assert response.status_code == 500
    assert "503" in response.json()["error"]


def test_search_upstream_network_error(client, remotive):
    remotive.error = httpx.ConnectError("connection refused")
    response = client.get("/api/search-jobs")
    assert response.status_code == 500
    assert response.json() == {"error": "connection refused"}


def test_search_upstream_malformed_body(client, remotive):
    remotive.payload = b"<html>not json</html>"
    response = client.get("/api/search-jobs")
    assert response.status_code == 500
    assert "invalid JSON" in response.json()["error"]


def test_search_upstream_missing_jobs_array(client, remotive):
    remotive.payload = {"results": []}
    response = client.get("/api/search-jobs")
    assert response.status_code == 500
    assert "unexpected response" in response.json()["error"]


def test_search_rate_limited(client, remotive):
    allowed = int(settings.search_rate_limit.split("/")[0])
    for _ in range(allowed):
        assert client.get("/api/search-jobs").status_code == 200

    response = client.get("/api/search-jobs")
    assert response.status_code == 429
    assert response.json()["error"].startswith("Rate limit exceeded")


def test_build_search_query():
    assert build_search_query(None) == settings.default_search_query
    assert build_search_query(["", "  "]) == settings.default_search_query
    assert build_search_query(["Python", "AWS"]) == "Python AWS"


def test_normalize_job_helpers():
    assert humanize_job_type("full_time") == "Full-time"
    assert humanize_job_type("part_time") == "Part-time"
    assert humanize_job_type(None) == ""
    assert html_to_text("<p>One</p><p>Two</p>") == "One\nTwo"

    job = normalize_job({"id": None, "title": "Dev", "company_name": "Acme"}, 7)
    assert job["id"] == 7
    assert job["salary"] == "N/A"
    assert job["remote"] is True


def test_description_is_plain_text():
    html = (
        "<h1>About us</h1>"
        "<p>We cut carbon_emissions by 2*x for real_time grids.</p>"
        "<ul><li>Python</li></ul>"
    )
    job = normalize_job({"id": 5, "title": "Grid Engineer", "company_name": "Volt", "description": html}, 0)

    assert job["description"] == "About us\nWe cut carbon_emissions by 2*x for real_time grids.\n- Python"
    assert "\\" not in job["description"]
    assert "===" not in job["description"]
    assert "#" not in job["description"]


def test_cover_letter_from_upstream_html(client, remotive):
    remotive.payload = {
        "jobs": [
            {
                "id": 7,
                "title": "Grid Engineer",
                "company_name": "Volt",
                "description": "<h2>Mission</h2><p>Balance real_time demand.</p>",
            }
        ]
    }
    jobs = client.get("/api/search-jobs").json()["jobs"]
    cv_data = {"skills": ["Python"], "experience": "5 years"}

    applications = client.post(
        "/api/generate-applications",
        json={"cvData": cv_data, "selectedJobs": jobs},
    ).json()["applications"]

    letter = applications[0]["coverLetter"]
    assert "Mission\nBalance real_time demand." in letter
    assert "\\_" not in letter
    assert "##" not in letter
