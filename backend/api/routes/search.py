"""Job search endpoint."""

import logging

from fastapi import APIRouter, Depends, Query, Request

from backend.api.limiter import limiter
from backend.api.schemas import JobListing, JobSearchResponse
from backend.config import settings
from backend.tools.remotive import RemotiveClient

logger = logging.getLogger(__name__)

router = APIRouter()


def get_job_board() -> RemotiveClient:
    """FastAPI dependency for the upstream job directory."""
    return RemotiveClient()


def build_search_query(skills: list[str] | None) -> str:
    """Join repeated or comma-separated keywords into one search string."""
    terms = [term.strip() for value in (skills or []) for term in value.split(",")]
    query = " ".join(term for term in terms if term)
    return query or settings.default_search_query


@router.get("/search-jobs", response_model=JobSearchResponse)
@limiter.limit(settings.search_rate_limit)
def search_jobs(
    request: Request,
    skills: list[str] | None = Query(default=None),
    job_board: RemotiveClient = Depends(get_job_board),
):
    """Search the remote-jobs directory for listings matching the given skills."""
    query = build_search_query(skills)
    logger.info(f"Searching jobs for {query!r}")

    jobs = job_board.search(query)

    return JobSearchResponse(jobs=[JobListing(**job) for job in jobs])
