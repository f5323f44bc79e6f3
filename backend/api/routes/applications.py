"""Application generation and submission endpoints."""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter

from backend.api.schemas import (
    GenerateApplicationsRequest,
    GenerateApplicationsResponse,
    GeneratedApplication,
    SubmissionResult,
    SubmitApplicationsRequest,
    SubmitApplicationsResponse,
)
from backend.exceptions import ValidationFailure
from backend.utils.application_text import render_cover_letter, render_resume

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate-applications", response_model=GenerateApplicationsResponse)
def generate_applications(data: GenerateApplicationsRequest | None = None):
    """Generate a tailored resume and cover letter for each selected job."""
    if data is None or data.cv_data is None or not data.selected_jobs:
        raise ValidationFailure("CV data and selected jobs are required")

    profile = data.cv_data
    applications = [
        GeneratedApplication(
            job_id=job.id,
            job_title=job.title,
            company=job.company,
            tailored_resume=render_resume(profile.skills, profile.experience, job.title, job.company),
            cover_letter=render_cover_letter(profile.skills, job.title, job.company, job.description),
        )
        for job in data.selected_jobs
    ]

    logger.info(f"Generated {len(applications)} applications")
    return GenerateApplicationsResponse(applications=applications)


@router.post("/submit-applications", response_model=SubmitApplicationsResponse)
def submit_applications(data: SubmitApplicationsRequest | None = None):
    """Acknowledge each application as submitted (simulated, nothing is sent)."""
    if data is None or not data.applications:
        raise ValidationFailure("No applications to submit")

    results = [
        SubmissionResult(
            job_id=app.job_id,
            job_title=app.job_title,
            company=app.company,
            status="submitted",
            submitted_at=datetime.now(UTC),
        )
        for app in data.applications
    ]

    logger.info(f"Simulated submission of {len(results)} applications")
    return SubmitApplicationsResponse(
        message="Applications submitted successfully",
        results=results,
    )
