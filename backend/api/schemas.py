"""API request/response schemas.

JSON field names are camelCase on the wire; snake_case is accepted on input.
"""

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


# Profile schemas
class Profile(CamelModel):
    filename: str = ""
    original_name: str = ""
    skills: list[str]
    experience: str
    education: str = ""


class CVUploadResponse(CamelModel):
    message: str
    cv_data: Profile


# Job schemas
class JobListing(CamelModel):
    id: int | str
    title: str
    company: str
    location: str = ""
    description: str = ""
    requirements: list[str] = []
    salary: str = "N/A"
    job_type: str = Field(default="", alias="type")
    remote: bool = False
    url: str = ""


class JobSearchResponse(CamelModel):
    jobs: list[JobListing]


# Application schemas
class GenerateApplicationsRequest(CamelModel):
    cv_data: Profile | None = None
    selected_jobs: list[JobListing] | None = None


class GeneratedApplication(CamelModel):
    job_id: int | str
    job_title: str
    company: str
    tailored_resume: str = ""
    cover_letter: str = ""


class GenerateApplicationsResponse(CamelModel):
    applications: list[GeneratedApplication]


# Submission schemas
class SubmitApplicationsRequest(CamelModel):
    applications: list[GeneratedApplication] | None = None


class SubmissionResult(CamelModel):
    job_id: int | str
    job_title: str
    company: str
    status: str = "submitted"
    submitted_at: datetime


class SubmitApplicationsResponse(CamelModel):
    message: str
    results: list[SubmissionResult]


# Misc
class HealthResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str
