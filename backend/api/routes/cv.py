"""CV upload endpoint."""

from fastapi import APIRouter, File, UploadFile

from backend.api.schemas import CVUploadResponse, Profile
from backend.config import settings
from backend.exceptions import InvalidUpload
from backend.tools.cv_storage import build_profile, store_cv, validate_cv

router = APIRouter()


@router.post("/upload-cv", response_model=CVUploadResponse)
async def upload_cv(cv: UploadFile | None = File(default=None)):
    """Upload a CV (PDF, DOC or DOCX) and return the derived profile."""
    if cv is None or not cv.filename:
        raise InvalidUpload("No file uploaded")

    # Read one byte past the limit so oversize files are caught without buffering them whole
    content = await cv.read(settings.max_upload_size + 1)
    validate_cv(cv.filename, cv.content_type, len(content))

    stored_name = store_cv(cv.filename, content)

    return CVUploadResponse(
        message="CV uploaded successfully",
        cv_data=Profile(**build_profile(stored_name, cv.filename)),
    )
