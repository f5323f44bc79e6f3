"""
CV file storage.

Validates uploaded CVs and writes them to the local upload directory.
"""

import logging
import time
from pathlib import Path

from backend.config import settings
from backend.exceptions import InvalidUpload

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf", ".doc", ".docx"}
ALLOWED_CONTENT_TYPES = {
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}

# Placeholder profile returned for every upload; file content is not parsed.
PLACEHOLDER_SKILLS = ["JavaScript", "React", "Node.js", "Python", "AWS", "Docker"]
PLACEHOLDER_EXPERIENCE = "5 years"
PLACEHOLDER_EDUCATION = "Bachelor in Computer Science"


def upload_dir() -> Path:
    return Path(settings.upload_dir)


def ensure_upload_dir() -> Path:
    """Create the upload directory if needed. Safe to call repeatedly."""
    path = upload_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def validate_cv(filename: str | None, content_type: str | None, size: int) -> None:
    """Raise InvalidUpload unless the file may be stored."""
    if not filename:
        raise InvalidUpload("No file uploaded")

    extension = Path(filename).suffix.lower()
    mime = (content_type or "").split(";")[0].strip().lower()
    if extension not in ALLOWED_EXTENSIONS or mime not in ALLOWED_CONTENT_TYPES:
        raise InvalidUpload("Only PDF, DOC, and DOCX files are allowed")

    if size == 0:
        raise InvalidUpload("Uploaded file is empty")
    if size > settings.max_upload_size:
        limit_mb = settings.max_upload_size / (1024 * 1024)
        raise InvalidUpload(f"File too large. Maximum size is {limit_mb:g} MB.")


def store_cv(original_name: str, content: bytes) -> str:
    """Write the CV under a timestamp-prefixed name and return that name.

    Raises FileExistsError if that name is already taken; nothing is overwritten.
    """
    safe_name = Path(original_name).name
    stored_name = f"{int(time.time() * 1000)}-{safe_name}"
    with open(upload_dir() / stored_name, "xb") as f:
        f.write(content)
    logger.info(f"Stored CV {original_name!r} as {stored_name} ({len(content)} bytes)")
    return stored_name


def build_profile(stored_name: str, original_name: str) -> dict:
    """Profile record for a stored CV."""
    return {
        "filename": stored_name,
        "original_name": original_name,
        "skills": list(PLACEHOLDER_SKILLS),
        "experience": PLACEHOLDER_EXPERIENCE,
        "education": PLACEHOLDER_EDUCATION,
    }
