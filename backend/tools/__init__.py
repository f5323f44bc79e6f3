"""
Tools for Green Job Hunter.

- remotive: Job search via the Remotive remote-jobs API
- cv_storage: Validation and disk storage of uploaded CVs
"""

from backend.tools.cv_storage import build_profile, ensure_upload_dir, store_cv, validate_cv
from backend.tools.remotive import RemotiveClient

__all__ = ["RemotiveClient", "build_profile", "ensure_upload_dir", "store_cv", "validate_cv"]
