"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.errors import register_error_handlers
from backend.api.limiter import limiter
from backend.api.schemas import HealthResponse
from backend.config import settings
from backend.tools.cv_storage import ensure_upload_dir

logger = logging.getLogger(__name__)

ALLOWED_ORIGINS = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Make sure the upload directory exists before the first request."""
    path = ensure_upload_dir()
    logger.info(f"Uploads stored in {path.resolve()}")
    yield


app = FastAPI(
    title="Green Job Hunter API",
    description="CV upload, remote job search and templated applications",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from backend.api.routes import applications, cv, search  # noqa: E402

app.include_router(cv.router, prefix="/api", tags=["CV"])
app.include_router(search.router, prefix="/api", tags=["Search"])
app.include_router(applications.router, prefix="/api", tags=["Applications"])


@app.get("/api/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
