"""
Run the API server.

Usage:
    python -m backend
"""

import logging

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from backend.config import settings  # noqa: E402


def main():
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).info(f"Backend server running on port {settings.port}")
    uvicorn.run("backend.api.app:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
