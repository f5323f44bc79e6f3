"""
Green Job Hunter Backend.

Core components:
- api: FastAPI app, routes and request/response schemas
- tools: Remotive job search client, CV storage
- utils: Application text templates
"""
