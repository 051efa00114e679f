"""Mount all routes."""

from fastapi import APIRouter

from flatwiki.api.pages import router as pages_router

api_router = APIRouter()
api_router.include_router(pages_router, tags=["pages"])
