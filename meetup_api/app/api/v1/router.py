"""
Top‑level router for version 1 of the API.

When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import meetups

router = APIRouter()

router.include_router(meetups.router, prefix="/meetups", tags=["meetups"])
