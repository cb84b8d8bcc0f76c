"""
Health check route
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Process liveness only; the database is not queried."""
    return {"status": "healthy"}
