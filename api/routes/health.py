"""Health check route"""

from fastapi import APIRouter

from api.responses import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_model=HealthResponse)
def health_check():
    """Liveness probe; does not touch the database"""
    return {"status": "ok"}
