from datetime import UTC, datetime

from fastapi import APIRouter, status

router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health():
    """Liveness probe, no authentication"""
    return {"apiStatus": "Healthy", "time": datetime.now(UTC).isoformat()}
