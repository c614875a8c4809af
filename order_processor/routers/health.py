"""GET /health – liveness probe."""

from fastapi import APIRouter

from order_processor.models import HealthResponse

router = APIRouter(tags=["ops"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()
