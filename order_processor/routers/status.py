"""GET / – running banner."""

from fastapi import APIRouter

from order_processor.models import RootResponse

router = APIRouter(tags=["ops"])


@router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    return RootResponse()
