from fastapi import FastAPI

from order_processor.config import Settings
from order_processor.deps import get_settings
from order_processor.routers import health, status


def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(
        title="Order Processor API",
        description="Static status and liveness endpoints for the order processor.",
        version="0.1.0",
        root_path=settings.root_path,
    )
    app.include_router(status.router)
    app.include_router(health.router)
    return app


app = create_app(get_settings())
