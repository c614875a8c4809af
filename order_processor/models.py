"""Pydantic response models for the Order Processor API."""

from pydantic import BaseModel

# ── Root ──────────────────────────────────────────────────────────────────────


class RootResponse(BaseModel):
    message: str = "Order Processor API is running!"


# ── Health ────────────────────────────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str = "healthy"
