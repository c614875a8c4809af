"""FastAPI dependency providers.

Tests override these functions via ``app.dependency_overrides`` or by
clearing the ``lru_cache``.
"""

from functools import lru_cache

from order_processor.config import Settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
