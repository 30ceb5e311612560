"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_document_pipeline,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_document_pipeline",
    "get_service_cache",
    "get_settings_dependency",
]
