"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: study_assistant.configs, study_assistant.core.document_processing
System role: DI container for service injection
"""

from functools import lru_cache

from study_assistant.configs import Settings, get_settings
from study_assistant.core.document_processing import DocumentPipeline


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._vector_store = None
        self._document_pipeline = None

    @property
    def vector_store(self):
        """Get cached vector store."""
        if self._vector_store is None:
            from study_assistant.boundary.vdb.vector_store_factory import get_vector_store
            self._vector_store = get_vector_store(get_settings())
        return self._vector_store

    @property
    def document_pipeline(self) -> DocumentPipeline:
        """Get cached document pipeline."""
        if self._document_pipeline is None:
            self._document_pipeline = DocumentPipeline.from_settings(
                get_settings(),
                vector_store=self.vector_store,
            )
        return self._document_pipeline

    def clear(self) -> None:
        """Clear all cached instances."""
        self._vector_store = None
        self._document_pipeline = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_document_pipeline() -> DocumentPipeline:
    """
    Get document pipeline instance.

    Returns:
        DocumentPipeline: Cached pipeline bound to the configured vector store

    Raises:
        ConfigurationError: When the vector store or embeddings are not configured
    """
    return get_service_cache().document_pipeline
