"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components.
All business rules and domain-specific logic reside here.
"""

from study_assistant.core.exceptions import (
    ConfigurationError,
    DocumentProcessingError,
    EmbeddingProviderError,
    StudyAssistantException,
    UnsupportedInputError,
    ValidationError,
    VectorStoreError,
)

__all__ = [
    "StudyAssistantException",
    "ConfigurationError",
    "ValidationError",
    "DocumentProcessingError",
    "UnsupportedInputError",
    "EmbeddingProviderError",
    "VectorStoreError",
]
