"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from study_assistant.configs.embeddings import EMBEDDING_BATCH_SIZE, EmbeddingSettings
from study_assistant.configs.pipeline import DocumentPipelineSettings
from study_assistant.configs.settings import Settings, get_settings
from study_assistant.configs.vector_store import PineconeSettings, VectorStoreSettings

__all__ = [
    "EMBEDDING_BATCH_SIZE",
    "DocumentPipelineSettings",
    "EmbeddingSettings",
    "PineconeSettings",
    "Settings",
    "VectorStoreSettings",
    "get_settings",
]
