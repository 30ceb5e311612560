"""
Configuration settings for the document ingestion pipeline.

Dependencies: pydantic, pydantic_settings
System role: Centralized pipeline configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentPipelineSettings(BaseSettings):
    """Settings for document ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="DOC_PIPELINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    chunk_size: int = Field(
        default=1000,
        description="Maximum chunk size in characters",
        ge=1,
    )
    chunking_strategy: str = Field(
        default="fixed",
        description="'fixed' for plain character windows, 'boundary' for separator-aware splitting",
    )
