"""
Embedding provider configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Embedding model configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Provider-imposed ceiling on items per embedding request
EMBEDDING_BATCH_SIZE = 100


class EmbeddingSettings(BaseSettings):
    """Google Generative AI embedding configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID; the Pinecone index dimension must match its output size",
    )
    google_api_key: str | None = Field(
        default=None,
        description="Google API key (falls back to GOOGLE_API_KEY when unset)",
    )
    max_concurrency: int = Field(
        default=1,
        description="Embedding batches in flight at once (1 = sequential)",
        ge=1,
    )
