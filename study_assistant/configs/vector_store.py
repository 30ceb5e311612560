"""
Vector store configuration settings.

Manages Pinecone connection settings and the shared namespace used for
every record. The in-memory store needs no connection settings.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Vector store configuration (in-memory for dev, Pinecone for prod)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="pinecone",
        description="Vector store type: 'memory' for local dev, 'pinecone' for production",
    )
    namespace: str = Field(
        default="ns1",
        description="Logical partition shared by every document",
    )
    top_k: int = Field(default=5, description="Number of top results to retrieve", ge=1)
    max_attempts: int = Field(
        default=5,
        description="Attempts per vector store call before giving up",
        ge=1,
    )


class PineconeSettings(BaseSettings):
    """Pinecone credentials and index selection."""

    model_config = SettingsConfigDict(
        env_prefix="PINECONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Pinecone API key")
    index: str | None = Field(default=None, description="Pinecone index name")
