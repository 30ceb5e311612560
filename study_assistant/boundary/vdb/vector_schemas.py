"""
Vector database schemas.

Pydantic models for vector operations (records, metadata, query matches).
Used for type-safe vector store interactions.

Metadata is persisted under the keys ``text`` and ``fileName``; the
``fileName`` key is the sole filter key used for per-document deletion.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, ConfigDict, Field

# Metadata key holding the document name in the persisted record
DOCUMENT_NAME_KEY = "fileName"


class VectorMetadata(BaseModel):
    """Metadata attached to each vector."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str = Field(description="Verbatim chunk text")
    document_name: str = Field(
        alias=DOCUMENT_NAME_KEY,
        description="Original upload name, used as the deletion filter key",
    )

    def to_store(self) -> dict[str, str]:
        """Serialize to the key layout persisted in the vector store."""
        return self.model_dump(by_alias=True)


class VectorRecord(BaseModel):
    """Unit persisted in and retrieved from the vector store."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Record identifier, '<document_name>-<ordinal>'")
    values: list[float] = Field(description="Embedding vector")
    metadata: VectorMetadata = Field(description="Chunk text and document name")

    def to_store(self) -> dict:
        """Serialize to the upsert payload layout."""
        return {
            "id": self.id,
            "values": self.values,
            "metadata": self.metadata.to_store(),
        }


class QueryMatch(BaseModel):
    """Single result from a similarity query."""

    id: str = Field(default="", description="Record identifier")
    metadata: VectorMetadata = Field(description="Matched chunk metadata")
    score: float = Field(description="Similarity score, higher is closer")
