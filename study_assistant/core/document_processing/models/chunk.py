"""
Chunk domain model for document processing pipeline.

Represents one fixed-size slice of a document's normalized text and its
position in the document's chunk sequence.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """Ordered text unit produced by the chunker."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Chunk text content")
    ordinal: int = Field(ge=0, description="Zero-based position in the document's chunk sequence")
