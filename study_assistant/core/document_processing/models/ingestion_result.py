"""
Ingestion result model for document processing.

Represents the outcome of one ingest call.

Dependencies: pydantic
System role: Return type for DocumentPipeline.ingest()
"""

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Result of document ingestion."""

    document_name: str = Field(description="Document name used for record ids and deletion")
    namespace: str = Field(description="Namespace the records were written to")
    chunk_count: int = Field(description="Number of chunks written by this call")
    batch_count: int = Field(description="Number of embedding batches (and upserts) issued")
    next_ordinal: int = Field(description="Ordinal to resume from if the document grows")
    processing_time_ms: float = Field(description="Total processing time in milliseconds")
