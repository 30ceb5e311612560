"""
Document domain models and schemas.

Request/response schemas for ingest, delete, and context operations.
Field names on the wire are camelCase to match the web client.

Dependencies: pydantic
System role: Document API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class IngestDocumentRequest(_CamelModel):
    """Request schema for ingesting extracted document text."""

    file_name: str | None = Field(default=None, alias="fileName", description="Original upload name")
    text: str = Field(default="", description="Text extracted from the uploaded file")
    replace_existing: bool = Field(
        default=False,
        alias="replaceExisting",
        description="Remove previously stored chunks of this document first",
    )


class IngestDocumentResponse(_CamelModel):
    """Response schema for a successful ingestion."""

    success: bool = True
    file_name: str = Field(alias="fileName")
    chunk_count: int = Field(alias="chunkCount")


class DeleteDocumentRequest(_CamelModel):
    """Request schema for removing a document from the index."""

    file_name: str | None = Field(default=None, alias="fileName")


class DeleteDocumentResponse(_CamelModel):
    """Response schema for a successful deletion."""

    success: bool = True


class ContextRequest(_CamelModel):
    """Request schema for retrieving context for a question."""

    query: str = Field(description="User question")


class ContextResponse(_CamelModel):
    """Context block for the generation model."""

    context: str = Field(description="Assembled context, empty when nothing matched")
    system_prompt: str = Field(alias="systemPrompt", description="System prompt wrapping the context")
