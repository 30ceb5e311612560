"""API request/response schemas."""

from study_assistant.models.document import (
    ContextRequest,
    ContextResponse,
    DeleteDocumentRequest,
    DeleteDocumentResponse,
    IngestDocumentRequest,
    IngestDocumentResponse,
)

__all__ = [
    "ContextRequest",
    "ContextResponse",
    "DeleteDocumentRequest",
    "DeleteDocumentResponse",
    "IngestDocumentRequest",
    "IngestDocumentResponse",
]
