"""
Document processing pipeline for ingestion and retrieval.

Chunking, batched embedding, vector store writes, similarity retrieval,
and per-document deletion.

Dependencies: langchain_text_splitters, langchain_core, langchain_google_genai, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import DocumentPipeline
from .identifiers import make_id, validate_document_name
from .models import Chunk, IngestionResult

__all__ = [
    "DocumentPipeline",
    "Chunk",
    "IngestionResult",
    "make_id",
    "validate_document_name",
]
