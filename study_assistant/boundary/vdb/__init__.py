"""
Vector database boundary layer.

Provides vector store clients for storage and retrieval operations.
- PineconeVectorsStore: Production Pinecone client
- InMemoryVectorsStore: Process-local store for development and tests

Dependencies: pinecone, numpy
System role: Vector store adapter for RAG retrieval
"""

from study_assistant.boundary.vdb.vector_schemas import (
    DOCUMENT_NAME_KEY,
    QueryMatch,
    VectorMetadata,
    VectorRecord,
)

__all__ = [
    "DOCUMENT_NAME_KEY",
    "QueryMatch",
    "VectorMetadata",
    "VectorRecord",
]
