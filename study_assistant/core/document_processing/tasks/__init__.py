"""
Task modules for document processing pipeline.

Exports: ChunkingTask, EmbeddingTask, VectorStoreTask, normalize_text
"""

from .chunking_task import BoundaryAwareChunker, ChunkingTask, FixedWindowChunker, normalize_text
from .embedding_task import EmbeddingTask
from .vector_store_task import VectorStoreTask

__all__ = [
    "BoundaryAwareChunker",
    "ChunkingTask",
    "EmbeddingTask",
    "FixedWindowChunker",
    "VectorStoreTask",
    "normalize_text",
]
