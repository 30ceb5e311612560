"""
Vector store upload task.

Turns one embedded batch into VectorRecords and upserts them. Record ids
follow the '<document_name>-<ordinal>' scheme, with ordinals running across
batch boundaries.

Dependencies: study_assistant.boundary.vdb
System role: Final stage of document ingestion pipeline
"""

import logging
from typing import Sequence

from study_assistant.boundary.vdb.vector_schemas import VectorMetadata, VectorRecord

from ..identifiers import make_id

logger = logging.getLogger(__name__)


class VectorStoreTask:
    """Upload embedded batches to the vector store."""

    def __init__(self, vector_store) -> None:
        """
        Initialize upload task.

        Args:
            vector_store: Store exposing upsert(records, namespace)
        """
        self._vector_store = vector_store

    @staticmethod
    def build_records(
        document_name: str,
        offset: int,
        texts: Sequence[str],
        vectors: Sequence[list[float]],
    ) -> list[VectorRecord]:
        """
        Pair texts with their vectors as records.

        Args:
            document_name: Document the batch belongs to
            offset: Global ordinal of the first text in the batch
            texts: Chunk texts in order
            vectors: Embeddings aligned with texts

        Returns:
            list[VectorRecord]: Records with ids offset..offset+len(texts)-1
        """
        if len(texts) != len(vectors):
            raise ValueError("texts and vectors must have the same length")

        return [
            VectorRecord(
                id=make_id(document_name, offset + position),
                values=vector,
                metadata=VectorMetadata(text=text, document_name=document_name),
            )
            for position, (text, vector) in enumerate(zip(texts, vectors))
        ]

    def upload(
        self,
        document_name: str,
        offset: int,
        texts: Sequence[str],
        vectors: Sequence[list[float]],
        namespace: str,
    ) -> int:
        """
        Build records for one batch and upsert them in one call.

        Returns:
            int: Number of records written

        Raises:
            VectorStoreError: When the upsert fails
        """
        records = self.build_records(document_name, offset, texts, vectors)
        self._vector_store.upsert(records, namespace=namespace)
        return len(records)
