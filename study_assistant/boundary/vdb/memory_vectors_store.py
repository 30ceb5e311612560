"""
In-memory vector store for local development and tests.

Provides the same interface as PineconeVectorsStore backed by process
memory. Similarity is cosine similarity computed with numpy.

Dependencies: numpy, study_assistant.boundary.vdb.vector_schemas
System role: Local vector store for development RAG
"""

import logging
import threading

import numpy as np

from study_assistant.boundary.vdb.vector_schemas import QueryMatch, VectorRecord
from study_assistant.core.exceptions import ConfigurationError, VectorStoreError

logger = logging.getLogger(__name__)


class InMemoryVectorsStore:
    """
    Dictionary-backed vector store keyed by namespace then record id.

    The lock only protects the dictionaries themselves. It does not
    serialize ingestion against deletion for a document.
    """

    def __init__(self, namespace: str = "ns1") -> None:
        if not namespace:
            raise ConfigurationError("Vector store namespace cannot be empty", setting="namespace")
        self.namespace = namespace
        self._namespaces: dict[str, dict[str, VectorRecord]] = {}
        self._lock = threading.Lock()

    def upsert(self, records: list[VectorRecord], namespace: str | None = None) -> None:
        """Write or overwrite records by id."""
        if not records:
            return
        ns = namespace or self.namespace
        with self._lock:
            bucket = self._namespaces.setdefault(ns, {})
            for record in records:
                bucket[record.id] = record
        logger.debug(
            f"{__name__}:upsert - Upserted {len(records)} vectors",
            extra={"namespace": ns, "vector_count": len(records)},
        )

    def query(
        self,
        vector: list[float],
        top_k: int = 5,
        namespace: str | None = None,
    ) -> list[QueryMatch]:
        """
        Return the top_k records closest to vector by cosine similarity.

        Raises:
            VectorStoreError: When the query vector dimension does not match
        """
        ns = namespace or self.namespace
        with self._lock:
            records = list(self._namespaces.get(ns, {}).values())
        if not records or top_k <= 0:
            return []

        matrix = np.asarray([record.values for record in records], dtype=float)
        query = np.asarray(vector, dtype=float)
        if matrix.shape[1] != query.shape[0]:
            raise VectorStoreError(
                message="Query vector dimension does not match stored vectors",
                operation="query",
                details={"expected": int(matrix.shape[1]), "received": int(query.shape[0])},
            )

        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        scores = np.divide(
            matrix @ query,
            norms,
            out=np.zeros(len(records)),
            where=norms != 0,
        )
        # Stable sort keeps insertion order among equal scores
        order = np.argsort(-scores, kind="stable")[:top_k]

        return [
            QueryMatch(
                id=records[i].id,
                metadata=records[i].metadata,
                score=float(scores[i]),
            )
            for i in order
        ]

    def delete(self, document_name: str, namespace: str | None = None) -> None:
        """Delete every record whose document name matches."""
        ns = namespace or self.namespace
        with self._lock:
            bucket = self._namespaces.get(ns, {})
            doomed = [
                record_id
                for record_id, record in bucket.items()
                if record.metadata.document_name == document_name
            ]
            for record_id in doomed:
                del bucket[record_id]
        logger.info(
            "Deleted document vectors",
            extra={"document_name": document_name, "namespace": ns, "chunk_count": len(doomed)},
        )

    def count(self, namespace: str | None = None) -> int:
        """Number of records stored in a namespace."""
        with self._lock:
            return len(self._namespaces.get(namespace or self.namespace, {}))

    def clear(self) -> None:
        """Drop every namespace."""
        with self._lock:
            self._namespaces.clear()
