"""
Pinecone vector store for production retrieval.

Wraps a Pinecone index with upsert, top-k similarity query, and
filtered delete, all scoped to a single namespace. Transient Pinecone
failures (HTTP 429, 5xx, dropped connections) are retried with
exponential backoff before surfacing as VectorStoreError; any other
error surfaces after the first attempt.

Dependencies: pinecone, tenacity, study_assistant.boundary.vdb.vector_schemas
System role: Production vector store (Pinecone)
"""

import logging
from typing import Any, Callable

from pinecone import Pinecone
from pinecone.exceptions import NotFoundException, PineconeException
from tenacity import (
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from study_assistant.boundary.vdb.vector_schemas import (
    DOCUMENT_NAME_KEY,
    QueryMatch,
    VectorMetadata,
    VectorRecord,
)
from study_assistant.core.exceptions import ConfigurationError, VectorStoreError

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "ns1"


def is_transient_error(exc: BaseException) -> bool:
    """True for rate limiting, server-side failures, and dropped connections."""
    if isinstance(exc, (ConnectionError, TimeoutError)):
        return True
    if not isinstance(exc, PineconeException):
        return False

    status = getattr(exc, "status", None) or getattr(exc, "status_code", None)
    try:
        status = int(status)
    except (TypeError, ValueError):
        return False
    return status == 429 or status >= 500


class PineconeVectorsStore:
    """
    Pinecone vector store for production retrieval.

    Every operation targets one namespace, defaulting to the store's
    configured namespace and overridable per call.
    """

    def __init__(
        self,
        index_name: str | None,
        api_key: str | None = None,
        namespace: str = DEFAULT_NAMESPACE,
        max_attempts: int = 5,
        client: Pinecone | None = None,
    ) -> None:
        """
        Initialize Pinecone store. No network I/O happens here.

        Args:
            index_name: Pinecone index name
            api_key: Pinecone API key (falls back to PINECONE_API_KEY)
            namespace: Default namespace for every operation
            max_attempts: Attempts per call before giving up
            client: Pre-built Pinecone client

        Raises:
            ConfigurationError: When index_name or namespace is empty
        """
        if not index_name:
            raise ConfigurationError(
                "PINECONE_INDEX is missing from the environment",
                setting="PINECONE_INDEX",
            )
        if not namespace:
            raise ConfigurationError("Vector store namespace cannot be empty", setting="namespace")

        self.index_name = index_name
        self.namespace = namespace
        self._max_attempts = max_attempts
        self._client = client if client is not None else Pinecone(api_key=api_key)
        self._index = None

    def _get_index(self):
        """Get or create the Pinecone index handle."""
        if self._index is None:
            self._index = self._client.Index(self.index_name)
        return self._index

    def _call_with_retry(self, operation: str, func: Callable[..., Any], **kwargs: Any) -> Any:
        """Run a Pinecone call, retrying transient failures."""
        retrying = Retrying(
            retry=retry_if_exception(is_transient_error),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential_jitter(initial=1, max=30, jitter=5),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:{operation} - Retry {retry_state.attempt_number}/{self._max_attempts}"
            ),
            reraise=True,
        )
        return retrying(func, **kwargs)

    def upsert(self, records: list[VectorRecord], namespace: str | None = None) -> None:
        """
        Write or overwrite records by id.

        Args:
            records: Records to write (one embedding batch)
            namespace: Target namespace (store default if None)

        Raises:
            VectorStoreError: If the upsert fails after retries
        """
        if not records:
            return

        ns = namespace or self.namespace
        try:
            self._call_with_retry(
                "upsert",
                self._get_index().upsert,
                vectors=[record.to_store() for record in records],
                namespace=ns,
            )
        except (PineconeException, ConnectionError, TimeoutError) as e:
            logger.error(f"{__name__}:upsert - {type(e).__name__}: {e}")
            raise VectorStoreError(
                message="Failed to upsert vectors to Pinecone",
                operation="upsert",
                details={"error": str(e), "vector_count": len(records), "namespace": ns},
            ) from e

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
        Query vectors by similarity.

        Args:
            vector: Query embedding
            top_k: Maximum number of matches
            namespace: Target namespace (store default if None)

        Returns:
            list[QueryMatch]: Matches ordered by descending similarity

        Raises:
            VectorStoreError: If the query fails after retries
        """
        ns = namespace or self.namespace
        try:
            response = self._call_with_retry(
                "query",
                self._get_index().query,
                vector=vector,
                top_k=top_k,
                namespace=ns,
                include_metadata=True,
            )
        except NotFoundException:
            # Namespace has never been written to
            return []
        except (PineconeException, ConnectionError, TimeoutError) as e:
            logger.error(f"{__name__}:query - {type(e).__name__}: {e}")
            raise VectorStoreError(
                message="Failed to query vectors from Pinecone",
                operation="query",
                details={"error": str(e), "top_k": top_k, "namespace": ns},
            ) from e

        matches = []
        for match in response.matches or []:
            metadata = match.metadata or {}
            matches.append(
                QueryMatch(
                    id=match.id,
                    metadata=VectorMetadata(
                        text=metadata.get("text", ""),
                        document_name=metadata.get(DOCUMENT_NAME_KEY, ""),
                    ),
                    score=float(match.score or 0.0),
                )
            )
        return matches[:top_k]

    def delete(self, document_name: str, namespace: str | None = None) -> None:
        """
        Delete every record whose document name matches.

        Deleting a name with no records is a no-op.

        Args:
            document_name: Value of the fileName metadata key to match
            namespace: Target namespace (store default if None)

        Raises:
            VectorStoreError: If the delete fails after retries
        """
        ns = namespace or self.namespace
        try:
            self._call_with_retry(
                "delete",
                self._get_index().delete,
                filter={DOCUMENT_NAME_KEY: {"$eq": document_name}},
                namespace=ns,
            )
        except NotFoundException:
            logger.info(
                f"{__name__}:delete - Namespace empty, nothing to delete",
                extra={"document_name": document_name, "namespace": ns},
            )
            return
        except (PineconeException, ConnectionError, TimeoutError) as e:
            logger.error(f"{__name__}:delete - {type(e).__name__}: {e}")
            raise VectorStoreError(
                message="Failed to delete vectors from Pinecone",
                operation="delete",
                details={"error": str(e), "document_name": document_name, "namespace": ns},
            ) from e

        logger.info(
            "Deleted document vectors",
            extra={"document_name": document_name, "namespace": ns},
        )
