"""
Embedding generation task.

Converts ordered texts into embedding vectors while respecting the
provider's per-request item limit. Input is split into consecutive groups
of at most batch_size items and each group is one provider call. Output
order always matches input order, also when batches run concurrently.

Dependencies: langchain_core
System role: Second stage of document ingestion pipeline
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterator, Sequence

from langchain_core.embeddings import Embeddings

from study_assistant.configs.embeddings import EMBEDDING_BATCH_SIZE
from study_assistant.core.exceptions import EmbeddingProviderError

logger = logging.getLogger(__name__)


class EmbeddingTask:
    """Batch texts through a LangChain embeddings client."""

    def __init__(
        self,
        embeddings: Embeddings,
        batch_size: int = EMBEDDING_BATCH_SIZE,
        max_concurrency: int = 1,
    ) -> None:
        """
        Initialize embedding task.

        Args:
            embeddings: Provider client (embed_documents / embed_query)
            batch_size: Items per provider call, capped at the provider limit
            max_concurrency: Batches in flight at once (1 = sequential)

        Raises:
            ValueError: When batch_size or max_concurrency is out of range
        """
        if not 1 <= batch_size <= EMBEDDING_BATCH_SIZE:
            raise ValueError(f"batch_size must be between 1 and {EMBEDDING_BATCH_SIZE}")
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")

        self._embeddings = embeddings
        self.batch_size = batch_size
        self.max_concurrency = max_concurrency

    def iter_batches(self, texts: Sequence[str]) -> Iterator[tuple[int, list[str]]]:
        """Yield (offset, batch) pairs of consecutive texts."""
        for offset in range(0, len(texts), self.batch_size):
            yield offset, list(texts[offset:offset + self.batch_size])

    def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """
        Embed texts, one provider call per batch.

        Args:
            texts: Ordered texts

        Returns:
            list[list[float]]: One vector per text, same order as input

        Raises:
            EmbeddingProviderError: When any batch fails
        """
        batches = [batch for _, batch in self.iter_batches(texts)]
        vectors: list[list[float]] = []
        for batch_vectors in self.embed_batches(batches):
            vectors.extend(batch_vectors)
        return vectors

    def embed_one(self, text: str) -> list[float]:
        """
        Embed a single query string.

        Raises:
            EmbeddingProviderError: When the provider call fails
        """
        try:
            return self._embeddings.embed_query(text)
        except Exception as e:
            raise EmbeddingProviderError(
                f"Failed to generate query embedding: {e}",
                details={"error_type": type(e).__name__},
            ) from e

    def embed_batches(self, batches: Sequence[list[str]]) -> list[list[list[float]]]:
        """
        Embed pre-formed batches.

        With max_concurrency > 1 batches are submitted to a thread pool and
        results are placed by batch position, not completion order. The
        first failing batch (in input order) is raised.

        Args:
            batches: Batches of at most batch_size texts

        Returns:
            list[list[list[float]]]: Vectors per batch, same order as input

        Raises:
            EmbeddingProviderError: When any batch fails
        """
        if self.max_concurrency == 1 or len(batches) <= 1:
            return [self._embed_batch(batch) for batch in batches]

        workers = min(self.max_concurrency, len(batches))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self._embed_batch, batch) for batch in batches]
            return [future.result() for future in futures]

    def _embed_batch(self, batch: list[str]) -> list[list[float]]:
        """Issue one provider call for one batch."""
        if len(batch) > self.batch_size:
            raise ValueError(f"Batch of {len(batch)} exceeds batch_size {self.batch_size}")

        try:
            vectors = self._embeddings.embed_documents(batch)
        except Exception as e:
            raise EmbeddingProviderError(
                f"Failed to generate embeddings: {e}",
                details={"batch_size": len(batch), "error_type": type(e).__name__},
            ) from e

        if len(vectors) != len(batch):
            raise EmbeddingProviderError(
                "Embedding provider returned a different number of vectors than texts",
                details={"expected": len(batch), "received": len(vectors)},
            )

        logger.debug(f"{__name__}:_embed_batch - Embedded {len(batch)} texts")
        return vectors
