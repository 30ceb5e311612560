"""
Document pipeline orchestrator.

Coordinates chunking, batched embedding, and vector store writes for
ingestion; query embedding, top-k search, and context assembly for
retrieval; and filtered deletion for forgetting a document.

Ingestion is not transactional across batches. Each batch is embedded and
upserted before the next starts, so when a batch fails every earlier batch
is already searchable. The raised error carries
``details["committed_chunks"]``, the ordinal to pass back as
``start_ordinal`` to resume without re-embedding committed batches.

No locking is done around a document name: callers that ingest and forget
the same document concurrently must serialize those calls themselves.

Dependencies: All task modules, study_assistant.configs, study_assistant.boundary.vdb
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from typing import Sequence

from study_assistant.boundary.vdb.vector_schemas import QueryMatch
from study_assistant.configs import Settings, get_settings
from study_assistant.core.context_builder import ContextAssembler
from study_assistant.core.exceptions import (
    StudyAssistantException,
    UnsupportedInputError,
    ValidationError,
    VectorStoreError,
)
from study_assistant.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

from .models import IngestionResult
from .tasks import ChunkingTask, EmbeddingTask, VectorStoreTask

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate ingest -> retrieve -> forget against one vector store."""

    def __init__(
        self,
        vector_store,
        embedding_task: EmbeddingTask,
        chunking_task: ChunkingTask | None = None,
        context_assembler: ContextAssembler | None = None,
        namespace: str | None = None,
        top_k: int = 5,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            vector_store: Store exposing upsert / query / delete
            embedding_task: Batched embedding generator
            chunking_task: Text chunker (1000-character windows if None)
            context_assembler: Match formatter (default formatter if None)
            namespace: Default namespace (the store's namespace if None)
            top_k: Matches fetched per retrieval
        """
        self._vector_store = vector_store
        self._embedding_task = embedding_task
        self._chunking_task = chunking_task or ChunkingTask()
        self._vector_store_task = VectorStoreTask(vector_store)
        self._context_assembler = context_assembler or ContextAssembler()
        self.namespace = namespace or vector_store.namespace
        self.top_k = top_k

    @classmethod
    def from_settings(cls, settings: Settings | None = None, vector_store=None) -> "DocumentPipeline":
        """
        Build a pipeline from application settings.

        Raises:
            ConfigurationError: When the vector store or embeddings are not configured
        """
        from study_assistant.boundary.vdb.vector_store_factory import get_vector_store
        from .embeddings_wrapper import create_embeddings

        settings = settings or get_settings()
        store = vector_store if vector_store is not None else get_vector_store(settings)
        return cls(
            vector_store=store,
            embedding_task=EmbeddingTask(
                embeddings=create_embeddings(settings.embeddings),
                max_concurrency=settings.embeddings.max_concurrency,
            ),
            chunking_task=ChunkingTask(
                chunk_size=settings.pipeline.chunk_size,
                strategy=settings.pipeline.chunking_strategy,
            ),
            namespace=settings.vector_store.namespace,
            top_k=settings.vector_store.top_k,
        )

    def ingest(
        self,
        document_name: str,
        chunks: Sequence[str],
        namespace: str | None = None,
        start_ordinal: int = 0,
        replace_existing: bool = False,
        rollback_on_failure: bool = False,
    ) -> IngestionResult:
        """
        Embed and store a document's chunks batch by batch.

        Args:
            document_name: Name used for record ids and the deletion filter
            chunks: Chunk texts in document order
            namespace: Target namespace (pipeline default if None)
            start_ordinal: First ordinal to write; earlier chunks are skipped
            replace_existing: Forget the document before writing
            rollback_on_failure: Forget the document if any batch fails

        Returns:
            IngestionResult: Counts for this call

        Raises:
            ValidationError: When document_name is empty, start_ordinal is negative,
                or replace_existing is combined with start_ordinal > 0
            EmbeddingProviderError: When an embedding batch fails
            VectorStoreError: When an upsert fails
        """
        if not document_name:
            raise ValidationError("Document name is required", field="document_name")
        if start_ordinal < 0:
            raise ValidationError("start_ordinal cannot be negative", field="start_ordinal")
        if replace_existing and start_ordinal > 0:
            # A resume keeps the committed prefix, so it cannot start with a forget
            raise ValidationError(
                "replace_existing cannot be combined with a resume from start_ordinal",
                field="replace_existing",
            )

        ns = namespace or self.namespace
        start_time = time.perf_counter()

        if replace_existing:
            self.forget(document_name, namespace=ns)

        pending = list(chunks[start_ordinal:])
        batches = [
            (start_ordinal + offset, batch)
            for offset, batch in self._embedding_task.iter_batches(pending)
        ]
        wave_size = self._embedding_task.max_concurrency
        committed = start_ordinal
        batch_number = 0

        try:
            for wave_start in range(0, len(batches), wave_size):
                wave = batches[wave_start:wave_start + wave_size]
                wave_vectors = self._embedding_task.embed_batches([texts for _, texts in wave])

                for (offset, texts), vectors in zip(wave, wave_vectors):
                    self._vector_store_task.upload(document_name, offset, texts, vectors, namespace=ns)
                    committed = offset + len(texts)
                    batch_number += 1
                    log_with_context(
                        logger,
                        logging.INFO,
                        f"Processed batch {batch_number} for {document_name}",
                        document_name=document_name,
                        namespace=ns,
                        batch_size=len(texts),
                        committed_chunks=committed,
                    )
        except StudyAssistantException as e:
            e.details["committed_chunks"] = committed
            e.details.setdefault("document_name", document_name)
            log_exception_with_context(
                logger,
                "Ingestion failed; earlier batches remain stored",
                e,
                document_name=document_name,
                namespace=ns,
                committed_chunks=committed,
            )
            if rollback_on_failure:
                self._rollback(document_name, ns)
            raise

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        return IngestionResult(
            document_name=document_name,
            namespace=ns,
            chunk_count=committed - start_ordinal,
            batch_count=batch_number,
            next_ordinal=committed,
            processing_time_ms=elapsed_ms,
        )

    def ingest_text(
        self,
        document_name: str,
        raw_text: str,
        namespace: str | None = None,
        replace_existing: bool = False,
    ) -> IngestionResult:
        """
        Normalize, chunk, and ingest extracted document text.

        Text with nothing left after whitespace normalization is a
        successful no-op.

        Args:
            document_name: Original upload name
            raw_text: Text from the format-specific extractor
            namespace: Target namespace (pipeline default if None)
            replace_existing: Forget the document before writing

        Returns:
            IngestionResult: Counts for this call
        """
        ns = namespace or self.namespace
        try:
            chunks = self._chunking_task.chunk_document(document_name, raw_text)
        except UnsupportedInputError as e:
            logger.warning(
                f"{__name__}:ingest_text - Nothing to index: {e.message}",
                extra={"document_name": document_name, "namespace": ns},
            )
            return IngestionResult(
                document_name=document_name,
                namespace=ns,
                chunk_count=0,
                batch_count=0,
                next_ordinal=0,
                processing_time_ms=0.0,
            )

        return self.ingest(
            document_name,
            [chunk.text for chunk in chunks],
            namespace=ns,
            replace_existing=replace_existing,
        )

    def retrieve_matches(self, query: str, namespace: str | None = None) -> list[QueryMatch]:
        """
        Embed a query and fetch the closest stored chunks.

        Returns:
            list[QueryMatch]: At most top_k matches, most similar first

        Raises:
            EmbeddingProviderError: When the query embedding fails
            VectorStoreError: When the similarity query fails
        """
        ns = namespace or self.namespace
        vector = self._embedding_task.embed_one(query)
        matches = self._vector_store.query(vector, top_k=self.top_k, namespace=ns)
        logger.info(
            f"{__name__}:retrieve_matches - Found {len(matches)} results",
            extra={"namespace": ns, "top_k": self.top_k},
        )
        return matches[:self.top_k]

    def retrieve(self, query: str, namespace: str | None = None) -> str:
        """
        Build the context string for a query.

        Returns:
            str: Assembled context, empty when nothing is indexed
        """
        return self._context_assembler.assemble(self.retrieve_matches(query, namespace=namespace))

    def forget(self, document_name: str, namespace: str | None = None) -> None:
        """
        Remove every stored chunk of a document.

        Idempotent: forgetting an unknown document is a no-op.

        Raises:
            ValidationError: When document_name is empty
            VectorStoreError: When the delete fails
        """
        if not document_name:
            raise ValidationError("File name is required", field="fileName")

        ns = namespace or self.namespace
        self._vector_store.delete(document_name, namespace=ns)
        logger.info(
            f"{__name__}:forget - Removed document",
            extra={"document_name": document_name, "namespace": ns},
        )

    def _rollback(self, document_name: str, namespace: str) -> None:
        """Compensating delete after a failed ingest."""
        try:
            self.forget(document_name, namespace=namespace)
        except VectorStoreError as rollback_error:
            log_exception_with_context(
                logger,
                "Rollback delete failed; partial records may remain",
                rollback_error,
                document_name=document_name,
                namespace=namespace,
            )
