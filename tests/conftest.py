"""
Shared test fixtures and configuration for entire test suite.

Provides: recording fake embeddings, in-memory vector store, pipeline
wired to both, and a FastAPI test client using that pipeline.
Dependencies: pytest, langchain_core, fastapi
System role: Test infrastructure and fixture management
"""

import string
import threading

import pytest
from fastapi.testclient import TestClient
from langchain_core.embeddings import Embeddings

from study_assistant.api.deps import get_document_pipeline
from study_assistant.api.main import create_app
from study_assistant.boundary.vdb.memory_vectors_store import InMemoryVectorsStore
from study_assistant.configs import get_settings
from study_assistant.core.document_processing import DocumentPipeline
from study_assistant.core.document_processing.tasks import EmbeddingTask


class RecordingEmbeddings(Embeddings):
    """
    Deterministic letter-frequency embeddings that record every call.

    Texts sharing letters end up close together, which is enough to make
    similarity ordering predictable in tests.
    """

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.document_calls: list[list[str]] = []
        self.query_calls: list[str] = []
        self.fail_on_call = fail_on_call
        self._lock = threading.Lock()

    @staticmethod
    def vectorize(text: str) -> list[float]:
        lowered = text.lower()
        return [float(lowered.count(letter)) for letter in string.ascii_lowercase] + [1.0]

    def embed_documents(self, texts: list[str]) -> list[list[float]]:
        with self._lock:
            self.document_calls.append(list(texts))
            call_number = len(self.document_calls)
        if self.fail_on_call is not None and call_number == self.fail_on_call:
            raise RuntimeError("429 Resource has been exhausted")
        return [self.vectorize(text) for text in texts]

    def embed_query(self, text: str) -> list[float]:
        self.query_calls.append(text)
        return self.vectorize(text)

    @property
    def batch_sizes(self) -> list[int]:
        return [len(call) for call in self.document_calls]


class RecordingStore(InMemoryVectorsStore):
    """In-memory store that also records upsert batch sizes."""

    def __init__(self, namespace: str = "ns1", fail_on_upsert: int | None = None) -> None:
        super().__init__(namespace=namespace)
        self.upserts: list[list[str]] = []
        self.fail_on_upsert = fail_on_upsert

    def upsert(self, records, namespace=None):
        self.upserts.append([record.id for record in records])
        if self.fail_on_upsert is not None and len(self.upserts) == self.fail_on_upsert:
            from study_assistant.core.exceptions import VectorStoreError

            raise VectorStoreError("Pinecone unavailable", operation="upsert")
        super().upsert(records, namespace=namespace)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings from the environment for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def embeddings() -> RecordingEmbeddings:
    return RecordingEmbeddings()


@pytest.fixture
def vector_store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def pipeline(embeddings: RecordingEmbeddings, vector_store: RecordingStore) -> DocumentPipeline:
    return DocumentPipeline(
        vector_store=vector_store,
        embedding_task=EmbeddingTask(embeddings),
    )


@pytest.fixture
def client(pipeline: DocumentPipeline):
    """Test client whose routes use the in-memory pipeline."""
    app = create_app()
    app.dependency_overrides[get_document_pipeline] = lambda: pipeline
    yield TestClient(app)
    app.dependency_overrides.clear()
