"""
Tests for vector store adapters.

In-memory store is exercised directly; the Pinecone adapter runs against
a mocked Pinecone client so no network access is needed.

System role: Verification of vector store boundary layer
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from pinecone.exceptions import NotFoundException, PineconeException

from study_assistant.boundary.vdb import QueryMatch, VectorMetadata, VectorRecord
from study_assistant.boundary.vdb.memory_vectors_store import InMemoryVectorsStore
from study_assistant.boundary.vdb.pinecone_vectors_store import PineconeVectorsStore, is_transient_error
from study_assistant.boundary.vdb.vector_store_factory import get_vector_store
from study_assistant.configs import get_settings
from study_assistant.core.exceptions import ConfigurationError, VectorStoreError


class StatusError(PineconeException):
    """Pinecone API error carrying an HTTP status."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = status


def make_record(document_name: str, ordinal: int, values: list[float], text: str = "") -> VectorRecord:
    return VectorRecord(
        id=f"{document_name}-{ordinal}",
        values=values,
        metadata=VectorMetadata(text=text or f"text {ordinal}", document_name=document_name),
    )


# ============================================================================
# Schema Tests
# ============================================================================


class TestVectorSchemas:
    """Test record serialization layout."""

    def test_record_store_layout(self) -> None:
        record = make_record("notes.pdf", 0, [0.1, 0.2], text="Krebs cycle")

        assert record.to_store() == {
            "id": "notes.pdf-0",
            "values": [0.1, 0.2],
            "metadata": {"text": "Krebs cycle", "fileName": "notes.pdf"},
        }

    def test_metadata_accepts_store_key(self) -> None:
        metadata = VectorMetadata.model_validate({"text": "x", "fileName": "a.pdf"})

        assert metadata.document_name == "a.pdf"


# ============================================================================
# In-memory Store Tests
# ============================================================================


class TestInMemoryVectorsStore:
    """Test upsert, query, and filtered delete."""

    @pytest.fixture
    def store(self) -> InMemoryVectorsStore:
        return InMemoryVectorsStore()

    def test_query_empty_store(self, store) -> None:
        assert store.query([1.0, 0.0], top_k=5) == []

    def test_query_orders_by_similarity(self, store) -> None:
        store.upsert([
            make_record("a.pdf", 0, [1.0, 0.0]),
            make_record("a.pdf", 1, [0.0, 1.0]),
            make_record("b.pdf", 0, [0.7, 0.7]),
        ])

        matches = store.query([1.0, 0.1], top_k=2)

        assert [match.id for match in matches] == ["a.pdf-0", "b.pdf-0"]
        assert matches[0].score > matches[1].score
        assert isinstance(matches[0], QueryMatch)

    def test_upsert_overwrites_by_id(self, store) -> None:
        store.upsert([make_record("a.pdf", 0, [1.0, 0.0], text="old")])
        store.upsert([make_record("a.pdf", 0, [1.0, 0.0], text="new")])

        matches = store.query([1.0, 0.0])

        assert len(matches) == 1
        assert matches[0].metadata.text == "new"

    def test_delete_by_document_name(self, store) -> None:
        store.upsert([make_record("a.pdf", i, [1.0, float(i)]) for i in range(3)])
        store.upsert([make_record("b.pdf", 0, [1.0, 0.0])])

        store.delete("a.pdf")
        store.delete("a.pdf")

        assert store.count() == 1
        assert store.query([1.0, 0.0])[0].metadata.document_name == "b.pdf"

    def test_namespaces_are_separate(self, store) -> None:
        store.upsert([make_record("a.pdf", 0, [1.0, 0.0])], namespace="other")

        assert store.count() == 0
        assert store.count("other") == 1
        assert store.query([1.0, 0.0]) == []

    def test_dimension_mismatch_raises(self, store) -> None:
        store.upsert([make_record("a.pdf", 0, [1.0, 0.0])])

        with pytest.raises(VectorStoreError):
            store.query([1.0, 0.0, 0.0])

    def test_empty_namespace_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            InMemoryVectorsStore(namespace="")


# ============================================================================
# Pinecone Store Tests
# ============================================================================


class TestPineconeVectorsStore:
    """Test Pinecone adapter request shapes and error mapping."""

    @pytest.fixture
    def index(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def store(self, index) -> PineconeVectorsStore:
        client = MagicMock()
        client.Index.return_value = index
        return PineconeVectorsStore(index_name="study-docs", client=client, max_attempts=1)

    def test_missing_index_is_configuration_error(self) -> None:
        client = MagicMock()

        with pytest.raises(ConfigurationError) as exc_info:
            PineconeVectorsStore(index_name=None, client=client)

        assert exc_info.value.details["setting"] == "PINECONE_INDEX"
        client.Index.assert_not_called()

    def test_upsert_payload(self, store, index) -> None:
        store.upsert([make_record("notes.pdf", 0, [0.5], text="Osmosis")])

        index.upsert.assert_called_once_with(
            vectors=[{
                "id": "notes.pdf-0",
                "values": [0.5],
                "metadata": {"text": "Osmosis", "fileName": "notes.pdf"},
            }],
            namespace="ns1",
        )

    def test_upsert_empty_batch_skips_call(self, store, index) -> None:
        store.upsert([])

        index.upsert.assert_not_called()

    def test_upsert_failure_wrapped(self, store, index) -> None:
        index.upsert.side_effect = PineconeException("quota exceeded")

        with pytest.raises(VectorStoreError) as exc_info:
            store.upsert([make_record("notes.pdf", 0, [0.5])])

        assert exc_info.value.details["operation"] == "upsert"
        assert exc_info.value.details["vector_count"] == 1

    @pytest.fixture
    def retrying_store(self, index, monkeypatch) -> PineconeVectorsStore:
        monkeypatch.setattr("time.sleep", lambda seconds: None)
        client = MagicMock()
        client.Index.return_value = index
        return PineconeVectorsStore(index_name="study-docs", client=client, max_attempts=3)

    @pytest.mark.parametrize("status", [429, 500, 503])
    def test_upsert_retries_transient_failure(self, retrying_store, index, status) -> None:
        index.upsert.side_effect = [StatusError("temporarily unavailable", status), None]

        retrying_store.upsert([make_record("notes.pdf", 0, [0.5])])

        assert index.upsert.call_count == 2

    def test_connection_drop_retried(self, retrying_store, index) -> None:
        index.query.side_effect = [ConnectionError("reset by peer"), SimpleNamespace(matches=[])]

        assert retrying_store.query([0.1]) == []
        assert index.query.call_count == 2

    def test_dimension_mismatch_not_retried(self, retrying_store, index) -> None:
        index.upsert.side_effect = StatusError(
            "Vector dimension 1 does not match the dimension of the index 768", 400
        )

        with pytest.raises(VectorStoreError):
            retrying_store.upsert([make_record("notes.pdf", 0, [0.5])])

        assert index.upsert.call_count == 1

    def test_invalid_api_key_not_retried(self, retrying_store, index) -> None:
        index.query.side_effect = StatusError("Invalid API Key", 401)

        with pytest.raises(VectorStoreError):
            retrying_store.query([0.1])

        assert index.query.call_count == 1

    def test_client_side_error_not_retried(self, retrying_store, index) -> None:
        index.delete.side_effect = PineconeException("filter must be a dict")

        with pytest.raises(VectorStoreError):
            retrying_store.delete("notes.pdf")

        assert index.delete.call_count == 1

    @pytest.mark.parametrize(
        "error, expected",
        [
            (StatusError("rate limited", 429), True),
            (StatusError("bad gateway", 502), True),
            (StatusError("forbidden", 403), False),
            (TimeoutError("read timed out"), True),
            (ValueError("not a pinecone error"), False),
        ],
    )
    def test_is_transient_error(self, error, expected) -> None:
        assert is_transient_error(error) is expected

    def test_query_maps_matches(self, store, index) -> None:
        index.query.return_value = SimpleNamespace(matches=[
            SimpleNamespace(id="a.pdf-0", score=0.91, metadata={"text": "X", "fileName": "a.pdf"}),
            SimpleNamespace(id="b.pdf-3", score=0.42, metadata={"text": "Y", "fileName": "b.pdf"}),
        ])

        matches = store.query([0.1, 0.2], top_k=5)

        index.query.assert_called_once_with(
            vector=[0.1, 0.2], top_k=5, namespace="ns1", include_metadata=True
        )
        assert [(m.metadata.document_name, m.metadata.text, m.score) for m in matches] == [
            ("a.pdf", "X", 0.91),
            ("b.pdf", "Y", 0.42),
        ]

    def test_query_missing_namespace_returns_nothing(self, store, index) -> None:
        index.query.side_effect = NotFoundException(status=404, reason="Not Found")

        assert store.query([0.1], top_k=5) == []

    def test_delete_uses_metadata_filter(self, store, index) -> None:
        store.delete("notes.pdf", namespace="ns2")

        index.delete.assert_called_once_with(
            filter={"fileName": {"$eq": "notes.pdf"}},
            namespace="ns2",
        )

    def test_delete_missing_namespace_is_noop(self, store, index) -> None:
        index.delete.side_effect = NotFoundException(status=404, reason="Not Found")

        store.delete("notes.pdf")

    def test_delete_failure_wrapped(self, store, index) -> None:
        index.delete.side_effect = PineconeException("timeout")

        with pytest.raises(VectorStoreError) as exc_info:
            store.delete("notes.pdf")

        assert exc_info.value.details["operation"] == "delete"


# ============================================================================
# Factory Tests
# ============================================================================


class TestVectorStoreFactory:
    """Test store selection from settings."""

    def test_memory_store(self, monkeypatch) -> None:
        monkeypatch.setenv("VECTOR_STORE_STORE_TYPE", "memory")
        monkeypatch.setenv("VECTOR_STORE_NAMESPACE", "dev")

        store = get_vector_store(get_settings())

        assert isinstance(store, InMemoryVectorsStore)
        assert store.namespace == "dev"

    def test_pinecone_without_index_fails_before_io(self, monkeypatch) -> None:
        monkeypatch.setenv("VECTOR_STORE_STORE_TYPE", "pinecone")
        monkeypatch.delenv("PINECONE_INDEX", raising=False)

        with pytest.raises(ConfigurationError):
            get_vector_store(get_settings())

    def test_invalid_store_type(self, monkeypatch) -> None:
        monkeypatch.setenv("VECTOR_STORE_STORE_TYPE", "redis")

        with pytest.raises(ConfigurationError):
            get_vector_store(get_settings())
