"""
Vector store factory for selecting between in-memory (dev) and Pinecone (prod).

Depends on VECTOR_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: study_assistant.boundary.vdb, study_assistant.configs
System role: Vector store instantiation and selection
"""

import logging

from study_assistant.boundary.vdb.memory_vectors_store import InMemoryVectorsStore
from study_assistant.boundary.vdb.pinecone_vectors_store import PineconeVectorsStore
from study_assistant.configs import Settings, get_settings
from study_assistant.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_vector_store(settings: Settings | None = None):
    """
    Factory function to get vector store based on environment configuration.

    Returns:
        InMemoryVectorsStore or PineconeVectorsStore: Configured vector store instance

    Raises:
        ConfigurationError: If the store type is invalid or Pinecone is not configured
    """
    settings = settings or get_settings()
    store_type = settings.vector_store.store_type.lower()

    if store_type == "memory":
        logger.info(
            f"{__name__}:get_vector_store - Creating in-memory vector store (local dev mode)"
        )
        return InMemoryVectorsStore(namespace=settings.vector_store.namespace)

    elif store_type == "pinecone":
        logger.info(f"{__name__}:get_vector_store - Creating Pinecone store (production mode)")
        return PineconeVectorsStore(
            index_name=settings.pinecone.index,
            api_key=settings.pinecone.api_key,
            namespace=settings.vector_store.namespace,
            max_attempts=settings.vector_store.max_attempts,
        )

    else:
        raise ConfigurationError(
            f"Invalid VECTOR_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'memory' (dev) or 'pinecone' (production).",
            setting="VECTOR_STORE_STORE_TYPE",
        )
