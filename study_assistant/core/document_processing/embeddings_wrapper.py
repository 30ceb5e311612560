"""
Google Generative AI embeddings factory.

Builds the LangChain embeddings client used by the ingestion pipeline.
Documents and queries are embedded with their matching Gemini task types
so stored vectors and query vectors come from the same model.

Dependencies: langchain_google_genai
System role: Embedding provider construction
"""

import logging
import os

from dotenv import load_dotenv
from langchain_google_genai import GoogleGenerativeAIEmbeddings
from pydantic import ValidationError as PydanticValidationError

from study_assistant.configs.embeddings import EMBEDDING_BATCH_SIZE, EmbeddingSettings
from study_assistant.core.exceptions import ConfigurationError

load_dotenv()
logger = logging.getLogger(__name__)


class StudyEmbeddings(GoogleGenerativeAIEmbeddings):
    """
    GoogleGenerativeAIEmbeddings with retrieval task types pinned.

    Documents use RETRIEVAL_DOCUMENT and queries use RETRIEVAL_QUERY unless
    the caller passes a task type explicitly.
    """

    def embed_documents(self, texts, *, batch_size: int = EMBEDDING_BATCH_SIZE, task_type=None, **kwargs):
        return super().embed_documents(
            texts,
            batch_size=batch_size,
            task_type=task_type or "RETRIEVAL_DOCUMENT",
            **kwargs,
        )

    def embed_query(self, text, task_type=None, **kwargs):
        return super().embed_query(
            text,
            task_type=task_type or "RETRIEVAL_QUERY",
            **kwargs,
        )


def create_embeddings(settings: EmbeddingSettings) -> StudyEmbeddings:
    """
    Build the embeddings client from settings.

    Args:
        settings: Embedding settings

    Returns:
        StudyEmbeddings: Configured client

    Raises:
        ConfigurationError: When no model or API key is configured, or the
            client rejects the configuration
    """
    if not settings.model:
        raise ConfigurationError("Embedding model is not configured", setting="EMBEDDING_MODEL")

    api_key = settings.google_api_key or os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise ConfigurationError("GOOGLE_API_KEY is missing from the environment", setting="GOOGLE_API_KEY")

    try:
        embeddings = StudyEmbeddings(model=settings.model, google_api_key=api_key)
    except PydanticValidationError as e:
        raise ConfigurationError(
            "Invalid embedding client configuration",
            setting="EMBEDDING_MODEL",
            details={"error": str(e)},
        ) from e

    logger.info(f"{__name__}:create_embeddings - Initialized with model={settings.model}")
    return embeddings
