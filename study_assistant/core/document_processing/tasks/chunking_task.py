"""
Text chunking task.

Normalizes extracted text and splits it into ordered, fixed-size chunks.
Two strategies are available:

- fixed: consecutive windows of at most chunk_size characters, no overlap,
  no regard for word or sentence boundaries. Concatenating the chunks
  reproduces the normalized input exactly.
- boundary: LangChain RecursiveCharacterTextSplitter with the same size
  cap and zero overlap, preferring to break on whitespace.

Dependencies: langchain_text_splitters
System role: First stage of document ingestion pipeline
"""

import re

from langchain_text_splitters import RecursiveCharacterTextSplitter

from study_assistant.core.exceptions import UnsupportedInputError

from ..models import Chunk

_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return _WHITESPACE_RUN.sub(" ", text).strip()


class FixedWindowChunker:
    """Split text into consecutive non-overlapping character windows."""

    def __init__(self, chunk_size: int = 1000) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def split(self, text: str) -> list[str]:
        size = self.chunk_size
        return [text[start:start + size] for start in range(0, len(text), size)]


class BoundaryAwareChunker:
    """Split text on separators, keeping every piece within chunk_size."""

    def __init__(self, chunk_size: int = 1000) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=0,
            length_function=len,
        )

    def split(self, text: str) -> list[str]:
        if not text:
            return []
        return self._splitter.split_text(text)


class ChunkingTask:
    """Turn raw document text into ordered Chunk sequences."""

    def __init__(self, chunk_size: int = 1000, strategy: str = "fixed") -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            strategy: 'fixed' or 'boundary'

        Raises:
            ValueError: When strategy is unknown or chunk_size is not positive
        """
        if strategy == "fixed":
            self._splitter = FixedWindowChunker(chunk_size)
        elif strategy == "boundary":
            self._splitter = BoundaryAwareChunker(chunk_size)
        else:
            raise ValueError(f"Unknown chunking strategy: {strategy}")
        self.chunk_size = chunk_size
        self.strategy = strategy

    def chunk(self, text: str) -> list[Chunk]:
        """
        Split already-normalized text into chunks.

        Args:
            text: Normalized document text

        Returns:
            list[Chunk]: Chunks with ordinals 0..k-1, empty for empty input
        """
        return [
            Chunk(text=piece, ordinal=ordinal)
            for ordinal, piece in enumerate(self._splitter.split(text))
        ]

    def chunk_document(self, document_name: str, raw_text: str) -> list[Chunk]:
        """
        Normalize extracted text and split it into chunks.

        Args:
            document_name: Document the text came from
            raw_text: Text as produced by the extractor

        Returns:
            list[Chunk]: Ordered chunks

        Raises:
            UnsupportedInputError: When no usable text remains after normalization
        """
        chunks = self.chunk(normalize_text(raw_text or ""))
        if not chunks:
            raise UnsupportedInputError(
                "Document contains no extractable text",
                document_name=document_name,
            )
        return chunks
