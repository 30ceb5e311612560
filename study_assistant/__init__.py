"""
Study Assistant backend.

Ingestion-and-retrieval pipeline for answering questions from uploaded
study material: chunking, batched embedding, vector storage, similarity
search, per-document deletion, and context assembly.
"""

__version__ = "0.1.0"
