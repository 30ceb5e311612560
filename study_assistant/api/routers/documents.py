"""
Document API endpoints.

Routes:
- POST /ingest - Chunk, embed, and store extracted document text
- POST /delete - Remove every stored chunk of a document

Dependencies: study_assistant.core.document_processing, study_assistant.models
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from study_assistant.api.deps import get_document_pipeline
from study_assistant.core.document_processing import DocumentPipeline, validate_document_name
from study_assistant.core.exceptions import (
    StudyAssistantException,
    UnsupportedInputError,
    ValidationError,
)
from study_assistant.models.document import (
    DeleteDocumentRequest,
    DeleteDocumentResponse,
    IngestDocumentRequest,
    IngestDocumentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


@router.post("/ingest", response_model=IngestDocumentResponse, response_model_by_alias=True)
def ingest_document(
    request: IngestDocumentRequest,
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> IngestDocumentResponse:
    """
    Index extracted document text.

    A failure after some batches were stored still reports the document as
    unprocessed; those batches stay searchable until the document is deleted
    or re-ingested.

    Raises:
        HTTPException(400): Missing file name or unsupported file type
        HTTPException(500): Embedding or vector store failure
    """
    try:
        file_name = validate_document_name(request.file_name)
    except (ValidationError, UnsupportedInputError) as e:
        raise HTTPException(status_code=400, detail=e.message)

    logger.info(f"Processing file: {file_name}", extra={"document_name": file_name})

    try:
        result = pipeline.ingest_text(
            file_name,
            request.text,
            replace_existing=request.replace_existing,
        )
    except StudyAssistantException as e:
        logger.error(
            "Ingest Error",
            exc_info=e,
            extra={"document_name": file_name, "error_details": str(e.details)},
        )
        raise HTTPException(status_code=500, detail="Failed to process file")

    return IngestDocumentResponse(file_name=file_name, chunk_count=result.chunk_count)


@router.post("/delete", response_model=DeleteDocumentResponse)
def delete_document(
    request: DeleteDocumentRequest,
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> DeleteDocumentResponse:
    """
    Remove a document from the index.

    Safe to retry: deleting an already removed document succeeds.

    Raises:
        HTTPException(400): Missing file name
        HTTPException(500): Vector store failure
    """
    if not request.file_name:
        raise HTTPException(status_code=400, detail="File name is required")

    try:
        pipeline.forget(request.file_name)
    except StudyAssistantException as e:
        logger.error("Delete Error", exc_info=e, extra={"document_name": request.file_name})
        raise HTTPException(status_code=500, detail="Failed to delete file")

    return DeleteDocumentResponse()
