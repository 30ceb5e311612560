"""
Retrieval API endpoints.

Routes: POST /context

The answer itself is generated by the caller; this endpoint only returns
the context block and the system prompt that wraps it.

Dependencies: study_assistant.core.document_processing, study_assistant.core.context_builder
System role: Retrieval HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from study_assistant.api.deps import get_document_pipeline
from study_assistant.core.context_builder import build_system_prompt
from study_assistant.core.document_processing import DocumentPipeline
from study_assistant.core.exceptions import StudyAssistantException
from study_assistant.models.document import ContextRequest, ContextResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["retrieval"])


@router.post("/context", response_model=ContextResponse, response_model_by_alias=True)
def get_context(
    request: ContextRequest,
    pipeline: DocumentPipeline = Depends(get_document_pipeline),
) -> ContextResponse:
    """Retrieve the context block for a question."""
    try:
        context = pipeline.retrieve(request.query)
    except StudyAssistantException as e:
        logger.error("Retrieval Error", exc_info=e)
        raise HTTPException(status_code=500, detail="Error processing request")

    return ContextResponse(context=context, system_prompt=build_system_prompt(context))
