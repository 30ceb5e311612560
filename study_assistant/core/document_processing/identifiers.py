"""
Record identifiers and document name checks.

Record ids are '<document_name>-<ordinal>': deterministic and independent
of chunk content, so re-ingesting a document overwrites records at the
same ordinals.

Dependencies: study_assistant.core.exceptions
System role: Identifier scheme for vector records
"""

from study_assistant.core.exceptions import UnsupportedInputError, ValidationError

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".pptx")


def make_id(document_name: str, ordinal: int) -> str:
    """Build the vector record id for a chunk position."""
    return f"{document_name}-{ordinal}"


def validate_document_name(document_name: str | None) -> str:
    """
    Check an upload name before ingestion.

    Args:
        document_name: Original upload file name

    Returns:
        str: The unchanged document name

    Raises:
        ValidationError: When the name is missing or blank
        UnsupportedInputError: When the extension is not .pdf, .docx or .pptx
    """
    if not document_name or not document_name.strip():
        raise ValidationError("File name is required", field="fileName")

    if not document_name.lower().endswith(SUPPORTED_EXTENSIONS):
        raise UnsupportedInputError(
            "Unsupported file format",
            document_name=document_name,
            details={"supported": list(SUPPORTED_EXTENSIONS)},
        )
    return document_name
