"""
Context assembly for answer generation.

Formats similarity matches into the single context block handed to the
generation model, and renders the study-assistant system prompt around it.

Dependencies: study_assistant.boundary.vdb
System role: Context formatting business logic
"""

from typing import Sequence

from study_assistant.boundary.vdb.vector_schemas import QueryMatch

SYSTEM_PROMPT_TEMPLATE = """You are a smart study assistant.
- You ALWAYS format your answers in nice Markdown.
- Use **bold** for key terms.
- Use lists for steps.
- Use LaTeX for math equations (wrap inline math in $...$ and block math in $$...$$).
- Answer ONLY using the context below.
- If the context is empty or does not contain the answer, politely say that the uploaded documents do not cover it.

Context:
{context}"""


class ContextAssembler:
    """Render query matches as a context string."""

    block_separator = "\n\n"

    def format_match(self, match: QueryMatch) -> str:
        """Render one match as a 'Source/Content' block."""
        return f"Source: {match.metadata.document_name}\nContent: {match.metadata.text}"

    def assemble(self, matches: Sequence[QueryMatch]) -> str:
        """
        Join matches in the order supplied.

        Args:
            matches: Matches, already sorted by descending similarity

        Returns:
            str: Blocks separated by a blank line, empty string for no matches
        """
        return self.block_separator.join(self.format_match(match) for match in matches)


def build_system_prompt(context: str) -> str:
    """Render the system prompt a generation call should use for this context."""
    return SYSTEM_PROMPT_TEMPLATE.format(context=context)
