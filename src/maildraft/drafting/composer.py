"""Prompt composition for draft generation."""

from __future__ import annotations

from maildraft.domain.models import GenerationRequest
from maildraft.drafting.recipients import recipients_to_string
from maildraft.llm.prompts import USER_PROMPT


def compose_prompt(request: GenerationRequest) -> str:
    """Build the user message sent to the model for *request*.

    The tone is lower-cased, recipients are comma-joined, and the user's
    prompt is inserted verbatim ahead of the output-format directive.
    """
    return USER_PROMPT.format(
        tone=request.tone.value.lower(),
        recipients=recipients_to_string(request.recipients),
        user_prompt=request.user_prompt,
    )
