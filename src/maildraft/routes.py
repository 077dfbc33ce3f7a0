"""HTTP endpoints for draft generation and export.

``POST /drafts`` runs the generation pipeline; ``POST /drafts/export``
turns a (possibly edited) draft into a send record, a ``mailto:`` URL and
clipboard text.  Both read their collaborators from
``request.app.state.services``.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from maildraft.domain.errors import DraftValidationError
from maildraft.domain.models import GenerationRequest, GenerationResult
from maildraft.domain.types import ResultSource, Tone
from maildraft.drafting.orchestrator import GenerationOrchestrator
from maildraft.drafting.recipients import parse_recipients
from maildraft.export import build_mailto_url, build_send_record, clipboard_text

logger = structlog.get_logger()

router = APIRouter(prefix="/drafts")


class DraftRequest(BaseModel):
    """Body of ``POST /drafts``."""

    recipients: str = Field(description="Addresses separated by commas, semicolons or newlines")
    tone: Tone = Tone.PROFESSIONAL
    prompt: str = Field(description="What the email should say")


class ExportRequest(BaseModel):
    """Body of ``POST /drafts/export``."""

    recipients: str
    subject: str
    body: str
    raw_model_output: str = ""
    source: ResultSource = ResultSource.MODEL


@router.post("")
async def create_draft(payload: DraftRequest, request: Request) -> GenerationResult:
    """Generate a draft; 422 on missing input, 409 while another is running."""
    orchestrator: GenerationOrchestrator = request.app.state.services["orchestrator"]
    generation_request = GenerationRequest(
        recipients=parse_recipients(payload.recipients),
        tone=payload.tone,
        user_prompt=payload.prompt,
    )
    try:
        result = await orchestrator.generate(generation_request)
    except DraftValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    if result is None:
        raise HTTPException(status_code=409, detail="A draft is already being generated")
    return result


@router.post("/export")
async def export_draft(payload: ExportRequest) -> dict[str, Any]:
    """Build the send record, ``mailto:`` URL and clipboard text for a draft."""
    recipients = parse_recipients(payload.recipients)
    draft = GenerationResult(
        subject=payload.subject,
        body=payload.body,
        raw_model_output=payload.raw_model_output,
        source=payload.source,
    )
    try:
        mailto = build_mailto_url(recipients, draft.subject, draft.body)
    except DraftValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    record = build_send_record(recipients, draft)
    logger.info("Draft exported", recipient_count=len(recipients), source=draft.source.value)
    return {
        "record": record.model_dump(mode="json", by_alias=True),
        "mailto": mailto,
        "clipboard": clipboard_text(draft.subject, draft.body),
    }
