"""Generation orchestrator: the single public entry point of the pipeline.

Sequences validation, prompt composition, the model call, response parsing,
and, on any failure, error classification plus the local fallback.  Every
path except request validation ends in a populated ``GenerationResult``.
"""

from __future__ import annotations

import structlog

from maildraft.domain.errors import DraftValidationError, EmptyModelResponseError
from maildraft.domain.models import GenerationRequest, GenerationResult
from maildraft.domain.types import GenerationState, ResultSource
from maildraft.drafting.classifier import classify_error
from maildraft.drafting.composer import compose_prompt
from maildraft.drafting.fallback import generate_fallback
from maildraft.drafting.parser import RAW_SUBJECT, parse_model_output
from maildraft.llm.client import NO_ANSWER_PLACEHOLDER, ModelClient
from maildraft.observability.metrics import GENERATION_IN_PROGRESS, GENERATIONS, RATE_LIMITED
from maildraft.state_machine import GenerationEvent, GenerationStateMachine

logger = structlog.get_logger()

MISSING_RECIPIENTS_MESSAGE = "Please add at least one recipient (comma/newline separated)."
MISSING_PROMPT_MESSAGE = "Please describe the email you want to write."


def validate_request(request: GenerationRequest) -> None:
    """Check the preconditions for a generation.

    Raises:
        DraftValidationError: If there are no recipients or the prompt is blank.
    """
    if not request.recipients:
        raise DraftValidationError(MISSING_RECIPIENTS_MESSAGE)
    if not request.user_prompt.strip():
        raise DraftValidationError(MISSING_PROMPT_MESSAGE)


def is_usable_content(text: str) -> bool:
    """Return False for blank text and the client's no-answer placeholder."""
    stripped = text.strip()
    return bool(stripped) and stripped != NO_ANSWER_PLACEHOLDER


class GenerationOrchestrator:
    """Runs generations against one ``ModelClient``, one at a time.

    A call made while another is awaiting the model returns ``None``
    immediately; it is neither queued nor allowed to cancel the first.

    Usage::

        orchestrator = GenerationOrchestrator(OpenRouterClient(api_key))
        result = await orchestrator.generate(request)
    """

    def __init__(self, client: ModelClient) -> None:
        self._client = client
        self._machine = GenerationStateMachine()

    @property
    def state(self) -> GenerationState:
        """Return the current state of the generation cycle."""
        return self._machine.state

    @property
    def is_generating(self) -> bool:
        """Return True while a generation is awaiting the model."""
        return self._machine.is_generating

    async def generate(self, request: GenerationRequest) -> GenerationResult | None:
        """Produce a draft for *request*.

        Args:
            request: Recipients, tone and user prompt.

        Returns:
            A populated ``GenerationResult``, or ``None`` if a generation
            was already in flight.

        Raises:
            DraftValidationError: If the request has no recipients or a
                blank prompt.  No model call is made.
        """
        if self._machine.is_generating:
            logger.info("Generation already in progress, ignoring request")
            return None

        if self._machine.has_succeeded:
            self._machine.trigger(GenerationEvent.RESET)

        validate_request(request)

        self._machine.trigger(GenerationEvent.START)
        GENERATION_IN_PROGRESS.inc()
        logger.info(
            "Generating draft",
            tone=request.tone.value,
            recipient_count=len(request.recipients),
        )
        try:
            result = await self._run(request)
        except BaseException:
            # Cancelled, or failed outside the fallback path.
            self._machine.trigger(GenerationEvent.ABORT)
            raise
        finally:
            GENERATION_IN_PROGRESS.dec()

        if result.source == ResultSource.MODEL:
            self._machine.trigger(GenerationEvent.MODEL_SUCCEEDED)
        else:
            self._machine.trigger(GenerationEvent.FALLBACK_USED)
        GENERATIONS.labels(source=result.source.value).inc()
        return result

    async def _run(self, request: GenerationRequest) -> GenerationResult:
        try:
            text = await self._client.invoke(compose_prompt(request))
            if not is_usable_content(text):
                raise EmptyModelResponseError(text)
        except Exception as exc:
            return self._fall_back(request, exc)

        parsed = parse_model_output(text)
        logger.info("Draft generated by model", subject_length=len(parsed.subject))
        # A result is never partially empty: a JSON object with only one of
        # the two keys gets the generic subject or the raw text as body.
        return GenerationResult(
            subject=parsed.subject or RAW_SUBJECT,
            body=parsed.body or text.strip(),
            raw_model_output=text,
            source=ResultSource.MODEL,
        )

    def _fall_back(self, request: GenerationRequest, exc: Exception) -> GenerationResult:
        classified = classify_error(exc)
        if classified.is_rate_limited:
            RATE_LIMITED.inc()
        logger.warning(
            "AI call failed, using local fallback",
            error=str(exc),
            error_type=type(exc).__name__,
            rate_limited=classified.is_rate_limited,
        )
        return generate_fallback(request, advisory=classified.user_message)
