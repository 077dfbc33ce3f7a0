"""Email drafting pipeline.

Recipient parsing, prompt composition, tiered response parsing, failure
classification, the local fallback generator, and the orchestrator that
sequences them.
"""

from maildraft.drafting.classifier import classify_error
from maildraft.drafting.composer import compose_prompt
from maildraft.drafting.fallback import generate_fallback
from maildraft.drafting.orchestrator import GenerationOrchestrator, validate_request
from maildraft.drafting.parser import PARSE_TIERS, parse_model_output
from maildraft.drafting.recipients import (
    add_recipient,
    parse_recipients,
    recipients_to_string,
    remove_recipient,
)

__all__ = [
    "PARSE_TIERS",
    "GenerationOrchestrator",
    "add_recipient",
    "classify_error",
    "compose_prompt",
    "generate_fallback",
    "parse_model_output",
    "parse_recipients",
    "recipients_to_string",
    "remove_recipient",
    "validate_request",
]
