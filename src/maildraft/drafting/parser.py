"""Tolerant extraction of subject and body from model output.

Models do not always follow the requested format, so parsing degrades
through an ordered list of tiers:

1. JSON: the first ``{`` to the last ``}`` parsed as an object with a
   ``subject`` or ``body`` key.
2. Labeled line: a ``Subject: ...`` line, with the body after it.
3. Raw: a generic subject and the whole text as body.

Each tier returns ``None`` to fall through.  The raw tier always matches,
so ``parse_model_output`` never raises.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Any

from maildraft.domain.models import ParsedEmail

RAW_SUBJECT = "Hello"

_SUBJECT_LINE = re.compile(r"Subject:[ \t]*(.*)", re.IGNORECASE)


def _coerce(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_json_tier(text: str) -> ParsedEmail | None:
    """Parse the greedy ``{...}`` span of *text* as a subject/body object."""
    start = text.find("{")
    end = text.rfind("}")
    if start < 0 or end < start:
        return None
    try:
        parsed = json.loads(text[start : end + 1])
    except (ValueError, RecursionError):
        # Deeply nested input exhausts the decoder stack.
        return None
    if not isinstance(parsed, dict) or not ({"subject", "body"} & parsed.keys()):
        return None
    return ParsedEmail(
        subject=_coerce(parsed.get("subject")),
        body=_coerce(parsed.get("body")),
    )


def parse_labeled_tier(text: str) -> ParsedEmail | None:
    """Parse a ``Subject:`` line and treat everything after that line as body."""
    match = _SUBJECT_LINE.search(text)
    if match is None:
        return None
    newline = text.find("\n", match.start())
    body = text[newline + 1 :].strip() if newline >= 0 else ""
    return ParsedEmail(subject=match.group(1).strip(), body=body)


def parse_raw_tier(text: str) -> ParsedEmail:
    """Wrap *text* verbatim as the body under a generic subject."""
    return ParsedEmail(subject=RAW_SUBJECT, body=text.strip())


# Order matters: JSON is what the prompt asks for, the labeled line is the
# documented alternative, raw is the catch-all.
PARSE_TIERS: tuple[Callable[[str], ParsedEmail | None], ...] = (
    parse_json_tier,
    parse_labeled_tier,
    parse_raw_tier,
)


def parse_model_output(text: str) -> ParsedEmail:
    """Extract a subject and body from arbitrary model text.

    Args:
        text: The raw content returned by the model.

    Returns:
        The result of the first tier that matches.
    """
    for tier in PARSE_TIERS:
        parsed = tier(text)
        if parsed is not None:
            return parsed
    return parse_raw_tier(text)  # pragma: no cover - raw tier always matches
