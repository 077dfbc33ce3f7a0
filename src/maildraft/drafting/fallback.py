"""Local draft generator used when the model call fails.

Output depends only on the request: no randomness and no clock, so the same
inputs always give byte-identical drafts.
"""

from __future__ import annotations

import json
import re

from maildraft.domain.models import GenerationRequest, GenerationResult
from maildraft.domain.types import ResultSource

FALLBACK_TOPIC = "Follow-up"
SUBJECT_WORD_LIMIT = 6

# Keyword -> opening phrase, matched as a substring of the lower-cased tone.
# New tones get a row here.
TONE_OPENINGS: tuple[tuple[str, str], ...] = (
    ("casual", "Hope you are doing well."),
    ("friendly", "Hope you are well and having a great week."),
    ("urgent", "Following up with some urgency on the matter."),
    ("concise", "Quick note:"),
)
DEFAULT_OPENING = "I am writing to follow up on"

BODY_TEMPLATE = """{greeting},

{opening} {user_prompt}

Please let me know your thoughts or the next steps. I appreciate your time.

Best regards,
[Your Name]"""

_WORD_START = re.compile(r"\b\w")


def extract_name(request: GenerationRequest) -> str:
    """Derive a display name from the first recipient's local part.

    ``jane.doe@x.com`` becomes ``"Jane Doe"``.  Returns an empty string when
    there is no recipient or no local part.
    """
    if not request.recipients:
        return ""
    local_part = request.recipients[0].email.split("@")[0]
    spaced = re.sub(r"[._]", " ", local_part).strip()
    return _WORD_START.sub(lambda m: m.group(0).upper(), spaced)


def tone_opening(tone: str) -> str:
    """Return the opening phrase for *tone*."""
    lowered = tone.lower()
    for keyword, opening in TONE_OPENINGS:
        if keyword in lowered:
            return opening
    return DEFAULT_OPENING


def build_subject(request: GenerationRequest) -> str:
    """Build ``"<Tone> — <first words of the prompt>"``."""
    topic = " ".join(request.user_prompt.split()[:SUBJECT_WORD_LIMIT])
    return f"{request.tone.value} — {topic or FALLBACK_TOPIC}"


def generate_fallback(request: GenerationRequest, advisory: str | None = None) -> GenerationResult:
    """Synthesize a complete draft for *request* without the model.

    Args:
        request: The generation request.
        advisory: Message explaining why the fallback was used.

    Returns:
        A ``GenerationResult`` with ``source="fallback"``.  The raw output
        is a pretty-printed JSON of the subject and body.
    """
    name = extract_name(request)
    subject = build_subject(request)
    body = BODY_TEMPLATE.format(
        greeting=f"Dear {name}" if name else "Hello",
        opening=tone_opening(request.tone.value),
        user_prompt=request.user_prompt,
    )
    raw = json.dumps({"subject": subject, "body": body}, indent=2, ensure_ascii=False)
    return GenerationResult(
        subject=subject,
        body=body,
        raw_model_output=raw,
        source=ResultSource.FALLBACK,
        advisory=advisory,
    )
