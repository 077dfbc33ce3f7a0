"""Failure classification for model calls.

Decides whether a failed call looks like rate limiting and builds the
advisory shown next to the fallback draft.
"""

from __future__ import annotations

import re

from maildraft.domain.models import ClassifiedError

RATE_LIMIT_PATTERN = re.compile(r"429|rate[- ]?limit|rate limited", re.IGNORECASE)

RATE_LIMIT_MESSAGE = (
    "The generation service is temporarily rate-limited. Using local fallback generator."
)
GENERIC_FAILURE_MESSAGE = "AI generation failed ({error}). Using local fallback."


def classify_error(error: BaseException | str) -> ClassifiedError:
    """Classify a model-call failure by inspecting its message.

    Args:
        error: The raised exception, or its message.

    Returns:
        A ``ClassifiedError`` with the rate-limit decision and user message.
    """
    message = str(error) or type(error).__name__
    if RATE_LIMIT_PATTERN.search(message):
        return ClassifiedError(is_rate_limited=True, user_message=RATE_LIMIT_MESSAGE)
    return ClassifiedError(
        is_rate_limited=False,
        user_message=GENERIC_FAILURE_MESSAGE.format(error=message),
    )
