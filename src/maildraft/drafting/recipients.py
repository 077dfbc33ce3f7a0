"""Recipient buffer parsing.

The raw buffer is whatever the user typed: addresses separated by any mix of
commas, semicolons and newlines.  Addresses are carried verbatim, without
syntax validation.
"""

from __future__ import annotations

import re

from maildraft.domain.models import Recipient

_SEPARATORS = re.compile(r"[,;\n]+")


def parse_recipients(raw: str) -> list[Recipient]:
    """Split a raw recipient buffer into ``Recipient`` records.

    Args:
        raw: Free-form recipient text.

    Returns:
        Recipients in input order.  Duplicates are kept; blank segments are
        dropped.
    """
    segments = (segment.strip() for segment in _SEPARATORS.split(raw))
    return [Recipient(email=segment) for segment in segments if segment]


def recipients_to_string(recipients: list[Recipient]) -> str:
    """Join recipient addresses for display and prompts."""
    return ", ".join(r.email for r in recipients)


def add_recipient(raw: str, entry: str) -> str:
    """Append *entry* to the raw buffer.

    Blank entries leave the buffer untouched.
    """
    if not entry.strip():
        return raw
    return f"{raw}, {entry}" if raw else entry


def remove_recipient(raw: str, index: int) -> str:
    """Drop the recipient at *index* and return the normalized buffer.

    Raises:
        IndexError: If *index* is outside the parsed recipient list.
    """
    recipients = parse_recipients(raw)
    del recipients[index]
    return recipients_to_string(recipients)
