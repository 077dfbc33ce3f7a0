"""Terminal actions on a finished draft.

These consume a ``GenerationResult`` without feeding anything back into the
pipeline: a ``mailto:`` URL for the user's mail client, a JSON send record
for download, and the plain-text form used for the clipboard.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from maildraft.domain.errors import DraftValidationError
from maildraft.domain.models import GenerationResult, Recipient
from maildraft.domain.types import ResultSource


class SentEmailRecord(BaseModel):
    """A simulated send, serialized with the keys the download format uses."""

    model_config = ConfigDict(populate_by_name=True)

    to: list[str]
    subject: str
    body: str
    generated_at: datetime = Field(alias="generatedAt")
    raw_model_output: str = Field(alias="rawModelOutput")
    source: ResultSource | None = None

    def to_json(self) -> str:
        """Render the record as pretty-printed JSON with camelCase keys."""
        return self.model_dump_json(by_alias=True, indent=2)


def build_mailto_url(recipients: list[Recipient], subject: str, body: str) -> str:
    """Build a ``mailto:`` URL pre-filled with recipients, subject and body.

    Raises:
        DraftValidationError: If there are no recipients.
    """
    if not recipients:
        raise DraftValidationError("Add at least one recipient to send.")
    to = quote(",".join(r.email for r in recipients), safe="")
    return f"mailto:{to}?subject={quote(subject, safe='')}&body={quote(body, safe='')}"


def build_send_record(
    recipients: list[Recipient],
    result: GenerationResult,
    generated_at: datetime | None = None,
) -> SentEmailRecord:
    """Assemble the record saved for a simulated send.

    Args:
        recipients: Parsed recipients of the draft.
        result: The draft, possibly edited by the user.
        generated_at: Timestamp to record.  Defaults to now (UTC).
    """
    return SentEmailRecord(
        to=[r.email for r in recipients],
        subject=result.subject,
        body=result.body,
        generated_at=generated_at or datetime.now(UTC),
        raw_model_output=result.raw_model_output,
        source=result.source,
    )


def save_send_record(record: SentEmailRecord, directory: Path) -> Path:
    """Write *record* to ``sent-email-<epoch ms>.json`` under *directory*.

    Returns:
        Path of the written file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    stamp = int(record.generated_at.timestamp() * 1000)
    path = directory / f"sent-email-{stamp}.json"
    path.write_text(record.to_json(), encoding="utf-8")
    return path


def clipboard_text(subject: str, body: str) -> str:
    """Return the draft as ``Subject: ...`` followed by a blank line and the body."""
    return f"Subject: {subject}\n\n{body}"
