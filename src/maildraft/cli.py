"""Command-line front end for drafting a single email.

Runs one generation and prints the draft as text, JSON, or a ``mailto:``
URL.  When the model call fails the local fallback draft is printed and the
reason goes to stderr.

Usage::

    python -m maildraft.cli --to "jane.doe@example.com; sam@example.com" \\
        --tone Friendly --prompt "Ask for the Q3 report by Friday"
    python -m maildraft.cli --to ops@example.com --preset intro --format json --save out/
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from maildraft.config import get_settings
from maildraft.domain.errors import DraftValidationError
from maildraft.domain.models import GenerationRequest, GenerationResult
from maildraft.domain.types import Tone
from maildraft.drafting.orchestrator import GenerationOrchestrator
from maildraft.drafting.recipients import parse_recipients
from maildraft.export import (
    build_mailto_url,
    build_send_record,
    clipboard_text,
    save_send_record,
)
from maildraft.llm.client import ModelClient, OpenRouterClient
from maildraft.llm.prompts import DEFAULT_PROMPT, PROMPT_PRESETS

EXIT_VALIDATION_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for a drafting run.

    Returns:
        A configured :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(description="Draft an email with an AI model")

    parser.add_argument(
        "--to",
        type=str,
        required=True,
        help="Recipients separated by commas, semicolons or newlines",
    )
    parser.add_argument(
        "--tone",
        type=str,
        choices=[t.value for t in Tone],
        default=Tone.PROFESSIONAL.value,
        help="Tone of the draft",
    )
    prompt_group = parser.add_mutually_exclusive_group()
    prompt_group.add_argument(
        "--prompt",
        type=str,
        help="What the email should say",
    )
    prompt_group.add_argument(
        "--preset",
        type=str,
        choices=sorted(PROMPT_PRESETS),
        help="Use a canned prompt",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["text", "json", "mailto"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--save",
        type=Path,
        help="Directory to write a sent-email JSON record into",
    )

    return parser


def resolve_prompt(args: argparse.Namespace) -> str:
    """Return the prompt from ``--prompt``, ``--preset`` or the default."""
    if args.prompt is not None:
        return str(args.prompt)
    if args.preset is not None:
        return PROMPT_PRESETS[args.preset]
    return DEFAULT_PROMPT


def format_result(result: GenerationResult, request: GenerationRequest, fmt: str) -> str:
    """Render *result* in the requested output format."""
    if fmt == "json":
        return result.model_dump_json(indent=2)
    if fmt == "mailto":
        return build_mailto_url(request.recipients, result.subject, result.body)
    return clipboard_text(result.subject, result.body)


async def run(args: argparse.Namespace, client: ModelClient | None = None) -> int:
    """Generate and print one draft.

    Args:
        args: Parsed command-line arguments.
        client: Model client to use.  Defaults to OpenRouter from settings.

    Returns:
        Process exit code.
    """
    request = GenerationRequest(
        recipients=parse_recipients(args.to),
        tone=Tone(args.tone),
        user_prompt=resolve_prompt(args),
    )
    orchestrator = GenerationOrchestrator(client or OpenRouterClient.from_settings(get_settings()))

    try:
        result = await orchestrator.generate(request)
    except DraftValidationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    if result is None:  # pragma: no cover - a fresh orchestrator is never busy
        return 1

    if result.advisory:
        print(result.advisory, file=sys.stderr)
    print(format_result(result, request, args.format))

    if args.save is not None:
        path = save_send_record(build_send_record(request.recipients, result), args.save)
        print(f"Saved send record to {path}", file=sys.stderr)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run a single drafting request.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
