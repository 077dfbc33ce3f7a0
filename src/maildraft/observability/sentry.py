"""Error reporting to Sentry.

Sentry is optional: without a DSN nothing is initialized and the structlog
chain is left untouched.  When enabled, ERROR-level structlog events are the
only thing forwarded; the stdlib logging integration is switched off.
"""

from __future__ import annotations

import logging

import sentry_sdk
import structlog
from sentry_sdk.integrations.logging import LoggingIntegration
from structlog_sentry import SentryProcessor

from maildraft.observability.middleware import SERVICE_NAME


def init_sentry(dsn: str, production: bool = False) -> bool:
    """Initialize the Sentry SDK for *dsn*.

    Prompts and drafts are user content, so ``send_default_pii`` stays off.

    Args:
        dsn: Sentry DSN string.  Empty string disables Sentry.
        production: Selects the ``production`` or ``development`` environment tag.

    Returns:
        True if the SDK was initialized.
    """
    if not dsn:
        return False

    sentry_sdk.init(
        dsn=dsn,
        environment="production" if production else "development",
        traces_sample_rate=0.1,
        send_default_pii=False,
        integrations=[LoggingIntegration(event_level=None, level=None)],
    )
    sentry_sdk.set_tag("service", SERVICE_NAME)
    return True


def get_sentry_processor() -> structlog.types.Processor:
    """Structlog processor forwarding ERROR events; place it before the renderer."""
    return SentryProcessor(event_level=logging.ERROR)
