"""
Sentry initialization for centralized error tracking.
Observes failures at the edges, never changes what the scraper returns.
"""
import logging
from typing import Dict, Any, Optional

import sentry_sdk
from sentry_sdk.integrations.asyncio import AsyncioIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from catalog_scraper.config import config
from catalog_scraper.logger import logger


def initialize_sentry():
    """Initialize Sentry SDK if DSN is configured."""
    if not config.has_sentry:
        logger.info("Sentry not configured, skipping initialization")
        return

    try:
        sentry_sdk.init(
            dsn=config.SENTRY_DSN,
            environment=config.ENVIRONMENT,
            integrations=[
                AsyncioIntegration(),
                LoggingIntegration(level=logging.INFO, event_level=logging.ERROR)
            ],
            traces_sample_rate=0.1,
            send_default_pii=False,
            debug=False,
            before_send=_enrich_sentry_event
        )

        logger.info("Sentry initialized for error tracking")

    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")


def _enrich_sentry_event(event: Dict[str, Any], hint: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Tag events and group transport failures by type and upstream status."""
    event.setdefault("tags", {})
    event["tags"]["system"] = "catalog-scraper"
    event["tags"]["environment"] = config.ENVIRONMENT

    if "exception" in event:
        exceptions = event["exception"].get("values", [])
        if exceptions:
            exc = exceptions[0]
            event["fingerprint"] = [
                "{{ default }}",
                exc.get("type", "Unknown"),
                exc.get("module", "unknown")
            ]

    if hint and "exc_info" in hint:
        exc = hint["exc_info"][1]
        if hasattr(exc, "_retry_context"):
            event.setdefault("extra", {})
            event["extra"]["retry_context"] = exc._retry_context

    return event


def capture_retry_exhaustion(operation: str, attempts: int, error: str):
    """Capture retry exhaustion in Sentry."""
    if not config.has_sentry:
        return

    with sentry_sdk.new_scope() as scope:
        scope.set_tag("operation", operation)
        scope.set_tag("retry_exhausted", "true")
        scope.set_extra("attempts", attempts)
        scope.set_extra("error", error)
        scope.set_level("error")

        sentry_sdk.capture_message(
            f"Retry exhausted for {operation} after {attempts} attempts",
            "error"
        )


def capture_transport_error(url: str, error: Exception):
    """Capture a failed product page fetch in Sentry."""
    if not config.has_sentry:
        return

    with sentry_sdk.new_scope() as scope:
        scope.set_tag("error_type", "transport")
        scope.set_tag("upstream_status", str(getattr(error, "upstream_status", error.__class__.__name__)))
        scope.set_extra("url", url)
        scope.set_level("warning")

        sentry_sdk.capture_exception(error)
