"""
Structured logging and Sentry event enrichment.
"""
import json
import logging
from unittest.mock import patch

from catalog_scraper.errors import RetryExhaustedError
from catalog_scraper.logger import StructuredFormatter
from catalog_scraper.sentry import _enrich_sentry_event, capture_transport_error, initialize_sentry


def make_record(**extra):
    record = logging.LogRecord("catalog_scraper.test", logging.INFO, __file__, 10, "Scraped %s", ("x",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_structured_formatter_emits_json():
    payload = json.loads(StructuredFormatter().format(make_record(url="https://www.flipkart.com/p")))

    assert payload["level"] == "INFO"
    assert payload["message"] == "Scraped x"
    assert payload["url"] == "https://www.flipkart.com/p"
    assert "timestamp" in payload


def test_enrich_sentry_event():
    error = RetryExhaustedError("down")
    error._retry_context = {"operation": "_get", "attempts": 4}
    event = {"exception": {"values": [{"type": "RetryExhaustedError", "module": "catalog_scraper.errors"}]}}

    enriched = _enrich_sentry_event(event, {"exc_info": (type(error), error, None)})

    assert enriched["tags"]["system"] == "catalog-scraper"
    assert enriched["fingerprint"][1] == "RetryExhaustedError"
    assert enriched["extra"]["retry_context"]["attempts"] == 4


def test_sentry_is_noop_without_dsn():
    with patch("catalog_scraper.config.config.SENTRY_DSN", ""), \
         patch("catalog_scraper.sentry.sentry_sdk") as sdk:
        initialize_sentry()
        capture_transport_error("https://www.flipkart.com/p", RetryExhaustedError("down"))

    sdk.init.assert_not_called()
    sdk.capture_exception.assert_not_called()
