"""
Bounded retries with exponential backoff for page fetches.
"""
import asyncio
import functools
from typing import Callable, Optional

from catalog_scraper.errors import RetryExhaustedError
from catalog_scraper.config import config
from catalog_scraper.logger import logger
from catalog_scraper.sentry import capture_retry_exhaustion


def async_retry(
    max_retries: Optional[int] = None,
    backoff_factor: Optional[float] = None,
    exceptions: tuple = (Exception,)
):
    """
    Retry decorator for async functions.

    Args:
        max_retries: Maximum retry attempts (default from config)
        backoff_factor: Exponential backoff factor (default from config)
        exceptions: Exceptions to catch and retry; anything else propagates
            on the first attempt
    """
    def decorator(func: Callable):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            max_tries = config.MAX_RETRIES if max_retries is None else max_retries
            backoff = config.RETRY_BACKOFF if backoff_factor is None else backoff_factor

            for attempt in range(max_tries + 1):
                try:
                    if attempt > 0:
                        logger.info(f"Retry attempt {attempt}/{max_tries} for {func.__name__}")

                    return await func(*args, **kwargs)

                except exceptions as e:
                    if attempt == max_tries:
                        logger.error(f"Max retries ({max_tries}) exhausted for {func.__name__}: {e}")
                        capture_retry_exhaustion(func.__name__, attempt + 1, str(e))
                        error = RetryExhaustedError(
                            f"{func.__name__} failed after {max_tries} retries: {e}",
                            url=getattr(e, "url", "")
                        )
                        error._retry_context = {"operation": func.__name__, "attempts": attempt + 1}
                        raise error from e

                    delay = backoff ** attempt
                    logger.warning(
                        f"Attempt {attempt + 1}/{max_tries + 1} failed for {func.__name__}. "
                        f"Retrying in {delay:.2f}s. Error: {e}"
                    )

                    await asyncio.sleep(delay)

        return wrapper
    return decorator
