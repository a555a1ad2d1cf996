import os

from dotenv import load_dotenv

from catalog_scraper.errors import ConfigError

load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


def _number(name: str, default: str, cast):
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a {cast.__name__}, got {raw!r}")


class Config:
    def __init__(self):
        # Transport
        self.REQUEST_TIMEOUT = _number("REQUEST_TIMEOUT", "30", int)
        self.FETCH_DELAY = _number("FETCH_DELAY", "2.0", float)
        self.USER_AGENT = os.environ.get("USER_AGENT", DEFAULT_USER_AGENT)

        # Retry configuration
        self.MAX_RETRIES = _number("MAX_RETRIES", "3", int)
        self.RETRY_BACKOFF = _number("RETRY_BACKOFF", "1.5", float)

        # Extraction
        self.IMAGE_RESOLUTION = os.environ.get("IMAGE_RESOLUTION", "832/832")
        self.ALLOWED_HOSTS = [
            host.strip().lower()
            for host in os.environ.get("ALLOWED_HOSTS", "flipkart.com").split(",")
            if host.strip()
        ]

        # Error tracking
        self.SENTRY_DSN = os.environ.get("SENTRY_DSN", "")
        self.ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

        # Application settings
        self.DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
        self.PORT = _number("PORT", "3001", int)

    @property
    def has_sentry(self) -> bool:
        return bool(self.SENTRY_DSN)


# Create an instance
config = Config()
