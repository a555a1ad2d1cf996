import pytest

from catalog_scraper.config import Config
from catalog_scraper.errors import ConfigError

ENV_KEYS = [
    "REQUEST_TIMEOUT", "FETCH_DELAY", "MAX_RETRIES", "RETRY_BACKOFF", "IMAGE_RESOLUTION",
    "ALLOWED_HOSTS", "SENTRY_DSN", "DEBUG", "LOG_LEVEL", "PORT",
]


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_config_defaults(clean_env):
    config = Config()

    assert config.REQUEST_TIMEOUT == 30
    assert config.MAX_RETRIES == 3
    assert config.RETRY_BACKOFF == 1.5
    assert config.FETCH_DELAY == 2.0
    assert config.IMAGE_RESOLUTION == "832/832"
    assert config.ALLOWED_HOSTS == ["flipkart.com"]
    assert config.DEBUG is False
    assert config.LOG_LEVEL == "INFO"
    assert config.PORT == 3001
    assert not config.has_sentry


def test_config_environment(clean_env):
    clean_env.setenv("MAX_RETRIES", "5")
    clean_env.setenv("ALLOWED_HOSTS", "flipkart.com, Shopsy.in ,")
    clean_env.setenv("SENTRY_DSN", "https://key@sentry.example.com/1")
    clean_env.setenv("DEBUG", "True")

    config = Config()

    assert config.MAX_RETRIES == 5
    assert config.ALLOWED_HOSTS == ["flipkart.com", "shopsy.in"]
    assert config.has_sentry
    assert config.DEBUG is True


def test_invalid_number_raises_config_error(clean_env):
    clean_env.setenv("REQUEST_TIMEOUT", "soon")

    with pytest.raises(ConfigError):
        Config()
