# tests/test_settings.py
"""
Settings Tests - Unit Tests for Configuration and Validators

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xrate.config.settings (Settings class)
- xrate.shared.validators (validate_base_url)
- pydantic (ValidationError)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests
from pydantic import ValidationError

from xrate.config.settings import Settings
from xrate.shared.validators import validate_base_url


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("RATE_FEED_BASE_URL", "HTTP_TIMEOUT_SECONDS", "LOG_FILE", "LOG_DIR", "XRATE_LOG_STDOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestValidators:
    def test_valid_urls(self):
        assert validate_base_url("http://api.finance.xaviermedia.com/api/")
        assert validate_base_url("https://x/api/")

    def test_invalid_urls(self):
        assert not validate_base_url("")
        assert not validate_base_url("   ")
        assert not validate_base_url("ftp://x/api/")
        assert not validate_base_url("api.example.com/api/")


class TestSettings:
    def test_defaults(self, clean_env):
        s = Settings(_env_file=None)
        assert s.rate_feed_base_url == "http://api.finance.xaviermedia.com/api/"
        assert s.http_timeout_seconds is None
        assert s.log_stdout is True
        assert s.log_backup_count == 5

    def test_from_environment(self, clean_env):
        clean_env.setenv("RATE_FEED_BASE_URL", "https://rates.example.com/daily/")
        clean_env.setenv("HTTP_TIMEOUT_SECONDS", "12.5")

        s = Settings(_env_file=None)
        assert s.rate_feed_base_url == "https://rates.example.com/daily/"
        assert s.http_timeout_seconds == 12.5

    def test_rejects_bad_base_url(self, clean_env):
        clean_env.setenv("RATE_FEED_BASE_URL", "not a url")
        with pytest.raises(ValidationError, match="RATE_FEED_BASE_URL"):
            Settings(_env_file=None)

    def test_rejects_non_positive_timeout(self, clean_env):
        clean_env.setenv("HTTP_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
