"""Unit tests for CatalogConfig and RetryPolicy."""

import pytest

from valantis.catalog.core import CatalogConfig, RetryPolicy
from valantis.catalog.core.config import DEFAULT_ENDPOINT


class TestRetryPolicy:
    """Test RetryPolicy validation and delays."""

    def test_default_retries_forever_without_delay(self):
        policy = RetryPolicy()
        assert policy.max_attempts is None
        assert policy.allows(10_000)
        assert policy.delay_for(1) == 0.0
        assert policy.delay_for(50) == 0.0

    def test_bounded_attempts(self):
        policy = RetryPolicy(max_attempts=3)
        assert policy.allows(3)
        assert not policy.allows(4)

    def test_exponential_backoff_capped(self):
        policy = RetryPolicy(backoff=0.5, multiplier=2.0, max_backoff=3.0)
        assert policy.delay_for(1) == 0.5
        assert policy.delay_for(2) == 1.0
        assert policy.delay_for(3) == 2.0
        assert policy.delay_for(4) == 3.0
        assert policy.delay_for(10) == 3.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_attempts": 0},
            {"backoff": -1.0},
            {"multiplier": 0.5},
            {"max_backoff": -0.1},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            RetryPolicy(**kwargs)


class TestCatalogConfig:
    """Test CatalogConfig defaults and environment loading."""

    def test_defaults(self):
        config = CatalogConfig()
        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.secret == "Valantis"
        assert config.page_size == 50
        assert config.retry == RetryPolicy()

    def test_page_size_must_be_positive(self):
        with pytest.raises(ValueError, match="page_size"):
            CatalogConfig(page_size=0)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError, match="timeout"):
            CatalogConfig(timeout=0)

    def test_from_env_empty_uses_defaults(self):
        assert CatalogConfig.from_env({}) == CatalogConfig()

    def test_from_env_overrides(self):
        config = CatalogConfig.from_env(
            {
                "VALANTIS_ENDPOINT": "http://localhost:8080/",
                "VALANTIS_SECRET": "Other",
                "VALANTIS_PAGE_SIZE": "10",
                "VALANTIS_TIMEOUT": "5",
                "VALANTIS_MAX_ATTEMPTS": "4",
                "VALANTIS_BACKOFF": "0.25",
            }
        )
        assert config.endpoint == "http://localhost:8080/"
        assert config.secret == "Other"
        assert config.page_size == 10
        assert config.timeout == 5.0
        assert config.retry == RetryPolicy(max_attempts=4, backoff=0.25)

    def test_from_env_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("VALANTIS_PAGE_SIZE", "7")
        assert CatalogConfig.from_env().page_size == 7
