"""Tests for MathConfig."""

import pydantic
import pytest

from safemath.config import DEFAULT_CONFIG, DEFAULT_EPSILON, DEFAULT_MAX_SERIES_TERMS, MathConfig


class TestMathConfig:
    """Tests for defaults, validation and environment loading."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.epsilon == DEFAULT_EPSILON == 10**6
        assert DEFAULT_CONFIG.max_series_terms == DEFAULT_MAX_SERIES_TERMS

    def test_frozen(self):
        with pytest.raises(pydantic.ValidationError):
            DEFAULT_CONFIG.epsilon = 1  # type: ignore[misc]

    @pytest.mark.parametrize("field", ["epsilon", "max_series_terms"])
    def test_rejects_non_positive(self, field):
        with pytest.raises(pydantic.ValidationError):
            MathConfig(**{field: 0})

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SAFEMATH_EPSILON", "1000")
        monkeypatch.setenv("SAFEMATH_MAX_SERIES_TERMS", "64")
        config = MathConfig.from_env()
        assert config.epsilon == 1000
        assert config.max_series_terms == 64

    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("SAFEMATH_EPSILON", raising=False)
        monkeypatch.delenv("SAFEMATH_MAX_SERIES_TERMS", raising=False)
        assert MathConfig.from_env() == DEFAULT_CONFIG

    def test_from_env_invalid(self, monkeypatch):
        monkeypatch.setenv("SAFEMATH_EPSILON", "tiny")
        with pytest.raises(pydantic.ValidationError):
            MathConfig.from_env()
