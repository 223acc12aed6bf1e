# tests/test_config.py
"""
Settings and error-model tests
"""

import pytest
from pydantic import ValidationError

from purecheck.core.config import Settings
from purecheck.core.exceptions import (
    ConfigurationError, ErrorCode, ExternalServiceError, PureCheckException,
    ReferenceDataError, global_error_handler, http_status_for
)
from purecheck.engine.aggregator import ScorePolicy


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PURECHECK_ANALYZER_BACKEND", raising=False)
        settings = Settings(_env_file=None)
        assert settings.analyzer_backend == "local"
        assert (settings.penalty_high, settings.penalty_moderate, settings.penalty_unknown) == (25, 10, 3)
        assert settings.cors_origin_list == ["*"]

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("PURECHECK_ANALYZER_BACKEND", "gemini")
        monkeypatch.setenv("PURECHECK_PENALTY_HIGH", "40")
        settings = Settings(_env_file=None)
        assert settings.analyzer_backend == "gemini"
        assert settings.penalty_high == 40

    def test_penalty_order_is_validated(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, penalty_high=5, penalty_moderate=10)

    def test_unknown_backend_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, analyzer_backend="oracle")

    def test_cors_origins(self):
        settings = Settings(_env_file=None, cors_origins="https://a.example, https://b.example,")
        assert settings.cors_origin_list == ["https://a.example", "https://b.example"]

    def test_score_policy_from_settings(self):
        settings = Settings(_env_file=None, penalty_high=30, penalty_moderate=12, penalty_unknown=2)
        assert ScorePolicy.from_settings(settings) == ScorePolicy(high=30, moderate=12, unknown=2)


class TestExceptions:

    def test_to_dict(self):
        error = ReferenceDataError("cannot read", details={"path": "x.json"})
        data = error.to_dict()
        assert data["error_code"] == ErrorCode.REFERENCE_DATA_ERROR.value
        assert data["details"] == {"path": "x.json"}
        assert data["user_message"] == "Ingredient reference data is unavailable."

    def test_http_status(self):
        assert http_status_for(ConfigurationError("x")) == 500
        assert http_status_for(ExternalServiceError("x")) == 502
        assert http_status_for(ExternalServiceError("x", error_code=ErrorCode.RATE_LIMITED)) == 429

    def test_global_error_handler(self):
        handled = global_error_handler(ExternalServiceError("timeout"))
        assert handled["error"] is True
        assert handled["code"] == ErrorCode.EXTERNAL_SERVICE_ERROR.value

        handled = global_error_handler(RuntimeError("boom"))
        assert handled["code"] == ErrorCode.SYSTEM_ERROR.value
        assert handled["details"] == {"error": "boom"}

    def test_hierarchy(self):
        assert issubclass(ExternalServiceError, PureCheckException)
