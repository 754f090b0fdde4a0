"""Unit tests for settings loading."""

import logging

import pytest

from lexiforge.config import ConfigurationError, Settings, configure_logging, load_settings


class TestLoadSettings:
    """Tests for environment-backed settings."""

    def test_defaults_with_empty_env(self):
        settings = load_settings({})

        assert settings == Settings()
        assert settings.api_key is None
        assert settings.audit_capacity == 50
        assert settings.audited_fields == ("client_name", "jurisdiction")

    def test_reads_variables(self):
        settings = load_settings({
            "GOOGLE_API_KEY": "abc",
            "LEXIFORGE_MODEL": "gemini-pro",
            "LEXIFORGE_EXPLAIN_TIMEOUT": "12.5",
            "LEXIFORGE_AUDIT_CAPACITY": "20",
            "LEXIFORGE_AUDITED_FIELDS": "client_name, billing_type",
            "LEXIFORGE_FIRM_NAME": "Smith & Co",
            "LEXIFORGE_JURISDICTION": "California",
            "LEXIFORGE_OUTPUT_DIR": "/tmp/out",
            "LEXIFORGE_LOG_LEVEL": "debug",
        })

        assert settings.api_key == "abc"
        assert settings.model_name == "gemini-pro"
        assert settings.explain_timeout == 12.5
        assert settings.audit_capacity == 20
        assert settings.audited_fields == ("client_name", "billing_type")
        assert settings.firm_name == "Smith & Co"
        assert settings.jurisdiction == "California"
        assert settings.output_dir == "/tmp/out"
        assert settings.log_level == "DEBUG"

    def test_api_key_alias(self):
        assert load_settings({"API_KEY": "xyz"}).api_key == "xyz"

    def test_empty_audited_fields_disables_field_audit(self):
        assert load_settings({"LEXIFORGE_AUDITED_FIELDS": ""}).audited_fields == ()

    @pytest.mark.parametrize("env", [
        {"LEXIFORGE_EXPLAIN_TIMEOUT": "soon"},
        {"LEXIFORGE_EXPLAIN_TIMEOUT": "-1"},
        {"LEXIFORGE_AUDIT_CAPACITY": "many"},
        {"LEXIFORGE_AUDIT_CAPACITY": "0"},
        {"LEXIFORGE_AUDITED_FIELDS": "client_name,nickname"},
        {"LEXIFORGE_LOG_LEVEL": "LOUD"},
    ])
    def test_invalid_values(self, env):
        with pytest.raises(ConfigurationError) as exc_info:
            load_settings(env)
        assert not exc_info.value.validation_result.is_valid
        assert exc_info.value.validation_result.errors

    def test_configure_logging_sets_level(self):
        configure_logging(Settings(log_level="WARNING"))
        assert logging.getLogger("lexiforge").level == logging.WARNING
