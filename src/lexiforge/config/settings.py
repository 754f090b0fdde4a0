"""Environment-backed settings loading and logging setup."""

import logging
import os
from typing import Mapping, Optional

from ..models.fields import FieldSet
from .models import ConfigurationError, Settings, ValidationResult


ENV_PREFIX = "LEXIFORGE_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _get_float(env: Mapping[str, str], name: str, default: float, result: ValidationResult) -> float:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError:
        result.add_error(f"{name} must be a number, got {value!r}")
        return default
    if parsed <= 0:
        result.add_error(f"{name} must be positive")
    return parsed


def _get_int(env: Mapping[str, str], name: str, default: int, result: ValidationResult) -> int:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value)
    except ValueError:
        result.add_error(f"{name} must be an integer, got {value!r}")
        return default
    if parsed < 1:
        result.add_error(f"{name} must be at least 1")
    return parsed


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Populated Settings.

    Raises:
        ConfigurationError: If a variable holds an invalid value.
    """
    env = os.environ if env is None else env
    defaults = Settings()
    result = ValidationResult(is_valid=True)

    audited = defaults.audited_fields
    raw_audited = env.get(f"{ENV_PREFIX}AUDITED_FIELDS")
    if raw_audited is not None:
        audited = tuple(name.strip() for name in raw_audited.split(",") if name.strip())
        unknown = [name for name in audited if not FieldSet.is_field(name)]
        if unknown:
            result.add_error(f"{ENV_PREFIX}AUDITED_FIELDS names unknown fields: {unknown}")

    log_level = env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).strip().upper()
    if log_level not in _LOG_LEVELS:
        result.add_error(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: {log_level!r}")

    settings = Settings(
        api_key=env.get("GOOGLE_API_KEY") or env.get("API_KEY") or None,
        model_name=env.get(f"{ENV_PREFIX}MODEL", defaults.model_name),
        explain_timeout=_get_float(env, f"{ENV_PREFIX}EXPLAIN_TIMEOUT", defaults.explain_timeout, result),
        audit_capacity=_get_int(env, f"{ENV_PREFIX}AUDIT_CAPACITY", defaults.audit_capacity, result),
        audited_fields=audited,
        firm_name=env.get(f"{ENV_PREFIX}FIRM_NAME", defaults.firm_name),
        attorney_name=env.get(f"{ENV_PREFIX}ATTORNEY_NAME", defaults.attorney_name),
        jurisdiction=env.get(f"{ENV_PREFIX}JURISDICTION", defaults.jurisdiction),
        output_dir=env.get(f"{ENV_PREFIX}OUTPUT_DIR", defaults.output_dir),
        log_level=log_level,
    )

    if not result.is_valid:
        raise ConfigurationError("Invalid LexiForge settings", validation_result=result)
    return settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level to the ``lexiforge`` logger tree."""
    settings = settings or load_settings()
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("lexiforge").setLevel(settings.log_level)
