"""Configuration management for LexiForge."""

from .models import ConfigurationError, Settings, ValidationResult
from .settings import configure_logging, load_settings

__all__ = [
    "ConfigurationError",
    "Settings",
    "ValidationResult",
    "configure_logging",
    "load_settings",
]
