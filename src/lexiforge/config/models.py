"""Data models for configuration and catalog validation."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


@dataclass
class Settings:
    """
    Runtime settings for a LexiForge process.

    Loaded from environment variables by ``load_settings``; every value
    has a default so the library works without any configuration.
    """
    # AI clause explanation
    api_key: Optional[str] = None
    model_name: str = "gemini-2.5-flash"
    explain_timeout: float = 30.0

    # Audit ledger
    audit_capacity: int = 50
    audited_fields: Tuple[str, ...] = ("client_name", "jurisdiction")

    # FieldSet defaults
    firm_name: str = "LexiForge Legal Group"
    attorney_name: str = "John Doe, Esq."
    jurisdiction: str = "New York"

    # Export
    output_dir: str = "data/generated"

    log_level: str = "INFO"
