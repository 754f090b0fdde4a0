"""Data models and enums for LexiForge."""

from .enums import (
    AuditAction,
    BillingType,
    ClauseTag,
    DocType,
    RuleOperator,
    UserRole,
)
from .fields import FieldSet, PLACEHOLDER_LABELS
from .template import (
    ClauseDefinition,
    Condition,
    DocumentTemplate,
    ResolutionResult,
    ResolvedSection,
    VisibilityRule,
)

__all__ = [
    # Enums
    "AuditAction",
    "BillingType",
    "ClauseTag",
    "DocType",
    "RuleOperator",
    "UserRole",
    # Form data
    "FieldSet",
    "PLACEHOLDER_LABELS",
    # Template models
    "ClauseDefinition",
    "Condition",
    "DocumentTemplate",
    "VisibilityRule",
    # Resolution models
    "ResolvedSection",
    "ResolutionResult",
]
