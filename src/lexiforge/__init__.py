"""
LexiForge Document Automation

Assembles legal documents from conditional clause templates and tracks
an audit trail and version history of each drafting session.
"""

__version__ = "0.1.0"

# Export main components
from .models.enums import (
    AuditAction,
    BillingType,
    ClauseTag,
    DocType,
    RuleOperator,
    UserRole,
)
from .models.fields import FieldSet, PLACEHOLDER_LABELS
from .models.template import (
    ClauseDefinition,
    DocumentTemplate,
    ResolutionResult,
    ResolvedSection,
    VisibilityRule,
)
from .exceptions import (
    ClauseNotFoundError,
    FieldValueError,
    LexiForgeError,
    UnknownDocumentTypeError,
    UnknownFieldError,
)
from .config import (
    ConfigurationError,
    Settings,
    ValidationResult,
    configure_logging,
    load_settings,
)
from .registry import TemplateRegistry, get_default_registry, register_predicate
from .resolver import TemplateResolver
from .interfaces.audit import AuditEntry, DocumentVersion, IAuditLedger, IVersionStore
from .interfaces.explainer import IClauseExplainer
from .audit import AuditLedger, VersionStore
from .explain import GeminiClauseExplainer
from .session import SessionContext, SessionController
from .export import DocxExporter, PreviewRenderer

__all__ = [
    "AuditAction",
    "BillingType",
    "ClauseTag",
    "DocType",
    "RuleOperator",
    "UserRole",
    "FieldSet",
    "PLACEHOLDER_LABELS",
    "ClauseDefinition",
    "DocumentTemplate",
    "ResolutionResult",
    "ResolvedSection",
    "VisibilityRule",
    "ClauseNotFoundError",
    "FieldValueError",
    "LexiForgeError",
    "UnknownDocumentTypeError",
    "UnknownFieldError",
    "ConfigurationError",
    "Settings",
    "ValidationResult",
    "configure_logging",
    "load_settings",
    "TemplateRegistry",
    "get_default_registry",
    "register_predicate",
    "TemplateResolver",
    "AuditEntry",
    "DocumentVersion",
    "IAuditLedger",
    "IVersionStore",
    "IClauseExplainer",
    "AuditLedger",
    "VersionStore",
    "GeminiClauseExplainer",
    "SessionContext",
    "SessionController",
    "DocxExporter",
    "PreviewRenderer",
]
