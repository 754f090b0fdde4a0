"""Abstract interfaces for LexiForge components."""

from .audit import AuditEntry, DocumentVersion, IAuditLedger, IVersionStore
from .explainer import IClauseExplainer

__all__ = [
    "AuditEntry",
    "DocumentVersion",
    "IAuditLedger",
    "IVersionStore",
    "IClauseExplainer",
]
