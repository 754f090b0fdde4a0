"""Audit trail and version history for LexiForge."""

from .audit_ledger import AuditLedger, DEFAULT_CAPACITY
from .version_store import VersionStore

__all__ = [
    "AuditLedger",
    "DEFAULT_CAPACITY",
    "VersionStore",
]
