"""Enumerations for the LexiForge document assembly system."""

from enum import Enum


class DocType(Enum):
    """Document types available in the template catalog."""
    RETAINER = "retainer"
    END_REP = "end_rep"
    COLLECTION = "collection"
    FDD_REVIEW = "fdd_review"


class BillingType(Enum):
    """Fee arrangements supported by the retainer agreement."""
    HOURLY = "hourly"
    FLAT_FEE = "flat_fee"


class UserRole(Enum):
    """Session roles. Informational only; used for audit actor labels."""
    ADMIN = "Admin"
    ASSOCIATE = "Legal Associate"

    @property
    def actor_label(self) -> str:
        """Label recorded as the actor of audit entries."""
        if self is UserRole.ADMIN:
            return "Admin (Legal Lead)"
        return "Associate (Drafting)"

    def toggled(self) -> "UserRole":
        return UserRole.ASSOCIATE if self is UserRole.ADMIN else UserRole.ADMIN


class ClauseTag(Enum):
    """Classification of clauses by what drives their inclusion."""
    STANDARD = "standard"
    JURISDICTION = "jurisdiction"
    BILLING = "billing"
    OPTIONAL = "optional"


class RuleOperator(Enum):
    """Operators for data-driven clause visibility rules."""
    EQUALS = "equals"
    CONTAINS = "contains"  # case-insensitive substring
    IS_TRUE = "is_true"


class AuditAction(Enum):
    """Fixed action labels recorded in the audit ledger."""
    SESSION_INITIATED = "Session Initiated"
    MODIFIED_FIELD = "Modified Field"
    JURISDICTION_CHANGE = "Jurisdiction Change"
    SAVED_VERSION = "Saved Version"
    RESTORED_VERSION = "Restored Version"
    SECURITY_ELEVATION = "Security Elevation"
