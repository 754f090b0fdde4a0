"""Form data model: the FieldSet driving one document's generation."""

import copy
from dataclasses import asdict, dataclass, field, fields
from datetime import date
from typing import Any, Dict, List, Mapping

from ..exceptions import FieldValueError, UnknownFieldError
from .enums import BillingType


def _today() -> str:
    return date.today().isoformat()


@dataclass
class FieldSet:
    """
    Complete set of user-supplied values for a document.

    Every key is always present. A missing value is represented by an
    empty string or ``False``, never by an absent attribute.
    """
    # Client
    client_name: str = ""
    client_address: str = ""
    client_email: str = ""
    is_business_entity: bool = False
    # Attorney / firm
    attorney_name: str = "John Doe, Esq."
    firm_name: str = "LexiForge Legal Group"
    # Matter
    matter_description: str = ""
    jurisdiction: str = "New York"
    effective_date: str = field(default_factory=_today)
    # Financials
    billing_type: BillingType = BillingType.HOURLY
    hourly_rate: str = "350"
    retainer_amount: str = "2500"
    flat_fee_amount: str = "5000"
    # Debt collection
    total_debt: str = ""
    due_date: str = ""
    # Clause toggles
    include_termination_clause: bool = True
    include_arbitration_clause: bool = False

    def __post_init__(self):
        if isinstance(self.billing_type, str):
            self.billing_type = _coerce_billing_type(self.billing_type)

    @classmethod
    def field_names(cls) -> List[str]:
        """All field names in declaration order."""
        return [f.name for f in fields(cls)]

    @classmethod
    def is_field(cls, name: str) -> bool:
        return name in _FIELD_TYPES

    def get(self, name: str) -> Any:
        """Get a field value by name."""
        if name not in _FIELD_TYPES:
            raise UnknownFieldError(f"Unknown field: {name}", field_name=name)
        return getattr(self, name)

    def set(self, name: str, value: Any) -> None:
        """
        Set a field value by name.

        Raises:
            UnknownFieldError: If ``name`` is not a FieldSet key.
            FieldValueError: If ``value`` has the wrong type for the field.
        """
        if name not in _FIELD_TYPES:
            raise UnknownFieldError(f"Unknown field: {name}", field_name=name)
        setattr(self, name, _coerce(name, value))

    def update(self, changes: Mapping[str, Any]) -> None:
        """Apply several changes. Validates all of them before writing any."""
        coerced = {}
        for name, value in changes.items():
            if name not in _FIELD_TYPES:
                raise UnknownFieldError(f"Unknown field: {name}", field_name=name)
            coerced[name] = _coerce(name, value)
        for name, value in coerced.items():
            setattr(self, name, value)

    def copy(self) -> "FieldSet":
        """Return an independent deep copy."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        data = asdict(self)
        data["billing_type"] = self.billing_type.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldSet":
        """Build a FieldSet from a dict; keys not given keep their defaults."""
        field_set = cls()
        field_set.update(data)
        return field_set


_FIELD_TYPES = {
    "client_name": str,
    "client_address": str,
    "client_email": str,
    "is_business_entity": bool,
    "attorney_name": str,
    "firm_name": str,
    "matter_description": str,
    "jurisdiction": str,
    "effective_date": str,
    "billing_type": BillingType,
    "hourly_rate": str,
    "retainer_amount": str,
    "flat_fee_amount": str,
    "total_debt": str,
    "due_date": str,
    "include_termination_clause": bool,
    "include_arbitration_clause": bool,
}

# Fields rendered as a bracketed label when empty, so gaps in the
# narrative stay visible in the document text.
PLACEHOLDER_LABELS: Dict[str, str] = {
    "client_name": "[CLIENT NAME]",
    "client_address": "[CLIENT ADDRESS]",
    "matter_description": "[MATTER DESCRIPTION]",
    "total_debt": "[AMOUNT]",
    "due_date": "[DUE DATE]",
}


def _coerce_billing_type(value: str) -> BillingType:
    try:
        return BillingType(value)
    except ValueError:
        raise FieldValueError(
            f"Invalid billing type: {value!r}",
            field_name="billing_type",
            details={"allowed": [b.value for b in BillingType]},
        ) from None


def _coerce(name: str, value: Any) -> Any:
    expected = _FIELD_TYPES[name]
    if expected is BillingType:
        if isinstance(value, BillingType):
            return value
        if isinstance(value, str):
            return _coerce_billing_type(value)
    elif expected is bool:
        if isinstance(value, bool):
            return value
    elif expected is str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
    raise FieldValueError(
        f"Field '{name}' expects {expected.__name__}, got {type(value).__name__}",
        field_name=name,
    )

