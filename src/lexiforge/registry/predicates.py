"""Clause visibility evaluation: data-driven rules and named predicates."""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from ..models.enums import RuleOperator
from ..models.fields import FieldSet
from ..models.template import Condition, VisibilityRule


logger = logging.getLogger(__name__)

Predicate = Callable[[FieldSet], bool]

_PREDICATES: Dict[str, Predicate] = {}


def register_predicate(name: str) -> Callable[[Predicate], Predicate]:
    """
    Register a named visibility predicate.

    Used for conditions that a single VisibilityRule cannot express.
    Predicates must be pure functions of the FieldSet.
    """
    def decorator(func: Predicate) -> Predicate:
        if name in _PREDICATES:
            raise ValueError(f"Predicate already registered: {name}")
        _PREDICATES[name] = func
        return func
    return decorator


def get_predicate(name: str) -> Optional[Predicate]:
    return _PREDICATES.get(name)


def _normalize(value):
    return value.value if isinstance(value, Enum) else value


def evaluate_rule(rule: VisibilityRule, field_set: FieldSet) -> bool:
    """Evaluate a single visibility rule against the field set."""
    actual = _normalize(field_set.get(rule.field))
    if rule.operator is RuleOperator.IS_TRUE:
        return bool(actual)
    if rule.operator is RuleOperator.EQUALS:
        return actual == _normalize(rule.value)
    if rule.operator is RuleOperator.CONTAINS:
        return str(rule.value).lower() in str(actual or "").lower()
    return False


def is_visible(condition: Optional[Condition], field_set: FieldSet) -> bool:
    """
    Decide whether a clause with ``condition`` is included.

    Total over any FieldSet: a failing predicate counts as not visible.
    """
    if condition is None:
        return True
    try:
        if isinstance(condition, VisibilityRule):
            return evaluate_rule(condition, field_set)
        predicate = _PREDICATES.get(condition)
        if predicate is None:
            logger.warning(f"Unknown visibility predicate: {condition}")
            return False
        return bool(predicate(field_set))
    except Exception as e:
        logger.warning(f"Visibility condition {condition!r} failed: {e}")
        return False


@register_predicate("business_entity_client")
def _business_entity_client(field_set: FieldSet) -> bool:
    return field_set.is_business_entity and bool(field_set.client_name.strip())
