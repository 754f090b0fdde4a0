"""Template registry for LexiForge."""

from .catalog import DOC_TEMPLATES
from .predicates import evaluate_rule, is_visible, register_predicate
from .template_registry import (
    PLACEHOLDER_PATTERN,
    TemplateRegistry,
    get_default_registry,
)

__all__ = [
    "DOC_TEMPLATES",
    "PLACEHOLDER_PATTERN",
    "TemplateRegistry",
    "evaluate_rule",
    "get_default_registry",
    "is_visible",
    "register_predicate",
]
