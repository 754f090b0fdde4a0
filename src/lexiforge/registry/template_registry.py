"""Template registry: validated, read-only access to the document catalog.

The catalog is checked once when the registry is built. A malformed
catalog is a configuration error and is fatal at startup.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Union

from ..config.models import ConfigurationError, ValidationResult
from ..models.enums import DocType, RuleOperator
from ..models.fields import FieldSet
from ..models.template import DocumentTemplate, VisibilityRule
from .catalog import DOC_TEMPLATES
from .predicates import get_predicate


logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Za-z_][A-Za-z0-9_]*)\}\}")


class TemplateRegistry:
    """
    Read-only catalog of document templates.

    Templates are looked up by DocType; the registry offers no way to
    add, remove or modify templates after construction.
    """

    def __init__(self, templates: Optional[Iterable[DocumentTemplate]] = None):
        """
        Initialize and validate the registry.

        Args:
            templates: Templates to register. Defaults to the built-in catalog.

        Raises:
            ConfigurationError: If the catalog fails validation.
        """
        templates = list(DOC_TEMPLATES if templates is None else templates)
        self._validation = self.validate(templates)
        if not self._validation.is_valid:
            raise ConfigurationError(
                "Template catalog validation failed",
                validation_result=self._validation,
            )
        for warning in self._validation.warnings:
            logger.warning(warning)

        self._templates: Dict[DocType, DocumentTemplate] = {t.id: t for t in templates}
        logger.info(f"Template registry loaded with {len(self._templates)} templates")

    @property
    def validation(self) -> ValidationResult:
        """Validation result of the loaded catalog, including warnings."""
        return self._validation

    def get_template(self, doc_type: Union[DocType, str]) -> Optional[DocumentTemplate]:
        """
        Get a template by document type.

        Args:
            doc_type: DocType member or its string value.

        Returns:
            The template, or None if the type is not in the catalog.
        """
        if isinstance(doc_type, str):
            try:
                doc_type = DocType(doc_type)
            except ValueError:
                return None
        return self._templates.get(doc_type)

    def templates(self) -> List[DocumentTemplate]:
        """All templates in catalog order."""
        return list(self._templates.values())

    def __contains__(self, doc_type) -> bool:
        return self.get_template(doc_type) is not None

    def __len__(self) -> int:
        return len(self._templates)

    # =========================================================================
    # Validation
    # =========================================================================

    @classmethod
    def validate(cls, templates: List[DocumentTemplate]) -> ValidationResult:
        """Validate a list of templates without registering them."""
        result = ValidationResult(is_valid=True)

        for i, template in enumerate(templates):
            result = result.merge(cls._validate_template(template, index=i))

        ids = [t.id for t in templates if isinstance(t.id, DocType)]
        duplicates = {doc_id.value for doc_id in ids if ids.count(doc_id) > 1}
        if duplicates:
            result.add_error(f"Duplicate template IDs found: {sorted(duplicates)}")

        return result

    @classmethod
    def _validate_template(cls, template: DocumentTemplate, index: int = 0) -> ValidationResult:
        """Validate a single template definition."""
        result = ValidationResult(is_valid=True)
        prefix = f"Template [{index}]"

        if not isinstance(template.id, DocType):
            result.add_error(f"{prefix}: 'id' must be a DocType, got {template.id!r}")
            return result
        prefix = f"Template '{template.id.value}'"

        if not template.name or not template.name.strip():
            result.add_error(f"{prefix}: 'name' must be a non-empty string")

        for field_name in template.required_fields:
            if not FieldSet.is_field(field_name):
                result.add_error(f"{prefix}: Unknown required field '{field_name}'")

        clause_ids = []
        for clause in template.clauses:
            if not clause.id or not clause.id.strip():
                result.add_error(f"{prefix}: Clause with missing id (title {clause.title!r})")
                continue
            clause_ids.append(clause.id)
            clause_prefix = f"{prefix} clause '{clause.id}'"

            condition = clause.condition
            if isinstance(condition, VisibilityRule):
                if not FieldSet.is_field(condition.field):
                    result.add_error(
                        f"{clause_prefix}: Visibility rule references unknown field '{condition.field}'"
                    )
                if not isinstance(condition.operator, RuleOperator):
                    result.add_error(
                        f"{clause_prefix}: Unknown rule operator {condition.operator!r}"
                    )
            elif isinstance(condition, str):
                if get_predicate(condition) is None:
                    result.add_error(f"{clause_prefix}: Unknown predicate '{condition}'")
            elif condition is not None:
                result.add_error(
                    f"{clause_prefix}: Condition must be a VisibilityRule or predicate name"
                )

            for name in PLACEHOLDER_PATTERN.findall(clause.content):
                if not FieldSet.is_field(name):
                    result.add_warning(
                        f"{clause_prefix}: Placeholder '{{{{{name}}}}}' does not match any field"
                    )

        duplicates = {cid for cid in clause_ids if clause_ids.count(cid) > 1}
        if duplicates:
            result.add_error(f"{prefix}: Duplicate clause IDs found: {sorted(duplicates)}")

        return result


_default_registry: Optional[TemplateRegistry] = None


def get_default_registry() -> TemplateRegistry:
    """Get the process-wide registry built from the compiled-in catalog."""
    global _default_registry
    if _default_registry is None:
        _default_registry = TemplateRegistry()
    return _default_registry
