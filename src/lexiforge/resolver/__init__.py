"""Template resolution for LexiForge."""

from .template_resolver import TemplateResolver

__all__ = ["TemplateResolver"]
