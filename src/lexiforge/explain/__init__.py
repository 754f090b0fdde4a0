"""Clause explanation service adapter for LexiForge."""

from .clause_explainer import (
    EMPTY_RESPONSE_MESSAGE,
    ERROR_MESSAGE,
    GeminiClauseExplainer,
    build_prompt,
)

__all__ = [
    "EMPTY_RESPONSE_MESSAGE",
    "ERROR_MESSAGE",
    "GeminiClauseExplainer",
    "build_prompt",
]
