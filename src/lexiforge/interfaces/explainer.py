"""Clause explanation interface for LexiForge."""

from abc import ABC, abstractmethod
from typing import Optional


class IClauseExplainer(ABC):
    """
    Abstract interface to the plain-English clause explanation service.

    Implementations never raise: every failure is converted into a
    user-facing message string.
    """

    @abstractmethod
    async def explain(self, title: str, content: str, fallback: Optional[str] = None) -> str:
        """
        Explain a clause in plain English.

        Args:
            title: Clause title.
            content: Clause text.
            fallback: Static explanation to use when the service is unavailable.

        Returns:
            The explanation, or a human-readable error message.
        """
        pass
