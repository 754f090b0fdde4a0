"""Session orchestration for LexiForge."""

from .session_controller import SessionContext, SessionController, new_field_set

__all__ = ["SessionContext", "SessionController", "new_field_set"]
