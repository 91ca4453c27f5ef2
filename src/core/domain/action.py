"""Actions supported by the authentication helper.

Keeping the enum in the domain layer lets the CLI, the models and the
translator share a single source of truth without circular imports.
"""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """What the user wants the helper to do with the cached token."""

    ACQUIRE = "acquire"
    CLEAR = "clear"

    def past_tense(self) -> str:
        """Verb used in the confirmation message."""

        return "Cleared" if self is Action.CLEAR else "Acquired"
