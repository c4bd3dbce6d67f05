"""Message types supported by the message factory.

Kept in the domain layer so the factory and the CLI share a single source
of truth for the accepted keys.
"""

from __future__ import annotations

from enum import Enum


class MessageType(str, Enum):
    """Greeting variants, keyed by their lowercase name."""

    BOAS_VINDAS = "boasvindas"
    DESPEDIDA = "despedida"
    AGRADECIMENTO = "agradecimento"

    @classmethod
    def from_key(cls, key: str) -> "MessageType | None":
        """Resolve a case-insensitive key; `None` when unknown."""

        try:
            return cls(key.lower())
        except ValueError:
            return None

    @classmethod
    def keys(cls) -> list[str]:
        """Accepted keys, in declaration order (for prompts)."""

        return [member.value for member in cls]
