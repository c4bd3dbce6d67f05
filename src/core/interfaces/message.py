"""Contrato dos formatadores de mensagem."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageFormatter(Protocol):
    """Formata uma mensagem para `name`; função pura do nome."""

    def format(self, name: str) -> str:
        ...
