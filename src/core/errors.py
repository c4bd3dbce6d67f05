"""Erros tipados do Core.

Cada componente escolhe sua convenção: o interpretador nunca propaga erros
(colapsa em `INVALID_COMMAND`), a fábrica de mensagens lança
`InvalidArgumentError` e o adaptador de desconto não tem falhas.
"""

from __future__ import annotations


class PadroesError(Exception):
    """Base para erros do domínio."""


class InvalidArgumentError(PadroesError, ValueError):
    """Argumento fora do conjunto aceito (p.ex. tipo de mensagem desconhecido)."""


class ResourceLimitError(PadroesError):
    """Operação produziria uma saída acima do limite configurado."""

    def __init__(self, requested: int, limit: int) -> None:
        super().__init__(f"Saída de {requested} caracteres excede o limite de {limit}.")
        self.requested = requested
        self.limit = limit
