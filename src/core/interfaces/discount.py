"""Contrato de cálculo de desconto.

Por que Protocol:
- Define a interface-alvo (`calculate`) sem herança rígida.
- O sistema externo tem outra assinatura; o adaptador faz a tradução e
  continua intercambiável/testável.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DiscountCalculator(Protocol):
    """Interface-alvo consumida pela CLI."""

    def calculate(self, amount: float, percentage: float) -> float:
        """Devolve `amount` com `percentage` por cento de desconto."""

        ...
