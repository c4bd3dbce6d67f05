"""Adaptador: `DiscountCalculator` -> `ExternalDiscountSystem`.

Transparente: o resultado é exatamente o da rotina externa, sem
arredondamento nem validação (arredondar é responsabilidade de quem exibe).
"""

from __future__ import annotations

from adapters.legacy_discount import ExternalDiscountSystem
from core.interfaces.discount import DiscountCalculator


class DiscountAdapter(DiscountCalculator):
    """Expõe `calculate` delegando para `apply_percentage_discount`."""

    def __init__(self, external: ExternalDiscountSystem | None = None) -> None:
        self._external = external or ExternalDiscountSystem()

    def calculate(self, amount: float, percentage: float) -> float:
        return self._external.apply_percentage_discount(amount, percentage)
