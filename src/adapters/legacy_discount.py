"""Sistema de desconto "externo".

Por que um módulo próprio:
- Representa código que não controlamos: nome e assinatura são dele, não
  da interface-alvo `DiscountCalculator`.
- Mantém a fronteira visível para testes e documentação.
"""

from __future__ import annotations


class ExternalDiscountSystem:
    """Rotina legada de desconto percentual."""

    def apply_percentage_discount(self, amount: float, percentage: float) -> float:
        return amount - (amount * percentage / 100)
