"""Adaptadores concretos.

Por que um pacote:
- Agrupa o sistema "externo" e o adaptador que o expõe como
  `core.interfaces.discount.DiscountCalculator`.
"""
