"""Interfaces/abstrações do Core.

Por que:
- Define contratos (Protocol) implementados por adaptadores concretos.
- Permite inverter dependências: o Core depende de abstrações.
"""
