"""Modelos e entidades do domínio.

Por que:
- Aqui vivem as estruturas de dados puras e estritas (Pydantic v2).
- O domínio não conhece CLI nem terminal: apenas conceitos do problema.
"""
