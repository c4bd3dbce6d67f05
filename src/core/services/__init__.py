"""Serviços do Core.

Cada módulo implementa um desafio: `interpreter` (Interpreter),
`message_factory` (Factory Method). O Adapter vive em `adapters/`.
"""
