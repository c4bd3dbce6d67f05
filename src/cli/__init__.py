"""Borda de entrada: CLI Typer + renderização Rich."""
