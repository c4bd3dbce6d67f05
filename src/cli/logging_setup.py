"""Configuração de logging da CLI.

O Core só usa `logging.getLogger(__name__)`; quem decide handlers e nível
é a borda (CLI), uma única vez por processo.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> None:
    """Envia logs para stderr via Rich, sem misturar com a saída do menu."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[handler],
        force=True,
    )
