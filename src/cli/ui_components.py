"""Componentes de UI para a CLI (Rich).

Por que separar componentes:
- Evita misturar a lógica dos comandos com detalhes visuais.
- Menu interativo e sub-comandos exibem exatamente os mesmos textos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

MENU_OPTIONS: dict[str, str] = {
    "1": "Editor de Texto Simples (Interpreter)",
    "2": "Gerador de Mensagens (Factory Method)",
    "3": "Sistema de Desconto Externo (Adapter)",
    "0": "Sair",
}


def print_banner(console: Console) -> None:
    """Imprime o banner de boas-vindas (desativável via `PADROES_SHOW_BANNER`)."""

    title = Text("Projeto Padrões", style="bold cyan")
    subtitle = Text("Interpreter • Factory Method • Adapter", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_menu_table() -> Table:
    table = Table(title="Escolha o desafio para executar", show_header=False)
    table.add_column("Opção", style="cyan", no_wrap=True)
    table.add_column("Desafio", style="white")
    for key, label in MENU_OPTIONS.items():
        table.add_row(key, label)
    return table


def print_section(console: Console, number: int) -> None:
    console.print(f"\n[bold]--- Desafio {number}: {MENU_OPTIONS[str(number)]} ---[/bold]")


def echo(console: Console, text: str) -> None:
    """Imprime texto do usuário literalmente (sem markup, sem quebra de linha)."""

    console.print(text, markup=False, highlight=False, soft_wrap=True)


def format_interpreter_output(result: str) -> str:
    return f"Saída: {result}"


def format_error(message: str) -> str:
    return f"Erro: {message}"


def format_discount_result(value: float, currency_symbol: str = "R$") -> str:
    """Arredonda para duas casas apenas na exibição."""

    return f"Valor com desconto: {currency_symbol}{value:.2f}"
