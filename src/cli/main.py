"""CLI (Typer): menu interativo e sub-comandos.

Por que uma camada fina:
- Ler entradas, imprimir resultados e tratar `InvalidArgumentError` é papel da
  borda; interpretador, fábrica e adaptador continuam puros.
- Sem sub-comando abre o menu; com sub-comando executa um desafio e sai.
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console

from adapters.discount_adapter import DiscountAdapter
from cli.logging_setup import configure_logging
from cli.ui_components import (
    build_menu_table,
    echo,
    format_discount_result,
    format_error,
    format_interpreter_output,
    print_banner,
    print_section,
)
from core.config import AppSettings
from core.domain.message_type import MessageType
from core.domain.models import DiscountRequest
from core.errors import InvalidArgumentError
from core.interfaces.discount import DiscountCalculator
from core.services import message_factory
from core.services.interpreter import CommandInterpreter

logger = logging.getLogger(__name__)

app = typer.Typer(help="Desafios de padrões de projeto: Interpreter, Factory Method e Adapter.")

_console = Console()


def _settings(ctx: typer.Context) -> AppSettings:
    if not isinstance(ctx.obj, AppSettings):
        ctx.obj = AppSettings()
    return ctx.obj


def run_interpreter(command: str, settings: AppSettings) -> str:
    return format_interpreter_output(CommandInterpreter(settings).interpret(command))


def run_message(type_key: str, name: str) -> str:
    """Formata a mensagem; a mensagem de erro também é texto de saída."""

    try:
        formatter = message_factory.create(type_key)
    except InvalidArgumentError as exc:
        return format_error(str(exc))
    return formatter.format(name)


def run_discount(
    request: DiscountRequest,
    settings: AppSettings,
    calculator: DiscountCalculator | None = None,
) -> str:
    calculator = calculator or DiscountAdapter()
    value = calculator.calculate(request.amount, request.percentage)
    return format_discount_result(value, settings.currency_symbol)


def _challenge_interpreter(settings: AppSettings) -> None:
    print_section(_console, 1)
    command = typer.prompt("Digite o comando", default="", show_default=False)
    echo(_console, run_interpreter(command.strip(), settings))


def _challenge_message() -> None:
    print_section(_console, 2)
    type_key = typer.prompt(
        f"Digite o tipo de mensagem ({', '.join(MessageType.keys())})", default="", show_default=False
    )
    name = typer.prompt("Digite o nome", default="", show_default=False)
    echo(_console, run_message(type_key, name))


def _challenge_discount(settings: AppSettings) -> None:
    print_section(_console, 3)
    amount = typer.prompt("Digite o valor", type=float)
    percentage = typer.prompt("Digite o percentual de desconto", type=float)
    echo(_console, run_discount(DiscountRequest(amount=amount, percentage=percentage), settings))


def run_menu(settings: AppSettings) -> None:
    """Loop do menu até a opção 0."""

    if settings.show_banner:
        print_banner(_console)

    while True:
        _console.print(build_menu_table())
        choice = typer.prompt("Digite sua escolha").strip()
        logger.debug("Opção escolhida: %r", choice)

        if choice == "1":
            _challenge_interpreter(settings)
        elif choice == "2":
            _challenge_message()
        elif choice == "3":
            _challenge_discount(settings)
        elif choice == "0":
            echo(_console, "Saindo...")
            return
        else:
            echo(_console, "Opção inválida. Tente novamente.")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Sem sub-comando, abre o menu interativo."""

    settings = _settings(ctx)
    configure_logging(settings.log_level)
    if ctx.invoked_subcommand is None:
        run_menu(settings)


@app.command()
def interpretar(
    ctx: typer.Context,
    comando: str = typer.Argument(..., help='Ex.: caixa_alta("texto") ou repetir(3, "ab").'),
) -> None:
    """Desafio 1: interpreta um comando de texto."""

    echo(_console, run_interpreter(comando.strip(), _settings(ctx)))


@app.command()
def mensagem(
    tipo: str = typer.Argument(..., help="boasvindas, despedida ou agradecimento."),
    nome: str = typer.Argument(..., help="Nome interpolado na mensagem."),
) -> None:
    """Desafio 2: gera uma mensagem pelo tipo."""

    try:
        formatter = message_factory.create(tipo)
    except InvalidArgumentError as exc:
        echo(_console, format_error(str(exc)))
        raise typer.Exit(code=1) from exc
    echo(_console, formatter.format(nome))


@app.command()
def desconto(
    ctx: typer.Context,
    valor: float = typer.Argument(..., help="Valor original."),
    percentual: float = typer.Argument(..., help="Percentual de desconto."),
) -> None:
    """Desafio 3: aplica desconto via adaptador."""

    request = DiscountRequest(amount=valor, percentage=percentual)
    echo(_console, run_discount(request, _settings(ctx)))


def run() -> None:
    app()
