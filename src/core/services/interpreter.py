"""Interpretador de comandos de texto.

Gramáticas reconhecidas:

    caixa_alta("<texto>")
    repetir(<n>, "<texto>")

`<texto>` é qualquer sequência sem `"`; `<n>` é um inteiro decimal ASCII sem
sinal, seguido de vírgula e exatamente um espaço.

Fluxo:
- `parse_command` verifica o prefixo literal e só então tenta extrair o
  padrão completo, produzindo `UppercaseOp`/`RepeatOp` (ou `None`).
- `evaluate` despacha a operação para `text_transform`.
- `CommandInterpreter.interpret` junta os dois e é total: qualquer falha vira
  `INVALID_COMMAND`, sem distinguir sintaxe desconhecida de argumentos ruins.
"""

from __future__ import annotations

import logging
import re

from core.config import AppSettings
from core.domain.models import Operation, RepeatOp, UppercaseOp
from core.errors import ResourceLimitError
from core.services.text_transform import repeat_text, to_upper_ascii

logger = logging.getLogger(__name__)

INVALID_COMMAND = "Comando inválido."

UPPERCASE_PREFIX = "caixa_alta("
REPEAT_PREFIX = "repetir("

# Busca (não ancorada no fim): caracteres após o `)` final são ignorados.
_UPPERCASE_PATTERN = re.compile(r'caixa_alta\("([^"]*)"\)')
_REPEAT_PATTERN = re.compile(r'repetir\(([0-9]+), "([^"]*)"\)')


def parse_command(command: str) -> Operation | None:
    """Converte o comando bruto em uma operação, ou `None` se inválido."""

    if command.startswith(UPPERCASE_PREFIX):
        match = _UPPERCASE_PATTERN.search(command)
        if match:
            return UppercaseOp(text=match.group(1))
    elif command.startswith(REPEAT_PREFIX):
        match = _REPEAT_PATTERN.search(command)
        if match:
            try:
                count = int(match.group(1))
            except ValueError:
                # Mais dígitos do que o int() aceita converter.
                return None
            return RepeatOp(count=count, text=match.group(2))
    return None


def evaluate(operation: Operation, *, max_output_chars: int) -> str:
    """Executa a operação.

    Raises:
        ResourceLimitError: se `repetir` geraria mais que `max_output_chars`.
    """

    if isinstance(operation, UppercaseOp):
        return to_upper_ascii(operation.text)

    requested = operation.count * len(operation.text)
    if requested > max_output_chars:
        raise ResourceLimitError(requested=requested, limit=max_output_chars)
    if requested == 0:
        return ""
    return repeat_text(operation.text, operation.count)


class CommandInterpreter:
    """Ponto de entrada do interpretador: uma string entra, uma string sai."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    def interpret(self, command: str) -> str:
        operation = parse_command(command)
        if operation is None:
            logger.debug("Comando não reconhecido: %r", command)
            return INVALID_COMMAND

        try:
            result = evaluate(operation, max_output_chars=self._settings.max_output_chars)
        except ResourceLimitError as exc:
            logger.warning("Comando rejeitado (%s): %r", exc, command[:80])
            return INVALID_COMMAND

        logger.debug("Comando %s interpretado (%d caracteres)", operation.kind, len(result))
        return result
