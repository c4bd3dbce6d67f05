"""Fábrica de mensagens.

Por que uma tabela e não uma hierarquia:
- As três variantes diferem apenas no template; uma tabela
  `MessageType -> template` basta para o despacho.
- O formatador devolvido satisfaz `MessageFormatter` (Protocol) por duck typing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.domain.message_type import MessageType
from core.errors import InvalidArgumentError
from core.interfaces.message import MessageFormatter

logger = logging.getLogger(__name__)

_TEMPLATES: dict[MessageType, tuple[str, str]] = {
    MessageType.BOAS_VINDAS: ("Bem-vindo, ", "!"),
    MessageType.DESPEDIDA: ("Até logo, ", "."),
    MessageType.AGRADECIMENTO: ("Obrigado, ", "!"),
}


@dataclass(frozen=True)
class TemplateMessage:
    """Formatador concreto: prefixo + nome + sufixo, sem validar o nome."""

    message_type: MessageType
    prefix: str
    suffix: str

    def format(self, name: str) -> str:
        return f"{self.prefix}{name}{self.suffix}"


def create(type_key: str) -> MessageFormatter:
    """Devolve o formatador para `type_key` (case-insensitive).

    Raises:
        InvalidArgumentError: tipo desconhecido; a mensagem ecoa a chave original.
    """

    message_type = MessageType.from_key(type_key)
    if message_type is None:
        logger.debug("Tipo de mensagem rejeitado: %r", type_key)
        raise InvalidArgumentError(f"Tipo de mensagem desconhecido: {type_key}")

    prefix, suffix = _TEMPLATES[message_type]
    return TemplateMessage(message_type=message_type, prefix=prefix, suffix=suffix)
