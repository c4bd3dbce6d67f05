"""
Tests for the greeting message factory.
"""

import pytest

from core.domain.message_type import MessageType
from core.errors import InvalidArgumentError
from core.interfaces.message import MessageFormatter
from core.services import message_factory


class TestMessageType:

    def test_from_key_is_case_insensitive(self):
        assert MessageType.from_key("DeSpEdIdA") is MessageType.DESPEDIDA

    def test_from_key_unknown(self):
        assert MessageType.from_key("oi") is None

    def test_keys_in_declaration_order(self):
        assert MessageType.keys() == ["boasvindas", "despedida", "agradecimento"]


class TestCreate:

    @pytest.mark.parametrize("key, expected", [
        ("boasvindas", "Bem-vindo, Ana!"),
        ("despedida", "Até logo, Ana."),
        ("agradecimento", "Obrigado, Ana!"),
    ])
    def test_each_message_type(self, key, expected):
        assert message_factory.create(key).format("Ana") == expected

    def test_key_is_case_insensitive(self):
        upper = message_factory.create("BOASVINDAS").format("Ana")
        lower = message_factory.create("boasvindas").format("Ana")
        assert upper == lower == "Bem-vindo, Ana!"

    def test_formatter_satisfies_protocol(self):
        assert isinstance(message_factory.create("despedida"), MessageFormatter)

    def test_name_is_interpolated_verbatim(self):
        formatter = message_factory.create("agradecimento")
        assert formatter.format("") == "Obrigado, !"
        assert formatter.format("{x} %s") == "Obrigado, {x} %s!"

    def test_unknown_type_raises(self):
        with pytest.raises(InvalidArgumentError, match="inexistente"):
            message_factory.create("inexistente")

    def test_error_echoes_original_key(self):
        with pytest.raises(InvalidArgumentError) as excinfo:
            message_factory.create("Inexistente")
        assert str(excinfo.value) == "Tipo de mensagem desconhecido: Inexistente"

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            message_factory.create("")

    def test_idempotent(self):
        first = message_factory.create("despedida").format("Rui")
        second = message_factory.create("despedida").format("Rui")
        assert first == second == "Até logo, Rui."
