"""
Tests for the text command interpreter.

Run with:  python -m pytest tests/test_interpreter.py -v
"""

import pytest

from core.config import AppSettings
from core.domain.models import RepeatOp, UppercaseOp
from core.errors import ResourceLimitError
from core.services.interpreter import (
    INVALID_COMMAND,
    CommandInterpreter,
    evaluate,
    parse_command,
)
from core.services.text_transform import repeat_text, to_upper_ascii


@pytest.fixture
def interpreter():
    return CommandInterpreter(AppSettings(max_output_chars=1_000))


# ============================================================
# Text transforms
# ============================================================

class TestTextTransform:

    def test_upper_ascii_letters(self):
        assert to_upper_ascii("hello world") == "HELLO WORLD"

    def test_upper_keeps_other_characters(self):
        assert to_upper_ascii("abc XYZ 123 !?") == "ABC XYZ 123 !?"

    def test_upper_leaves_non_ascii_untouched(self):
        assert to_upper_ascii("ação é") == "AçãO é"

    def test_upper_range_boundaries(self):
        assert to_upper_ascii("az") == "AZ"
        assert to_upper_ascii("@[`{") == "@[`{"

    def test_repeat(self):
        assert repeat_text("ab", 3) == "ababab"

    def test_repeat_zero(self):
        assert repeat_text("ab", 0) == ""

    def test_repeat_negative_raises(self):
        with pytest.raises(ValueError):
            repeat_text("ab", -1)


# ============================================================
# Parsing
# ============================================================

class TestParseCommand:

    def test_uppercase(self):
        assert parse_command('caixa_alta("abc")') == UppercaseOp(text="abc")

    def test_uppercase_empty_text(self):
        assert parse_command('caixa_alta("")') == UppercaseOp(text="")

    def test_repeat(self):
        assert parse_command('repetir(3, "ab")') == RepeatOp(count=3, text="ab")

    def test_repeat_leading_zeros(self):
        assert parse_command('repetir(007, "x")') == RepeatOp(count=7, text="x")

    def test_trailing_characters_are_ignored(self):
        assert parse_command('caixa_alta("abc") resto') == UppercaseOp(text="abc")

    @pytest.mark.parametrize("command", [
        "",
        "xyz",
        "caixa_alta(sem aspas)",
        'caixa_alta("sem fechar',
        'repetir("x","y")',
        'repetir(2,"sem espaco")',
        'repetir(2,  "dois espacos")',
        'repetir(-2, "negativo")',
        'repetir(+2, "sinal")',
        'repetir(٣, "digito arabe")',
        ' caixa_alta("espaco antes")',
        'CAIXA_ALTA("maiusculo")',
    ])
    def test_invalid_returns_none(self, command):
        assert parse_command(command) is None


# ============================================================
# Evaluation
# ============================================================

class TestEvaluate:

    def test_repeat_over_limit_raises(self):
        with pytest.raises(ResourceLimitError) as excinfo:
            evaluate(RepeatOp(count=11, text="ab"), max_output_chars=20)
        assert excinfo.value.requested == 22
        assert excinfo.value.limit == 20

    def test_repeat_at_limit(self):
        assert evaluate(RepeatOp(count=10, text="ab"), max_output_chars=20) == "ab" * 10

    def test_huge_count_with_empty_text(self):
        assert evaluate(RepeatOp(count=10**30, text=""), max_output_chars=20) == ""


# ============================================================
# CommandInterpreter.interpret
# ============================================================

class TestInterpret:

    def test_uppercase(self, interpreter):
        assert interpreter.interpret('caixa_alta("Olá, mundo 42!")') == "OLá, MUNDO 42!"

    def test_repeat(self, interpreter):
        assert interpreter.interpret('repetir(3, "ab")') == "ababab"

    def test_repeat_zero_is_empty(self, interpreter):
        assert interpreter.interpret('repetir(0, "ab")') == ""

    @pytest.mark.parametrize("command", [
        "",
        "xyz",
        "caixa_alta(sem aspas)",
        'repetir("x","y")',
    ])
    def test_invalid_commands(self, interpreter, command):
        assert interpreter.interpret(command) == INVALID_COMMAND

    def test_invalid_sentinel_text(self):
        assert INVALID_COMMAND == "Comando inválido."

    def test_over_limit_collapses_to_invalid(self, interpreter):
        assert interpreter.interpret('repetir(1001, "a")') == INVALID_COMMAND

    def test_absurd_count_collapses_to_invalid(self, interpreter):
        command = 'repetir(' + "9" * 6000 + ', "a")'
        assert interpreter.interpret(command) == INVALID_COMMAND

    def test_idempotent(self, interpreter):
        command = 'repetir(2, "xy")'
        assert interpreter.interpret(command) == interpreter.interpret(command)

    def test_default_settings(self):
        assert CommandInterpreter().interpret('caixa_alta("ok")') == "OK"
