"""Transformações de texto usadas pelo interpretador."""

from __future__ import annotations

import string

# Apenas ASCII: `ç`, `é` etc. ficam como estão.
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper_ascii(text: str) -> str:
    """Converte `a`..`z` para maiúsculas, preservando todo o resto."""

    return text.translate(_ASCII_UPPER)


def repeat_text(text: str, count: int) -> str:
    """Concatena `text` consigo mesmo `count` vezes (`count == 0` -> "")."""

    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return text * count
