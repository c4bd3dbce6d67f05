"""Modelos do domínio (Pydantic v2).

Por que Pydantic no domínio:
- Validação estrita e documentação autocontida (Field) sem acoplar o Core
  a bibliotecas de I/O.
- Modelos congelados: cada valor vive apenas durante uma chamada.

Nota:
- Estes modelos descrevem *o que* foi pedido, não *como* é calculado.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class UppercaseOp(BaseModel):
    """Comando `caixa_alta("<texto>")` já extraído."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["caixa_alta"] = "caixa_alta"
    text: str = Field(
        ...,
        description="Texto capturado entre aspas (sem `\"`).",
    )


class RepeatOp(BaseModel):
    """Comando `repetir(<n>, "<texto>")` já extraído."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["repetir"] = "repetir"
    count: int = Field(
        ...,
        ge=0,
        description="Quantidade de repetições (inteiro não negativo).",
    )
    text: str = Field(
        ...,
        description="Texto capturado entre aspas (sem `\"`).",
    )


Operation = Union[UppercaseOp, RepeatOp]


class DiscountRequest(BaseModel):
    """Par (valor, percentual) para cálculo de desconto.

    Sem validação de faixa: valores negativos ou percentuais acima de 100
    são aceitos e calculados aritmeticamente.
    """

    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., description="Valor original.")
    percentage: float = Field(..., description="Percentual de desconto.")
