"""Configuração do Core.

Por que aqui:
- Centraliza variáveis de ambiente (pydantic-settings) sem contaminar a CLI.
- Permite que serviços e adaptadores leiam limites de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Diretório de configuração por usuário (cross-platform, sem dependências)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "projeto-padroes"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "projeto-padroes"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "projeto-padroes"
    return Path.home() / ".config" / "projeto-padroes"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuração central da aplicação.

    Por que pydantic-settings:
    - Tipagem + validação na borda (env vars) sem sujar o Core com parsing.
    - Um único contrato de configuração para CLI e serviços.
    """

    model_config = SettingsConfigDict(
        env_prefix="PADROES_",
        extra="ignore",
        case_sensitive=False,
        # Ordem: projeto primeiro (dev), depois config global do usuário.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    max_output_chars: int = Field(
        default=1_000_000,
        gt=0,
        description="Tamanho máximo (caracteres) da saída de `repetir`.",
    )
    currency_symbol: str = Field(
        default="R$",
        min_length=1,
        description="Prefixo monetário usado ao exibir descontos.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nível do logger raiz quando executado pela CLI.",
    )
    show_banner: bool = Field(
        default=True,
        description="Exibir o banner no menu interativo.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value
