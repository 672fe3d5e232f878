"""Ustawienia chpc — konfiguracja przez zmienne środowiskowe."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = {"1", "true", "yes", "on", "tak"}


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


@dataclass(slots=True)
class Settings:
    """
    Wartości domyślne CLI; flagi wiersza poleceń mają pierwszeństwo.

    - output:       plik wyjściowy, gdy nie podano go w argumentach
    - encoding:     kodowanie plików wejściowych, nagłówków i wyjścia
    - strict_input: brak pliku wejściowego kończy przebieg kodem 1
    - log_level:    poziom logowania biblioteki inliner
    """
    output:       str  = "output.cpp"
    encoding:     str  = "utf-8"
    strict_input: bool = False
    log_level:    str  = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            output       = os.getenv("CHPC_OUTPUT",    "output.cpp"),
            encoding     = os.getenv("CHPC_ENCODING",  "utf-8"),
            strict_input = _env_flag("CHPC_STRICT_INPUT"),
            log_level    = os.getenv("CHPC_LOG_LEVEL", "WARNING").upper(),
        )
