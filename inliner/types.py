"""
inliner/types.py — typy danych inlinera dyrektyw #include.

Document      — krotka linii dokumentu wejściowego (niezmienna po podziale).
IncludeRecord — ślad pojedynczej dyrektywy: numer linii, ścieżka, status.
InlineReport  — podsumowanie jednego przebiegu (wejście → wyjście).
FileOpenError — błąd otwarcia pliku wejściowego lub wyjściowego.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

# Linie dokumentu bez znaków końca linii.
type Document = tuple[str, ...]


class LineKind(StrEnum):
    """Klasyfikacja linii dokumentu."""
    PLAIN   = "plain"
    INCLUDE = "include"


class IncludeStatus(StrEnum):
    """Wynik rozwiązania dyrektywy #include."""
    INLINED     = "inlined"
    # Nagłówek nie dał się otworzyć albo jest pusty.
    UNAVAILABLE = "unavailable"


class Side(StrEnum):
    """Strona przebiegu, po której wystąpił błąd otwarcia pliku."""
    INPUT  = "input"
    OUTPUT = "output"


class FileOpenError(OSError):
    """
    Nie udało się otworzyć pliku wejściowego lub wyjściowego.

    - path: ścieżka, której dotyczy błąd
    - side: Side.INPUT albo Side.OUTPUT
    """

    def __init__(self, path: str, side: Side, reason: str = "") -> None:
        self.path   = path
        self.side   = side
        self.reason = reason
        label = "wyjściowego" if side is Side.OUTPUT else "wejściowego"
        msg = f"Nie można otworzyć pliku {label}: {path}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


@dataclass(slots=True)
class IncludeRecord:
    """
    Ślad jednej dyrektywy #include z poprawną ścieżką w cudzysłowach.

    - line_no: numer linii w dokumencie wejściowym (od 1)
    - path:    ścieżka dokładnie tak, jak zapisano ją między cudzysłowami
    - status:  INLINED albo UNAVAILABLE
    - size:    liczba wstawionych znaków (0 gdy UNAVAILABLE)
    """
    line_no: int
    path:    str
    status:  IncludeStatus
    size:    int = 0


@dataclass
class InlineReport:
    """Podsumowanie przebiegu inlinera."""
    input_path:   str
    output_path:  str
    input_loaded: bool
    lines_in:     int
    lines_out:    int
    records:      list[IncludeRecord] = field(default_factory=list)

    @property
    def inlined(self) -> list[IncludeRecord]:
        return [r for r in self.records if r.status is IncludeStatus.INLINED]

    @property
    def unavailable(self) -> list[IncludeRecord]:
        return [r for r in self.records if r.status is IncludeStatus.UNAVAILABLE]
