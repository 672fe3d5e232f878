"""
inliner/engine.py — jednoprzebiegowe wstawianie treści plików #include "...".

Potok: wczytanie → podział na linie → klasyfikacja/zamiana linii → zapis.

Publiczne API:
  split_lines(text)                     -> Document
  extract_include_path(line)            -> str | None
  classify(line)                        -> LineKind
  error_marker(path)                    -> str
  read_text(path, encoding)             -> str | None
  Inliner(encoding, strict_input)       .load() / .render() / .process()
  inline_file(input_path, output_path)  -> InlineReport

Zasady:
  - Dyrektywa to dowolna linia zawierająca podciąg '#include' (bez kotwicy
    na początku linii) ORAZ parę cudzysłowów: ścieżką jest tekst między
    pierwszym a ostatnim '"'. '#include <x>' przechodzi bez zmian.
  - Ścieżki są rozwiązywane względem katalogu roboczego procesu, nie
    względem katalogu pliku, który je zawiera.
  - Tylko jeden poziom: treść wstawionego nagłówka nie jest ponownie
    przeszukiwana.
"""

from __future__ import annotations

import logging
from os import PathLike

from .types import (
    Document,
    FileOpenError,
    IncludeRecord,
    IncludeStatus,
    InlineReport,
    LineKind,
    Side,
)

logger = logging.getLogger(__name__)

INCLUDE_MARKER = "#include"

DEFAULT_ENCODING = "utf-8"

# Dowolne bajty przechodzą przez odczyt i zapis bez zmian.
_ERRORS = "surrogateescape"

type StrPath = str | PathLike[str]


# ---------------------------------------------------------------------------
# Klasyfikacja linii
# ---------------------------------------------------------------------------

def split_lines(text: str) -> Document:
    """
    Dzieli tekst na linie bez znaków końca linii.

    '\\r\\n' i '\\n' kończą linię; końcowy terminator nie tworzy pustej
    linii:  "" → (),  "\\n" → ("",),  "a\\r\\nb" → ("a", "b").
    """
    if not text:
        return ()
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return tuple(p[:-1] if p.endswith("\r") else p for p in parts)


def extract_include_path(line: str) -> str | None:
    """
    Zwraca ścieżkę z dyrektywy '#include "..."' albo None.

    None gdy brak markera, brak cudzysłowu lub pierwszy '"' nie stoi
    przed ostatnim (np. pojedynczy cudzysłów).
    """
    if INCLUDE_MARKER not in line:
        return None
    first = line.find('"')
    last  = line.rfind('"')
    if first == -1 or first >= last:
        return None
    return line[first + 1:last]


def classify(line: str) -> LineKind:
    if extract_include_path(line) is None:
        return LineKind.PLAIN
    return LineKind.INCLUDE


def error_marker(path: str) -> str:
    """Komentarz wstawiany w miejsce nagłówka, którego nie da się wczytać."""
    return f"// Error: Could not include {path}"


def _reason(e: Exception) -> str:
    return getattr(e, "strerror", None) or str(e)


def read_text(path: StrPath, encoding: str = DEFAULT_ENCODING) -> str | None:
    """Wczytuje cały plik jednym odczytem; None gdy pliku nie da się otworzyć."""
    try:
        with open(path, encoding=encoding, errors=_ERRORS, newline="") as fh:
            return fh.read()
    except (OSError, ValueError) as e:
        # ValueError: ścieżka z bajtem NUL.
        logger.debug("Odczyt %s nieudany: %s", path, e)
        return None


# ---------------------------------------------------------------------------
# Inliner
# ---------------------------------------------------------------------------

class Inliner:
    """
    Wstawia treść lokalnych nagłówków w miejsce linii '#include "..."'.

    Jeden obiekt = jeden przebieg: load() → process(). Stan (dokument,
    wynik, ślady dyrektyw) należy wyłącznie do instancji.

    strict_input:
        False — brak pliku wejściowego jest logowany, dokument zostaje
                pusty, a process() zapisuje pusty plik wyjściowy;
        True  — load() rzuca FileOpenError.
    """

    def __init__(
        self,
        encoding: str = DEFAULT_ENCODING,
        strict_input: bool = False,
    ) -> None:
        self.encoding     = encoding
        self.strict_input = strict_input
        self.input_path   = ""
        self.input_loaded = False
        self._lines: Document = ()
        self._records: list[IncludeRecord] = []

    @property
    def lines(self) -> Document:
        return self._lines

    @property
    def records(self) -> list[IncludeRecord]:
        return list(self._records)

    def load(self, input_path: StrPath) -> bool:
        """Wczytuje i dzieli dokument wejściowy. Zwraca False gdy się nie udało."""
        self.input_path = str(input_path)
        self._lines = ()
        try:
            with open(input_path, encoding=self.encoding, errors=_ERRORS, newline="") as fh:
                content = fh.read()
        except (OSError, ValueError) as e:
            err = FileOpenError(self.input_path, Side.INPUT, _reason(e))
            if self.strict_input:
                raise err from e
            logger.error("%s", err)
            self.input_loaded = False
            return False

        self._lines = split_lines(content)
        self.input_loaded = True
        logger.debug("Wczytano %s (%d linii)", self.input_path, len(self._lines))
        return True

    def render(self) -> list[str]:
        """
        Mapuje każdą linię dokumentu na dokładnie jeden element wyniku.

        Element z wstawionym nagłówkiem może zawierać wiele linii fizycznych.
        """
        self._records = []
        result: list[str] = []

        for line_no, line in enumerate(self._lines, start=1):
            path = extract_include_path(line)
            if path is None:
                result.append(line)
                continue

            content = read_text(path, self.encoding)
            if content:
                result.append(content)
                self._records.append(
                    IncludeRecord(line_no, path, IncludeStatus.INLINED, len(content))
                )
            else:
                logger.warning("Linia %d: nie można dołączyć %s", line_no, path)
                result.append(error_marker(path))
                self._records.append(
                    IncludeRecord(line_no, path, IncludeStatus.UNAVAILABLE)
                )

        return result

    def process(self, output_path: StrPath) -> InlineReport:
        """Renderuje wynik i zapisuje go do output_path (każdy element + '\\n')."""
        result = self.render()
        out = str(output_path)

        try:
            fh = open(output_path, "w", encoding=self.encoding, errors=_ERRORS, newline="")
        except (OSError, ValueError) as e:
            err = FileOpenError(out, Side.OUTPUT, _reason(e))
            logger.error("%s", err)
            raise err from e

        with fh:
            for element in result:
                fh.write(element)
                fh.write("\n")

        lines_out = sum(element.count("\n") + 1 for element in result)
        logger.info("Zapisano %s (%d linii)", out, lines_out)

        return InlineReport(
            input_path=self.input_path,
            output_path=out,
            input_loaded=self.input_loaded,
            lines_in=len(self._lines),
            lines_out=lines_out,
            records=self.records,
        )


def inline_file(
    input_path: StrPath,
    output_path: StrPath,
    *,
    encoding: str = DEFAULT_ENCODING,
    strict_input: bool = False,
) -> InlineReport:
    """Pełny przebieg: wczytanie input_path i zapis do output_path."""
    inliner = Inliner(encoding=encoding, strict_input=strict_input)
    inliner.load(input_path)
    return inliner.process(output_path)
