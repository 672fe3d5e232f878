"""
chpc — wstawia treść lokalnych nagłówków w miejsce linii #include "...".

Użycie:
  chpc <wejście> [wyjście] [opcje]

Każda linia zawierająca '#include' i ścieżkę w cudzysłowach jest zastępowana
całą treścią wskazanego pliku (ścieżka względem katalogu roboczego).
Brakujący lub pusty nagłówek zamienia się w komentarz:
  // Error: Could not include <ścieżka>

Zmienne środowiskowe:
  CHPC_OUTPUT        domyślny plik wyjściowy (output.cpp)
  CHPC_ENCODING      kodowanie plików (utf-8)
  CHPC_STRICT_INPUT  1 → brak pliku wejściowego kończy się kodem 1
  CHPC_LOG_LEVEL     poziom logowania (WARNING)
"""

from __future__ import annotations

import argparse
import codecs
import logging
import sys
from typing import NoReturn, Sequence

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from chpc import __version__
from chpc._config import Settings
from inliner import FileOpenError, IncludeStatus, InlineReport, Inliner

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

def _force_utf8() -> None:
    # Windows: terminal może używać cp1252 — polskie znaki w pomocy argparse.
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(encoding="utf-8", errors="replace")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def _show_table(report: InlineReport) -> None:
    if not report.records:
        console.print("[yellow]Brak dyrektyw #include \"...\".[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LINIA",   justify="right", no_wrap=True, style="dim")
    table.add_column("ŚCIEŻKA", no_wrap=True, style="bold cyan")
    table.add_column("STATUS",  no_wrap=True)
    table.add_column("ZNAKI",   justify="right", no_wrap=True)

    for rec in report.records:
        status = (
            "[green]wstawiono[/green]"
            if rec.status is IncludeStatus.INLINED
            else "[red]niedostępny[/red]"
        )
        table.add_row(str(rec.line_no), escape(rec.path), status, str(rec.size))

    console.print()
    console.print(table)
    console.print(
        f"  [dim]{len(report.inlined)} wstawionych, "
        f"{len(report.unavailable)} niedostępnych[/dim]\n"
    )


# ---------------------------------------------------------------------------
# Główna logika
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace, settings: Settings) -> None:
    strict   = settings.strict_input if args.strict is None else args.strict
    encoding = args.encoding or settings.encoding
    output   = args.output or settings.output

    try:
        codecs.lookup(encoding)
    except LookupError:
        err_console.print(f"[red]Błąd:[/red] nieznane kodowanie: {escape(encoding)}")
        raise SystemExit(1)

    inliner = Inliner(encoding=encoding, strict_input=strict)

    try:
        inliner.load(args.input)
    except FileOpenError as e:
        err_console.print(f"[red]Błąd:[/red] {escape(str(e))}")
        raise SystemExit(1)

    try:
        report = inliner.process(output)
    except OSError as e:
        err_console.print(f"[red]Błąd:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if args.show:
        _show_table(report)

    if report.unavailable:
        console.print(
            f"[yellow]Niedostępne nagłówki: {len(report.unavailable)}[/yellow]"
        )
    console.print(f"[green]Zapisano przetworzony plik:[/green] {escape(report.output_path)}")


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Błędy argumentów kończą się kodem 1 (usage na stderr)."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: błąd: {message}\n")


def build_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    settings = settings or Settings()
    parser = _ArgumentParser(
        prog="chpc",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"chpc {__version__}"
    )
    parser.add_argument(
        "input",
        metavar="WEJŚCIE",
        help="Plik źródłowy z dyrektywami #include \"...\".",
    )
    parser.add_argument(
        "output",
        metavar="WYJŚCIE",
        nargs="?",
        default=None,
        help=f"Plik wynikowy (domyślnie: {settings.output}).",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Brak pliku wejściowego kończy przebieg kodem 1 "
             "(domyślnie: pusty plik wynikowy i kod 0).",
    )
    parser.add_argument(
        "--encoding",
        metavar="KODOWANIE",
        default=None,
        help=f"Kodowanie plików (domyślnie: {settings.encoding}).",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Wyświetl tabelę dyrektyw #include po zapisie.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help=f"Poziom logowania (domyślnie: {settings.log_level}).",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    _force_utf8()
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    _setup_logging(args.log_level or settings.log_level)
    run(args, settings)


if __name__ == "__main__":
    main()
