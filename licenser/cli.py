# Program: Licenser CLI
# Version: 0.1.0
# Author: Dr. Zulfiyor Bakhtiyorov
# Affiliations: University of Cambridge; Xinjiang Institute of Ecology and Geography; National Academy of Sciences of Tajikistan
# Year: 2025
# License: MIT License

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler

from .config import resolve_config
from .detect import resolve_license
from .driver import Licenser, check_root
from .errors import EXIT_FLAG_PARSE, LicenserError
from .events import FileReport

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)

_STATUS_STYLES = {"ok": "green", "updated": "yellow", "ignored": "dim"}


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _echo(text: str = "", style: Optional[str] = None) -> None:
    console.print(text, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_report(report: FileReport) -> None:
    _echo(report.line(), style=_STATUS_STYLES[report.status])


def print_license(license_lines: Sequence[str]) -> None:
    _echo("Detected license:")
    _echo()
    for line in license_lines:
        _echo(f"> {line}")


@app.command(epilog="Example: licenser .")
def licenser(
    root: Optional[Path] = typer.Argument(None, metavar="SOURCE_ROOT_DIR", help="Root of the source tree"),
    license_file: Optional[Path] = typer.Argument(
        None, metavar="LICENSE_FILE", help="License text to apply (detected when omitted)"
    ),
    detect_only: bool = typer.Option(False, "--detect-only", "-d", help="Only detect and print license"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML config (defaults to SOURCE_ROOT_DIR/.licenser.yaml)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """licenser is a tool for keeping the license text in the source code up-to-date."""

    setup_logging(verbose)
    try:
        root_dir = check_root(root)
        config = resolve_config(root_dir, config_path)
        config.detect_only = config.detect_only or detect_only
        license_lines = resolve_license(root_dir, license_file, config)
        if config.detect_only:
            print_license(license_lines)
            return
        summary = Licenser(root_dir, license_lines, config).run(on_report=print_report)
    except LicenserError as exc:
        err_console.print(f"Error: {exc}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(exc.exit_code) from exc
    _echo(summary.line())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point; flag parse errors exit with 1 instead of the default 2."""
    try:
        result = app(
            args=list(argv) if argv is not None else None,
            prog_name="licenser",
            standalone_mode=False,
        )
    except typer.TyperException as exc:
        err_console.print(f"Error: {exc.format_message()}", markup=False, highlight=False, soft_wrap=True)
        return EXIT_FLAG_PARSE
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())


# Created by Dr. Z. Bakhtiyorov
