"""GUI entry point for the postview desktop application."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from PySide6.QtWidgets import QApplication

from ..appctx import AppContext
from ..errors import SettingsError
from ..infrastructure.repositories import InMemoryPostRepository
from ..utils.console_logger import ensure_console_logger
from .ui.main_window import MainWindow

app = typer.Typer(add_completion=False, help="Open the postview desktop viewer")


def main(demo: bool = False, base_url: Optional[str] = None, verbose: bool = False) -> int:
    """Launch the Qt application and return the exit code."""

    qt_app = QApplication.instance() or QApplication(sys.argv[:1])

    repository = InMemoryPostRepository.with_demo_data() if demo else None
    try:
        context = AppContext(repository=repository, base_url=base_url)
    except SettingsError as exc:
        typer.echo(f"Settings error: {exc}", err=True)
        return 1
    level = logging.DEBUG if verbose else context.log_level
    ensure_console_logger(logging.getLogger("postview"), "postview-gui", level=level)

    window = MainWindow(context)
    window.show()
    window.start()
    try:
        return qt_app.exec()
    finally:
        context.close()


@app.command()
def run(
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Backend address (overrides settings)"),
    demo: bool = typer.Option(False, "--demo", help="Use built-in demo data instead of the backend"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Open the owners list in a window."""

    raise typer.Exit(main(demo=demo, base_url=base_url, verbose=verbose))


if __name__ == "__main__":  # pragma: no cover - manual launch
    app()
