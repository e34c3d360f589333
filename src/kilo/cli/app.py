"""Typer CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from kilo.errors import KiloError


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="kilo",
        help="A tiny full-screen terminal editor.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.command()
    def edit(
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Write debug logs to this file")] = None,
    ) -> None:
        """Open the editor. Press Ctrl-Q to quit."""
        from kilo.cli.editor import EditorApp

        if log_file is not None:
            logging.basicConfig(
                filename=log_file,
                level=logging.DEBUG,
                format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            )

        editor = EditorApp()
        try:
            editor.run()
        except KiloError as e:
            # Raw mode is already restored; the clear is best effort
            try:
                editor.terminal.clear()
            except KiloError:
                pass
            if e.detail:
                console.print(f"[red]{e.operation}[/]: {escape(e.detail)}", highlight=False)
            else:
                console.print(f"[red]{e.operation}[/]", highlight=False)
            raise typer.Exit(1)

    return app
