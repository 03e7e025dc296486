"""
Command line entry point for lazypanes.

    lazypanes preview --width 120 --height 40 --diff
    lazypanes demo
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .exceptions import ConfigurationError
from .i18n import Translator
from .layout.dimensions import compute_dimensions, information_text
from .state import UIModeFlags

console = Console()

app = typer.Typer(
    name="lazypanes",
    help="Layout and context engine for multi-panel terminal UIs",
    no_args_is_help=True,
)


def _load_settings(config: Optional[Path]):
    from .config import load_settings

    try:
        return load_settings(config)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e


@app.command()
def preview(
    width: int = typer.Option(200, "--width", "-w", help="Terminal width in cells"),
    height: int = typer.Option(50, "--height", help="Terminal height in cells"),
    diff: bool = typer.Option(False, "--diff", help="Diff mode (main/secondary split)"),
    diff_ref: str = typer.Option("HEAD", "--diff-ref", help="Ref shown while in diff mode"),
    filter_path: str = typer.Option("", "--filter", help="Path the commit log is filtered by"),
    cherry_picked: int = typer.Option(0, "--cherry-picked", min=0, help="Copied commit count"),
    mouse: bool = typer.Option(False, "--mouse", help="Pointer interaction enabled"),
    searching: bool = typer.Option(False, "--searching", help="Show the search bar"),
    app_status: str = typer.Option("", "--app-status", help="Application status text"),
    side_window: str = typer.Option("files", "--side-window", help="Current side window"),
    version: str = typer.Option(__version__, "--version", help="Version shown in the strip"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file to use"),
):
    """Print the regions one relayout pass would assign at a given size."""
    settings = _load_settings(config)
    flags = UIModeFlags(
        diff_mode=diff,
        diff_ref=diff_ref if diff else "",
        filter_path=filter_path,
        cherry_picked_count=cherry_picked,
        mouse_enabled=mouse,
        searching=searching,
    )
    info = information_text(flags, Translator(), version)
    regions = compute_dimensions(
        width,
        height,
        information=info.plain,
        app_status=app_status,
        flags=flags,
        side_window=side_window,
        settings=settings,
    )

    table = Table(title=f"Layout {width}x{height}")
    table.add_column("Window", style="cyan")
    table.add_column("x0", justify="right")
    table.add_column("y0", justify="right")
    table.add_column("x1", justify="right")
    table.add_column("y1", justify="right")
    table.add_column("Size", justify="right", style="dim")
    for name, region in regions.items():
        table.add_row(
            name,
            str(region.x0),
            str(region.y0),
            str(region.x1),
            str(region.y1),
            f"{region.width}x{region.height}",
        )
    console.print(table)
    if info.plain:
        console.print("Information:", info)


@app.command()
def demo(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file to use"),
):
    """Run the interactive demo."""
    from .app import run
    from .utils.logging_utils import setup_tui_logging

    settings = _load_settings(config)
    setup_tui_logging()
    try:
        run(settings)
    except KeyboardInterrupt:
        pass


def main():
    app()


if __name__ == "__main__":
    main()
