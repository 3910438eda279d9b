# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from keeper import configuration
from keeper.repository.configuration import CONFIGURATION_REPO
from keeper.terminal.custom_typer import AliasedTyperGroup
from keeper.terminal.parse import validate_terminal_color

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def __configuration_table(
    config: configuration.Configuration, title: Optional[str] = None
) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "use_git_versioning",
        "✓ Enabled" if config["use_git_versioning"] else "✗ Disabled",
    )
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("done_color", config["done_color"])
    table.add_row("overdue_color", config["overdue_color"])
    table.add_row("pending_color", config["pending_color"])
    table.add_row("canvas", f"{config['canvas_width']} x {config['canvas_height']}")
    table.add_row("padding_top", str(config["padding_top"]))
    table.add_row("padding_side", str(config["padding_side"]))
    table.add_row("header_offset", str(config["header_offset"]))
    table.add_row("char_aspect_ratio", str(config["char_aspect_ratio"]))
    table.add_row("font_path", config["font_path"] or "None (built-in font)")
    table.add_row(
        "daytime", f"{config['day_start_hour']}:00 - {config['night_start_hour']}:00"
    )
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print(__configuration_table(config))


@app.command("set, s")
def set(
    use_git_versioning: Annotated[
        Optional[bool],
        typer.Option(
            "--use-git-versioning/--no-use-git-versioning",
            help="Enable/disable git checkpoints of the data directory",
        ),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Directory path for storing data files"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Reset data path to the default"),
    ] = False,
    done_color: Annotated[
        Optional[str], typer.Option("--done-color", help="Terminal color for done")
    ] = None,
    overdue_color: Annotated[
        Optional[str],
        typer.Option("--overdue-color", help="Terminal color for overdue"),
    ] = None,
    pending_color: Annotated[
        Optional[str],
        typer.Option("--pending-color", help="Terminal color for pending"),
    ] = None,
    canvas_width: Annotated[
        Optional[int], typer.Option("--canvas-width", min=1, help="Image width in px")
    ] = None,
    canvas_height: Annotated[
        Optional[int],
        typer.Option("--canvas-height", min=1, help="Image height in px"),
    ] = None,
    padding_top: Annotated[
        Optional[int], typer.Option("--padding-top", min=0)
    ] = None,
    padding_side: Annotated[
        Optional[int], typer.Option("--padding-side", min=0)
    ] = None,
    header_offset: Annotated[
        Optional[int],
        typer.Option(
            "--header-offset", min=0, help="Space kept free at the top, e.g. for a menu bar"
        ),
    ] = None,
    char_aspect_ratio: Annotated[
        Optional[float],
        typer.Option(
            "--char-aspect-ratio",
            min=0.1,
            help="Glyph height divided by glyph width of the image font",
        ),
    ] = None,
    font_path: Annotated[
        Optional[str],
        typer.Option("--font-path", help="TrueType/OpenType font for images"),
    ] = None,
    remove_font_path: Annotated[
        bool,
        typer.Option("--remove-font-path", help="Use the built-in image font"),
    ] = False,
    day_start_hour: Annotated[
        Optional[int], typer.Option("--day-start-hour", min=0, max=23)
    ] = None,
    night_start_hour: Annotated[
        Optional[int], typer.Option("--night-start-hour", min=0, max=24)
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    for color in (done_color, overdue_color, pending_color):
        validate_terminal_color(color)

    CONFIGURATION_REPO.update_config(
        use_git_versioning=use_git_versioning,
        data_path=data_path,
        remove_data_path=remove_data_path,
        done_color=done_color,
        overdue_color=overdue_color,
        pending_color=pending_color,
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        padding_top=padding_top,
        padding_side=padding_side,
        header_offset=header_offset,
        char_aspect_ratio=char_aspect_ratio,
        font_path=font_path,
        remove_font_path=remove_font_path,
        day_start_hour=day_start_hour,
        night_start_hour=night_start_hour,
    )
    CONFIGURATION_REPO.flush()

    config = CONFIGURATION_REPO.get_config()

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(__configuration_table(config, title="Updated Configuration"))
