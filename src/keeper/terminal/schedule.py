# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from keeper.color import text_palette_from
from keeper.model.selection import Selection, date_selection
from keeper.repository.configuration import CONFIGURATION_REPO
from keeper.repository.keeper import KEEPER_REPO
from keeper.service.schedule import ScheduleError, add_task, mark_task, move_task
from keeper.terminal.parse import (
    parse_date,
    parse_hour,
    parse_selection,
    parse_slot_id,
    validate_color,
    validate_description,
)
from keeper.time import date_to_cli_str, now_local
from keeper.version.git import VersionControlError
from keeper.version.version import Version
from keeper.view.image import ImageSaveError, image_config_from, render_image, save_image
from keeper.view.text import build_text

DATE_HELP = "valid inputs: today, tomorrow, yesterday, DD-MM-YYYY"

console = Console()


def add(
    date: Annotated[str, typer.Argument(help=DATE_HELP)],
    hour: Annotated[str, typer.Argument(help="valid input: 0-23")],
    description: str,
) -> None:
    """Add a task to an hour of a day."""
    task_date = parse_date(date)
    task_hour = parse_hour(hour)
    validate_description(description)

    add_task(KEEPER_REPO.keeper, task_date, task_hour, description)
    KEEPER_REPO.mark_dirty()
    __commit(f"add {date_to_cli_str(task_date)} {task_hour}: {description}")

    __show(date_selection(task_date))


def mark(
    date: Annotated[str, typer.Argument(help=DATE_HELP)],
    id: Annotated[str, typer.Argument(help="valid inputs: hour.index or hour")],
) -> None:
    """Mark a task as completed."""
    task_date = parse_date(date)
    hour, index = parse_slot_id(id)

    if mark_task(KEEPER_REPO.keeper, task_date, hour, index):
        KEEPER_REPO.mark_dirty()
        __commit(f"mark {date_to_cli_str(task_date)} {hour}.{index}")
    else:
        console.print(f"[yellow]No task at [{hour}.{index}], nothing marked[/yellow]")

    __show(date_selection(task_date))


def change(
    date: Annotated[str, typer.Argument(help=DATE_HELP)],
    id: Annotated[str, typer.Argument(help="valid inputs: hour.index or hour")],
    new_hour: Annotated[str, typer.Argument(help="valid input: 0-23")],
) -> None:
    """Move a task to another hour of the same day."""
    task_date = parse_date(date)
    old_hour, index = parse_slot_id(id)
    target_hour = parse_hour(new_hour)

    try:
        move_task(KEEPER_REPO.keeper, task_date, old_hour, index, target_hour)
    except ScheduleError as e:
        __print_error(e)
        raise typer.Exit(1)
    KEEPER_REPO.mark_dirty()
    __commit(
        f"change {date_to_cli_str(task_date)} {old_hour}.{index} -> {target_hour}"
    )

    __show(date_selection(task_date))


def show(
    selection: Annotated[
        Optional[str],
        typer.Argument(help="valid inputs: day count, " + DATE_HELP),
    ] = None,
) -> None:
    """Show today, a day, or the next number of days."""
    __show(parse_selection(selection))


def render(
    selection: Annotated[
        str, typer.Argument(help="valid inputs: day count, " + DATE_HELP)
    ],
    output: Annotated[Path, typer.Argument(help="image path, e.g. wallpaper.png")],
    background: Annotated[
        Optional[str],
        typer.Option(
            "--background",
            "-b",
            callback=validate_color,
            help="background color, overrides the day/night palette",
        ),
    ] = None,
) -> None:
    """Render a day or the next number of days to an image."""
    config = CONFIGURATION_REPO.get_config()

    image = render_image(
        KEEPER_REPO.keeper,
        parse_selection(selection),
        now_local(),
        background,
        image_config_from(config),
    )
    try:
        save_image(image, output)
    except ImageSaveError as e:
        __print_error(e)
        raise typer.Exit(1)

    console.print(Text(f"Rendered to {output}", style="green"))


def history(
    limit: Annotated[
        int, typer.Option("--limit", "-n", min=1, help="number of changes to show")
    ] = 10,
) -> None:
    """Show recent changes from the data history."""
    version = Version()
    try:
        entries = version.get_history(limit)
    except VersionControlError as e:
        __print_error(e)
        raise typer.Exit(1)
    if len(entries) == 0:
        console.print("[yellow]No history recorded yet[/yellow]")
        return

    table = Table(box=box.SIMPLE)
    table.add_column("commit", style="cyan")
    table.add_column("when", style="magenta")
    table.add_column("change")
    for entry in entries:
        parts = entry.split(" ", 3)
        if len(parts) < 4:
            table.add_row(entry, "", "")
            continue
        commit, day, clock, message = parts
        table.add_row(commit, f"{day} {clock}", message)
    console.print(table)


def __show(selection: Selection) -> None:
    config = CONFIGURATION_REPO.get_config()
    text = build_text(
        KEEPER_REPO.keeper,
        selection,
        now_local(),
        text_palette_from(config),
    )
    console.print(text, highlight=False)


def __commit(message: str) -> None:
    KEEPER_REPO.flush()

    config = CONFIGURATION_REPO.get_config()
    if config["use_git_versioning"]:
        version = Version()
        version.create_data_checkpoint(message)


def __print_error(error: Exception) -> None:
    # Messages can carry user paths, so they are never parsed as markup
    console.print(Text.assemble(("ERROR", "red"), " ", str(error)))
