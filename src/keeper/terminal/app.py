# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from keeper.log import configure_logging
from keeper.terminal import configuration, schedule
from keeper.terminal.custom_typer import OrderedAliasedTyperGroup

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Keeper - an hour by hour schedule in the CLI",
    no_args_is_help=True,
)
app.command(name="add, a", no_args_is_help=True)(schedule.add)
app.command(name="mark, m", no_args_is_help=True)(schedule.mark)
app.command(name="change, c", no_args_is_help=True)(schedule.change)
app.command(name="show, s")(schedule.show)
app.command(name="render, r", no_args_is_help=True)(schedule.render)
app.command(name="history, h")(schedule.history)
app.add_typer(configuration.app, name="config")


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr",
        ),
    ] = False,
) -> None:
    """
    Keeper - an hour by hour schedule in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose=verbose)


def run() -> None:
    app()
