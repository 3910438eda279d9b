# SPDX-License-Identifier: MIT

import pendulum
from rich.console import Console
from rich.text import Text

from keeper.color import DEFAULT_TEXT_PALETTE, TextPalette, state_color
from keeper.model.keeper import Keeper
from keeper.model.selection import Selection
from keeper.view.layout import selection_lines


def build_text(
    keeper: Keeper,
    selection: Selection,
    now: pendulum.DateTime,
    palette: TextPalette = DEFAULT_TEXT_PALETTE,
) -> Text:
    text = Text(end="")
    for position, line in enumerate(selection_lines(keeper, selection, now)):
        if position > 0:
            text.append("\n")
        for run in line:
            if run.state is None:
                text.append(run.text)
            else:
                text.append(run.text, style=state_color(palette, run.state))
    return text


def render_text(
    keeper: Keeper,
    selection: Selection,
    now: pendulum.DateTime,
    use_color: bool = True,
    palette: TextPalette = DEFAULT_TEXT_PALETTE,
) -> str:
    """
    Render a selection as text.

    With use_color the styling is emitted as ANSI escapes, otherwise the
    same characters are returned without any styling.
    """
    text = build_text(keeper, selection, now, palette)
    if not use_color:
        return text.plain

    console = Console(force_terminal=True, color_system="standard", soft_wrap=True)
    with console.capture() as capture:
        console.print(text, end="", highlight=False)
    return capture.get()
