# SPDX-License-Identifier: MIT

from typing import TypedDict

from keeper.configuration import Configuration
from keeper.view.classify import DisplayState


class TextPalette(TypedDict):
    done: str
    overdue: str
    pending: str


class ImagePalette(TypedDict):
    background: str
    text: str
    done: str
    overdue: str
    pending: str


# Rich style names for the terminal view
DEFAULT_TEXT_PALETTE: TextPalette = {
    "done": "green",
    "overdue": "red",
    "pending": "yellow",
}

DAY_PALETTE: ImagePalette = {
    "background": "#f4f1ea",
    "text": "#2e3440",
    "done": "#3a7d44",
    "overdue": "#b3261e",
    "pending": "#a66f00",
}

NIGHT_PALETTE: ImagePalette = {
    "background": "#1d1f27",
    "text": "#d8dee9",
    "done": "#8fbc6a",
    "overdue": "#e06c75",
    "pending": "#e5c07b",
}


def text_palette_from(config: Configuration) -> TextPalette:
    return {
        "done": config["done_color"],
        "overdue": config["overdue_color"],
        "pending": config["pending_color"],
    }


def state_color(palette: TextPalette | ImagePalette, state: DisplayState) -> str:
    match state:
        case DisplayState.DONE:
            return palette["done"]
        case DisplayState.OVERDUE:
            return palette["overdue"]
        case DisplayState.PENDING:
            return palette["pending"]
