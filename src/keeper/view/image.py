# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import pendulum
import structlog
from PIL import Image, ImageDraw, ImageFont

from keeper.color import DAY_PALETTE, NIGHT_PALETTE, ImagePalette, state_color
from keeper.configuration import Configuration, get_default_configuration
from keeper.model.keeper import Keeper
from keeper.model.selection import Selection
from keeper.view.layout import selection_lines
from keeper.view.text import render_text

logger = structlog.get_logger(__name__)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


class ImageConfig(TypedDict):
    width: int
    height: int
    padding_top: int
    padding_side: int
    header_offset: int
    char_aspect_ratio: float
    font_path: Optional[str]
    day_start_hour: int
    night_start_hour: int


class ImageSaveError(Exception):
    pass


def image_config_from(config: Configuration) -> ImageConfig:
    return {
        "width": config["canvas_width"],
        "height": config["canvas_height"],
        "padding_top": config["padding_top"],
        "padding_side": config["padding_side"],
        "header_offset": config["header_offset"],
        "char_aspect_ratio": config["char_aspect_ratio"],
        "font_path": config["font_path"],
        "day_start_hour": config["day_start_hour"],
        "night_start_hour": config["night_start_hour"],
    }


DEFAULT_IMAGE_CONFIG = image_config_from(get_default_configuration())


def usable_area(config: ImageConfig) -> tuple[float, float]:
    """Width and height left for text once padding and the header offset are taken."""
    usable_width = config["width"] - 2 * config["padding_side"]
    usable_height = config["height"] - config["padding_top"] - config["header_offset"]
    return (usable_width, usable_height)


def measure_text(text: str, char_aspect_ratio: float) -> tuple[int, float]:
    """
    Measure plain text as (line count, longest line width).

    The width is in character heights rather than characters, so that both
    values can be compared against a square font scale.
    """
    lines = text.split("\n") if text else []
    longest = max((len(line) for line in lines), default=0)
    return (len(lines), longest / char_aspect_ratio)


def compute_font_scale(text: str, config: ImageConfig) -> float:
    """
    Pick one font scale, in pixels per line, that fits the whole text.

    This is the smaller of the scale that fits every line vertically and the
    scale that fits the longest line horizontally.
    """
    usable_width, usable_height = usable_area(config)
    line_count, width_units = measure_text(text, config["char_aspect_ratio"])

    if line_count == 0:
        return float(usable_height)
    height_scale = usable_height / line_count
    if width_units == 0:
        return height_scale
    return min(height_scale, usable_width / width_units)


def is_daytime(now: pendulum.DateTime, config: ImageConfig) -> bool:
    return config["day_start_hour"] <= now.hour < config["night_start_hour"]


def palette_for(now: pendulum.DateTime, config: ImageConfig) -> ImagePalette:
    return DAY_PALETTE if is_daytime(now, config) else NIGHT_PALETTE


def load_font(size: int, font_path: Optional[str]) -> Font:
    if font_path is not None:
        return ImageFont.truetype(font_path, size)
    return ImageFont.load_default(size=size)


class GlyphCursor:
    """Draws runs left to right, wrapping to a new line on request."""

    def __init__(
        self,
        draw: ImageDraw.ImageDraw,
        font: Font,
        origin: tuple[float, float],
        line_height: float,
    ) -> None:
        self.draw = draw
        self.font = font
        self.origin_x, self.origin_y = origin
        self.line_height = line_height
        self.x = self.origin_x
        self.y = self.origin_y

    def write(self, text: str, fill: str) -> None:
        if not text:
            return
        self.draw.text((self.x, self.y), text, font=self.font, fill=fill)
        self.x += self.draw.textlength(text, font=self.font)

    def newline(self) -> None:
        self.x = self.origin_x
        self.y += self.line_height


def render_image(
    keeper: Keeper,
    selection: Selection,
    now: pendulum.DateTime,
    background_color: Optional[str] = None,
    image_config: Optional[ImageConfig] = None,
) -> Image.Image:
    config = image_config if image_config is not None else DEFAULT_IMAGE_CONFIG

    plain_text = render_text(keeper, selection, now, use_color=False)
    font_scale = compute_font_scale(plain_text, config)
    logger.debug("font scale computed", font_scale=font_scale)

    palette = palette_for(now, config)
    background = background_color or palette["background"]

    image = Image.new("RGB", (config["width"], config["height"]), background)
    draw = ImageDraw.Draw(image)
    font = load_font(max(1, int(font_scale)), config["font_path"])
    cursor = GlyphCursor(
        draw,
        font,
        (config["padding_side"], config["padding_top"] + config["header_offset"]),
        font_scale,
    )

    # Walk the schedule rather than the plain text so every run keeps its state
    for line in selection_lines(keeper, selection, now):
        for run in line:
            if run.state is None:
                cursor.write(run.text, palette["text"])
            else:
                cursor.write(run.text, state_color(palette, run.state))
        cursor.newline()

    return image


def save_image(image: Image.Image, path: Path) -> None:
    try:
        image.save(path)
    except (OSError, ValueError) as e:
        raise ImageSaveError(f"failed to write image to {path}: {e}") from e
