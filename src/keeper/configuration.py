# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "keeper"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_KEEPER_PATH: Path = DATA_PATH / "keeper.yaml"


class Configuration(TypedDict):
    use_git_versioning: bool
    data_path: Optional[str]
    done_color: str
    overdue_color: str
    pending_color: str
    canvas_width: int
    canvas_height: int
    padding_top: int
    padding_side: int
    header_offset: int
    char_aspect_ratio: float
    font_path: Optional[str]
    day_start_hour: int
    night_start_hour: int


def get_default_configuration() -> Configuration:
    return {
        "use_git_versioning": True,
        "data_path": None,
        "done_color": "green",
        "overdue_color": "red",
        "pending_color": "yellow",
        "canvas_width": 2560,
        "canvas_height": 1600,
        "padding_top": 60,
        "padding_side": 80,
        "header_offset": 40,
        "char_aspect_ratio": 1.8,
        "font_path": None,
        "day_start_hour": 7,
        "night_start_hour": 19,
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_KEEPER_PATH

    DATA_PATH = data_path
    DATA_KEEPER_PATH = DATA_PATH / "keeper.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the
    keeper repository is first read.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
