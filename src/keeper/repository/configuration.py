# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from keeper import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        raw_config = None
        if configuration.APP_CONFIG_PATH.is_file():
            raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Migration: fill in any setting added since the file was written
        config = cast(dict[str, Any], configuration.get_default_configuration())
        if raw_config is not None:
            config.update(raw_config)
        self._config = cast(configuration.Configuration, config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        use_git_versioning: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        done_color: Optional[str] = None,
        overdue_color: Optional[str] = None,
        pending_color: Optional[str] = None,
        canvas_width: Optional[int] = None,
        canvas_height: Optional[int] = None,
        padding_top: Optional[int] = None,
        padding_side: Optional[int] = None,
        header_offset: Optional[int] = None,
        char_aspect_ratio: Optional[float] = None,
        font_path: Optional[str] = None,
        remove_font_path: bool = False,
        day_start_hour: Optional[int] = None,
        night_start_hour: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        if use_git_versioning is not None:
            self.config["use_git_versioning"] = use_git_versioning
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if done_color is not None:
            self.config["done_color"] = done_color
        if overdue_color is not None:
            self.config["overdue_color"] = overdue_color
        if pending_color is not None:
            self.config["pending_color"] = pending_color
        if canvas_width is not None:
            self.config["canvas_width"] = canvas_width
        if canvas_height is not None:
            self.config["canvas_height"] = canvas_height
        if padding_top is not None:
            self.config["padding_top"] = padding_top
        if padding_side is not None:
            self.config["padding_side"] = padding_side
        if header_offset is not None:
            self.config["header_offset"] = header_offset
        if char_aspect_ratio is not None:
            self.config["char_aspect_ratio"] = char_aspect_ratio
        if font_path is not None:
            self.config["font_path"] = font_path
        if remove_font_path:
            self.config["font_path"] = None
        if day_start_hour is not None:
            self.config["day_start_hour"] = day_start_hour
        if night_start_hour is not None:
            self.config["night_start_hour"] = night_start_hour


CONFIGURATION_REPO = ConfigurationRepository()
