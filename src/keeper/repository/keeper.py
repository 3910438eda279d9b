# SPDX-License-Identifier: MIT

import datetime
from copy import deepcopy
from typing import Any, Optional

import pendulum
import structlog
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from keeper import configuration, time
from keeper.model.keeper import Keeper
from keeper.service.schedule import normalize

logger = structlog.get_logger(__name__)


class KeeperRepository:
    def __init__(self) -> None:
        self._keeper: Optional[Keeper] = None
        self.is_dirty = False

    @property
    def keeper(self) -> Keeper:
        if self._keeper is None:
            self.__load_data()
        if self._keeper is None:
            raise ValueError()
        return self._keeper

    def __load_data(self) -> None:
        path = configuration.DATA_KEEPER_PATH
        raw_keeper = None
        if path.is_file():
            raw_keeper = load(path.read_text(), Loader=Loader)
        self._keeper = self.__convert_keeper_for_deserialization(raw_keeper)
        logger.debug("keeper loaded", path=str(path), days=len(self._keeper))

    def __save_data(self) -> None:
        path = configuration.DATA_KEEPER_PATH
        serializable_keeper = self.__convert_keeper_for_serialization(
            deepcopy(self.keeper)
        )
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dump(serializable_keeper, Dumper=Dumper, sort_keys=True))
        logger.debug("keeper written", path=str(path))

    def flush(self) -> bool:
        if self._keeper is not None and self.is_dirty:
            normalize(self._keeper)
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop the in-memory keeper so the next access reads from disk."""
        self._keeper = None
        self.is_dirty = False

    def mark_dirty(self) -> None:
        self.is_dirty = True

    def __convert_keeper_for_serialization(self, keeper: Keeper) -> dict[str, Any]:
        return {
            "days": {
                time.date_to_iso_str(date): {
                    hour: [
                        {
                            "completed": task["completed"],
                            "description": task["description"],
                        }
                        for task in tasks
                    ]
                    for hour, tasks in schedule.items()
                }
                for date, schedule in keeper.items()
            }
        }

    def __convert_keeper_for_deserialization(self, raw_keeper: Any) -> Keeper:
        if raw_keeper is None or raw_keeper.get("days") is None:
            return {}

        keeper: Keeper = {}
        for raw_date, raw_schedule in sorted(
            raw_keeper["days"].items(), key=lambda item: str(item[0])
        ):
            date = self.__convert_date_for_deserialization(raw_date)
            keeper[date] = {
                int(hour): [
                    {
                        "completed": bool(task["completed"]),
                        "description": str(task["description"]),
                    }
                    for task in tasks
                ]
                for hour, tasks in sorted(
                    (raw_schedule or {}).items(), key=lambda item: int(item[0])
                )
            }
        return keeper

    def __convert_date_for_deserialization(self, raw_date: Any) -> pendulum.Date:
        # Unquoted keys written by hand are parsed by YAML as dates
        if isinstance(raw_date, datetime.date):
            return pendulum.date(raw_date.year, raw_date.month, raw_date.day)
        return time.date_from_iso_str(str(raw_date))


KEEPER_REPO = KeeperRepository()
