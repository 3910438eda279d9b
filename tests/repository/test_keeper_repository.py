"""Tests for loading and flushing the keeper file."""

from pathlib import Path

import pendulum
from yaml import safe_load

from keeper import configuration
from keeper.repository.keeper import KEEPER_REPO
from keeper.service.schedule import add_task, mark_task


class TestKeeperRepository:
    def test_missing_file_is_an_empty_keeper(self, keeper_home: Path) -> None:
        assert KEEPER_REPO.keeper == {}

    def test_flush_without_changes_writes_nothing(self, keeper_home: Path) -> None:
        _ = KEEPER_REPO.keeper
        assert KEEPER_REPO.flush() is False
        assert not configuration.DATA_KEEPER_PATH.exists()

    def test_flush_writes_normalized_yaml(
        self, keeper_home: Path, today: pendulum.Date
    ) -> None:
        add_task(KEEPER_REPO.keeper, today, 9, "buy milk")
        add_task(KEEPER_REPO.keeper, today, 9, "walk dog")
        mark_task(KEEPER_REPO.keeper, today, 9, 0)
        KEEPER_REPO.mark_dirty()

        assert KEEPER_REPO.flush() is True

        written = safe_load(configuration.DATA_KEEPER_PATH.read_text())
        assert written == {
            "days": {
                "2026-10-18": {
                    9: [
                        {"completed": False, "description": "walk dog"},
                        {"completed": True, "description": "buy milk"},
                    ]
                }
            }
        }

    def test_reload_after_flush(self, keeper_home: Path, today: pendulum.Date) -> None:
        add_task(KEEPER_REPO.keeper, today.add(days=1), 17, "gym")
        add_task(KEEPER_REPO.keeper, today, 8, "coffee")
        KEEPER_REPO.mark_dirty()
        KEEPER_REPO.flush()

        KEEPER_REPO.reset()
        keeper = KEEPER_REPO.keeper

        assert list(keeper) == [today, today.add(days=1)]
        assert all(isinstance(date, pendulum.Date) for date in keeper)
        assert keeper[today] == {8: [{"completed": False, "description": "coffee"}]}

    def test_hand_written_file(self, keeper_home: Path) -> None:
        configuration.DATA_KEEPER_PATH.write_text(
            "days:\n"
            "  2026-10-19:\n"
            "    '7':\n"
            "    - completed: true\n"
            "      description: run\n"
            "  '2026-10-18':\n"
            "    21:\n"
            "    - {completed: false, description: read}\n"
            "    3: []\n"
        )

        keeper = KEEPER_REPO.keeper

        assert list(keeper) == [pendulum.date(2026, 10, 18), pendulum.date(2026, 10, 19)]
        assert list(keeper[pendulum.date(2026, 10, 18)]) == [3, 21]
        assert keeper[pendulum.date(2026, 10, 19)][7] == [
            {"completed": True, "description": "run"}
        ]

    def test_empty_file(self, keeper_home: Path) -> None:
        configuration.DATA_KEEPER_PATH.write_text("")
        assert KEEPER_REPO.keeper == {}
