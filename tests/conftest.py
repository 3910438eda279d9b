"""Shared pytest fixtures and helpers for keeper tests."""

from collections.abc import Iterator
from pathlib import Path

import pendulum
import pytest
from typer.testing import CliRunner

from keeper import configuration
from keeper.model.keeper import Keeper
from keeper.repository.configuration import CONFIGURATION_REPO
from keeper.repository.keeper import KEEPER_REPO

TODAY = pendulum.date(2026, 10, 18)


def at(hour: int, minute: int = 0, second: int = 0, microsecond: int = 0) -> pendulum.DateTime:
    """A local instant on TODAY."""
    return pendulum.datetime(
        TODAY.year,
        TODAY.month,
        TODAY.day,
        hour,
        minute,
        second,
        microsecond,
        tz="local",
    )


@pytest.fixture
def today() -> pendulum.Date:
    return TODAY


@pytest.fixture
def morning() -> pendulum.DateTime:
    return at(8)


@pytest.fixture
def evening() -> pendulum.DateTime:
    return at(21, 30)


@pytest.fixture
def keeper() -> Keeper:
    return {}


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def keeper_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point config and data at a temporary directory, with git versioning off.

    Yields the data directory.
    """
    config_dir = tmp_path / "config"
    data_dir = tmp_path / "data"
    config_dir.mkdir()
    data_dir.mkdir()
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", data_dir)
    monkeypatch.setattr(configuration, "DATA_KEEPER_PATH", data_dir / "keeper.yaml")

    CONFIGURATION_REPO.reset()
    KEEPER_REPO.reset()
    CONFIGURATION_REPO.update_config(use_git_versioning=False)
    CONFIGURATION_REPO.flush()
    try:
        yield data_dir
    finally:
        CONFIGURATION_REPO.reset()
        KEEPER_REPO.reset()
