"""Shared pytest fixtures for the startup-metrics test suite."""

from datetime import datetime, timedelta

import pytest

from startup_metrics.models import ScenarioStop

BASE_TIME = datetime(2023, 4, 12, 9, 15, 0)


def make_stops(*pairs: tuple[str, int]) -> list[ScenarioStop]:
    """Build stops one second apart from (scenario_name, ms) pairs."""
    return [
        ScenarioStop(
            timestamp=BASE_TIME + timedelta(seconds=i),
            scenario_name=name,
            scenario_time_ms=ms,
        )
        for i, (name, ms) in enumerate(pairs)
    ]


def milestone_stream(grid_load: str, alt: int, cst: list[int], ast: list[int], noise: bool = False):
    pairs = [("application_launch_time", alt)]
    for ms in cst:
        pairs.append(("messaging_switch_channel_v2", ms))
        if noise:
            pairs.append(("message_list_render", 7))
    pairs.append((grid_load, 999))
    for ms in ast:
        pairs.append((grid_load, ms))
        if noise:
            pairs.append(("application_launch_time", 1))
    return make_stops(*pairs)


@pytest.fixture()
def react_stops() -> list[ScenarioStop]:
    return milestone_stream(
        "hybrid_entity_teams_grid_load",
        100,
        [10, 20, 30, 40, 50],
        [200, 210, 220, 230, 240],
    )


@pytest.fixture()
def angular_stops() -> list[ScenarioStop]:
    return milestone_stream(
        "teams_grid_load",
        100,
        [10, 20, 30, 40, 50],
        [200, 200, 200, 200, 200],
        noise=True,
    )
