import random
from typing import List

import pytest

from striker.entities import Stats
from striker.world import World


class RecordingListener:
    """Collects every notification so tests can assert on them."""

    def __init__(self) -> None:
        self.stats: List[Stats] = []
        self.game_overs: List[Stats] = []

    def on_stats_changed(self, stats: Stats) -> None:
        self.stats.append(stats)

    def on_game_over(self, stats: Stats) -> None:
        self.game_overs.append(stats)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def world(listener: RecordingListener) -> World:
    return World(width=800, height=600, listener=listener, rng=random.Random(7))
