from __future__ import annotations

import itertools
import logging
import os
import random

import pytest

from pests.config import DEFAULTS
from pests.errors import ResourceError, WindowError
from pests.manager import PestManager
from pests.physics import Bounds

# Qt tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeWindow:
    def __init__(self, window_id: int, title: str, x: int, y: int, w: int, h: int, icon: str) -> None:
        self.window_id = window_id
        self.title = title
        self.pos = (x, y)
        self.size = (w, h)
        self.icon = icon
        self.fills: list = []
        self.images: list = []
        self.close_calls = 0
        self.moves: list = []
        self.fail_image = False

    def move(self, x: int, y: int) -> None:
        self.pos = (x, y)
        self.moves.append((x, y))

    def fill(self, color) -> None:
        self.fills.append(color)

    def draw_image(self, path: str) -> None:
        if self.fail_image:
            raise ResourceError(path)
        self.images.append(path)

    def close(self) -> None:
        self.close_calls += 1


class FakeFactory:
    def __init__(self) -> None:
        self._ids = itertools.count(100)
        self.created: list[FakeWindow] = []
        self.fail_create = False
        self.fail_image = False

    def create(self, title, x, y, w, h, icon_path):
        if self.fail_create:
            raise WindowError("no window")
        window = FakeWindow(next(self._ids), title, x, y, w, h, icon_path)
        window.fail_image = self.fail_image
        self.created.append(window)
        return window


SCREEN_BOUNDS = Bounds(10.0, 10.0, 1900, 1000)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def factory() -> FakeFactory:
    return FakeFactory()


@pytest.fixture
def manager(factory: FakeFactory, clock: FakeClock) -> PestManager:
    return PestManager(factory, SCREEN_BOUNDS, (960, 540), dict(DEFAULTS), rng=random.Random(1234), clock=clock)


@pytest.fixture(autouse=True)
def _reset_pests_logger():
    yield
    logger = logging.getLogger("pests")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
