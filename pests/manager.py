# manager.py
import logging
import random

from pests.config import DEFAULTS
from pests.pest import Immunity, InitMethod, Pest
from pests.physics import Physics, Transform
from pests.stopwatch import Stopwatch
from pests.vector import Vector

logger = logging.getLogger(__name__)


class PestManager:
    """Owns every pest and the windows behind them."""

    def __init__(self, window_factory, bounds, center, config=None, rng=None, clock=None):
        self.factory = window_factory
        self.bounds = bounds
        self.center = center
        self.cfg = dict(DEFAULTS if config is None else config)
        self.rng = rng or random.Random()
        self.pests = []

        self.flood = False
        self._clock = clock
        self.spawn_timer = self._stopwatch()

    def _stopwatch(self):
        return Stopwatch(self._clock) if self._clock else Stopwatch()

    def __len__(self):
        return len(self.pests)

    def __iter__(self):
        return iter(self.pests)

    @property
    def texture(self):
        return InitMethod.with_texture(self.cfg["image_path"])

    def spawn_at(self, x, y, init, immunity, velocity):
        """Create a pest at (x, y). Nothing is registered if any step fails."""
        w, h = self.cfg["pest_size"]
        physics = Physics(
            Transform(x, y, w, h),
            velocity,
            Vector(*self.cfg["gravity"]),
            loss=(self.cfg["bounce_loss"], self.cfg["bounce_loss"]),
            rest=self.cfg["rest_speed"],
        )
        window = self.factory.create(
            self.cfg["window_title"], int(x), int(y), w, h, self.cfg["image_path"])
        try:
            init.render(window)
        except Exception:
            window.close()
            raise

        pest = Pest(window, physics, immunity)
        self.pests.append(pest)
        logger.debug("spawned %r", pest)
        return pest

    def spawn_random(self, init, immunity, velocity):
        b = self.bounds
        h = self.cfg["pest_size"][1]
        # keep a pest height clear of the bottom edge
        x = b.x + b.w * self.rng.random()
        y = b.y + (b.h - h) * self.rng.random()
        return self.spawn_at(int(x), int(y), init, immunity, velocity)

    def find(self, window_id):
        for pest in self.pests:
            if pest.window_id == window_id:
                return pest
        return None

    def kill(self, window_id):
        """Remove the pest and close its window. Unknown ids are ignored."""
        pest = self.find(window_id)
        if pest is None:
            logger.warning("no pest for window %s", window_id)
            return False
        logger.debug("killing %r", pest)
        self.pests.remove(pest)
        pest.window.close()
        return True

    def close_all(self):
        while self.pests:
            self.pests.pop().window.close()

    def update(self, dt):
        """Step every pest and move its window.

        Moving windows is slow, so each pest gets dt plus the time already
        spent in this batch.
        """
        batch = self._stopwatch()
        for pest in self.pests:
            pest_dt = dt + batch.elapsed_seconds()
            pest.physics.update(pest_dt, self.bounds)
            pest.time_alive += pest_dt
            pos = pest.position
            pest.window.move(int(pos.x), int(pos.y))

    def check_flood(self):
        if not self.pests:
            return
        if not self.flood and self.pests[0].time_alive > self.cfg["flood_after"]:
            self.flood = True
            logger.info("flood mode on")

        if self.flood and self.spawn_timer.elapsed_seconds() > self.cfg["flood_interval"]:
            self.spawn_timer.reset()
            speed = self.cfg["flood_speed"]
            x, y = self.center
            self.spawn_at(x, y, self.texture, Immunity.NONE,
                          Vector.random(-speed, speed, self.rng))
