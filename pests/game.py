# game.py
import logging

from pests.stopwatch import Stopwatch

logger = logging.getLogger(__name__)


class FrameLoop:
    """One call to tick() is one frame."""

    def __init__(self, manager, handler, poll, alt_held=lambda: False, clock=None):
        self.manager = manager
        self.handler = handler
        self.poll = poll
        self.alt_held = alt_held
        self.stopwatch = Stopwatch(clock) if clock else Stopwatch()
        self.dt = 0.0
        self.frames = 0
        self.running = True

    def tick(self):
        """Run a frame. Returns False when the loop should stop."""
        if not self.running:
            return False
        if self.frames:
            self.dt = self.stopwatch.elapsed_seconds()
        self.stopwatch.reset()
        self.frames += 1

        if not self.manager.pests:
            logger.info("no pests left")
            self.running = False
            return False

        self.manager.check_flood()

        # alt is sampled before draining, like a keyboard snapshot
        alt = self.alt_held()
        if not self.handler.dispatch(self.poll(), alt_held=alt):
            self.running = False
            return False

        self.manager.update(self.dt)
        return True
