# events.py
import enum
import logging
from dataclasses import dataclass

from pests.errors import PanicError
from pests.pest import Immunity
from pests.vector import Vector

logger = logging.getLogger(__name__)


class Button(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass(frozen=True)
class MouseButtonDown:
    window_id: int
    button: Button


@dataclass(frozen=True)
class TakeFocus:
    window_id: int


@dataclass(frozen=True)
class Quit:
    pass


class EventHandler:
    """Applies queued window events to the pests."""

    def __init__(self, manager, quit_enabled=True):
        self.manager = manager
        self.quit_enabled = quit_enabled

    def dispatch(self, events, alt_held=False):
        """Handle events in order. Returns False once a quit is accepted."""
        for e in events:
            if isinstance(e, MouseButtonDown):
                self.on_click(e)
            elif isinstance(e, TakeFocus):
                if alt_held:
                    logger.debug("focus on %s ignored, alt held", e.window_id)
                    continue
                self.on_take_focus(e)
            elif isinstance(e, Quit):
                if self.quit_enabled:
                    logger.info("quit requested")
                    return False
                logger.info("quit ignored")
        return True

    def _replace(self, immunity):
        speed = self.manager.cfg["replace_speed"]
        self.manager.spawn_random(
            self.manager.texture, immunity, Vector.random(0.0, speed, self.manager.rng))

    def on_click(self, e):
        logger.debug("click %s on %s", e.button.value, e.window_id)
        if e.button is Button.LEFT:
            self.manager.kill(e.window_id)
            self._replace(Immunity.NONE)
        elif e.button is Button.RIGHT:
            raise PanicError(f"right click on window {e.window_id}")

    def on_take_focus(self, e):
        pest = self.manager.find(e.window_id)
        if pest is None:
            logger.warning("focus on unknown window %s", e.window_id)
            return
        if pest.immunity is Immunity.ON_FIRST_FOCUS:
            pest.immunity = Immunity.NONE
            logger.info("removed immunity from %s", e.window_id)
        elif pest.immunity is Immunity.NONE:
            logger.info("killed pest %s", e.window_id)
            self.manager.kill(e.window_id)
            self._replace(Immunity.ON_FIRST_FOCUS)
