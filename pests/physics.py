# physics.py
from dataclasses import dataclass

from pests.vector import Vector

BOUNCE_LOSS_X = 0.3
BOUNCE_LOSS_Y = 0.3
REST_SPEED = 0.2


@dataclass(frozen=True)
class Bounds:
    """Playable screen area. Fixed for the whole run."""
    x: float
    y: float
    w: int
    h: int

    @classmethod
    def from_screen(cls, left, top, width, height, margin=(10, 10, 20, 80)):
        mx, my, mw, mh = margin
        return cls(float(left + mx), float(top + my), int(width - mw), int(height - mh))

    @property
    def lower_x(self):
        return float(self.x)

    @property
    def upper_x(self):
        return float(self.x + self.w)

    @property
    def lower_y(self):
        return float(self.y)

    @property
    def upper_y(self):
        return float(self.y + self.h)


class Transform:
    def __init__(self, x, y, width, height):
        self.position = Vector(float(x), float(y))
        self._width = int(width)
        self._height = int(height)

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height


def _bounced(speed, loss, rest):
    v = abs(speed) - loss * abs(speed)
    return 0.0 if v < rest else v


class Physics:
    def __init__(self, transform, velocity, acceleration,
                 loss=(BOUNCE_LOSS_X, BOUNCE_LOSS_Y), rest=REST_SPEED):
        self.transform = transform
        self.velocity = velocity
        self.acceleration = acceleration
        self.loss_x, self.loss_y = loss
        self.rest = rest

    def update(self, dt, bounds):
        """Advance one step and bounce off bounds.

        Returns the kinematic displacement v*dt + a*dt^2/2. The position
        itself moves by the new velocity, not by that displacement.
        """
        w = self.transform.width
        h = self.transform.height
        cx = self.transform.position.x
        cy = self.transform.position.y
        vx = self.velocity.x
        vy = self.velocity.y
        ax = self.acceleration.x
        ay = self.acceleration.y

        dist = Vector(vx * dt + 0.5 * ax * dt * dt, vy * dt + 0.5 * ay * dt * dt)

        self.velocity = Vector(vx + ax * dt, vy + ay * dt)
        self.transform.position = self.transform.position + self.velocity

        # bounce checks use the state from before this step
        if cy < bounds.lower_y:
            self.velocity.y = _bounced(vy, self.loss_y, self.rest)
            self.transform.position.y = bounds.lower_y + (bounds.lower_y - cy)
        elif cy + h > bounds.upper_y:
            self.velocity.y = -_bounced(vy, self.loss_y, self.rest)
            self.transform.position.y = bounds.upper_y - h - (cy + h - bounds.upper_y)

        if cx + w > bounds.upper_x:
            self.velocity.x = -_bounced(vx, self.loss_x, self.rest)
            self.transform.position.x = bounds.upper_x - w - (cx + w - bounds.upper_x)
        elif cx < bounds.lower_x:
            self.velocity.x = _bounced(vx, self.loss_x, self.rest)
            self.transform.position.x = bounds.lower_x + (bounds.lower_x - cx)

        return dist
