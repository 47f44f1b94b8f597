# pest.py
import enum
from dataclasses import dataclass
from typing import Optional, Tuple


class Immunity(enum.Enum):
    NONE = "none"
    ON_FIRST_FOCUS = "on_first_focus"
    ALWAYS = "always"


class Fill(enum.Enum):
    COLOR = "color"
    TEXTURE = "texture"
    BLANK = "blank"


@dataclass(frozen=True)
class InitMethod:
    """What gets drawn into a freshly created window."""
    kind: Fill
    color: Optional[Tuple[int, int, int]] = None
    texture_path: Optional[str] = None

    @classmethod
    def with_color(cls, color):
        return cls(Fill.COLOR, color=tuple(color))

    @classmethod
    def with_texture(cls, path):
        return cls(Fill.TEXTURE, texture_path=path)

    @classmethod
    def blank(cls):
        return cls(Fill.BLANK)

    def render(self, window):
        if self.kind is Fill.COLOR:
            window.fill(self.color)
        elif self.kind is Fill.TEXTURE:
            window.draw_image(self.texture_path)
        elif self.kind is not Fill.BLANK:
            raise ValueError(f"unknown fill {self.kind!r}")


class Pest:
    def __init__(self, window, physics, immunity=Immunity.NONE):
        self.window = window
        self.physics = physics
        self.immunity = immunity
        self.time_alive = 0.0

    @property
    def window_id(self):
        return self.window.window_id

    @property
    def position(self):
        return self.physics.transform.position

    def __repr__(self):
        p = self.position
        return f"Pest(id={self.window_id}, pos=({p.x:.1f}, {p.y:.1f}), immunity={self.immunity.name})"
