"""
Item record

The demo application's domain record: a timestamped, colored list entry
addressed by a UUID (stable across deletions, unlike a list index).
"""

import random
from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def light_random_color() -> str:
    """A random pale color as ``"r g b a"`` with components in 0.75...1.0."""
    r, g, b = (round(random.uniform(0.75, 1.0), 3) for _ in range(3))
    return f"{r} {g} {b} 1.0"


def css_color(color: str) -> str:
    """Convert ``"r g b a"`` (0...1 components) to a CSS ``rgba()`` value."""
    try:
        r, g, b, a = (float(c) for c in color.split())
    except ValueError:
        r = g = b = a = 1.0
    return f"rgba({round(r * 255)}, {round(g * 255)}, {round(b * 255)}, {a})"


class Item(BaseModel):
    uuid: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=datetime.now)
    color: str = Field(default_factory=light_random_color)

    @property
    def css_color(self) -> str:
        return css_color(self.color)
