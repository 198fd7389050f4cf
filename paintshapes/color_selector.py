"""RGB colour picking with stepped per-channel buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_STEP = 10
_MAX = 255


@dataclass(frozen=True)
class Color:
    """An RGB colour with components in 0.0..1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


class Channel(Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


def _clamp(value: int) -> int:
    return min(_MAX, max(0, value))


class ColorSelector:
    """Three 0..255 channel values changed in steps of ten."""

    def __init__(self) -> None:
        self._values: dict[Channel, int] = {channel: 0 for channel in Channel}

    def increase(self, channel: Channel) -> int:
        """Raise a channel by one step, up to 255; return the new value."""
        channel = Channel(channel)
        self._values[channel] = min(_MAX, self._values[channel] + _STEP)
        return self._values[channel]

    def decrease(self, channel: Channel) -> int:
        """Lower a channel by one step, down to 0; return the new value."""
        channel = Channel(channel)
        self._values[channel] = max(0, self._values[channel] - _STEP)
        return self._values[channel]

    def value(self, channel: Channel) -> int:
        return self._values[Channel(channel)]

    def background_rgb(self) -> tuple[int, int, int]:
        """The preview colour as 0..255 integers."""
        return tuple(_clamp(self._values[c]) for c in Channel)  # type: ignore[return-value]

    def get_color(self) -> Color:
        r, g, b = self.background_rgb()
        return Color(r / 255.0, g / 255.0, b / 255.0)