"""Playback driver — advances the displayed instant one tick at a time.

The engine holds no time state. A caller (UI timer, test, CLI loop) owns a
Playback value and replaces it with playback.tick() on every frame.
"""

from collections.abc import Iterator
from dataclasses import dataclass, replace

from solarscope.models import CalendarDate
from solarscope.timescale import Instant, add_days, to_calendar

SPEEDS = (1.0, 10.0, 100.0, 1000.0)  # Simulated days per tick


@dataclass(frozen=True)
class Playback:
    """Current instant plus play/pause state and speed."""

    when: CalendarDate
    speed: float = 1.0  # Days per tick; negative runs backwards
    playing: bool = False

    @classmethod
    def at(cls, when: Instant, speed: float = 1.0, playing: bool = False) -> "Playback":
        return cls(to_calendar(when), speed, playing)

    def tick(self) -> "Playback":
        if not self.playing:
            return self
        return replace(self, when=add_days(self.when, self.speed))

    def play(self) -> "Playback":
        return replace(self, playing=True)

    def pause(self) -> "Playback":
        return replace(self, playing=False)

    def seek(self, when: Instant) -> "Playback":
        return replace(self, when=to_calendar(when))

    def with_speed(self, speed: float) -> "Playback":
        return replace(self, speed=speed)


def ticks(playback: Playback, count: int) -> Iterator[CalendarDate]:
    """Yield the instant after each of count ticks."""
    for _ in range(count):
        playback = playback.tick()
        yield playback.when
