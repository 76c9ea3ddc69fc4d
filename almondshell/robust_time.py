"""A controllable clock with timers and alarms."""

from __future__ import annotations

import time
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

Duration = Union[timedelta, float, int]
AlarmCallback = Callable[[], None]

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _seconds(duration: Duration) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


def _delta(duration: Duration) -> timedelta:
    if isinstance(duration, timedelta):
        return duration
    return timedelta(seconds=duration)


class RobustTime:
    """Holds a wall-clock time and a steady time that move only when told to."""

    def __init__(self) -> None:
        self._system_time = datetime.now()
        self._steady_time = time.monotonic()
        self.game_time_scale = 1.0
        self._alarms: dict[datetime, AlarmCallback] = {}

    @property
    def current_system_time(self) -> datetime:
        return self._system_time

    @property
    def current_steady_time(self) -> float:
        """The steady time in seconds."""
        return self._steady_time

    def set_current_time(self, time: datetime) -> None:
        """Set the wall-clock time; the steady time restarts from now."""
        self._system_time = time
        self._steady_time = _now_steady()

    def advance_time(self, duration: Duration) -> None:
        """Move both clocks forward by a timedelta or a number of seconds."""
        self._system_time += _delta(duration)
        self._steady_time += _seconds(duration)

    def rewind_time(self, duration: Duration) -> None:
        """Move both clocks back by a timedelta or a number of seconds."""
        self._system_time -= _delta(duration)
        self._steady_time -= _seconds(duration)

    def current_time_string(self, fmt: str = DEFAULT_TIME_FORMAT) -> str:
        """Format the wall-clock time in local time."""
        return self._system_time.astimezone().strftime(fmt)

    def create_timer(self) -> "Timer":
        return Timer(self)

    def set_alarm(self, alarm_time: datetime, callback: AlarmCallback) -> None:
        """Schedule a callback; an alarm at the same time is replaced."""
        self._alarms[alarm_time] = callback

    def check_and_trigger_alarms(self) -> int:
        """Run and remove every alarm that is due, earliest first; return how many ran."""
        now = self._system_time
        due = sorted(t for t in self._alarms if t <= now)
        for alarm_time in due:
            self._alarms.pop(alarm_time)()
        return len(due)

    @property
    def pending_alarms(self) -> int:
        return len(self._alarms)


def _now_steady() -> float:
    return time.monotonic()


class Timer:
    """Measures steady time elapsed on a RobustTime."""

    def __init__(self, system: RobustTime) -> None:
        self._system = system
        now = _now_steady()
        self._start: float = now
        self._end: float = now
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._start = self._system.current_steady_time
        self._running = True

    def stop(self) -> None:
        self._end = self._system.current_steady_time
        self._running = False

    def elapsed(self) -> float:
        """Seconds between start and stop, or start and the current steady time while running."""
        end: Optional[float] = self._system.current_steady_time if self._running else self._end
        return end - self._start