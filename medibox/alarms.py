"""Medicine alarms and the clock that decides when they ring."""

from __future__ import annotations

from dataclasses import dataclass, field

from medibox import config

DEFAULT_ALARM_COUNT = 2


@dataclass
class Alarm:
    """One daily alarm."""

    hour: int = 0
    minute: int = 0
    enabled: bool = False
    triggered: bool = False
    triggered_minute: int = 0

    def snooze(self, minutes: int = config.SNOOZE_TIME_MINUTES) -> None:
        """Move the alarm later by the given minutes, wrapping past the hour and midnight."""
        if minutes < 0:
            raise ValueError(f"snooze time must not be negative: {minutes}")
        self.minute += minutes
        if self.minute >= 60:
            self.minute %= 60
            self.hour += 1
            if self.hour == 24:
                self.hour = 0


@dataclass
class AlarmClock:
    """A fixed set of alarms checked against the current time."""

    count: int = DEFAULT_ALARM_COUNT
    alarms: list[Alarm] = field(init=False)

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"alarm count must not be negative: {self.count}")
        self.alarms = [Alarm() for _ in range(self.count)]

    def due(self, hour: int, minute: int) -> list[int]:
        """Indices of the alarms that start ringing at this time.

        An alarm rings once in its minute; it is re-armed as soon as a later
        minute is seen.
        """
        ringing = []
        for index, alarm in enumerate(self.alarms):
            if alarm.triggered and alarm.triggered_minute < minute:
                alarm.triggered = False
            if (
                alarm.enabled
                and alarm.hour == hour
                and alarm.minute == minute
                and not alarm.triggered
            ):
                alarm.triggered = True
                alarm.triggered_minute = minute
                ringing.append(index)
        return ringing


def format_time(day: int, hour: int, minute: int, second: int) -> str:
    """The time text shown on the home screen."""
    return f"Day: {day}\n{hour}:{minute}:{second}"