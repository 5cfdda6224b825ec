"""Button-driven menus for setting the time zone and alarms, and alarm ringing."""

from __future__ import annotations

import enum
from collections import deque
from typing import Callable

from medibox import config
from medibox.alarms import AlarmClock, format_time
from medibox.display import Screen
from medibox.sensors import ClimateStatus

MODES = ("Set Time Zone", "Set Alarm 1", "Set Alarm 2", "Home")
ALARM_MODES = ("Set Alarm", "Delete Alarm", "Exit")
STOPPING_MODES = ("Stop Alarm", "Snooze")

MAX_TIME_ZONE = 14.0
MIN_TIME_ZONE = -12.0
TIME_ZONE_STEP = 0.25

_HOME_OPTION = 3
_TIME_ZONE_OPTION = 0


class Button(enum.Enum):
    """Push buttons, valued by the pin they are wired to."""

    UP = config.PB_UP
    OK = config.PB_OK
    DOWN = config.PB_DOWN


class View(enum.Enum):
    """What the box is currently showing."""

    HOME = "home"
    MAIN_MENU = "main menu"
    TIME_ZONE = "time zone"
    ALARM_MENU = "alarm menu"
    SET_HOURS = "set hours"
    SET_MINUTES = "set minutes"
    RINGING = "ringing"
    STOPPING = "stopping"


def step_value(value: int, modulus: int, button: Button) -> int:
    """Raise the value with UP and lower it with DOWN, wrapping within 0..modulus-1."""
    if button is Button.UP:
        return (value + 1) % modulus
    if button is Button.DOWN:
        value -= 1
        return modulus - 1 if value < 0 else value
    return value


def step_time_zone(zone: float, button: Button) -> float:
    """Move the UTC offset in hours by a quarter hour, kept within -12..14."""
    if button is Button.UP:
        return min(zone + TIME_ZONE_STEP, MAX_TIME_ZONE)
    if button is Button.DOWN:
        return max(zone - TIME_ZONE_STEP, MIN_TIME_ZONE)
    return zone


def _cycle(current: int, count: int, button: Button) -> int:
    if button is Button.DOWN:
        return (current + 1) % count
    if button is Button.UP:
        current -= 1
        return count - 1 if current < 0 else current
    return current


def next_alarm_option(current: int, button: Button, enabled: bool) -> int:
    """Move through the alarm menu; the delete option is skipped for unset alarms."""
    option = _cycle(current, len(ALARM_MODES), button)
    if not enabled and option == 1:
        return 2 if button is Button.DOWN else 0
    return option


class Medibox:
    """The medicine box's screens, driven by button presses and clock ticks."""

    def __init__(self, screen: Screen, clock: AlarmClock) -> None:
        self.screen = screen
        self.clock = clock
        self.view = View.HOME
        self.day = self.hour = self.minute = self.second = 0
        self.utc_offset = 0.0
        self.climate: ClimateStatus | None = None
        self.alarm_led = False
        self.notice: str | None = None
        self.main_option = 0
        self.alarm_option = 0
        self.stop_option = 0
        self.selected_alarm = 0
        self.ringing_alarm = 0
        self.zone = 0.0
        self.edit_hour = 0
        self.edit_minute = 0
        self._resume = View.HOME
        self._pending: deque[int] = deque()
        self._handlers: dict[View, Callable[[Button], None]] = {
            View.HOME: self._press_home,
            View.MAIN_MENU: self._press_main_menu,
            View.TIME_ZONE: self._press_time_zone,
            View.ALARM_MENU: self._press_alarm_menu,
            View.SET_HOURS: self._press_set_hours,
            View.SET_MINUTES: self._press_set_minutes,
            View.RINGING: self._press_ringing,
            View.STOPPING: self._press_stopping,
        }
        self._render()

    def press(self, button: Button | int) -> None:
        """React to one button press; a pin number is accepted as well."""
        button = Button(button)
        self._handlers[self.view](button)
        self._render()

    def ring(self, alarm: int) -> None:
        """Start ringing an alarm and show its message."""
        self.clock.alarms[alarm]
        if self.view not in (View.RINGING, View.STOPPING):
            self._resume = self.view
        self.ringing_alarm = alarm
        self.alarm_led = True
        self.view = View.RINGING
        self._render()

    def tick(self, day: int, hour: int, minute: int, second: int) -> list[int]:
        """Record the current time; on the home screen, show it and ring due alarms."""
        self.day, self.hour, self.minute, self.second = day, hour, minute, second
        if self.view is not View.HOME:
            return []
        self._render()
        due = self.clock.due(hour, minute)
        if due:
            self._pending.extend(due[1:])
            self.ring(due[0])
        return due

    def _press_home(self, button: Button) -> None:
        if button is Button.OK:
            self.main_option = 0
            self.view = View.MAIN_MENU

    def _press_main_menu(self, button: Button) -> None:
        if button is not Button.OK:
            self.main_option = _cycle(self.main_option, len(MODES), button)
        elif self.main_option == _HOME_OPTION:
            self.view = View.HOME
        elif self.main_option == _TIME_ZONE_OPTION:
            self.zone = self.utc_offset / 3600
            self.view = View.TIME_ZONE
        else:
            self.selected_alarm = self.main_option - 1
            self.alarm_option = 0
            self.view = View.ALARM_MENU

    def _press_time_zone(self, button: Button) -> None:
        if button is Button.OK:
            self.utc_offset = self.zone * 3600
            self.notice = "TimeZone\n    set"
            self.view = View.MAIN_MENU
        else:
            self.zone = step_time_zone(self.zone, button)

    def _press_alarm_menu(self, button: Button) -> None:
        alarm = self.clock.alarms[self.selected_alarm]
        if button is not Button.OK:
            self.alarm_option = next_alarm_option(self.alarm_option, button, alarm.enabled)
        elif self.alarm_option == 0:
            if alarm.enabled:
                self.edit_hour, self.edit_minute = alarm.hour, alarm.minute
            else:
                self.edit_hour, self.edit_minute = self.hour, self.minute
            self.view = View.SET_HOURS
        elif self.alarm_option == 1:
            alarm.enabled = False
            self.notice = f"Alarm {self.selected_alarm + 1}\n deleted"
            self.alarm_option = 0
        else:
            self.view = View.MAIN_MENU

    def _press_set_hours(self, button: Button) -> None:
        if button is Button.OK:
            self.clock.alarms[self.selected_alarm].hour = self.edit_hour
            self.view = View.SET_MINUTES
        else:
            self.edit_hour = step_value(self.edit_hour, 24, button)

    def _press_set_minutes(self, button: Button) -> None:
        if button is not Button.OK:
            self.edit_minute = step_value(self.edit_minute, 60, button)
            return
        alarm = self.clock.alarms[self.selected_alarm]
        alarm.minute = self.edit_minute
        alarm.enabled = True
        alarm.triggered = False
        self.notice = f"Alarm {self.selected_alarm + 1}\n   set"
        self.view = View.ALARM_MENU

    def _press_ringing(self, button: Button) -> None:
        if button is Button.OK:
            self.alarm_led = False
            self.stop_option = 0
            self.view = View.STOPPING

    def _press_stopping(self, button: Button) -> None:
        if button is not Button.OK:
            self.stop_option = _cycle(self.stop_option, len(STOPPING_MODES), button)
            return
        number = self.ringing_alarm + 1
        if self.stop_option == 0:
            self.notice = f"Alarm {number}\n Stopped"
        else:
            self.notice = (
                f"Alarm {number}\n    Snoozed for {config.SNOOZE_TIME_MINUTES}"
                "\n       minutes"
            )
            self.clock.alarms[self.ringing_alarm].snooze()
        if self._pending:
            self.ring(self._pending.popleft())
        else:
            self.view = self._resume

    def _render(self) -> None:
        self.screen.canvas.clear()
        line = self.screen.print_line
        if self.view is View.HOME:
            time_text = format_time(self.day, self.hour, self.minute, self.second)
            line(time_text, 0, 0, 2, climate=self.climate)
        elif self.view is View.MAIN_MENU:
            for index, (label, row) in enumerate(zip(MODES, (0, 15, 30, 45))):
                line(label, 0, row, 1, index == self.main_option)
        elif self.view is View.TIME_ZONE:
            line(f"Set TimeZone\nUTC: {self.zone:.2f}\n\n\nPress ok to set", 0, 0, 1)
        elif self.view is View.ALARM_MENU:
            self._render_alarm_menu()
        elif self.view is View.SET_HOURS:
            line(f"Set hours: \n{self.edit_hour}\n\n\nPress ok to set", 0, 0, 1)
        elif self.view is View.SET_MINUTES:
            line(f"Set minutes: \n{self.edit_minute}\n\n\nPress ok to set", 0, 0, 1)
        elif self.view is View.RINGING:
            line(f"Alarm {self.ringing_alarm + 1}", 0, 0, 1)
            line("MEDICINE TIME", 20, 25, 1)
            line("Press ok", 0, 40, 1)
        else:
            for index, (label, row) in enumerate(zip(STOPPING_MODES, (0, 10))):
                line(label, 0, row, 1, index == self.stop_option)

    def _render_alarm_menu(self) -> None:
        line = self.screen.print_line
        alarm = self.clock.alarms[self.selected_alarm]
        if alarm.enabled:
            line("Enabled: ", 0, 0, 1)
            line(f"{alarm.hour}:{alarm.minute}", 60, 0, 2)
            line(f"Alarm {self.selected_alarm + 1}", 0, 10, 1)
        else:
            line("Not Set", 0, 0, 2)
        line(ALARM_MODES[0], 0, 30, 1, self.alarm_option == 0)
        if alarm.enabled:
            line(ALARM_MODES[1], 0, 40, 1, self.alarm_option == 1)
            line(ALARM_MODES[2], 0, 50, 1, self.alarm_option == 2)
        else:
            line(ALARM_MODES[2], 0, 40, 1, self.alarm_option == 2)