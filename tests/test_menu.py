import pytest

from medibox import config
from medibox.alarms import Alarm, AlarmClock
from medibox.display import Canvas, Screen
from medibox.menu import (
    ALARM_MODES,
    MODES,
    Button,
    Medibox,
    View,
    next_alarm_option,
    step_time_zone,
    step_value,
)
from medibox.sensors import check_climate


@pytest.fixture
def box():
    return Medibox(Screen(Canvas()), AlarmClock(2))


def presses(box, *buttons):
    for button in buttons:
        box.press(button)


def test_step_value_wraps():
    assert step_value(23, 24, Button.UP) == 0
    assert step_value(0, 24, Button.DOWN) == 23
    assert step_value(5, 24, Button.OK) == 5


@pytest.mark.parametrize("start", [0, 17, 59])
def test_step_value_up_then_down_round_trip(start):
    assert step_value(step_value(start, 60, Button.UP), 60, Button.DOWN) == start


def test_step_time_zone_limits():
    assert step_time_zone(14, Button.UP) == 14
    assert step_time_zone(-12, Button.DOWN) == -12
    assert step_time_zone(0, Button.UP) == 0.25


def test_next_alarm_option_skips_delete_when_unset():
    assert next_alarm_option(0, Button.DOWN, False) == 2
    assert next_alarm_option(2, Button.UP, False) == 0
    assert next_alarm_option(0, Button.DOWN, True) == 1
    assert next_alarm_option(0, Button.UP, True) == len(ALARM_MODES) - 1


def test_home_screen_shows_time_and_climate(box):
    box.climate = check_climate(33.0, 70.0)
    box.tick(4, 12, 30, 15)
    text = box.screen.canvas.text()
    assert "Day: 4\n12:30:15" in text
    assert "Temp high: 33.0" in text


def test_menu_exit_returns_home(box):
    presses(box, Button.OK)
    assert box.view is View.MAIN_MENU
    presses(box, Button.UP)
    assert box.main_option == len(MODES) - 1
    presses(box, Button.OK)
    assert box.view is View.HOME


def test_pin_numbers_accepted(box):
    box.press(config.PB_OK)
    assert box.view is View.MAIN_MENU


def test_set_time_zone(box):
    presses(box, Button.OK, Button.OK)
    assert box.view is View.TIME_ZONE
    presses(box, Button.UP, Button.UP, Button.OK)
    assert box.utc_offset == 2 * 0.25 * 3600
    assert box.view is View.MAIN_MENU


def _set_alarm_one(box):
    box.tick(1, 8, 0, 0)
    presses(box, Button.OK, Button.DOWN, Button.OK)
    assert box.view is View.ALARM_MENU
    presses(box, Button.OK)
    assert box.edit_hour == 8
    presses(box, Button.UP, Button.OK, Button.UP, Button.UP, Button.OK)


def test_set_alarm(box):
    _set_alarm_one(box)
    alarm = box.clock.alarms[0]
    assert (alarm.hour, alarm.minute, alarm.enabled) == (9, 2, True)
    assert box.view is View.ALARM_MENU
    assert "Enabled: " in box.screen.canvas.text()


def test_delete_alarm(box):
    _set_alarm_one(box)
    presses(box, Button.DOWN, Button.OK)
    assert not box.clock.alarms[0].enabled
    assert box.alarm_option == 0
    assert "Not Set" in box.screen.canvas.text()


def test_alarm_rings_and_snoozes(box):
    _set_alarm_one(box)
    presses(box, Button.DOWN, Button.DOWN, Button.OK)
    assert box.view is View.MAIN_MENU
    presses(box, Button.DOWN, Button.DOWN, Button.OK)
    assert box.view is View.HOME
    assert box.tick(1, 9, 2, 0) == [0]
    assert box.view is View.RINGING
    assert box.alarm_led
    assert "MEDICINE TIME" in box.screen.canvas.text()
    presses(box, Button.OK)
    assert box.view is View.STOPPING
    assert not box.alarm_led
    presses(box, Button.DOWN, Button.OK)
    assert box.clock.alarms[0].minute == 2 + config.SNOOZE_TIME_MINUTES
    assert box.view is View.HOME


def test_stop_keeps_alarm_time():
    clock = AlarmClock(2)
    clock.alarms[0] = Alarm(hour=6, minute=15, enabled=True)
    box = Medibox(Screen(Canvas()), clock)
    box.tick(1, 6, 15, 0)
    presses(box, Button.OK, Button.OK)
    assert (clock.alarms[0].hour, clock.alarms[0].minute) == (6, 15)
    assert box.view is View.HOME


def test_simultaneous_alarms_ring_in_turn():
    clock = AlarmClock(2)
    clock.alarms[0] = Alarm(hour=6, minute=15, enabled=True)
    clock.alarms[1] = Alarm(hour=6, minute=15, enabled=True)
    box = Medibox(Screen(Canvas()), clock)
    box.tick(1, 6, 15, 0)
    assert box.ringing_alarm == 0
    presses(box, Button.OK, Button.OK)
    assert box.view is View.RINGING
    assert box.ringing_alarm == 1
    presses(box, Button.OK, Button.OK)
    assert box.view is View.HOME


def test_tick_in_menu_does_not_ring():
    clock = AlarmClock(1)
    clock.alarms[0] = Alarm(hour=6, minute=15, enabled=True)
    box = Medibox(Screen(Canvas()), clock)
    box.press(Button.OK)
    assert box.tick(1, 6, 15, 0) == []
    assert box.view is View.MAIN_MENU


def test_ring_unknown_alarm(box):
    with pytest.raises(IndexError):
        box.ring(5)