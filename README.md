# medibox

The logic of a medicine reminder box, written in plain Python. It has no hardware
attached. Sensor readings, button presses and the current time are passed in by the
caller. What the box would show is drawn onto an in-memory canvas.

## Modules

- **`medibox.alarms`**
  - `AlarmClock(count)` holds `count` daily alarms, stored as `Alarm` objects in
    `alarms`.
  - `AlarmClock.due(hour, minute)` returns the indices of enabled alarms that start
    ringing now. An alarm rings once in its minute. It is re-armed when a later minute
    is seen.
  - `Alarm.snooze(minutes)` moves an alarm later. The default is 5 minutes. Minutes
    wrap into the next hour, and hour 24 wraps to 0. A negative value raises
    `ValueError`.
  - `format_time(day, hour, minute, second)` gives the home-screen time text.

- **`medibox.menu`**
  - `Medibox(screen, clock)` is a state machine driven by buttons. It covers the home
    screen, the main menu, the time-zone setting, the alarm menu (set or delete),
    setting hours and minutes, the ringing screen, and the stop/snooze menu.
  - `Medibox.press(button)` takes a `Button` (`UP`, `DOWN`, `OK`) or the matching pin
    number.
  - `Medibox.tick(day, hour, minute, second)` records the time. On the home screen it
    also redraws the screen and rings any alarms that are due. It returns their
    indices.
  - `Medibox.ring(alarm)` starts an alarm ringing by hand.
  - State you can read:
    - `view`
    - `utc_offset` (seconds)
    - `alarm_led`
    - `notice`, the last confirmation message
  - You can set `climate` to show the temperature and humidity lines on the home
    screen.
  - Helpers:
    - `step_value(value, modulus, button)`
    - `step_time_zone(zone, button)`, which moves in quarter hours and stays within
      −12 to 14
    - `next_alarm_option(current, button, enabled)`

- **`medibox.sensors`**
  - `classify(value, lower, upper)` returns a `Level` (`LOW`, `NORMAL`, `HIGH`).
  - `check_climate(temperature, humidity)` classifies a reading against the configured
    limits. It returns a `ClimateStatus` that also tells whether each warning LED
    would be lit.
  - `lux_from_adc(raw)` turns a 12-bit LDR reading into lux.
  - `LightSampler` collects readings with `add`. It gives their mean with `average`,
    which raises `ValueError` when there are no samples. `reset` clears it.

- **`medibox.servo`**
  - `servo_angle(sampling_interval, sending_interval, temperature, t_med, intensity, theta_offset, gamma_factor)`
    computes the shade angle.
  - The result is rounded to one decimal place and limited to 0–180°.
  - It raises `ValueError` when an interval is not positive or `t_med` is zero.

- **`medibox.mqtt`**
  - `ControlParameters.apply(topic, payload)` updates the tuning values from these
    topics: `sample_interval`, `send_interval` (minutes, stored as seconds), `gamma`,
    `offset` and `T_med`. It returns `False` for other topics.
  - `format_payload(topic, value)` formats outgoing readings:
    - `Light_intensity` with 4 decimals
    - `servo_angle` with 2 decimals
  - `MqttBridge(client, parameters)` connects these to a client object that you pass
    in and that has a paho-style interface.
    - `connect` retries until the client returns 0, then subscribes to the control
      topics.
    - `publish` sends a formatted reading.

- **`medibox.display`**
  - `Canvas` records the text drawn on it. `text()` returns that text in drawing
    order.
  - `Screen.print_line(message, column, row, text_size, selected, climate)` draws one
    line, inverted when it is selected. When a `ClimateStatus` is given, it adds the
    temperature and humidity lines.

- **`medibox.config`** holds the fixed limits, display geometry and pin numbers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from medibox.alarms import AlarmClock
from medibox.display import Canvas, Screen
from medibox.menu import Button, Medibox

canvas = Canvas()
box = Medibox(Screen(canvas), AlarmClock(2))
box.tick(1, 8, 0, 0)
print(canvas.text())     # "Day: 1\n8:0:0"
box.press(Button.OK)     # open the main menu
```

## What it does not do

The package does not talk to any hardware. It does not:

- read the DHT sensor or the LDR
- drive the buzzer, LEDs, servo or OLED
- sync the time over NTP

The stored time-zone offset is not applied to any clock. There is no command-line
program and no main loop. The caller feeds readings, button presses and time ticks in.
The caller also supplies the MQTT client.