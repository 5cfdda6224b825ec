"""Shade servo angle computed from light, temperature and timing settings."""

from __future__ import annotations

import math

MIN_ANGLE = 0.0
MAX_ANGLE = 180.0


def _round_half_away(value: float) -> float:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def servo_angle(
    sampling_interval: float,
    sending_interval: float,
    temperature: float,
    t_med: float,
    intensity: float,
    theta_offset: float,
    gamma_factor: float,
) -> float:
    """Servo angle in degrees, rounded to one decimal and kept within 0..180."""
    if sampling_interval <= 0 or sending_interval <= 0:
        raise ValueError("sampling and sending intervals must be positive")
    if t_med == 0:
        raise ValueError("ideal storage temperature must not be zero")
    log_term = math.log(sampling_interval / sending_interval)
    temp_ratio = temperature / t_med
    scaling = (MAX_ANGLE - theta_offset) * intensity * gamma_factor
    theta = theta_offset + scaling * log_term * temp_ratio
    theta = _round_half_away(theta * 10.0) / 10.0
    return min(max(theta, MIN_ANGLE), MAX_ANGLE)