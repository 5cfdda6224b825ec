"""Classification of temperature and humidity readings and light measurement."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from medibox import config


class Level(enum.Enum):
    """Where a reading lies relative to its allowed range."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


@dataclass(frozen=True)
class ClimateStatus:
    """A temperature and humidity reading together with their levels."""

    temperature: float
    humidity: float
    temperature_level: Level
    humidity_level: Level

    @property
    def temperature_led(self) -> bool:
        """Whether the temperature warning LED is lit."""
        return self.temperature_level is not Level.NORMAL

    @property
    def humidity_led(self) -> bool:
        """Whether the humidity warning LED is lit."""
        return self.humidity_level is not Level.NORMAL


def classify(value: float, lower: float, upper: float) -> Level:
    """Return HIGH above ``upper``, LOW below ``lower`` and NORMAL otherwise."""
    if value > upper:
        return Level.HIGH
    if value < lower:
        return Level.LOW
    return Level.NORMAL


def check_climate(temperature: float, humidity: float) -> ClimateStatus:
    """Classify a reading against the configured temperature and humidity limits."""
    return ClimateStatus(
        temperature=temperature,
        humidity=humidity,
        temperature_level=classify(
            temperature, config.TEMP_LOWER_LIMIT, config.TEMP_UPPER_LIMIT
        ),
        humidity_level=classify(
            humidity, config.HUMIDITY_LOWER_LIMIT, config.HUMIDITY_UPPER_LIMIT
        ),
    )


def lux_from_adc(raw: float) -> float:
    """Convert a raw LDR analog reading into an illuminance in lux."""
    if raw < 0:
        raise ValueError(f"analog reading must not be negative: {raw}")
    voltage = raw / config.ADC_RESOLUTION * config.ADC_REFERENCE_VOLTS
    remaining = 1 - voltage / config.ADC_REFERENCE_VOLTS
    if remaining <= 0:
        return 0.0
    resistance = config.LDR_SERIES_RESISTANCE * voltage / remaining
    if resistance == 0:
        return math.inf
    numerator = config.RL10 * 1e3 * 10 ** config.GAMMA_LDR
    return (numerator / resistance) ** (1 / config.GAMMA_LDR)


class LightSampler:
    """Accumulates light samples between two reports."""

    def __init__(self) -> None:
        self.total_lux = 0.0
        self.count = 0

    def add(self, raw: float) -> float:
        """Record one analog reading and return its value in lux."""
        lux = lux_from_adc(raw)
        self.total_lux += lux
        self.count += 1
        return lux

    def average(self) -> float:
        """Mean illuminance of the samples taken since the last reset."""
        if self.count == 0:
            raise ValueError("no light samples have been taken")
        return self.total_lux / self.count

    def reset(self) -> None:
        """Forget all samples."""
        self.total_lux = 0.0
        self.count = 0