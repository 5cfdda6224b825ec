"""Remote control parameters received over MQTT and publishing of readings."""

from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_PORT = 1883
CLIENT_ID = "ESP32"
SUBSCRIPTIONS = ("sample_interval", "send_interval", "gamma", "offset", "T_med")

_DECIMALS = {"Light_intensity": 4, "servo_angle": 2}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _as_text(payload: bytes | str) -> str:
    if isinstance(payload, bytes):
        return payload.decode("utf-8", errors="replace")
    return payload


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


@dataclass
class ControlParameters:
    """Settings that can be changed remotely."""

    sampling_interval: int
    sending_interval: int
    gamma_factor: float
    theta_offset: int
    t_med: int

    def apply(self, topic: str, payload: bytes | str) -> bool:
        """Update the setting a topic names; return False for unknown topics."""
        text = _as_text(payload)
        if topic == "sample_interval":
            self.sampling_interval = _leading_int(text)
        elif topic == "send_interval":
            self.sending_interval = int(_leading_float(text) * 60)
        elif topic == "gamma":
            self.gamma_factor = _leading_float(text)
        elif topic == "offset":
            self.theta_offset = _leading_int(text)
        elif topic == "T_med":
            self.t_med = _leading_int(text)
        else:
            return False
        return True


def format_payload(topic: str, value: float) -> str:
    """Text published for a reading on one of the outgoing topics."""
    try:
        decimals = _DECIMALS[topic]
    except KeyError:
        raise ValueError(f"no payload format for topic {topic!r}") from None
    return f"{value:.{decimals}f}"


class MqttBridge:
    """Connects a paho-style MQTT client to the control parameters."""

    def __init__(self, client: Any, parameters: ControlParameters) -> None:
        self.client = client
        self.parameters = parameters
        client.on_message = self.on_message

    def connect(self, host: str, port: int = DEFAULT_PORT, retry_delay: float = 2.0) -> None:
        """Connect, retrying until it succeeds, then subscribe to the control topics."""
        while True:
            logger.info("attempting MQTT connection to %s:%s", host, port)
            try:
                result = self.client.connect(host, port)
            except OSError as error:
                logger.warning("MQTT connection failed: %s", error)
            else:
                if not result:
                    break
                logger.warning("MQTT connection failed with code %s", result)
            time.sleep(retry_delay)
        logger.info("connected")
        for topic in SUBSCRIPTIONS:
            self.client.subscribe(topic)

    def on_message(self, client: Any, userdata: Any, message: Any) -> None:
        """Handle an incoming control message."""
        text = _as_text(message.payload)
        logger.info("message arrived [%s] %s", message.topic, text)
        self.parameters.apply(message.topic, text)

    def publish(self, topic: str, value: float) -> None:
        """Publish a reading on one of the outgoing topics."""
        self.client.publish(topic, format_payload(topic, value))