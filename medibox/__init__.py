"""Medicine reminder box logic: alarms, button menus, climate checks, light sampling, shade angle and MQTT control."""

__version__ = "0.1.0"