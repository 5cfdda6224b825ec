"""Text layout on the OLED screen."""

from __future__ import annotations

from dataclasses import dataclass, field

from medibox.sensors import ClimateStatus, Level

CLIMATE_ROWS = (40, 50)


@dataclass(frozen=True)
class TextItem:
    """One piece of text placed on the screen."""

    text: str
    column: int
    row: int
    size: int
    inverted: bool = False


@dataclass
class Canvas:
    """An in-memory screen that remembers what was drawn on it."""

    items: list[TextItem] = field(default_factory=list)

    def clear(self) -> None:
        """Blank the screen."""
        self.items.clear()

    def draw_text(
        self, text: str, column: int, row: int, size: int = 1, inverted: bool = False
    ) -> None:
        """Place text at a position; inverted text is dark on a light bar."""
        self.items.append(TextItem(text, column, row, size, inverted))

    def text(self) -> str:
        """All text currently on the screen, in drawing order."""
        return "\n".join(item.text for item in self.items)


def climate_lines(status: ClimateStatus) -> tuple[str, str]:
    """The temperature and humidity lines shown on the home screen."""
    return (
        f"Temp {status.temperature_level.value}: {status.temperature:.1f}",
        f"Humidity {status.humidity_level.value}: {status.humidity:.1f}",
    )


class Screen:
    """Draws menu lines and the home-screen climate summary on a canvas."""

    def __init__(self, canvas: Canvas) -> None:
        self.canvas = canvas

    def print_line(
        self,
        message: str,
        column: int,
        row: int,
        text_size: int = 1,
        selected: bool = False,
        climate: ClimateStatus | None = None,
    ) -> None:
        """Draw a line, highlighted if selected, plus the climate lines if given."""
        self.canvas.draw_text(message, column + 1, row + 1, text_size, selected)
        if climate is not None:
            for line, row_at in zip(climate_lines(climate), CLIMATE_ROWS):
                self.canvas.draw_text(line, 0, row_at, 1, False)


__all__ = ["Canvas", "Level", "Screen", "TextItem", "climate_lines"]