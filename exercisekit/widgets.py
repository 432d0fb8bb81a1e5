"""A tiny text-mode widget toolkit that draws labels, buttons and windows."""

from __future__ import annotations

import abc
import io
from typing import TextIO


def _lines(text: str) -> list[str]:
    """Split ``text`` into lines; a trailing newline does not start a new line."""
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _center(text: str, width: int) -> str:
    """Centre ``text`` in ``width`` columns; odd padding puts the extra space on the right."""
    padding = max(width - len(text), 0)
    left = padding // 2
    return " " * left + text + " " * (padding - left)


class Widget(abc.ABC):
    """Something that can be drawn as text."""

    @abc.abstractmethod
    def width(self) -> int:
        """Natural width of the widget, in characters."""

    @abc.abstractmethod
    def draw_into(self, buffer: TextIO) -> None:
        """Write the widget's drawing into ``buffer``."""

    def draw(self) -> None:
        """Draw the widget on standard output."""
        buffer = io.StringIO()
        self.draw_into(buffer)
        print(buffer.getvalue())


class Label(Widget):
    """A piece of text, possibly spanning several lines."""

    def __init__(self, label: str) -> None:
        self.label = label

    def width(self) -> int:
        return max((len(line) for line in _lines(self.label)), default=0)

    def draw_into(self, buffer: TextIO) -> None:
        buffer.write(f"{self.label}\n")


class Button(Widget):
    """A label drawn inside a padded box."""

    def __init__(self, label: str) -> None:
        self.label = Label(label)

    def width(self) -> int:
        return self.label.width() + 8

    def draw_into(self, buffer: TextIO) -> None:
        width = self.width()
        inner = io.StringIO()
        self.label.draw_into(inner)

        border = "+" + "-" * width + "+\n"
        buffer.write(border)
        for line in _lines(inner.getvalue()):
            buffer.write(f"|{_center(line, width)}|\n")
        buffer.write(border)


class Window(Widget):
    """A titled frame holding other widgets stacked vertically."""

    def __init__(self, title: str) -> None:
        self.title = title
        self.widgets: list[Widget] = []

    def add_widget(self, widget: Widget) -> None:
        """Append ``widget`` below the widgets already in the window."""
        self.widgets.append(widget)

    def _inner_width(self) -> int:
        widest = max((widget.width() for widget in self.widgets), default=0)
        return max(len(self.title), widest)

    def width(self) -> int:
        # Four extra columns for the borders and their padding.
        return self._inner_width() + 4

    def draw_into(self, buffer: TextIO) -> None:
        inner = io.StringIO()
        for widget in self.widgets:
            widget.draw_into(inner)

        inner_width = self._inner_width()
        border = "+-" + "-" * inner_width + "-+\n"
        buffer.write(border)
        buffer.write(f"| {_center(self.title, inner_width)} |\n")
        buffer.write("+=" + "=" * inner_width + "=+\n")
        for line in _lines(inner.getvalue()):
            buffer.write(f"| {line.ljust(inner_width)} |\n")
        buffer.write(border)


def main(argv: list[str] | None = None) -> int:
    """Draw a small demo window."""
    window = Window("Text GUI Demo 1.23")
    window.add_widget(Label("This is a small text GUI demo."))
    window.add_widget(Button("Click me!"))
    window.draw()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())