"""Terminal text styles: colours, attributes, padding, borders and margins."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from itertools import zip_longest

import wcwidth

_ANSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RESET = "\x1b[0m"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_RE.sub("", text)


def _char_width(ch: str) -> int:
    width = wcwidth.wcwidth(ch)
    return width if width > 0 else 0


def _line_width(line: str) -> int:
    return sum(_char_width(ch) for ch in strip_ansi(line))


def visible_width(text: str) -> int:
    """Return the cell width of the widest line of ``text``, ignoring escapes."""
    return max(_line_width(line) for line in text.split("\n"))


def _normalize_color(value: str | int | None) -> str | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"invalid colour: {value!r}")
    if isinstance(value, int):
        value = str(value)
    if not isinstance(value, str):
        raise ValueError(f"invalid colour: {value!r}")
    if value.startswith("#"):
        if not _HEX_RE.match(value):
            raise ValueError(f"invalid colour: {value!r}")
        digits = value[1:]
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return "#" + digits.lower()
    if value.isdigit() and 0 <= int(value) <= 255:
        return str(int(value))
    raise ValueError(f"invalid colour: {value!r}")


def _color_params(color: str, background: bool) -> str:
    if color.startswith("#"):
        r, g, b = (int(color[i : i + 2], 16) for i in (1, 3, 5))
        return f"{48 if background else 38};2;{r};{g};{b}"
    number = int(color)
    if number < 8:
        return str((40 if background else 30) + number)
    if number < 16:
        return str((100 if background else 90) + number - 8)
    return f"{48 if background else 38};5;{number}"


def _wrap(text: str, sgr: str) -> str:
    if not text or not sgr:
        return text
    return f"\x1b[{sgr}m{text}{_RESET}"


def _expand_sides(value: int | tuple[int, ...]) -> tuple[int, int, int, int]:
    """Expand a CSS-like shorthand into (top, right, bottom, left)."""
    if isinstance(value, int):
        return value, value, value, value
    sides = tuple(value)
    if len(sides) == 1:
        return sides[0], sides[0], sides[0], sides[0]
    if len(sides) == 2:
        return sides[0], sides[1], sides[0], sides[1]
    if len(sides) == 3:
        return sides[0], sides[1], sides[2], sides[1]
    if len(sides) == 4:
        return sides[0], sides[1], sides[2], sides[3]
    raise ValueError(f"expected 1 to 4 side values, got {len(sides)}")


@dataclass(frozen=True)
class Border:
    """The characters that draw a box around a block."""

    top: str
    bottom: str
    left: str
    right: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str


def rounded_border() -> Border:
    """A box border with rounded corners."""
    return Border(
        top="─",
        bottom="─",
        left="│",
        right="│",
        top_left="╭",
        top_right="╮",
        bottom_left="╰",
        bottom_right="╯",
    )


_SIDE_FIELDS = ("padding", "margin")
_SIDE_NAMES = ("top", "right", "bottom", "left")


@dataclass(frozen=True)
class Style:
    """An immutable description of how to render a block of text."""

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    faint: bool = False
    reverse: bool = False
    padding_top: int = 0
    padding_right: int = 0
    padding_bottom: int = 0
    padding_left: int = 0
    margin_top: int = 0
    margin_right: int = 0
    margin_bottom: int = 0
    margin_left: int = 0
    border: Border | None = None
    border_foreground: str | None = None
    tab_width: int = field(default=4)

    def __post_init__(self) -> None:
        for name in ("foreground", "background", "border_foreground"):
            object.__setattr__(self, name, _normalize_color(getattr(self, name)))
        for prefix in _SIDE_FIELDS:
            for side in _SIDE_NAMES:
                name = f"{prefix}_{side}"
                object.__setattr__(self, name, max(0, int(getattr(self, name))))
        object.__setattr__(self, "tab_width", max(0, int(self.tab_width)))

    def with_(self, **changes) -> Style:
        """Return a copy with the given fields changed.

        ``padding`` and ``margin`` accept CSS-like shorthands: one value for
        all sides, or a tuple of two, three or four values.
        """
        for prefix in _SIDE_FIELDS:
            if prefix in changes:
                values = _expand_sides(changes.pop(prefix))
                for side, value in zip(_SIDE_NAMES, values):
                    changes[f"{prefix}_{side}"] = value
        return dataclasses.replace(self, **changes)

    def _text_sgr(self) -> str:
        params = []
        flags = (
            (self.bold, "1"),
            (self.faint, "2"),
            (self.italic, "3"),
            (self.underline, "4"),
            (self.reverse, "7"),
            (self.strikethrough, "9"),
        )
        params.extend(code for enabled, code in flags if enabled)
        if self.foreground:
            params.append(_color_params(self.foreground, background=False))
        if self.background:
            params.append(_color_params(self.background, background=True))
        return ";".join(params)

    def _fill_sgr(self) -> str:
        if self.background:
            return _color_params(self.background, background=True)
        return ""

    def render(self, text: str) -> str:
        """Render ``text`` with this style and return the resulting string."""
        text = text.replace("\r\n", "\n").replace("\t", " " * self.tab_width)
        lines = text.split("\n")
        width = max(_line_width(line) for line in lines)
        text_sgr = self._text_sgr()
        fill_sgr = self._fill_sgr()

        body = [
            _wrap(line, text_sgr) + _wrap(" " * (width - _line_width(line)), fill_sgr)
            for line in lines
        ]

        left_pad = _wrap(" " * self.padding_left, fill_sgr)
        right_pad = _wrap(" " * self.padding_right, fill_sgr)
        body = [left_pad + line + right_pad for line in body]
        inner = width + self.padding_left + self.padding_right
        blank = _wrap(" " * inner, fill_sgr)
        body = [blank] * self.padding_top + body + [blank] * self.padding_bottom

        if self.border is not None:
            b = self.border
            border_sgr = (
                _color_params(self.border_foreground, background=False)
                if self.border_foreground
                else ""
            )
            top = _wrap(b.top_left + b.top * inner + b.top_right, border_sgr)
            bottom = _wrap(b.bottom_left + b.bottom * inner + b.bottom_right, border_sgr)
            left = _wrap(b.left, border_sgr)
            right = _wrap(b.right, border_sgr)
            body = [top] + [left + line + right for line in body] + [bottom]
            inner += _line_width(b.left) + _line_width(b.right)

        body = [
            " " * self.margin_left + line + " " * self.margin_right for line in body
        ]
        outer = inner + self.margin_left + self.margin_right
        spacer = " " * outer
        body = [spacer] * self.margin_top + body + [spacer] * self.margin_bottom
        return "\n".join(body)


def join_horizontal(*blocks: str) -> str:
    """Place blocks side by side, aligned to their top lines."""
    if not blocks:
        return ""
    if len(blocks) == 1:
        return blocks[0]
    split = [block.split("\n") for block in blocks]
    widths = [max(_line_width(line) for line in lines) for lines in split]
    rows = []
    for row in zip_longest(*split, fillvalue=""):
        rows.append(
            "".join(
                line + " " * (width - _line_width(line))
                for line, width in zip(row, widths)
            )
        )
    return "\n".join(rows)