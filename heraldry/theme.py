"""Theme data: styles, decoration characters and table border sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from heraldry.style import Style

DEFAULT_H1_UNDERLINE_CHAR = "═"
DEFAULT_H2_UNDERLINE_CHAR = "─"
DEFAULT_H3_UNDERLINE_CHAR = "·"
DEFAULT_HEADING_BAR_CHAR = "▎"
DEFAULT_BLOCKQUOTE_BAR = "│"
DEFAULT_BULLET_CHAR = "•"
DEFAULT_NESTED_BULLET_CHARS = ("•", "◦", "▪")
DEFAULT_LIST_INDENT = 2
DEFAULT_HR_CHAR = "─"
DEFAULT_HR_WIDTH = 40
DEFAULT_INS_PREFIX = "+"
DEFAULT_DEL_PREFIX = "-"
DEFAULT_QUOTE_OPEN = "\u201c"
DEFAULT_QUOTE_CLOSE = "\u201d"
DEFAULT_ALERT_BAR = "│"
DEFAULT_TABLE_CELL_PAD = 1
DEFAULT_KV_SEPARATOR = ":"
DEFAULT_CODE_LINE_NUMBER_SEP = "│"
DEFAULT_CODE_LINE_NUMBER_OFFSET = 1
DEFAULT_FOOTNOTE_DIVIDER_CHAR = "─"
DEFAULT_FOOTNOTE_DIVIDER_WIDTH = 20

_PRIMARY = "#7d56f4"
_SECONDARY = "#5a8dee"
_ACCENT = "#f25d94"
_MUTED = "#6c6c6c"
_TEXT = "#dddddd"
_CODE_FG = "#e6db74"
_CODE_BG = "#262626"
_STRIPE_BG = "#1c1c1c"
_GREEN = "#3fb950"
_YELLOW = "#d29922"
_RED = "#f85149"
_BLUE = "#2f81f7"
_PURPLE = "#a371f7"
_WHITE = "#ffffff"
_BLACK = "#000000"
_MARK_BG = "#ffd75f"

CodeFormatter = Callable[[str, str], str]


class Alignment(Enum):
    """Horizontal alignment of a table cell."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class CaptionPosition(Enum):
    """Where a caption sits relative to its content."""

    TOP = 0
    BOTTOM = 1


class ListKind(Enum):
    """Whether a list is bulleted or numbered."""

    UNORDERED = 0
    ORDERED = 1


@dataclass
class ListItem:
    """An item of a nested list; ``kind`` applies to its children."""

    text: str
    kind: ListKind = ListKind.UNORDERED
    children: list[ListItem] = field(default_factory=list)


class AlertType(Enum):
    """The kinds of alert callout."""

    NOTE = "note"
    TIP = "tip"
    IMPORTANT = "important"
    WARNING = "warning"
    CAUTION = "caution"


@dataclass(frozen=True)
class AlertConfig:
    """Label, icon and style of one alert kind."""

    label: str
    icon: str
    style: Style


@dataclass
class BorderSet:
    """Characters that draw a table's borders and separators.

    An empty ``top_left`` marks a table without an outer frame.
    """

    top_left: str = ""
    top: str = ""
    top_junction: str = ""
    top_right: str = ""
    header_left: str = ""
    header: str = ""
    header_cross: str = ""
    header_right: str = ""
    footer_left: str = ""
    footer_cross: str = ""
    footer_right: str = ""
    left: str = ""
    right: str = ""
    column_sep: str = "│"
    row: str = ""
    left_junction: str = ""
    right_junction: str = ""
    cross: str = ""
    bottom_left: str = ""
    bottom: str = ""
    bottom_junction: str = ""
    bottom_right: str = ""


def box_border_set() -> BorderSet:
    """A fully framed table border drawn with light box characters."""
    return BorderSet(
        top_left="┌",
        top="─",
        top_junction="┬",
        top_right="┐",
        header_left="├",
        header="─",
        header_cross="┼",
        header_right="┤",
        footer_left="├",
        footer_cross="┼",
        footer_right="┤",
        left="│",
        right="│",
        column_sep="│",
        row="─",
        left_junction="├",
        right_junction="┤",
        cross="┼",
        bottom_left="└",
        bottom="─",
        bottom_junction="┴",
        bottom_right="┘",
    )


def minimal_border_set() -> BorderSet:
    """A frameless table border with only inner separators."""
    return BorderSet(
        header="─",
        header_cross="┼",
        footer_cross="┼",
        column_sep="│",
        row="─",
        cross="┼",
    )


def _default_alerts() -> dict[AlertType, AlertConfig]:
    return {
        AlertType.NOTE: AlertConfig("Note", "ℹ", Style(foreground=_BLUE)),
        AlertType.TIP: AlertConfig("Tip", "✦", Style(foreground=_GREEN)),
        AlertType.IMPORTANT: AlertConfig("Important", "❖", Style(foreground=_PURPLE)),
        AlertType.WARNING: AlertConfig("Warning", "⚠", Style(foreground=_YELLOW)),
        AlertType.CAUTION: AlertConfig("Caution", "✖", Style(foreground=_RED)),
    }


def _pill(background: str, foreground: str = _WHITE, bold: bool = True) -> Style:
    return Style(
        foreground=foreground,
        background=background,
        bold=bold,
        padding_left=1,
        padding_right=1,
    )


def _style(**kwargs) -> Callable[[], Style]:
    return lambda: Style(**kwargs)


@dataclass
class Theme:
    """Every style and setting the typography renderer uses."""

    h1: Style = field(
        default_factory=_style(foreground=_PRIMARY, bold=True, margin_bottom=1)
    )
    h2: Style = field(
        default_factory=_style(foreground=_SECONDARY, bold=True, margin_bottom=1)
    )
    h3: Style = field(default_factory=_style(foreground=_ACCENT, bold=True, margin_bottom=1))
    h4: Style = field(default_factory=_style(foreground=_PRIMARY, bold=True))
    h5: Style = field(default_factory=_style(foreground=_SECONDARY, bold=True))
    h6: Style = field(default_factory=_style(foreground=_MUTED, bold=True))
    h1_underline_char: str = DEFAULT_H1_UNDERLINE_CHAR
    h2_underline_char: str = DEFAULT_H2_UNDERLINE_CHAR
    h3_underline_char: str = DEFAULT_H3_UNDERLINE_CHAR
    heading_bar_char: str = DEFAULT_HEADING_BAR_CHAR

    paragraph: Style = field(default_factory=_style(foreground=_TEXT))
    blockquote: Style = field(default_factory=_style(foreground=_MUTED, italic=True))
    blockquote_bar: str = DEFAULT_BLOCKQUOTE_BAR
    blockquote_bar_style: Style = field(default_factory=_style(foreground=_ACCENT))

    list_bullet: Style = field(default_factory=_style(foreground=_ACCENT))
    list_item: Style = field(default_factory=Style)
    bullet_char: str = DEFAULT_BULLET_CHAR
    nested_bullet_chars: list[str] = field(
        default_factory=lambda: list(DEFAULT_NESTED_BULLET_CHARS)
    )
    list_indent: int = DEFAULT_LIST_INDENT
    hierarchical_numbers: bool = False

    code_inline: Style = field(
        default_factory=_style(
            foreground=_CODE_FG, background=_CODE_BG, padding_left=1, padding_right=1
        )
    )
    code_block: Style = field(
        default_factory=_style(
            foreground=_CODE_FG,
            background=_CODE_BG,
            padding_top=1,
            padding_bottom=1,
            padding_left=2,
            padding_right=2,
        )
    )
    code_formatter: Optional[CodeFormatter] = None
    show_line_numbers: bool = False
    code_line_number_offset: int = DEFAULT_CODE_LINE_NUMBER_OFFSET
    code_line_number: Style = field(default_factory=_style(foreground=_MUTED))
    code_line_number_sep: str = DEFAULT_CODE_LINE_NUMBER_SEP

    hr: Style = field(default_factory=_style(foreground=_MUTED))
    hr_char: str = DEFAULT_HR_CHAR
    hr_width: int = DEFAULT_HR_WIDTH
    hr_label: Style = field(default_factory=_style(foreground=_MUTED, bold=True))

    bold: Style = field(default_factory=_style(bold=True))
    italic: Style = field(default_factory=_style(italic=True))
    underline: Style = field(default_factory=_style(underline=True))
    strikethrough: Style = field(default_factory=_style(strikethrough=True))
    small: Style = field(default_factory=_style(faint=True))
    mark: Style = field(default_factory=_style(foreground=_BLACK, background=_MARK_BG))
    link: Style = field(default_factory=_style(foreground=_BLUE, underline=True))
    kbd: Style = field(
        default_factory=_style(
            foreground=_TEXT, background=_CODE_BG, padding_left=1, padding_right=1
        )
    )
    abbr: Style = field(default_factory=_style(underline=True))
    sub: Style = field(default_factory=_style(faint=True))
    sup: Style = field(default_factory=_style(faint=True))
    ins: Style = field(default_factory=_style(foreground=_GREEN))
    del_: Style = field(default_factory=_style(foreground=_RED, strikethrough=True))
    ins_prefix: str = DEFAULT_INS_PREFIX
    del_prefix: str = DEFAULT_DEL_PREFIX
    q: Style = field(default_factory=_style(italic=True))
    quote_open: str = DEFAULT_QUOTE_OPEN
    quote_close: str = DEFAULT_QUOTE_CLOSE
    cite: Style = field(default_factory=_style(italic=True, faint=True))
    samp: Style = field(default_factory=_style(foreground=_CODE_FG))
    var: Style = field(default_factory=_style(italic=True, foreground=_ACCENT))

    figure_caption: Style = field(default_factory=_style(italic=True, faint=True))
    figure_caption_position: CaptionPosition = CaptionPosition.BOTTOM

    alerts: dict[AlertType, AlertConfig] = field(default_factory=_default_alerts)
    alert_bar: str = DEFAULT_ALERT_BAR

    table_border_set: BorderSet = field(default_factory=box_border_set)
    table_cell_pad: int = DEFAULT_TABLE_CELL_PAD
    table_header: Style = field(default_factory=_style(bold=True))
    table_cell: Style = field(default_factory=Style)
    table_striped_cell: Style = field(default_factory=_style(background=_STRIPE_BG))
    table_footer: Style = field(default_factory=_style(bold=True))
    table_border: Style = field(default_factory=_style(foreground=_MUTED))
    table_caption: Style = field(default_factory=_style(italic=True))

    dt: Style = field(default_factory=_style(bold=True))
    dd: Style = field(default_factory=_style(padding_left=2))

    kv_key: Style = field(default_factory=_style(foreground=_ACCENT, bold=True))
    kv_value: Style = field(default_factory=Style)
    kv_separator: str = DEFAULT_KV_SEPARATOR

    address: Style = field(default_factory=_style(italic=True))
    address_card: Style = field(default_factory=Style)
    address_card_border: Style = field(default_factory=_style(foreground=_MUTED))

    badge: Style = field(default_factory=lambda: _pill(_PRIMARY))
    tag: Style = field(default_factory=lambda: _pill(_CODE_BG, _TEXT, bold=False))
    success_badge: Style = field(default_factory=lambda: _pill(_GREEN))
    warning_badge: Style = field(default_factory=lambda: _pill(_YELLOW, _BLACK))
    error_badge: Style = field(default_factory=lambda: _pill(_RED))
    info_badge: Style = field(default_factory=lambda: _pill(_BLUE))
    success_tag: Style = field(default_factory=lambda: _pill(_CODE_BG, _GREEN, bold=False))
    warning_tag: Style = field(default_factory=lambda: _pill(_CODE_BG, _YELLOW, bold=False))
    error_tag: Style = field(default_factory=lambda: _pill(_CODE_BG, _RED, bold=False))
    info_tag: Style = field(default_factory=lambda: _pill(_CODE_BG, _BLUE, bold=False))

    footnote_ref: Style = field(default_factory=_style(foreground=_ACCENT))
    footnote_item: Style = field(default_factory=_style(faint=True))
    footnote_divider: Style = field(default_factory=_style(foreground=_MUTED))
    footnote_divider_char: str = DEFAULT_FOOTNOTE_DIVIDER_CHAR
    footnote_divider_width: int = DEFAULT_FOOTNOTE_DIVIDER_WIDTH


def default_theme() -> Theme:
    """Return a fresh theme with the default settings."""
    return Theme()