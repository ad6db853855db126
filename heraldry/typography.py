"""The typography renderer: headings, lists, code, alerts, tables and more."""

from __future__ import annotations

import copy
import dataclasses
from typing import Optional, Sequence

from heraldry.style import Style, join_horizontal, rounded_border, visible_width
from heraldry.table import TableOptions, render_table
from heraldry.theme import (
    AlertType,
    CaptionPosition,
    ListItem,
    ListKind,
    Theme,
    default_theme,
)

_MAX_NESTED_LIST_DEPTH = 64
_FALLBACK_BULLETS = ("•",)


class Typography:
    """Renders typographic elements as styled terminal strings.

    Keyword arguments override fields of the theme, for example
    ``Typography(hr_width=60, bullet_char="-")``.
    """

    def __init__(self, theme: Optional[Theme] = None, **kwargs) -> None:
        base = copy.deepcopy(theme) if theme is not None else default_theme()
        self._theme = dataclasses.replace(base, **kwargs) if kwargs else base

    @property
    def theme(self) -> Theme:
        """A copy of the current theme."""
        return copy.deepcopy(self._theme)

    # Headings

    def _heading_with_underline(self, text: str, style: Style, char: str) -> str:
        no_margin = style.with_(margin_bottom=0)
        rendered = no_margin.render(text)
        underline = no_margin.render(char * visible_width(text))
        return rendered + "\n" + underline + style.render("")

    @staticmethod
    def _heading_with_bar(text: str, style: Style, bar: str) -> str:
        return style.render(f"{bar} {text}")

    def h1(self, text: str) -> str:
        """A level-1 heading with a double-line underline."""
        t = self._theme
        return self._heading_with_underline(text, t.h1, t.h1_underline_char)

    def h2(self, text: str) -> str:
        """A level-2 heading with a single-line underline."""
        t = self._theme
        return self._heading_with_underline(text, t.h2, t.h2_underline_char)

    def h3(self, text: str) -> str:
        """A level-3 heading with a dotted underline."""
        t = self._theme
        return self._heading_with_underline(text, t.h3, t.h3_underline_char)

    def h4(self, text: str) -> str:
        """A level-4 heading with a bar prefix."""
        return self._heading_with_bar(text, self._theme.h4, self._theme.heading_bar_char)

    def h5(self, text: str) -> str:
        """A level-5 heading with a bar prefix."""
        return self._heading_with_bar(text, self._theme.h5, self._theme.heading_bar_char)

    def h6(self, text: str) -> str:
        """A level-6 heading with a bar prefix."""
        return self._heading_with_bar(text, self._theme.h6, self._theme.heading_bar_char)

    # Block elements

    def p(self, text: str) -> str:
        """A paragraph."""
        return self._theme.paragraph.render(text)

    def blockquote(self, text: str) -> str:
        """A blockquote with a styled bar in front of every line."""
        t = self._theme
        bar = t.blockquote_bar_style.render(t.blockquote_bar)
        return "\n".join(f"{bar} {t.blockquote.render(line)}" for line in text.split("\n"))

    def ul(self, *items: str) -> str:
        """A bulleted list."""
        t = self._theme
        marker = t.list_bullet.render(t.bullet_char)
        return "\n".join(f"{marker} {t.list_item.render(item)}" for item in items)

    def ol(self, *items: str) -> str:
        """A numbered list."""
        t = self._theme
        return "\n".join(
            f"{t.list_bullet.render(f'{number}.')} {t.list_item.render(item)}"
            for number, item in enumerate(items, start=1)
        )

    def nest_ul(self, *items: ListItem) -> str:
        """A nested bulleted list."""
        return self._render_nested(items, ListKind.UNORDERED, 0, "")

    def nest_ol(self, *items: ListItem) -> str:
        """A nested numbered list."""
        return self._render_nested(items, ListKind.ORDERED, 0, "")

    def _render_nested(
        self, items: Sequence[ListItem], kind: ListKind, depth: int, prefix: str
    ) -> str:
        if not items or depth > _MAX_NESTED_LIST_DEPTH:
            return ""
        t = self._theme
        indent = " " * (depth * t.list_indent)
        bullets = t.nested_bullet_chars or _FALLBACK_BULLETS
        lines = []
        for number, item in enumerate(items, start=1):
            if kind is ListKind.ORDERED:
                label = str(number)
                if t.hierarchical_numbers and prefix:
                    label = f"{prefix}.{label}"
                marker = t.list_bullet.render(label + ".")
                child_prefix = label
            else:
                marker = t.list_bullet.render(bullets[depth % len(bullets)])
                child_prefix = ""
            lines.append(f"{indent}{marker} {t.list_item.render(item.text)}")
            if item.children:
                lines.append(
                    self._render_nested(item.children, item.kind, depth + 1, child_prefix)
                )
        return "\n".join(lines)

    def _format_code(self, text: str, lang: str) -> str:
        formatter = self._theme.code_formatter
        if formatter is not None and lang:
            return formatter(text, lang)
        return text

    def code(self, text: str, lang: str = "") -> str:
        """Inline code, passed through the theme's formatter when a language is given."""
        return self._theme.code_inline.render(self._format_code(text, lang))

    def code_block(self, text: str, lang: str = "") -> str:
        """A code block, optionally with a line-number gutter."""
        content = self._format_code(text, lang)
        if self._theme.show_line_numbers:
            return self._code_block_with_line_numbers(content)
        return self._theme.code_block.render(content)

    def _code_block_with_line_numbers(self, content: str) -> str:
        t = self._theme
        lines = content.split("\n")
        offset = t.code_line_number_offset
        width = len(str(offset + len(lines) - 1))
        gutter = "\n".join(
            f"{offset + index:>{width}d}{t.code_line_number_sep}"
            for index in range(len(lines))
        )
        background = t.code_block.background
        margin_bottom = t.code_block.margin_bottom
        gutter_style = t.code_line_number.with_(
            background=background,
            padding_top=1,
            padding_bottom=1,
            padding_left=2,
            margin_bottom=margin_bottom,
        )
        code_style = Style(
            foreground=t.code_block.foreground,
            background=background,
            padding_top=1,
            padding_bottom=1,
            padding_right=2,
            padding_left=1,
            margin_bottom=margin_bottom,
        )
        return join_horizontal(gutter_style.render(gutter), code_style.render(content))

    def br(self) -> str:
        """A line break."""
        return "\n"

    @staticmethod
    def _join_blocks(blocks: Sequence[str], separator: str) -> str:
        trimmed = (block.rstrip("\n") for block in blocks)
        return separator.join(block for block in trimmed if block)

    def section(self, *blocks: str) -> str:
        """Join blocks with single newlines, skipping empty ones."""
        return self._join_blocks(blocks, "\n")

    def hr(self) -> str:
        """A horizontal rule."""
        t = self._theme
        return t.hr.render(t.hr_char * t.hr_width)

    def hr_with_label(self, label: str) -> str:
        """A horizontal rule with a centred label; a plain rule if the label is empty."""
        if not label:
            return self.hr()
        t = self._theme
        label_width = visible_width(label)
        if label_width + 4 > t.hr_width:
            return t.hr_label.render(label)
        remaining = t.hr_width - label_width - 2
        left = remaining // 2
        right = remaining - left
        return (
            t.hr.render(t.hr_char * left)
            + " "
            + t.hr_label.render(label)
            + " "
            + t.hr.render(t.hr_char * right)
        )

    # Inline styles

    def bold(self, text: str) -> str:
        """Bold text."""
        return self._theme.bold.render(text)

    def italic(self, text: str) -> str:
        """Italic text."""
        return self._theme.italic.render(text)

    def underline(self, text: str) -> str:
        """Underlined text."""
        return self._theme.underline.render(text)

    def strikethrough(self, text: str) -> str:
        """Struck-through text."""
        return self._theme.strikethrough.render(text)

    def small(self, text: str) -> str:
        """Small, faint text."""
        return self._theme.small.render(text)

    def mark(self, text: str) -> str:
        """Highlighted text."""
        return self._theme.mark.render(text)

    def link(self, label: str, url: str = "") -> str:
        """A link, rendered as ``label (url)`` when the URL differs from the label."""
        t = self._theme
        if url and url != label:
            return f"{t.link.render(label)} ({t.small.render(url)})"
        return t.link.render(label)

    def kbd(self, text: str) -> str:
        """A keyboard key."""
        return self._theme.kbd.render(text)

    def abbr(self, abbr: str, desc: str = "") -> str:
        """An abbreviation, followed by its description in parentheses if given."""
        styled = self._theme.abbr.render(abbr)
        return f"{styled} ({desc})" if desc else styled

    def sub(self, text: str) -> str:
        """A subscript, marked with a leading underscore."""
        return self._theme.sub.render("_" + text)

    def sup(self, text: str) -> str:
        """A superscript, marked with a leading caret."""
        return self._theme.sup.render("^" + text)

    def ins(self, text: str) -> str:
        """Inserted text with the insertion prefix."""
        return self._theme.ins.render(self._theme.ins_prefix + text)

    def delete(self, text: str) -> str:
        """Deleted text with the deletion prefix."""
        return self._theme.del_.render(self._theme.del_prefix + text)

    def q(self, text: str) -> str:
        """An inline quotation in quotation marks."""
        t = self._theme
        return t.q.render(t.quote_open + text + t.quote_close)

    def cite(self, text: str) -> str:
        """A citation."""
        return self._theme.cite.render(text)

    def samp(self, text: str) -> str:
        """Sample program output."""
        return self._theme.samp.render(text)

    def var(self, text: str) -> str:
        """A variable name."""
        return self._theme.var.render(text)

    # Figure

    def figure(self, content: str, caption: str) -> str:
        """Content with a caption placed as the theme specifies."""
        if self._theme.figure_caption_position is CaptionPosition.TOP:
            return self.figure_top(content, caption)
        return content + "\n" + self._theme.figure_caption.render(caption)

    def figure_top(self, content: str, caption: str) -> str:
        """Content with the caption above it."""
        return self._theme.figure_caption.render(caption) + "\n\n" + content

    # Alerts

    def alert(self, kind: AlertType, text: str) -> str:
        """An alert callout; a blockquote if the kind is not configured."""
        config = self._theme.alerts.get(kind)
        if config is None:
            return self.blockquote(text)
        bar = self._theme.alert_bar
        header = config.style.with_(bold=True).render(f"{bar} {config.icon} {config.label}")
        rendered_bar = config.style.render(bar)
        body = "\n".join(f"{rendered_bar} {line}" for line in text.split("\n"))
        return header + "\n" + body

    def note(self, text: str) -> str:
        """An informational alert."""
        return self.alert(AlertType.NOTE, text)

    def tip(self, text: str) -> str:
        """A helpful-hint alert."""
        return self.alert(AlertType.TIP, text)

    def important(self, text: str) -> str:
        """An important-information alert."""
        return self.alert(AlertType.IMPORTANT, text)

    def warning(self, text: str) -> str:
        """A warning alert."""
        return self.alert(AlertType.WARNING, text)

    def caution(self, text: str) -> str:
        """A caution alert."""
        return self.alert(AlertType.CAUTION, text)

    # Table

    def table(
        self, rows: Sequence[Sequence[str]], options: Optional[TableOptions] = None
    ) -> str:
        """A table whose first row is the header."""
        return render_table(self._theme, rows, options)

    # Definition list

    def dl(self, pairs: Sequence[tuple[str, str]]) -> str:
        """A definition list of (term, description) pairs."""
        t = self._theme
        return "\n".join(
            f"{t.dt.render(term)}\n{t.dd.render(description)}"
            for term, description in pairs
        )

    def dt(self, text: str) -> str:
        """A definition term."""
        return self._theme.dt.render(text)

    def dd(self, text: str) -> str:
        """A definition description."""
        return self._theme.dd.render(text)

    # Key-value pairs

    def kv(self, key: str, value: str) -> str:
        """A single ``key: value`` pair."""
        t = self._theme
        return f"{t.kv_key.render(key + t.kv_separator)} {t.kv_value.render(value)}"

    def kv_group(
        self,
        pairs: Sequence[tuple[str, str]],
        separator: Optional[str] = None,
        raw_keys: bool = False,
        raw_values: bool = False,
        indent: int = 0,
    ) -> str:
        """Key-value pairs with keys padded so the values line up."""
        if not pairs:
            return ""
        t = self._theme
        sep = t.kv_separator if separator is None else separator
        prefix = " " * indent if indent > 0 else ""
        key_width = max(visible_width(key) for key, _ in pairs)
        lines = []
        for key, value in pairs:
            padded = key + " " * (key_width - visible_width(key)) + sep
            if not raw_keys:
                padded = t.kv_key.render(padded)
            if not raw_values:
                value = t.kv_value.render(value)
            lines.append(f"{prefix}{padded} {value}")
        return "\n".join(lines)

    # Address

    def address(self, text: str) -> str:
        """A contact or author block."""
        return self._theme.address.render(text)

    def address_card(self, text: str) -> str:
        """A contact block inside a rounded border."""
        t = self._theme
        style = t.address_card.with_(
            border=rounded_border(),
            border_foreground=t.address_card_border.foreground,
            padding=(0, 1),
        )
        return style.render(text)

    # Badges and tags

    def badge(self, text: str) -> str:
        """A pill-shaped label."""
        return self._theme.badge.render(text)

    def badge_with_style(self, text: str, style: Style) -> str:
        """A badge rendered with a one-off style."""
        return style.render(text)

    def tag(self, text: str) -> str:
        """A subtle category label."""
        return self._theme.tag.render(text)

    def tag_with_style(self, text: str, style: Style) -> str:
        """A tag rendered with a one-off style."""
        return style.render(text)

    def success_badge(self, text: str) -> str:
        """A badge for success."""
        return self._theme.success_badge.render(text)

    def warning_badge(self, text: str) -> str:
        """A badge for warnings."""
        return self._theme.warning_badge.render(text)

    def error_badge(self, text: str) -> str:
        """A badge for errors."""
        return self._theme.error_badge.render(text)

    def info_badge(self, text: str) -> str:
        """A badge for information."""
        return self._theme.info_badge.render(text)

    def success_tag(self, text: str) -> str:
        """A tag for success."""
        return self._theme.success_tag.render(text)

    def warning_tag(self, text: str) -> str:
        """A tag for warnings."""
        return self._theme.warning_tag.render(text)

    def error_tag(self, text: str) -> str:
        """A tag for errors."""
        return self._theme.error_tag.render(text)

    def info_tag(self, text: str) -> str:
        """A tag for information."""
        return self._theme.info_tag.render(text)

    # Footnotes

    def footnote_ref(self, n: int) -> str:
        """An inline footnote marker such as ``[1]``."""
        return self._theme.footnote_ref.render(f"[{n}]")

    def footnote_section(self, notes: Sequence[str]) -> str:
        """A divider followed by the numbered notes; empty if there are none."""
        if not notes:
            return ""
        t = self._theme
        divider = t.footnote_divider.render(t.footnote_divider_char * t.footnote_divider_width)
        items = (
            t.footnote_item.render(f"[{number}] {note}")
            for number, note in enumerate(notes, start=1)
        )
        return "\n".join([divider, *items])

    # Composition

    def compose(self, *blocks: str) -> str:
        """Join blocks with a blank line between them, skipping empty ones."""
        return self._join_blocks(blocks, "\n\n")