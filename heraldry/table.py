"""Rendering of bordered text tables with alignment, captions and footers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from heraldry.style import Style, visible_width
from heraldry.theme import Alignment, CaptionPosition, Theme

_ELLIPSIS = "…"
_FALLBACK_COLUMN_SEP = "│"


@dataclass
class TableOptions:
    """Per-table settings.

    ``max_col_width`` of 0 disables truncation; entries in ``max_col_widths``
    override it for single columns.
    """

    alignments: dict[int, Alignment] = field(default_factory=dict)
    row_separators: bool = False
    striped_rows: bool = False
    caption: str = ""
    caption_position: CaptionPosition = CaptionPosition.TOP
    footer_row: bool = False
    max_col_width: int = 0
    max_col_widths: dict[int, int] = field(default_factory=dict)

    @classmethod
    def with_column_aligns(cls, *aligns: Alignment) -> TableOptions:
        """Options aligning columns 0, 1, 2, ... in the order given."""
        return cls(alignments=dict(enumerate(aligns)))


def truncate_cell(text: str, max_width: int) -> str:
    """Shorten ``text`` to ``max_width`` cells, ending it with an ellipsis."""
    if max_width <= 0 or visible_width(text) <= max_width:
        return text
    for end in range(len(text), 0, -1):
        candidate = text[:end] + _ELLIPSIS
        if visible_width(candidate) <= max_width:
            return candidate
    return _ELLIPSIS


def align_cell(rendered: str, cell_width: int, total_width: int, align: Alignment) -> str:
    """Pad ``rendered`` (``cell_width`` wide) to ``total_width`` cells."""
    gap = total_width - cell_width
    if gap <= 0:
        return rendered
    if align is Alignment.RIGHT:
        return " " * gap + rendered
    if align is Alignment.CENTER:
        left = gap // 2
        return " " * left + rendered + " " * (gap - left)
    return rendered + " " * gap


def column_widths(rows: Sequence[Sequence[str]], cols: int) -> list[int]:
    """The widest cell of each of the first ``cols`` columns."""
    widths = [0] * cols
    for row in rows:
        for col in range(cols):
            cell = row[col] if col < len(row) else ""
            widths[col] = max(widths[col], visible_width(cell))
    return widths


def _truncate_rows(
    rows: Sequence[Sequence[str]], options: TableOptions
) -> list[list[str]]:
    if options.max_col_width <= 0 and not options.max_col_widths:
        return [list(row) for row in rows]
    result = []
    for row in rows:
        new_row = []
        for col, cell in enumerate(row):
            limit = options.max_col_widths.get(col, options.max_col_width)
            new_row.append(truncate_cell(cell, limit) if limit > 0 else cell)
        result.append(new_row)
    return result


class _TableRenderer:
    def __init__(self, theme: Theme, widths: list[int], options: TableOptions):
        self.theme = theme
        self.borders = theme.table_border_set
        self.pad = max(0, theme.table_cell_pad)
        self.pad_str = " " * self.pad
        self.widths = widths
        self.aligns = options.alignments
        self.bordered = self.borders.top_left != ""

    def hline(self, left: str, fill: str, junction: str, right: str) -> str:
        segments = [fill * (width + self.pad * 2) for width in self.widths]
        return self.theme.table_border.render(left + junction.join(segments) + right)

    def row(self, row: Sequence[str], style: Style) -> str:
        cells = []
        for col, width in enumerate(self.widths):
            cell = row[col] if col < len(row) else ""
            align = self.aligns.get(col, Alignment.LEFT)
            aligned = align_cell(style.render(cell), visible_width(cell), width, align)
            cells.append(self.pad_str + aligned + self.pad_str)
        border = self.theme.table_border
        start = end = ""
        if self.bordered:
            start = border.render(self.borders.left)
            end = border.render(self.borders.right)
        inner = border.render(self.borders.column_sep or _FALLBACK_COLUMN_SEP)
        return start + inner.join(cells) + end


def render_table(
    theme: Theme,
    rows: Sequence[Sequence[str]],
    options: TableOptions | None = None,
) -> str:
    """Render ``rows`` as a table whose first row is the header.

    Shorter rows are padded with empty cells. Returns an empty string when
    there are no rows or no columns.
    """
    options = options or TableOptions()
    if not rows:
        return ""
    cols = max(len(row) for row in rows)
    if cols == 0:
        return ""

    rows = _truncate_rows(rows, options)
    renderer = _TableRenderer(theme, column_widths(rows, cols), options)
    bs = renderer.borders
    has_footer = options.footer_row and len(rows) > 2
    body = rows[1:-1] if has_footer else rows[1:]
    has_row_sep = options.row_separators and bs.row != ""

    lines: list[str] = []
    caption = theme.table_caption.render(options.caption) if options.caption else ""
    if caption and options.caption_position is CaptionPosition.TOP:
        lines.append(caption)
    if renderer.bordered:
        lines.append(renderer.hline(bs.top_left, bs.top, bs.top_junction, bs.top_right))
    lines.append(renderer.row(rows[0], theme.table_header))
    lines.append(
        renderer.hline(bs.header_left, bs.header, bs.header_cross, bs.header_right)
    )

    for index, row in enumerate(body):
        if has_row_sep and index > 0:
            left, right = (
                (bs.left_junction, bs.right_junction) if renderer.bordered else ("", "")
            )
            lines.append(renderer.hline(left, bs.row, bs.cross, right))
        style = (
            theme.table_striped_cell
            if options.striped_rows and index % 2 == 1
            else theme.table_cell
        )
        lines.append(renderer.row(row, style))

    if has_footer:
        lines.append(
            renderer.hline(bs.footer_left, bs.header, bs.footer_cross, bs.footer_right)
        )
        lines.append(renderer.row(rows[-1], theme.table_footer))

    if renderer.bordered:
        lines.append(
            renderer.hline(bs.bottom_left, bs.bottom, bs.bottom_junction, bs.bottom_right)
        )
    if caption and options.caption_position is CaptionPosition.BOTTOM:
        lines.append(caption)
    return "\n".join(lines)