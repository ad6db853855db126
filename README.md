# heraldry

Render consistently styled text for the terminal. `heraldry` gives you
HTML-like typographic elements (headings, paragraphs, lists, code blocks,
tables, alerts, badges, footnotes), each returned as a plain string that
carries ANSI styling and is ready to print.

## Installation

```
pip install heraldry
```

## Quick start

```python
from heraldry.typography import Typography

ty = Typography()

print(ty.compose(
    ty.h1("Release notes"),
    ty.p("Everything you need to know about this release."),
    ty.ul("Faster tables", "New alert styles", "Footnotes"),
    ty.note("Upgrading requires no configuration changes."),
))
```

Every method returns a string, so elements combine freely:

- `compose(*blocks)` joins blocks with a blank line between them.
- `section(*blocks)` joins blocks with a single newline, keeping a heading
  tight against its content.

Both drop trailing newlines from each block and skip blocks that end up empty.

## Elements

All of these are methods of `heraldry.typography.Typography`.

| Kind | Methods |
| --- | --- |
| Headings | `h1` … `h6` (underlined for 1–3, bar-prefixed for 4–6) |
| Blocks | `p`, `blockquote`, `code_block`, `hr`, `hr_with_label`, `br` |
| Lists | `ul`, `ol`, `nest_ul`, `nest_ol` (with `ListItem` children), `dl`, `dt`, `dd` |
| Inline | `bold`, `italic`, `underline`, `strikethrough`, `small`, `mark`, `link`, `kbd`, `abbr`, `sub`, `sup`, `ins`, `delete`, `q`, `cite`, `samp`, `var`, `code` |
| Alerts | `alert`, `note`, `tip`, `important`, `warning`, `caution` |
| Key/value | `kv`, `kv_group` |
| Labels | `badge`, `tag`, `badge_with_style`, `tag_with_style` and the semantic `success_*`, `warning_*`, `error_*`, `info_*` forms |
| Other | `figure`, `figure_top`, `address`, `address_card`, `footnote_ref`, `footnote_section`, `table` |

Nested lists are built from `heraldry.theme.ListItem(text, kind, children)`;
an item's `kind` (`ListKind.UNORDERED` or `ListKind.ORDERED`) decides how its
children are marked.

`kv_group(pairs, separator=None, raw_keys=False, raw_values=False, indent=0)`
pads keys so the values line up; `raw_keys` and `raw_values` leave already
styled text untouched.

## Tables

The first row is the header; shorter rows are padded with empty cells.

```python
from heraldry.table import TableOptions
from heraldry.theme import Alignment

rows = [
    ["Item", "Price"],
    ["Widget", "$10"],
    ["Gadget", "$20"],
    ["Total", "$30"],
]

print(ty.table(rows, TableOptions(
    alignments={1: Alignment.RIGHT},
    footer_row=True,
    caption="Order summary",
)))
```

`TableOptions` covers per-column alignment (also via
`TableOptions.with_column_aligns`), `row_separators`, `striped_rows`, a
`caption` at `CaptionPosition.TOP` or `CaptionPosition.BOTTOM`, a
`footer_row` (used when there are more than two rows) and maximum column
widths (`max_col_width`, `max_col_widths`) with `…` truncation. The
functions `render_table`, `truncate_cell`, `align_cell` and `column_widths`
in `heraldry.table` can be used directly. Pick a border style by setting
the theme's `table_border_set` to `box_border_set()` or
`minimal_border_set()` from `heraldry.theme`.

## Themes

All styles and decorations live on a `Theme` dataclass. Start from
`default_theme()` and change what you need, or pass field overrides when
building a `Typography`:

```python
from heraldry.theme import default_theme, minimal_border_set

ty = Typography(default_theme(), hr_width=40, bullet_char="-",
                table_border_set=minimal_border_set())
```

`Typography.theme` returns a copy of the theme in use.

Code can be passed through a formatter of your own (for syntax
highlighting, for example) by setting `code_formatter` to a function taking
`(code, language)`; it runs only when a language is given. Line numbers for
code blocks are enabled with `show_line_numbers`, starting from
`code_line_number_offset`.

## Utilities

`heraldry.style` offers the building blocks used throughout: the immutable
`Style` (with `render` and `with_`), `Border`, `rounded_border()`,
`visible_width()`, `strip_ansi()` and `join_horizontal()`.

## What it does not do

`heraldry` is a library only: it has no command-line program, does not
detect terminal colour support and does not wrap text to the terminal
width. Colours are always emitted as given in the styles.