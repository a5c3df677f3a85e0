"""
Documentation tables for configuration objects.

Renders a ConfInfo as an ASCII text table or an HTML table with the columns
Keys, Value, Default and Note. Rendering only reads the fields; call
ConfInfo.read() first to fill the Value column.

Example:
    cinfo = envconfig.parse(conf)
    cinfo.read()
    print(text_table_string(cinfo))
"""

import html
import io
from typing import List, Optional, TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from envconfig.field import ConfInfo, Field

DEFAULT_WIDTH = 120
PLACEHOLDER = "{{envconfig}}"


def note_optional(fld: Field) -> str:
    """Field note, prefixed with "Optional." for optional fields."""
    note = fld.note
    if not fld.optional:
        return note
    if not note:
        return "Optional."
    return "Optional. " + note


def keys_upper(fld: Field) -> List[str]:
    """Upper-case keys of a field (or its custom name)."""
    if fld.custom_name:
        return [fld.custom_name]
    # keys() is sorted, upper-case spellings come first
    keys = fld.keys()
    return keys[: len(keys) // 2]


def build_table(cinfo: ConfInfo, max_width: Optional[int] = None) -> Table:
    table = Table(box=box.ASCII, show_lines=True)
    for header in ("KEYS", "VALUE", "DEFAULT", "NOTE"):
        table.add_column(header, max_width=max_width, overflow="fold")

    for fld in cinfo:
        table.add_row(
            Text("\n".join(keys_upper(fld))),
            Text(fld.value),
            Text(fld.default),
            Text(note_optional(fld)),
        )
    return table


def text_table(
    stream: TextIO,
    cinfo: ConfInfo,
    max_width: Optional[int] = None,
    width: int = DEFAULT_WIDTH,
) -> None:
    """
    Write each field as a row of an ASCII table.

    Args:
        stream: Destination
        cinfo: Fields to document
        max_width: Maximum width of each column (None for no limit)
        width: Total width available to the table
    """
    console = Console(file=stream, width=width, color_system=None, highlight=False)
    console.print(build_table(cinfo, max_width=max_width))


def text_table_string(
    cinfo: ConfInfo,
    max_width: Optional[int] = None,
    width: int = DEFAULT_WIDTH,
) -> str:
    buf = io.StringIO()
    text_table(buf, cinfo, max_width=max_width, width=width)
    return buf.getvalue()


def render_rows(cinfo: ConfInfo) -> str:
    rows = []
    for fld in cinfo:
        keys = "<br>".join(html.escape(k) for k in keys_upper(fld))
        rows.append(f"""
\t\t<tr>
\t\t\t<th>{keys}</th>
\t\t\t<th>{html.escape(fld.value)}</th>
\t\t\t<th>{html.escape(fld.default)}</th>
\t\t\t<th>{html.escape(note_optional(fld))}</th>
\t\t</tr>""")
    return "".join(rows)


def render_table(cinfo: ConfInfo) -> str:
    return f"""<table>
\t<thead>
\t\t<tr>
\t\t\t<th>Keys</th>
\t\t\t<th>Value</th>
\t\t\t<th>Default</th>
\t\t\t<th>Note</th>
\t\t</tr>
\t</thead>
\t<tbody>{render_rows(cinfo)}
\t</tbody>
</table>"""


class HTMLTableTemplate:
    """
    HTML document with an embedded envconfig table.

    The base document must contain the "{{envconfig}}" placeholder, which is
    replaced by the table on render.

    Example:
        template = HTMLTableTemplate("<html><body>{{envconfig}}</body></html>")
        page = template.render(cinfo)
    """

    def __init__(self, base: str = PLACEHOLDER):
        if PLACEHOLDER not in base:
            raise ValueError(f"Template is missing the {PLACEHOLDER} placeholder")
        self.base = base

    def render(self, cinfo: ConfInfo) -> str:
        return self.base.replace(PLACEHOLDER, render_table(cinfo))

    def write(self, stream: TextIO, cinfo: ConfInfo) -> None:
        stream.write(self.render(cinfo))


def html_table(stream: TextIO, cinfo: ConfInfo) -> None:
    """Write each field as a row of an HTML table."""
    HTMLTableTemplate().write(stream, cinfo)


def html_table_string(cinfo: ConfInfo) -> str:
    return HTMLTableTemplate().render(cinfo)
