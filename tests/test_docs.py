"""
Tests for documentation tables.

Usage:
    pytest tests/test_docs.py -v
"""

import io
import os
from dataclasses import dataclass

import pytest

import envconfig
from envconfig import envfield
from envconfig.docs import (
    HTMLTableTemplate,
    html_table,
    html_table_string,
    keys_upper,
    note_optional,
    text_table,
    text_table_string,
)


@dataclass
class RemoteConfig:
    Protocol: str = envfield("default=https,note=Protocol to be used", default="")
    RemoteHost: str = envfield("note=Remote hostname", default="")
    Port: int = envfield("default=443", default=0)


EXPECTED_TABLE = "\n".join([
    "<table>",
    "\t<thead>",
    "\t\t<tr>",
    "\t\t\t<th>Keys</th>",
    "\t\t\t<th>Value</th>",
    "\t\t\t<th>Default</th>",
    "\t\t\t<th>Note</th>",
    "\t\t</tr>",
    "\t</thead>",
    "\t<tbody>",
    "\t\t<tr>",
    "\t\t\t<th>PROTOCOL</th>",
    "\t\t\t<th>https</th>",
    "\t\t\t<th>https</th>",
    "\t\t\t<th>Protocol to be used</th>",
    "\t\t</tr>",
    "\t\t<tr>",
    "\t\t\t<th>REMOTEHOST<br>REMOTE_HOST</th>",
    "\t\t\t<th>localhost</th>",
    "\t\t\t<th></th>",
    "\t\t\t<th>Remote hostname</th>",
    "\t\t</tr>",
    "\t\t<tr>",
    "\t\t\t<th>PORT</th>",
    "\t\t\t<th>80</th>",
    "\t\t\t<th>443</th>",
    "\t\t\t<th></th>",
    "\t\t</tr>",
    "\t</tbody>",
    "</table>",
])


@pytest.fixture
def cinfo():
    os.environ["REMOTE_HOST"] = "localhost"
    os.environ["PORT"] = "80"

    cinfo = envconfig.parse(RemoteConfig())
    cinfo.read()
    return cinfo


class TestHelpers:
    """Test column helpers."""

    def test_keys_upper(self, cinfo):
        assert keys_upper(cinfo[0]) == ["PROTOCOL"]
        assert keys_upper(cinfo[1]) == ["REMOTEHOST", "REMOTE_HOST"]

    def test_keys_upper_custom_name(self):
        @dataclass
        class Config:
            token: str = envfield("ApiToken,optional", default="")

        cinfo = envconfig.parse(Config())
        assert keys_upper(cinfo[0]) == ["ApiToken"]

    def test_note_optional(self):
        @dataclass
        class Config:
            a: str = envfield("optional", default="")
            b: str = envfield("optional,note=Used for tests", default="")
            c: str = envfield("note=Required", default="")

        cinfo = envconfig.parse(Config())
        assert note_optional(cinfo[0]) == "Optional."
        assert note_optional(cinfo[1]) == "Optional. Used for tests"
        assert note_optional(cinfo[2]) == "Required"


class TestTextTable:
    """Test the ASCII table."""

    def test_contents(self, cinfo):
        output = text_table_string(cinfo)

        for expected in ["KEYS", "VALUE", "DEFAULT", "NOTE", "PROTOCOL", "REMOTEHOST",
                         "REMOTE_HOST", "localhost", "Protocol to be used", "443", "80"]:
            assert expected in output
        assert "remote_host" not in output

    def test_ascii_borders(self, cinfo):
        lines = text_table_string(cinfo).strip().splitlines()
        assert lines[0].startswith("+")
        assert lines[-1].startswith("+")
        assert all(line[0] in "+|" for line in lines)

    def test_keys_on_separate_lines(self, cinfo):
        lines = text_table_string(cinfo).splitlines()
        assert any("REMOTEHOST " in line for line in lines)
        assert any("REMOTE_HOST " in line for line in lines)
        assert not any("REMOTEHOST REMOTE_HOST" in line for line in lines)

    def test_writes_to_stream(self, cinfo):
        buf = io.StringIO()
        text_table(buf, cinfo)
        assert "REMOTE_HOST" in buf.getvalue()

    def test_markup_is_not_interpreted(self):
        @dataclass
        class Config:
            Pattern: str = envfield("default=[bold]x[/bold]", default="")

        cinfo = envconfig.parse(Config())
        cinfo.read()
        assert "[bold]x[/bold]" in text_table_string(cinfo)

    def test_max_width_wraps_cells(self, cinfo):
        output = text_table_string(cinfo, max_width=10)
        assert "Protocol to be used" not in output
        assert "Protocol" in output


class TestHTMLTable:
    """Test the HTML table."""

    def test_exact_output(self, cinfo):
        assert html_table_string(cinfo) == EXPECTED_TABLE

    def test_writes_to_stream(self, cinfo):
        buf = io.StringIO()
        html_table(buf, cinfo)
        assert buf.getvalue() == EXPECTED_TABLE

    def test_custom_template(self, cinfo):
        template = HTMLTableTemplate(
            "<html>\n\t<body>\n{{envconfig}}\n\t</body>\n</html>"
        )
        page = template.render(cinfo)

        assert page.startswith("<html>\n\t<body>\n<table>")
        assert page.endswith("</table>\n\t</body>\n</html>")
        assert EXPECTED_TABLE in page

    def test_template_requires_placeholder(self):
        with pytest.raises(ValueError):
            HTMLTableTemplate("<html></html>")

    def test_templates_are_independent(self, cinfo):
        a = HTMLTableTemplate("A {{envconfig}}")
        b = HTMLTableTemplate("B {{envconfig}}")
        assert a.render(cinfo).startswith("A <table>")
        assert b.render(cinfo).startswith("B <table>")

    def test_escaping(self):
        @dataclass
        class Config:
            Banner: str = envfield("note=Shown <raw> & unescaped", default="")

        os.environ["BANNER"] = "<script>alert(1)</script>"
        cinfo = envconfig.parse(Config())
        cinfo.read()

        output = html_table_string(cinfo)
        assert "<script>" not in output
        assert "&lt;script&gt;" in output
        assert "Shown &lt;raw&gt; &amp; unescaped" in output
