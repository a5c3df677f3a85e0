"""
Per-field envconfig directives.

Directives live in dataclass field metadata under the "envconfig" key:

    @dataclass
    class Config:
        protocol: str = envfield("default=https,note=Protocol to be used")
        secret: str = envfield("APP_SECRET,optional")
        internal: int = envfield("-", default=0)

A backslash escapes the next character, so "default=a\\,b" yields the
default value "a,b".
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, List

TAG_KEY = "envconfig"


@dataclass
class Tag:
    """Parsed envconfig directives for one field."""

    custom_name: str = ""
    optional: bool = False
    skip: bool = False
    default: str = ""
    note: str = ""


def parse_tag(s: str) -> Tag:
    """
    Parse a directive string.

    Args:
        s: Comma separated directives

    Returns:
        Parsed Tag (all defaults for an empty string)
    """
    tag = Tag()

    tokens: List[str] = [""]
    escape = False
    for ch in s:
        if not escape:
            if ch == "\\":
                escape = True
                continue
            if ch == ",":
                tokens.append("")
                continue
        escape = False
        tokens[-1] += ch

    for token in tokens:
        if token == "-":
            tag.skip = True
        elif token == "optional":
            tag.optional = True
        elif token.startswith("default="):
            tag.default = token[len("default="):]
        elif token.startswith("note="):
            tag.note = token[len("note="):]
        else:
            tag.custom_name = token

    return tag


def field_tag(f: dataclasses.Field) -> Tag:
    """Return the parsed directives attached to a dataclass field."""
    return parse_tag(f.metadata.get(TAG_KEY, "") or "")


def envfield(tag: str = "", **kwargs: Any) -> Any:
    """
    Build a dataclasses.field carrying envconfig directives.

    Args:
        tag: Directive string
        **kwargs: Passed through to dataclasses.field

    Returns:
        A dataclasses.Field for use as a class attribute default
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)
