"""
envconfig: populate dataclasses from environment variables.

Provides:
- Key derivation from nested field names (REMOTE_HOST, remote_host, ...)
- Per-field directives: custom key, optional, default, note, skip
- Conversion to bool, int, float, str, bytes, timedelta, lists, nested
  dataclasses and types with an ``unmarshal`` method
- Two phases: parse() discovers fields, ConfInfo.read() populates them
- Text and HTML documentation tables (envconfig.docs)
"""

from envconfig.__version__ import __version__
from envconfig.errors import (
    ConversionError,
    EnvConfigError,
    InvalidValueKindError,
    KeysNotFoundError,
    NotAPointerError,
    StructTokenMismatchError,
    UnexportedFieldError,
    UnsupportedKindError,
)
from envconfig.field import ConfInfo, Field
from envconfig.keys import FieldName
from envconfig.loader import (
    init,
    init_with_options,
    init_with_prefix,
    parse,
    parse_with_options,
    parse_with_prefix,
)
from envconfig.options import Options
from envconfig.tags import TAG_KEY, Tag, envfield, parse_tag

__all__ = [
    "init",
    "init_with_prefix",
    "init_with_options",
    "parse",
    "parse_with_prefix",
    "parse_with_options",
    "Options",
    "ConfInfo",
    "Field",
    "FieldName",
    "Tag",
    "TAG_KEY",
    "envfield",
    "parse_tag",
    "EnvConfigError",
    "UnexportedFieldError",
    "NotAPointerError",
    "InvalidValueKindError",
    "KeysNotFoundError",
    "StructTokenMismatchError",
    "UnsupportedKindError",
    "ConversionError",
    "__version__",
]
