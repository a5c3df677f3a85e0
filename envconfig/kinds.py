"""
Value conversion from environment strings to typed field values.

Each field type is resolved once into a Kind, a small object that knows how
to turn a non-empty string into a value of that type. The set of kinds is
closed:

    UnmarshalerKind   class with an ``unmarshal(self, value)`` method
    DurationKind      datetime.timedelta
    BytesKind         bytes, standard base64
    BoolKind          bool
    IntKind           int and int subclasses (IntEnum, ...)
    FloatKind         float and float subclasses
    StrKind           str and str subclasses (str enums, ...)
    SequenceKind      list[X], comma separated
    MappingKind       dict[K, V], not convertible
    OptionalKind      Optional[X], converted as X
    StructKind        dataclass, only as a list element: "(a,b,c)"
    UnsupportedKind   anything else; fails when a value must be converted
"""

import base64
import binascii
import dataclasses
import math
import re
import sys
import typing
from datetime import timedelta
from typing import Any, Dict, List, Optional, Tuple, Union

from envconfig.durations import parse_duration
from envconfig.errors import (
    ConversionError,
    StructTokenMismatchError,
    UnsupportedKindError,
)
from envconfig.tokenizer import iter_tokens

if sys.version_info >= (3, 10):
    from types import UnionType
else:  # pragma: no cover
    UnionType = None

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

# Decimal integers only: no whitespace, digit separators or non-ASCII digits.
_INT = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)


class Kind:
    """Base class for convertible kinds."""

    name = "kind"

    def convert(self, s: str) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


class UnmarshalerKind(Kind):
    """Types that parse themselves via ``unmarshal``."""

    def __init__(self, tp: type):
        self.tp = tp
        self.name = tp.__name__

    def convert(self, s: str) -> Any:
        value = self.tp()
        value.unmarshal(s)
        return value


class DurationKind(Kind):
    name = "duration"

    def convert(self, s: str) -> timedelta:
        try:
            return parse_duration(s)
        except ValueError as e:
            raise ConversionError(s, self.name, str(e)) from e


class BytesKind(Kind):
    name = "bytes"

    def convert(self, s: str) -> bytes:
        try:
            return base64.b64decode(s, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ConversionError(s, self.name, str(e)) from e


class BoolKind(Kind):
    name = "bool"

    def convert(self, s: str) -> bool:
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
        raise ConversionError(s, self.name, "invalid syntax")


class IntKind(Kind):
    def __init__(self, tp: type = int):
        self.tp = tp
        self.name = tp.__name__

    def convert(self, s: str) -> int:
        try:
            if not _INT.fullmatch(s):
                raise ValueError("invalid syntax")
            value = int(s, 10)
            return value if self.tp is int else self.tp(value)
        except ValueError as e:
            raise ConversionError(s, self.name, str(e)) from e


class FloatKind(Kind):
    def __init__(self, tp: type = float):
        self.tp = tp
        self.name = tp.__name__

    def convert(self, s: str) -> float:
        try:
            value = _parse_float(s)
            return value if self.tp is float else self.tp(value)
        except ValueError as e:
            raise ConversionError(s, self.name, str(e)) from e


def _parse_float(s: str) -> float:
    if _HEX_FLOAT.fullmatch(s):
        try:
            value = float.fromhex(s)
        except OverflowError as e:
            raise ValueError("value out of range") from e
    elif _FLOAT.fullmatch(s):
        value = float(s)
    else:
        raise ValueError("invalid syntax")
    if math.isinf(value) and "n" not in s.lower():
        raise ValueError("value out of range")
    return value


class StrKind(Kind):
    def __init__(self, tp: type = str):
        self.tp = tp
        self.name = tp.__name__

    def convert(self, s: str) -> str:
        if self.tp is str:
            return s
        try:
            return self.tp(s)
        except ValueError as e:
            raise ConversionError(s, self.name, str(e)) from e


class SequenceKind(Kind):
    def __init__(self, element: Kind):
        self.element = element
        self.name = f"list[{element.name}]"

    def convert(self, s: str) -> List[Any]:
        return [self.element.convert(token) for token in iter_tokens(s)]


class MappingKind(Kind):
    name = "dict"

    def convert(self, s: str) -> Dict[Any, Any]:
        raise UnsupportedKindError(self.name)


class OptionalKind(Kind):
    def __init__(self, inner: Kind):
        self.inner = inner
        self.name = f"Optional[{inner.name}]"

    def convert(self, s: str) -> Any:
        return self.inner.convert(s)


class StructKind(Kind):
    def __init__(self, tp: type):
        self.tp = tp
        self.name = tp.__name__
        self._fields: Optional[List[Tuple[str, Kind]]] = None

    @property
    def fields(self) -> List[Tuple[str, Kind]]:
        # Resolved on first use, a dataclass may refer to itself.
        if self._fields is None:
            hints = struct_hints(self.tp)
            self._fields = [
                (f.name, resolve_kind(hints.get(f.name, f.type), element=True))
                for f in dataclasses.fields(self.tp)
                if f.init
            ]
        return self._fields

    def convert(self, s: str) -> Any:
        token = s
        if token.startswith("(") and token.endswith(")"):
            token = token[1:-1]
        parts = token.split(",")
        if len(parts) != len(self.fields):
            raise StructTokenMismatchError(len(parts), len(self.fields))

        values = {
            name: kind.convert(part)
            for (name, kind), part in zip(self.fields, parts)
        }
        return self.tp(**values)


class UnsupportedKind(Kind):
    def __init__(self, name: str):
        self.name = name

    def convert(self, s: str) -> Any:
        raise UnsupportedKindError(self.name)


def _is_class(tp: Any) -> bool:
    # list[int] passes isinstance(..., type) on older interpreters.
    return isinstance(tp, type) and typing.get_origin(tp) is None


def is_unmarshaler(tp: Any) -> bool:
    """Whether tp is a class that can parse itself from a string."""
    return _is_class(tp) and callable(getattr(tp, "unmarshal", None))


def optional_inner(tp: Any) -> Optional[Any]:
    """Return X for Optional[X] (or X | None), else None."""
    origin = typing.get_origin(tp)
    if origin is Union or (UnionType is not None and origin is UnionType):
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return None


def is_struct(tp: Any) -> bool:
    """Whether tp is a dataclass the walker should descend into."""
    return (
        _is_class(tp)
        and dataclasses.is_dataclass(tp)
        and not is_unmarshaler(tp)
    )


def struct_hints(cls: type) -> Dict[str, Any]:
    """Resolved field types of a dataclass."""
    try:
        return typing.get_type_hints(cls)
    except NameError:
        # Unresolvable forward references: fall back to the raw annotations.
        return {f.name: f.type for f in dataclasses.fields(cls)}


def type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp)


def resolve_kind(tp: Any, element: bool = False) -> Kind:
    """
    Resolve the conversion kind for a type.

    Args:
        tp: Field or element type
        element: True when resolving a list element or struct part;
            nested sequences are not supported there

    Returns:
        The Kind used to convert strings into tp
    """
    if is_unmarshaler(tp):
        return UnmarshalerKind(tp)

    if tp is timedelta:
        return DurationKind()
    if tp is bytes:
        return BytesKind()
    if tp is bool:
        return BoolKind()

    if _is_class(tp):
        if issubclass(tp, int):
            return IntKind(tp)
        if issubclass(tp, float):
            return FloatKind(tp)
        if issubclass(tp, str):
            return StrKind(tp)

    inner = optional_inner(tp)
    if inner is not None:
        return OptionalKind(resolve_kind(inner, element=element))

    origin = typing.get_origin(tp) or tp
    if origin is list:
        if element:
            return UnsupportedKind("list")
        args = typing.get_args(tp)
        return SequenceKind(resolve_kind(args[0] if args else str, element=True))
    if origin is dict:
        return MappingKind()

    if _is_class(tp) and dataclasses.is_dataclass(tp):
        return StructKind(tp)

    return UnsupportedKind(type_name(tp))
