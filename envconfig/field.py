"""
Field descriptors and the read phase.

A Field is created for every leaf of a configuration object by the walker.
It knows the keys to look up, the directives from the field's tag and where
to write the converted value.
"""

import logging
import os
from typing import Any, List

from envconfig.errors import KeysNotFoundError
from envconfig.keys import FieldName
from envconfig.kinds import Kind

logger = logging.getLogger(__name__)


class FieldTarget:
    """Attribute of a configuration object that receives a field's value."""

    __slots__ = ("owner", "attr")

    def __init__(self, owner: Any, attr: str):
        self.owner = owner
        self.attr = attr

    def set(self, value: Any) -> None:
        setattr(self.owner, self.attr, value)


class Field:
    """A single leaf field of a configuration object."""

    def __init__(
        self,
        name: FieldName,
        target: FieldTarget,
        kind: Kind,
        custom_name: str = "",
        default: str = "",
        note: str = "",
        optional: bool = False,
        allow_unexported: bool = False,
    ):
        self._name = name
        self.target = target
        self.kind = kind
        self.custom_name = custom_name
        self._default = default
        self._note = note
        self._optional = optional
        self.allow_unexported = allow_unexported
        self._value = ""

    def __repr__(self) -> str:
        return f"<Field {self.name} kind={self.kind.name}>"

    @property
    def name(self) -> str:
        """Full dotted name of the field, e.g. "Cassandra.SslCert"."""
        return str(self._name)

    @property
    def value(self) -> str:
        """
        String used to set this field.

        Empty until ConfInfo.read() has populated the field.
        """
        return self._value

    @property
    def default(self) -> str:
        return self._default

    @property
    def note(self) -> str:
        return self._note

    @property
    def optional(self) -> bool:
        return self._optional

    def keys(self) -> List[str]:
        """All environment keys tried when populating this field."""
        if self.custom_name:
            return [self.custom_name]
        return self._name.keys()

    def read_value(self) -> str:
        """
        Resolve the raw string for this field.

        The first non-empty environment value among keys() wins, then the
        default. An optional field resolves to an empty string.

        Raises:
            KeysNotFoundError: If nothing resolved and the field is required
        """
        keys = self.keys()

        for key in keys:
            value = os.environ.get(key, "")
            if value:
                logger.debug(f"{self.name}: using environment key {key}")
                return value

        if self._default:
            logger.debug(f"{self.name}: using default value")
            return self._default

        if self._optional:
            logger.debug(f"{self.name}: optional, no value found")
            return ""

        raise KeysNotFoundError(keys)

    def set_value(self) -> None:
        """Read, convert and assign this field's value."""
        s = self.read_value()
        if not s and self._optional:
            return

        self.target.set(self.kind.convert(s))
        self._value = s


class ConfInfo(list):
    """Fields of a configuration object in declaration order."""

    def read(self) -> None:
        """
        Populate every field from the environment.

        Stops at the first error; fields already set keep their new values.
        """
        for fld in self:
            fld.set_value()
        logger.debug(f"Populated {len(self)} fields")
