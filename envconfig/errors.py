"""
Exception hierarchy for envconfig.

Every error raised while discovering or populating a configuration derives
from EnvConfigError, so callers can catch a single type.
"""

from typing import List, Optional


class EnvConfigError(Exception):
    """Base exception for envconfig errors."""
    pass


class UnexportedFieldError(EnvConfigError):
    """A field cannot be set and AllowUnexported is not active."""

    def __init__(self, field: Optional[str] = None):
        self.field = field
        message = "envconfig: unexported field"
        if field:
            message += f" {field}"
        super().__init__(message)


class NotAPointerError(EnvConfigError):
    """The configuration object is not a mutable instance."""

    def __init__(self, message: str = "envconfig: value is not a pointer"):
        super().__init__(message)


class InvalidValueKindError(EnvConfigError):
    """The configuration object is not a dataclass instance."""

    def __init__(
        self,
        message: str = "envconfig: invalid value kind, only works on structs",
    ):
        super().__init__(message)


class KeysNotFoundError(EnvConfigError):
    """No environment value, default or optional flag for a field."""

    def __init__(self, keys: List[str]):
        self.keys = list(keys)
        super().__init__(f"envconfig: keys {', '.join(self.keys)} not found")


class StructTokenMismatchError(EnvConfigError):
    """A struct token in a list does not match the struct's field count."""

    def __init__(self, token_fields: int, struct_fields: int):
        self.token_fields = token_fields
        self.struct_fields = struct_fields
        super().__init__(
            f"envconfig: struct token has {token_fields} fields "
            f"but struct has {struct_fields}"
        )


class UnsupportedKindError(EnvConfigError):
    """No conversion rule exists for the target type."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"envconfig: kind {kind} not supported")


class ConversionError(EnvConfigError):
    """A string could not be parsed into the expected kind."""

    def __init__(self, value: str, kind: str, reason: str = ""):
        self.value = value
        self.kind = kind
        self.reason = reason
        message = f'envconfig: cannot parse "{value}" as {kind}'
        if reason:
            message += f": {reason}"
        super().__init__(message)
