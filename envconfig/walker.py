"""
Discovery phase: walk a dataclass instance and collect its leaf fields.

Nested dataclasses are descended into, ``Optional[SomeDataclass]`` fields
that are None are allocated first. Everything else becomes a Field in the
resulting ConfInfo. No environment variable is read here.
"""

import dataclasses
import logging
from typing import Any

from envconfig.errors import (
    InvalidValueKindError,
    NotAPointerError,
    UnexportedFieldError,
)
from envconfig.field import ConfInfo, Field, FieldTarget
from envconfig.keys import FieldName
from envconfig.kinds import is_struct, optional_inner, resolve_kind, struct_hints
from envconfig.options import Options
from envconfig.tags import field_tag

logger = logging.getLogger(__name__)


def is_frozen(obj: Any) -> bool:
    params = getattr(type(obj), "__dataclass_params__", None)
    return bool(params and params.frozen)


def check_root(conf: Any) -> None:
    """
    Validate the object handed to parse/init.

    Raises:
        NotAPointerError: conf is None, a class, or immutable
        InvalidValueKindError: conf is not a dataclass instance
    """
    if conf is None or isinstance(conf, type):
        raise NotAPointerError()
    if not dataclasses.is_dataclass(conf):
        raise InvalidValueKindError()
    if is_frozen(conf):
        raise NotAPointerError("envconfig: value is not a pointer (frozen dataclass)")


def allocate(cls: type, name: FieldName) -> Any:
    try:
        return cls()
    except TypeError as e:
        raise NotAPointerError(
            f"envconfig: cannot allocate {cls.__name__} for {name}: {e}"
        ) from e


class StructWalker:
    """Collects the leaf fields of a configuration object."""

    def __init__(self, config: ConfInfo, allow_unexported: bool = False):
        self.config = config
        self.allow_unexported = allow_unexported

    def walk(self, obj: Any, name: FieldName, optional: bool) -> None:
        """
        Register every leaf field of obj, depth first.

        Args:
            obj: Dataclass instance
            name: Path of obj from the root
            optional: Inherited optional flag
        """
        hints = struct_hints(type(obj))
        frozen = is_frozen(obj)

        for f in dataclasses.fields(obj):
            tag = field_tag(f)
            settable = not frozen and not f.name.startswith("_")

            if not settable:
                if not self.allow_unexported:
                    raise UnexportedFieldError(str(name.append(f.name)))
                logger.debug(f"Skipping unexported field {name.append(f.name)}")
                continue
            if tag.skip:
                logger.debug(f"Skipping field {name.append(f.name)}")
                continue

            tp = hints.get(f.name, f.type)
            field_optional = optional or tag.optional

            # Optional[SomeDataclass] behaves like a pointer to a struct.
            inner = optional_inner(tp)
            if inner is not None and is_struct(inner):
                tp = inner

            if is_struct(tp):
                child = getattr(obj, f.name)
                if child is None:
                    logger.debug(f"Allocating {tp.__name__} for {name.append(f.name)}")
                    child = allocate(tp, name.append(f.name))
                    setattr(obj, f.name, child)
                self.walk(child, name.append(f.name), field_optional)
                continue

            self.config.append(Field(
                name=name.append(f.name),
                target=FieldTarget(obj, f.name),
                kind=resolve_kind(tp),
                custom_name=tag.custom_name,
                default=tag.default,
                note=tag.note,
                optional=field_optional,
                allow_unexported=self.allow_unexported,
            ))


def walk(conf: Any, options: Options) -> ConfInfo:
    """
    Build the ConfInfo for a configuration object.

    Args:
        conf: Dataclass instance, modified in place when nested
            optional structs need allocating
        options: Invocation options

    Returns:
        ConfInfo with one Field per leaf
    """
    check_root(conf)

    name = FieldName()
    if options.prefix:
        name = name.append(options.prefix)

    cinfo = ConfInfo()
    StructWalker(cinfo, allow_unexported=options.allow_unexported).walk(
        conf, name, options.all_optional
    )
    logger.debug(f"Discovered {len(cinfo)} fields on {type(conf).__name__}")
    return cinfo
