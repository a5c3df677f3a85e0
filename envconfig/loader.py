"""
Public entry points.

The parse* functions run the discovery phase only and return a ConfInfo that
can be inspected (e.g. for documentation) and later populated with read().
The init* functions do both in one call.

Example:
    >>> @dataclass
    ... class Config:
    ...     remote_host: str = ""
    ...     port: int = envfield("default=443", default=0)
    >>> conf = Config()
    >>> init(conf)  # reads REMOTE_HOST / remote_host and PORT / port
"""

from typing import Any, Optional

from envconfig.field import ConfInfo
from envconfig.options import Options
from envconfig.walker import walk


def init(conf: Any) -> None:
    """Populate conf from environment variables."""
    init_with_options(conf, Options())


def init_with_prefix(conf: Any, prefix: str) -> None:
    """Populate conf; every key is prefixed with prefix."""
    init_with_options(conf, Options(prefix=prefix))


def init_with_options(conf: Any, options: Optional[Options] = None) -> None:
    """
    Populate conf from environment variables.

    Args:
        conf: Dataclass instance, modified in place
        options: Invocation options (defaults when None)

    Raises:
        EnvConfigError: On the first field that cannot be populated
    """
    cinfo = parse_with_options(conf, options)
    cinfo.read()


def parse(conf: Any) -> ConfInfo:
    """Discover the fields of conf without reading the environment."""
    return parse_with_options(conf, Options())


def parse_with_prefix(conf: Any, prefix: str) -> ConfInfo:
    """Discover the fields of conf; every key is prefixed with prefix."""
    return parse_with_options(conf, Options(prefix=prefix))


def parse_with_options(conf: Any, options: Optional[Options] = None) -> ConfInfo:
    """
    Discover the fields of conf.

    Args:
        conf: Dataclass instance
        options: Invocation options (defaults when None)

    Returns:
        ConfInfo ready for read()
    """
    return walk(conf, options or Options())
