"""
envconfig-docs: render documentation for a configuration dataclass.

Usage:
    envconfig-docs myapp.settings:Config
    envconfig-docs myapp.settings:Config --prefix MYAPP --format html
    envconfig-docs myapp.settings:Config --read --log-level DEBUG

Exit Codes:
    0  Table rendered
    1  The configuration could not be parsed or populated
    2  Invalid target (bad syntax, import failure, not instantiable)
"""

import argparse
import importlib
import logging
import sys
from typing import Any, List, Optional

from envconfig.__version__ import get_version_string
from envconfig.docs import DEFAULT_WIDTH, html_table, text_table
from envconfig.errors import EnvConfigError
from envconfig.loader import parse_with_options
from envconfig.logging_config import LOGGER_NAME, configure_logging
from envconfig.options import Options

logger = logging.getLogger(LOGGER_NAME + ".cli")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_BAD_TARGET = 2


class TargetError(Exception):
    """The TARGET argument cannot be turned into a configuration object."""
    pass


def load_target(target: str) -> Any:
    """
    Import and instantiate "package.module:ClassName".

    Raises:
        TargetError: If the target is malformed, missing or not instantiable
    """
    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise TargetError(f"Target must look like 'package.module:ClassName', got '{target}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetError(f"Cannot import module '{module_name}': {e}") from e

    obj: Any = module
    for part in attr.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetError(f"'{module_name}' has no attribute '{attr}'") from e

    if not isinstance(obj, type):
        return obj

    try:
        return obj()
    except TypeError as e:
        raise TargetError(f"Cannot instantiate {attr} without arguments: {e}") from e


def create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="envconfig-docs",
        description="Document the environment variables of a configuration dataclass",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit Codes:
  0      Table rendered
  1      Configuration error (unexported field, missing keys, bad value)
  2      Invalid target or arguments
""",
    )

    parser.add_argument(
        "target",
        help="Configuration object as package.module:ClassName",
    )

    parser.add_argument(
        "--prefix",
        default="",
        help="Key prefix (outermost path segment)",
    )

    parser.add_argument(
        "--all-optional",
        action="store_true",
        help="Treat every field as optional",
    )

    parser.add_argument(
        "--allow-unexported",
        action="store_true",
        help="Skip unexported fields instead of failing",
    )

    parser.add_argument(
        "--format",
        choices=["text", "html"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--read",
        action="store_true",
        help="Populate values from the environment before rendering",
    )

    parser.add_argument(
        "--max-width",
        type=int,
        default=None,
        help="Maximum column width for text output",
    )

    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_WIDTH,
        help=f"Total width for text output (default: {DEFAULT_WIDTH})",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--log-format",
        choices=["json", "text"],
        default="text",
        help="Log format (default: text)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=get_version_string(),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, format=args.log_format)

    try:
        conf = load_target(args.target)
    except TargetError as e:
        logger.error(str(e))
        return EXIT_BAD_TARGET

    options = Options(
        prefix=args.prefix,
        all_optional=args.all_optional,
        allow_unexported=args.allow_unexported,
    )

    try:
        cinfo = parse_with_options(conf, options)
        if args.read:
            cinfo.read()
    except EnvConfigError as e:
        logger.error(str(e))
        return EXIT_CONFIG_ERROR

    if args.format == "html":
        html_table(sys.stdout, cinfo)
        sys.stdout.write("\n")
    else:
        text_table(sys.stdout, cinfo, max_width=args.max_width, width=args.width)

    logger.info(f"Documented {len(cinfo)} fields of {args.target}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
