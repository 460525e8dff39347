"""Command-line interface for html2md.

Examples
--------
Convert a file and print the Markdown:
    $ html2md page.html

Write to a file, nesting headings one level deeper:
    $ html2md page.html --out page.md --header-offset 1

Read from stdin:
    $ curl -s https://example.com | html2md -

Use environment variables for defaults:
    $ export HTML2MD_HEADER_OFFSET=2
    $ html2md page.html
"""

import argparse
import logging
import os
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

from .api import html_to_markdown
from .constants import DEFAULT_ENCODING, DEFAULT_HEADER_OFFSET, DEFAULT_HTML_PARSER, ENV_VAR_PREFIX
from .exceptions import Html2MdError
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)

_TRUTHY = ("true", "1", "yes", "on")


def get_env_var_value(key: str) -> Optional[str]:
    """Get environment variable with HTML2MD_ prefix.

    Parameters
    ----------
    key : str
        The parameter name (e.g., 'header_offset')

    Returns
    -------
    Optional[str]
        Environment variable value or None if not set
    """
    env_key = f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}"
    return os.environ.get(env_key)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply environment variables as defaults to parser arguments.

    Command-line arguments still take precedence over environment variables.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue

        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        if action.type is not None and action.type is not str:
            try:
                action.default = action.type(env_value)
            except (ValueError, argparse.ArgumentTypeError):
                logger.warning("Invalid value for %s%s: %s", ENV_VAR_PREFIX, action.dest.upper(), env_value)
        elif action.choices:
            if env_value in action.choices:
                action.default = env_value
            else:
                logger.warning(
                    "Invalid choice for %s%s: %s. Choices: %s",
                    ENV_VAR_PREFIX,
                    action.dest.upper(),
                    env_value,
                    list(action.choices),
                )
        elif action.__class__.__name__ in ("_StoreTrueAction", "_StoreFalseAction"):
            # the variable states the option's value, whichever way the flag flips it
            action.default = env_value.lower() in _TRUTHY
        else:
            action.default = env_value


def _get_version() -> str:
    """Get the version of the html2md package."""
    try:
        return version("html2md")
    except PackageNotFoundError:
        return "unknown"


def non_negative_int(value: str) -> int:
    """Argparse type accepting integers >= 0."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from e
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="html2md",
        description="Convert HTML documents to Markdown.",
        epilog=f"Options can also be set with {ENV_VAR_PREFIX}<OPTION> environment variables.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="HTML file to convert, or '-' to read from stdin (default)",
    )
    parser.add_argument("--out", "-o", type=str, help="Write Markdown to this file instead of stdout")
    parser.add_argument(
        "--header-offset",
        type=non_negative_int,
        default=DEFAULT_HEADER_OFFSET,
        help="Number of levels added to every heading (default: %(default)s)",
    )
    parser.add_argument(
        "--no-normalize-whitespace",
        dest="normalize_whitespace",
        action="store_false",
        help="Keep whitespace runs in text instead of collapsing them to a single space",
    )
    parser.add_argument(
        "--parser",
        choices=["html.parser", "html5lib", "lxml"],
        default=DEFAULT_HTML_PARSER,
        help="BeautifulSoup parser to build the tree with (default: %(default)s)",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=DEFAULT_ENCODING,
        help="Encoding of the input and output files (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (default: %(default)s)",
    )
    parser.add_argument("--log-file", type=str, help="Also write log records to this file")
    parser.add_argument("--trace", action="store_true", help="Include timestamps and logger names in log output")
    parser.add_argument("--version", "-v", action="version", version=f"html2md {_get_version()}")

    apply_env_vars_to_parser(parser)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the command-line interface.

    Parameters
    ----------
    argv : list[str], optional
        Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code: 0 on success, 1 on conversion errors.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level, log_file=args.log_file, trace_mode=args.trace)

    source = getattr(sys.stdin, "buffer", sys.stdin) if args.input == "-" else Path(args.input)
    try:
        markdown = html_to_markdown(
            source,
            parser=args.parser,
            encoding=args.encoding,
            normalize_whitespace=args.normalize_whitespace,
            header_offset=args.header_offset,
        )
    except Html2MdError as e:
        logger.error("Conversion failed: %s", e.message)
        return 1

    if args.out:
        try:
            Path(args.out).write_text(markdown, encoding=args.encoding)
        except OSError as e:
            logger.error("Could not write output file %s: %s", args.out, e)
            return 1
        logger.info("Wrote %s", args.out)
    else:
        sys.stdout.write(markdown)

    return 0
