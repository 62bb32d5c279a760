"""
lolhtml CLI entry point.

Compiles LOLCODE markup (.lol) files into HTML documents.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from lolhtml import __version__

from .commands import cmd_build, cmd_check
from .context import CLIContext, get_cli_context, load_cli_config
from .errors import handle_cli_exception

_VALID_COMMANDS = {'build', 'check'}

# Global options that consume the following argument.
_GLOBAL_VALUE_OPTIONS = {'--config', '--workspace', '--log-level'}

_LEVEL_MAP = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warn': logging.WARNING,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def _configure_logging(args) -> None:
    """Configure the lolhtml logger from --log-level or LOLHTML_LOG_LEVEL."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('LOLHTML_LOG_LEVEL', 'warn')
    ).lower()
    numeric_level = _LEVEL_MAP.get(log_level, logging.WARNING)

    package_logger = logging.getLogger('lolhtml')
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False


def _normalize_legacy_invocation(argv: list) -> list:
    """Treat ``lolhtml [global options] page.lol`` as ``... build page.lol``."""
    index = 0
    while index < len(argv) and argv[index].startswith('-'):
        index += 2 if argv[index] in _GLOBAL_VALUE_OPTIONS else 1
    if index >= len(argv):
        return argv

    first = argv[index]
    if first not in _VALID_COMMANDS and (first.endswith('.lol') or Path(first).exists()):
        return argv[:index] + ['build'] + argv[index:]
    return argv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compile LOLCODE markup files into HTML",
        prog="lolhtml"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to a lolhtml.toml configuration file'
    )
    parser.add_argument(
        '--workspace',
        default=None,
        help='Workspace root directory (defaults to current working directory)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print tracebacks and error context (or set LOLHTML_VERBOSE=1)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set LOLHTML_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    build_parser_ = subparsers.add_parser(
        'build',
        help='Compile a .lol file and write the HTML document'
    )
    build_parser_.add_argument('file', help='Path to the .lol source file')
    build_parser_.add_argument(
        '--out', '-o', default=None,
        help='Output directory for the HTML file (default: next to the source)'
    )
    build_parser_.add_argument(
        '--open', action=argparse.BooleanOptionalAction, default=None,
        help='Open the generated document in a browser'
    )
    build_parser_.add_argument(
        '--print-fragments', action='store_true',
        help='Print the generated HTML fragments'
    )
    build_parser_.set_defaults(func=cmd_build)

    check_parser = subparsers.add_parser(
        'check',
        help='Compile a .lol file without writing output'
    )
    check_parser.add_argument('file', help='Path to the .lol source file')
    check_parser.add_argument(
        '--print-fragments', action='store_true',
        help='Print the generated HTML fragments'
    )
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['build', 'hello.lol'])  # doctest: +SKIP
        >>> main(['hello.lol', '--open'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]
    argv = _normalize_legacy_invocation(list(argv))

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    _configure_logging(args)

    workspace_root = Path(args.workspace).resolve() if args.workspace else Path.cwd()
    config_path = Path(args.config).resolve() if args.config else None
    try:
        config = load_cli_config(workspace_root, config_path)
    except Exception as exc:
        handle_cli_exception(exc, verbose=args.verbose)

    args.cli_context = CLIContext(workspace_root=workspace_root, config=config)
    args.func(args)


__all__ = [
    "main",
    "build_parser",
    "cmd_build",
    "cmd_check",
    "CLIContext",
    "get_cli_context",
]


if __name__ == '__main__':  # pragma: no cover
    main()
