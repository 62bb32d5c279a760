"""
Build command implementation.

This module handles the 'build' subcommand which compiles a .lol file into
an HTML document and optionally opens it in a browser.
"""

import argparse
import logging
import webbrowser
from pathlib import Path
from typing import Optional

from lolhtml.codegen import output_path_for, write_document

from ..context import get_cli_context
from ..errors import CLIBuildError, handle_cli_exception
from ..loading import compile_lol_file
from ..output import print_fragments, print_info, print_success, print_warning
from ..validation import validate_bool, validate_path

logger = logging.getLogger(__name__)


def open_in_browser(document: Path, browser: Optional[str] = None) -> bool:
    """
    Open a generated document in a web browser.

    Args:
        document: Path to the HTML file
        browser: Browser name understood by :func:`webbrowser.get`, or None
            for the system default

    Returns:
        True if a browser was launched
    """
    uri = document.resolve().as_uri()
    try:
        controller = webbrowser.get(browser) if browser else webbrowser.get()
        return bool(controller.open(uri))
    except webbrowser.Error as exc:
        logger.warning("Could not open %s: %s", uri, exc)
        return False


def cmd_build(args: argparse.Namespace) -> None:
    """
    Handle the 'build' subcommand.

    This command:
    1. Checks the source suffix and reads the file
    2. Compiles it into HTML fragments
    3. Writes the HTML document next to the source (or into --out)
    4. Optionally opens the document in a browser

    Args:
        args: Parsed command-line arguments containing:
            - file: Path to the .lol source file
            - out: Output directory (optional)
            - open: Force (True) or suppress (False) opening a browser
            - print_fragments: Print the fragments to stdout (optional)

    Raises:
        SystemExit: On any error during the build

    Examples:
        >>> args = argparse.Namespace(file='hello.lol', ...)
        >>> cmd_build(args)  # doctest: +SKIP
        ✓ The file 'hello.lol' follows the LOLCODE grammar!
        ℹ HTML written to hello.html
    """
    try:
        ctx = get_cli_context(args)
        defaults = ctx.config.defaults
        source_path = validate_path(args.file)

        result = compile_lol_file(source_path, suffix=defaults.source_suffix)

        out_dir = validate_path(getattr(args, "out", None), allow_none=True)
        if out_dir is None:
            out_dir = defaults.out_dir
        elif not out_dir.is_absolute():
            out_dir = ctx.workspace_root / out_dir
        destination = output_path_for(source_path, out_dir)
        try:
            write_document(result.fragments, destination)
        except OSError as exc:
            raise CLIBuildError(
                f"A file error was encountered. Could not write '{destination}'.",
                context={"destination": str(destination), "reason": str(exc)},
            ) from exc

        if getattr(args, "print_fragments", False):
            print_fragments(result.fragments)

        print_success(f"The file '{args.file}' follows the LOLCODE grammar!")
        print_info(f"HTML written to {destination}")

        explicit_open = validate_bool(getattr(args, "open", None), allow_none=True)
        should_open = defaults.open_browser if explicit_open is None else explicit_open
        if should_open and not open_in_browser(destination, defaults.browser):
            print_warning(f"Could not open a browser for {destination}")

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
