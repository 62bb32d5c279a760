"""
Error reporting for the lolhtml CLI.

Two kinds of failure reach the top of a command:

* compiler errors (:class:`lolhtml.errors.LOLError`). The source file is
  rejected and the one-line diagnostic is the whole report.
* CLI errors (:class:`CLIError`): a misnamed or unreadable source file, a bad
  configuration file or an output file that cannot be written.

:func:`handle_cli_exception` prints one line for either kind and exits with
status 1. Anything else is an internal error and is reported with its type.
"""

import logging
import os
import sys
import traceback
from typing import Any, Dict, NoReturn, Optional

from ..errors import LOLError

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class CLIError(Exception):
    """A failure outside the compiler: files, configuration, output."""

    code: str = "CLI_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.hint = hint
        self.context = context or {}

    def format(self) -> str:
        line = f"{self.message} ({self.code})"
        return f"{line} Hint: {self.hint}" if self.hint else line


class CLIConfigError(CLIError):
    """Missing ``--config`` file or malformed workspace configuration."""

    code = "CLI_CONFIG_ERROR"


class CLIValidationError(CLIError):
    """Argument of the wrong type, or a source file without the accepted suffix."""

    code = "CLI_VALIDATION_ERROR"


class CLIFileNotFoundError(CLIError):
    """Source file is missing or is not UTF-8 text."""

    code = "CLI_FILE_NOT_FOUND"


class CLIBuildError(CLIError):
    """The HTML document could not be written."""

    code = "CLI_BUILD_ERROR"


def _env_enabled(*names: str) -> bool:
    return any(os.getenv(name, "").strip().lower() in _TRUE_VALUES for name in names)


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """
    Render an exception for stderr.

    The first line is always the diagnostic. In verbose mode the CLI error
    context and the traceback follow on separate lines.

    Examples:
        >>> format_cli_error(CLIValidationError("Bad suffix", hint="Rename it"))
        'Bad suffix (CLI_VALIDATION_ERROR) Hint: Rename it'
    """
    if isinstance(exc, (LOLError, CLIError)):
        lines = [exc.format()]
    else:
        lines = [f"Internal error: {exc.__class__.__name__}: {exc}"]

    if verbose:
        if isinstance(exc, CLIError):
            lines.extend(f"  {key}: {value}" for key, value in exc.context.items())
        lines.append("Traceback:")
        lines.append("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip())

    return "\n".join(lines)


def handle_cli_exception(exc: BaseException, *, verbose: bool = False) -> NoReturn:
    """
    Report a command failure and exit with status 1.

    LOLHTML_VERBOSE turns on verbose output. LOLHTML_RERAISE re-raises the
    exception instead of exiting, and LOLHTML_DEBUG does both.
    """
    if _env_enabled("LOLHTML_RERAISE", "LOLHTML_DEBUG"):
        raise exc

    if isinstance(exc, LOLError):
        logger.info("Rejected %s with %s", exc.path or "<source>", exc.code)
    elif not isinstance(exc, CLIError):
        logger.debug("Unexpected failure", exc_info=exc)

    verbose = verbose or _env_enabled("LOLHTML_VERBOSE", "LOLHTML_DEBUG")
    print(format_cli_error(exc, verbose=verbose), file=sys.stderr)
    sys.exit(EXIT_FAILURE)
