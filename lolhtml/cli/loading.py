"""
Source loading for CLI operations.

The compiler core works on in-memory text only; this module is the glue
that checks the file name, reads the file and hands the text over.
"""

import logging
from pathlib import Path

from ..lang import CompileResult, compile_source
from .errors import CLIFileNotFoundError
from .validation import validate_source_suffix

logger = logging.getLogger(__name__)


def read_lol_source(source_path: Path, *, suffix: str = ".lol") -> str:
    """
    Read a LOLCODE source file as UTF-8 text.

    Raises:
        CLIValidationError: If the file does not have the accepted suffix
        CLIFileNotFoundError: If the file is missing or cannot be decoded
    """
    validate_source_suffix(source_path, suffix)
    try:
        return source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CLIFileNotFoundError(
            f"A file error was encountered. Could not read '{source_path}'.",
            hint="Check the file path and try again",
            context={"path": str(source_path), "reason": str(exc)},
        ) from exc


def compile_lol_file(source_path: Path, *, suffix: str = ".lol") -> CompileResult:
    """
    Read and compile a LOLCODE source file.

    Compiler errors propagate unchanged so the top-level handler can print
    their diagnostic.

    Examples:
        >>> result = compile_lol_file(Path("hello.lol"))  # doctest: +SKIP
        >>> result.fragments
        ['<p>hello</p>']
    """
    source = read_lol_source(source_path, suffix=suffix)
    logger.info("Compiling %s", source_path)
    return compile_source(source, path=str(source_path))
