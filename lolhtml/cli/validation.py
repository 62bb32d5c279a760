"""
Validation for CLI arguments.
"""

import os
from pathlib import Path
from typing import Any, Optional

from .errors import CLIValidationError


def validate_path(value: Any, *, allow_none: bool = False) -> Optional[Path]:
    """
    Convert a path argument (source file or output directory) to a Path.

    Existence is not checked here; reading the source reports a missing file
    with the compiler's own file-error wording.

    Examples:
        >>> validate_path("page.lol")
        PosixPath('page.lol')
        >>> validate_path(None, allow_none=True) is None
        True
    """
    if value is None and allow_none:
        return None
    if isinstance(value, (str, os.PathLike)):
        return Path(value)
    raise CLIValidationError(
        f"A file error was encountered. Expected a file path, got {type(value).__name__}.",
        hint="Pass the .lol source file as a path",
    )


def validate_bool(value: Any, *, allow_none: bool = False) -> Optional[bool]:
    """
    Validate a boolean flag.

    Examples:
        >>> validate_bool(True)
        True
        >>> validate_bool(None, allow_none=True) is None
        True
    """
    if value is None:
        if allow_none:
            return None
        raise CLIValidationError("Boolean value cannot be None")
    if isinstance(value, bool):
        return value
    raise CLIValidationError(f"Expected boolean value, got {type(value).__name__}")


def validate_source_suffix(path: Path, suffix: str = ".lol") -> Path:
    """
    Require the accepted source suffix.

    Examples:
        >>> validate_source_suffix(Path("page.lol"))
        PosixPath('page.lol')
    """
    if path.suffix != suffix:
        raise CLIValidationError(
            f"A file error was encountered. Only '{suffix}' files are accepted.",
            hint=f"Rename {path.name} to use the {suffix} extension",
            context={"path": str(path)},
        )
    return path
