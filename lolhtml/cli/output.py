"""
Output formatting for CLI operations.
"""

from typing import Iterable


def print_success(message: str) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("Build completed successfully")
        ✓ Build completed successfully
    """
    print(f"✓ {message}")


def print_info(message: str) -> None:
    """
    Print informational message with info prefix.

    Examples:
        >>> print_info("Opening browser...")
        ℹ Opening browser...
    """
    print(f"ℹ {message}")


def print_warning(message: str) -> None:
    """
    Print warning message with warning prefix.

    Examples:
        >>> print_warning("Could not open a browser")
        ⚠ Could not open a browser
    """
    print(f"⚠ {message}")


def print_fragments(fragments: Iterable[str]) -> None:
    """Print one HTML fragment per line, in emission order."""
    for fragment in fragments:
        print(fragment)
