"""
HTML document generator.

The parser produces an ordered list of HTML fragments. This module wraps
them in the fixed document shell and writes the result next to the source
file (or into a configured output directory).

The shell is deliberately minimal: ``<html><body>``, the fragments joined by
newlines, ``</body></html>``. Fragments are already escaped by the parser,
so the template does not auto-escape.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from jinja2 import BaseLoader, Environment, StrictUndefined

logger = logging.getLogger(__name__)

DOCUMENT_TEMPLATE = "<html><body>{{ fragments | join(separator) }}</body></html>"
FRAGMENT_SEPARATOR = "\n"
OUTPUT_SUFFIX = ".html"

_env = Environment(
    loader=BaseLoader(),
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)
_document = _env.from_string(DOCUMENT_TEMPLATE)


def render_document(fragments: Sequence[str]) -> str:
    """
    Wrap fragments in the document shell.

    Examples:
        >>> render_document(["<p>a</p>", "<p>b</p>"])
        '<html><body><p>a</p>\\n<p>b</p></body></html>'
        >>> render_document([])
        '<html><body></body></html>'
    """
    return _document.render(fragments=list(fragments), separator=FRAGMENT_SEPARATOR)


def output_path_for(source: Path, out_dir: Optional[Path] = None) -> Path:
    """
    Derive the HTML output path for a source file.

    ``page.lol`` becomes ``page.html`` beside the source, or inside
    ``out_dir`` when one is given.
    """
    target = source.with_suffix(OUTPUT_SUFFIX)
    if out_dir is not None:
        target = Path(out_dir) / target.name
    return target


def write_document(fragments: Sequence[str], destination: Path) -> Path:
    """Render the document and write it as UTF-8, creating parent directories."""
    destination = Path(destination)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_document(fragments), encoding="utf-8")
    logger.info("Wrote %d fragments to %s", len(fragments), destination)
    return destination


__all__ = [
    "DOCUMENT_TEMPLATE",
    "FRAGMENT_SEPARATOR",
    "OUTPUT_SUFFIX",
    "render_document",
    "output_path_for",
    "write_document",
]
