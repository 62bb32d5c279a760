"""HTML output for compiled LOLCODE programs."""

from .html import output_path_for, render_document, write_document

__all__ = ["render_document", "output_path_for", "write_document"]
