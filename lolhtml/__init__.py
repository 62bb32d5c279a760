"""
lolhtml: a LOLCODE markup to HTML compiler.

A ``.lol`` file is a small program delimited by ``HAI`` and ``KTHXBYE``
that describes paragraphs, lists, bold and italic text, audio and video
links, and a handful of variables.  The compiler reads it in a single
pass and turns each construct into an HTML fragment as it goes.

The code is organised into several modules:

* ``lang`` – keyword vocabulary, tokenizer and the recursive descent
  parser that emits HTML fragments while it parses.
* ``codegen`` – wraps the fragments in the HTML document shell and
  writes the result to disk.
* ``config`` – optional workspace configuration (``lolhtml.toml``).
* ``cli`` – the ``lolhtml`` command line interface.
"""

from .errors import (
    LOLError,
    LOLLexicalError,
    LOLSemanticError,
    LOLSyntaxError,
    LOLUserError,
)
from .lang import CompileResult, compile_source

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "compile_source",
    "CompileResult",
    "LOLError",
    "LOLUserError",
    "LOLLexicalError",
    "LOLSyntaxError",
    "LOLSemanticError",
]
