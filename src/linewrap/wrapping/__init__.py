"""
Linewrap Wrapping Package

Chunk tokenizing, greedy line packing with truncation, and the margin
helpers built around them.
"""

from .engine import WrapConfigError, wrap_chunks
from .margins import dedent, indent
from .wrapper import TextWrapper, fill, shorten, wrap

__all__ = [
    "TextWrapper",
    "WrapConfigError",
    "wrap_chunks",
    "wrap",
    "fill",
    "shorten",
    "dedent",
    "indent",
]
