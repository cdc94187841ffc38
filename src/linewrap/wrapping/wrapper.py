"""
Public wrapping interface: the TextWrapper object and convenience functions.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional

from ..core.models import WrapOptions
from .boundaries import split_chunks
from .engine import wrap_chunks
from .sentences import fix_sentence_endings
from .whitespace import collapse_whitespace, normalize


class TextWrapper:
    """
    Wrap or fill single paragraphs of text.

    Options come from a WrapOptions instance, keyword overrides, or both:

        TextWrapper(width=40)
        TextWrapper(options, initial_indent="  * ")

    Tabs are expanded and other whitespace (newlines included) becomes a
    space before wrapping, unless the options turn that off.
    """

    def __init__(self, options: Optional[WrapOptions] = None, **overrides: Any):
        if options is None:
            options = WrapOptions(**overrides)
        elif overrides:
            options = WrapOptions(**{**options.model_dump(), **overrides})
        self.options = options
        self._sentence_end_re = re.compile(options.sentence_end_pattern)

    def replace(self, **overrides: Any) -> "TextWrapper":
        """Return a new wrapper with some options changed."""
        return TextWrapper(self.options, **overrides)

    def split_chunks(self, text: str) -> List[str]:
        """Normalize whitespace in ``text`` and split it into chunks."""
        opts = self.options
        text = normalize(
            text,
            tab_size=opts.tab_size,
            expand_tabs=opts.expand_tabs,
            replace_whitespace=opts.replace_whitespace,
        )
        return split_chunks(text, break_on_hyphens=opts.break_on_hyphens)

    def wrap(self, text: str) -> List[str]:
        """Reformat ``text`` into lines no wider than the configured width.

        Returns a list of lines without trailing newlines.
        """
        chunks = self.split_chunks(text)
        if self.options.fix_sentence_endings:
            chunks = fix_sentence_endings(chunks, self._sentence_end_re)
        return wrap_chunks(chunks, self.options)

    def fill(self, text: str) -> str:
        """Like wrap(), but return a single newline-joined string."""
        return "\n".join(self.wrap(text))


def wrap(text: str, width: int = 70, **options: Any) -> List[str]:
    """Wrap a single paragraph of text, returning a list of lines."""
    return TextWrapper(width=width, **options).wrap(text)


def fill(text: str, width: int = 70, **options: Any) -> str:
    """Fill a single paragraph of text, returning a new string."""
    return TextWrapper(width=width, **options).fill(text)


def shorten(text: str, width: int, **options: Any) -> str:
    """Collapse whitespace and truncate ``text`` to fit in ``width``.

    If the collapsed text fits, it is returned as is; otherwise as many
    words as possible are kept and the placeholder is appended:

        >>> shorten("Hello  world!", width=12)
        'Hello world!'
        >>> shorten("Hello  world!", width=11)
        'Hello [...]'
    """
    wrapper = TextWrapper(width=width, **{**options, "max_lines": 1})
    return wrapper.fill(collapse_whitespace(text))
