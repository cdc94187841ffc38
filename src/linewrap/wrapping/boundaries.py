"""
Chunk boundary detection for line wrapping.

Text is split into indivisible chunks: maximal runs of whitespace and
"words".  With hyphen breaking enabled a word may be cut right after a
hyphen, so

    Hello there -- you goof-ball, use the -b option!

splits into

    Hello/ /there/ /--/ /you/ /goof-/ball,/ /use/ /the/ /-b/ /option!

and with it disabled only whitespace separates chunks:

    Hello/ /there/ /--/ /you/ /goof-ball,/ /use/ /the/ /-b/ /option!
"""

import re
from typing import List

from .whitespace import WHITESPACE

_word_punct = r"[\w!\"'&.,?]"
_letter = r"[^\d\W]"
_whitespace = "[%s]" % re.escape(WHITESPACE)
_no_whitespace = "[^" + _whitespace[1:]

WORD_SEP_RE = re.compile(
    r"""
    ( # any whitespace
      %(ws)s+
    | # em-dash between words
      (?<=%(wp)s) -{2,} (?=\w)
    | # word, possibly hyphenated
      %(nws)s+? (?:
        # hyphenated word
          -(?: (?<=%(lt)s{2}-) | (?<=%(lt)s-%(lt)s-))
          (?= %(lt)s -? %(lt)s)
        | # end of word
          (?=%(ws)s|\Z)
        | # em-dash
          (?<=%(wp)s) (?=-{2,}\w)
        )
    )"""
    % {
        "wp": _word_punct,
        "lt": _letter,
        "ws": _whitespace,
        "nws": _no_whitespace,
    },
    re.VERBOSE,
)

WORD_SEP_SIMPLE_RE = re.compile(r"(%s+)" % _whitespace)


def split_chunks(text: str, break_on_hyphens: bool = True) -> List[str]:
    """Split normalized text into chunks; empty fragments are dropped.

    Joining the result gives back ``text`` exactly.
    """
    pattern = WORD_SEP_RE if break_on_hyphens else WORD_SEP_SIMPLE_RE
    return [chunk for chunk in pattern.split(text) if chunk]


def is_whitespace(chunk: str) -> bool:
    """True for chunks made only of the fixed whitespace set (or empty)."""
    return not chunk.strip(WHITESPACE)
