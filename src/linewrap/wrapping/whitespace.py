"""
Whitespace normalization applied before text is split into chunks.
"""

import re

# Fixed set; non-ASCII spaces such as NO-BREAK SPACE count as word characters.
WHITESPACE = "\t\n\x0b\x0c\r "

_whitespace_trans = dict.fromkeys(map(ord, WHITESPACE), ord(" "))
_whitespace_run_re = re.compile("[%s]+" % re.escape(WHITESPACE))


def tabs_to_spaces(text: str, tab_size: int = 8) -> str:
    """Replace tabs with spaces up to the next multiple of ``tab_size``.

    The column counter restarts after every newline.
    """
    pieces = []
    column = 0
    for char in text:
        if char == "\t":
            pad = tab_size - column % tab_size
            pieces.append(" " * pad)
            column += pad
        elif char == "\n":
            pieces.append(char)
            column = 0
        else:
            pieces.append(char)
            column += 1
    return "".join(pieces)


def whitespace_to_spaces(text: str) -> str:
    """Map every character of the fixed whitespace set to a plain space."""
    return text.translate(_whitespace_trans)


def normalize(
    text: str,
    tab_size: int = 8,
    expand_tabs: bool = True,
    replace_whitespace: bool = True,
) -> str:
    """Expand tabs and convert other whitespace to spaces.

    Eg. " foo\\tbar\\n\\nbaz" becomes " foo    bar  baz".  When tabs are not
    expanded but whitespace is replaced, each tab becomes a single space.
    """
    if expand_tabs:
        text = tabs_to_spaces(text, tab_size)
    if replace_whitespace:
        text = whitespace_to_spaces(text)
    return text


def collapse_whitespace(text: str) -> str:
    """Squeeze whitespace runs to one space and trim both ends."""
    return _whitespace_run_re.sub(" ", text).strip(" ")
