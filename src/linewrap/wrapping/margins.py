"""
Margin helpers working line by line: dedent() and indent().

Despite the names, dedent() is not the inverse of indent().
"""

import re
from typing import Callable, Optional

_whitespace_only_re = re.compile("^[ \t]+$", re.MULTILINE)
_leading_whitespace_re = re.compile("(^[ \t]*)(?:[^ \t\n])", re.MULTILINE)


def dedent(text: str) -> str:
    """Remove any common leading whitespace from every line in ``text``.

    Tabs and spaces both count as whitespace but are not equal: "  hello"
    and "\\thello" have no common margin.  Lines consisting only of spaces
    and tabs are normalized to empty lines.
    """
    margin: Optional[str] = None
    text = _whitespace_only_re.sub("", text)

    for indent in _leading_whitespace_re.findall(text):
        if margin is None:
            margin = indent
        elif indent.startswith(margin):
            # Deeper than the current margin: margin unchanged
            pass
        elif margin.startswith(indent):
            margin = indent
        else:
            for i, (x, y) in enumerate(zip(margin, indent)):
                if x != y:
                    margin = margin[:i]
                    break

    if margin:
        text = re.sub(r"(?m)^" + margin, "", text)
    return text


def _has_content(line: str) -> bool:
    return bool(line.strip())


def indent(
    text: str, prefix: str, predicate: Optional[Callable[[str], bool]] = None
) -> str:
    """Add ``prefix`` to the beginning of selected lines in ``text``.

    ``predicate`` picks the lines; by default every line that is not
    whitespace-only.  Line endings are preserved.
    """
    if predicate is None:
        predicate = _has_content
    return "".join(
        prefix + line if predicate(line) else line
        for line in text.splitlines(True)
    )
