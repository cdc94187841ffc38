"""
Sentence-spacing correction: two spaces after a sentence end.
"""

import re
from typing import List, Pattern, Sequence

from ..core.models import DEFAULT_SENTENCE_END

SENTENCE_END_RE = re.compile(DEFAULT_SENTENCE_END)


def fix_sentence_endings(
    chunks: Sequence[str], sentence_end_re: Pattern[str] = SENTENCE_END_RE
) -> List[str]:
    """Widen the single space after a sentence end to two spaces.

    When the input contains "... foo.\\nBar ...", normalizing and splitting
    give [..., "foo.", " ", "Bar", ...], one space short.  A single linear
    pass; spaces that are already doubled are left alone.
    """
    fixed = list(chunks)
    i = 0
    while i < len(fixed) - 1:
        if fixed[i + 1] == " " and sentence_end_re.search(fixed[i]):
            fixed[i + 1] = "  "
            i += 2
        else:
            i += 1
    return fixed
