"""
Line packing: turn a chunk sequence into width-bounded lines.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..core.logging import debug_event
from ..core.models import WrapOptions
from .boundaries import WHITESPACE, is_whitespace


class WrapConfigError(ValueError):
    """Raised when options cannot produce any valid output."""

    pass


def check_options(options: WrapOptions) -> None:
    """Reject a non-positive width or a placeholder that can never fit."""
    if options.width <= 0:
        raise WrapConfigError(f"invalid width {options.width!r} (must be > 0)")
    if options.max_lines is not None:
        if options.max_lines > 1:
            indent = options.subsequent_indent
        else:
            indent = options.initial_indent
        if len(indent) + len(options.placeholder.lstrip(WHITESPACE)) > options.width:
            raise WrapConfigError("placeholder too large for max width")


def _handle_long_word(
    chunk: str, cur_line: List[str], cur_len: int, width: int, break_long_words: bool
) -> Optional[str]:
    """Place a chunk that is too long for any line.

    Returns whatever must go back on the stack, or None when nothing does.
    """
    # Indent wider than the line: still strip off one character per pass
    space_left = 1 if width < 1 else width - cur_len

    if break_long_words:
        cur_line.append(chunk[:space_left])
        rest = chunk[space_left:]
        return rest or None

    # Keep the word intact.  Put it here only if the line is empty; otherwise
    # the next pass starts a fresh line and lands here again with cur_len == 0.
    if not cur_line:
        cur_line.append(chunk)
        return None
    return chunk


def _truncate(
    cur_line: List[str],
    cur_len: int,
    width: int,
    indent: str,
    lines: List[str],
    options: WrapOptions,
) -> None:
    """Finish the output with the placeholder, backtracking if needed."""
    placeholder = options.placeholder
    while cur_line:
        if not is_whitespace(cur_line[-1]) and cur_len + len(placeholder) <= width:
            cur_line.append(placeholder)
            lines.append(indent + "".join(cur_line))
            debug_event("wrap.truncated", lines=len(lines))
            return
        cur_len -= len(cur_line[-1])
        cur_line.pop()

    if lines:
        prev_line = lines[-1].rstrip(WHITESPACE)
        if len(prev_line) + len(placeholder) <= options.width:
            lines[-1] = prev_line + placeholder
            debug_event("wrap.backtracked", lines=len(lines))
            return
    lines.append(indent + placeholder.lstrip(WHITESPACE))
    debug_event("wrap.truncated", lines=len(lines))


def _stack_mark(stack: List[str]) -> Tuple[int, int]:
    return len(stack), len(stack[-1]) if stack else 0


def wrap_chunks(chunks: Sequence[str], options: WrapOptions) -> List[str]:
    """
    Wrap a sequence of chunks into lines of at most ``options.width``.

    Chunks are indivisible (except for long-word breaking) and a line break
    may fall between any two of them.  Whitespace chunks are dropped from
    the start and end of lines when ``drop_whitespace`` is set; leading
    whitespace of the very first line is kept.  Lines may exceed the width
    only when ``break_long_words`` is off.

    With ``max_lines`` set, output stops at that many lines and the last
    one ends with the placeholder.
    """
    check_options(options)

    lines: List[str] = []
    # Reversed so the next chunk is popped from the end
    stack = list(reversed(chunks))

    while stack:
        cur_line: List[str] = []
        cur_len = 0

        indent = options.indent_for(len(lines))
        width = options.width - len(indent)
        mark = _stack_mark(stack)

        if options.drop_whitespace and lines and is_whitespace(stack[-1]):
            stack.pop()

        while stack:
            size = len(stack[-1])
            if cur_len + size <= width:
                cur_line.append(stack.pop())
                cur_len += size
            else:
                break

        # The line is full and the next chunk cannot fit on any line
        if stack and len(stack[-1]) > width:
            rest = _handle_long_word(
                stack.pop(), cur_line, cur_len, width, options.break_long_words
            )
            if rest is not None:
                stack.append(rest)
            cur_len = sum(map(len, cur_line))

        if options.drop_whitespace and cur_line and is_whitespace(cur_line[-1]):
            cur_len -= len(cur_line[-1])
            cur_line.pop()

        if not cur_line:
            if _stack_mark(stack) == mark:
                break
            continue

        last_possible = not stack or (
            options.drop_whitespace and len(stack) == 1 and is_whitespace(stack[0])
        )
        if (
            options.max_lines is None
            or len(lines) + 1 < options.max_lines
            or (last_possible and cur_len <= width)
        ):
            lines.append(indent + "".join(cur_line))
        else:
            _truncate(cur_line, cur_len, width, indent, lines, options)
            break

    return lines
