import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Lowercase letter, sentence-ending punctuation, optional end-of-quote,
# end of chunk.  US-ASCII only.
DEFAULT_SENTENCE_END = r"[a-z][.!?][\"']?\Z"


class WrapOptions(BaseModel):
    """Immutable wrapping configuration.

    ``width`` is only checked when wrapping, so an options object with a
    non-positive width can still be built and inspected.
    """

    model_config = ConfigDict(frozen=True)

    width: int = 70
    initial_indent: str = ""  # prepended to the first line, counts toward width
    subsequent_indent: str = ""  # prepended to every other line
    expand_tabs: bool = True
    replace_whitespace: bool = True
    fix_sentence_endings: bool = False
    break_long_words: bool = True
    drop_whitespace: bool = True
    break_on_hyphens: bool = True
    tab_size: int = Field(default=8, gt=0)
    max_lines: int | None = Field(default=None, gt=0)
    placeholder: str = " [...]"
    sentence_end_pattern: str = DEFAULT_SENTENCE_END

    @field_validator("sentence_end_pattern")
    @classmethod
    def _pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid sentence end pattern: {e}") from e
        return value

    def indent_for(self, line_number: int) -> str:
        """Indent applied to the zero-based ``line_number``."""
        return self.initial_indent if line_number == 0 else self.subsequent_indent
