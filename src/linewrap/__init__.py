"""Text wrapping and filling with indentation, truncation and hyphen-aware breaks."""

from .core.models import WrapOptions
from .wrapping import (
    TextWrapper,
    WrapConfigError,
    dedent,
    fill,
    indent,
    shorten,
    wrap,
)

__version__ = "0.1.0"

__all__ = [
    "TextWrapper",
    "WrapOptions",
    "WrapConfigError",
    "wrap",
    "fill",
    "shorten",
    "dedent",
    "indent",
    "__version__",
]
