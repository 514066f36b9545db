"""Rendering runtime: substitution, result cache and thread-local buffers.

Python 3.13+.
"""

from .buffer import ThreadLocalBuffer
from .cache import RenderCache, RenderFn
from .renderer import DEFAULT_SYNTAX, PlaceholderSyntax, render

__all__ = [
    "DEFAULT_SYNTAX",
    "PlaceholderSyntax",
    "RenderCache",
    "RenderFn",
    "ThreadLocalBuffer",
    "render",
]
