"""Parser exports."""

from .classifier import classify
from .extractor import extract, parse
from .rbn import parse_rbn

__all__ = [
    "classify",
    "extract",
    "parse",
    "parse_rbn",
]
