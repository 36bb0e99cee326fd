"""Helper modules for floating point and decimal text conversion."""

from .decimal_converter import convert_decimal
from .float_converter import convert_double, convert_single
from .text_normalizer import TextNormalizer

__all__ = [
    "TextNormalizer",
    "convert_decimal",
    "convert_double",
    "convert_single",
]
