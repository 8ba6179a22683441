"""
Processing module for the UVF encoder.

Provides value normalization, header formatting and record formatting.
"""

from .normalizer import Sample, ValueNormalizer
from .record import RecordFormatter, format_number
from .header import HeaderFormatter, truncate_identifier

__all__ = [
    "Sample",
    "ValueNormalizer",
    "RecordFormatter",
    "format_number",
    "HeaderFormatter",
    "truncate_identifier",
]
