"""
Core utilities for the UVF encoder.

Provides configuration, format constants, exceptions and date handling.
"""

from .config import Config
from . import constants
from .date_utils import DateUtils
from .exceptions import (
    EncoderError,
    NoApplicableCodeError,
    UnsupportedEncoderInputError,
    qualified_name,
)

__all__ = [
    "Config",
    "constants",
    "DateUtils",
    "EncoderError",
    "NoApplicableCodeError",
    "UnsupportedEncoderInputError",
    "qualified_name",
]
