"""
Record formatting module.

Renders samples as fixed-width UVF data lines and provides the numeric column
formatter shared with the header.
"""

import logging
import math
from decimal import Decimal
from typing import Optional, Union

from ..core import constants
from ..core.date_utils import DateUtils
from ..core.exceptions import NoApplicableCodeError
from .normalizer import Sample


def format_number(
    value: Union[int, float, Decimal],
    width: int = constants.VALUE_COLUMN_WIDTH,
    max_fraction_digits: int = constants.MAX_FRACTION_DIGITS
) -> str:
    """
    Format a number for a fixed-width UVF column.

    The shortest round-trip representation is written as a plain decimal,
    its fraction cut (not rounded) to max_fraction_digits and then to what
    fits into width. At least one fractional digit is always written.

    Args:
        value: Number to format
        width: Column width
        max_fraction_digits: Maximum number of fractional digits

    Returns:
        Formatted number, at most width characters

    Raises:
        NoApplicableCodeError: If the value is not finite or its integer part
                               leaves no room for a fractional digit
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise NoApplicableCodeError(f"Value '{value}' can not be encoded as UVF.")

    number = value if isinstance(value, Decimal) else Decimal(repr(value))
    integer, _, fraction = format(number, "f").partition(".")

    room = width - len(integer) - 1
    if room < 1:
        raise NoApplicableCodeError(
            f"Value '{value}' does not fit into the UVF value column of {width} characters."
        )
    fraction = fraction[:min(max_fraction_digits, room)] or "0"
    return f"{integer}.{fraction}"


class RecordFormatter:
    """Format UVF data lines."""

    def __init__(
        self,
        date_utils: Optional[DateUtils] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize record formatter.

        Args:
            date_utils: Date utilities carrying the rendering timezone
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = date_utils or DateUtils(logger=self.logger)

    def format_value(self, value: Optional[float]) -> str:
        """Render the value column; None becomes the -777 sentinel."""
        if value is None:
            text = constants.NO_DATA_VALUE
        else:
            text = format_number(value)
        return text.ljust(constants.VALUE_COLUMN_WIDTH)

    def format_record(self, sample: Sample) -> str:
        """
        Render one data line: YYMMDDHHMM followed by the value column.

        Args:
            sample: Normalized sample

        Returns:
            Line of TIMESTAMP_WIDTH + VALUE_COLUMN_WIDTH characters
        """
        return self.date_utils.format_timestamp(sample.timestamp) + self.format_value(sample.value)
