"""
Header formatting module.

Builds the UVF preamble: function and index lines, measurement and station
identification, the timeseries identifier line with its centuries, the
station location and the temporal bounding box.
"""

import logging
from datetime import datetime
from typing import List, Optional

from ..core import constants
from ..core.date_utils import DateUtils
from ..models.observation import Point
from .record import format_number


def truncate_identifier(identifier: str, length: int = constants.MAX_IDENTIFIER_LENGTH) -> str:
    """Keep the last `length` characters of an identifier."""
    return identifier[-length:] if len(identifier) > length else identifier


class HeaderFormatter:
    """Format the UVF header lines."""

    def __init__(
        self,
        date_utils: Optional[DateUtils] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize header formatter.

        Args:
            date_utils: Date utilities carrying the rendering timezone
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = date_utils or DateUtils(logger=self.logger)

    def format_header(
        self,
        observed_property: str,
        unit: Optional[str],
        feature_identifier: str,
        start: datetime,
        end: datetime,
        feature_name: Optional[str] = None,
        geometry: Optional[Point] = None
    ) -> List[str]:
        """
        Build all header lines.

        Args:
            observed_property: Observed property identifier
            unit: Unit of measurement; None suppresses the unit line and the
                  unit segment of the timeseries identifier line (counts)
            feature_identifier: Feature of interest identifier
            start: Start of the temporal window
            end: End of the temporal window
            feature_name: Feature display name
            geometry: Station location

        Returns:
            Header lines in file order
        """
        lines = [
            constants.FUNCTION_INTERPRETATION_LINE,
            constants.INDEX_UNIT_TIME_LINE,
            constants.MEASUREMENT_IDENTIFIER_PREFIX + truncate_identifier(observed_property),
        ]
        if unit is not None:
            lines.append(constants.MEASUREMENT_UNIT_PREFIX + unit)
        lines.append(
            constants.MEASUREMENT_LOCATION_IDENTIFIER_PREFIX + truncate_identifier(feature_identifier)
        )
        if feature_name:
            lines.append(constants.MEASUREMENT_LOCATION_NAME_PREFIX + feature_name)
        lines.append(constants.TIMESERIES_TYPE_TIME_BASED)
        lines.append(self.format_timeseries_identifier(observed_property, unit, start, end))
        if geometry is not None:
            lines.append(self.format_location(feature_identifier, geometry))
        lines.append(self.format_bounding_box(start, end))
        return lines

    def format_timeseries_identifier(
        self,
        observed_property: str,
        unit: Optional[str],
        start: datetime,
        end: datetime
    ) -> str:
        """
        Timeseries identifier line with start and end century.

        Columns: identifier (15), unit (15, blank for counts), start year,
        blank, end year.
        """
        unit_column = ""
        if unit is not None:
            unit_column = " " + unit[:constants.UNIT_COLUMN_WIDTH - 1]
        return (
            truncate_identifier(observed_property).ljust(constants.IDENTIFIER_COLUMN_WIDTH)
            + unit_column.ljust(constants.UNIT_COLUMN_WIDTH)
            + f"{self.date_utils.format_year(start)} {self.date_utils.format_year(end)}"
        )

    def format_location(self, feature_identifier: str, geometry: Point) -> str:
        """Station id, x, y and height, each in its fixed column."""
        width = constants.COORDINATE_COLUMN_WIDTH
        return (
            truncate_identifier(feature_identifier).ljust(constants.IDENTIFIER_COLUMN_WIDTH)
            + format_number(geometry.x, width).ljust(width)
            + format_number(geometry.y, width).ljust(width)
            + constants.DEFAULT_LOCATION_HEIGHT.ljust(width)
        )

    def format_bounding_box(self, start: datetime, end: datetime) -> str:
        """Temporal window as two YYMMDDHHMM stamps followed by the 'Zeit' trailer."""
        return (
            self.date_utils.format_timestamp(start)
            + self.date_utils.format_timestamp(end)
            + constants.BOUNDING_BOX_TRAILER.ljust(constants.BOUNDING_BOX_TRAILER_WIDTH)
        )
