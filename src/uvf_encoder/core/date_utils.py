"""
Date and timezone utilities.

Centralizes parsing of offset date-time strings and the rendering of the
timestamps used in UVF files.
"""

import logging
from datetime import datetime
from typing import Optional

import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, timezone_str: str = "UTC", logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            timezone_str: Timezone UVF timestamps are rendered in
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.timezone = self.parse_timezone(timezone_str)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/Berlin', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @staticmethod
    def parse_datetime(value: str) -> datetime:
        """
        Parse an ISO 8601 date-time string with offset.

        A trailing 'Z' is accepted as UTC. Strings without an offset are
        taken as UTC.

        Args:
            value: Date-time string (e.g., '1970-01-01T12:00:00+00:00')

        Returns:
            Timezone-aware datetime

        Raises:
            ValueError: If the string is not a valid date-time
        """
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return DateUtils.to_utc(datetime.fromisoformat(text))

    def localize(self, dt: datetime) -> datetime:
        """
        Convert a datetime into the rendering timezone.

        Args:
            dt: Datetime object (naive values are taken as UTC)

        Returns:
            Datetime in the configured timezone
        """
        return self.to_utc(dt).astimezone(self.timezone)

    def format_timestamp(self, dt: datetime) -> str:
        """
        Render a datetime as the 10 digit UVF timestamp YYMMDDHHMM.

        Only the year modulo 100 is written; the century lives in the
        header's year columns.

        Args:
            dt: Datetime object

        Returns:
            Timestamp string, e.g. '7001011200'
        """
        local = self.localize(dt)
        return (
            f"{local.year % 100:02d}{local.month:02d}{local.day:02d}"
            f"{local.hour:02d}{local.minute:02d}"
        )

    def format_year(self, dt: datetime) -> str:
        """Render the four digit year of a datetime in the rendering timezone."""
        return f"{self.localize(dt).year:04d}"
