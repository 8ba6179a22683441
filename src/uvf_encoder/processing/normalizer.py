"""
Value normalization module.

Flattens every supported observation value representation into an ordered
list of (timestamp, value) samples.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple

from ..core import constants
from ..core.date_utils import DateUtils
from ..core.exceptions import NoApplicableCodeError, qualified_name
from ..models.time import phenomenon_instant
from ..models.values import (
    ArrayBlockValue,
    CountValue,
    Field,
    FieldType,
    NUMERIC_FIELD_TYPES,
    ObservationValue,
    QuantityValue,
    SingleObservationValue,
    StreamingValue,
    TimeLocationValueSeries,
    TimeValueSeries,
)


@dataclass(frozen=True)
class Sample:
    """One body record: phenomenon time and numeric value (None = no data)."""

    timestamp: datetime
    value: Optional[float]


def _unsupported_value(value_type) -> NoApplicableCodeError:
    return NoApplicableCodeError(
        f"Encoding of Observations with values of type '{qualified_name(value_type)}' not supported."
    )


def _as_number(value) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class ValueNormalizer:
    """Turn observation values into flat sample lists."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize value normalizer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def normalize(
        self,
        value: ObservationValue,
        observed_property: Optional[str] = None
    ) -> List[Sample]:
        """
        Normalize one observation value.

        Samples keep the input order; nothing is sorted or deduplicated.

        Args:
            value: Observation value
            observed_property: Observed property identifier, used to pick the
                               value field of a data array

        Returns:
            List of samples

        Raises:
            NoApplicableCodeError: If the value representation is not supported
        """
        # StreamingValue first: subclasses must never reach the other branches
        if isinstance(value, StreamingValue):
            raise NoApplicableCodeError(
                f"Support for '{qualified_name(StreamingValue)}' not yet implemented."
            )
        if isinstance(value, TimeLocationValueSeries):
            raise _unsupported_value(value)
        if isinstance(value, SingleObservationValue):
            return self._normalize_single(value)
        if isinstance(value, TimeValueSeries):
            return self._normalize_time_value_series(value)
        if isinstance(value, ArrayBlockValue):
            return self._normalize_array(value, observed_property)
        raise _unsupported_value(value)

    def _normalize_single(self, value: SingleObservationValue) -> List[Sample]:
        timestamp = phenomenon_instant(value.phenomenon_time)
        scalar = value.value
        if scalar is None:
            return [Sample(timestamp, None)]
        if not isinstance(scalar, (QuantityValue, CountValue)):
            raise _unsupported_value(scalar)
        return [Sample(timestamp, _as_number(scalar.value))]

    def _normalize_time_value_series(self, value: TimeValueSeries) -> List[Sample]:
        return [
            Sample(phenomenon_instant(pair.time), _as_number(pair.value))
            for pair in value.pairs
        ]

    @staticmethod
    def resolve_array_fields(
        fields: List[Field],
        observed_property: Optional[str] = None
    ) -> Tuple[int, int]:
        """
        Find the phenomenon time and value columns of a data array.

        Args:
            fields: Field schema
            observed_property: Observed property identifier

        Returns:
            Tuple of (time_index, value_index)

        Raises:
            NoApplicableCodeError: If a column is missing or the value column
                                   is not numeric
        """
        time_fields = [i for i, f in enumerate(fields) if f.type == FieldType.TIME]
        if not time_fields:
            raise NoApplicableCodeError(
                "Encoding of SweArrayObservations without phenomenon time field not supported."
            )
        time_index = next(
            (i for i in time_fields
             if fields[i].definition == constants.PHENOMENON_TIME_DEFINITION),
            time_fields[0]
        )

        candidates = [i for i, f in enumerate(fields) if f.type != FieldType.TIME]
        if not candidates:
            raise NoApplicableCodeError(
                "Encoding of SweArrayObservations without value field not supported."
            )
        value_index = candidates[0]
        if observed_property:
            value_index = next(
                (i for i in candidates
                 if observed_property in (fields[i].name, fields[i].definition)),
                value_index
            )

        value_type = fields[value_index].type
        if value_type not in NUMERIC_FIELD_TYPES:
            raise NoApplicableCodeError(
                f"Encoding of SweArrayObservations with values of type '{value_type.value}' not supported."
            )
        return time_index, value_index

    def _normalize_array(
        self,
        value: ArrayBlockValue,
        observed_property: Optional[str]
    ) -> List[Sample]:
        time_index, value_index = self.resolve_array_fields(value.fields, observed_property)
        self.logger.debug(
            f"Data array columns: time={value.fields[time_index].name}, "
            f"value={value.fields[value_index].name}, rows={len(value.rows)}"
        )

        samples = []
        for row_number, row in enumerate(value.rows):
            time_token = row[time_index] if time_index < len(row) else None
            value_token = row[value_index] if value_index < len(row) else None

            if not time_token:
                raise NoApplicableCodeError(f"Missing phenomenon time in data array row {row_number}.")
            try:
                timestamp = DateUtils.parse_datetime(time_token)
            except ValueError as e:
                raise NoApplicableCodeError(
                    f"Invalid phenomenon time '{time_token}' in data array row {row_number}."
                ) from e

            if value_token is None or not value_token.strip():
                samples.append(Sample(timestamp, constants.NO_DATA_NUMBER))
                continue
            try:
                number = float(value_token.strip().replace(value.decimal_separator, "."))
            except ValueError as e:
                raise NoApplicableCodeError(
                    f"Invalid value '{value_token}' in data array row {row_number}."
                ) from e
            # NaN is a gap like an empty token
            if math.isnan(number):
                number = constants.NO_DATA_NUMBER
            samples.append(Sample(timestamp, number))

        return samples
