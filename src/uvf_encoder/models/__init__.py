"""
Data models for the UVF encoder.

Contains DTOs for time primitives, observation values, observations and the
encoded attachment.
"""

from .time import TimeInstant, TimePeriod, Time, phenomenon_instant, time_bounds
from .values import (
    QuantityValue,
    CountValue,
    SingleObservationValue,
    TimeValuePair,
    TimeValueSeries,
    TimeLocationValueTriple,
    TimeLocationValueSeries,
    FieldType,
    Field,
    TextEncoding,
    ArrayBlockValue,
    StreamingValue,
    ObservationValue,
)
from .observation import (
    ObservableProperty,
    Point,
    FeatureOfInterest,
    ObservationConstellation,
    Observation,
    ObservationCollection,
)
from .attachment import BinaryAttachment

__all__ = [
    "TimeInstant",
    "TimePeriod",
    "Time",
    "phenomenon_instant",
    "time_bounds",
    "QuantityValue",
    "CountValue",
    "SingleObservationValue",
    "TimeValuePair",
    "TimeValueSeries",
    "TimeLocationValueTriple",
    "TimeLocationValueSeries",
    "FieldType",
    "Field",
    "TextEncoding",
    "ArrayBlockValue",
    "StreamingValue",
    "ObservationValue",
    "ObservableProperty",
    "Point",
    "FeatureOfInterest",
    "ObservationConstellation",
    "Observation",
    "ObservationCollection",
    "BinaryAttachment",
]
