"""
Observation value models.

Contains the closed set of value representations an observation can carry.
Only some of them can be written as UVF; the normalizer decides.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Union

from .time import Time


@dataclass(frozen=True)
class QuantityValue:
    """Numeric measurement."""

    value: Optional[float]
    unit: Optional[str] = None


@dataclass(frozen=True)
class CountValue:
    """Integer count."""

    value: Optional[int]


ScalarValue = Union[QuantityValue, CountValue]


@dataclass(frozen=True)
class SingleObservationValue:
    """One phenomenon time and one scalar; value None means no data."""

    phenomenon_time: Time
    value: Optional[ScalarValue] = None


@dataclass(frozen=True)
class TimeValuePair:
    """Time series entry; value None means no data."""

    time: Time
    value: Optional[float] = None


@dataclass(frozen=True)
class TimeValueSeries:
    """Ordered list of time/value pairs sharing one unit."""

    pairs: List[TimeValuePair] = field(default_factory=list)
    unit: Optional[str] = None


@dataclass(frozen=True)
class TimeLocationValueTriple:
    """Time series entry with a sampling location."""

    time: Time
    location: Any = None
    value: Optional[float] = None


@dataclass(frozen=True)
class TimeLocationValueSeries:
    """Ordered list of time/location/value triples."""

    triples: List[TimeLocationValueTriple] = field(default_factory=list)
    unit: Optional[str] = None


class FieldType(Enum):
    """Type tag of a data array field."""

    TIME = "Time"
    QUANTITY = "Quantity"
    COUNT = "Count"
    BOOLEAN = "Boolean"
    TEXT = "Text"
    CATEGORY = "Category"


NUMERIC_FIELD_TYPES = (FieldType.QUANTITY, FieldType.COUNT)


@dataclass(frozen=True)
class Field:
    """Data array field descriptor."""

    name: str
    type: FieldType
    definition: Optional[str] = None


@dataclass(frozen=True)
class TextEncoding:
    """Separators of a text encoded data array."""

    token_separator: str = ","
    block_separator: str = "@@"
    decimal_separator: str = "."


@dataclass(frozen=True)
class ArrayBlockValue:
    """
    Data array: field schema plus tokenized rows.

    Each row holds one token per field, in field order. A missing or None
    token means no data.
    """

    fields: List[Field]
    rows: List[List[Optional[str]]] = field(default_factory=list)
    decimal_separator: str = "."

    @classmethod
    def from_text(
        cls,
        fields: List[Field],
        text: str,
        encoding: Optional[TextEncoding] = None
    ) -> "ArrayBlockValue":
        """
        Build a data array from its text encoding.

        Args:
            fields: Field schema
            text: Blocks joined by the block separator, tokens joined by the
                  token separator
            encoding: Separators; defaults to TextEncoding()

        Returns:
            ArrayBlockValue with one row per non-empty block
        """
        encoding = encoding or TextEncoding()
        rows = []
        for block in text.split(encoding.block_separator):
            if not block.strip():
                continue
            rows.append([token or None for token in block.split(encoding.token_separator)])
        return cls(fields=fields, rows=rows, decimal_separator=encoding.decimal_separator)


class StreamingValue:
    """Lazily produced observation values, e.g. straight from a database cursor."""

    def __init__(self, source: Optional[Callable[[], Iterable[Any]]] = None):
        self.source = source

    def __iter__(self):
        if self.source is None:
            return iter(())
        return iter(self.source())


ObservationValue = Union[
    SingleObservationValue,
    TimeValueSeries,
    TimeLocationValueSeries,
    ArrayBlockValue,
    StreamingValue,
]
