"""
Observation document reader.

Parses JSON observation documents into the models the encoder consumes.

Expected document format:
{
    "phenomenonTime": {"start": "...", "end": "..."},            (optional)
    "observations": [
        {
            "procedure": "...",
            "observationType": "http://www.opengis.net/def/observationType/OGC-OM/2.0/OM_Measurement",
            "observableProperty": {"identifier": "...", "unit": "..."},
            "featureOfInterest": {
                "identifier": "...",
                "name": "...",
                "geometry": {"type": "Point", "coordinates": [x, y], "srid": 4326}
            },
            "result": {...}
        }
    ]
}

Result types:
- {"type": "single", "phenomenonTime": <time>, "value": 52.0, "valueType": "quantity"|"count", "unit": "..."}
- {"type": "timeValuePairs", "unit": "...", "values": [[<time>, 52.0], [<time>, null]]}
- {"type": "dataArray", "fields": [{"name": "...", "type": "Time", "definition": "..."}],
   "encoding": {"tokenSeparator": ";", "blockSeparator": "@", "decimalSeparator": "."},
   "values": "1970-01-01T12:00:00Z;52.0@..."}

A <time> is either an ISO 8601 string (instant) or {"start": ..., "end": ...}.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .core import constants
from .core.date_utils import DateUtils
from .models import (
    ArrayBlockValue,
    CountValue,
    FeatureOfInterest,
    Field,
    FieldType,
    ObservableProperty,
    Observation,
    ObservationCollection,
    ObservationConstellation,
    ObservationValue,
    Point,
    QuantityValue,
    SingleObservationValue,
    TextEncoding,
    Time,
    TimeInstant,
    TimePeriod,
    TimeValuePair,
    TimeValueSeries,
)


class ObservationReader:
    """Read observation collections from JSON documents."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize observation reader.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def read(self, path: str) -> ObservationCollection:
        """
        Read an observation document from a file.

        Args:
            path: Path to JSON document

        Returns:
            Observation collection

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is malformed
        """
        document_path = Path(path)
        if not document_path.exists():
            raise FileNotFoundError(f"Observation document not found: {path}")

        with open(document_path, "r", encoding="utf-8") as f:
            try:
                document = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON in {path}: {e}") from e

        collection = self.parse(document)
        self.logger.info(f"Read {len(collection.observations)} observation(s) from {path}")
        return collection

    def parse(self, document: Dict[str, Any]) -> ObservationCollection:
        """
        Parse an observation document.

        Args:
            document: Decoded JSON document

        Returns:
            Observation collection

        Raises:
            ValueError: If the document is malformed
        """
        if not isinstance(document, dict):
            raise ValueError("Observation document must be a JSON object")

        observations = [
            self.parse_observation(item, index)
            for index, item in enumerate(document.get("observations", []))
        ]

        phenomenon_time = None
        if document.get("phenomenonTime") is not None:
            phenomenon_time = self.parse_time(document["phenomenonTime"])

        return ObservationCollection(observations=observations, phenomenon_time=phenomenon_time)

    def parse_observation(self, item: Dict[str, Any], index: int = 0) -> Observation:
        """Parse one observation entry."""
        try:
            prop = item["observableProperty"]
            foi = item["featureOfInterest"]
            constellation = ObservationConstellation(
                procedure=item.get("procedure", ""),
                observable_property=ObservableProperty(
                    identifier=prop["identifier"],
                    unit=prop.get("unit"),
                    description=prop.get("description"),
                ),
                feature_of_interest=FeatureOfInterest(
                    identifier=foi["identifier"],
                    name=foi.get("name"),
                    geometry=self.parse_geometry(foi.get("geometry")),
                ),
                observation_type=item.get("observationType", constants.OBS_TYPE_MEASUREMENT),
            )
            value = self.parse_result(item["result"])
        except KeyError as e:
            raise ValueError(f"Observation {index}: missing required key {e}") from e

        return Observation(constellation=constellation, value=value)

    @staticmethod
    def parse_time(value: Any) -> Time:
        """Parse an instant string or a {"start", "end"} period."""
        if isinstance(value, str):
            return TimeInstant(DateUtils.parse_datetime(value))
        if isinstance(value, dict) and "start" in value and "end" in value:
            return TimePeriod(
                start=DateUtils.parse_datetime(value["start"]),
                end=DateUtils.parse_datetime(value["end"]),
            )
        raise ValueError(f"Invalid time: {value!r}")

    @staticmethod
    def parse_geometry(geometry: Optional[Dict[str, Any]]) -> Optional[Point]:
        """Parse a point geometry; other geometry types are ignored."""
        if not geometry:
            return None
        if geometry.get("type", "Point") != "Point":
            return None
        coordinates = geometry.get("coordinates") or []
        if len(coordinates) < 2:
            raise ValueError(f"Invalid point coordinates: {coordinates!r}")
        return Point(
            x=float(coordinates[0]),
            y=float(coordinates[1]),
            srid=int(geometry.get("srid", 4326)),
        )

    def parse_result(self, result: Dict[str, Any]) -> ObservationValue:
        """Parse the result of an observation."""
        if not isinstance(result, dict):
            raise ValueError(f"Result must be a JSON object, got {type(result).__name__}")
        result_type = result.get("type")

        if result_type == "single":
            scalar = None
            if result.get("value") is not None:
                if result.get("valueType", "quantity") == "count":
                    scalar = CountValue(int(result["value"]))
                else:
                    scalar = QuantityValue(float(result["value"]), result.get("unit"))
            return SingleObservationValue(
                phenomenon_time=self.parse_time(result["phenomenonTime"]),
                value=scalar,
            )

        if result_type == "timeValuePairs":
            pairs = []
            for entry in result.get("values", []):
                time, value = entry[0], entry[1] if len(entry) > 1 else None
                pairs.append(TimeValuePair(
                    time=self.parse_time(time),
                    value=None if value is None else float(value),
                ))
            return TimeValueSeries(pairs=pairs, unit=result.get("unit"))

        if result_type == "dataArray":
            return ArrayBlockValue.from_text(
                fields=self.parse_fields(result.get("fields", [])),
                text=result.get("values", ""),
                encoding=self.parse_encoding(result.get("encoding", {})),
            )

        raise ValueError(f"Unsupported result type: {result_type!r}")

    @staticmethod
    def parse_fields(fields: List[Dict[str, Any]]) -> List[Field]:
        """Parse a data array field schema."""
        parsed = []
        for item in fields:
            try:
                field_type = FieldType(item["type"])
            except ValueError:
                raise ValueError(f"Unknown field type: {item['type']!r}")
            parsed.append(Field(name=item.get("name", ""), type=field_type, definition=item.get("definition")))
        return parsed

    @staticmethod
    def parse_encoding(encoding: Dict[str, Any]) -> TextEncoding:
        """Parse data array text encoding separators."""
        defaults = TextEncoding()
        return TextEncoding(
            token_separator=encoding.get("tokenSeparator", defaults.token_separator),
            block_separator=encoding.get("blockSeparator", defaults.block_separator),
            decimal_separator=encoding.get("decimalSeparator", defaults.decimal_separator),
        )
