"""
Tests for the JSON observation document reader.
"""

import pytest

from conftest import TIMESTAMP_0, TIMESTAMP_1
from src.uvf_encoder.core import constants
from src.uvf_encoder.models import (
    ArrayBlockValue,
    CountValue,
    FieldType,
    Point,
    QuantityValue,
    SingleObservationValue,
    TimeInstant,
    TimePeriod,
    TimeValueSeries,
)
from src.uvf_encoder.reader import ObservationReader


class TestObservationReader:
    """Test cases for ObservationReader."""

    @pytest.fixture
    def reader(self):
        """Create reader instance."""
        return ObservationReader()

    def test_read_fixture(self, reader, fixtures_dir):
        """Test reading the sample document."""
        collection = reader.read(str(fixtures_dir / "observations.json"))

        assert len(collection.observations) == 2
        assert collection.phenomenon_time is None

        first = collection.observations[0]
        assert first.constellation.observation_type == constants.OBS_TYPE_MEASUREMENT
        assert first.constellation.feature_of_interest.name == "Pegel Muenster"
        assert first.constellation.feature_of_interest.geometry == Point(51.9350382, 7.6521225)
        assert isinstance(first.value, TimeValueSeries)
        assert first.value.pairs[0].time == TimeInstant(TIMESTAMP_0)
        assert first.value.pairs[1].time == TimePeriod(TIMESTAMP_0, TIMESTAMP_1)
        assert first.value.pairs[1].value is None

        second = collection.observations[1]
        assert isinstance(second.value, ArrayBlockValue)
        assert [f.type for f in second.value.fields] == [FieldType.TIME, FieldType.QUANTITY]
        assert second.value.rows == [
            ["1970-01-02T12:00:00+00:00", "42.5"],
            ["1970-01-03T12:00:00+00:00", None],
        ]

    def test_single_results(self, reader):
        """Test quantity, count and no data single results."""
        def observation(result):
            return {
                "observableProperty": {"identifier": "op"},
                "featureOfInterest": {"identifier": "foi"},
                "result": result,
            }

        collection = reader.parse({
            "phenomenonTime": {"start": "1969-12-31T12:00:00Z", "end": "1970-01-01T12:00:00Z"},
            "observations": [
                observation({"type": "single", "phenomenonTime": "1970-01-01T12:00:00Z",
                             "value": 52, "unit": "m"}),
                observation({"type": "single", "phenomenonTime": "1970-01-01T12:00:00Z",
                             "value": 3, "valueType": "count"}),
                observation({"type": "single", "phenomenonTime": "1970-01-01T12:00:00Z",
                             "value": None}),
            ],
        })

        assert collection.phenomenon_time == TimePeriod(TIMESTAMP_0, TIMESTAMP_1)
        values = [o.value for o in collection.observations]
        assert values[0] == SingleObservationValue(TimeInstant(TIMESTAMP_1), QuantityValue(52.0, "m"))
        assert values[1].value == CountValue(3)
        assert values[2].value is None
        assert collection.observations[0].constellation.feature_of_interest.geometry is None

    def test_missing_key(self, reader):
        """Test missing required keys are reported."""
        with pytest.raises(ValueError, match="Observation 0: missing required key"):
            reader.parse({"observations": [{"featureOfInterest": {"identifier": "foi"}}]})

    def test_unknown_result_type(self, reader):
        """Test unknown result types are rejected."""
        with pytest.raises(ValueError, match="Unsupported result type"):
            reader.parse({"observations": [{
                "observableProperty": {"identifier": "op"},
                "featureOfInterest": {"identifier": "foi"},
                "result": {"type": "coverage"},
            }]})

    def test_invalid_time(self, reader):
        """Test malformed times are rejected."""
        with pytest.raises(ValueError, match="Invalid time"):
            reader.parse_time(12)

    def test_missing_file(self, reader, tmp_path):
        """Test missing documents."""
        with pytest.raises(FileNotFoundError):
            reader.read(str(tmp_path / "missing.json"))

    def test_invalid_json(self, reader, tmp_path):
        """Test documents that are not JSON."""
        document = tmp_path / "broken.json"
        document.write_text("{not json")

        with pytest.raises(ValueError, match="Invalid JSON"):
            reader.read(str(document))

    def test_result_must_be_object(self, reader):
        """Test results that are not JSON objects are rejected."""
        with pytest.raises(ValueError, match="Result must be a JSON object"):
            reader.parse({"observations": [{
                "observableProperty": {"identifier": "op"},
                "featureOfInterest": {"identifier": "foi"},
                "result": "52.0",
            }]})
