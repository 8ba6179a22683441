"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.uvf_encoder.core import constants  # noqa: E402
from src.uvf_encoder.models import (  # noqa: E402
    FeatureOfInterest,
    ObservableProperty,
    Observation,
    ObservationCollection,
    ObservationConstellation,
    Point,
    QuantityValue,
    SingleObservationValue,
    TimeInstant,
)

OBS_PROP_IDENTIFIER = "test-obs-prop-identifier"
FOI_IDENTIFIER = "test-foi-identifier"
UNIT = "test-unit"
PROCEDURE = "test-procedure"

# 1969-12-31T12:00Z and 1970-01-01T12:00Z
TIMESTAMP_0 = datetime(1969, 12, 31, 12, 0, tzinfo=timezone.utc)
TIMESTAMP_1 = datetime(1970, 1, 1, 12, 0, tzinfo=timezone.utc)


def build_collection(
    value=None,
    observation_type=constants.OBS_TYPE_MEASUREMENT,
    unit=UNIT,
    feature_name=None,
    geometry=Point(51.9350382, 7.6521225),
    phenomenon_time=None,
    observed_property=OBS_PROP_IDENTIFIER,
    feature_identifier=FOI_IDENTIFIER,
):
    """Collection with one observation, by default a 52.0 measurement at TIMESTAMP_1."""
    if value is None:
        value = SingleObservationValue(TimeInstant(TIMESTAMP_1), QuantityValue(52.0, "test-uom"))
    constellation = ObservationConstellation(
        procedure=PROCEDURE,
        observable_property=ObservableProperty(observed_property, unit, "test-obs-prop-description"),
        feature_of_interest=FeatureOfInterest(feature_identifier, feature_name, geometry),
        observation_type=observation_type,
    )
    return ObservationCollection(
        observations=[Observation(constellation, value)],
        phenomenon_time=phenomenon_time,
    )


@pytest.fixture
def collection_factory():
    """Factory building single-observation collections."""
    return build_collection


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
