"""
Observation data models.

Contains DTOs for observed properties, features of interest and the
observation collection handed to the encoder.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .time import Time
from .values import ObservationValue


@dataclass(frozen=True)
class ObservableProperty:
    """Observed property (phenomenon)."""

    identifier: str
    unit: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Point:
    """2-D point geometry; x is written first."""

    x: float
    y: float
    srid: int = 4326


@dataclass(frozen=True)
class FeatureOfInterest:
    """Sampled feature (measurement station)."""

    identifier: str
    name: Optional[str] = None
    geometry: Optional[Point] = None


@dataclass(frozen=True)
class ObservationConstellation:
    """What an observation measures, where, and how."""

    procedure: str
    observable_property: ObservableProperty
    feature_of_interest: FeatureOfInterest
    observation_type: str


@dataclass(frozen=True)
class Observation:
    """Observation constellation and value."""

    constellation: ObservationConstellation
    value: ObservationValue


@dataclass(frozen=True)
class ObservationCollection:
    """
    Ordered observations to encode.

    phenomenon_time is an optional precomputed global bound; when present it
    replaces the bounds derived from the observation values.
    """

    observations: List[Observation] = field(default_factory=list)
    phenomenon_time: Optional[Time] = None
