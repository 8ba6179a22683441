"""
UVF encoder.

Turns an observation collection into a UVF file: gates the observation
types, normalizes the values, then writes header and data lines.
"""

import logging
import re
from datetime import datetime
from typing import Any, List, Optional, Tuple

from .core import constants
from .core.config import Config
from .core.date_utils import DateUtils
from .core.exceptions import NoApplicableCodeError, UnsupportedEncoderInputError, qualified_name
from .logger import LoggerContext
from .models.attachment import BinaryAttachment
from .models.observation import Observation, ObservationCollection
from .models.time import time_bounds
from .models.values import QuantityValue, SingleObservationValue, TimeValueSeries
from .processing import HeaderFormatter, RecordFormatter, Sample, ValueNormalizer


class UVFEncoder:
    """Encode observation collections as UVF files."""

    def __init__(self, config: Optional[Config] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize encoder.

        Args:
            config: Encoder configuration; built-in defaults apply when None,
                    without reading files or environment variables
            logger: Logger instance
        """
        self.config = config or Config.defaults()
        self.logger = logger or logging.getLogger(__name__)
        self.date_utils = DateUtils(self.config.time_zone, logger=self.logger)
        self.normalizer = ValueNormalizer(self.logger)
        self.header_formatter = HeaderFormatter(self.date_utils, self.logger)
        self.record_formatter = RecordFormatter(self.date_utils, self.logger)

    def encode(self, response: Any) -> BinaryAttachment:
        """
        Encode an observation collection.

        Args:
            response: Observation collection

        Returns:
            Binary attachment; an empty collection yields an attachment of
            size -1 without content

        Raises:
            UnsupportedEncoderInputError: If response is not an ObservationCollection
            NoApplicableCodeError: If an observation cannot be written as UVF
        """
        if not isinstance(response, ObservationCollection):
            raise UnsupportedEncoderInputError(self, response)

        observations = response.observations
        if not observations:
            self.logger.warning("Observation collection is empty, returning empty UVF file")
            return BinaryAttachment.empty()

        with LoggerContext(self.logger, f"UVF encoding of {len(observations)} observation(s)"):
            for observation in observations:
                self.check_observation_type(observation.constellation.observation_type)

            series = [self._normalize(observation) for observation in observations]
            samples = [sample for observation_samples in series for sample in observation_samples]
            if not samples:
                self.logger.warning("Observations carry no values, returning empty UVF file")
                return BinaryAttachment.empty()

            start, end = self.resolve_time_bounds(response, series)
            lines = self._format_header(observations[0], start, end)
            lines.extend(self.record_formatter.format_record(sample) for sample in samples)

            separator = self.config.line_separator
            text = "".join(line + separator for line in lines)
            try:
                content = text.encode(self.config.charset)
            except UnicodeEncodeError as e:
                raise NoApplicableCodeError(
                    f"UVF content can not be encoded as {self.config.charset}: {e}"
                ) from e
            self.logger.debug(f"Encoded {len(samples)} record(s), {len(content)} bytes")

        return BinaryAttachment(
            content=content,
            size=len(content),
            filename=self.build_filename(observations[0]),
        )

    def check_observation_type(self, observation_type: str) -> None:
        """
        Reject observation types UVF cannot carry.

        Raises:
            NoApplicableCodeError: If the type is neither measurement nor count
        """
        if observation_type not in constants.SUPPORTED_OBSERVATION_TYPES:
            raise NoApplicableCodeError(
                f"Observation Type '{observation_type}' not supported by this encoder "
                f"'{qualified_name(self)}'."
            )

    def _normalize(self, observation: Observation) -> List[Sample]:
        return self.normalizer.normalize(
            observation.value,
            observation.constellation.observable_property.identifier
        )

    @staticmethod
    def resolve_time_bounds(
        response: ObservationCollection,
        series: List[List[Sample]]
    ) -> Tuple[datetime, datetime]:
        """
        Temporal window of the file.

        The collection's precomputed phenomenon time wins; otherwise the
        earliest first and the latest last sample time of all series.
        """
        if response.phenomenon_time is not None:
            return time_bounds(response.phenomenon_time)

        non_empty = [samples for samples in series if samples]
        start = min(DateUtils.to_utc(samples[0].timestamp) for samples in non_empty)
        end = max(DateUtils.to_utc(samples[-1].timestamp) for samples in non_empty)
        return start, end

    @staticmethod
    def resolve_unit(observation: Observation) -> Optional[str]:
        """Unit of a measurement: the observed property's, else the value's own."""
        constellation = observation.constellation
        if constellation.observation_type == constants.OBS_TYPE_COUNT_OBSERVATION:
            return None
        if constellation.observable_property.unit:
            return constellation.observable_property.unit

        value = observation.value
        if isinstance(value, SingleObservationValue) and isinstance(value.value, QuantityValue):
            return value.value.unit
        if isinstance(value, TimeValueSeries):
            return value.unit
        return None

    def _format_header(self, observation: Observation, start: datetime, end: datetime) -> List[str]:
        constellation = observation.constellation
        feature = constellation.feature_of_interest
        return self.header_formatter.format_header(
            observed_property=constellation.observable_property.identifier,
            unit=self.resolve_unit(observation),
            feature_identifier=feature.identifier,
            start=start,
            end=end,
            feature_name=feature.name,
            geometry=feature.geometry,
        )

    @staticmethod
    def build_filename(observation: Observation) -> str:
        """File name from procedure, observed property and feature, e.g. 'p_op_foi.uvf'."""
        constellation = observation.constellation
        parts = [
            constellation.procedure,
            constellation.observable_property.identifier,
            constellation.feature_of_interest.identifier,
        ]
        name = "_".join(re.sub(r"[^A-Za-z0-9.-]+", "-", part).strip("-") for part in parts if part)
        return (name or "observations") + constants.FILE_EXTENSION
