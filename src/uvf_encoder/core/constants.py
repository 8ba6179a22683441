"""
Constants of the UVF exchange format and the O&M vocabulary it is fed from.

Column widths and header literals follow the layout expected by the legacy
UVF import tools. Changing any of them changes the file format.
"""

# Identifiers are cut to their last MAX_IDENTIFIER_LENGTH characters
MAX_IDENTIFIER_LENGTH = 15

# Header literals
FUNCTION_INTERPRETATION_LINE = "$ib Funktion-Interpretation: Linie"
INDEX_UNIT_TIME_LINE = "$sb Index-Einheit: *** Zeit ***"
MEASUREMENT_IDENTIFIER_PREFIX = "$sb Mess-Groesse: "
MEASUREMENT_UNIT_PREFIX = "$sb Mess-Einheit: "
MEASUREMENT_LOCATION_IDENTIFIER_PREFIX = "$sb Mess-Stellennummer: "
MEASUREMENT_LOCATION_NAME_PREFIX = "$sb Mess-Stellenname: "
TIMESERIES_TYPE_TIME_BASED = "*Z"

# Timeseries identifier line: identifier column, unit column, then "YYYY YYYY"
IDENTIFIER_COLUMN_WIDTH = 15
UNIT_COLUMN_WIDTH = 15

# Location line: station id, x, y, height
COORDINATE_COLUMN_WIDTH = 10
DEFAULT_LOCATION_HEIGHT = "0.000"

# Temporal bounding box trailer
BOUNDING_BOX_TRAILER = "Zeit"
BOUNDING_BOX_TRAILER_WIDTH = 8

# Data lines: YYMMDDHHMM followed by the value column
TIMESTAMP_WIDTH = 10
VALUE_COLUMN_WIDTH = 10
MAX_FRACTION_DIGITS = 7

# "No data" sentinel
NO_DATA_VALUE = "-777"
NO_DATA_NUMBER = -777.0

# Output artifact
CONTENT_TYPE = "text/plain"
FILE_EXTENSION = ".uvf"
EMPTY_ARTIFACT_SIZE = -1

# Line endings supported by the legacy tools
LINE_ENDINGS = {
    "Unix": "\n",
    "Windows": "\r\n",
    "Mac": "\r",
}
DEFAULT_LINE_ENDING = "Unix"
DEFAULT_TIME_ZONE = "UTC"
DEFAULT_CHARSET = "utf-8"

# O&M 2.0 observation types
_OBS_TYPE_PREFIX = "http://www.opengis.net/def/observationType/OGC-OM/2.0/"
OBS_TYPE_MEASUREMENT = _OBS_TYPE_PREFIX + "OM_Measurement"
OBS_TYPE_COUNT_OBSERVATION = _OBS_TYPE_PREFIX + "OM_CountObservation"
OBS_TYPE_CATEGORY_OBSERVATION = _OBS_TYPE_PREFIX + "OM_CategoryObservation"
OBS_TYPE_COMPLEX_OBSERVATION = _OBS_TYPE_PREFIX + "OM_ComplexObservation"
OBS_TYPE_DISCRETE_COVERAGE_OBSERVATION = _OBS_TYPE_PREFIX + "OM_DiscreteCoverageObservation"
OBS_TYPE_GEOMETRY_OBSERVATION = _OBS_TYPE_PREFIX + "OM_GeometryObservation"
OBS_TYPE_OBSERVATION = _OBS_TYPE_PREFIX + "OM_Observation"
OBS_TYPE_POINT_COVERAGE_OBSERVATION = _OBS_TYPE_PREFIX + "OM_PointCoverageObservation"
OBS_TYPE_SWE_ARRAY_OBSERVATION = _OBS_TYPE_PREFIX + "OM_SWEArrayObservation"
OBS_TYPE_TEXT_OBSERVATION = _OBS_TYPE_PREFIX + "OM_TextObservation"
OBS_TYPE_TIME_SERIES_OBSERVATION = _OBS_TYPE_PREFIX + "OM_TimeSeriesObservation"
OBS_TYPE_TRUTH_OBSERVATION = _OBS_TYPE_PREFIX + "OM_TruthObservation"
OBS_TYPE_UNKNOWN = "http://www.opengis.net/def/nil/OGC/0/unknown"

SUPPORTED_OBSERVATION_TYPES = (
    OBS_TYPE_MEASUREMENT,
    OBS_TYPE_COUNT_OBSERVATION,
)

# Definition of the phenomenon time field in SWE data arrays
PHENOMENON_TIME_DEFINITION = "http://www.opengis.net/def/property/OGC/0/PhenomenonTime"
