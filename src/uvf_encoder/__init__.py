"""
UVF Time-Series Encoder

This package encodes hydrological sensor observations into the legacy UVF
fixed-column text exchange format.
"""

__version__ = "0.1.0"
__description__ = "UVF encoder for hydrological sensor observations"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "UVFEncoder":
        from .encoder import UVFEncoder
        return UVFEncoder
    if name == "UVFEncoderApp":
        from .main import UVFEncoderApp
        return UVFEncoderApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "UVFEncoder",
    "UVFEncoderApp",
]
