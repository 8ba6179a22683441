"""
Exceptions raised by the UVF encoder.

Two failure kinds reach the caller: the input is not something the encoder
can take at all, or it is a valid observation shape the UVF format cannot
carry.
"""

from typing import Any


def qualified_name(obj: Any) -> str:
    """
    Return the dotted module path and class name of a class or instance.

    Args:
        obj: Class or instance

    Returns:
        Qualified class name, e.g. 'uvf_encoder.encoder.UVFEncoder'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


class EncoderError(Exception):
    """Base class for all encoding failures."""


class UnsupportedEncoderInputError(EncoderError):
    """The object handed to the encoder is not an observation collection."""

    def __init__(self, encoder: Any, obj: Any):
        self.encoder_name = qualified_name(encoder)
        self.input_type = qualified_name(obj)
        super().__init__(
            f"{self.input_type} can not be encoded by Encoder {self.encoder_name} "
            "because it is not yet implemented!"
        )


class NoApplicableCodeError(EncoderError):
    """A valid observation shape that cannot be written as UVF."""
