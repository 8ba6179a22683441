"""
Encoded output model.
"""

from dataclasses import dataclass
from typing import Optional

from ..core import constants


@dataclass(frozen=True)
class BinaryAttachment:
    """Encoded file content ready to be attached to a response."""

    content: bytes
    size: int
    content_type: str = constants.CONTENT_TYPE
    filename: Optional[str] = None

    @classmethod
    def empty(cls) -> "BinaryAttachment":
        """Artifact for a collection without observations."""
        return cls(content=b"", size=constants.EMPTY_ARTIFACT_SIZE)

    @property
    def is_empty(self) -> bool:
        return self.size == constants.EMPTY_ARTIFACT_SIZE
