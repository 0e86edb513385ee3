"""
Core data types shared by the camera and distortion models.

This module defines the camera identifier and the exception hierarchy
used throughout the vision-camera library.
"""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from typing import Optional


# Number of hex digits in the textual form of a CameraId (128 bits).
CAMERA_ID_HEX_LENGTH = 32

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class CameraId:
    """128-bit camera identifier.

    The all-zero value is reserved for "unset"; such an id is not valid
    and is never written out by the encoders.

    Example:
        >>> cid = CameraId.from_hex_string("0123456789abcdef0123456789abcdef")
        >>> cid.hex_string()
        '0123456789abcdef0123456789abcdef'
    """
    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value < (1 << 128):
            raise ValueError(f"CameraId must fit in 128 bits, got {self.value}")

    @classmethod
    def from_hex_string(cls, text: str) -> Optional[CameraId]:
        """Parse an id from its hex representation.

        Args:
            text: Exactly 32 hexadecimal digits (case-insensitive).

        Returns:
            The parsed id, or None if the string is malformed.
        """
        if not isinstance(text, str) or len(text) != CAMERA_ID_HEX_LENGTH:
            return None
        if not all(c in _HEX_DIGITS for c in text):
            return None
        return cls(int(text, 16))

    @classmethod
    def random(cls) -> CameraId:
        """Generate a new random (valid) id."""
        value = 0
        while value == 0:
            value = secrets.randbits(128)
        return cls(value)

    def is_valid(self) -> bool:
        """Check if the id has been set."""
        return self.value != 0

    def hex_string(self) -> str:
        """Lowercase, zero-padded hex representation."""
        return f"{self.value:0{CAMERA_ID_HEX_LENGTH}x}"

    def __str__(self) -> str:
        return self.hex_string()


# Custom exceptions
class CameraModelError(Exception):
    """Base exception for camera model errors."""
    pass


class InvalidParameterError(CameraModelError):
    """Raised when invalid parameters are provided."""
    pass


class UnknownModelError(CameraModelError):
    """Raised when a camera or distortion type has no serialization tag."""
    pass


class FileFormatError(CameraModelError):
    """Raised when file format is invalid or unsupported."""
    pass
