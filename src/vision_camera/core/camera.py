"""
Camera projection models.

A camera holds its intrinsics vector, the image size, an optional lens
distortion (owned by the camera) and identity metadata: id, label and
rolling-shutter line delay.
"""

from __future__ import annotations

from abc import ABC
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from vision_camera.core.distortion import Distortion, DistortionType
from vision_camera.core.types import CameraId

_UINT64_LIMIT = 1 << 64


class CameraType(Enum):
    """Supported projection models."""
    PINHOLE = "pinhole"
    UNIFIED_PROJECTION = "unified-projection"


class Camera(ABC):
    """Base class for camera projection models.

    The intrinsics length is not checked here; callers building a camera
    from untrusted data (the decoders) compare it with
    `parameter_count()` first.

    Attributes:
        DEFAULT_LINE_DELAY_NANOSECONDS: Line delay used until one is set.
    """

    TYPE: CameraType
    PARAMETER_COUNT: int
    DEFAULT_LINE_DELAY_NANOSECONDS = 0

    def __init__(
        self,
        intrinsics: ArrayLike,
        image_width: int,
        image_height: int,
        distortion: Optional[Distortion] = None,
    ) -> None:
        if int(image_width) <= 0:
            raise ValueError(f"image_width must be > 0, got {image_width}")
        if int(image_height) <= 0:
            raise ValueError(f"image_height must be > 0, got {image_height}")
        if distortion is not None:
            if distortion._owner is not None:
                raise ValueError("distortion is already attached to another camera")
            distortion._owner = self

        self._intrinsics = np.array(intrinsics, dtype=np.float64).ravel()
        self._image_width = int(image_width)
        self._image_height = int(image_height)
        self._distortion = distortion
        self._id = CameraId()
        self._label = ""
        self._line_delay_nanoseconds = self.DEFAULT_LINE_DELAY_NANOSECONDS

    @classmethod
    def parameter_count(cls) -> int:
        """Number of intrinsic parameters of this model."""
        return cls.PARAMETER_COUNT

    @property
    def type(self) -> CameraType:
        return self.TYPE

    @property
    def parameters(self) -> NDArray[np.float64]:
        """Copy of the intrinsics vector."""
        return self._intrinsics.copy()

    @property
    def image_width(self) -> int:
        return self._image_width

    @property
    def image_height(self) -> int:
        return self._image_height

    @property
    def distortion(self) -> Optional[Distortion]:
        return self._distortion

    @property
    def id(self) -> CameraId:
        return self._id

    def set_id(self, camera_id: CameraId) -> None:
        self._id = camera_id

    @property
    def label(self) -> str:
        return self._label

    def set_label(self, label: str) -> None:
        self._label = label

    @property
    def line_delay_nanoseconds(self) -> int:
        """Rolling shutter delay between two image rows."""
        return self._line_delay_nanoseconds

    def set_line_delay_nanoseconds(self, line_delay: int) -> None:
        line_delay = int(line_delay)
        if not 0 <= line_delay < _UINT64_LIMIT:
            raise ValueError(f"line delay must be an unsigned 64-bit value, got {line_delay}")
        self._line_delay_nanoseconds = line_delay

    def has_distortion(self) -> bool:
        """True if a distortion other than the identity is attached."""
        return (
            self._distortion is not None
            and self._distortion.type is not DistortionType.NO_DISTORTION
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Camera):
            return NotImplemented
        if self.has_distortion() or other.has_distortion():
            same_distortion = self._distortion == other._distortion
        else:
            same_distortion = True
        return (
            self.TYPE is other.TYPE
            and np.array_equal(self._intrinsics, other._intrinsics)
            and self._image_width == other._image_width
            and self._image_height == other._image_height
            and self._id == other._id
            and self._label == other._label
            and self._line_delay_nanoseconds == other._line_delay_nanoseconds
            and same_distortion
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(intrinsics={self._intrinsics.tolist()}, "
            f"size={self._image_width}x{self._image_height}, "
            f"distortion={self._distortion!r}, label={self._label!r})"
        )


class PinholeCamera(Camera):
    """Pinhole projection model.

    Intrinsics: [fu, fv, cu, cv].
    """

    TYPE = CameraType.PINHOLE
    PARAMETER_COUNT = 4

    @property
    def fu(self) -> float:
        """Focal length along u (pixels)."""
        return float(self._intrinsics[0])

    @property
    def fv(self) -> float:
        """Focal length along v (pixels)."""
        return float(self._intrinsics[1])

    @property
    def cu(self) -> float:
        """Principal point u coordinate (pixels)."""
        return float(self._intrinsics[2])

    @property
    def cv(self) -> float:
        """Principal point v coordinate (pixels)."""
        return float(self._intrinsics[3])


class UnifiedProjectionCamera(Camera):
    """Unified projection model (pinhole with a mirror parameter xi).

    Intrinsics: [xi, fu, fv, cu, cv].
    """

    TYPE = CameraType.UNIFIED_PROJECTION
    PARAMETER_COUNT = 5

    @property
    def xi(self) -> float:
        """Mirror parameter."""
        return float(self._intrinsics[0])

    @property
    def fu(self) -> float:
        return float(self._intrinsics[1])

    @property
    def fv(self) -> float:
        return float(self._intrinsics[2])

    @property
    def cu(self) -> float:
        return float(self._intrinsics[3])

    @property
    def cv(self) -> float:
        return float(self._intrinsics[4])
