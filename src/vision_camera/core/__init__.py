"""Camera and distortion models - no I/O dependencies."""

from vision_camera.core.types import (
    CameraId,
    CameraModelError,
    InvalidParameterError,
    UnknownModelError,
    FileFormatError,
)
from vision_camera.core.distortion import (
    Distortion,
    DistortionType,
    NoDistortion,
    EquidistantDistortion,
    FisheyeDistortion,
    RadTanDistortion,
)
from vision_camera.core.camera import (
    Camera,
    CameraType,
    PinholeCamera,
    UnifiedProjectionCamera,
)
from vision_camera.core.channels import ChannelDefinition, get_channel

__all__ = [
    # Types
    "CameraId",
    "CameraModelError",
    "InvalidParameterError",
    "UnknownModelError",
    "FileFormatError",
    # Distortion
    "Distortion",
    "DistortionType",
    "NoDistortion",
    "EquidistantDistortion",
    "FisheyeDistortion",
    "RadTanDistortion",
    # Camera
    "Camera",
    "CameraType",
    "PinholeCamera",
    "UnifiedProjectionCamera",
    # Channels
    "ChannelDefinition",
    "get_channel",
]
