"""
vision-camera: camera projection and lens distortion models

Camera model definitions (pinhole, unified projection) with their lens
distortions, and their serialization to YAML, JSON and HDF5.
"""

__version__ = "1.0.0"

from vision_camera.core.types import CameraId
from vision_camera.core.distortion import (
    DistortionType,
    NoDistortion,
    EquidistantDistortion,
    FisheyeDistortion,
    RadTanDistortion,
)
from vision_camera.core.camera import (
    CameraType,
    PinholeCamera,
    UnifiedProjectionCamera,
)
from vision_camera.io.codec import decode, encode

__all__ = [
    "CameraId",
    "DistortionType",
    "NoDistortion",
    "EquidistantDistortion",
    "FisheyeDistortion",
    "RadTanDistortion",
    "CameraType",
    "PinholeCamera",
    "UnifiedProjectionCamera",
    "decode",
    "encode",
    "__version__",
]
