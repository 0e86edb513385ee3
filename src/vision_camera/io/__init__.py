"""Node tree codec and camera file I/O."""

from vision_camera.io.codec import DecodeResult, DecodeStatus, decode, encode
from vision_camera.io.camera_file import CameraFile, CameraFileFormat

__all__ = [
    "decode",
    "encode",
    "DecodeResult",
    "DecodeStatus",
    "CameraFile",
    "CameraFileFormat",
]
