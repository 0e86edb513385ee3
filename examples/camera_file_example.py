"""
Camera file example

Builds a stereo rig description, writes it in every supported format and
reads it back. Also shows how to inspect a decode failure.

Usage:
    python examples/camera_file_example.py [output_dir]
"""

import sys
from pathlib import Path

from vision_camera import (
    CameraId,
    EquidistantDistortion,
    PinholeCamera,
    RadTanDistortion,
    decode,
)
from vision_camera.io import CameraFile, CameraFileFormat
from vision_camera.utils import setup_logging


def build_rig():
    left = PinholeCamera(
        [458.654, 457.296, 367.215, 248.375], 752, 480,
        RadTanDistortion([-0.28340811, 0.07395907, 0.00019359, 1.76187114e-05]),
    )
    left.set_id(CameraId.random())
    left.set_label("cam0")

    right = PinholeCamera(
        [457.587, 456.134, 379.999, 255.238], 752, 480,
        EquidistantDistortion([-0.01, 0.002, -0.0003, 0.0001]),
    )
    right.set_id(CameraId.random())
    right.set_label("cam1")
    return [left, right]


def main():
    setup_logging(verbosity=1)
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("cameras")

    rig = build_rig()
    for format in CameraFileFormat:
        path = CameraFile.save_all(output_dir / "rig", rig, format=format)
        restored = CameraFile.load_all(path)
        print(f"{format.value:5s} {path}: round trip {'ok' if restored == rig else 'FAILED'}")

    # Decode failures come back as a result, not an exception
    camera, status = decode({"type": "pinhole", "image_width": 752,
                             "image_height": 480, "intrinsics": [458.6, 457.3, 367.2]})
    print(f"camera={camera}, status={status.value}")


if __name__ == "__main__":
    main()
