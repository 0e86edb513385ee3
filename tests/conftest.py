import pytest

from vision_camera.core.camera import PinholeCamera, UnifiedProjectionCamera
from vision_camera.core.distortion import EquidistantDistortion, RadTanDistortion
from vision_camera.core.types import CameraId

CAMERA_ID_HEX = "0123456789abcdef0123456789abcdef"


@pytest.fixture
def pinhole_node():
    """Minimal pinhole camera node: required fields only."""
    return {
        "type": "pinhole",
        "image_width": 640,
        "image_height": 480,
        "intrinsics": [460.0, 458.0, 320.0, 240.0],
    }


@pytest.fixture
def full_node(pinhole_node):
    node = dict(pinhole_node)
    node.update(
        {
            "label": "cam0",
            "id": CAMERA_ID_HEX,
            "line-delay-nanoseconds": 1500,
            "distortion": {
                "type": "radial-tangential",
                "parameters": [-0.28, 0.07, 0.0002, 1.8e-05],
            },
        }
    )
    return node


@pytest.fixture
def pinhole_camera():
    camera = PinholeCamera(
        [460.0, 458.0, 320.0, 240.0],
        640,
        480,
        RadTanDistortion([-0.28, 0.07, 0.0002, 1.8e-05]),
    )
    camera.set_id(CameraId.from_hex_string(CAMERA_ID_HEX))
    camera.set_label("cam0")
    camera.set_line_delay_nanoseconds(1500)
    return camera


@pytest.fixture
def unified_camera():
    camera = UnifiedProjectionCamera(
        [0.9, 750.0, 748.0, 376.0, 240.0],
        752,
        480,
        EquidistantDistortion([0.01, -0.002, 0.0003, -0.0001]),
    )
    camera.set_label("fisheye-left")
    return camera
