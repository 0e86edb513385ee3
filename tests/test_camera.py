import numpy as np
import pytest

from vision_camera.core.camera import CameraType, PinholeCamera, UnifiedProjectionCamera
from vision_camera.core.distortion import NoDistortion, RadTanDistortion
from vision_camera.core.types import CameraId


def test_parameter_counts():
    assert PinholeCamera.parameter_count() == 4
    assert UnifiedProjectionCamera.parameter_count() == 5


def test_pinhole_defaults():
    camera = PinholeCamera([460.0, 458.0, 320.0, 240.0], 640, 480)
    assert camera.type is CameraType.PINHOLE
    assert camera.image_width == 640
    assert camera.image_height == 480
    assert camera.distortion is None
    assert not camera.has_distortion()
    assert not camera.id.is_valid()
    assert camera.label == ""
    assert camera.line_delay_nanoseconds == PinholeCamera.DEFAULT_LINE_DELAY_NANOSECONDS
    assert (camera.fu, camera.fv, camera.cu, camera.cv) == (460.0, 458.0, 320.0, 240.0)


def test_unified_projection_accessors():
    camera = UnifiedProjectionCamera([0.9, 750.0, 748.0, 376.0, 240.0], 752, 480)
    assert camera.type is CameraType.UNIFIED_PROJECTION
    assert camera.xi == 0.9
    assert (camera.fu, camera.fv, camera.cu, camera.cv) == (750.0, 748.0, 376.0, 240.0)


def test_parameters_are_copies():
    camera = PinholeCamera([460.0, 458.0, 320.0, 240.0], 640, 480)
    params = camera.parameters
    params[:] = 0.0
    np.testing.assert_array_equal(camera.parameters, [460.0, 458.0, 320.0, 240.0])


@pytest.mark.parametrize("width, height", [(0, 480), (640, 0), (-1, 480)])
def test_rejects_non_positive_image_size(width, height):
    with pytest.raises(ValueError):
        PinholeCamera([1.0, 1.0, 0.5, 0.5], width, height)


def test_setters():
    camera = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10)
    cid = CameraId.random()
    camera.set_id(cid)
    camera.set_label("left")
    camera.set_line_delay_nanoseconds(2 ** 64 - 1)
    assert camera.id == cid
    assert camera.label == "left"
    assert camera.line_delay_nanoseconds == 2 ** 64 - 1


@pytest.mark.parametrize("value", [-1, 2 ** 64])
def test_line_delay_must_be_uint64(value):
    camera = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10)
    with pytest.raises(ValueError):
        camera.set_line_delay_nanoseconds(value)


def test_distortion_is_owned_by_camera():
    distortion = RadTanDistortion([0.1, 0.0, 0.0, 0.0])
    camera = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10, distortion)
    assert camera.distortion is distortion
    assert camera.has_distortion()


def test_equality_treats_none_distortion_as_absent():
    a = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10, NoDistortion())
    b = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10)
    assert a == b


def test_equality_compares_all_fields():
    a = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10)
    b = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10)
    assert a == b
    b.set_label("other")
    assert a != b
    c = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10, RadTanDistortion([0.1, 0, 0, 0]))
    assert a != c
