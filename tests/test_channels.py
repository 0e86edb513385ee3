import numpy as np
import pytest

from vision_camera.core.channels import (
    BRISK_DESCRIPTORS,
    CHANNELS,
    VISUAL_KEYPOINT_MEASUREMENTS,
    get_channel,
)


def test_declared_channels():
    assert set(CHANNELS) == {
        "VISUAL_KEYPOINT_MEASUREMENTS",
        "VISUAL_KEYPOINT_MEASUREMENT_UNCERTAINTIES",
        "VISUAL_KEYPOINT_ORIENTATIONS",
        "VISUAL_KEYPOINT_SCALES",
        "BRISK_DESCRIPTORS",
    }


def test_get_channel():
    assert get_channel("BRISK_DESCRIPTORS") is BRISK_DESCRIPTORS
    with pytest.raises(KeyError):
        get_channel("DEPTH")


def test_keypoint_measurements_shape():
    assert VISUAL_KEYPOINT_MEASUREMENTS.validate(np.zeros((2, 50)))
    assert VISUAL_KEYPOINT_MEASUREMENTS.validate(np.zeros((2, 0)))
    assert not VISUAL_KEYPOINT_MEASUREMENTS.validate(np.zeros((3, 50)))
    assert not VISUAL_KEYPOINT_MEASUREMENTS.validate(np.zeros(50))
    assert not VISUAL_KEYPOINT_MEASUREMENTS.validate(np.zeros((2, 50), dtype=np.float32))


def test_vector_channels():
    for name in (
        "VISUAL_KEYPOINT_MEASUREMENT_UNCERTAINTIES",
        "VISUAL_KEYPOINT_ORIENTATIONS",
        "VISUAL_KEYPOINT_SCALES",
    ):
        channel = get_channel(name)
        assert channel.validate(np.ones(10))
        assert not channel.validate(np.ones((10, 1)))


def test_descriptors_dtype():
    assert BRISK_DESCRIPTORS.validate(np.zeros((64, 10), dtype=np.uint8))
    assert not BRISK_DESCRIPTORS.validate(np.zeros((64, 10)))
