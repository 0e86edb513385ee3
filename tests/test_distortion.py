import math

import numpy as np
import pytest

from vision_camera.core.camera import PinholeCamera
from vision_camera.core.distortion import (
    DistortionType,
    EquidistantDistortion,
    FisheyeDistortion,
    NoDistortion,
    RadTanDistortion,
)
from vision_camera.core.types import InvalidParameterError


@pytest.mark.parametrize(
    "model, count, dtype",
    [
        (NoDistortion, 0, DistortionType.NO_DISTORTION),
        (EquidistantDistortion, 4, DistortionType.EQUIDISTANT),
        (FisheyeDistortion, 1, DistortionType.FISHEYE),
        (RadTanDistortion, 4, DistortionType.RAD_TAN),
    ],
)
def test_model_declarations(model, count, dtype):
    assert model.parameter_count() == count
    assert model(np.zeros(count)).type is dtype


def test_parameters_are_float_copies():
    distortion = RadTanDistortion([1, 2, 3, 4])
    params = distortion.parameters
    assert params.dtype == np.float64
    params[0] = 100.0
    assert distortion.parameters[0] == 1.0


def test_equidistant_validity():
    d = EquidistantDistortion([0.1, 0.0, 0.0, 0.0])
    assert d.distortion_parameters_valid([0.1, -0.2, 0.3, -0.4])
    assert not d.distortion_parameters_valid([0.1, 0.2, 0.3])
    assert not d.distortion_parameters_valid([0.1, float("nan"), 0.3, 0.4])
    assert not d.distortion_parameters_valid([0.1, 0.2, float("inf"), 0.4])


def test_fisheye_validity():
    d = FisheyeDistortion([0.5])
    assert d.w == 0.5
    assert d.distortion_parameters_valid([0.0])
    assert d.distortion_parameters_valid([3.0])
    assert not d.distortion_parameters_valid([-0.1])
    assert not d.distortion_parameters_valid([math.pi])
    assert not d.distortion_parameters_valid([0.5, 0.5])


def test_radtan_validity():
    d = RadTanDistortion([0.0, 0.0, 0.0, 0.0])
    assert d.distortion_parameters_valid([-0.28, 0.07, 0.0002, 1.8e-05])
    assert not d.distortion_parameters_valid([-0.28, 0.07, 0.0002])
    assert not d.distortion_parameters_valid([float("nan"), 0.0, 0.0, 0.0])


def test_no_distortion_validity():
    assert NoDistortion().distortion_parameters_valid([])
    assert not NoDistortion().distortion_parameters_valid([0.0])


def test_validated_constructor():
    d = FisheyeDistortion.validated([0.7])
    assert isinstance(d, FisheyeDistortion)
    with pytest.raises(InvalidParameterError):
        FisheyeDistortion.validated([4.0])


def test_equality():
    assert RadTanDistortion([1, 2, 3, 4]) == RadTanDistortion([1.0, 2.0, 3.0, 4.0])
    assert RadTanDistortion([1, 2, 3, 4]) != RadTanDistortion([1, 2, 3, 5])
    assert RadTanDistortion([1, 2, 3, 4]) != EquidistantDistortion([1, 2, 3, 4])


def test_distortion_cannot_be_shared_between_cameras():
    distortion = EquidistantDistortion([0.1, 0.0, 0.0, 0.0])
    PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10, distortion)
    with pytest.raises(ValueError):
        PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10, distortion)


def test_copy_is_unowned():
    distortion = EquidistantDistortion([0.1, 0.0, 0.0, 0.0])
    first = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10, distortion)
    second = PinholeCamera([1.0, 1.0, 0.5, 0.5], 10, 10, distortion.copy())
    assert first.distortion == second.distortion
    assert first.distortion is not second.distortion
