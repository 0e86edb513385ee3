"""
Lens distortion models.

Each distortion variant owns a fixed-size parameter vector and knows how
to validate it. Distortions are attached to exactly one camera; see
`vision_camera.core.camera`.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from vision_camera.core.types import InvalidParameterError


class DistortionType(Enum):
    """Supported distortion models."""
    NO_DISTORTION = "none"
    EQUIDISTANT = "equidistant"
    FISHEYE = "fisheye"
    RAD_TAN = "radial-tangential"


def _as_vector(parameters: ArrayLike) -> NDArray[np.float64]:
    return np.array(parameters, dtype=np.float64).ravel()


class Distortion(ABC):
    """Base class for lens distortion models.

    Subclasses declare `TYPE` and `PARAMETER_COUNT` and implement
    `distortion_parameters_valid`.
    """

    TYPE: DistortionType
    PARAMETER_COUNT: int

    def __init__(self, parameters: ArrayLike = ()) -> None:
        self._parameters = _as_vector(parameters)
        # Camera holding this distortion, set by Camera.__init__
        self._owner: Optional[object] = None

    @classmethod
    def validated(cls, parameters: ArrayLike) -> Distortion:
        """Construct a distortion and check its parameters.

        Raises:
            InvalidParameterError: If the parameters are not valid for
                this model.
        """
        distortion = cls(parameters)
        if not distortion.distortion_parameters_valid(distortion.parameters):
            raise InvalidParameterError(
                f"Invalid {cls.TYPE.value} distortion parameters: "
                f"{distortion.parameters.tolist()}"
            )
        return distortion

    @classmethod
    def parameter_count(cls) -> int:
        return cls.PARAMETER_COUNT

    @property
    def type(self) -> DistortionType:
        return self.TYPE

    @property
    def parameters(self) -> NDArray[np.float64]:
        """Copy of the distortion parameter vector."""
        return self._parameters.copy()

    @abstractmethod
    def distortion_parameters_valid(self, parameters: ArrayLike) -> bool:
        """Check if a parameter vector is valid for this model."""

    def copy(self) -> Distortion:
        """Return an unowned copy of this distortion."""
        return type(self)(self._parameters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Distortion):
            return NotImplemented
        return self.TYPE is other.TYPE and np.array_equal(
            self._parameters, other._parameters
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters.tolist()})"


class NoDistortion(Distortion):
    """Identity distortion (no parameters)."""

    TYPE = DistortionType.NO_DISTORTION
    PARAMETER_COUNT = 0

    def distortion_parameters_valid(self, parameters: ArrayLike) -> bool:
        return _as_vector(parameters).size == 0


class EquidistantDistortion(Distortion):
    """Equidistant (Kannala-Brandt) distortion.

    Parameters: [k1, k2, k3, k4].
    """

    TYPE = DistortionType.EQUIDISTANT
    PARAMETER_COUNT = 4

    def distortion_parameters_valid(self, parameters: ArrayLike) -> bool:
        params = _as_vector(parameters)
        return params.size == self.PARAMETER_COUNT and bool(np.all(np.isfinite(params)))


class FisheyeDistortion(Distortion):
    """FOV fisheye distortion with a single field-of-view parameter w.

    w must lie in [0, pi); w = 0 means no distortion.
    """

    TYPE = DistortionType.FISHEYE
    PARAMETER_COUNT = 1

    def distortion_parameters_valid(self, parameters: ArrayLike) -> bool:
        params = _as_vector(parameters)
        if params.size != self.PARAMETER_COUNT:
            return False
        w = float(params[0])
        return math.isfinite(w) and 0.0 <= w < math.pi

    @property
    def w(self) -> float:
        return float(self._parameters[0])


class RadTanDistortion(Distortion):
    """Radial-tangential (plumb bob) distortion.

    Parameters: [k1, k2, p1, p2].
    """

    TYPE = DistortionType.RAD_TAN
    PARAMETER_COUNT = 4

    def distortion_parameters_valid(self, parameters: ArrayLike) -> bool:
        params = _as_vector(parameters)
        return params.size == self.PARAMETER_COUNT and bool(np.all(np.isfinite(params)))
