"""
Per-frame channel declarations.

A channel binds a name to the array type stored for every frame of a
camera (keypoints, descriptors, ...). `None` in a shape means the
dimension is free (number of keypoints, descriptor size).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class ChannelDefinition:
    """Name and array layout of a frame channel."""
    name: str
    dtype: np.dtype
    shape: tuple[Optional[int], ...]

    def validate(self, data: NDArray) -> bool:
        """Check if an array can be stored in this channel."""
        if data.dtype != self.dtype or data.ndim != len(self.shape):
            return False
        return all(
            expected is None or expected == actual
            for expected, actual in zip(self.shape, data.shape)
        )


VISUAL_KEYPOINT_MEASUREMENTS = ChannelDefinition(
    "VISUAL_KEYPOINT_MEASUREMENTS", np.dtype(np.float64), (2, None)
)
VISUAL_KEYPOINT_MEASUREMENT_UNCERTAINTIES = ChannelDefinition(
    "VISUAL_KEYPOINT_MEASUREMENT_UNCERTAINTIES", np.dtype(np.float64), (None,)
)
VISUAL_KEYPOINT_ORIENTATIONS = ChannelDefinition(
    "VISUAL_KEYPOINT_ORIENTATIONS", np.dtype(np.float64), (None,)
)
VISUAL_KEYPOINT_SCALES = ChannelDefinition(
    "VISUAL_KEYPOINT_SCALES", np.dtype(np.float64), (None,)
)
BRISK_DESCRIPTORS = ChannelDefinition(
    "BRISK_DESCRIPTORS", np.dtype(np.uint8), (None, None)
)

CHANNELS: dict[str, ChannelDefinition] = {
    channel.name: channel
    for channel in (
        VISUAL_KEYPOINT_MEASUREMENTS,
        VISUAL_KEYPOINT_MEASUREMENT_UNCERTAINTIES,
        VISUAL_KEYPOINT_ORIENTATIONS,
        VISUAL_KEYPOINT_SCALES,
        BRISK_DESCRIPTORS,
    )
}


def get_channel(name: str) -> ChannelDefinition:
    """Look up a channel by name.

    Raises:
        KeyError: If no channel with this name is declared.
    """
    if name not in CHANNELS:
        raise KeyError(f"Unknown channel: {name}")
    return CHANNELS[name]
