"""
Conversion between camera models and node trees.

`decode` builds a camera from an untrusted node tree and never raises:
it returns a `DecodeResult` carrying either the camera or the reason it
could not be built. `encode` turns a camera back into a node tree.

Node structure:
    label: "cam0"                      # optional, default ""
    id: 0123456789abcdef0123456789abcdef   # optional, 32 hex digits
    line-delay-nanoseconds: 0          # optional, default 0
    image_height: 480
    image_width: 640
    type: pinhole                      # or unified-projection
    intrinsics: [fu, fv, cu, cv]
    distortion:                        # optional
      type: radial-tangential          # none, equidistant, fisheye
      parameters: [k1, k2, p1, p2]
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, Optional

from vision_camera.core.camera import (
    Camera,
    CameraType,
    PinholeCamera,
    UnifiedProjectionCamera,
)
from vision_camera.core.distortion import (
    Distortion,
    DistortionType,
    EquidistantDistortion,
    FisheyeDistortion,
    RadTanDistortion,
)
from vision_camera.core.types import CameraId, FileFormatError, UnknownModelError
from vision_camera.io.node import ValueKind, as_text, has_key, is_map, safe_get
from vision_camera.utils.logging import get_logger

logger = get_logger("io.codec")


# Model classes by type. NO_DISTORTION maps to None: no object is attached.
CAMERA_MODELS: dict[CameraType, type[Camera]] = {
    CameraType.PINHOLE: PinholeCamera,
    CameraType.UNIFIED_PROJECTION: UnifiedProjectionCamera,
}

DISTORTION_MODELS: dict[DistortionType, Optional[type[Distortion]]] = {
    DistortionType.NO_DISTORTION: None,
    DistortionType.EQUIDISTANT: EquidistantDistortion,
    DistortionType.FISHEYE: FisheyeDistortion,
    DistortionType.RAD_TAN: RadTanDistortion,
}


class DecodeStatus(Enum):
    """Outcome of decoding a camera node."""
    OK = "ok"
    NOT_A_MAP = "not-a-map"
    MISSING_FIELD = "missing-field"
    UNKNOWN_DISTORTION_MODEL = "unknown-distortion-model"
    INVALID_DISTORTION_PARAMETERS = "invalid-distortion-parameters"
    UNKNOWN_CAMERA_MODEL = "unknown-camera-model"
    WRONG_PARAMETER_COUNT = "wrong-parameter-count"
    INVALID_ID = "invalid-id"
    INVALID_LINE_DELAY = "invalid-line-delay"
    NODE_ERROR = "node-error"


@dataclass
class DecodeResult:
    """Camera decoded from a node, or the reason decoding failed.

    Unpacks as `(camera, status)`:
        >>> camera, status = decode(node)
    """
    camera: Optional[Camera]
    status: DecodeStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.camera is not None

    @property
    def unknown_model(self) -> bool:
        """True if a type tag did not name any known model."""
        return self.status in (
            DecodeStatus.UNKNOWN_CAMERA_MODEL,
            DecodeStatus.UNKNOWN_DISTORTION_MODEL,
        )

    def __iter__(self) -> Iterator[Any]:
        return iter((self.camera, self.status))


def _failure(status: DecodeStatus, message: str) -> DecodeResult:
    logger.debug(f"Camera decode failed ({status.value}): {message}")
    return DecodeResult(camera=None, status=status, message=message)


def _decode_distortion(node: Any) -> tuple[Optional[Distortion], Optional[DecodeResult]]:
    """Build the distortion of a camera node.

    Returns:
        (distortion, failure). failure is None on success; distortion may
        still be None when the camera has no distortion.
    """
    if not has_key(node, "distortion"):
        logger.debug("Found a camera with no distortion.")
        return None, None

    distortion_node = node["distortion"]
    ok_type, distortion_tag = safe_get(distortion_node, "type", ValueKind.STRING)
    ok_params, parameters = safe_get(distortion_node, "parameters", ValueKind.VECTOR)
    if not (ok_type and ok_params):
        return None, _failure(
            DecodeStatus.MISSING_FIELD,
            "Unable to get the required parameters from the distortion. "
            "Required: string type, vector parameters.",
        )

    try:
        distortion_type = DistortionType(distortion_tag)
    except ValueError:
        valid = ", ".join(t.value for t in DISTORTION_MODELS)
        return None, _failure(
            DecodeStatus.UNKNOWN_DISTORTION_MODEL,
            f'Unknown distortion model: "{distortion_tag}". Valid values are {{{valid}}}.',
        )

    model = DISTORTION_MODELS[distortion_type]
    if model is None:
        return None, None

    distortion = model(parameters)
    if not distortion.distortion_parameters_valid(parameters):
        return None, _failure(
            DecodeStatus.INVALID_DISTORTION_PARAMETERS,
            f"Invalid {distortion_type.value} distortion parameters: {parameters.tolist()}",
        )
    return distortion, None


def _decode(node: Any) -> DecodeResult:
    if not is_map(node):
        return _failure(
            DecodeStatus.NOT_A_MAP,
            "Unable to parse the camera because the node is not a map.",
        )

    distortion, failure = _decode_distortion(node)
    if failure is not None:
        return failure

    ok_type, camera_tag = safe_get(node, "type", ValueKind.STRING)
    ok_width, image_width = safe_get(node, "image_width", ValueKind.UNSIGNED)
    ok_height, image_height = safe_get(node, "image_height", ValueKind.UNSIGNED)
    ok_intrinsics, intrinsics = safe_get(node, "intrinsics", ValueKind.VECTOR)
    if not (ok_type and ok_width and ok_height and ok_intrinsics):
        return _failure(
            DecodeStatus.MISSING_FIELD,
            "Unable to get the required parameters from the camera. Required: "
            "string type, int image_height, int image_width, vector intrinsics.",
        )
    if image_width == 0 or image_height == 0:
        return _failure(
            DecodeStatus.MISSING_FIELD,
            f"Image size must be positive, got {image_width}x{image_height}.",
        )

    try:
        camera_type = CameraType(camera_tag)
    except ValueError:
        valid = ", ".join(t.value for t in CAMERA_MODELS)
        return _failure(
            DecodeStatus.UNKNOWN_CAMERA_MODEL,
            f'Unknown camera model: "{camera_tag}". Valid values are {{{valid}}}.',
        )

    model = CAMERA_MODELS[camera_type]
    if intrinsics.size != model.parameter_count():
        return _failure(
            DecodeStatus.WRONG_PARAMETER_COUNT,
            f"Wrong number of intrinsic parameters for the {camera_type.value} camera. "
            f"Wanted: {model.parameter_count()}, got: {intrinsics.size}",
        )
    camera = model(intrinsics, image_width, image_height, distortion)

    if has_key(node, "id"):
        id_string = as_text(node["id"])
        camera_id = CameraId.from_hex_string(id_string)
        if camera_id is None:
            return _failure(
                DecodeStatus.INVALID_ID,
                f'Unable to parse "{id_string}" as a hex string.',
            )
        camera.set_id(camera_id)

    if has_key(node, "line-delay-nanoseconds"):
        ok_delay, line_delay = safe_get(node, "line-delay-nanoseconds", ValueKind.UINT64)
        if not ok_delay:
            return _failure(
                DecodeStatus.INVALID_LINE_DELAY,
                "Unable to parse the parameter line-delay-nanoseconds.",
            )
        camera.set_line_delay_nanoseconds(line_delay)

    if has_key(node, "label"):
        camera.set_label(as_text(node["label"]))

    return DecodeResult(camera=camera, status=DecodeStatus.OK)


def decode(node: Any) -> DecodeResult:
    """Build a camera from a node tree.

    Optional fields (distortion, id, line delay, label) may be absent, but
    when present they must parse, otherwise no camera is returned.

    Args:
        node: Map node describing one camera.

    Returns:
        DecodeResult with the camera on success, or camera=None and the
        failure status and message.
    """
    try:
        return _decode(node)
    except Exception as e:
        return _failure(DecodeStatus.NODE_ERROR, f"Exception during parsing: {e}")


def encode(camera: Camera) -> dict[str, Any]:
    """Convert a camera to a node tree.

    The id is written only if it is valid; the distortion only if one is
    attached and it is not the identity distortion.

    Args:
        camera: Camera to encode.

    Returns:
        Map node with plain Python values.

    Raises:
        ValueError: If camera is None.
        UnknownModelError: If the camera or distortion type has no tag.
    """
    if camera is None:
        raise ValueError("Cannot encode a null camera")
    if camera.type not in CAMERA_MODELS:
        raise UnknownModelError(f"Unknown camera model: {camera.type!r}")

    node: dict[str, Any] = {"label": camera.label}
    if camera.id.is_valid():
        node["id"] = camera.id.hex_string()
    node["line-delay-nanoseconds"] = camera.line_delay_nanoseconds
    node["image_height"] = camera.image_height
    node["image_width"] = camera.image_width
    node["type"] = camera.type.value
    node["intrinsics"] = camera.parameters.tolist()

    distortion = camera.distortion
    if distortion is not None and distortion.type is not DistortionType.NO_DISTORTION:
        if distortion.type not in DISTORTION_MODELS:
            raise UnknownModelError(f"Unknown distortion model: {distortion.type!r}")
        node["distortion"] = {
            "type": distortion.type.value,
            "parameters": distortion.parameters.tolist(),
        }
    return node


def camera_from_node(node: Any, source: str = "node") -> Camera:
    """Decode a node, raising FileFormatError on failure."""
    result = decode(node)
    if not result.ok:
        raise FileFormatError(
            f"Invalid camera in {source} ({result.status.value}): {result.message}"
        )
    return result.camera


def cameras_from_node(node: Any, source: str = "node") -> list[Camera]:
    """Decode a multi-camera node.

    Accepts either `{"cameras": [...]}` or a bare sequence. Each entry is
    a camera node or a `{"camera": node}` wrapper. Fails as a whole if
    any camera fails.
    """
    if isinstance(node, dict):
        if "cameras" not in node:
            raise FileFormatError(f"Missing 'cameras' sequence in {source}")
        node = node["cameras"]
    if not isinstance(node, list):
        raise FileFormatError(f"Expected a sequence of cameras in {source}")

    cameras = []
    for index, entry in enumerate(node):
        if isinstance(entry, dict) and "camera" in entry:
            entry = entry["camera"]
        cameras.append(camera_from_node(entry, f"{source}, camera {index}"))
    return cameras


def cameras_to_node(cameras: Iterable[Camera]) -> dict[str, Any]:
    return {"cameras": [{"camera": encode(camera)} for camera in cameras]}

