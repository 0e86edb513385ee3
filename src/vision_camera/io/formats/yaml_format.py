"""
YAML format support for camera models.

YAML is the primary text format for camera descriptions: it is easy to
edit by hand and keeps vectors on a single line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Union

import yaml

from vision_camera.core.camera import Camera
from vision_camera.core.types import FileFormatError
from vision_camera.io.codec import (
    camera_from_node,
    cameras_from_node,
    cameras_to_node,
    encode,
)
from vision_camera.utils.logging import get_logger

logger = get_logger("io.formats.yaml")

# Keys whose values are read as the scalar text written in the document.
# Resolved, `id: 00000000000000000000000000000001` would be the int 1 and
# `label: yes` the bool True.
TEXT_KEYS = ("id", "label")


class CameraLoader(yaml.SafeLoader):
    """SafeLoader that keeps `id` and `label` scalars as their source text."""

    def construct_mapping(self, node, deep=False):
        mapping = super().construct_mapping(node, deep=deep)
        for key_node, value_node in node.value:
            key = key_node.value
            if (
                isinstance(key_node, yaml.ScalarNode)
                and key in TEXT_KEYS
                and isinstance(value_node, yaml.ScalarNode)
                and mapping.get(key) is not None  # explicit nulls stay absent
            ):
                mapping[key] = value_node.value
        return mapping


class YAMLFormat:
    """YAML format reader/writer for camera models.

    YAML structure:
        label: cam0
        id: 0123456789abcdef0123456789abcdef
        line-delay-nanoseconds: 0
        image_height: 480
        image_width: 640
        type: pinhole
        intrinsics: [460.0, 458.0, 320.0, 240.0]
        distortion:
          type: radial-tangential
          parameters: [-0.28, 0.07, 0.0002, 1.8e-05]

    Example:
        >>> camera = YAMLFormat.load("cam0.yaml")
        >>> YAMLFormat.save("copy.yaml", camera)
    """

    EXTENSION = ".yaml"
    EXTENSIONS = (".yaml", ".yml")

    @classmethod
    def to_string(cls, camera: Camera) -> str:
        """Convert a camera to a YAML document."""
        return cls._dump(encode(camera))

    @classmethod
    def from_string(cls, text: str) -> Camera:
        """Parse a camera from a YAML document.

        Raises:
            FileFormatError: If the text is not valid YAML or does not
                describe a valid camera.
        """
        return camera_from_node(cls._parse(text, "YAML string"), "YAML string")

    @classmethod
    def save(cls, path: Union[str, Path], camera: Camera) -> Path:
        """Save a camera to a YAML file.

        Args:
            path: Output file path.
            camera: Camera to save.
        """
        path = cls._prepare_output(path)
        logger.info(f"Saving camera to YAML: {path}")
        path.write_text(cls.to_string(camera), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Union[str, Path]) -> Camera:
        """Load a camera from a YAML file.

        Raises:
            FileFormatError: If the file is missing or invalid.
        """
        path = Path(path)
        logger.info(f"Loading camera from YAML: {path}")
        return camera_from_node(cls._read(path), str(path))

    @classmethod
    def save_all(cls, path: Union[str, Path], cameras: Iterable[Camera]) -> Path:
        """Save several cameras to one YAML file under a 'cameras' key."""
        path = cls._prepare_output(path)
        node = cameras_to_node(cameras)
        logger.info(f"Saving {len(node['cameras'])} cameras to YAML: {path}")
        path.write_text(cls._dump(node), encoding="utf-8")
        return path

    @classmethod
    def load_all(cls, path: Union[str, Path]) -> list[Camera]:
        """Load every camera of a multi-camera YAML file."""
        path = Path(path)
        logger.info(f"Loading cameras from YAML: {path}")
        return cameras_from_node(cls._read(path), str(path))

    @classmethod
    def read_node(cls, path: Union[str, Path]) -> Any:
        """Read the raw node tree of a YAML (or JSON) file without decoding it.

        Raises:
            FileFormatError: If the file is missing, not text, or not YAML.
        """
        return cls._read(Path(path))

    @classmethod
    def is_valid_file(cls, path: Union[str, Path]) -> bool:
        """Check if a file is a YAML camera description."""
        path = Path(path)
        if not path.exists():
            return False
        try:
            node = yaml.load(path.read_text(encoding="utf-8"), Loader=CameraLoader)
        except (yaml.YAMLError, UnicodeDecodeError):
            return False
        return isinstance(node, dict) and ("intrinsics" in node or "cameras" in node)

    @classmethod
    def _prepare_output(cls, path: Union[str, Path]) -> Path:
        path = Path(path)
        if path.suffix.lower() not in cls.EXTENSIONS:
            path = path.with_suffix(cls.EXTENSION)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def _read(cls, path: Path) -> Any:
        if not path.exists():
            raise FileFormatError(f"File not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise FileFormatError(f"Not a UTF-8 text file: {path}: {e}")
        return cls._parse(text, str(path))

    @staticmethod
    def _parse(text: str, source: str) -> Any:
        try:
            return yaml.load(text, Loader=CameraLoader)
        except yaml.YAMLError as e:
            raise FileFormatError(f"Invalid YAML format in {source}: {e}")

    @staticmethod
    def _dump(node: Any) -> str:
        return yaml.safe_dump(node, sort_keys=False, default_flow_style=None)
