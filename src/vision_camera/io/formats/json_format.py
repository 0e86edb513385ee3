"""
JSON format support for camera models.

JSON holds the same node tree as the YAML format. It's useful for
web tools and interoperability.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Union

from vision_camera.core.camera import Camera
from vision_camera.core.types import FileFormatError
from vision_camera.io.codec import (
    camera_from_node,
    cameras_from_node,
    cameras_to_node,
    encode,
)
from vision_camera.utils.logging import get_logger

logger = get_logger("io.formats.json")


class JSONFormat:
    """JSON format reader/writer for camera models.

    JSON structure:
        {
            "label": "cam0",
            "id": "0123456789abcdef0123456789abcdef",  // optional
            "line-delay-nanoseconds": 0,
            "image_height": 480,
            "image_width": 640,
            "type": "pinhole",
            "intrinsics": [fu, fv, cu, cv],
            "distortion": {  // optional
                "type": "equidistant",
                "parameters": [k1, k2, k3, k4]
            }
        }
    """

    EXTENSION = ".json"

    @classmethod
    def to_string(cls, camera: Camera, indent: int = 2) -> str:
        """Convert a camera to a JSON string."""
        return json.dumps(encode(camera), indent=indent, ensure_ascii=False)

    @classmethod
    def from_string(cls, text: str) -> Camera:
        """Parse a camera from a JSON string.

        Raises:
            FileFormatError: If the text is not valid JSON or not a valid
                camera.
        """
        return camera_from_node(cls._parse(text, "JSON string"), "JSON string")

    @classmethod
    def save(
        cls,
        path: Union[str, Path],
        camera: Camera,
        indent: int = 2,
    ) -> Path:
        """Save a camera to a JSON file.

        Args:
            path: Output file path.
            camera: Camera to save.
            indent: JSON indentation level.
        """
        path = cls._prepare_output(path)
        logger.info(f"Saving camera to JSON: {path}")
        path.write_text(cls.to_string(camera, indent=indent), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Union[str, Path]) -> Camera:
        """Load a camera from a JSON file.

        Raises:
            FileFormatError: If the file is missing or invalid.
        """
        path = Path(path)
        logger.info(f"Loading camera from JSON: {path}")
        return camera_from_node(cls._read(path), str(path))

    @classmethod
    def save_all(
        cls,
        path: Union[str, Path],
        cameras: Iterable[Camera],
        indent: int = 2,
    ) -> Path:
        """Save several cameras to one JSON file under a 'cameras' key."""
        path = cls._prepare_output(path)
        logger.info(f"Saving cameras to JSON: {path}")
        text = json.dumps(cameras_to_node(cameras), indent=indent, ensure_ascii=False)
        path.write_text(text, encoding="utf-8")
        return path

    @classmethod
    def load_all(cls, path: Union[str, Path]) -> list[Camera]:
        """Load every camera of a multi-camera JSON file."""
        path = Path(path)
        logger.info(f"Loading cameras from JSON: {path}")
        return cameras_from_node(cls._read(path), str(path))

    @classmethod
    def read_node(cls, path: Union[str, Path]) -> Any:
        """Read the raw node tree of a JSON file without decoding it."""
        return cls._read(Path(path))

    @classmethod
    def is_valid_file(cls, path: Union[str, Path]) -> bool:
        """Check if a file is a JSON camera description."""
        path = Path(path)
        if not path.exists():
            return False

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return False
        return isinstance(data, dict) and ("intrinsics" in data or "cameras" in data)

    @classmethod
    def _prepare_output(cls, path: Union[str, Path]) -> Path:
        path = Path(path)
        if path.suffix.lower() != cls.EXTENSION:
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
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise FileFormatError(f"Invalid JSON format in {source}: {e}")
