"""
Unified camera file interface.

Provides a single entry point for saving/loading camera models
in multiple formats (YAML, JSON, HDF5).
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Union

from vision_camera.core.camera import Camera
from vision_camera.core.types import FileFormatError
from vision_camera.io.formats.hdf5_format import HDF5Format
from vision_camera.io.formats.json_format import JSONFormat
from vision_camera.io.formats.yaml_format import YAMLFormat
from vision_camera.utils.logging import get_logger

logger = get_logger("io.camera_file")


class CameraFileFormat(Enum):
    """Supported camera file formats."""
    YAML = "yaml"
    JSON = "json"
    HDF5 = "hdf5"

    @classmethod
    def from_extension(cls, ext: str) -> "CameraFileFormat":
        """Get format from file extension.

        Args:
            ext: File extension (with or without leading dot).

        Returns:
            CameraFileFormat enum value.

        Raises:
            ValueError: If extension is not recognized.
        """
        ext = ext.lower().lstrip(".")
        mapping = {
            "yaml": cls.YAML,
            "yml": cls.YAML,
            "json": cls.JSON,
            "h5": cls.HDF5,
            "hdf5": cls.HDF5,
        }
        if ext not in mapping:
            raise ValueError(f"Unknown file extension: {ext}")
        return mapping[ext]


class CameraFile:
    """Unified interface for camera file operations.

    Supports multiple formats with automatic format detection.

    Example:
        >>> CameraFile.save("cam0.yaml", camera)  # YAML
        >>> CameraFile.save("cam0.h5", camera)    # HDF5
        >>>
        >>> # Load (format auto-detected from extension)
        >>> camera = CameraFile.load("cam0.yaml")
    """

    # Format handlers
    _handlers = {
        CameraFileFormat.YAML: YAMLFormat,
        CameraFileFormat.JSON: JSONFormat,
        CameraFileFormat.HDF5: HDF5Format,
    }

    @classmethod
    def save(
        cls,
        path: Union[str, Path],
        camera: Camera,
        format: CameraFileFormat | None = None,
    ) -> Path:
        """Save a camera to file.

        Args:
            path: Output file path.
            camera: Camera to save.
            format: File format (auto-detected from extension if None).

        Returns:
            Path to saved file.
        """
        path, format = cls._output_format(path, format)
        path = cls._handlers[format].save(path, camera)
        logger.info(f"Saved camera to {format.value}: {path}")
        return path

    @classmethod
    def load(
        cls,
        path: Union[str, Path],
        format: CameraFileFormat | None = None,
    ) -> Camera:
        """Load a camera from file.

        Args:
            path: Input file path.
            format: File format (auto-detected if None).

        Returns:
            Camera loaded from file.

        Raises:
            FileFormatError: If the file cannot be loaded.
        """
        path = Path(path)
        format = cls._input_format(path, format)
        camera = cls._handlers[format].load(path)
        logger.info(f"Loaded camera from {format.value}: {path}")
        return camera

    @classmethod
    def save_all(
        cls,
        path: Union[str, Path],
        cameras: Iterable[Camera],
        format: CameraFileFormat | None = None,
    ) -> Path:
        """Save several cameras to one file."""
        path, format = cls._output_format(path, format)
        path = cls._handlers[format].save_all(path, cameras)
        logger.info(f"Saved cameras to {format.value}: {path}")
        return path

    @classmethod
    def load_all(
        cls,
        path: Union[str, Path],
        format: CameraFileFormat | None = None,
    ) -> list[Camera]:
        """Load every camera of a multi-camera file."""
        path = Path(path)
        format = cls._input_format(path, format)
        cameras = cls._handlers[format].load_all(path)
        logger.info(f"Loaded {len(cameras)} cameras from {format.value}: {path}")
        return cameras

    @classmethod
    def read_node(
        cls,
        path: Union[str, Path],
        format: CameraFileFormat | None = None,
    ) -> Any:
        """Read the node tree of a single-camera file without decoding it.

        Raises:
            FileFormatError: If the file cannot be read.
        """
        path = Path(path)
        format = cls._input_format(path, format)
        return cls._handlers[format].read_node(path)

    @classmethod
    def get_supported_extensions(cls) -> list[str]:
        """Get list of supported file extensions."""
        return [".yaml", ".yml", ".json", ".h5", ".hdf5"]

    @classmethod
    def _output_format(
        cls,
        path: Union[str, Path],
        format: CameraFileFormat | None,
    ) -> tuple[Path, CameraFileFormat]:
        path = Path(path)
        if format is None:
            try:
                format = CameraFileFormat.from_extension(path.suffix)
            except ValueError:
                # Default to YAML if no extension
                format = CameraFileFormat.YAML
                path = path.with_suffix(YAMLFormat.EXTENSION)
        return path, format

    @classmethod
    def _input_format(
        cls,
        path: Path,
        format: CameraFileFormat | None,
    ) -> CameraFileFormat:
        if not path.exists():
            raise FileFormatError(f"File not found: {path}")
        if format is not None:
            return format
        try:
            return CameraFileFormat.from_extension(path.suffix)
        except ValueError:
            return cls._detect_format(path)

    @classmethod
    def _detect_format(cls, path: Path) -> CameraFileFormat:
        """Detect file format from content.

        Raises:
            FileFormatError: If format cannot be detected.
        """
        # JSON before YAML: every JSON document is also valid YAML
        for format in (CameraFileFormat.HDF5, CameraFileFormat.JSON, CameraFileFormat.YAML):
            if cls._handlers[format].is_valid_file(path):
                return format

        raise FileFormatError(f"Could not detect format of: {path}")
