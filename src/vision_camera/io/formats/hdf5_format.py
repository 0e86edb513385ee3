"""
HDF5 format support for camera models.

HDF5 lets camera descriptions live next to recorded data. It can be read
by Python (h5py), MATLAB, Octave, Julia and many other tools.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Optional, Union

import h5py
import numpy as np

from vision_camera.core.camera import Camera
from vision_camera.core.types import FileFormatError
from vision_camera.io.codec import camera_from_node, cameras_from_node, encode
from vision_camera.utils.logging import get_logger

logger = get_logger("io.formats.hdf5")


def _write_node(group: h5py.Group, node: dict[str, Any], compression: Optional[str]) -> None:
    """Store a node tree: maps as groups, vectors as datasets, scalars as attributes."""
    for key, value in node.items():
        if isinstance(value, dict):
            _write_node(group.create_group(key), value, compression)
        elif isinstance(value, (list, tuple, np.ndarray)):
            data = np.asarray(value, dtype=np.float64)
            # Compression is not allowed on empty datasets
            group.create_dataset(
                key, data=data, compression=compression if data.size else None
            )
        elif isinstance(value, str):
            group.attrs.create(key, value, dtype=h5py.string_dtype())
        elif isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            group.attrs[key] = np.uint64(value)
        else:
            group.attrs[key] = value


def _read_node(group: h5py.Group) -> dict[str, Any]:
    node: dict[str, Any] = {}
    for key, value in group.attrs.items():
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        elif isinstance(value, np.generic):
            value = value.item()
        node[key] = value
    for key, item in group.items():
        if isinstance(item, h5py.Group):
            node[key] = _read_node(item)
        else:
            node[key] = item[()]
    return node


class HDF5Format:
    """HDF5 format reader/writer for camera models.

    File structure:
        /camera/                  attributes: label, id, line-delay-nanoseconds,
                                  image_height, image_width, type
            intrinsics            (n,) float64
            distortion/           (optional) attribute: type
                parameters        (m,) float64

    Multi-camera files hold /cameras/0, /cameras/1, ... with the same
    layout as /camera.

    Example (Python):
        >>> import h5py
        >>> with h5py.File('camera.h5', 'r') as f:
        ...     intrinsics = f['/camera/intrinsics'][:]
    """

    EXTENSION = ".h5"
    EXTENSIONS = (".h5", ".hdf5")
    VERSION = "1.0"
    FORMAT_TYPE = "vision-camera"

    @classmethod
    def save(
        cls,
        path: Union[str, Path],
        camera: Camera,
        compression: Optional[str] = "gzip",
    ) -> Path:
        """Save a camera to an HDF5 file.

        Args:
            path: Output file path.
            camera: Camera to save.
            compression: Compression algorithm ('gzip', 'lzf', or None).
        """
        path = cls._prepare_output(path)
        logger.info(f"Saving camera to HDF5: {path}")

        with h5py.File(path, "w") as f:
            cls._write_header(f)
            _write_node(f.create_group("camera"), encode(camera), compression)
        return path

    @classmethod
    def load(cls, path: Union[str, Path]) -> Camera:
        """Load a camera from an HDF5 file.

        Raises:
            FileFormatError: If the file is missing or invalid.
        """
        path = Path(path)
        logger.info(f"Loading camera from HDF5: {path}")
        return camera_from_node(cls.read_node(path), str(path))

    @classmethod
    def read_node(cls, path: Union[str, Path]) -> dict[str, Any]:
        """Read the /camera group as a node tree without decoding it."""
        path = Path(path)
        with cls._open(path) as f:
            if "camera" not in f:
                raise FileFormatError(f"Missing camera group in HDF5 file: {path}")
            return _read_node(f["camera"])

    @classmethod
    def save_all(
        cls,
        path: Union[str, Path],
        cameras: Iterable[Camera],
        compression: Optional[str] = "gzip",
    ) -> Path:
        """Save several cameras to one HDF5 file."""
        path = cls._prepare_output(path)
        logger.info(f"Saving cameras to HDF5: {path}")

        with h5py.File(path, "w") as f:
            cls._write_header(f)
            cameras_grp = f.create_group("cameras")
            for index, camera in enumerate(cameras):
                _write_node(cameras_grp.create_group(str(index)), encode(camera), compression)
        return path

    @classmethod
    def load_all(cls, path: Union[str, Path]) -> list[Camera]:
        """Load every camera of a multi-camera HDF5 file."""
        path = Path(path)
        logger.info(f"Loading cameras from HDF5: {path}")

        with cls._open(path) as f:
            if "cameras" not in f:
                raise FileFormatError(f"Missing cameras group in HDF5 file: {path}")
            cameras_grp = f["cameras"]
            nodes = [_read_node(cameras_grp[key]) for key in sorted(cameras_grp, key=int)]
        return cameras_from_node(nodes, str(path))

    @classmethod
    def is_valid_file(cls, path: Union[str, Path]) -> bool:
        """Check if a file is a valid camera HDF5 file."""
        path = Path(path)
        if not path.exists():
            return False

        try:
            with h5py.File(path, "r") as f:
                return "camera" in f or "cameras" in f
        except OSError:
            return False

    @classmethod
    def _prepare_output(cls, path: Union[str, Path]) -> Path:
        path = Path(path)
        if path.suffix.lower() not in cls.EXTENSIONS:
            path = path.with_suffix(cls.EXTENSION)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @classmethod
    def _write_header(cls, f: h5py.File) -> None:
        f.attrs["format_version"] = cls.VERSION
        f.attrs["format_type"] = cls.FORMAT_TYPE

    @classmethod
    def _open(cls, path: Path) -> h5py.File:
        if not path.exists():
            raise FileFormatError(f"File not found: {path}")
        try:
            f = h5py.File(path, "r")
        except OSError as e:
            raise FileFormatError(f"Invalid HDF5 file {path}: {e}")

        format_type = f.attrs.get("format_type", "")
        if isinstance(format_type, bytes):
            format_type = format_type.decode("utf-8")
        if format_type != cls.FORMAT_TYPE:
            logger.warning(f"Unknown format type: {format_type}")
        return f
