"""Camera file format implementations."""

from vision_camera.io.formats.yaml_format import YAMLFormat
from vision_camera.io.formats.json_format import JSONFormat
from vision_camera.io.formats.hdf5_format import HDF5Format

__all__ = [
    "YAMLFormat",
    "JSONFormat",
    "HDF5Format",
]
