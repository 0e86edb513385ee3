import pytest

from vision_camera.core.types import FileFormatError
from vision_camera.io.camera_file import CameraFile, CameraFileFormat


@pytest.mark.parametrize(
    "ext, expected",
    [
        (".yaml", CameraFileFormat.YAML),
        ("yml", CameraFileFormat.YAML),
        (".JSON", CameraFileFormat.JSON),
        (".h5", CameraFileFormat.HDF5),
        ("hdf5", CameraFileFormat.HDF5),
    ],
)
def test_format_from_extension(ext, expected):
    assert CameraFileFormat.from_extension(ext) is expected


def test_format_from_unknown_extension():
    with pytest.raises(ValueError):
        CameraFileFormat.from_extension(".mat")


@pytest.mark.parametrize("name", ["cam0.yaml", "cam0.yml", "cam0.json", "cam0.h5"])
def test_save_and_load_by_extension(tmp_path, pinhole_camera, name):
    path = CameraFile.save(tmp_path / name, pinhole_camera)
    assert path.name == name
    assert CameraFile.load(path) == pinhole_camera


def test_save_without_extension_defaults_to_yaml(tmp_path, pinhole_camera):
    path = CameraFile.save(tmp_path / "cam0", pinhole_camera)
    assert path.suffix == ".yaml"
    assert CameraFile.load(path) == pinhole_camera


def test_save_with_explicit_format(tmp_path, pinhole_camera):
    path = CameraFile.save(tmp_path / "cam0.txt", pinhole_camera, format=CameraFileFormat.JSON)
    assert path.suffix == ".json"


@pytest.mark.parametrize("format", list(CameraFileFormat))
def test_load_detects_content(tmp_path, pinhole_camera, format):
    saved = CameraFile.save(tmp_path / "cam0", pinhole_camera, format=format)
    renamed = saved.rename(tmp_path / "cam0.calib")
    assert CameraFile.load(renamed) == pinhole_camera


def test_load_undetectable(tmp_path):
    path = tmp_path / "cam0.calib"
    path.write_bytes(b"\x00\x01\x02")
    with pytest.raises(FileFormatError, match="Could not detect"):
        CameraFile.load(path)


def test_load_missing(tmp_path):
    with pytest.raises(FileFormatError, match="File not found"):
        CameraFile.load(tmp_path / "missing.yaml")


def test_multi_camera(tmp_path, pinhole_camera, unified_camera):
    path = CameraFile.save_all(tmp_path / "rig.json", [pinhole_camera, unified_camera])
    assert CameraFile.load_all(path) == [pinhole_camera, unified_camera]


def test_supported_extensions():
    for ext in CameraFile.get_supported_extensions():
        CameraFileFormat.from_extension(ext)


@pytest.mark.parametrize("name", ["cam0.yaml", "cam0.json", "cam0.h5"])
def test_read_node_by_extension(tmp_path, pinhole_camera, name):
    path = CameraFile.save(tmp_path / name, pinhole_camera)
    node = CameraFile.read_node(path)
    assert node["type"] == "pinhole"
    assert node["label"] == "cam0"


def test_read_node_missing(tmp_path):
    with pytest.raises(FileFormatError, match="File not found"):
        CameraFile.read_node(tmp_path / "missing.h5")
