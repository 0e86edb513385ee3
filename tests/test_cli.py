import yaml

from vision_camera.__main__ import main
from vision_camera.io.camera_file import CameraFile


def test_show(tmp_path, capsys, pinhole_camera):
    path = CameraFile.save(tmp_path / "cam0.json", pinhole_camera)
    assert main(["show", str(path)]) == 0
    node = yaml.safe_load(capsys.readouterr().out)
    assert node["type"] == "pinhole"
    assert node["label"] == "cam0"


def test_convert(tmp_path, capsys, pinhole_camera):
    source = CameraFile.save(tmp_path / "cam0.yaml", pinhole_camera)
    assert main(["convert", str(source), str(tmp_path / "cam0.h5")]) == 0
    assert CameraFile.load(tmp_path / "cam0.h5") == pinhole_camera


def test_validate_ok(tmp_path, capsys, pinhole_camera):
    path = CameraFile.save(tmp_path / "cam0.yaml", pinhole_camera)
    assert main(["validate", str(path)]) == 0
    assert "ok (pinhole)" in capsys.readouterr().out


def test_validate_reports_status(tmp_path, capsys, pinhole_node):
    pinhole_node["intrinsics"] = [1.0, 2.0, 3.0]
    path = tmp_path / "cam0.yaml"
    path.write_text(yaml.safe_dump(pinhole_node))
    assert main(["validate", str(path)]) == 1
    out = capsys.readouterr().out
    assert "wrong-parameter-count" in out
    assert "Wanted: 4, got: 3" in out


def test_missing_file_returns_error(tmp_path):
    assert main(["show", str(tmp_path / "missing.yaml")]) == 1


def test_validate_hdf5(tmp_path, capsys, pinhole_camera):
    path = CameraFile.save(tmp_path / "cam0.h5", pinhole_camera)
    assert main(["validate", str(path)]) == 0
    assert "ok (pinhole)" in capsys.readouterr().out


def test_validate_binary_file_returns_error(tmp_path, capsys, pinhole_camera):
    source = CameraFile.save(tmp_path / "cam0.h5", pinhole_camera)
    path = tmp_path / "cam0.yaml"
    path.write_bytes(source.read_bytes())
    assert main(["validate", str(path)]) == 1
    assert "Not a UTF-8 text file" in capsys.readouterr().err


def test_log_file(tmp_path, pinhole_camera):
    path = CameraFile.save(tmp_path / "cam0.yaml", pinhole_camera)
    log_file = tmp_path / "logs" / "cli.log"
    assert main(["--log-file", str(log_file), "show", str(path)]) == 0
    assert "Loaded camera from yaml" in log_file.read_text()
