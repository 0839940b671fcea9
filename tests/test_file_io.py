import json

import pytest

from divisible_pairs.utils.file_io import read_json_file, write_to_file


def test_round_trip_dict(tmp_path):
    path = tmp_path / "out.json"
    write_to_file({"count": 5}, str(path))
    assert read_json_file(str(path)) == {"count": 5}


def test_write_string_adds_trailing_newline(tmp_path):
    path = tmp_path / "out.txt"
    write_to_file("5", str(path))
    assert path.read_text() == "5\n"


def test_write_rejects_unsupported_type(tmp_path):
    with pytest.raises(TypeError):
        write_to_file(5, str(tmp_path / "out.txt"))


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_json_file(str(tmp_path / "missing.json"))


def test_read_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(OSError, match="Failed to read JSON"):
        read_json_file(str(path))


def test_read_json_list(tmp_path):
    path = tmp_path / "list.json"
    path.write_text(json.dumps([1, 2, 3]))
    assert read_json_file(str(path)) == [1, 2, 3]
