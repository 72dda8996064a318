import os

import pytest

from oslabs.cp1 import copy, main


def test_copy_round_trip(tmp_path):
    data = os.urandom(9000)
    src = tmp_path / "src"
    src.write_bytes(data)
    dst = tmp_path / "dst"
    copy(src, dst)
    assert dst.read_bytes() == data


def test_copy_overwrites_longer_destination(tmp_path):
    src = tmp_path / "src"
    src.write_bytes(b"short")
    dst = tmp_path / "dst"
    dst.write_bytes(b"a much longer previous content")
    copy(src, dst)
    assert dst.read_bytes() == b"short"


def test_empty_source_fails(tmp_path):
    src = tmp_path / "empty"
    src.write_bytes(b"")
    with pytest.raises(OSError):
        copy(src, tmp_path / "dst")


def test_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy(tmp_path / "missing", tmp_path / "dst")
    assert not (tmp_path / "dst").exists()


def test_main(tmp_path):
    src = tmp_path / "src"
    src.write_bytes(b"content")
    dst = tmp_path / "dst"
    assert main([str(src), str(dst)]) == 0
    assert dst.read_bytes() == b"content"
    assert main([str(src)]) == 1
    assert main([str(tmp_path / "nope"), str(dst)]) == 1