import pytest

from pkgjtool.fileutil import delete_dir, file_exists, load, mkdirs, rename, rm, save


def test_save_and_load_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    payload = bytes(range(256)) * 3
    save(target, payload)
    assert load(target) == payload


def test_save_truncates(tmp_path):
    target = tmp_path / "data.bin"
    save(target, b"a long first content")
    save(target, b"short")
    assert load(target) == b"short"


def test_load_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "missing")


def test_file_exists(tmp_path):
    target = tmp_path / "f"
    assert file_exists(target) is False
    save(target, b"x")
    assert file_exists(target) is True
    assert file_exists(tmp_path) is True


def test_mkdirs_creates_nested_and_is_idempotent(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    mkdirs(target)
    assert target.is_dir()
    mkdirs(str(target))
    assert target.is_dir()


def test_rename_replaces_target(tmp_path):
    source = tmp_path / "src"
    target = tmp_path / "dst"
    save(source, b"new")
    save(target, b"old")
    rename(source, target)
    assert load(target) == b"new"
    assert file_exists(source) is False


def test_rename_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError, match="failed to rename"):
        rename(tmp_path / "nope", tmp_path / "dst")


def test_rm_removes_and_ignores_missing(tmp_path):
    target = tmp_path / "f"
    save(target, b"x")
    rm(target)
    assert file_exists(target) is False
    rm(target)
    assert file_exists(target) is False


def test_delete_dir_removes_tree(tmp_path):
    root = tmp_path / "root"
    mkdirs(root / "sub" / "deeper")
    save(root / "top.txt", b"1")
    save(root / "sub" / "mid.txt", b"2")
    save(root / "sub" / "deeper" / "low.txt", b"3")
    delete_dir(root)
    assert file_exists(root) is False
    assert file_exists(tmp_path) is True


def test_delete_dir_missing_is_silent(tmp_path):
    target = tmp_path / "absent"
    delete_dir(target)
    assert file_exists(target) is False