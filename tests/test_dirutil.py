import pytest

from pkgjtool.dirutil import InodeType, get_size, inode_type, list_dir_contents


def test_get_size_of_file(tmp_path):
    target = tmp_path / "data.bin"
    target.write_bytes(b"x" * 123)
    assert get_size(target) == 123


def test_get_size_of_empty_file(tmp_path):
    target = tmp_path / "empty"
    target.write_bytes(b"")
    assert get_size(target) == 0


def test_get_size_missing_is_none(tmp_path):
    assert get_size(tmp_path / "missing") is None


def test_inode_type_file(tmp_path):
    target = tmp_path / "f.txt"
    target.write_text("hi")
    assert inode_type(target) is InodeType.FILE


def test_inode_type_directory(tmp_path):
    assert inode_type(tmp_path) is InodeType.DIRECTORY


def test_inode_type_missing(tmp_path):
    assert inode_type(tmp_path / "nope") is InodeType.NOT_EXIST


def test_inode_type_accepts_str(tmp_path):
    assert inode_type(str(tmp_path)) is InodeType.DIRECTORY


def test_list_dir_contents(tmp_path):
    (tmp_path / "b").write_text("")
    (tmp_path / "a").mkdir()
    (tmp_path / "c.txt").write_text("")
    assert list_dir_contents(tmp_path) == ["a", "b", "c.txt"]


def test_list_dir_contents_excludes_dot_entries(tmp_path):
    (tmp_path / "only").write_text("")
    names = list_dir_contents(tmp_path)
    assert "." not in names and ".." not in names
    assert names == ["only"]


def test_list_dir_contents_missing_is_empty(tmp_path):
    assert list_dir_contents(tmp_path / "absent") == []


def test_list_dir_contents_on_file_raises(tmp_path):
    target = tmp_path / "file"
    target.write_text("")
    with pytest.raises(NotADirectoryError):
        list_dir_contents(target)