"""Unit tests for util/fs.py"""

from cwrap.util.fs import copy_file, copy_tree


def test_copy_file_creates_parents(tmp_path):
    """copy_file creates missing destination directories."""
    src = tmp_path / "a.txt"
    src.write_text("hello")
    dest = copy_file(src, tmp_path / "x" / "y" / "a.txt")
    assert dest.read_text() == "hello"


def test_copy_tree_mirrors_and_overwrites(tmp_path):
    """copy_tree mirrors nested files into an existing destination."""
    src = tmp_path / "static"
    (src / "img").mkdir(parents=True)
    (src / "img" / "logo.svg").write_text("<svg/>")
    dest = tmp_path / "build" / "static"
    (dest / "img").mkdir(parents=True)
    (dest / "img" / "logo.svg").write_text("old")
    copy_tree(src, dest)
    assert (dest / "img" / "logo.svg").read_text() == "<svg/>"
