import pytest

from xlwgen.paths import get_dir, strip_path, write_output_file
from xlwgen.tokenizer import GeneratorError


@pytest.mark.parametrize(
    "path, expected",
    [
        ("dir/file.h", "file.h"),
        ("a\\b\\c.h", "c.h"),
        ("file.h", "file.h"),
        ("/file.h", "/file.h"),
        ("dir/", ""),
        ("", ""),
    ],
)
def test_strip_path(path, expected):
    assert strip_path(path) == expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("dir/sub/file.h", "dir/sub"),
        ("a\\b/c.h", "a\\b"),
        ("file.h", ""),
        ("/file.h", ""),
        ("", ""),
    ],
)
def test_get_dir(path, expected):
    assert get_dir(path) == expected


def test_dir_and_name_rejoin():
    path = "xlw/InterfaceGenerator/Outputter.cpp"
    assert get_dir(path) + "/" + strip_path(path) == path


def test_write_output_file_round_trip(tmp_path):
    target = tmp_path / "out.cpp"
    content = "line one\nline two\n"
    write_output_file(str(target), content)
    assert target.read_text(encoding="utf-8") == content


def test_write_output_file_missing_directory(tmp_path):
    target = tmp_path / "missing" / "out.cpp"
    with pytest.raises(GeneratorError):
        write_output_file(str(target), "x")