import pytest

from opal.fileutil import file_exists, read_file, write_file


def test_read_file(tmp_path):
    path = tmp_path / "test_read.txt"
    content = "Test content\nSecond line\nThird line"
    path.write_text(content, encoding="utf-8")
    assert read_file(path) == content


def test_read_non_existent_file(tmp_path):
    path = tmp_path / "non_existent.txt"
    with pytest.raises(OSError, match="Could not open file"):
        read_file(path)


def test_read_error_names_the_path(tmp_path):
    path = tmp_path / "missing.txt"
    with pytest.raises(OSError) as info:
        read_file(str(path))
    assert str(info.value) == f"Could not open file: {path}"


def test_write_file(tmp_path):
    path = tmp_path / "test_write.txt"
    content = "Content to write\nSecond line"
    write_file(path, content)
    assert path.read_text(encoding="utf-8") == content


def test_write_to_existing_file(tmp_path):
    path = tmp_path / "test_overwrite.txt"
    path.write_text("Initial content", encoding="utf-8")
    write_file(path, "New content")
    assert read_file(path) == "New content"


def test_write_into_missing_directory(tmp_path):
    path = tmp_path / "no_such_dir" / "test.txt"
    with pytest.raises(OSError, match="Could not open file for writing"):
        write_file(path, "Test")


def test_write_to_directory_path(tmp_path):
    with pytest.raises(OSError, match="Could not open file for writing"):
        write_file(tmp_path, "Test")


def test_file_exists(tmp_path):
    path = tmp_path / "test_exists.txt"
    path.write_text("Test", encoding="utf-8")
    assert file_exists(path) is True
    assert file_exists(tmp_path / "non_existent.txt") is False


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert read_file(path) == ""


def test_write_large_file(tmp_path):
    path = tmp_path / "large.txt"
    content = "0123456789" * (1024 * 1024 // 10)
    write_file(path, content)
    result = read_file(path)
    assert len(result) == len(content)
    assert result == content


def test_file_exists_with_special_characters(tmp_path):
    path = tmp_path / "special@#$%^&.txt"
    path.write_text("Test", encoding="utf-8")
    assert file_exists(path) is True


def test_line_endings_are_preserved(tmp_path):
    path = tmp_path / "mixed.txt"
    content = "ligne1\nligne2\r\nligne3\rligne4"
    write_file(path, content)
    assert read_file(path) == content
    assert path.read_bytes() == content.encode("utf-8")


def test_unicode_round_trip(tmp_path):
    path = tmp_path / "unicode.txt"
    content = "Caractères Unicode: 你好, こんにちは, Привет"
    write_file(str(path), content)
    assert read_file(str(path)) == content