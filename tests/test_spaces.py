import pytest

from ossim.spaces import count_spaces, main


def test_count_spaces_simple(tmp_path):
    target = tmp_path / "t.txt"
    target.write_text("a b c\n")
    assert count_spaces(target) == 2


def test_count_spaces_empty_file(tmp_path):
    target = tmp_path / "empty.txt"
    target.write_text("")
    assert count_spaces(target) == 0


def test_tabs_and_newlines_are_not_spaces(tmp_path):
    target = tmp_path / "tabs.txt"
    target.write_text("\t\t\n\n")
    assert count_spaces(target) == 0


def test_count_is_additive_over_concatenation(tmp_path):
    first = "one two  three"
    second = " four   five "
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    both = tmp_path / "both.txt"
    a.write_text(first)
    b.write_text(second)
    both.write_text(first + second)
    assert count_spaces(both) == count_spaces(a) + count_spaces(b)


def test_large_file_spanning_chunks(tmp_path):
    target = tmp_path / "big.txt"
    target.write_bytes(b" x" * 100_000)
    assert count_spaces(target) == 100_000


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        count_spaces(tmp_path / "missing.txt")


def test_main_prints_count(tmp_path, capsys):
    target = tmp_path / "t.txt"
    target.write_text("a b c\n")
    assert main([str(target)]) == 0
    assert capsys.readouterr().out == "no of spaces 2\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "unable to open a file" in capsys.readouterr().out


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out