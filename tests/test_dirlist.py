import pytest

from ossim.dirlist import MISSING_MESSAGE, list_directory, main


@pytest.fixture
def populated(tmp_path):
    (tmp_path / "alpha.txt").write_text("a")
    (tmp_path / "beta.txt").write_text("b")
    (tmp_path / "sub").mkdir()
    return tmp_path


def test_list_directory_includes_dot_entries_first(populated):
    names = list_directory(populated)
    assert names[:2] == [".", ".."]


def test_list_directory_lists_every_entry(populated):
    names = list_directory(populated)
    assert set(names[2:]) == {"alpha.txt", "beta.txt", "sub"}
    assert len(names) == 5


def test_list_directory_empty_directory(tmp_path):
    assert list_directory(tmp_path) == [".", ".."]


def test_list_directory_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_directory(tmp_path / "nope")


def test_list_directory_on_file_raises(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x")
    with pytest.raises(NotADirectoryError):
        list_directory(target)


def test_main_with_argument_prints_header_and_names(populated, capsys):
    assert main([str(populated)]) == 0
    out = capsys.readouterr().out
    assert f"contents of the directory {populated} are" in out
    lines = out.splitlines()
    assert "alpha.txt" in lines
    assert "beta.txt" in lines
    assert "." in lines


def test_main_prompts_when_no_argument(populated, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": f"{populated} ignored")
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "sub" in lines
    assert ".." in lines


def test_main_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert MISSING_MESSAGE in capsys.readouterr().out


def test_main_empty_answer_is_missing(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "   ")
    assert main([]) == 1
    assert MISSING_MESSAGE in capsys.readouterr().out