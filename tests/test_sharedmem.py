import pytest

from ossim.sharedmem import DEFAULT_DATA, SEGMENT_SIZE, main, write_and_read


def test_round_trip_default_data():
    assert write_and_read(DEFAULT_DATA) == "poooda"


@pytest.mark.parametrize("text", ["", "hello world", "x" * (SEGMENT_SIZE - 1), "héllo"])
def test_round_trip(text):
    assert write_and_read(text) == text


def test_exact_fit_including_terminator():
    assert write_and_read("poooda", size=7) == "poooda"


def test_too_long_raises():
    with pytest.raises(ValueError):
        write_and_read("poooda", size=6)


def test_default_size_limit():
    with pytest.raises(ValueError):
        write_and_read("x" * SEGMENT_SIZE)


def test_read_stops_at_nul():
    assert write_and_read("ab\0cd") == "ab"


def test_main_reports_each_step(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Creating a new shared memory segment" in out
    assert "DATA: poooda" in out
    assert "Removed successfully." in out


def test_main_with_custom_data(capsys):
    assert main(["custom text"]) == 0
    assert "DATA: custom text" in capsys.readouterr().out


def test_main_rejects_oversized_data(capsys):
    assert main(["x" * SEGMENT_SIZE]) == 1
    assert "DATA:" not in capsys.readouterr().out