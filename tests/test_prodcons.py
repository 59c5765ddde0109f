import io

import pytest

from ossim.prodcons import BoundedBuffer, BufferEmpty, BufferFull, main


def test_new_buffer_is_empty():
    buffer = BoundedBuffer()
    assert buffer.count == 0
    assert buffer.free == buffer.capacity


def test_consume_from_empty_raises():
    with pytest.raises(BufferEmpty):
        BoundedBuffer().consume()


def test_produce_numbers_items_in_sequence():
    buffer = BoundedBuffer()
    assert [buffer.produce() for _ in range(buffer.capacity)] == list(
        range(1, buffer.capacity + 1)
    )


def test_produce_into_full_raises():
    buffer = BoundedBuffer(capacity=2)
    buffer.produce()
    buffer.produce()
    with pytest.raises(BufferFull):
        buffer.produce()
    assert buffer.count == 2


def test_consume_returns_latest_item():
    buffer = BoundedBuffer()
    first = buffer.produce()
    second = buffer.produce()
    assert buffer.consume() == second
    assert buffer.consume() == first
    assert buffer.count == 0


def test_slots_always_add_up_to_capacity():
    buffer = BoundedBuffer(capacity=4)
    for action in ["p", "p", "c", "p", "p", "p", "c", "c"]:
        if action == "p":
            buffer.produce()
        else:
            buffer.consume()
        assert buffer.count + buffer.free == buffer.capacity


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedBuffer(capacity=-1)


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1 1\n2\n9\n3\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "BUFFER IS EMPTY!" in out
    assert "Producer produces item 1" in out
    assert "Producer produces item 2" in out
    assert "Consumer consumes item 2" in out
    assert "Invalid choice! Please enter 1, 2, or 3." in out
    assert out.rstrip().endswith("Exiting program...")


def test_main_reports_full_buffer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 1 1 3"))
    assert main([]) == 0
    assert "BUFFER IS FULL!" in capsys.readouterr().out


def test_main_ends_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 0
    assert "Exiting program..." not in capsys.readouterr().out