import io

import pytest

from towerdefense.keyboard import InputEvent, KeyReader, event_for_key


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("\x1b", InputEvent.ESCAPE),
        (" ", InputEvent.SPACE),
        ("a", InputEvent.KEY_A),
        ("A", InputEvent.KEY_A),
        ("q", InputEvent.NONE),
        ("", InputEvent.NONE),
    ],
)
def test_event_for_key(ch, expected):
    assert event_for_key(ch) is expected


def test_reader_reads_sequence_of_keys():
    reader = KeyReader(io.StringIO(" aq\x1b"))
    events = [reader.read_event(0) for _ in range(5)]
    assert events == [
        InputEvent.SPACE,
        InputEvent.KEY_A,
        InputEvent.NONE,
        InputEvent.ESCAPE,
        InputEvent.NONE,
    ]


def test_reader_as_context_manager():
    with KeyReader(io.StringIO("A")) as keys:
        assert keys.read_event() is InputEvent.KEY_A