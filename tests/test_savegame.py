import pytest

from almondshell.events import Event, EventType
from almondshell.savegame import compress_data, decompress_data, load_game, save_game


def _sample_events():
    return [
        Event(EventType.MOUSE_BUTTON_CLICK, {"action": "click"}, 50.0, 100.0, 0, "A"),
        Event(EventType.KEY_PRESS, {"action": "press"}, 0.0, 0.0, 65, ""),
    ]


def _write_raw(path, text):
    path.write_bytes(compress_data(text.encode("utf-8")))


def test_round_trip(tmp_path):
    path = tmp_path / "savegame.dat"
    events = _sample_events()
    save_game(path, events)
    assert load_game(path) == events


def test_serialized_form(tmp_path):
    path = tmp_path / "savegame.dat"
    save_game(path, _sample_events()[:1])
    text = decompress_data(path.read_bytes()).decode("utf-8")
    assert text == "MouseButtonClick:action=click;x=50.000000;y=100.000000;key=0;text=A;\n"


def test_compress_round_trip():
    payload = b"KeyPress:key=65;\n" * 20
    compressed = compress_data(payload)
    assert len(compressed) < len(payload)
    assert decompress_data(compressed) == payload


def test_corrupt_data_raises():
    with pytest.raises(ValueError):
        decompress_data(b"definitely not zlib")


def test_lines_without_type_are_skipped(tmp_path):
    path = tmp_path / "raw.dat"
    _write_raw(path, "garbage\nKeyPress:key=65;\n")
    events = load_game(path)
    assert [(e.type, e.key) for e in events] == [(EventType.KEY_PRESS, 65)]


def test_unknown_type_and_text_truncation(tmp_path):
    path = tmp_path / "raw.dat"
    _write_raw(path, "Wobble:text=ab;mode=fast;\n")
    (event,) = load_game(path)
    assert event.type is EventType.UNKNOWN
    assert event.text == "a"
    assert event.data == {"mode": "fast"}


def test_unterminated_line_and_field_ignored(tmp_path):
    path = tmp_path / "raw.dat"
    _write_raw(path, "MouseMove:x=1.5;y=2.5\nKeyPress:key=1;")
    (event,) = load_game(path)
    assert event.type is EventType.MOUSE_MOVE
    assert event.x == 1.5
    assert event.y == 0.0


def test_empty_history(tmp_path):
    path = tmp_path / "empty.dat"
    save_game(path, [])
    assert load_game(path) == []


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_game(tmp_path / "missing.dat")