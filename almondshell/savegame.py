"""Saving and loading event histories as zlib-compressed text."""

from __future__ import annotations

import os
import zlib
from typing import Iterable, Union

from almondshell.events import Event, event_type_to_string, string_to_event_type

PathLike = Union[str, os.PathLike]


def compress_data(data: bytes) -> bytes:
    """Compress bytes with zlib."""
    return zlib.compress(data)


def decompress_data(data: bytes) -> bytes:
    """Decompress zlib data."""
    try:
        return zlib.decompress(data)
    except zlib.error as exc:
        raise ValueError(f"corrupt save data: {exc}") from None


def _serialize_event(event: Event) -> str:
    fields = [f"{key}={value};" for key, value in sorted(event.data.items())]
    fields += [
        f"x={event.x:f};",
        f"y={event.y:f};",
        f"key={event.key};",
        f"text={event.text};",
    ]
    return f"{event_type_to_string(event.type)}:{''.join(fields)}\n"


def _parse_line(line: str) -> Event | None:
    type_name, sep, details = line.partition(":")
    if not sep:
        return None
    event = Event(type=string_to_event_type(type_name))
    # Only fields terminated by ';' count; anything after the last one is dropped.
    for key_value in details.split(";")[:-1]:
        key, eq, value = key_value.partition("=")
        if not eq:
            continue
        if key == "x":
            event.x = float(value)
        elif key == "y":
            event.y = float(value)
        elif key == "key":
            event.key = int(value)
        elif key == "text":
            event.text = value[:1]
        else:
            event.data[key] = value
    return event


def save_game(filename: PathLike, events: Iterable[Event]) -> None:
    """Write events to a compressed save file."""
    text = "".join(_serialize_event(event) for event in events)
    with open(filename, "wb") as handle:
        handle.write(compress_data(text.encode("utf-8")))


def load_game(filename: PathLike) -> list[Event]:
    """Read events from a compressed save file."""
    with open(filename, "rb") as handle:
        text = decompress_data(handle.read()).decode("utf-8")
    # The final piece has no terminating newline and is ignored.
    lines = text.split("\n")[:-1]
    return [event for event in map(_parse_line, lines) if event is not None]