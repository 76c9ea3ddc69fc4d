"""A fixed 1-byte-packed binary record layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_LAYOUT = struct.Struct("<IHIQ")


@dataclass(frozen=True)
class PackedRecord:
    """A 32-bit id, 16-bit type, 32-bit data and 64-bit large data field."""

    id: int
    type: int
    data: int
    large_data: int

    def pack(self) -> bytes:
        """Serialise to the packed little-endian layout."""
        try:
            return _LAYOUT.pack(self.id, self.type, self.data, self.large_data)
        except struct.error as exc:
            raise ValueError(f"field out of range: {exc}") from None


def unpack_record(data: bytes) -> PackedRecord:
    """Parse a record from its packed form."""
    if len(data) != _LAYOUT.size:
        raise ValueError(f"expected {_LAYOUT.size} bytes, got {len(data)}")
    return PackedRecord(*_LAYOUT.unpack(data))