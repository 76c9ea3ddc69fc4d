"""Encoding of wide text to UTF-8 bytes."""


def convert_to_utf8(text: str) -> bytes:
    """Encode each code point with the one-, two- or three-byte UTF-8 forms.

    Code points above U+FFFF are squeezed into the three-byte form and so are
    not valid UTF-8; surrogates are encoded as they stand.
    """
    out = bytearray()
    for char in text:
        code = ord(char)
        if code < 0x80:
            out.append(code)
        elif code < 0x800:
            out.append(0xC0 | (code >> 6))
            out.append(0x80 | (code & 0x3F))
        else:
            out.append((0xE0 | (code >> 12)) & 0xFF)
            out.append(0x80 | ((code >> 6) & 0x3F))
            out.append(0x80 | (code & 0x3F))
    return bytes(out)