"""Decoding of zRIF strings: base64 wrapped, zlib compressed licence files."""

from __future__ import annotations

from .puff import InflateError, puff

__all__ = ["ZRIF_DICTIONARY", "ZRIF_DICTIONARY_ID", "ZrifError", "adler32", "zrif_decode"]

ADLER32_MOD = 65521
ZLIB_DEFLATE_METHOD = 8
ZRIF_DICTIONARY_ID = 0x627D1D5D

# Preset dictionary shared by every zRIF encoder.
ZRIF_DICTIONARY = (
    b"\0" * 880
    + b"00009"
    + b"\0" * 11
    + b"000060000700008"
    + b"\0"
    + b"000030000400005"
    + b"0_00-ADDCONT00002-PCSG"
    + b"0" * 10
    + b"1-PCSE000-PCSF000-PCSC000-PCSD000-PCSA000-PCSB000"
    + bytes.fromhex("0001000100010002efcdab8967452301")
)

_OUTPUT_SIZE = 1024 + len(ZRIF_DICTIONARY)
_VALID_SIZES = (512, 1024)

_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_B64_VALUES = {char: value for value, char in enumerate(_ALPHABET)}
_B64_INVALID = 64


class ZrifError(ValueError):
    """Raised when a zRIF string cannot be decoded."""


def adler32(data: bytes) -> int:
    """Adler-32 checksum of ``data``."""
    a, b = 1, 0
    for byte in data:
        a = (a + byte) % ADLER32_MOD
        b = (b + a) % ADLER32_MOD
    return (b << 16) | a


def _base64_decode(text: str) -> bytes:
    raw = text.encode("utf-8")
    for _ in range(2):
        if raw.endswith(b"="):
            raw = raw[:-1]
    values = [_B64_VALUES.get(char, _B64_INVALID) for char in raw]
    full = len(values) - len(values) % 4

    out = bytearray()
    quads = iter(values[:full])
    for a, b, c, d in zip(quads, quads, quads, quads):
        out.append(((a << 2) + ((b & 0x30) >> 4)) & 0xFF)
        out.append(((b << 4) + (c >> 2)) & 0xFF)
        out.append(((c << 6) + d) & 0xFF)

    rest = values[full:]
    if len(rest) == 2:
        a, b = rest
        out.append(((a << 2) + ((b & 0x30) >> 4)) & 0xFF)
        out.append((b << 4) & 0xFF)
    elif len(rest) == 3:
        a, b, c = rest
        out.append(((a << 2) + ((b & 0x30) >> 4)) & 0xFF)
        out.append(((b << 4) + (c >> 2)) & 0xFF)
        out.append((c << 6) & 0xFF)
    return bytes(out)


def _zlib_inflate(raw: bytes) -> bytes:
    if len(raw) < 2 + 4:
        raise ZrifError("zRIF is too short")
    if ((raw[0] << 8) + raw[1]) % 31 != 0:
        raise ZrifError("zRIF header is corrupted")
    if raw[0] & 0xF != ZLIB_DEFLATE_METHOD:
        raise ZrifError("only deflate method supported in zRIF")

    if raw[1] & (1 << 5):
        if int.from_bytes(raw[2:6], "big") != ZRIF_DICTIONARY_ID:
            raise ZrifError("zRIF uses unknown dictionary")
        dictionary = ZRIF_DICTIONARY
        start = 6
    else:
        dictionary = b""
        start = 2

    try:
        result = puff(raw[start:len(raw) - 4], dictionary, _OUTPUT_SIZE - len(dictionary))
    except InflateError as exc:
        raise ZrifError("failed to uncompress zRIF") from exc

    trailer = start + result.consumed
    checksum = raw[trailer:trailer + 4]
    if len(checksum) < 4 or adler32(result.data) != int.from_bytes(checksum, "big"):
        raise ZrifError("zRIF is corrupted, wrong checksum")
    return result.data


def zrif_decode(text: str) -> bytes:
    """Decode a zRIF string into the raw licence bytes (512 or 1024 long)."""
    data = _zlib_inflate(_base64_decode(text))
    if len(data) not in _VALID_SIZES:
        raise ZrifError("wrong size of zRIF, is it corrupted?")
    return data