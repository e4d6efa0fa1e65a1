"""SHA-256 hashing and the HMAC-SHA256 variant used for package keys."""

from __future__ import annotations

import struct
from typing import Iterable, Sequence

__all__ = [
    "SHA256_BLOCK_SIZE",
    "SHA256_DIGEST_SIZE",
    "SHA256_MAC_LEN",
    "Sha256",
    "sha256_vector",
    "hmac_sha256_vector",
    "hmac_sha256",
]

SHA256_BLOCK_SIZE = 64
SHA256_DIGEST_SIZE = 32
SHA256_MAC_LEN = 32

_MASK = 0xFFFFFFFF
_MAX_HMAC_PARTS = 5

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1,
    0x923F82A4, 0xAB1C5ED5, 0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174, 0xE49B69C1, 0xEFBE4786,
    0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147,
    0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85, 0xA2BFE8A1, 0xA81A664B,
    0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A,
    0x5B9CCA4F, 0x682E6FF3, 0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

_BLOCK_WORDS = struct.Struct(">16I")
_STATE_WORDS = struct.Struct(">8I")


def _ror(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def _compress(state: list[int], block: bytes) -> None:
    w = list(_BLOCK_WORDS.unpack(block))
    for r in range(16, 64):
        x15 = w[r - 15]
        x2 = w[r - 2]
        gamma0 = _ror(x15, 7) ^ _ror(x15, 18) ^ (x15 >> 3)
        gamma1 = _ror(x2, 17) ^ _ror(x2, 19) ^ (x2 >> 10)
        w.append((gamma1 + gamma0 + w[r - 7] + w[r - 16]) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, word in zip(_K, w):
        sigma1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t = (k + word + h + sigma1 + ch) & _MASK
        d = (d + t) & _MASK
        sigma0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = ((a | b) & c) | (a & b)
        t = (t + sigma0 + maj) & _MASK
        h, g, f, e, d, c, b, a = g, f, e, d, c, b, a, t

    for i, value in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + value) & _MASK


class Sha256:
    """Incremental SHA-256 hash."""

    def __init__(self, data: bytes = b"") -> None:
        self._state = list(_INITIAL_STATE)
        self._pending = bytearray()
        self._count = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> "Sha256":
        """Feed more bytes into the hash; returns the hasher itself."""
        if not data:
            return self
        self._count = (self._count + len(data)) & 0xFFFFFFFFFFFFFFFF
        pending = self._pending
        pending += data
        full = len(pending) - len(pending) % SHA256_BLOCK_SIZE
        view = memoryview(pending)
        for offset in range(0, full, SHA256_BLOCK_SIZE):
            _compress(self._state, bytes(view[offset:offset + SHA256_BLOCK_SIZE]))
        view.release()
        del pending[:full]
        return self

    def digest(self) -> bytes:
        """Return the digest of everything fed so far, leaving the hasher usable."""
        state = list(self._state)
        last = self._count % SHA256_BLOCK_SIZE
        if last < SHA256_BLOCK_SIZE - 8:
            pad = SHA256_BLOCK_SIZE - 8 - last
        else:
            pad = 2 * SHA256_BLOCK_SIZE - 8 - last
        bit_length = (self._count * 8) & 0xFFFFFFFFFFFFFFFF
        tail = (bytes(self._pending) + b"\x80" + bytes(pad - 1)
                + struct.pack(">Q", bit_length))
        for offset in range(0, len(tail), SHA256_BLOCK_SIZE):
            _compress(state, tail[offset:offset + SHA256_BLOCK_SIZE])
        return _STATE_WORDS.pack(*state)

    def hexdigest(self) -> str:
        """Return the digest as a lower-case hexadecimal string."""
        return self.digest().hex()


def sha256_vector(parts: Iterable[bytes]) -> bytes:
    """Hash the concatenation of ``parts``."""
    hasher = Sha256()
    for part in parts:
        hasher.update(part)
    return hasher.digest()


def hmac_sha256_vector(key: bytes, parts: Sequence[bytes]) -> bytes:
    """HMAC-SHA256 over the concatenation of at most five ``parts``.

    The outer pad is derived from the inner one by XOR with 0x6A, as the
    console firmware does; since 0x36 ^ 0x6A == 0x5C the result matches
    standard HMAC-SHA256.
    """
    parts = list(parts)
    if len(parts) > _MAX_HMAC_PARTS:
        raise ValueError("Too many parts for HMAC-SHA256")

    key = bytes(key)
    if len(key) > SHA256_BLOCK_SIZE:
        key = sha256_vector([key])

    k_pad = bytes(b ^ 0x36 for b in key.ljust(SHA256_BLOCK_SIZE, b"\0"))
    inner = sha256_vector([k_pad, *parts])

    k_pad = bytes(b ^ 0x6A for b in k_pad)
    return sha256_vector([k_pad, inner])


def hmac_sha256(key: bytes, data: bytes) -> bytes:
    """HMAC-SHA256 of a single buffer."""
    return hmac_sha256_vector(key, [data])