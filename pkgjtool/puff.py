"""Raw DEFLATE decoder with support for a preset dictionary."""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

__all__ = ["InflateError", "InflateResult", "puff"]

MAXBITS = 15
MAXLCODES = 286
MAXDCODES = 30
MAXCODES = MAXLCODES + MAXDCODES
FIXLCODES = 288

_LENS = (3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 15, 17, 19, 23, 27, 31,
         35, 43, 51, 59, 67, 83, 99, 115, 131, 163, 195, 227, 258)
_LEXT = (0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 2, 2, 2, 2,
         3, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 0)
_DISTS = (1, 2, 3, 4, 5, 7, 9, 13, 17, 25, 33, 49, 65, 97, 129, 193,
          257, 385, 513, 769, 1025, 1537, 2049, 3073, 4097, 6145,
          8193, 12289, 16385, 24577)
_DEXT = (0, 0, 0, 0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6,
         7, 7, 8, 8, 9, 9, 10, 10, 11, 11, 12, 12, 13, 13)
_ORDER = (16, 17, 18, 0, 8, 7, 9, 6, 10, 5, 11, 4, 12, 3, 13, 2, 14, 1, 15)

_MESSAGES = {
    2: "not enough input",
    1: "not enough output space",
    -1: "invalid block type",
    -2: "stored block length did not match its complement",
    -3: "too many length or distance codes",
    -4: "code lengths code is incomplete",
    -5: "repeat instruction without a previous length",
    -6: "too many code lengths",
    -7: "literal/length code is incomplete",
    -8: "distance code is incomplete",
    -9: "missing end-of-block code",
    -10: "invalid code",
    -11: "distance too far back",
}


class InflateError(ValueError):
    """Raised when a DEFLATE stream cannot be decoded.

    ``code`` keeps the classic status: 2 for truncated input, 1 for
    exhausted output space and negative values for malformed data.
    """

    def __init__(self, code: int) -> None:
        super().__init__(_MESSAGES.get(code, "inflate error"))
        self.code = code


class InflateResult(NamedTuple):
    """Decompressed bytes and the number of input bytes consumed."""

    data: bytes
    consumed: int


class _Huffman:
    __slots__ = ("count", "symbol")

    def __init__(self, count: list[int], symbol: list[int]) -> None:
        self.count = count
        self.symbol = symbol


def _construct(lengths: Sequence[int]) -> tuple[_Huffman, int]:
    """Build a canonical Huffman table; the int is 0 if complete,
    positive if incomplete and negative if over-subscribed."""
    count = [0] * (MAXBITS + 1)
    for length in lengths:
        count[length] += 1
    symbol = [0] * len(lengths)
    table = _Huffman(count, symbol)
    if count[0] == len(lengths):
        return table, 0

    left = 1
    for length in range(1, MAXBITS + 1):
        left <<= 1
        left -= count[length]
        if left < 0:
            return table, left

    offs = [0] * (MAXBITS + 1)
    for length in range(1, MAXBITS):
        offs[length + 1] = offs[length] + count[length]
    for sym, length in enumerate(lengths):
        if length:
            symbol[offs[length]] = sym
            offs[length] += 1
    return table, left


def _fixed_tables() -> tuple[_Huffman, _Huffman]:
    lengths = [8] * 144 + [9] * 112 + [7] * 24 + [8] * 8
    lencode, _ = _construct(lengths)
    distcode, _ = _construct([5] * MAXDCODES)
    return lencode, distcode


_FIXED_LENCODE, _FIXED_DISTCODE = _fixed_tables()


class _Inflater:
    def __init__(self, source: bytes, dictionary: bytes, max_output: Optional[int]) -> None:
        self.src = source
        self.incnt = 0
        self.bitbuf = 0
        self.bitcnt = 0
        self.out = bytearray(dictionary)
        self.dictlen = len(dictionary)
        self.max_output = max_output

    def _room(self, needed: int) -> None:
        if self.max_output is None:
            return
        if len(self.out) - self.dictlen + needed > self.max_output:
            raise InflateError(1)

    def bits(self, need: int) -> int:
        val = self.bitbuf
        while self.bitcnt < need:
            if self.incnt == len(self.src):
                raise InflateError(2)
            val |= self.src[self.incnt] << self.bitcnt
            self.incnt += 1
            self.bitcnt += 8
        self.bitbuf = val >> need
        self.bitcnt -= need
        return val & ((1 << need) - 1)

    def stored(self) -> None:
        self.bitbuf = 0
        self.bitcnt = 0
        src = self.src
        if self.incnt + 4 > len(src):
            raise InflateError(2)
        length = src[self.incnt] | (src[self.incnt + 1] << 8)
        if (src[self.incnt + 2] != (~length & 0xFF)
                or src[self.incnt + 3] != ((~length >> 8) & 0xFF)):
            raise InflateError(-2)
        self.incnt += 4
        if self.incnt + length > len(src):
            raise InflateError(2)
        self._room(length)
        self.out += src[self.incnt:self.incnt + length]
        self.incnt += length

    def decode(self, table: _Huffman) -> int:
        bitbuf = self.bitbuf
        left = self.bitcnt
        code = first = index = 0
        length = 1
        position = 1
        while True:
            while left:
                left -= 1
                code |= bitbuf & 1
                bitbuf >>= 1
                count = table.count[position]
                position += 1
                if code - count < first:
                    self.bitbuf = bitbuf
                    self.bitcnt = (self.bitcnt - length) & 7
                    return table.symbol[index + (code - first)]
                index += count
                first += count
                first <<= 1
                code <<= 1
                length += 1
            left = (MAXBITS + 1) - length
            if left == 0:
                break
            if self.incnt == len(self.src):
                raise InflateError(2)
            bitbuf = self.src[self.incnt]
            self.incnt += 1
            if left > 8:
                left = 8
        raise InflateError(-10)

    def codes(self, lencode: _Huffman, distcode: _Huffman) -> None:
        out = self.out
        while True:
            symbol = self.decode(lencode)
            if symbol < 256:
                self._room(1)
                out.append(symbol)
            elif symbol == 256:
                return
            else:
                symbol -= 257
                if symbol >= 29:
                    raise InflateError(-10)
                length = _LENS[symbol] + self.bits(_LEXT[symbol])
                symbol = self.decode(distcode)
                dist = _DISTS[symbol] + self.bits(_DEXT[symbol])
                if dist > len(out):
                    raise InflateError(-11)
                self._room(length)
                if dist >= length:
                    start = len(out) - dist
                    out += out[start:start + length]
                else:
                    for _ in range(length):
                        out.append(out[-dist])

    def dynamic(self) -> None:
        nlen = self.bits(5) + 257
        ndist = self.bits(5) + 1
        ncode = self.bits(4) + 4
        if nlen > MAXLCODES or ndist > MAXDCODES:
            raise InflateError(-3)

        lengths = [0] * MAXCODES
        for position in _ORDER[:ncode]:
            lengths[position] = self.bits(3)
        lencode, err = _construct(lengths[:19])
        if err != 0:
            raise InflateError(-4)

        index = 0
        total = nlen + ndist
        while index < total:
            symbol = self.decode(lencode)
            if symbol < 16:
                lengths[index] = symbol
                index += 1
                continue
            repeated = 0
            if symbol == 16:
                if index == 0:
                    raise InflateError(-5)
                repeated = lengths[index - 1]
                symbol = 3 + self.bits(2)
            elif symbol == 17:
                symbol = 3 + self.bits(3)
            else:
                symbol = 11 + self.bits(7)
            if index + symbol > total:
                raise InflateError(-6)
            lengths[index:index + symbol] = [repeated] * symbol
            index += symbol

        if lengths[256] == 0:
            raise InflateError(-9)

        lencode, err = _construct(lengths[:nlen])
        if err and (err < 0 or nlen != lencode.count[0] + lencode.count[1]):
            raise InflateError(-7)
        distcode, err = _construct(lengths[nlen:nlen + ndist])
        if err and (err < 0 or ndist != distcode.count[0] + distcode.count[1]):
            raise InflateError(-8)

        self.codes(lencode, distcode)

    def run(self) -> InflateResult:
        while True:
            last = self.bits(1)
            block_type = self.bits(2)
            if block_type == 0:
                self.stored()
            elif block_type == 1:
                self.codes(_FIXED_LENCODE, _FIXED_DISTCODE)
            elif block_type == 2:
                self.dynamic()
            else:
                raise InflateError(-1)
            if last:
                break
        return InflateResult(bytes(self.out[self.dictlen:]), self.incnt)


def puff(source: bytes, dictionary: bytes = b"", max_output: Optional[int] = None) -> InflateResult:
    """Decode a raw DEFLATE stream.

    ``dictionary`` is preset history that back-references may reach into;
    it is not part of the returned data.  ``max_output`` limits the number
    of decompressed bytes (``None`` for no limit).
    """
    return _Inflater(bytes(source), bytes(dictionary), max_output).run()