# bohelper/hexstring.py

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

# Width of the platform's native unsigned word (usize), in bits.
NATIVE_WORD_BITS = struct.calcsize("P") * 8
NATIVE_WORD_MAX = (1 << NATIVE_WORD_BITS) - 1

# Accepted hex digits as inclusive code-point ranges: 0-9, A-F, a-f.
HEX_DIGIT_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x30, 0x39),
    (0x41, 0x46),
    (0x61, 0x66),
)

# Canonical unit digits: 0-9, a-f.
CANONICAL_HEX_DIGIT_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x30, 0x39),
    (0x61, 0x66),
)


# ---------------- Errors ----------------
class BoHelperError(Exception):
    """Base class for errors raised by bohelper."""


class InvalidHexFragment(BoHelperError, ValueError):
    """A fragment could not be turned into a :class:`HexByte`.

    Raised when the fragment is longer than two characters or holds a
    character outside ``0-9A-Fa-f``. ``character`` is set for bad digits,
    ``length`` for over-long fragments. ``index`` is the unit position when
    the fragment came from a longer hex string.
    """

    def __init__(
        self,
        fragment: str,
        *,
        character: Optional[str] = None,
        length: Optional[int] = None,
        index: Optional[int] = None,
    ) -> None:
        self.fragment = fragment
        self.character = character
        self.length = length
        self.index = index
        super().__init__(self._message())

    def _message(self) -> str:
        if self.character is not None:
            msg = f"cannot instantiate a HexByte with character: {self.character!r}"
        else:
            msg = f"HexByte contents must be 2 characters (at most 2 before padding), provided: {self.length}"
        if self.index is not None:
            msg += f" (unit {self.index}, fragment {self.fragment!r})"
        return msg

    def at_index(self, index: int) -> "InvalidHexFragment":
        """Return a copy of this error located at unit ``index``."""
        return InvalidHexFragment(
            self.fragment, character=self.character, length=self.length, index=index
        )


def is_hex_digit(c: str, ranges: Tuple[Tuple[int, int], ...] = HEX_DIGIT_RANGES) -> bool:
    cp = ord(c)
    return any(lo <= cp <= hi for lo, hi in ranges)


# ---------------- Endianness ----------------
class Endianness(str, Enum):
    BIG = "big"
    LITTLE = "little"

    def __str__(self) -> str:
        return self.value


DEFAULT_ENDIANNESS = Endianness.LITTLE


# ---------------- Hex unit ----------------
@dataclass(frozen=True)
class HexByte:
    """Two lowercase hexadecimal characters, making up one byte."""

    contents: str

    def __post_init__(self) -> None:
        if len(self.contents) != 2:
            raise InvalidHexFragment(self.contents, length=len(self.contents))
        for c in self.contents:
            if not is_hex_digit(c, CANONICAL_HEX_DIGIT_RANGES):
                raise InvalidHexFragment(self.contents, character=c)

    @classmethod
    def from_hex_str(cls, hex_byte: str) -> HexByte:
        """Validate a 0-2 character fragment into a canonical ``HexByte``.

        Shorter fragments are left-padded with ``'0'`` ("f" → "0f", "" → "00").
        """
        if len(hex_byte) > 2:
            raise InvalidHexFragment(hex_byte, length=len(hex_byte))

        padded = hex_byte.rjust(2, "0")
        for c in padded:
            if not is_hex_digit(c):
                raise InvalidHexFragment(hex_byte, character=c)

        return cls(padded.lower())

    @classmethod
    def from_char(cls, c: str) -> HexByte:
        """Encode a single character's code point as one unit.

        Only code points up to 0xFF fit; anything wider raises
        :class:`InvalidHexFragment`. Use :func:`char_to_hex_bytes` for the
        multi-unit encoding.
        """
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return cls.from_hex_str(f"{ord(c):x}")

    @classmethod
    def from_int(cls, value: int) -> HexByte:
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte value out of range: {value}")
        return cls(f"{value:02x}")

    def __int__(self) -> int:
        return int(self.contents, 16)

    def __str__(self) -> str:
        return self.contents


def char_to_hex_bytes(c: str) -> List[HexByte]:
    """Encode a character's full code point as big-endian units.

    "A" → [41], "é" → [e9], "Ā" → [01, 00], "😀" → [01, f6, 00].
    """
    digits = f"{ord(c):x}"
    if len(digits) % 2:
        digits = "0" + digits
    return [HexByte(digits[i : i + 2]) for i in range(0, len(digits), 2)]


# ---------------- Hex sequence ----------------
@dataclass(frozen=True)
class HexString:
    """An ordered run of :class:`HexByte` tagged with its byte order.

    The tag always describes the physical order of ``hex_bytes``: changing
    it reverses the units, so the encoded value stays the same. Every
    conversion returns a new instance.
    """

    hex_bytes: Tuple[HexByte, ...]
    endianness: Endianness

    def __post_init__(self) -> None:
        units = tuple(self.hex_bytes)
        for u in units:
            if not isinstance(u, HexByte):
                raise TypeError(f"expected HexByte, got {type(u).__name__}")
        object.__setattr__(self, "hex_bytes", units)
        object.__setattr__(self, "endianness", Endianness(self.endianness))

    # -- construction --
    @classmethod
    def from_hex_bytes(
        cls,
        hex_bytes: Iterable[HexByte],
        source_endianness: Endianness,
        target_endianness: Endianness,
    ) -> HexString:
        source = Endianness(source_endianness)
        target = Endianness(target_endianness)
        units = tuple(hex_bytes)
        if source != target:
            units = units[::-1]
        return cls(units, target)

    @classmethod
    def from_hex_str(
        cls,
        s: str,
        source_endianness: Endianness,
        target_endianness: Endianness,
    ) -> HexString:
        """Parse hex text like ``"a000ff907b"``.

        An odd number of characters gets a leading ``'0'`` so the most
        significant nibble is padded ("fff" → "0fff"). The whole string is
        rejected on the first invalid fragment.
        """
        if len(s) % 2 != 0:
            s = "0" + s

        units: list[HexByte] = []
        for i in range(0, len(s), 2):
            try:
                units.append(HexByte.from_hex_str(s[i : i + 2]))
            except InvalidHexFragment as e:
                raise e.at_index(i // 2) from None

        logger.debug("parsed %d unit(s) from hex text (%s → %s)",
                     len(units), source_endianness, target_endianness)
        return cls.from_hex_bytes(units, source_endianness, target_endianness)

    @classmethod
    def from_str(
        cls,
        s: str,
        source_endianness: Endianness,
        target_endianness: Endianness,
    ) -> HexString:
        """Encode each character of ``s`` by its code point.

        Characters above 0xFF take as many units as their code point needs.
        """
        units: list[HexByte] = []
        for c in s:
            units.extend(char_to_hex_bytes(c))
        return cls.from_hex_bytes(units, source_endianness, target_endianness)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        source_endianness: Endianness,
        target_endianness: Endianness,
    ) -> HexString:
        return cls.from_hex_bytes(
            (HexByte.from_int(b) for b in data), source_endianness, target_endianness
        )

    # -- conversion --
    def as_endianness(self, endianness: Endianness) -> HexString:
        """Return the same value re-tagged (and re-ordered) as ``endianness``."""
        endianness = Endianness(endianness)
        if self.endianness == endianness:
            return self
        return HexString(self.hex_bytes[::-1], endianness)

    def as_hex_string(self, endianness: Endianness) -> str:
        return "".join(b.contents for b in self.as_endianness(endianness).hex_bytes)

    def to_bytes(self, endianness: Endianness) -> bytes:
        return bytes(int(b) for b in self.as_endianness(endianness).hex_bytes)

    def as_int(self) -> Optional[int]:
        """Read the value as an unsigned native-word integer.

        Returns ``None`` when the value does not fit in ``NATIVE_WORD_BITS``
        bits, or when there are no units to read. Wider values are not
        promoted to arbitrary precision.
        """
        digits = self.as_hex_string(Endianness.BIG)
        if not digits:
            return None
        value = int(digits, 16)
        if value > NATIVE_WORD_MAX:
            logger.debug("value of %d unit(s) exceeds %d-bit word",
                         len(self.hex_bytes), NATIVE_WORD_BITS)
            return None
        return value

    # -- search --
    def get_offsets(self, needle: HexString) -> List[int]:
        """Return every unit index at which ``needle`` occurs.

        Overlapping matches are all reported, in ascending order. An empty
        needle, or one longer than this sequence, matches nowhere. The needle
        is compared in this sequence's byte order.
        """
        size = len(needle.hex_bytes)
        if size == 0 or len(self.hex_bytes) < size:
            return []

        pattern = needle.as_endianness(self.endianness).hex_bytes
        units = self.hex_bytes

        matches: list[int] = []
        for i in range(len(units) - size + 1):
            if units[i : i + size] == pattern:
                matches.append(i)
        return matches

    # -- protocol --
    def __len__(self) -> int:
        return len(self.hex_bytes)

    def __iter__(self) -> Iterator[HexByte]:
        return iter(self.hex_bytes)

    def __str__(self) -> str:
        return self.as_hex_string(self.endianness)


def hex_bytes_to_strs(units: Sequence[HexByte]) -> list[str]:
    return [u.contents for u in units]
