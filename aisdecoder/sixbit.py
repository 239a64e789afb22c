"""
Six-bit Payload Decoder

Turns an armored AIS payload into an addressable bit sequence.

Armoring: every payload character carries 6 bits, most significant bit
first. Characters '0'..'W' map to 0-39 and '`'..'w' map to 40-63:

    value = ord(char) - 48
    if value > 40: value -= 8

Text inside the payload uses a second table (six-bit ASCII) where 0-31 are
'@'..'_' and 32-63 are ' '..'?'. '@' is the padding character.

All ranges are zero-based and half-open: [start, end).

Reference: https://gpsd.gitlab.io/gpsd/AIVDM.html
"""

from typing import Dict

from .exceptions import ArmorError, LengthError, RangeError

# Armoring table, index = six-bit value
ARMOR_CHARS = "0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVW`abcdefghijklmnopqrstuvw"

ARMOR_TABLE: Dict[str, int] = {char: value for value, char in enumerate(ARMOR_CHARS)}

# Six-bit ASCII used by text fields, index = six-bit value
TEXT_CHARS = "@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_ !\"#$%&'()*+,-./0123456789:;<=>?"

TEXT_TABLE: Dict[str, int] = {char: value for value, char in enumerate(TEXT_CHARS)}

PAD_CHAR = "@"


class Sixbit:
    """
    Bit decoder over one armored payload.

    The payload is folded into a single integer on construction, so any
    extraction is a shift and a mask regardless of where the range falls
    relative to character boundaries.

    Raises:
        ArmorError: payload holds a character outside the armoring alphabet
        LengthError: 6 * len(payload) is outside [min_bits, max_bits]
    """

    def __init__(self, payload: str, min_bits: int, max_bits: int):
        length = len(payload) * 6
        if length < min_bits or length > max_bits:
            raise LengthError(length, min_bits, max_bits)

        value = 0
        for position, char in enumerate(payload):
            try:
                value = (value << 6) | ARMOR_TABLE[char]
            except KeyError:
                raise ArmorError(
                    f"Invalid armor character {char!r} at position {position}"
                ) from None

        self._payload = payload
        self._value = value
        self._length = length

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"Sixbit({self._payload!r}, bits={self._length})"

    @property
    def payload(self) -> str:
        return self._payload

    @property
    def bits(self) -> str:
        """Bit sequence as a '0'/'1' string (diagnostics only)"""
        if not self._length:
            return ""
        return format(self._value, f"0{self._length}b")

    def _check_range(self, start: int, end: int):
        if start < 0 or start >= end or end > self._length:
            raise RangeError(
                f"Bit range [{start}, {end}) outside payload of {self._length} bits"
            )

    def get_unsigned(self, start: int, end: int) -> int:
        """Big-endian unsigned value of bits [start, end)"""
        self._check_range(start, end)
        width = end - start
        return (self._value >> (self._length - end)) & ((1 << width) - 1)

    def get_signed(self, start: int, end: int) -> int:
        """Two's-complement value of bits [start, end)"""
        value = self.get_unsigned(start, end)
        width = end - start
        if value & (1 << (width - 1)):
            value -= 1 << width
        return value

    def get_string(self, start: int, end: int) -> str:
        """
        Six-bit ASCII text of bits [start, end).

        The width must be a multiple of 6. Padding is returned as-is; trimming
        is left to the caller.
        """
        self._check_range(start, end)
        if (end - start) % 6:
            raise RangeError(
                f"Text range [{start}, {end}) is not a multiple of 6 bits"
            )
        return "".join(
            TEXT_CHARS[self.get_unsigned(offset, offset + 6)]
            for offset in range(start, end, 6)
        )

    def get_boolean(self, index: int) -> bool:
        """Single bit at index, non-zero is True"""
        return self.get_unsigned(index, index + 1) == 1


def trim_text(text: str, pad_chars: str = PAD_CHAR + " ") -> str:
    """Strip trailing padding only; leading and embedded characters are kept"""
    return text.rstrip(pad_chars)
