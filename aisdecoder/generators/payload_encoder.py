"""
Six-bit Payload Encoder

Packs raw field values into an armored payload using the same field tables
the parsers decode with. Used to build test payloads and to check that
decoding is the exact inverse of encoding.

Demonstrates:
- Bit packing of unsigned and two's-complement fields
- 6-bit ASCII text encoding with '@' padding
- Armoring of the bit stream, zero-padded to a 6-bit boundary
"""

from typing import Any, Dict, List, Tuple

from ..fields import FieldKind, FieldTable
from ..sixbit import ARMOR_CHARS, PAD_CHAR, TEXT_TABLE


class PayloadEncoder:
    """
    Encode field values into armored AIS payloads.

    Raw values are what AISMessageParser.read_fields() returns: integers
    before scaling, booleans, and untrimmed or trimmed text.
    """

    # Armor table for encoding, index = six-bit value
    ENCODE_TABLE = ARMOR_CHARS

    def pack_bits(self, values: List[Tuple[int, int]]) -> List[int]:
        """
        Pack values into bit array.

        values: List of (value, num_bits) tuples
        """
        bits = []
        for value, num_bits in values:
            if value < -(1 << (num_bits - 1)) or value >= (1 << num_bits):
                raise ValueError(f"Value {value} does not fit in {num_bits} bits")

            # Handle signed values
            if value < 0:
                value = value + (1 << num_bits)

            for i in range(num_bits - 1, -1, -1):
                bits.append((value >> i) & 1)

        return bits

    def encode_payload(self, bits: List[int]) -> str:
        """
        Encode bit array to 6-bit ASCII payload.
        """
        bits = list(bits) + [0] * self.fill_bits(len(bits))

        payload = []
        for i in range(0, len(bits), 6):
            value = 0
            for j in range(6):
                value = (value << 1) | bits[i + j]
            payload.append(self.ENCODE_TABLE[value])

        return ''.join(payload)

    def encode_string(self, text: str, num_bits: int) -> List[int]:
        """
        Encode string to 6-bit ASCII bits, padded with '@'.
        """
        num_chars = num_bits // 6
        text = text.upper()
        if len(text) > num_chars:
            raise ValueError(f"Text {text!r} longer than {num_chars} characters")

        values = []
        for char in text.ljust(num_chars, PAD_CHAR):
            if char not in TEXT_TABLE:
                raise ValueError(f"Character {char!r} has no six-bit encoding")
            values.append((TEXT_TABLE[char], 6))

        return self.pack_bits(values)

    def encode_bits(self, table: FieldTable, values: Dict[str, Any]) -> List[int]:
        """
        Bit array for a field table. Missing fields encode as zero (empty
        text); spare fields and undeclared gaps are always zero.
        """
        bits = []
        cursor = 0
        for bit_field in table:
            bits.extend([0] * (bit_field.start - cursor))
            cursor = bit_field.end
            value = values.get(bit_field.name)

            if bit_field.kind == FieldKind.SPARE or value is None:
                bits.extend([0] * bit_field.width)
            elif bit_field.kind == FieldKind.TEXT:
                bits.extend(self.encode_string(value, bit_field.width))
            elif bit_field.kind == FieldKind.BOOLEAN:
                bits.append(1 if value else 0)
            elif bit_field.kind == FieldKind.UNSIGNED and value < 0:
                raise ValueError(f"Field {bit_field.name} is unsigned, got {value}")
            elif bit_field.kind == FieldKind.SIGNED and not (
                -(1 << (bit_field.width - 1)) <= value < (1 << (bit_field.width - 1))
            ):
                raise ValueError(
                    f"Value {value} does not fit signed field {bit_field.name} "
                    f"of {bit_field.width} bits"
                )
            else:
                bits.extend(self.pack_bits([(value, bit_field.width)]))

        return bits

    def encode(self, table: FieldTable, values: Dict[str, Any]) -> str:
        """Armored payload for a field table and raw values"""
        return self.encode_payload(self.encode_bits(table, values))

    @staticmethod
    def fill_bits(num_bits: int) -> int:
        """Pad bits added to reach a 6-bit boundary"""
        return (6 - num_bits % 6) % 6
