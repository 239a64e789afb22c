"""
Field Tables

A field table is the static bit layout of one message type: an ordered set
of named, half-open bit ranges [start, end) with a decode kind each. Tables
are built once at import and validated on construction, so a misaligned
layout fails before any payload is decoded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import RangeError
from .sixbit import Sixbit


class FieldKind(str, Enum):
    """How a bit range is interpreted"""
    UNSIGNED = "unsigned"
    SIGNED = "signed"
    TEXT = "text"
    BOOLEAN = "boolean"
    SPARE = "spare"      # Reserved/spare bits, never extracted


@dataclass(frozen=True)
class BitField:
    """One named bit range of a message layout"""
    name: str
    start: int
    end: int
    kind: FieldKind = FieldKind.UNSIGNED

    @property
    def width(self) -> int:
        return self.end - self.start

    def read(self, sixbit: Sixbit):
        """Extract this field's raw value from a decoder"""
        if self.kind == FieldKind.UNSIGNED:
            return sixbit.get_unsigned(self.start, self.end)
        if self.kind == FieldKind.SIGNED:
            return sixbit.get_signed(self.start, self.end)
        if self.kind == FieldKind.TEXT:
            return sixbit.get_string(self.start, self.end)
        if self.kind == FieldKind.BOOLEAN:
            return sixbit.get_boolean(self.start)
        raise ValueError(f"Field {self.name} of kind {self.kind.value} has no value")


def uint(name: str, start: int, end: int) -> BitField:
    return BitField(name, start, end, FieldKind.UNSIGNED)


def sint(name: str, start: int, end: int) -> BitField:
    return BitField(name, start, end, FieldKind.SIGNED)


def text(name: str, start: int, end: int) -> BitField:
    return BitField(name, start, end, FieldKind.TEXT)


def flag(name: str, index: int) -> BitField:
    return BitField(name, index, index + 1, FieldKind.BOOLEAN)


def spare(name: str, start: int, end: int) -> BitField:
    return BitField(name, start, end, FieldKind.SPARE)


# Every message starts with the same 38 bits
HEADER_FIELDS = (
    uint("message_type", 0, 6),
    uint("repeat_indicator", 6, 8),
    uint("mmsi", 8, 38),
)


class FieldTable:
    """
    Ordered, validated mapping of field name to BitField.

    Checked on construction:
    - every range satisfies 0 <= start < end
    - ranges are monotonically increasing and non-overlapping
    - BOOLEAN fields are 1 bit wide, TEXT fields a multiple of 6
    - the final end is <= max_bits
    - names are unique
    """

    def __init__(self, fields: List[BitField], max_bits: int):
        self._fields: Dict[str, BitField] = {}
        self.max_bits = max_bits

        for bit_field in fields:
            if bit_field.name in self._fields:
                raise RangeError(f"Duplicate field name: {bit_field.name}")
            self._fields[bit_field.name] = bit_field

        self.validate()

    def __iter__(self) -> Iterator[BitField]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def __getitem__(self, name: str) -> BitField:
        return self._fields[name]

    def __repr__(self) -> str:
        return f"FieldTable({len(self)} fields, end={self.end}, max_bits={self.max_bits})"

    @property
    def names(self) -> List[str]:
        return list(self._fields)

    @property
    def end(self) -> int:
        """Bits needed to hold every declared field"""
        if not self._fields:
            return 0
        return max(bit_field.end for bit_field in self._fields.values())

    def validate(self):
        """Raise RangeError if the layout is internally inconsistent"""
        previous: Optional[BitField] = None

        for bit_field in self._fields.values():
            if bit_field.start < 0 or bit_field.start >= bit_field.end:
                raise RangeError(
                    f"Field {bit_field.name}: invalid range "
                    f"[{bit_field.start}, {bit_field.end})"
                )
            if previous is not None and bit_field.start < previous.end:
                raise RangeError(
                    f"Field {bit_field.name} at {bit_field.start} overlaps "
                    f"{previous.name} ending at {previous.end}"
                )
            if bit_field.kind == FieldKind.BOOLEAN and bit_field.width != 1:
                raise RangeError(f"Boolean field {bit_field.name} must be 1 bit")
            if bit_field.kind == FieldKind.TEXT and bit_field.width % 6:
                raise RangeError(
                    f"Text field {bit_field.name} must be a multiple of 6 bits"
                )
            previous = bit_field

        if self.end > self.max_bits:
            raise RangeError(
                f"Table ends at bit {self.end}, beyond max_bits {self.max_bits}"
            )

    def gaps(self) -> List[Tuple[int, int]]:
        """Undeclared bit ranges between fields"""
        gaps = []
        cursor = 0
        for bit_field in self._fields.values():
            if bit_field.start > cursor:
                gaps.append((cursor, bit_field.start))
            cursor = bit_field.end
        return gaps
