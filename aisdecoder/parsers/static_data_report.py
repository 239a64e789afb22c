"""
AIS Message Type 24: Static Data Report

Sent in two parts, each its own payload. The part number at bits 38-40
selects the layout.

Part A (part number 0, 160 bits):
0-38:    Header
38-40:   Part Number
40-160:  Vessel Name

Part B (part number 1, 168 bits):
0-38:    Header
38-40:   Part Number
40-48:   Ship Type
48-90:   Vendor ID (7 six-bit chars)
90-132:  Call Sign
132-141: Dimension to Bow
141-150: Dimension to Stern
150-156: Dimension to Port
156-162: Dimension to Starboard
162-168: Spare
"""

from typing import Any, Dict

from ..exceptions import DecodeError
from ..fields import HEADER_FIELDS, FieldTable, spare, text, uint
from ..schema import StaticDataReport
from ..sixbit import Sixbit
from .base import AISMessageParser

PART_A = 0
PART_B = 1


class StaticDataReportParser(AISMessageParser):
    """Type 24 parser"""

    MESSAGE_TYPES = (24,)
    MIN_BITS = 160
    MAX_BITS = 168

    PART_A_FIELDS = FieldTable([
        *HEADER_FIELDS,
        uint("part_number", 38, 40),
        text("name", 40, 160),
    ], max_bits=MAX_BITS)

    PART_B_FIELDS = FieldTable([
        *HEADER_FIELDS,
        uint("part_number", 38, 40),
        uint("ship_type", 40, 48),
        text("vendor_id", 48, 90),
        text("call_sign", 90, 132),
        uint("to_bow", 132, 141),
        uint("to_stern", 141, 150),
        uint("to_port", 150, 156),
        uint("to_starboard", 156, 162),
        spare("spare", 162, 168),
    ], max_bits=MAX_BITS)

    FIELDS = PART_A_FIELDS

    @classmethod
    def field_table(cls, sixbit: Sixbit) -> FieldTable:
        part_number = sixbit.get_unsigned(38, 40)
        if part_number == PART_A:
            return cls.PART_A_FIELDS
        if part_number == PART_B:
            return cls.PART_B_FIELDS
        raise DecodeError(f"Invalid type 24 part number: {part_number}")

    @classmethod
    def build(cls, values: Dict[str, Any]) -> StaticDataReport:
        # Fields of the absent part keep their None defaults
        fields = {
            name: value for name, value in values.items()
            if name not in ("message_type", "repeat_indicator", "mmsi")
        }
        return StaticDataReport(**cls.header(values), **fields)
