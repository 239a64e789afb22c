"""
AIS Message Parser Framework

Every message type is a subclass of AISMessageParser that declares:
- MESSAGE_TYPES: message type numbers it handles
- MIN_BITS / MAX_BITS: the payload length envelope
- FIELDS: a FieldTable with the bit layout
- build(): converts raw field values into the immutable record

Decoding is a single pass:
1. Sixbit decoder built over the payload (envelope checked here)
2. Every field read in table order, text trimmed
3. build() applies scaling and sentinel translation
4. The record is constructed only after every field has been read, so a
   failure never leaves a partially populated record behind
"""

import logging
from typing import Any, Dict, Optional, Tuple

from ..config import settings
from ..exceptions import DecodeError, LengthError
from ..fields import FieldKind, FieldTable
from ..schema import AISMessage
from ..sixbit import Sixbit, trim_text

logger = logging.getLogger(__name__)

# "Not available" sentinels shared by several message types
LONGITUDE_NOT_AVAILABLE = 181 * 600000   # 181 degrees in 1/10000 min
LATITUDE_NOT_AVAILABLE = 91 * 600000     # 91 degrees in 1/10000 min
SPEED_NOT_AVAILABLE = 1023
COURSE_NOT_AVAILABLE = 3600
HEADING_NOT_AVAILABLE = 511
ROT_NOT_AVAILABLE = -128
SECOND_NOT_AVAILABLE = 60

COORDINATE_SCALE = 600000.0   # 1/10000 min -> degrees
ROT_SCALE = 4.733


def not_available(value: int, sentinel: int) -> Optional[int]:
    """None if value is the field's sentinel, value otherwise"""
    return None if value == sentinel else value


def scaled(value: int, sentinel: int, divisor: float) -> Optional[float]:
    """Fixed-point value divided by divisor, None on sentinel"""
    if value == sentinel:
        return None
    return value / divisor


def longitude(value: int) -> Optional[float]:
    return scaled(value, LONGITUDE_NOT_AVAILABLE, COORDINATE_SCALE)


def latitude(value: int) -> Optional[float]:
    return scaled(value, LATITUDE_NOT_AVAILABLE, COORDINATE_SCALE)


def rate_of_turn(value: int) -> Optional[float]:
    """
    ROT indicator to degrees per minute.

    ROT_AIS = 4.733 * sqrt(ROT_sensor), sign preserved.
    """
    if value == ROT_NOT_AVAILABLE:
        return None
    rot = (value / ROT_SCALE) ** 2
    return -rot if value < 0 else rot


class AISMessageParser:
    """
    Base class for table-driven message parsers.

    Parsers are stateless; all entry points are classmethods and the field
    table is shared read-only data.
    """

    MESSAGE_TYPES: Tuple[int, ...] = ()
    MIN_BITS: int = 0
    MAX_BITS: int = 0
    FIELDS: FieldTable

    @classmethod
    def field_table(cls, sixbit: Sixbit) -> FieldTable:
        """Layout for this payload; overridden by types with variant layouts"""
        return cls.FIELDS

    @classmethod
    def read_fields(cls, payload: str) -> Dict[str, Any]:
        """Raw field values in table order, before scaling and sentinel handling"""
        return cls._read(Sixbit(payload, cls.MIN_BITS, cls.MAX_BITS))

    @classmethod
    def _read(cls, sixbit: Sixbit) -> Dict[str, Any]:
        table = cls.field_table(sixbit)
        if table.end > len(sixbit):
            raise LengthError(len(sixbit), table.end, cls.MAX_BITS)

        values: Dict[str, Any] = {}
        for bit_field in table:
            if bit_field.kind == FieldKind.SPARE:
                continue
            value = bit_field.read(sixbit)
            if bit_field.kind == FieldKind.TEXT:
                value = trim_text(value, settings.text_pad_chars)
            values[bit_field.name] = value
        return values

    @classmethod
    def decode(cls, payload: str) -> AISMessage:
        """
        Decode one armored payload into a record.

        Raises:
            LengthError: payload length outside the envelope
            ArmorError: invalid payload character
            DecodeError: payload carries a message type this parser does not handle
        """
        sixbit = Sixbit(payload, cls.MIN_BITS, cls.MAX_BITS)

        message_type = sixbit.get_unsigned(0, 6)
        if message_type not in cls.MESSAGE_TYPES:
            raise DecodeError(
                f"{cls.__name__} cannot decode message type {message_type}"
            )

        values = cls._read(sixbit)
        record = cls.build(values)

        logger.debug(
            f"Decoded type {record.message_type} message for MMSI {record.mmsi} "
            f"({len(sixbit)} bits)"
        )
        return record

    @classmethod
    def build(cls, values: Dict[str, Any]) -> AISMessage:
        raise NotImplementedError

    @staticmethod
    def header(values: Dict[str, Any]) -> Dict[str, int]:
        return {
            "message_type": values["message_type"],
            "repeat_indicator": values["repeat_indicator"],
            "mmsi": values["mmsi"],
        }
