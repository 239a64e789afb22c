"""
AIS Payload Decoder

Decodes six-bit armored AIS payloads into typed, immutable records:
- Bit-level decoder over the armored payload
- Static, validated field tables per message type
- Table-driven parsers for types 1-5, 9, 11, 18, 19 and 24
"""

from .config import settings, configure_logging
from .exceptions import (
    ArmorError,
    DecodeError,
    LengthError,
    RangeError,
    UnsupportedMessageError,
)
from .fields import BitField, FieldKind, FieldTable
from .parsers import PARSERS, decode, get_parser
from .render import format_message
from .sixbit import Sixbit

__all__ = [
    "settings",
    "configure_logging",
    "ArmorError",
    "DecodeError",
    "LengthError",
    "RangeError",
    "UnsupportedMessageError",
    "BitField",
    "FieldKind",
    "FieldTable",
    "PARSERS",
    "decode",
    "get_parser",
    "format_message",
    "Sixbit",
]
