"""
AIS Message Parsers

Registry of table-driven parsers keyed by message type, and decode(), which
dispatches on the first six bits of the payload.
"""

import logging
from typing import Dict, Optional, Type

from ..config import settings
from ..exceptions import UnsupportedMessageError
from ..schema import AISMessage
from ..sixbit import Sixbit
from .base import AISMessageParser
from .base_station import BaseStationReportParser
from .class_b import ClassBPositionReportParser, ExtendedClassBPositionReportParser
from .position_report import PositionReportParser
from .sar_aircraft import SARAircraftPositionReportParser
from .static_data_report import StaticDataReportParser
from .static_voyage import StaticVoyageDataParser

logger = logging.getLogger(__name__)

PARSER_CLASSES = (
    PositionReportParser,
    BaseStationReportParser,
    StaticVoyageDataParser,
    SARAircraftPositionReportParser,
    ClassBPositionReportParser,
    ExtendedClassBPositionReportParser,
    StaticDataReportParser,
)

PARSERS: Dict[int, Type[AISMessageParser]] = {
    message_type: parser
    for parser in PARSER_CLASSES
    for message_type in parser.MESSAGE_TYPES
}


def get_parser(message_type: int) -> Type[AISMessageParser]:
    """Parser class for a message type; raises UnsupportedMessageError"""
    try:
        return PARSERS[message_type]
    except KeyError:
        raise UnsupportedMessageError(message_type) from None


def message_type_of(payload: str) -> int:
    """Message type from the first payload character"""
    return Sixbit(payload[:1], 6, 6).get_unsigned(0, 6)


def decode(payload: str) -> Optional[AISMessage]:
    """
    Decode a reassembled armored payload of any supported type.

    Returns None only for unsupported types under the "skip" policy.
    """
    message_type = message_type_of(payload)

    try:
        parser = get_parser(message_type)
    except UnsupportedMessageError:
        if settings.unsupported_type_policy == "skip":
            logger.warning(f"Skipping unsupported message type {message_type}")
            return None
        raise

    return parser.decode(payload)


__all__ = [
    "AISMessageParser",
    "PositionReportParser",
    "BaseStationReportParser",
    "StaticVoyageDataParser",
    "SARAircraftPositionReportParser",
    "ClassBPositionReportParser",
    "ExtendedClassBPositionReportParser",
    "StaticDataReportParser",
    "PARSERS",
    "get_parser",
    "message_type_of",
    "decode",
]
