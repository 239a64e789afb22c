"""
AIS Message Types 4 and 11: Base Station Report / UTC and Date Response

Bit layout ([start, end), zero-based):
0-38:    Header
38-52:   Year (UTC, 0 = not available)
52-56:   Month (0 = not available)
56-61:   Day (0 = not available)
61-66:   Hour (24 = not available)
66-72:   Minute (60 = not available)
72-78:   Second (60 = not available)
78-79:   Position Accuracy
79-107:  Longitude (1/10000 min, signed)
107-134: Latitude (1/10000 min, signed)
134-138: Position Fix Type (EPFD)
138-148: Spare
148-149: RAIM flag
149-168: Radio Status
"""

from typing import Any, Dict

from ..fields import HEADER_FIELDS, FieldTable, flag, sint, spare, uint
from ..schema import BaseStationReport
from .base import AISMessageParser, latitude, longitude, not_available

YEAR_NOT_AVAILABLE = 0
MONTH_NOT_AVAILABLE = 0
DAY_NOT_AVAILABLE = 0
HOUR_NOT_AVAILABLE = 24
MINUTE_NOT_AVAILABLE = 60
SECOND_NOT_AVAILABLE = 60


class BaseStationReportParser(AISMessageParser):
    """Types 4 and 11 parser"""

    MESSAGE_TYPES = (4, 11)
    MIN_BITS = 168
    MAX_BITS = 168

    FIELDS = FieldTable([
        *HEADER_FIELDS,
        uint("year", 38, 52),
        uint("month", 52, 56),
        uint("day", 56, 61),
        uint("hour", 61, 66),
        uint("minute", 66, 72),
        uint("second", 72, 78),
        flag("position_accuracy", 78),
        sint("longitude", 79, 107),
        sint("latitude", 107, 134),
        uint("epfd", 134, 138),
        spare("spare", 138, 148),
        flag("raim", 148),
        uint("radio_status", 149, 168),
    ], max_bits=MAX_BITS)

    @classmethod
    def build(cls, values: Dict[str, Any]) -> BaseStationReport:
        return BaseStationReport(
            **cls.header(values),
            year=not_available(values["year"], YEAR_NOT_AVAILABLE),
            month=not_available(values["month"], MONTH_NOT_AVAILABLE),
            day=not_available(values["day"], DAY_NOT_AVAILABLE),
            hour=not_available(values["hour"], HOUR_NOT_AVAILABLE),
            minute=not_available(values["minute"], MINUTE_NOT_AVAILABLE),
            second=not_available(values["second"], SECOND_NOT_AVAILABLE),
            position_accuracy=values["position_accuracy"],
            longitude=longitude(values["longitude"]),
            latitude=latitude(values["latitude"]),
            epfd=values["epfd"],
            raim=values["raim"],
            radio_status=values["radio_status"],
        )
