"""
AIS Message Types 1, 2, 3: Class A Position Report

Bit layout ([start, end), zero-based):
0-6:     Message Type
6-8:     Repeat Indicator
8-38:    MMSI (30 bits)
38-42:   Navigation Status
42-50:   Rate of Turn (signed, -128 = not available)
50-60:   Speed Over Ground (1/10 knot steps, 1023 = not available)
60-61:   Position Accuracy
61-89:   Longitude (1/10000 min, signed, 181 deg = not available)
89-116:  Latitude (1/10000 min, signed, 91 deg = not available)
116-128: Course Over Ground (1/10 degree, 3600 = not available)
128-137: True Heading (degrees, 511 = not available)
137-143: Time Stamp (seconds, 60 = not available)
143-145: Maneuver Indicator
145-148: Spare
148-149: RAIM flag
149-168: Radio Status
"""

from typing import Any, Dict

from ..fields import HEADER_FIELDS, FieldTable, flag, sint, spare, uint
from ..schema import PositionReport
from .base import (
    COURSE_NOT_AVAILABLE,
    HEADING_NOT_AVAILABLE,
    ROT_NOT_AVAILABLE,
    SECOND_NOT_AVAILABLE,
    SPEED_NOT_AVAILABLE,
    AISMessageParser,
    latitude,
    longitude,
    not_available,
    rate_of_turn,
    scaled,
)


class PositionReportParser(AISMessageParser):
    """Types 1, 2, 3 parser"""

    MESSAGE_TYPES = (1, 2, 3)
    MIN_BITS = 168
    MAX_BITS = 168

    FIELDS = FieldTable([
        *HEADER_FIELDS,
        uint("navigation_status", 38, 42),
        sint("rate_of_turn", 42, 50),
        uint("speed_over_ground", 50, 60),
        flag("position_accuracy", 60),
        sint("longitude", 61, 89),
        sint("latitude", 89, 116),
        uint("course_over_ground", 116, 128),
        uint("true_heading", 128, 137),
        uint("time_stamp", 137, 143),
        uint("maneuver_indicator", 143, 145),
        spare("spare", 145, 148),
        flag("raim", 148),
        uint("radio_status", 149, 168),
    ], max_bits=MAX_BITS)

    @classmethod
    def build(cls, values: Dict[str, Any]) -> PositionReport:
        return PositionReport(
            **cls.header(values),
            navigation_status=values["navigation_status"],
            rate_of_turn_indicator=not_available(values["rate_of_turn"], ROT_NOT_AVAILABLE),
            rate_of_turn=rate_of_turn(values["rate_of_turn"]),
            speed_over_ground=scaled(values["speed_over_ground"], SPEED_NOT_AVAILABLE, 10.0),
            position_accuracy=values["position_accuracy"],
            longitude=longitude(values["longitude"]),
            latitude=latitude(values["latitude"]),
            course_over_ground=scaled(values["course_over_ground"], COURSE_NOT_AVAILABLE, 10.0),
            true_heading=not_available(values["true_heading"], HEADING_NOT_AVAILABLE),
            time_stamp=not_available(values["time_stamp"], SECOND_NOT_AVAILABLE),
            maneuver_indicator=values["maneuver_indicator"],
            raim=values["raim"],
            radio_status=values["radio_status"],
        )
