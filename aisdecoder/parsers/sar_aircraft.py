"""
AIS Message Type 9: Standard SAR Aircraft Position Report

Speed is in whole knots here, not tenths.

Bit layout ([start, end), zero-based):
0-38:    Header
38-50:   Altitude (m, 4095 = not available)
50-60:   Speed Over Ground (knots, 1023 = not available)
60-61:   Position Accuracy
61-89:   Longitude (1/10000 min, signed)
89-116:  Latitude (1/10000 min, signed)
116-128: Course Over Ground (1/10 degree)
128-134: Time Stamp (seconds)
134-142: Regional reserved
142-143: DTE (0 = ready)
143-146: Spare
146-147: Assigned mode flag
147-148: RAIM flag
148-168: Radio Status
"""

from typing import Any, Dict

from ..fields import HEADER_FIELDS, FieldTable, flag, sint, spare, uint
from ..schema import SARAircraftPositionReport
from .base import (
    COURSE_NOT_AVAILABLE,
    SECOND_NOT_AVAILABLE,
    SPEED_NOT_AVAILABLE,
    AISMessageParser,
    latitude,
    longitude,
    not_available,
    scaled,
)

ALTITUDE_NOT_AVAILABLE = 4095


class SARAircraftPositionReportParser(AISMessageParser):
    """Type 9 parser"""

    MESSAGE_TYPES = (9,)
    MIN_BITS = 168
    MAX_BITS = 168

    FIELDS = FieldTable([
        *HEADER_FIELDS,
        uint("altitude", 38, 50),
        uint("speed_over_ground", 50, 60),
        flag("position_accuracy", 60),
        sint("longitude", 61, 89),
        sint("latitude", 89, 116),
        uint("course_over_ground", 116, 128),
        uint("time_stamp", 128, 134),
        spare("regional", 134, 142),
        flag("dte", 142),
        spare("spare", 143, 146),
        flag("assigned", 146),
        flag("raim", 147),
        uint("radio_status", 148, 168),
    ], max_bits=MAX_BITS)

    @classmethod
    def build(cls, values: Dict[str, Any]) -> SARAircraftPositionReport:
        return SARAircraftPositionReport(
            **cls.header(values),
            altitude=not_available(values["altitude"], ALTITUDE_NOT_AVAILABLE),
            speed_over_ground=not_available(values["speed_over_ground"], SPEED_NOT_AVAILABLE),
            position_accuracy=values["position_accuracy"],
            longitude=longitude(values["longitude"]),
            latitude=latitude(values["latitude"]),
            course_over_ground=scaled(values["course_over_ground"], COURSE_NOT_AVAILABLE, 10.0),
            time_stamp=not_available(values["time_stamp"], SECOND_NOT_AVAILABLE),
            data_terminal_ready=not values["dte"],
            assigned=values["assigned"],
            raim=values["raim"],
            radio_status=values["radio_status"],
        )
