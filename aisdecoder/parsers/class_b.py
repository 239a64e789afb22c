"""
AIS Message Types 18 and 19: Class B Position Reports

Type 18 (standard, 168 bits):
0-38:    Header
38-46:   Regional reserved
46-56:   Speed Over Ground (1/10 knot)
56-57:   Position Accuracy
57-85:   Longitude (1/10000 min, signed)
85-112:  Latitude (1/10000 min, signed)
112-124: Course Over Ground (1/10 degree)
124-133: True Heading
133-139: Time Stamp
139-141: Regional reserved
141-142: CS Unit
142-143: Display flag
143-144: DSC flag
144-145: Band flag
145-146: Message 22 flag
146-147: Assigned mode flag
147-148: RAIM flag
148-168: Radio Status

Type 19 (extended, 312 bits) shares bits 0-139 with type 18, then:
139-143: Regional reserved
143-263: Vessel Name
263-271: Ship Type
271-301: Dimensions (bow 9, stern 9, port 6, starboard 6)
301-305: Position Fix Type (EPFD)
305-306: RAIM flag
306-307: DTE (0 = ready)
307-308: Assigned mode flag
308-312: Spare
"""

from typing import Any, Dict

from ..fields import HEADER_FIELDS, FieldTable, flag, sint, spare, text, uint
from ..schema import ClassBPositionReport, ExtendedClassBPositionReport
from .base import (
    COURSE_NOT_AVAILABLE,
    HEADING_NOT_AVAILABLE,
    SECOND_NOT_AVAILABLE,
    SPEED_NOT_AVAILABLE,
    AISMessageParser,
    latitude,
    longitude,
    not_available,
    scaled,
)

# Bits 38-139, common to types 18 and 19
CLASS_B_POSITION_FIELDS = (
    spare("regional_reserved", 38, 46),
    uint("speed_over_ground", 46, 56),
    flag("position_accuracy", 56),
    sint("longitude", 57, 85),
    sint("latitude", 85, 112),
    uint("course_over_ground", 112, 124),
    uint("true_heading", 124, 133),
    uint("time_stamp", 133, 139),
)


def _position(values: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "speed_over_ground": scaled(values["speed_over_ground"], SPEED_NOT_AVAILABLE, 10.0),
        "position_accuracy": values["position_accuracy"],
        "longitude": longitude(values["longitude"]),
        "latitude": latitude(values["latitude"]),
        "course_over_ground": scaled(values["course_over_ground"], COURSE_NOT_AVAILABLE, 10.0),
        "true_heading": not_available(values["true_heading"], HEADING_NOT_AVAILABLE),
        "time_stamp": not_available(values["time_stamp"], SECOND_NOT_AVAILABLE),
    }


class ClassBPositionReportParser(AISMessageParser):
    """Type 18 parser"""

    MESSAGE_TYPES = (18,)
    MIN_BITS = 168
    MAX_BITS = 168

    FIELDS = FieldTable([
        *HEADER_FIELDS,
        *CLASS_B_POSITION_FIELDS,
        spare("regional", 139, 141),
        flag("cs_unit", 141),
        flag("display", 142),
        flag("dsc", 143),
        flag("band", 144),
        flag("message_22", 145),
        flag("assigned", 146),
        flag("raim", 147),
        uint("radio_status", 148, 168),
    ], max_bits=MAX_BITS)

    @classmethod
    def build(cls, values: Dict[str, Any]) -> ClassBPositionReport:
        return ClassBPositionReport(
            **cls.header(values),
            **_position(values),
            cs_unit=values["cs_unit"],
            display=values["display"],
            dsc=values["dsc"],
            band=values["band"],
            message_22=values["message_22"],
            assigned=values["assigned"],
            raim=values["raim"],
            radio_status=values["radio_status"],
        )


class ExtendedClassBPositionReportParser(AISMessageParser):
    """Type 19 parser"""

    MESSAGE_TYPES = (19,)
    MIN_BITS = 312
    MAX_BITS = 312

    FIELDS = FieldTable([
        *HEADER_FIELDS,
        *CLASS_B_POSITION_FIELDS,
        spare("regional", 139, 143),
        text("name", 143, 263),
        uint("ship_type", 263, 271),
        uint("to_bow", 271, 280),
        uint("to_stern", 280, 289),
        uint("to_port", 289, 295),
        uint("to_starboard", 295, 301),
        uint("epfd", 301, 305),
        flag("raim", 305),
        flag("dte", 306),
        flag("assigned", 307),
        spare("spare", 308, 312),
    ], max_bits=MAX_BITS)

    @classmethod
    def build(cls, values: Dict[str, Any]) -> ExtendedClassBPositionReport:
        return ExtendedClassBPositionReport(
            **cls.header(values),
            **_position(values),
            name=values["name"],
            ship_type=values["ship_type"],
            to_bow=values["to_bow"],
            to_stern=values["to_stern"],
            to_port=values["to_port"],
            to_starboard=values["to_starboard"],
            epfd=values["epfd"],
            raim=values["raim"],
            data_terminal_ready=not values["dte"],
            assigned=values["assigned"],
        )
