"""
AIS Message Type 5: Static and Voyage Related Data

424 bits, usually split over two sentences. Some transmitters pad the
payload past 424 bits, so lengths up to 550 bits are accepted.

Bit layout ([start, end), zero-based):
0-6:     Message Type
6-8:     Repeat Indicator
8-38:    MMSI
38-40:   AIS Version
40-70:   IMO Number (0 = not available)
70-112:  Call Sign (7 six-bit chars)
112-232: Vessel Name (20 six-bit chars)
232-240: Ship Type
240-249: Dimension to Bow (m)
249-258: Dimension to Stern (m)
258-264: Dimension to Port (m)
264-270: Dimension to Starboard (m)
270-274: Position Fix Type (EPFD)
274-278: ETA Month (0 = not available)
278-283: ETA Day (0 = not available)
283-288: ETA Hour (24 = not available)
288-294: ETA Minute (60 = not available)
294-302: Draught (1/10 m, 0 = not available)
302-422: Destination (20 six-bit chars)
422-423: DTE (0 = ready)
423-424: Spare
"""

from typing import Any, Dict

from ..fields import HEADER_FIELDS, FieldTable, flag, spare, text, uint
from ..schema import StaticVoyageData
from .base import AISMessageParser, not_available, scaled

IMO_NOT_AVAILABLE = 0
ETA_MONTH_NOT_AVAILABLE = 0
ETA_DAY_NOT_AVAILABLE = 0
ETA_HOUR_NOT_AVAILABLE = 24
ETA_MINUTE_NOT_AVAILABLE = 60
DRAUGHT_NOT_AVAILABLE = 0


class StaticVoyageDataParser(AISMessageParser):
    """Type 5 parser"""

    MESSAGE_TYPES = (5,)
    MIN_BITS = 424
    MAX_BITS = 550

    FIELDS = FieldTable([
        *HEADER_FIELDS,
        uint("ais_version", 38, 40),
        uint("imo_number", 40, 70),
        text("call_sign", 70, 112),
        text("name", 112, 232),
        uint("ship_type", 232, 240),
        uint("to_bow", 240, 249),
        uint("to_stern", 249, 258),
        uint("to_port", 258, 264),
        uint("to_starboard", 264, 270),
        uint("epfd", 270, 274),
        uint("eta_month", 274, 278),
        uint("eta_day", 278, 283),
        uint("eta_hour", 283, 288),
        uint("eta_minute", 288, 294),
        uint("draught", 294, 302),
        text("destination", 302, 422),
        flag("dte", 422),
        spare("spare", 423, 424),
    ], max_bits=MAX_BITS)

    @classmethod
    def build(cls, values: Dict[str, Any]) -> StaticVoyageData:
        return StaticVoyageData(
            **cls.header(values),
            ais_version=values["ais_version"],
            imo_number=not_available(values["imo_number"], IMO_NOT_AVAILABLE),
            call_sign=values["call_sign"],
            name=values["name"],
            ship_type=values["ship_type"],
            to_bow=values["to_bow"],
            to_stern=values["to_stern"],
            to_port=values["to_port"],
            to_starboard=values["to_starboard"],
            epfd=values["epfd"],
            eta_month=not_available(values["eta_month"], ETA_MONTH_NOT_AVAILABLE),
            eta_day=not_available(values["eta_day"], ETA_DAY_NOT_AVAILABLE),
            eta_hour=not_available(values["eta_hour"], ETA_HOUR_NOT_AVAILABLE),
            eta_minute=not_available(values["eta_minute"], ETA_MINUTE_NOT_AVAILABLE),
            maximum_draught=scaled(values["draught"], DRAUGHT_NOT_AVAILABLE, 10.0),
            destination=values["destination"],
            data_terminal_ready=not values["dte"],
        )
