"""
Decoded AIS Message Records

One immutable record per decoded payload. Values are fully converted:
fixed-point fields are scaled, text is trimmed, and "not available"
sentinels are None.

Units:
- longitude/latitude: decimal degrees
- speed_over_ground: knots
- course_over_ground: degrees
- rate_of_turn: degrees per minute
- maximum_draught: meters
- dimensions (to_bow, to_stern, to_port, to_starboard): meters
- altitude: meters
"""

from typing import Optional

from pydantic import BaseModel


class AISMessage(BaseModel):
    """Fields common to every AIS message"""
    message_type: int
    repeat_indicator: int
    mmsi: int

    class Config:
        frozen = True


class DimensionsMixin:
    """Overall ship size from the reference point distances"""

    @property
    def ship_length(self) -> Optional[int]:
        if self.to_bow is None or self.to_stern is None:
            return None
        return self.to_bow + self.to_stern

    @property
    def ship_width(self) -> Optional[int]:
        if self.to_port is None or self.to_starboard is None:
            return None
        return self.to_port + self.to_starboard


class PositionReport(AISMessage):
    """Class A position report (types 1, 2, 3)"""
    navigation_status: int
    rate_of_turn_indicator: Optional[int]
    rate_of_turn: Optional[float]
    speed_over_ground: Optional[float]
    position_accuracy: bool
    longitude: Optional[float]
    latitude: Optional[float]
    course_over_ground: Optional[float]
    true_heading: Optional[int]
    time_stamp: Optional[int]
    maneuver_indicator: int
    raim: bool
    radio_status: int


class BaseStationReport(AISMessage):
    """Base station report (type 4) / UTC and date response (type 11)"""
    year: Optional[int]
    month: Optional[int]
    day: Optional[int]
    hour: Optional[int]
    minute: Optional[int]
    second: Optional[int]
    position_accuracy: bool
    longitude: Optional[float]
    latitude: Optional[float]
    epfd: int
    raim: bool
    radio_status: int


class StaticVoyageData(DimensionsMixin, AISMessage):
    """Static and voyage related data (type 5)"""
    ais_version: int
    imo_number: Optional[int]
    call_sign: str
    name: str
    ship_type: int
    to_bow: int
    to_stern: int
    to_port: int
    to_starboard: int
    epfd: int
    eta_month: Optional[int]
    eta_day: Optional[int]
    eta_hour: Optional[int]
    eta_minute: Optional[int]
    maximum_draught: Optional[float]
    destination: str
    data_terminal_ready: bool


class SARAircraftPositionReport(AISMessage):
    """Standard SAR aircraft position report (type 9)"""
    altitude: Optional[int]
    speed_over_ground: Optional[int]
    position_accuracy: bool
    longitude: Optional[float]
    latitude: Optional[float]
    course_over_ground: Optional[float]
    time_stamp: Optional[int]
    data_terminal_ready: bool
    assigned: bool
    raim: bool
    radio_status: int


class ClassBPositionReport(AISMessage):
    """Standard Class B equipment position report (type 18)"""
    speed_over_ground: Optional[float]
    position_accuracy: bool
    longitude: Optional[float]
    latitude: Optional[float]
    course_over_ground: Optional[float]
    true_heading: Optional[int]
    time_stamp: Optional[int]
    cs_unit: bool
    display: bool
    dsc: bool
    band: bool
    message_22: bool
    assigned: bool
    raim: bool
    radio_status: int


class ExtendedClassBPositionReport(DimensionsMixin, AISMessage):
    """Extended Class B equipment position report (type 19)"""
    speed_over_ground: Optional[float]
    position_accuracy: bool
    longitude: Optional[float]
    latitude: Optional[float]
    course_over_ground: Optional[float]
    true_heading: Optional[int]
    time_stamp: Optional[int]
    name: str
    ship_type: int
    to_bow: int
    to_stern: int
    to_port: int
    to_starboard: int
    epfd: int
    raim: bool
    data_terminal_ready: bool
    assigned: bool


class StaticDataReport(DimensionsMixin, AISMessage):
    """
    Static data report (type 24).

    Part A (part_number 0) carries only the name; part B (part_number 1)
    carries everything else. Fields of the other part are None.
    """
    part_number: int
    name: Optional[str] = None
    ship_type: Optional[int] = None
    vendor_id: Optional[str] = None
    call_sign: Optional[str] = None
    to_bow: Optional[int] = None
    to_stern: Optional[int] = None
    to_port: Optional[int] = None
    to_starboard: Optional[int] = None
