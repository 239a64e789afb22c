"""
Diagnostic Rendering

Human-readable, multi-line dump of a decoded record for logs and debugging.
The output is not meant to be parsed back. Rendering reads only the record,
so an unknown code or odd value never affects decoding.
"""

from typing import Any, Callable, Dict

from .codes import epfd_label, nav_status_label, ship_type_label
from .schema import AISMessage

SEPARATOR = "\n\t"

FIELD_LABELS: Dict[str, str] = {
    "message_type": "Type",
    "repeat_indicator": "Repeat",
    "mmsi": "MMSI",
    "navigation_status": "Nav status",
    "rate_of_turn_indicator": "ROT (raw)",
    "rate_of_turn": "ROT [deg/min]",
    "speed_over_ground": "SOG [kn]",
    "position_accuracy": "Accuracy",
    "longitude": "Lon",
    "latitude": "Lat",
    "course_over_ground": "COG [deg]",
    "true_heading": "Heading",
    "time_stamp": "Second",
    "maneuver_indicator": "Maneuver",
    "ais_version": "AIS version",
    "imo_number": "IMO",
    "call_sign": "Call sign",
    "name": "Name",
    "ship_type": "Ship type",
    "to_bow": "Bow [m]",
    "to_stern": "Stern [m]",
    "to_port": "Port [m]",
    "to_starboard": "Starboard [m]",
    "epfd": "EPFD",
    "eta_month": "ETA month",
    "eta_day": "ETA day",
    "eta_hour": "ETA hour",
    "eta_minute": "ETA minute",
    "maximum_draught": "Draught [m]",
    "destination": "Dest",
    "data_terminal_ready": "DTE ready",
    "altitude": "Altitude [m]",
    "part_number": "Part",
    "vendor_id": "Vendor ID",
    "radio_status": "Radio",
}

# Code fields shown with their label next to the raw value
CODE_LABELS: Dict[str, Callable[[int], str]] = {
    "navigation_status": nav_status_label,
    "ship_type": ship_type_label,
    "epfd": epfd_label,
}


def field_label(name: str) -> str:
    return FIELD_LABELS.get(name, name.replace("_", " ").capitalize())


def format_value(name: str, value: Any) -> str:
    if value is None:
        return "N/A"
    if name in CODE_LABELS:
        return f"{value} ({CODE_LABELS[name](value)})"
    if isinstance(value, float):
        return str(round(value, 6))
    return str(value)


def format_message(record: AISMessage) -> str:
    """One 'Label: value' line per field, in the record's declared order"""
    names = list(type(record).model_fields)
    width = max(len(field_label(name)) for name in names) + 1

    lines = [
        f"{field_label(name) + ':':<{width}} {format_value(name, getattr(record, name))}"
        for name in names
    ]
    return "\t" + SEPARATOR.join(lines)
