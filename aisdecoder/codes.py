"""
AIS Code Tables

Code-to-label maps for enumerated fields. Decoded records keep the raw
codes; these labels are only used for display.
"""

from typing import Dict

# Navigation status codes
NAV_STATUS: Dict[int, str] = {
    0: "Under way using engine",
    1: "At anchor",
    2: "Not under command",
    3: "Restricted manoeuverability",
    4: "Constrained by draught",
    5: "Moored",
    6: "Aground",
    7: "Engaged in fishing",
    8: "Under way sailing",
    9: "Reserved for HSC",
    10: "Reserved for WIG",
    11: "Power-driven vessel towing astern",
    12: "Power-driven vessel pushing ahead",
    13: "Reserved",
    14: "AIS-SART active",
    15: "Not defined",
}

# Ship type codes by tens digit
SHIP_TYPE_GROUPS: Dict[int, str] = {
    2: "WIG",
    4: "HSC",
    6: "Passenger",
    7: "Cargo",
    8: "Tanker",
    9: "Other",
}

# Ship type codes listed individually
SHIP_TYPES: Dict[int, str] = {
    0: "Not available",
    30: "Fishing",
    31: "Towing",
    32: "Towing large",
    33: "Dredging",
    34: "Diving ops",
    35: "Military ops",
    36: "Sailing",
    37: "Pleasure craft",
    50: "Pilot vessel",
    51: "SAR",
    52: "Tug",
    53: "Port tender",
    54: "Anti-pollution",
    55: "Law enforcement",
    58: "Medical transport",
    59: "Noncombatant ship",
}

# Cargo category, second digit of types 20-29 and 40-99
CARGO_CATEGORIES: Dict[int, str] = {
    1: "Hazardous category A",
    2: "Hazardous category B",
    3: "Hazardous category C",
    4: "Hazardous category D",
}

# Electronic position fixing device
EPFD_TYPES: Dict[int, str] = {
    0: "Undefined",
    1: "GPS",
    2: "GLONASS",
    3: "Combined GPS/GLONASS",
    4: "Loran-C",
    5: "Chayka",
    6: "Integrated navigation system",
    7: "Surveyed",
    8: "Galileo",
    15: "Internal GNSS",
}


def nav_status_label(code: int) -> str:
    return NAV_STATUS.get(code, f"Unknown ({code})")


def ship_type_label(code: int) -> str:
    """Label for a ship and cargo type code, e.g. 71 -> 'Cargo, Hazardous category A'"""
    if code in SHIP_TYPES:
        return SHIP_TYPES[code]

    group = SHIP_TYPE_GROUPS.get(code // 10)
    if group is None:
        return f"Unknown ({code})"

    cargo = CARGO_CATEGORIES.get(code % 10)
    return f"{group}, {cargo}" if cargo else group


def epfd_label(code: int) -> str:
    return EPFD_TYPES.get(code, f"Unknown ({code})")
