from enum import Enum
from typing import Dict, List


class RockType(str, Enum):
    PETOSKEY = "Petoskey"
    QUARTZ = "Quartz"
    COPPER = "Copper"
    AGATE = "Agate"
    OTHER = "Other"


ROCK_TYPES: List[RockType] = list(RockType)
DEFAULT_ROCK_TYPE = ROCK_TYPES[0]

PIN_COLORS: Dict[RockType, str] = {
    RockType.PETOSKEY: "#2563EB",  # blue-600
    RockType.QUARTZ: "#16A34A",  # green-600
    RockType.COPPER: "#D97706",  # amber-600, reads as gold
    RockType.AGATE: "#F97316",  # orange-500
    RockType.OTHER: "#6B7280",  # gray-500
}


def pin_color(rock_type: RockType | str) -> str:
    """Return the marker fill color for a rock type."""
    return PIN_COLORS[RockType(rock_type)]


def label(rock_type: RockType | str) -> str:
    return RockType(rock_type).value
