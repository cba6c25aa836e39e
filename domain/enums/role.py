"""Role/Position enumeration."""
from enum import Enum


class Role(Enum):
    """League of Legends lane roles, as reported in ``teamPosition``."""

    TOP = "TOP"
    JUNGLE = "JUNGLE"
    MIDDLE = "MIDDLE"
    BOTTOM = "BOTTOM"
    UTILITY = "UTILITY"  # Support
    UNKNOWN = "UNKNOWN"  # remakes and early surrenders leave it blank

    @classmethod
    def from_string(cls, role_str: str | None) -> 'Role':
        if not role_str:
            return cls.UNKNOWN
        key = role_str.strip().upper()
        if key in cls.__members__:
            return cls[key]
        mappings = {
            "SUPPORT": cls.UTILITY,
            "SUP": cls.UTILITY,
            "ADC": cls.BOTTOM,
            "BOT": cls.BOTTOM,
            "MID": cls.MIDDLE,
            "JG": cls.JUNGLE,
            "JGL": cls.JUNGLE,
        }
        return mappings.get(key, cls.UNKNOWN)
