"""
Target identifiers - the four on-screen quadrants the player must select
"""

import enum
from typing import Dict


class Target(enum.Enum):
    """Screen quadrant targets - values double as element identifiers"""
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    @classmethod
    def from_key(cls, key: str) -> 'Target':
        """
        Parse player input into a target.

        Accepts short keys ("tl", "tr", "bl", "br"), numbered keys ("1"-"4",
        reading order) or the full identifier ("top-left").

        Args:
            key: Raw player input

        Returns:
            Matching Target

        Raises:
            ValueError: If the key does not name a target
        """
        normalized = key.strip().lower()
        if normalized in _KEY_ALIASES:
            return _KEY_ALIASES[normalized]
        for target in cls:
            if target.value == normalized:
                return target
        raise ValueError(f"Unknown target key: {key!r}")

    def __str__(self) -> str:
        return self.value


_KEY_ALIASES: Dict[str, Target] = {
    "tl": Target.TOP_LEFT,
    "tr": Target.TOP_RIGHT,
    "bl": Target.BOTTOM_LEFT,
    "br": Target.BOTTOM_RIGHT,
    "1": Target.TOP_LEFT,
    "2": Target.TOP_RIGHT,
    "3": Target.BOTTOM_LEFT,
    "4": Target.BOTTOM_RIGHT,
}

# Directional hint shown alongside a tip (labels are German in the game UI)
TARGET_HINTS: Dict[Target, str] = {
    Target.TOP_LEFT: "(oben links)",
    Target.TOP_RIGHT: "(oben rechts)",
    Target.BOTTOM_LEFT: "(unten links)",
    Target.BOTTOM_RIGHT: "(unten rechts)",
}
