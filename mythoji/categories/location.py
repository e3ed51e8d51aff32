"""Location emoji.

Two pairs share a glyph because no closer emoji exists: ``DESERT`` /
``OASIS`` and ``CASTLE_JAPANESE`` / ``PALACE``.
"""

from enum import StrEnum, auto

from pyrsistent.typing import PMap

from mythoji.types import Glyph
from mythoji.utils.table import glyph_table


class Location(StrEnum):
    BOAT_SAIL = auto()
    BUILDING_CLASSIC = auto()
    CAMPSITE = auto()
    CANOE = auto()
    CASTLE = auto()
    CASTLE_JAPANESE = auto()
    CAVE = auto()
    DESERT = auto()
    HUT = auto()
    MOUNTAIN = auto()
    MOUNTAIN_SNOW = auto()
    OASIS = auto()
    PALACE = auto()
    TENT = auto()
    TREE_DECIDUOUS = auto()
    TREE_EVERGREEN = auto()
    TREE_PALM = auto()
    VOLCANO = auto()


LOCATION_GLYPHS: PMap[Location, Glyph] = glyph_table(
    Location,
    {
        Location.BOAT_SAIL: "⛵",
        Location.BUILDING_CLASSIC: "🏛",
        Location.CAMPSITE: "🏕",
        Location.CANOE: "🛶",
        Location.CASTLE: "🏰",
        Location.CASTLE_JAPANESE: "🏯",
        Location.CAVE: "🕳",
        Location.DESERT: "🏜",
        Location.HUT: "🛖",
        Location.MOUNTAIN: "⛰",
        Location.MOUNTAIN_SNOW: "🏔",
        Location.OASIS: "🏜",
        Location.PALACE: "🏯",
        Location.TENT: "⛺",
        Location.TREE_DECIDUOUS: "🌳",
        Location.TREE_EVERGREEN: "🌲",
        Location.TREE_PALM: "🌴",
        Location.VOLCANO: "🌋",
    },
)
