"""Category aggregates.

Re-exports every closed category enumeration together with its frozen glyph
table. Each table is a :class:`pyrsistent.PMap` keyed by enum member and is
checked for totality when the defining module is imported, so importing this
package is enough to know that every member can be rendered.

``GLYPH_TABLE_REGISTRY`` maps each category class to its table and is the
lookup used by :func:`mythoji.render.render`.

Importing::

    from mythoji.categories import Creature, CREATURE_GLYPHS

"""

from typing import Dict, Mapping

from mythoji.types import Glyph
from .creature import Creature, CREATURE_GLYPHS, DEFAULT_CREATURE
from .item import Item, ITEM_GLYPHS
from .location import Location, LOCATION_GLYPHS
from .modifiers import (
    DEFAULT_GENDER,
    DEFAULT_SKIN_TONE,
    GENDER_GLYPHS,
    SKIN_TONE_GLYPHS,
    Gender,
    SkinTone,
)
from .person import Person, PERSON_GLYPHS, DEFAULT_PERSON
from .symbol import Symbol, SYMBOL_GLYPHS

GLYPH_TABLE_REGISTRY: Dict[type, Mapping[object, Glyph]] = {
    Person: PERSON_GLYPHS,
    SkinTone: SKIN_TONE_GLYPHS,
    Gender: GENDER_GLYPHS,
    Creature: CREATURE_GLYPHS,
    Location: LOCATION_GLYPHS,
    Item: ITEM_GLYPHS,
    Symbol: SYMBOL_GLYPHS,
}

__all__ = [
    "Creature",
    "CREATURE_GLYPHS",
    "DEFAULT_CREATURE",
    "DEFAULT_GENDER",
    "DEFAULT_PERSON",
    "DEFAULT_SKIN_TONE",
    "Gender",
    "GENDER_GLYPHS",
    "GLYPH_TABLE_REGISTRY",
    "Item",
    "ITEM_GLYPHS",
    "Location",
    "LOCATION_GLYPHS",
    "Person",
    "PERSON_GLYPHS",
    "SkinTone",
    "SKIN_TONE_GLYPHS",
    "Symbol",
    "SYMBOL_GLYPHS",
]
