"""Common type aliases and codepoint constants.

``Category`` lists every enumeration that has a glyph table. ``ZWJ`` and
``VARIATION_SELECTOR_16`` are the two codepoints used to compose person
emoji sequences (see :func:`mythoji.render.render_person`).
"""

from typing import Union, TYPE_CHECKING

if TYPE_CHECKING:
    from mythoji.categories import (
        Creature,
        Gender,
        Item,
        Location,
        Person,
        SkinTone,
        Symbol,
    )

Glyph = str

Category = Union[
    "Person", "SkinTone", "Gender", "Creature", "Location", "Item", "Symbol"
]

ZWJ: Glyph = "\u200d"
VARIATION_SELECTOR_16: Glyph = "\ufe0f"
