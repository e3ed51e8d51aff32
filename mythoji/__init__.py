"""mythoji
=======

Emoji for fantasy text-based games.

Every glyph belongs to a closed category enumeration (``Person``,
``Creature``, ``Location``, ``Item``, ``Symbol``) and person emoji can be
specialised with a ``SkinTone`` and a ``Gender``::

    from mythoji import Gender, Location, Person, SkinTone, render, render_person

    render(Location.CASTLE)                                     # "🏰"
    render_person(Person.ELF, SkinTone.NEUTRAL, Gender.FEMALE)  # "🧝‍♀️"

or through the ``Emoji`` union::

    from mythoji import PersonEmoji

    str(PersonEmoji(Person.MAGE, SkinTone.DARK, Gender.MALE))

Not every terminal supports every combination; be ready to fall back to a
plainer representation when a glyph does not display.
"""

import logging

from mythoji.categories import (
    DEFAULT_CREATURE,
    DEFAULT_GENDER,
    DEFAULT_PERSON,
    DEFAULT_SKIN_TONE,
    Creature,
    Gender,
    Item,
    Location,
    Person,
    SkinTone,
    Symbol,
)
from mythoji.emoji import (
    DEFAULT_EMOJI,
    CreatureEmoji,
    Emoji,
    ItemEmoji,
    LocationEmoji,
    PersonEmoji,
    render_emoji,
)
from mythoji.errors import InvalidCategoryError, MissingGlyphError, MythojiError
from mythoji.render import render, render_person
from mythoji.types import VARIATION_SELECTOR_16, ZWJ
from mythoji.utils.category import default, from_name, from_ordinal, members

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Creature",
    "CreatureEmoji",
    "DEFAULT_CREATURE",
    "DEFAULT_EMOJI",
    "DEFAULT_GENDER",
    "DEFAULT_PERSON",
    "DEFAULT_SKIN_TONE",
    "Emoji",
    "Gender",
    "InvalidCategoryError",
    "Item",
    "ItemEmoji",
    "Location",
    "LocationEmoji",
    "MissingGlyphError",
    "MythojiError",
    "Person",
    "PersonEmoji",
    "SkinTone",
    "Symbol",
    "VARIATION_SELECTOR_16",
    "ZWJ",
    "default",
    "from_name",
    "from_ordinal",
    "members",
    "render",
    "render_emoji",
    "render_person",
]
