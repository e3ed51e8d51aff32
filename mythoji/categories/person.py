"""Person base emoji.

``Person`` values are the base glyphs of compound person emoji. On their own
they render as the plain glyph below; combined with a :class:`SkinTone` and a
:class:`Gender` they go through :func:`mythoji.render.render_person`.
"""

from enum import StrEnum, auto

from pyrsistent.typing import PMap

from mythoji.types import Glyph
from mythoji.utils.table import glyph_table


class Person(StrEnum):
    """People that can be rendered with different genders and skin tones."""

    ARTIST = auto()
    BABY = auto()
    BALD_PERSON = auto()
    BEARDED_PERSON = auto()
    CHILD = auto()
    FAIRY = auto()
    ELF = auto()
    GENIE = auto()
    HEAD_SCARF_PERSON = auto()
    MAGE = auto()
    MER_PERSON = auto()
    OLD_PERSON = auto()
    PERSON = auto()
    ROYALTY = auto()
    SKULL_CAP_PERSON = auto()
    TURBAN_PERSON = auto()
    VAMPIRE = auto()
    ZOMBIE = auto()


DEFAULT_PERSON = Person.PERSON

PERSON_GLYPHS: PMap[Person, Glyph] = glyph_table(
    Person,
    {
        Person.ARTIST: "🧑‍🎨",
        Person.BABY: "👶",
        Person.BALD_PERSON: "🧑‍🦲",
        Person.BEARDED_PERSON: "🧔",
        Person.CHILD: "🧒",
        Person.ELF: "🧝",
        Person.FAIRY: "🧚",
        Person.GENIE: "🧞",
        Person.HEAD_SCARF_PERSON: "🧕",
        Person.MAGE: "🧙",
        Person.MER_PERSON: "🧜",
        Person.OLD_PERSON: "🧓",
        Person.PERSON: "🧑",
        Person.ROYALTY: "🤴",
        Person.SKULL_CAP_PERSON: "👲",
        Person.TURBAN_PERSON: "👳",
        Person.VAMPIRE: "🧛",
        Person.ZOMBIE: "🧟",
    },
)
