"""Person modifiers: skin tone and gender.

Both enumerations have a ``NEUTRAL`` member that renders as the empty string.
A neutral modifier adds nothing to a person emoji, not even a joiner.
"""

from enum import StrEnum, auto

from pyrsistent.typing import PMap

from mythoji.types import Glyph
from mythoji.utils.table import glyph_table


class SkinTone(StrEnum):
    """Fitzpatrick skin tone modifiers, lightest to darkest after ``NEUTRAL``."""

    NEUTRAL = auto()
    LIGHT = auto()
    MEDIUM_LIGHT = auto()
    MEDIUM = auto()
    MEDIUM_DARK = auto()
    DARK = auto()


class Gender(StrEnum):
    """Gender modifiers (male / female signs)."""

    NEUTRAL = auto()
    MALE = auto()
    FEMALE = auto()


DEFAULT_SKIN_TONE = SkinTone.NEUTRAL
DEFAULT_GENDER = Gender.NEUTRAL

SKIN_TONE_GLYPHS: PMap[SkinTone, Glyph] = glyph_table(
    SkinTone,
    {
        SkinTone.NEUTRAL: "",
        SkinTone.LIGHT: "🏻",
        SkinTone.MEDIUM_LIGHT: "🏼",
        SkinTone.MEDIUM: "🏽",
        SkinTone.MEDIUM_DARK: "🏾",
        SkinTone.DARK: "🏿",
    },
)

# Bare signs, without VS16; render_person appends the selector once at the end.
GENDER_GLYPHS: PMap[Gender, Glyph] = glyph_table(
    Gender,
    {
        Gender.NEUTRAL: "",
        Gender.MALE: "♂",
        Gender.FEMALE: "♀",
    },
)
