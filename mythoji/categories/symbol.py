"""Symbol emoji: status marks and effects shown next to other glyphs.

Symbols stand alone; they are not part of the :data:`mythoji.emoji.Emoji`
union.
"""

from enum import StrEnum, auto

from pyrsistent.typing import PMap

from mythoji.types import Glyph
from mythoji.utils.table import glyph_table


class Symbol(StrEnum):
    ANGER = auto()
    COMET = auto()
    CYCLONE = auto()
    FIRE = auto()
    ELECTRICITY = auto()
    EXCLAMATION_DOUBLE = auto()
    EXCLAMATION_WITH_QUESTION = auto()
    EXCLAMATION_RED = auto()
    EXCLAMATION_WHITE = auto()
    GENDER_FEMALE = auto()
    GENDER_MALE = auto()
    QUESTION_RED = auto()
    QUESTION_WHITE = auto()
    SPARKLES = auto()
    SPEECH_BUBBLE = auto()
    SPEECH_BUBBLE_ANGRY = auto()
    SNOWFLAKE = auto()
    ZZZ = auto()


SYMBOL_GLYPHS: PMap[Symbol, Glyph] = glyph_table(
    Symbol,
    {
        Symbol.ANGER: "💢",
        Symbol.COMET: "☄️",
        Symbol.CYCLONE: "🌀",
        Symbol.FIRE: "🔥",
        Symbol.ELECTRICITY: "⚡",
        Symbol.EXCLAMATION_DOUBLE: "‼️",
        Symbol.EXCLAMATION_WITH_QUESTION: "⁉️",
        Symbol.EXCLAMATION_RED: "❗",
        Symbol.EXCLAMATION_WHITE: "❕",
        Symbol.GENDER_FEMALE: "♀️",
        Symbol.GENDER_MALE: "♂️",
        Symbol.QUESTION_RED: "❓",
        Symbol.QUESTION_WHITE: "❔",
        Symbol.SPARKLES: "✨",
        Symbol.SPEECH_BUBBLE: "💬",
        Symbol.SPEECH_BUBBLE_ANGRY: "🗯️",
        Symbol.SNOWFLAKE: "❄️",
        Symbol.ZZZ: "💤",
    },
)
