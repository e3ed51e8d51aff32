"""Creature emoji: every living thing that is not a :class:`Person`."""

from enum import StrEnum, auto

from pyrsistent.typing import PMap

from mythoji.types import Glyph
from mythoji.utils.table import glyph_table


class Creature(StrEnum):
    ANT = auto()
    BAT = auto()
    BEETLE = auto()
    BISON = auto()
    BOAR = auto()
    BUG = auto()
    BUTTERFLY = auto()
    CAMEL = auto()
    CAT = auto()
    COCKROACH = auto()
    COW = auto()
    CRAB = auto()
    CROCODILE = auto()
    DEER = auto()
    DOG = auto()
    DRAGON = auto()
    EAGLE = auto()
    ELEPHANT = auto()
    FISH = auto()
    GHOST = auto()
    GOAT = auto()
    GOBLIN = auto()
    HONEYBEE = auto()
    HORSE = auto()
    LEOPARD = auto()
    LLAMA = auto()
    MAMMOTH = auto()
    MOUSE = auto()
    OGRE = auto()
    PIG = auto()
    RABBIT = auto()
    RAM = auto()
    RAT = auto()
    RHINOCEROS = auto()
    SCORPION = auto()
    SHARK = auto()
    SNAKE = auto()
    SPIDER = auto()
    TIGER = auto()
    TROPICAL_FISH = auto()
    WATER_BUFFALO = auto()
    WOLF = auto()


DEFAULT_CREATURE = Creature.ANT

CREATURE_GLYPHS: PMap[Creature, Glyph] = glyph_table(
    Creature,
    {
        Creature.ANT: "🐜",
        Creature.BAT: "🦇",
        Creature.BEETLE: "🐞",
        Creature.BISON: "🦬",
        Creature.BOAR: "🐗",
        Creature.BUG: "🐛",
        Creature.BUTTERFLY: "🦋",
        Creature.CAMEL: "🐫",
        Creature.CAT: "🐈",
        Creature.COCKROACH: "🪳",
        Creature.COW: "🐄",
        Creature.CRAB: "🦀",
        Creature.CROCODILE: "🐊",
        Creature.DEER: "🦌",
        Creature.DOG: "🐕",
        Creature.DRAGON: "🐉",
        Creature.EAGLE: "🦅",
        Creature.ELEPHANT: "🐘",
        Creature.FISH: "🐟",
        Creature.GHOST: "👻",
        Creature.GOAT: "🐐",
        Creature.GOBLIN: "👺",
        Creature.HONEYBEE: "🐝",
        Creature.HORSE: "🐎",
        Creature.LEOPARD: "🐆",
        Creature.LLAMA: "🦙",
        Creature.MAMMOTH: "🦣",
        Creature.MOUSE: "🐁",
        Creature.OGRE: "👹",
        Creature.PIG: "🐖",
        Creature.RABBIT: "🐇",
        Creature.RAM: "🐏",
        Creature.RAT: "🐀",
        Creature.RHINOCEROS: "🦏",
        Creature.SCORPION: "🦂",
        Creature.SHARK: "🦈",
        Creature.SNAKE: "🐍",
        Creature.SPIDER: "🕷",
        Creature.TIGER: "🐅",
        Creature.TROPICAL_FISH: "🐠",
        Creature.WATER_BUFFALO: "🐃",
        Creature.WOLF: "🐺",
    },
)
