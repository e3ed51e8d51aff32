"""Item emoji: gear, loot, food and props."""

from enum import StrEnum, auto

from pyrsistent.typing import PMap

from mythoji.types import Glyph
from mythoji.utils.table import glyph_table


class Item(StrEnum):
    AMULET = auto()
    AXE = auto()
    BAG = auto()
    BANDAGE = auto()
    BED = auto()
    BEER = auto()
    BLOOD_DROP = auto()
    BOMB = auto()
    BOOK_CLOSED = auto()
    BOOK_OPEN = auto()
    BOOMERANG = auto()
    BOW_AND_ARROW = auto()
    BRICK = auto()
    CANDLE = auto()
    COAT = auto()
    COFFIN = auto()
    COIN = auto()
    CROWN = auto()
    CRYSTAL_BALL = auto()
    DAGGER = auto()
    DART = auto()
    DOOR = auto()
    FLAG_BLACK = auto()
    FLAG_TRIANGLE = auto()
    FIRECRACKER = auto()
    GEM_STONE = auto()
    GRAVE = auto()
    HAMMER = auto()
    HAMMER_AND_PICK = auto()
    HEART_RED = auto()
    HOURGLASS_DONE = auto()
    HOURGLASS_NOT_DONE = auto()
    JAR = auto()
    KEY = auto()
    LEAF = auto()
    LEAF_FALLEN = auto()
    LEAF_MAPLE = auto()
    MAP = auto()
    MEAT_ON_BONE = auto()
    MEAT_CUT = auto()
    PICK = auto()
    POULTRY_LEG = auto()
    PRAYER_BEADS = auto()
    RED_ENVELOPE = auto()
    RED_LANTERN = auto()
    ROCK = auto()
    SCROLL = auto()
    SHIELD = auto()
    SWORDS_CROSSED = auto()
    TRIDENT = auto()
    URN = auto()
    WAND = auto()
    WATER_DROP = auto()


# Text-default symbols carry VS16 so they show as emoji.
ITEM_GLYPHS: PMap[Item, Glyph] = glyph_table(
    Item,
    {
        Item.AMULET: "🧿",
        Item.AXE: "🪓",
        Item.BAG: "🎒",
        Item.BANDAGE: "🩹",
        Item.BED: "🛏",
        Item.BEER: "🍺",
        Item.BLOOD_DROP: "🩸",
        Item.BOMB: "💣",
        Item.BOOK_CLOSED: "📕",
        Item.BOOK_OPEN: "📖",
        Item.BOOMERANG: "🪃",
        Item.BOW_AND_ARROW: "🏹",
        Item.BRICK: "🧱",
        Item.CANDLE: "🕯",
        Item.COAT: "🧥",
        Item.COFFIN: "⚰️",
        Item.COIN: "🪙",
        Item.CROWN: "👑",
        Item.CRYSTAL_BALL: "🔮",
        Item.DAGGER: "🗡",
        Item.DART: "🎯",
        Item.DOOR: "🚪",
        Item.FLAG_BLACK: "🏴",
        Item.FLAG_TRIANGLE: "🚩",
        Item.FIRECRACKER: "🧨",
        Item.GEM_STONE: "💎",
        Item.GRAVE: "🪦",
        Item.HAMMER: "🔨",
        Item.HAMMER_AND_PICK: "⚒️",
        Item.HEART_RED: "❤️",
        Item.HOURGLASS_DONE: "⌛",
        Item.HOURGLASS_NOT_DONE: "⏳",
        Item.JAR: "🏺",
        Item.KEY: "🗝️",
        Item.LEAF: "🍃",
        Item.LEAF_FALLEN: "🍂",
        Item.LEAF_MAPLE: "🍁",
        Item.MAP: "🗺",
        Item.MEAT_ON_BONE: "🍖",
        Item.MEAT_CUT: "🥩",
        Item.PICK: "⛏",
        Item.POULTRY_LEG: "🍗",
        Item.PRAYER_BEADS: "📿",
        Item.RED_ENVELOPE: "🧧",
        Item.RED_LANTERN: "🏮",
        Item.ROCK: "🪨",
        Item.SCROLL: "📜",
        Item.SHIELD: "🛡",
        Item.SWORDS_CROSSED: "⚔️",
        Item.TRIDENT: "🔱",
        Item.URN: "⚱️",
        Item.WAND: "🪄",
        Item.WATER_DROP: "💧",
    },
)
