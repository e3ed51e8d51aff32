"""Emoji tagged union.

``Emoji`` is a union of small frozen dataclasses, one per renderable kind. A
:class:`PersonEmoji` carries its two modifiers; the other variants wrap a
single category member. ``str(emoji)`` and :func:`render_emoji` both return
the display glyph.

Symbols are rendered directly with :func:`mythoji.render.render` and are not
part of the union.
"""

from dataclasses import dataclass
from typing import Union

from mythoji.categories import (
    DEFAULT_GENDER,
    DEFAULT_PERSON,
    DEFAULT_SKIN_TONE,
    Creature,
    Gender,
    Item,
    Location,
    Person,
    SkinTone,
)
from mythoji.errors import InvalidCategoryError
from mythoji.render import render, render_person
from mythoji.types import Glyph


@dataclass(frozen=True)
class PersonEmoji:
    """A person with optional skin tone and gender modifiers.

    Attributes:
        person: Base person glyph.
        skin_tone: Skin tone modifier; ``NEUTRAL`` adds nothing.
        gender: Gender modifier; ``NEUTRAL`` adds nothing.
    """

    person: Person = DEFAULT_PERSON
    skin_tone: SkinTone = DEFAULT_SKIN_TONE
    gender: Gender = DEFAULT_GENDER

    def __str__(self) -> str:
        return render_emoji(self)


@dataclass(frozen=True)
class CreatureEmoji:
    creature: Creature

    def __str__(self) -> str:
        return render_emoji(self)


@dataclass(frozen=True)
class LocationEmoji:
    location: Location

    def __str__(self) -> str:
        return render_emoji(self)


@dataclass(frozen=True)
class ItemEmoji:
    item: Item

    def __str__(self) -> str:
        return render_emoji(self)


Emoji = Union[PersonEmoji, CreatureEmoji, LocationEmoji, ItemEmoji]

DEFAULT_EMOJI: Emoji = PersonEmoji()


def render_emoji(emoji: Emoji) -> Glyph:
    """Return the display glyph of any :data:`Emoji` variant."""
    if isinstance(emoji, PersonEmoji):
        return render_person(emoji.person, emoji.skin_tone, emoji.gender)
    if isinstance(emoji, CreatureEmoji):
        return render(emoji.creature)
    if isinstance(emoji, LocationEmoji):
        return render(emoji.location)
    if isinstance(emoji, ItemEmoji):
        return render(emoji.item)
    raise InvalidCategoryError(f"Not an Emoji variant: {emoji!r}")
