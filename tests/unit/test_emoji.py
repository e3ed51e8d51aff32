# tests/unit/test_emoji.py

import dataclasses

import pytest

from mythoji import (
    DEFAULT_EMOJI,
    Creature,
    CreatureEmoji,
    Emoji,
    Gender,
    Item,
    ItemEmoji,
    Location,
    LocationEmoji,
    Person,
    PersonEmoji,
    SkinTone,
    render_emoji,
)
from mythoji.errors import InvalidCategoryError
from mythoji.render import render_person


@pytest.mark.parametrize(
    "emoji, expected",
    [
        (
            PersonEmoji(Person.ELF, SkinTone.NEUTRAL, Gender.FEMALE),
            "\U0001F9DD\u200d♀\ufe0f",
        ),
        (PersonEmoji(Person.ZOMBIE), "\U0001F9DF"),
        (CreatureEmoji(Creature.DRAGON), "\U0001F409"),
        (LocationEmoji(Location.CASTLE), "\U0001F3F0"),
        (ItemEmoji(Item.AMULET), "\U0001F9FF"),
        (ItemEmoji(Item.KEY), "\U0001F5DD\ufe0f"),
    ],
)
def test_render_emoji(emoji: Emoji, expected: str) -> None:
    assert render_emoji(emoji) == expected
    assert str(emoji) == expected


def test_default_emoji() -> None:
    assert DEFAULT_EMOJI == PersonEmoji(Person.PERSON, SkinTone.NEUTRAL, Gender.NEUTRAL)
    assert str(DEFAULT_EMOJI) == "\U0001F9D1"


def test_person_emoji_matches_render_person() -> None:
    emoji = PersonEmoji(Person.GENIE, SkinTone.MEDIUM_LIGHT, Gender.MALE)
    assert str(emoji) == render_person(
        Person.GENIE, SkinTone.MEDIUM_LIGHT, Gender.MALE
    )


def test_emoji_values_are_frozen_and_hashable() -> None:
    emoji = PersonEmoji(Person.MAGE, SkinTone.DARK, Gender.MALE)
    with pytest.raises(dataclasses.FrozenInstanceError):
        emoji.gender = Gender.FEMALE  # type: ignore[misc]
    assert emoji == PersonEmoji(Person.MAGE, SkinTone.DARK, Gender.MALE)
    assert len({emoji, PersonEmoji(Person.MAGE, SkinTone.DARK, Gender.MALE)}) == 1


def test_variants_with_same_glyph_are_distinct() -> None:
    assert LocationEmoji(Location.DESERT) != LocationEmoji(Location.OASIS)
    assert str(LocationEmoji(Location.DESERT)) == str(LocationEmoji(Location.OASIS))


def test_render_emoji_rejects_other_values() -> None:
    with pytest.raises(InvalidCategoryError):
        render_emoji(Creature.DRAGON)  # type: ignore[arg-type]
