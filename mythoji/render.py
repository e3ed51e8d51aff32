"""Glyph rendering.

:func:`render` turns any category member into its glyph by table lookup.
:func:`render_person` composes a person emoji from a base glyph and two
modifiers. Composition order is fixed:

1. the base glyph,
2. ``ZWJ`` + gender sign, when the gender is not neutral,
3. ``ZWJ`` + skin tone modifier, when the skin tone is not neutral,
4. a trailing ``VARIATION_SELECTOR_16`` when either modifier was added.

A person with both modifiers neutral renders exactly like ``render(base)``.
The selector is never appended to a bare base glyph.
"""

from typing import Type

from mythoji.categories import (
    GENDER_GLYPHS,
    GLYPH_TABLE_REGISTRY,
    PERSON_GLYPHS,
    SKIN_TONE_GLYPHS,
    Gender,
    Person,
    SkinTone,
)
from mythoji.errors import InvalidCategoryError
from mythoji.types import Category, Glyph, VARIATION_SELECTOR_16, ZWJ


def render(value: Category) -> Glyph:
    """Return the glyph of a category member.

    Raises:
        InvalidCategoryError: ``value`` is not a member of a glyph category.
            Plain strings are rejected even when they equal a member value.
    """
    table = GLYPH_TABLE_REGISTRY.get(type(value))
    if table is None:
        raise InvalidCategoryError(f"Not a category value: {value!r}")
    return table[value]


def _check_member(value: object, category: Type[object]) -> None:
    if type(value) is not category:
        raise InvalidCategoryError(
            f"Expected a {category.__name__} member, got {value!r}"
        )


def render_person(base: Person, skin_tone: SkinTone, gender: Gender) -> Glyph:
    """Compose a person emoji from its base, skin tone and gender."""
    _check_member(base, Person)
    _check_member(skin_tone, SkinTone)
    _check_member(gender, Gender)

    glyph = PERSON_GLYPHS[base]
    if gender != Gender.NEUTRAL:
        glyph += ZWJ + GENDER_GLYPHS[gender]
    if skin_tone != SkinTone.NEUTRAL:
        glyph += ZWJ + SKIN_TONE_GLYPHS[skin_tone]
    if gender != Gender.NEUTRAL or skin_tone != SkinTone.NEUTRAL:
        glyph += VARIATION_SELECTOR_16
    return glyph
