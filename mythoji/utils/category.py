"""Category selection helpers.

Members can be picked by attribute (``Person.ELF``), by value
(``Person("elf")``) or through the helpers below, which accept either the
member name or its value and raise :class:`InvalidCategoryError` instead of
the bare ``KeyError`` / ``ValueError`` of the enum machinery.
"""

from typing import Dict, Tuple, Type, TypeVar

from mythoji.categories import (
    DEFAULT_CREATURE,
    DEFAULT_GENDER,
    DEFAULT_PERSON,
    DEFAULT_SKIN_TONE,
    GLYPH_TABLE_REGISTRY,
)
from mythoji.errors import InvalidCategoryError

C = TypeVar("C")

DEFAULT_REGISTRY: Dict[type, object] = {
    type(DEFAULT_PERSON): DEFAULT_PERSON,
    type(DEFAULT_SKIN_TONE): DEFAULT_SKIN_TONE,
    type(DEFAULT_GENDER): DEFAULT_GENDER,
    type(DEFAULT_CREATURE): DEFAULT_CREATURE,
}


def _require_category(category: type) -> None:
    if category not in GLYPH_TABLE_REGISTRY:
        raise InvalidCategoryError(f"Not a glyph category: {category!r}")


def members(category: Type[C]) -> Tuple[C, ...]:
    """Return all members of ``category`` in declaration order."""
    _require_category(category)
    return tuple(category)  # type: ignore[call-overload]


def from_name(category: Type[C], name: str) -> C:
    """Look up a member by name (``"TREE_PALM"``) or value (``"tree_palm"``)."""
    _require_category(category)
    for member in category:  # type: ignore[attr-defined]
        if name in (member.name, member.value):
            return member
    raise InvalidCategoryError(f"Unknown {category.__name__} name: {name!r}")


def from_ordinal(category: Type[C], ordinal: int) -> C:
    """Look up a member by its zero-based declaration index."""
    all_members = members(category)
    # bool is an int subclass
    if isinstance(ordinal, bool) or not isinstance(ordinal, int):
        raise InvalidCategoryError(
            f"{category.__name__} ordinal must be an int, got {ordinal!r}"
        )
    if not 0 <= ordinal < len(all_members):
        raise InvalidCategoryError(
            f"{category.__name__} ordinal {ordinal} out of range "
            f"(0..{len(all_members) - 1})"
        )
    return all_members[ordinal]


def default(category: Type[C]) -> C:
    """Return the designated default member of ``category``.

    Only ``Person``, ``SkinTone``, ``Gender`` and ``Creature`` have one.
    """
    _require_category(category)
    if category not in DEFAULT_REGISTRY:
        raise InvalidCategoryError(f"{category.__name__} has no default member")
    return DEFAULT_REGISTRY[category]  # type: ignore[return-value]
