"""Glyph table construction.

Every category module builds its table through :func:`glyph_table` at import
time. The builder refuses partial tables, so a member added to an enumeration
without a glyph breaks ``import mythoji`` instead of rendering a placeholder.
"""

import logging
from enum import Enum
from typing import Mapping, Type, TypeVar

from pyrsistent import pmap
from pyrsistent.typing import PMap

from mythoji.errors import MissingGlyphError
from mythoji.types import Glyph

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


def glyph_table(category: Type[E], glyphs: Mapping[E, Glyph]) -> PMap[E, Glyph]:
    """Freeze ``glyphs`` into a persistent map after checking totality.

    Raises:
        MissingGlyphError: If a member of ``category`` has no glyph, or if a
            key is not a member of ``category``.
    """
    foreign = [key for key in glyphs if not isinstance(key, category)]
    if foreign:
        raise MissingGlyphError(
            f"{category.__name__} glyph table has foreign keys: {foreign}"
        )
    missing = [member.name for member in category if member not in glyphs]
    if missing:
        raise MissingGlyphError(
            f"{category.__name__} members without a glyph: {', '.join(missing)}"
        )
    logger.debug("Built %s glyph table (%d entries)", category.__name__, len(glyphs))
    return pmap({member: glyphs[member] for member in category})
