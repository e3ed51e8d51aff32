"""Exception types raised by mythoji.

All errors derive from ``ValueError`` so callers that already guard lookups
with ``except ValueError`` keep working.
"""


class MythojiError(ValueError):
    """Base class for all mythoji errors."""


class InvalidCategoryError(MythojiError):
    """A value is not a member of any known category (or of the expected one)."""


class MissingGlyphError(MythojiError):
    """A glyph table does not cover every member of its category."""
