"""Exception hierarchy for the generation library.

Programming errors raise; a search that legitimately finds nothing
(no quest template for a level, no encounter for a filter, an exhausted
unique-name search) returns ``None`` instead.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for every error raised by procgen."""


class EmptyCollectionError(GenerationError, ValueError):
    """Selection from an empty collection."""


class SampleSizeError(GenerationError, ValueError):
    """More unique picks requested than the population holds."""


class WeightMismatchError(GenerationError, ValueError):
    """Items and weights differ in length or the weights sum to nothing."""


class InvalidDiceNotationError(GenerationError, ValueError):
    """Dice notation that is not ``NdM`` optionally followed by ``+K``/``-K``."""


class TemplateSubstitutionError(GenerationError, ValueError):
    """A ``{{token}}`` could not be resolved."""


class UnknownTemplateError(GenerationError, KeyError):
    """Lookup of a template, origin or pool id that was never registered."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"Unknown {kind}: {key!r}")
        self.kind = kind
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class NotInitializedError(GenerationError, RuntimeError):
    """A registry section or service was used before being loaded."""


class RegistryConflictError(GenerationError):
    """An ``init_*`` call tried to replace already-loaded data with different data."""
