"""Core types: seeds, errors, templates, context and generated models."""

from procgen.core.context import GenerationContext, ItemRef, LocationRef, NPCRef, EnemyRef
from procgen.core.enums import Gender, SizeBucket, StructureState, TargetType, TimeOfDay
from procgen.core.errors import GenerationError, NotInitializedError, UnknownTemplateError
from procgen.core.registry import TemplateRegistry
from procgen.core.seeds import combine_seeds, hash_string

__all__ = [
    "EnemyRef",
    "Gender",
    "GenerationContext",
    "GenerationError",
    "ItemRef",
    "LocationRef",
    "NPCRef",
    "NotInitializedError",
    "SizeBucket",
    "StructureState",
    "TargetType",
    "TemplateRegistry",
    "TimeOfDay",
    "UnknownTemplateError",
    "combine_seeds",
    "hash_string",
]
