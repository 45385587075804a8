"""Name generator: personal names by cultural origin and procedural place names."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from procgen.core.enums import GENDERS, Gender
from procgen.core.models import GeneratedName
from procgen.core.templates import NameOriginWeight, NamePool
from procgen.core.text import substitute_template

if TYPE_CHECKING:
    from procgen.config import GenerationConfig
    from procgen.core.registry import TemplateRegistry
    from procgen.systems.rng import SeededRandom

logger = logging.getLogger(__name__)

# Two-letter cattle brands skip I and O (too easy to confuse with 1 and 0)
BRAND_LETTERS = "ABCDEFGHJKLMNPQRSTUVWXYZ"
_BRAND_PATTERN = "{{letter}}-{{letter}}"

_DEFAULT_UNIQUE_ATTEMPTS = 20


class NameGenerator:
    """Builds ``GeneratedName`` values and place names from registry pools."""

    __slots__ = ("_registry", "_config")

    def __init__(self, registry: TemplateRegistry, config: GenerationConfig | None = None) -> None:
        self._registry = registry
        self._config = config

    @property
    def max_unique_attempts(self) -> int:
        if self._config is None:
            return _DEFAULT_UNIQUE_ATTEMPTS
        return self._config.unique_name_max_attempts

    # ------------------------------------------------------------------
    # Personal names
    # ------------------------------------------------------------------

    def generate(
        self,
        rng: SeededRandom,
        origin: str,
        *,
        gender: Gender | None = None,
        include_nickname: bool = False,
        include_title: bool = False,
    ) -> GeneratedName:
        """Generate one name from the pool registered for *origin*.

        Draw order: gender (unless pinned), first name, surname, pattern,
        then nickname and title when requested and the pool has any.
        """
        pool = self._registry.name_pool(origin)

        if gender is None:
            gender = rng.weighted_pick(GENDERS, pool.gender_weights)

        first = rng.pick(_first_names(pool, gender))
        last = rng.pick(pool.surnames) if pool.surnames else ""
        pattern = rng.pick(pool.patterns)
        full = substitute_template(pattern, {"first": first, "last": last}).strip()

        nickname = None
        if include_nickname and pool.nicknames:
            nickname = rng.pick(pool.nicknames)
            full = f'{first} "{nickname}" {last}'.strip()

        title = None
        if include_title and pool.titles:
            title = rng.pick(pool.titles)
            full = f"{title} {full}"

        return GeneratedName(
            full_name=full,
            first_name=first,
            last_name=last,
            origin=origin,
            gender=gender,
            nickname=nickname,
            title=title,
        )

    def generate_weighted(
        self,
        rng: SeededRandom,
        origins: Sequence[NameOriginWeight],
        **options,
    ) -> GeneratedName:
        """Pick the origin by weight, then delegate to ``generate``."""
        origin = _pick_origin(rng, origins)
        return self.generate(rng, origin, **options)

    def generate_unique(
        self,
        rng: SeededRandom,
        origins: str | Sequence[NameOriginWeight],
        existing: Iterable[str],
        *,
        max_attempts: int | None = None,
        **options,
    ) -> GeneratedName | None:
        """Generate a name whose full name is not in *existing* (case-insensitive).

        Returns None once *max_attempts* candidates have all collided.
        """
        taken = {name.lower() for name in existing}
        attempts = self.max_unique_attempts if max_attempts is None else max_attempts

        for _ in range(attempts):
            if isinstance(origins, str):
                candidate = self.generate(rng, origins, **options)
            else:
                candidate = self.generate_weighted(rng, origins, **options)
            if candidate.full_name.lower() not in taken:
                return candidate

        logger.debug("Unique name search exhausted after %d attempts", attempts)
        return None

    def generate_batch(self, rng: SeededRandom, origin: str, count: int, **options) -> list[GeneratedName]:
        """*count* names from one origin, duplicates allowed."""
        return [self.generate(rng, origin, **options) for _ in range(count)]

    # ------------------------------------------------------------------
    # Specialised helpers
    # ------------------------------------------------------------------

    def generate_outlaw_alias(self, rng: SeededRandom) -> str:
        """Outlaw name with a nickname, e.g. ``Jesse "Mad Dog" Dalton``."""
        return self.generate(rng, "outlaw", include_nickname=True).full_name

    def generate_automaton_designation(self, rng: SeededRandom) -> str:
        """Serial-style designation for mechanical characters, e.g. ``Unit AX-7``."""
        return self.generate(rng, "mechanical", gender=Gender.NEUTRAL).full_name

    # ------------------------------------------------------------------
    # Place names
    # ------------------------------------------------------------------

    def generate_place_name(self, rng: SeededRandom, pool_type: str) -> str:
        """Fill a random pattern from the place pool *pool_type*.

        Draw order: pattern, brand letters or number, then adjective, noun,
        suffix and possessive, each only when the pattern uses it.
        """
        pool = self._registry.place_name_pool(pool_type)
        pattern = rng.pick(pool.patterns)

        if _BRAND_PATTERN in pattern:
            first_letter = rng.pick(BRAND_LETTERS)
            second_letter = rng.pick(BRAND_LETTERS)
            pattern = pattern.replace(_BRAND_PATTERN, f"{first_letter}-{second_letter}", 1)

        variables: dict[str, object] = {}
        if "{{number}}" in pattern:
            variables["number"] = rng.int(1, 99)
        if "{{adj}}" in pattern:
            variables["adj"] = rng.pick(pool.adjectives)
        if "{{noun}}" in pattern:
            variables["noun"] = rng.pick(pool.nouns)
        if "{{suffix}}" in pattern:
            variables["suffix"] = rng.pick(pool.suffixes)
        if "{{possessive}}" in pattern:
            variables["possessive"] = rng.pick(pool.possessives)

        return substitute_template(pattern, variables)


def _first_names(pool: NamePool, gender: Gender) -> tuple[str, ...]:
    if gender is Gender.MALE:
        names = pool.male_first
    elif gender is Gender.FEMALE:
        names = pool.female_first
    else:
        names = pool.neutral_first or pool.male_first + pool.female_first
    return names or pool.male_first + pool.female_first + pool.neutral_first


def _pick_origin(rng: SeededRandom, origins: Sequence[NameOriginWeight]) -> str:
    return rng.weighted_pick([o.origin for o in origins], [o.weight for o in origins])
