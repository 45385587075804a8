"""Generation configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationConfig:
    """Immutable configuration shared by every generator."""

    # World
    world_seed: int = 42
    world_name: str = "Dustwater Frontier"
    region_count: int = 3
    min_locations_per_region: int = 3
    max_locations_per_region: int = 6

    # Names
    unique_name_max_attempts: int = 20       # unique-name search gives up (returns None) after this
    nickname_chance: float = 0.3

    # Encounters
    encounter_base_chance: float = 0.15
    night_start_hour: float = 20.0
    night_end_hour: float = 6.0
    night_encounter_multiplier: float = 1.5
    max_encounter_chance: float = 0.8

    # Quests
    quest_level_scaling: float = 0.2         # reward multiplier = 1 + (level - 1) * this

    # Locations
    structure_damage_chance: float = 0.2     # share of structures that are broken or locked

    # Logging
    log_level: str = "INFO"

    @property
    def locations_per_region(self) -> tuple[int, int]:
        return (self.min_locations_per_region, self.max_locations_per_region)
