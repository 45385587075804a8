"""Runtime systems: the seeded random stream and the procedural location manager.

``procgen.systems.location_manager`` depends on the generators and is
imported from its own module.
"""

from procgen.systems.rng import SeededRandom

__all__ = ["SeededRandom"]
