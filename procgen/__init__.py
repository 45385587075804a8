"""Deterministic, seed-driven procedural content generation for a frontier RPG."""

__version__ = "0.1.0"
