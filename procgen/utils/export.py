"""JSON export of generated worlds and location content."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from procgen.core.models import GeneratedWorld, LocationContent

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"


def world_to_json(world: GeneratedWorld, *, indent: int | None = 2) -> str:
    payload = {"version": EXPORT_VERSION, "world": world.to_dict()}
    return json.dumps(payload, indent=indent)


class WorldExporter:
    """Collects a world plus any location content and writes one JSON file."""

    __slots__ = ("_path", "_world", "_locations")

    def __init__(self, path: str | Path, world: GeneratedWorld) -> None:
        self._path = Path(path)
        self._world = world
        self._locations: dict[str, dict[str, Any]] = {}

    def add_location_content(self, content: LocationContent) -> None:
        self._locations[content.location_id] = content.to_dict()

    def flush(self) -> Path:
        """Write accumulated data to disk and return the path written."""
        manifest = self._world.manifest
        export = {
            "version": EXPORT_VERSION,
            "seed": self._world.seed,
            "counts": dict(manifest.counts),
            "world": self._world.to_dict(),
            "location_content": self._locations,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(export, indent=2), encoding="utf-8")
        logger.info(
            "World %s saved to %s (%d locations, %d with content)",
            self._world.id, self._path, manifest.counts.get("locations", 0), len(self._locations),
        )
        return self._path
