"""Tests for JSON export of worlds and location content."""

import json

from procgen.core.context import LocationRef
from procgen.data import build_default_registry
from procgen.generators.world import WorldGenerator
from procgen.systems.location_manager import ProceduralLocationManager
from procgen.utils.export import EXPORT_VERSION, WorldExporter, world_to_json

REGISTRY = build_default_registry()


def _make_world():
    gen = WorldGenerator(12, region_count=1, locations_per_region=(2, 2))
    gen.initialize(REGISTRY)
    return gen.generate_world()


class TestWorldToJson:
    def test_payload(self):
        world = _make_world()
        payload = json.loads(world_to_json(world))
        assert payload["version"] == EXPORT_VERSION
        assert payload["world"]["id"] == world.id
        assert len(payload["world"]["regions"][0]["locations"]) == 2

    def test_compact(self):
        assert "\n" not in world_to_json(_make_world(), indent=None)


class TestWorldExporter:
    def test_flush_with_location_content(self, tmp_path):
        world = _make_world()
        manager = ProceduralLocationManager(REGISTRY, world.seed)
        exporter = WorldExporter(tmp_path / "out" / "world.json", world)
        for location in world.iter_locations():
            exporter.add_location_content(manager.generate_location_content(
                LocationRef(id=location.id, name=location.name, type=location.type),
            ))
        path = exporter.flush()

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["seed"] == world.seed
        assert data["counts"] == world.manifest.counts
        assert set(data["location_content"]) == {loc.id for loc in world.iter_locations()}
