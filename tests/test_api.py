"""Tests for the REST API: route handlers directly and the full app through TestClient."""

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient

from procgen.api.app import create_app
from procgen.api.dependencies import generation_errors, get_generation_service, set_generation_service
from procgen.api.service import GenerationService
from procgen.config import GenerationConfig
from procgen.core.errors import GenerationError, NotInitializedError, UnknownTemplateError


@pytest.fixture
def client():
    with TestClient(create_app(GenerationConfig(world_seed=42, log_level="WARNING"))) as c:
        yield c


def _post_town(client, location_id="loc_dry_gulch", **extra):
    body = {"name": "Dry Gulch", "type": "town", **extra}
    return client.post(f"/api/v1/locations/{location_id}/content", json=body)


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

class TestDependencies:
    def test_service_missing_raises(self):
        set_generation_service(None)
        with pytest.raises(RuntimeError):
            get_generation_service()

    @pytest.mark.parametrize("error, status", [
        (UnknownTemplateError("quest template", "nope"), 404),
        (NotInitializedError("not ready"), 503),
        (GenerationError("bad input"), 400),
    ])
    def test_error_mapping(self, error, status):
        with pytest.raises(HTTPException) as info:
            with generation_errors():
                raise error
        assert info.value.status_code == status


class TestMetadataHandler:
    """Call the metadata endpoint function directly."""

    def test_templates(self):
        from procgen.api.routes.metadata import templates

        summary = templates(GenerationService(GenerationConfig()))
        assert "sheriff" in summary["npc_templates"]
        assert "outlaw_dialogue" in summary["dialogue_trees"]
        assert "frontier_anglo" in summary["name_origins"]


# ---------------------------------------------------------------------------
# Config and seed
# ---------------------------------------------------------------------------

class TestConfigEndpoints:
    def test_get_config(self, client):
        data = client.get("/api/v1/config").json()
        assert data["world_seed"] == 42
        assert data["unique_name_max_attempts"] == 20
        assert data["cached_locations"] == []

    def test_seed_noop_then_change(self, client):
        _post_town(client)
        same = client.post("/api/v1/seed", json={"seed": 42}).json()
        assert same["status"] == "noop"
        assert client.get("/api/v1/config").json()["cached_locations"] == ["loc_dry_gulch"]

        changed = client.post("/api/v1/seed", json={"seed": 7}).json()
        assert changed["status"] == "ok"
        assert changed["world_seed"] == 7
        assert client.get("/api/v1/config").json()["cached_locations"] == []


# ---------------------------------------------------------------------------
# World
# ---------------------------------------------------------------------------

class TestWorldEndpoint:
    def test_generate_world(self, client):
        resp = client.post("/api/v1/world", json={"seed": 5, "region_count": 2, "min_locations": 2, "max_locations": 3})
        assert resp.status_code == 200
        data = resp.json()
        assert data["id"] == "world_5"
        assert len(data["regions"]) == 2
        assert data["manifest"]["counts"]["regions"] == 2

    def test_deterministic(self, client):
        body = {"seed": 9, "region_count": 1}
        a = client.post("/api/v1/world", json=body).json()
        b = client.post("/api/v1/world", json=body).json()
        assert a["regions"] == b["regions"]

    def test_invalid_range_rejected(self, client):
        resp = client.post("/api/v1/world", json={"min_locations": 5, "max_locations": 2})
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------

class TestLocationEndpoints:
    def test_content_then_cached_reads(self, client):
        content = _post_town(client).json()
        assert content["location_type"] == "town"
        npcs = client.get("/api/v1/locations/loc_dry_gulch/npcs").json()
        assert [n["id"] for n in npcs] == [n["id"] for n in content["npcs"]]
        items = client.get("/api/v1/locations/loc_dry_gulch/items").json()
        assert items == content["world_items"]

    def test_content_is_cached(self, client):
        first = _post_town(client).json()
        second = _post_town(client).json()
        assert first["generated_at"] == second["generated_at"]

    def test_counts_override(self, client):
        content = _post_town(client, npc_background=1, npc_notable=1, item_count=2).json()
        assert len(content["npcs"]) == 2
        assert len(content["world_items"]) == 2

    def test_counts_must_be_paired(self, client):
        assert _post_town(client, npc_background=1).status_code == 422

    def test_unknown_location_is_empty(self, client):
        assert client.get("/api/v1/locations/loc_nowhere/npcs").json() == []

    def test_dialogue(self, client):
        content = _post_town(client).json()
        npc_id = content["npcs"][0]["id"]
        tree = client.get(f"/api/v1/locations/loc_dry_gulch/dialogue/{npc_id}").json()
        assert tree["id"] == f"proc_dialogue_{npc_id}"
        assert client.get("/api/v1/locations/loc_dry_gulch/dialogue/npc_nobody").status_code == 404

    def test_shop(self, client):
        content = _post_town(client).json()
        for npc in content["npcs"]:
            resp = client.get(f"/api/v1/locations/loc_dry_gulch/shops/{npc['id']}")
            assert resp.status_code == (200 if npc["shop_id"] else 404)

    def test_structure_state(self, client):
        before = client.get("/api/v1/locations/loc_dry_gulch/structures/1,2").json()
        assert before["state"] == "functional"
        _post_town(client)
        state = client.get("/api/v1/locations/loc_dry_gulch/structures/1,2").json()["state"]
        assert state in {"functional", "broken", "locked"}
        assert client.get("/api/v1/locations/loc_dry_gulch/structures/1,2").json()["state"] == state


# ---------------------------------------------------------------------------
# Standalone content
# ---------------------------------------------------------------------------

class TestContentEndpoints:
    def test_names(self, client):
        data = client.get("/api/v1/names", params={"origin": "outlaw", "seed": 3, "count": 5}).json()
        assert data["origin"] == "outlaw"
        assert len(data["names"]) == 5

    def test_names_deterministic(self, client):
        params = {"seed": 11, "count": 8}
        assert client.get("/api/v1/names", params=params).json() == client.get("/api/v1/names", params=params).json()

    def test_names_gender(self, client):
        data = client.get("/api/v1/names", params={"gender": "female", "count": 10}).json()
        assert {n["gender"] for n in data["names"]} == {"female"}

    def test_unknown_origin_404(self, client):
        assert client.get("/api/v1/names", params={"origin": "martian"}).status_code == 404

    def test_random_encounter(self, client):
        data = client.post("/api/v1/encounters/random", json={"seed": 4, "player_level": 3, "biome": "desert"}).json()
        assert data["encounter"] is not None
        assert data["encounter"]["enemies"]
        assert data["encounter_chance"] == pytest.approx(0.15)

    def test_encounter_none_when_filtered_out(self, client):
        data = client.post("/api/v1/encounters/random", json={"seed": 4, "biome": "glacier", "location_type": "igloo"}).json()
        assert data["encounter"] is None

    def test_metadata_route(self, client):
        data = client.get("/api/v1/metadata/templates").json()
        assert "rogue_machine" in data["encounter_templates"]

    def test_loot_roll(self, client):
        body = {"seed": 3, "table_id": "treasure_chest", "level": 2}
        data = client.post("/api/v1/loot", json=body).json()
        assert data["table_id"] == "treasure_chest"
        assert len(data["drops"]) >= 4
        assert data == client.post("/api/v1/loot", json=body).json()

    def test_unknown_loot_table_404(self, client):
        assert client.post("/api/v1/loot", json={"seed": 1, "table_id": "dragon_hoard"}).status_code == 404

    def test_schedule_with_hour(self, client):
        data = client.get("/api/v1/schedules/deputy", params={"hour": 2}).json()
        assert data["schedule_id"] == "deputy_schedule"
        assert sum(data["hours"].values()) == 24
        assert data["current"]["activity"] == "patrol"

    def test_schedule_without_hour(self, client):
        assert client.get("/api/v1/schedules/sheriff").json()["current"] is None

    def test_unknown_role_schedule_404(self, client):
        assert client.get("/api/v1/schedules/astronaut").status_code == 404
