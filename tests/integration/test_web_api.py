"""Integration tests for the REST API."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from cabinet_studio.application.factory import ServiceFactory
from cabinet_studio.application.settings import StudioSettings
from cabinet_studio.web import create_app
from cabinet_studio.web.dependencies import get_service_factory


@pytest.fixture
def client(tmp_path: Path) -> TestClient:
    app = create_app()
    factory = ServiceFactory(
        StudioSettings(
            storage_dir=tmp_path / "designs",
            vendor_specs={"board": "18 mm birch plywood"},
        )
    )
    app.dependency_overrides[get_service_factory] = lambda: factory
    return TestClient(app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_export_formats(client: TestClient) -> None:
    response = client.get("/api/v1/export/formats")
    assert response.json() == {"formats": ["jpeg", "json", "png", "svg"]}


class TestDesignEndpoints:
    """Tests for /api/v1/designs."""

    def test_validate(self, client: TestClient, hallway_document) -> None:
        response = client.post("/api/v1/designs/validate", json={"design": hallway_document})

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["total_width"] == 150
        assert data["cabinets"][1] == {
            "id": "split-1",
            "name": "Sideboard",
            "archetype": "split",
            "width": 90,
            "height": 215,
            "accessories": "1 shelf, 2 doors",
        }
        assert data["design"] == hallway_document

    def test_validate_migrates_legacy(self, client: TestClient, legacy_document) -> None:
        response = client.post("/api/v1/designs/validate", json={"design": legacy_document})

        assert response.status_code == 200
        doors = response.json()["design"]["cabinets"][0]["accessories"][:2]
        assert [d["type"] for d in doors] == ["door", "door"]
        assert [d["hinge"] for d in doors] == ["left", "right"]

    def test_validation_error(self, client: TestClient) -> None:
        response = client.post("/api/v1/designs/validate", json={"design": {"cabinets": []}})

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["details"][0]["path"] == "cabinets"

    def test_render_svg(self, client: TestClient, hallway_document) -> None:
        response = client.post("/api/v1/designs/render", json={"design": hallway_document})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert response.text.startswith("<svg")

    def test_render_json(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/render?format=json", json={"design": hallway_document}
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Hallway"

    def test_render_unknown_format(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/render?format=dxf", json={"design": hallway_document}
        )

        assert response.status_code == 400
        assert response.json()["error_type"] == "unsupported_format"

    def test_prompt(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/prompt",
            json={
                "design": hallway_document,
                "vendor_specs": {"notes": "Add a reading chair? No."},
                "environment": {"door_state": "open", "aspect_ratio": "4:3"},
            },
        )

        assert response.status_code == 200
        prompt = response.json()["prompt"]
        assert "- board: 18 mm birch plywood" in prompt
        assert "- Floor: polished tile floor" in prompt
        assert "- Output aspect ratio: 4:3" in prompt
        assert prompt.endswith("Add a reading chair? No.")

    def test_add_accessory(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/accessories",
            json={"design": hallway_document, "cabinet_id": "split-1", "type": "led"},
        )

        assert response.status_code == 200
        data = response.json()
        accessories = data["design"]["cabinets"][1]["accessories"]
        assert accessories[-1]["id"] == data["created_id"]
        assert accessories[-1]["type"] == "led"

    def test_update_accessory_reports_adjustment(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/accessories/update",
            json={
                "design": hallway_document,
                "cabinet_id": "tall-1",
                "accessory_id": "drawer-1",
                "field": "height",
                "value": 80,
            },
        )

        assert response.status_code == 200
        outcome = response.json()["outcome"]
        assert outcome["status"] == "adjusted"
        assert outcome["applied"] == 25

    def test_update_unknown_field(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/accessories/update",
            json={
                "design": hallway_document,
                "cabinet_id": "tall-1",
                "accessory_id": "shelf-1",
                "field": "hinge",
                "value": "left",
            },
        )

        assert response.status_code == 422
        assert response.json()["error_type"] == "invalid_field"

    def test_update_with_unusable_value(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/accessories/update",
            json={
                "design": hallway_document,
                "cabinet_id": "tall-1",
                "accessory_id": "drawer-1",
                "field": "y",
                "value": "abc",
            },
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "invalid_field"
        assert data["error"] == "Invalid value for y: 'abc'"

    def test_unknown_cabinet(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/accessories",
            json={"design": hallway_document, "cabinet_id": "nope", "type": "shelf"},
        )

        assert response.status_code == 404
        assert response.json()["details"] == [{"kind": "cabinet", "id": "nope"}]

    def test_remove_cabinet(self, client: TestClient, hallway_document) -> None:
        response = client.post(
            "/api/v1/designs/cabinets/remove",
            json={"design": hallway_document, "cabinet_id": "tall-1"},
        )

        assert response.status_code == 200
        assert [c["id"] for c in response.json()["design"]["cabinets"]] == ["split-1"]

    def test_remove_last_cabinet(self, client: TestClient) -> None:
        design = {"cabinets": [{"archetype": "tall", "id": "only"}]}
        response = client.post(
            "/api/v1/designs/cabinets/remove", json={"design": design, "cabinet_id": "only"}
        )

        assert response.status_code == 409
        assert response.json()["error_type"] == "structural"


class TestLibraryEndpoints:
    """Tests for /api/v1/library."""

    def test_save_load_list_delete(self, client: TestClient, hallway_document) -> None:
        created = client.post("/api/v1/library", json={"design": hallway_document})
        assert created.status_code == 201
        design_id = created.json()["id"]

        loaded = client.get(f"/api/v1/library/{design_id}")
        assert loaded.status_code == 200
        assert loaded.json()["design"] == hallway_document

        listed = client.get("/api/v1/library")
        assert [d["id"] for d in listed.json()] == [design_id]

        assert client.delete(f"/api/v1/library/{design_id}").status_code == 204
        assert client.get(f"/api/v1/library/{design_id}").status_code == 404

    def test_update(self, client: TestClient, hallway_document) -> None:
        design_id = client.post("/api/v1/library", json={"design": hallway_document}).json()["id"]
        renamed = {**hallway_document, "name": "Entrance"}

        response = client.put(f"/api/v1/library/{design_id}", json={"design": renamed})

        assert response.status_code == 200
        assert client.get(f"/api/v1/library/{design_id}").json()["design"]["name"] == "Entrance"

    def test_update_unknown(self, client: TestClient, hallway_document) -> None:
        response = client.put("/api/v1/library/missing", json={"design": hallway_document})

        assert response.status_code == 404
        assert response.json()["error"] == "Design not found: missing"

    def test_list_ignores_foreign_files(
        self, client: TestClient, hallway_document, tmp_path: Path
    ) -> None:
        design_id = client.post("/api/v1/library", json={"design": hallway_document}).json()["id"]
        (tmp_path / "designs" / "notes.json").write_text("{}", encoding="utf-8")

        response = client.get("/api/v1/library")

        assert response.status_code == 200
        assert [d["id"] for d in response.json()] == [design_id]

    def test_invalid_design_is_not_saved(self, client: TestClient) -> None:
        response = client.post("/api/v1/library", json={"design": {"cabinets": "none"}})

        assert response.status_code == 422
        assert client.get("/api/v1/library").json() == []
