"""Test the /ui-api endpoints and the per-browser session state."""

import pytest

import config
from db import Part
from main import create_app
from tests.factories import PartFactory
from ui.session_state import EXTENSION_KEY, SessionRegistry


def _select(client, category):
    return client.post("/ui-api/category", json={"category": category}).get_json()


class TestFilterPanel:

    def test_starts_on_basic(self, client):
        data = client.get("/ui-api/categories").get_json()
        assert data["selected"] == "Basic"
        assert "CPU" in data["categories"]

        fields = client.get("/ui-api/fields").get_json()["fields"]
        assert fields == ["Name", "Image Url", "Model", "Manufacturer",
                          "Release Date", "Rating"]

    def test_select_category_adds_fields_visible(self, client):
        data = _select(client, "CPU")
        assert data["selected"] == "CPU"
        assert data["recognized"] is True
        assert "Cores" in data["fields"]
        assert data["fields"][0] == "Name"

    def test_unknown_category_falls_back_to_basic(self, client):
        data = _select(client, "Toaster")
        assert data["selected"] == "Basic"
        assert data["recognized"] is False

    def test_hidden_field_survives_category_round_trip(self, client):
        _select(client, "CPU")
        response = client.post("/ui-api/fields/visibility",
                               json={"name": "Cores", "visible": False})
        assert "Cores" not in response.get_json()["fields"]

        gpu = _select(client, "GPU")
        assert "Shading Units" in gpu["fields"]
        assert "Cores" not in gpu["fields"]

        cpu = _select(client, "CPU")
        assert "Cores" not in cpu["fields"]
        assert "Threads" in cpu["fields"]

        panel = client.get("/ui-api/filter").get_json()
        assert {"name": "Cores", "visible": False} in panel["properties"]

    def test_visibility_of_unknown_field_is_404(self, client):
        response = client.post("/ui-api/fields/visibility",
                               json={"name": "Wattage", "visible": False})
        assert response.status_code == 404

    def test_visibility_needs_bool(self, client):
        response = client.post("/ui-api/fields/visibility",
                               json={"name": "Name", "visible": "no"})
        assert response.status_code == 400

    def test_set_order(self, client):
        response = client.post("/ui-api/fields/order",
                               json={"order": ["Rating", "Name"]})
        fields = response.get_json()["fields"]
        assert fields[:3] == ["Rating", "Name", "Image Url"]


class TestListing:

    def test_rows_follow_visible_columns(self, client, db_session):
        PartFactory(cpu=True, name="Ryzen 7 7700")
        PartFactory(name="Monitor")
        _select(client, "CPU")

        data = client.get("/ui-api/parts").get_json()
        assert data["total"] == 2
        columns = data["columns"]
        ecc = columns.index("Ecc Memory Supported")
        cores = columns.index("Cores")

        ryzen, monitor = data["rows"]
        assert ryzen["category"] == "CPU"
        assert ryzen["values"][ecc] == "No"
        assert ryzen["values"][cores] == "8"
        assert monitor["values"][cores] == ""
        assert ryzen["selected"] is False
        assert ryzen["favorite"] is False

    def test_detail_presents_booleans(self, client, db_session):
        part = PartFactory(cpu=True)
        data = client.get(f"/ui-api/part/{part.id}").get_json()
        assert data["category"] == "CPU"
        assert {"name": "Ecc Memory Supported", "value": "No"} in data["fields"]

    def test_detail_unknown_part_is_404(self, client, db_session):
        assert client.get("/ui-api/part/missing").status_code == 404

    def test_comparison_of_selected_parts(self, client, db_session):
        a = PartFactory(cpu=True, name="A")
        b = PartFactory(cpu=True, name="B")
        PartFactory(name="C")
        _select(client, "CPU")

        client.post("/ui-api/selected", json={"id": a.id, "on": True})
        response = client.post("/ui-api/selected", json={"id": b.id, "on": True})
        assert response.get_json()["selected_parts"] == [a.id, b.id]

        table = client.get("/ui-api/comparison").get_json()
        assert [p["name"] for p in table["parts"]] == ["A", "B"]
        rows = {r["field"]: r["values"] for r in table["rows"]}
        assert rows["Socket"] == ["AM5", "AM5"]

        client.post("/ui-api/selected", json={"id": a.id, "on": False})
        table = client.get("/ui-api/comparison").get_json()
        assert [p["name"] for p in table["parts"]] == ["B"]

    def test_favorites(self, client, db_session):
        part = PartFactory(name="Keeper")
        PartFactory(name="Other")
        response = client.post("/ui-api/favorites", json={"id": part.id, "on": True})
        assert response.get_json()["favorites"] == [part.id]

        table = client.get("/ui-api/favorites").get_json()
        assert len(table["rows"]) == 1
        assert table["rows"][0]["favorite"] is True

        listing = client.get("/ui-api/parts").get_json()
        flags = {r["id"]: r["favorite"] for r in listing["rows"]}
        assert flags[part.id] is True

    def test_mark_needs_id_and_flag(self, client):
        assert client.post("/ui-api/favorites", json={"id": "x"}).status_code == 400


class TestCreateForm:

    def test_starts_with_basic_defaults(self, client):
        data = client.get("/ui-api/create").get_json()
        assert data["category"] == "Basic"
        rating = next(f for f in data["fields"] if f["name"] == "Rating")
        assert rating["kind"] == "float"

    def test_category_switch_reports_added_and_removed(self, client):
        client.post("/ui-api/create/field", json={"name": "Name", "value": "X"})
        data = client.post("/ui-api/create/category",
                           json={"category": "CPU"}).get_json()
        assert data["category"] == "CPU"
        assert "Cores" in data["added"]
        assert data["removed"] == []
        values = {f["name"]: f["value"] for f in data["fields"]}
        assert values["Name"] == "X"

        data = client.post("/ui-api/create/category",
                           json={"category": "GPU"}).get_json()
        assert "Cores" in data["removed"]
        assert "Max Frequency" not in data["added"]
        assert "Shading Units" in data["added"]

    def test_unknown_field_is_404(self, client):
        response = client.post("/ui-api/create/field",
                               json={"name": "Cores", "value": "4"})
        assert response.status_code == 404

    def test_submit_requires_credentials(self, client, admin):
        assert client.post("/ui-api/create/submit").status_code == 401

    def test_submit_bad_value_names_field(self, client, admin, db_session):
        client.post("/ui-api/create/category", json={"category": "CPU"})
        client.post("/ui-api/create/field",
                    json={"name": "Ecc Memory Supported", "value": "maybe"})
        response = client.post("/ui-api/create/submit", headers=admin)
        assert response.status_code == 400
        data = response.get_json()
        assert data["field"] == "Ecc Memory Supported"
        assert data["expected"] == "bool"
        assert db_session.query(Part).count() == 0

    def test_submit_stores_part_and_resets(self, client, admin, db_session):
        client.post("/ui-api/create/category", json={"category": "CPU"})
        client.post("/ui-api/create/field", json={"name": "Name", "value": "New CPU"})
        client.post("/ui-api/create/field", json={"name": "Cores", "value": "12"})
        client.post("/ui-api/create/field",
                    json={"name": "Ecc Memory Supported", "value": "true"})

        response = client.post("/ui-api/create/submit", headers=admin)
        assert response.status_code == 201
        data = response.get_json()
        assert data["name"] == "New CPU"
        assert data["category"]["CPU"]["cores"] == 12
        assert data["category"]["CPU"]["ecc_memory_supported"] is True
        assert db_session.query(Part).count() == 1

        form = client.get("/ui-api/create").get_json()
        assert form["category"] == "CPU"
        values = {f["name"]: f["value"] for f in form["fields"]}
        assert values["Name"] == ""

    def test_template_prefills_buffer(self, client, db_session):
        part = PartFactory(cpu=True, name="Template")
        data = client.post(f"/ui-api/create/template/{part.id}").get_json()
        values = {f["name"]: f["value"] for f in data["fields"]}
        assert data["category"] == "CPU"
        assert values["Name"] == "Template"
        assert values["Ecc Memory Supported"] == "false"

    def test_reset(self, client):
        client.post("/ui-api/create/field", json={"name": "Name", "value": "X"})
        data = client.post("/ui-api/create/reset").get_json()
        values = {f["name"]: f["value"] for f in data["fields"]}
        assert values["Name"] == ""


class TestSession:

    def test_snapshot_and_discard(self, client):
        _select(client, "RAM")
        snapshot = client.get("/ui-api/session").get_json()
        assert snapshot["selected_category"] == "RAM"
        assert snapshot["ordering"]

        assert client.delete("/ui-api/session").get_json() == {"discarded": True}
        snapshot = client.get("/ui-api/session").get_json()
        assert snapshot["selected_category"] == "Basic"

    def test_sessions_are_per_browser(self, app):
        one, two = app.test_client(), app.test_client()
        one.post("/ui-api/category", json={"category": "GPU"})
        assert two.get("/ui-api/categories").get_json()["selected"] == "Basic"


class TestSessionRegistry:

    def test_least_recently_used_session_is_evicted(self):
        registry = SessionRegistry(limit=2)
        first = registry.get("a")
        registry.get("b")
        assert registry.get("a") is first
        registry.get("c")

        assert len(registry) == 2
        assert "a" in registry
        assert "b" not in registry
        assert "c" in registry

    def test_evicted_session_starts_fresh(self):
        registry = SessionRegistry(limit=1)
        registry.get("a").select_category("CPU")
        registry.get("b")
        assert registry.get("a").selected_category.value == "Basic"

    def test_limit_must_be_positive(self):
        with pytest.raises(ValueError):
            SessionRegistry(limit=0)

    def test_cookieless_clients_stay_within_cap(self, monkeypatch):
        monkeypatch.setattr(config, "UI_SESSION_LIMIT", 5)
        app = create_app("sqlite://", seed=False)
        client = app.test_client(use_cookies=False)
        for _ in range(20):
            assert client.get("/ui-api/fields").status_code == 200
        assert len(app.extensions[EXTENSION_KEY]) == 5
