"""Persona merge/clear/snapshot endpoint tests."""

from __future__ import annotations

from fastapi.testclient import TestClient

from persona import SPICE_POLICIES, PersonaComposer
from tests.conftest import StubUpstream, make_app, make_settings


class TestMerge:
    def test_merge_reports_counts(self, client: TestClient) -> None:
        response = client.post(
            "/persona/merge",
            json={"sections": [{"title": "A", "text": "x"}, {"text": ""}, {"text": "y"}]},
        )
        assert response.status_code == 200
        assert response.json() == {"ok": True, "mergedCount": 2, "totalSections": 2}

        response = client.post("/persona/merge", json={"sections": [{"title": "B", "text": "z"}]})
        assert response.json() == {"ok": True, "mergedCount": 1, "totalSections": 3}

    def test_empty_text_merges_nothing(self, client: TestClient) -> None:
        response = client.post("/persona/merge", json={"sections": [{"text": ""}]})
        assert response.json() == {"ok": True, "mergedCount": 0, "totalSections": 0}

    def test_malformed_bodies_never_error(self, client: TestClient) -> None:
        for kwargs in (
            {"content": b"not json", "headers": {"content-type": "application/json"}},
            {"json": ["a", "list"]},
            {"json": {"sections": "nope"}},
            {"json": {"sections": [1, None, "x", {"title": "no text"}]}},
            {},
        ):
            response = client.post("/persona/merge", **kwargs)
            assert response.status_code == 200
            assert response.json() == {"ok": True, "mergedCount": 0, "totalSections": 0}


class TestClear:
    def test_clear_empties_sections(self, client: TestClient, composer: PersonaComposer) -> None:
        client.post("/persona/merge", json={"sections": [{"title": "A", "text": "x"}]})

        response = client.post("/persona/clear")

        assert response.json() == {"ok": True, "totalSections": 0}
        assert composer.total_sections == 0


class TestSnapshot:
    def test_snapshot_reflects_state(self, stub: StubUpstream) -> None:
        client = TestClient(make_app(stub, make_settings(static_persona="Operator notes", default_spice="2")))
        client.post("/persona/merge", json={"sections": [{"title": "A", "text": "x"}, {"text": "y"}]})

        body = client.get("/persona").json()

        assert body["spice"] == 2
        assert body["spicePolicy"] == SPICE_POLICIES[2]
        assert body["hasStaticPersona"] is True
        assert body["totalSections"] == 2
        assert body["sectionTitles"] == ["A", "Section 2"]
        assert body["preview"].startswith("You are **Kira**")
        assert len(body["preview"]) <= 803
        assert body["instructionsLength"] > len(body["preview"])

    def test_snapshot_without_static_persona(self, client: TestClient) -> None:
        body = client.get("/persona").json()
        assert body["hasStaticPersona"] is False
        assert body["totalSections"] == 0
        assert body["sectionTitles"] == []
