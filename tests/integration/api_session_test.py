"""Drive the API the way an editor would: edit, re-analyze, close."""

from __future__ import annotations

from fastapi.testclient import TestClient

from hypnolint.api.app import create_app


def test_editing_session_round_trip() -> None:
    with TestClient(create_app()) as client:
        first = client.post("/analyze", json={"uri": "file:///doc.hyp", "text": "observe 1"})
        assert len(first.json()["diagnostics"]) == 3

        fixed = client.post("/fixes", json={"text": "observe 1"}).json()["fixed_text"]
        client.post("/analyze", json={"uri": "file:///doc.hyp", "text": fixed})
        stored = client.get("/diagnostics", params={"uri": "file:///doc.hyp"}).json()
        assert stored["diagnostics"] == []

        formatted = client.post("/format", json={"text": fixed}).json()
        assert formatted == {"text": "Focus {\n    observe 1;\n} Relax\n", "changed": True}

        assert client.delete("/diagnostics", params={"uri": "file:///doc.hyp"}).json() == {
            "cleared": ["file:///doc.hyp"]
        }
