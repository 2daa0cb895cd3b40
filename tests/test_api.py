"""Tests for the chart API."""

from uuid import uuid4

from fastapi.testclient import TestClient

from diet_radar.api.app import create_app
from diet_radar.containers import AppContainer


def _series(view: dict) -> dict[str, dict]:
    return {item["key"]: item for item in view["series"]}


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_chart_page_served(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/")

    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Diet Category Radar Chart" in response.text


def test_chart_page_sends_legend_events_in_order(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    page = client.get("/").text

    assert "eventQueue = eventQueue.then(" in page


def test_chart_rows(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/chart/rows")

    assert response.status_code == 200
    rows = response.json()["rows"]
    assert len(rows) == 29
    assert rows[0]["label"] == "Red Meat"
    assert rows[0]["values"]["user_diet"] == 95.0
    assert rows[0]["center_fill"] == 1.0


def test_start_view_returns_initial_state(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/views")

    assert response.status_code == 201
    data = response.json()
    assert data["session_id"]
    series = _series(data["view"])
    assert series["user_diet"]["name"] == "Your Diet"
    assert series["keto"]["fill_opacity"] == 0.1
    assert series["keto"]["stroke_opacity"] == 1.0
    assert data["view"]["center_fill"]["data_key"] == "centerFill"
    assert data["view"]["radius_axis"]["domain"] == [0, 100]


def test_legend_events_drive_opacity(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = client.post("/views").json()["session_id"]

    response = client.post(
        f"/views/{session_id}/events", json={"type": "pointer_enter", "diet": "vegan"}
    )
    series = _series(response.json()["view"])
    assert series["vegan"]["fill_opacity"] == 0.3
    assert series["keto"]["fill_opacity"] == 0.05
    assert series["keto"]["stroke_opacity"] == 0.2

    response = client.post(
        f"/views/{session_id}/events", json={"type": "click", "diet": "keto"}
    )
    series = _series(response.json()["view"])
    assert series["keto"]["fill_opacity"] == 0
    assert series["keto"]["stroke_opacity"] == 0

    response = client.post(
        f"/views/{session_id}/events", json={"type": "pointer_leave"}
    )
    series = _series(response.json()["view"])
    assert series["vegan"]["fill_opacity"] == 0.1
    assert series["keto"]["fill_opacity"] == 0

    response = client.get(f"/views/{session_id}")
    legend = {item["key"]: item for item in response.json()["view"]["legend"]}
    assert legend["keto"]["visible"] is False
    assert legend["keto"]["background"] == "#ccc"


def test_unknown_session_is_404(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    assert client.get(f"/views/{uuid4()}").status_code == 404
    response = client.post(f"/views/{uuid4()}/events", json={"type": "pointer_leave"})
    assert response.status_code == 404


def test_unknown_diet_is_404(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = client.post("/views").json()["session_id"]

    response = client.post(
        f"/views/{session_id}/events", json={"type": "click", "diet": "fruitarian"}
    )

    assert response.status_code == 404


def test_event_requires_diet(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = client.post("/views").json()["session_id"]

    response = client.post(f"/views/{session_id}/events", json={"type": "click"})

    assert response.status_code == 400


def test_malformed_event_is_rejected(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    session_id = client.post("/views").json()["session_id"]

    response = client.post(
        f"/views/{session_id}/events", json={"type": "double_click", "diet": "keto"}
    )

    assert response.status_code == 422


def test_similarity(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/similarity")

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Diet Similarity"
    assert data["points"][0] == {"name": "Balanced Omnivore", "value": 0.92}
    assert data["stroke"] == "#8884d8"
