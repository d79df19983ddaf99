"""Tests for the HTTP API."""

import logging

from app import __version__
from app.config import settings


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"name": "Big-O Catalog API", "version": __version__, "status": "ok"}


def test_health(client):
    data = client.get("/api/v1/health").json()
    assert data["status"] == "ok"
    assert data["version"] == __version__
    assert "timestamp" in data


def test_security_headers(client):
    response = client.get("/")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_classify(client):
    response = client.post("/api/v1/classify", json={"notation": "O(1)"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["result"]["notation"] == "O(1)"
    assert data["result"]["quality"] == "best"
    assert data["result"]["source"] == "table"
    assert data["result"]["style"] == {
        "quality": "best",
        "display_class": "bg-complexity-best text-gray-900",
        "text_class": "text-green-600 dark:text-green-400",
        "label": "Best",
    }


def test_classify_does_not_log_notation_at_info(client, caplog):
    caplog.set_level(logging.INFO)
    client.post("/api/v1/classify", json={"notation": "O(private-marker)"})
    info_messages = [r.getMessage() for r in caplog.records if r.levelno >= logging.INFO]
    assert any("Classified notation as fair" in m for m in info_messages)
    assert not any("private-marker" in m for m in info_messages)


def test_classify_reports_heuristic_source(client):
    result = client.post("/api/v1/classify", json={"notation": "O(n^2 log n)"}).json()["result"]
    assert result["quality"] == "bad"
    assert result["source"] == "heuristic"


def test_classify_empty_notation_is_fair(client):
    result = client.post("/api/v1/classify", json={"notation": ""}).json()["result"]
    assert result["quality"] == "fair"
    assert result["source"] == "default"


def test_classify_rejects_missing_notation(client):
    response = client.post("/api/v1/classify", json={})
    assert response.status_code == 422
    assert response.json() == {"success": False, "error": "Invalid request format"}


def test_classify_rejects_long_notation(client):
    response = client.post("/api/v1/classify", json={"notation": "O(" + "n" * settings.MAX_NOTATION_LENGTH + ")"})
    assert response.status_code == 422


def test_classify_accepts_notation_at_length_limit(client):
    notation = "O(" + "n" * (settings.MAX_NOTATION_LENGTH - 3) + ")"
    assert len(notation) == settings.MAX_NOTATION_LENGTH
    response = client.post("/api/v1/classify", json={"notation": notation})
    assert response.status_code == 200
    assert response.json()["result"]["notation"] == notation


def test_classify_batch_preserves_order(client):
    notations = ["O(n!)", "Θ(log n)", "N/A", "  O(n)  "]
    response = client.post("/api/v1/classify/batch", json={"notations": notations})
    assert response.status_code == 200
    results = response.json()["results"]
    assert [r["notation"] for r in results] == notations
    assert [r["quality"] for r in results] == ["worst", "good", "na", "fair"]


def test_classify_batch_rejects_empty_list(client):
    response = client.post("/api/v1/classify/batch", json={"notations": []})
    assert response.status_code == 422


def test_classify_batch_rejects_oversized_batch(client):
    notations = ["O(1)"] * (settings.MAX_BATCH_SIZE + 1)
    response = client.post("/api/v1/classify/batch", json={"notations": notations})
    assert response.status_code == 422


def test_list_qualities(client):
    styles = client.get("/api/v1/qualities").json()["styles"]
    assert [s["quality"] for s in styles] == ["best", "good", "fair", "bad", "worst", "na"]
    assert [s["label"] for s in styles] == ["Best", "Good", "Fair", "Bad", "Worst", "N/A"]


def test_get_quality(client):
    style = client.get("/api/v1/qualities/worst").json()["style"]
    assert style["display_class"] == "bg-complexity-bad text-gray-900"
    assert style["text_class"] == "text-red-600 dark:text-red-500"


def test_get_quality_is_case_insensitive(client):
    assert client.get("/api/v1/qualities/NA").json()["style"]["label"] == "N/A"


def test_get_unknown_quality(client):
    response = client.get("/api/v1/qualities/excellent")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Unknown quality tier: excellent"}


def test_list_sections(client):
    sections = client.get("/api/v1/catalog").json()["sections"]
    assert "data-structures" in sections
    assert "python-modules" in sections
    assert "resources" in sections


def test_get_data_structures(client):
    data = client.get("/api/v1/catalog/data-structures").json()
    assert data["section"] == "data-structures"
    array = data["data"][0]
    assert array["name"] == "Array"
    assert array["time"]["average"]["access"] == "Θ(1)"
    assert array["space"]["worst"] == "O(n)"


def test_get_time_complexities_serializes_levels(client):
    data = client.get("/api/v1/catalog/time-complexities").json()["data"]
    assert data[0]["level"] == "best"
    assert data[-1]["level"] == "worst"


def test_get_python_modules(client):
    data = client.get("/api/v1/catalog/python-modules").json()["data"]
    assert list(data) == ["functools", "iterables", "itertools", "collections", "random", "numeric"]
    assert data["functools"][0]["group"] == "functools"


def test_get_search_algorithms(client):
    data = client.get("/api/v1/catalog/search-algorithms").json()["data"]
    assert data["graph"][0]["name"] == "Breadth-First Search"


def test_get_unknown_section(client):
    response = client.get("/api/v1/catalog/routing")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Unknown catalog section: routing"}


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/nowhere")
    assert response.status_code == 404
    assert response.json()["success"] is False
    assert response.json()["error"] == "Not Found"
