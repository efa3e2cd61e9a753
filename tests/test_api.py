from __future__ import annotations

from types import SimpleNamespace

from fastapi.testclient import TestClient

from palette_cut import api
from palette_cut.errors import EmptyInputError


def test_palette_endpoint_returns_color_fields(monkeypatch):
    class FakeExtractor:
        def run(self, image_path: str, color_count: int):
            assert image_path == "https://example.com/image.jpg"
            assert color_count == 2
            return SimpleNamespace(
                swatches=[
                    SimpleNamespace(
                        hex="#123456", rgb=(18, 52, 86), population=60, proportion=0.6
                    ),
                    SimpleNamespace(
                        hex="#222222", rgb=(34, 34, 34), population=40, proportion=0.4
                    ),
                ],
                requested_count=2,
                sample_count=100,
                warnings=[],
            )

    def fake_build(quality: int, ignore_white: bool):
        assert quality == 4
        assert ignore_white is False
        return FakeExtractor()

    monkeypatch.setattr(api, "_build_extractor", fake_build)

    client = TestClient(api.app)
    response = client.post(
        "/palette",
        json={
            "image_url": "https://example.com/image.jpg",
            "color_count": 2,
            "quality": 4,
            "ignore_white": False,
        },
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["sample_count"] == 100
    assert len(payload["colors"]) == 2
    assert payload["colors"][0]["hex"] == "#123456"
    assert payload["colors"][0]["rgb"] == [18, 52, 86]
    assert payload["colors"][0]["percentage"] == 60.0


def test_color_endpoint_returns_dominant_color(monkeypatch):
    class FakeExtractor:
        def dominant_color(self, image_path: str):
            return (255, 0, 16)

    monkeypatch.setattr(api, "_build_extractor", lambda quality, ignore_white: FakeExtractor())

    client = TestClient(api.app)
    response = client.post("/color", json={"image_url": "https://example.com/a.png"})

    assert response.status_code == 200
    assert response.json() == {"hex": "#FF0010", "rgb": [255, 0, 16]}


def test_out_of_range_color_count_is_rejected():
    client = TestClient(api.app)
    response = client.post(
        "/palette", json={"image_url": "https://example.com/a.png", "color_count": 1}
    )

    assert response.status_code == 422


def test_empty_image_maps_to_422(monkeypatch):
    class EmptyExtractor:
        def run(self, image_path: str, color_count: int):
            raise EmptyInputError("no samples to cluster")

    monkeypatch.setattr(api, "_build_extractor", lambda quality, ignore_white: EmptyExtractor())

    client = TestClient(api.app)
    response = client.post("/palette", json={"image_url": "https://example.com/a.png"})

    assert response.status_code == 422
    assert response.json()["detail"] == "no samples to cluster"


def test_fetch_failure_maps_to_400(monkeypatch):
    class BrokenExtractor:
        def run(self, image_path: str, color_count: int):
            raise OSError("connection refused")

    monkeypatch.setattr(api, "_build_extractor", lambda quality, ignore_white: BrokenExtractor())

    client = TestClient(api.app)
    response = client.post("/palette", json={"image_url": "https://example.com/a.png"})

    assert response.status_code == 400
    assert response.json()["detail"] == "failed_to_extract_palette: connection refused"
