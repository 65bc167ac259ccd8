"""
HTTP tests for the eatery API.

Apps are built with create_app() against a temporary or bundled source
directory; entering the TestClient context runs the lifespan, which loads
the catalog.
"""

import json
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from backend.api import create_app
from backend.catalog import CatalogSourceError
from backend.config import CatalogConfig
from backend.corpus import EATERIES_DIR
from models import Eatery, EateryList


class TestEateryApi(unittest.TestCase):
    """Runs against the ten bundled eateries."""

    def setUp(self) -> None:
        self.client = TestClient(create_app(CatalogConfig(eateries_dir=EATERIES_DIR)))
        self.client.__enter__()

    def tearDown(self) -> None:
        self.client.__exit__(None, None, None)

    def test_hello(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "Hello world!")

    def test_echo(self) -> None:
        response = self.client.post("/echo", content="ping", headers={"content-type": "text/plain"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "ping")

    def test_eateries_lists_all(self) -> None:
        response = self.client.get("/eateries")

        self.assertEqual(response.status_code, 200)
        listing = EateryList.model_validate(response.json())
        self.assertEqual(len(listing.restaurants), 10)
        self.assertEqual([e.id for e in listing.restaurants], list(range(10)))
        for item in response.json()["restaurants"]:
            self.assertNotIn("reviews", item)

    def test_eatery_by_id(self) -> None:
        for eatery_id in range(10):
            response = self.client.post("/eatery", json={"id": eatery_id})
            self.assertEqual(response.status_code, 200)
            eatery = Eatery.model_validate_json(response.text)
            self.assertEqual(eatery.id, eatery_id)

    def test_list_and_lookup_agree(self) -> None:
        listing = self.client.get("/eateries").json()["restaurants"]

        for summary in listing:
            detail = self.client.post("/eatery", json={"id": summary["id"]}).json()
            reviews = detail.pop("reviews")
            self.assertIsInstance(reviews, list)
            self.assertEqual(detail, summary)

    def test_unknown_id_is_404(self) -> None:
        response = self.client.post("/eatery", json={"id": 999})
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["detail"], "No eatery with that id")

    def test_invalid_id_is_422(self) -> None:
        self.assertEqual(self.client.post("/eatery", json={"id": -1}).status_code, 422)
        self.assertEqual(self.client.post("/eatery", json={}).status_code, 422)

    def test_search(self) -> None:
        counts = {"c": 4, "xyz": 0, "college": 2, "COLLEGE": 2, "": 10}
        for query, expected in counts.items():
            response = self.client.get("/eateries/search", params={"name": query})
            self.assertEqual(response.status_code, 200)
            self.assertEqual(len(response.json()["restaurants"]), expected, query)

    def test_search_requires_name(self) -> None:
        self.assertEqual(self.client.get("/eateries/search").status_code, 422)

    def test_health_reports_counts(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.json(), {"status": "ok", "eateries": 10, "dropped": 0})


class TestEateryApiStartup(unittest.TestCase):
    def test_malformed_blobs_are_excluded_and_counted(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp)
            good = json.loads((EATERIES_DIR / "0.json").read_text())
            (source / "good.json").write_text(json.dumps(good))
            bad = dict(good, id=1, rating="five")
            (source / "bad.json").write_text(json.dumps(bad))

            with TestClient(create_app(CatalogConfig(eateries_dir=source))) as client:
                listing = client.get("/eateries").json()["restaurants"]
                health = client.get("/health").json()
                missing = client.post("/eatery", json={"id": 1})

        self.assertEqual([e["id"] for e in listing], [0])
        self.assertEqual(health["dropped"], 1)
        self.assertEqual(missing.status_code, 404)

    def test_empty_source_serves_empty_catalog(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with TestClient(create_app(CatalogConfig(eateries_dir=Path(tmp)))) as client:
                self.assertEqual(client.get("/eateries").json(), {"restaurants": []})
                self.assertEqual(client.post("/eatery", json={"id": 0}).status_code, 404)

    def test_missing_source_aborts_startup(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            app = create_app(CatalogConfig(eateries_dir=Path(tmp) / "missing"))
            with self.assertRaises(CatalogSourceError):
                with TestClient(app):
                    pass
