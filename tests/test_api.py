"""HTTP surface: /health, /scan and /report through the FastAPI test client."""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from fastapi.testclient import TestClient

import perf_scanner_app.utils
from perf_scanner_app.main import app

VALID_KEY = "sk-" + "c" * 30


class ApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        env = patch.dict(os.environ, {"OPENAI_API_KEY": ""})
        env.start()
        self.addCleanup(env.stop)
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def manifest(self, *dependencies: str) -> None:
        data = {"name": "app", "dependencies": {name: "^1.0.0" for name in dependencies}}
        (self.root / "package.json").write_text(json.dumps(data), encoding="utf-8")


class TestHealthAndPages(ApiTestCase):
    def test_health(self) -> None:
        r = self.client.get("/health")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json(), {"status": "ok"})

    def test_root_and_usage_pages(self) -> None:
        self.assertIn("/report", self.client.get("/").text)
        self.assertIn("POST /scan", self.client.get("/scan").text)


class TestScan(ApiTestCase):
    def test_scan_returns_structured_result(self) -> None:
        self.manifest("moment", "date-fns")
        r = self.client.post("/scan", json={"project_path": str(self.root)})
        self.assertEqual(r.status_code, 200)
        body = r.json()
        self.assertEqual(body["score"], 80)
        self.assertEqual(body["summary"], {"critical": 1, "warning": 1, "info": 0, "passed": 10})
        self.assertEqual(
            [i["title"] for i in body["issues"]],
            ["Heavy dependency: moment", "Duplicate date libraries"],
        )
        self.assertEqual(body["issues"][0]["severity"], "critical")
        self.assertEqual(body["issues"][0]["category"], "dependency")
        self.assertIsNone(body["ai_suggestions"])

    def test_missing_path_is_404(self) -> None:
        r = self.client.post("/scan", json={"project_path": str(self.root / "missing")})
        self.assertEqual(r.status_code, 404)
        self.assertIn("Path does not exist", r.json()["detail"])

    def test_missing_manifest_is_400(self) -> None:
        r = self.client.post("/scan", json={"project_path": str(self.root)})
        self.assertEqual(r.status_code, 400)
        self.assertIn("No package.json found", r.json()["detail"])

    def test_ai_without_key_is_400(self) -> None:
        self.manifest("react")
        r = self.client.post("/scan", json={"project_path": str(self.root), "ai": True})
        self.assertEqual(r.status_code, 400)
        self.assertIn("AI mode requires an API key", r.json()["detail"])

    def test_malformed_manifest_is_422(self) -> None:
        (self.root / "package.json").write_text("{broken", encoding="utf-8")
        r = self.client.post("/scan", json={"project_path": str(self.root)})
        self.assertEqual(r.status_code, 422)
        self.assertIn("Could not parse", r.json()["detail"])

    def test_ai_suggestions_included(self) -> None:
        self.manifest("react")
        with patch.object(perf_scanner_app.utils.ai_svc, "summarize", return_value="- all good") as summarize:
            r = self.client.post(
                "/scan",
                json={"project_path": str(self.root), "ai": True, "api_key": VALID_KEY},
            )
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.json()["ai_suggestions"], "- all good")
        self.assertEqual(summarize.call_args.args[1], VALID_KEY)


class TestReport(ApiTestCase):
    def test_text_report(self) -> None:
        self.manifest("lodash")
        r = self.client.post("/report", json={"project_path": str(self.root)})
        self.assertEqual(r.status_code, 200)
        self.assertTrue(r.headers["content-type"].startswith("text/plain"))
        self.assertIn("85/100 (Grade: A)", r.text)
        self.assertIn("Heavy dependency: lodash", r.text)

    def test_report_errors_map_like_scan(self) -> None:
        r = self.client.post("/report", json={"project_path": str(self.root / "missing")})
        self.assertEqual(r.status_code, 404)


if __name__ == "__main__":
    unittest.main()
