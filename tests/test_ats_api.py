import os
import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep API tests independent of the per-client rate limit.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from fastapi.testclient import TestClient  # noqa: E402

from ats_scoring.main import app  # noqa: E402

RESUME_TEXT = "\n".join(
    [
        "Jane Doe",
        "Experience",
        "Acme Corp 01/2020 - 06/2023",
        "Built React and TypeScript front-ends backed by Python services.",
        "Education",
        "BSc Computer Science 09/2016 - 06/2019",
        "Skills",
        "Python, Docker, AWS, Git",
    ]
)


class ATSApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.scoring_input = {
            "formatting_check": {
                "has_tables": True,
                "fonts": ["Arial"],
                "font_size": {"min": 10, "max": 12, "average": 11},
                "margins": {"top": 1, "bottom": 1, "left": 1, "right": 1},
                "page_count": 1,
                "file_size": 120000,
            },
            "detected_sections": ["Experience", "Education", "Skills"],
            "keywords": [f"kw{index}" for index in range(20)],
            "date_formats": ["01/2020", "06/2023"],
            "text_length": 1800,
        }

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_score(self):
        response = self.client.post("/v1/ats/score", json={"input": self.scoring_input})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["breakdown"]["formatting"]["score"], 70)
        self.assertEqual(body["overall"], 88)
        self.assertIn("Oracle Taleo cannot parse tables", body["compatibility_matrix"]["taleo"]["issues"])
        self.assertEqual(body["optimizations"][0]["id"], "opt-format-1")

    def test_score_rejects_bad_weights(self):
        payload = {
            "input": self.scoring_input,
            "weights": {"formatting": 0.5, "keywords": 0.5, "structure": 0.5, "readability": 0},
        }
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_score_rejects_negative_sizes(self):
        payload = {"input": {**self.scoring_input, "text_length": -5}}
        response = self.client.post("/v1/ats/score", json=payload)
        self.assertEqual(response.status_code, 422)

    def test_analyze(self):
        response = self.client.post(
            "/v1/ats/analyze",
            json={
                "text": RESUME_TEXT,
                "file_size": 40000,
                "page_count": 1,
                "config": {"target_ats": ["workday"]},
            },
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["sector"], "tech")
        self.assertEqual(list(body["score"]["compatibility_matrix"]), ["workday"])
        self.assertEqual(body["supported_ats"], ["Workday"])
        self.assertIn(body["color"], {"success", "warning", "danger"})

    def test_analyze_rejects_short_text(self):
        response = self.client.post("/v1/ats/analyze", json={"text": "Jane Doe, engineer", "file_size": 10})
        self.assertEqual(response.status_code, 422)
        self.assertIn("too short", response.json()["detail"])

    def test_analyze_rejects_unknown_ats(self):
        response = self.client.post(
            "/v1/ats/analyze",
            json={"text": RESUME_TEXT, "file_size": 10, "config": {"target_ats": ["nope"]}},
        )
        self.assertEqual(response.status_code, 422)

    def test_standards(self):
        response = self.client.get("/v1/ats/standards")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 6)

        response = self.client.get("/v1/ats/standards", params={"strictness": "high"})
        self.assertEqual([item["id"] for item in response.json()], ["taleo"])

        response = self.client.get("/v1/ats/standards", params={"strictness": "extreme"})
        self.assertEqual(response.status_code, 422)

    def test_single_standard(self):
        response = self.client.get("/v1/ats/standards/TALEO")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["name"], "Oracle Taleo")
        self.assertEqual(self.client.get("/v1/ats/standards/unknown").status_code, 404)

    def test_job_board(self):
        response = self.client.get("/v1/ats/job-boards/LinkedIn")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["id"] for item in response.json()], ["taleo", "workday", "greenhouse", "lever"])
        self.assertEqual(self.client.get("/v1/ats/job-boards/nowhere").status_code, 404)

    def test_sectors_and_keyword_gap(self):
        response = self.client.get("/v1/ats/sectors")
        self.assertEqual(response.json(), ["tech", "finance", "marketing", "healthcare"])

        response = self.client.post("/v1/ats/sectors/tech/keyword-gap", json={"keywords": ["React", "python"]})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertNotIn("React", body["missing"])
        self.assertIn("TypeScript", body["missing"])
        self.assertLessEqual(len(body["suggestions"]), 10)

        response = self.client.post("/v1/ats/sectors/space/keyword-gap", json={"keywords": []})
        self.assertEqual(response.status_code, 404)

    def test_section_normalize(self):
        response = self.client.post(
            "/v1/ats/sections/normalize",
            json={"headers": ["Work Experience", "Professional Experiences", "Formation"], "language": "fr"},
        )
        self.assertEqual(response.status_code, 200)
        sections = response.json()["sections"]
        self.assertEqual(sections[0]["canonical"], "experience")
        self.assertEqual(sections[0]["recommended"], "Expérience Professionnelle")
        self.assertIsNone(sections[1]["canonical"])
        self.assertIsNone(sections[1]["recommended"])
        self.assertEqual(sections[2]["canonical"], "education")
        self.assertEqual(sections[2]["recommended"], "Études")


if __name__ == "__main__":
    unittest.main()
