import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from ats_scoring.schemas import ATSAnalysisConfig  # noqa: E402
from ats_scoring.scoring import get_score_color, get_score_label  # noqa: E402
from ats_scoring.services.ats_service import ATSAnalysisError, analyze_resume_text, score_input  # noqa: E402
from ats_scoring.signals import build_scoring_input  # noqa: E402

RESUME_TEXT = "\n".join(
    [
        "Jane Doe",
        "jane@example.com",
        "Summary",
        "Full-stack engineer building React and TypeScript products.",
        "Experience",
        "Acme Corp 01/2020 - 06/2023",
        "Built REST API services in Python and Node.js on AWS with Docker.",
        "Education",
        "MSc Computer Science 09/2017 - 06/2019",
        "Skills",
        "Python, PostgreSQL, Git, Jira",
    ]
)


class ATSServiceTests(unittest.TestCase):
    def test_rejects_short_text(self):
        with self.assertRaises(ATSAnalysisError) as ctx:
            analyze_resume_text("Too short to score.", file_size=100, page_count=1)
        self.assertEqual(ctx.exception.status_code, 422)

    def test_whitespace_does_not_count_towards_length(self):
        with self.assertRaises(ATSAnalysisError):
            analyze_resume_text("   short   " + " " * 200, file_size=100, page_count=1)

    def test_rejects_unknown_target_ats(self):
        with self.assertRaises(ATSAnalysisError) as ctx:
            analyze_resume_text(
                RESUME_TEXT,
                file_size=100,
                page_count=1,
                config=ATSAnalysisConfig(target_ats=["taleo", "bamboohr"]),
            )
        self.assertIn("bamboohr", str(ctx.exception))

    def test_rejects_unknown_sector(self):
        with self.assertRaises(ATSAnalysisError):
            analyze_resume_text(
                RESUME_TEXT,
                file_size=100,
                page_count=1,
                config=ATSAnalysisConfig(target_sector="aerospace"),
            )

    def test_full_report(self):
        report = analyze_resume_text(RESUME_TEXT, file_size=50_000, page_count=1)
        self.assertEqual(report.sector, "tech")
        self.assertIn("React", report.keywords)
        self.assertIsNotNone(report.keyword_gap)
        self.assertIn("HTML5", report.keyword_gap.missing)
        self.assertNotIn("React", report.keyword_gap.missing)
        self.assertTrue(report.keyword_gap.suggestions)
        self.assertEqual(report.date_formats, ["01/2020", "06/2023", "09/2017", "06/2019"])
        self.assertEqual(
            [section.normalized_name for section in report.detected_sections],
            ["summary", "experience", "education", "skills"],
        )
        self.assertEqual(report.label, get_score_label(report.score.overall))
        self.assertEqual(report.color, get_score_color(report.score.overall))
        self.assertEqual(len(report.score.compatibility_matrix), 6)
        self.assertIn("Oracle Taleo", report.supported_ats)

    def test_config_narrows_matrix_and_sector(self):
        report = analyze_resume_text(
            RESUME_TEXT,
            file_size=50_000,
            page_count=1,
            config=ATSAnalysisConfig(
                target_ats=[" Taleo ", "lever"],
                target_sector="Finance",
                include_keyword_suggestions=False,
            ),
        )
        self.assertEqual(list(report.score.compatibility_matrix), ["taleo", "lever"])
        self.assertEqual(report.supported_ats, ["Oracle Taleo", "Lever"])
        self.assertEqual(report.sector, "finance")
        self.assertIn("Financial Modeling", report.keyword_gap.missing)
        self.assertEqual(report.keyword_gap.suggestions, [])

    def test_target_keywords_flow_into_keyword_score(self):
        report = analyze_resume_text(
            RESUME_TEXT,
            file_size=50_000,
            page_count=1,
            target_keywords=["React", "Kotlin"],
        )
        self.assertEqual(report.score.breakdown.keywords.score, 50)
        self.assertEqual(report.score.breakdown.keywords.improvements, ["Consider adding: kotlin"])

    def test_score_input_matches_engine(self):
        scoring_input = build_scoring_input(RESUME_TEXT, file_size=50_000, page_count=1)
        report = analyze_resume_text(RESUME_TEXT, file_size=50_000, page_count=1)
        self.assertEqual(score_input(scoring_input).overall, report.score.overall)


if __name__ == "__main__":
    unittest.main()
