import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from pydantic import ValidationError  # noqa: E402

from ats_scoring.standards import (  # noqa: E402
    get_all_ats_standards,
    get_ats_by_strictness,
    get_ats_for_job_board,
    get_ats_standard,
    get_job_board_mappings,
    get_recommended_section_header,
    normalize_section_header,
)


class VendorStandardsTests(unittest.TestCase):
    def test_lookup_is_case_insensitive(self):
        taleo = get_ats_standard("Taleo")
        self.assertIsNotNone(taleo)
        self.assertEqual(taleo.name, "Oracle Taleo")
        self.assertFalse(taleo.parsing_capabilities.parses_tables)
        self.assertEqual(taleo.preferences.max_file_size, 5 * 1024 * 1024)
        self.assertIsNone(get_ats_standard("bamboohr"))

    def test_all_standards_in_table_order(self):
        ids = [standard.id for standard in get_all_ats_standards()]
        self.assertEqual(ids, ["taleo", "workday", "greenhouse", "lever", "smartrecruiters", "icims"])

    def test_filter_by_strictness(self):
        self.assertEqual([s.id for s in get_ats_by_strictness("high")], ["taleo"])
        self.assertEqual([s.id for s in get_ats_by_strictness("low")], ["lever", "smartrecruiters"])

    def test_job_board_resolution(self):
        ids = [standard.id for standard in get_ats_for_job_board("linkedin")]
        self.assertEqual(ids, ["taleo", "workday", "greenhouse", "lever"])
        self.assertEqual([s.id for s in get_ats_for_job_board(" Welcome to the Jungle ")], ["greenhouse", "lever", "workday"])
        self.assertEqual(get_ats_for_job_board("craigslist"), [])
        self.assertEqual(len(get_job_board_mappings()), 7)

    def test_standards_are_immutable(self):
        taleo = get_ats_standard("taleo")
        with self.assertRaises(ValidationError):
            taleo.name = "Changed"


class SectionHeaderTests(unittest.TestCase):
    def test_normalize_trims_and_ignores_case(self):
        self.assertEqual(normalize_section_header("  WORK EXPERIENCE "), "experience")
        self.assertEqual(normalize_section_header("Compétences"), "skills")
        self.assertEqual(normalize_section_header("Profil"), "summary")
        self.assertEqual(normalize_section_header("Langues"), "languages")

    def test_normalize_requires_exact_variant(self):
        self.assertIsNone(normalize_section_header("Professional Experiences"))
        self.assertIsNone(normalize_section_header("Hobbies"))

    def test_recommended_header_by_language(self):
        self.assertEqual(get_recommended_section_header("experience"), "Professional Experience")
        self.assertEqual(get_recommended_section_header("experience", "fr"), "Expérience Professionnelle")
        self.assertEqual(get_recommended_section_header("education", "fr"), "Études")
        self.assertEqual(get_recommended_section_header("summary", "fr"), "Résumé")

    def test_recommended_header_without_accented_variant(self):
        self.assertEqual(get_recommended_section_header("languages", "fr"), "Languages")
        self.assertEqual(get_recommended_section_header("skills", "de"), "Skills")

    def test_unknown_section_is_returned_as_given(self):
        self.assertEqual(get_recommended_section_header("Hobbies", "fr"), "Hobbies")


if __name__ == "__main__":
    unittest.main()
