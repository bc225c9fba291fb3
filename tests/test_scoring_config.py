import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.core.config import scoring  # noqa: E402
from app.core.config.scoring import (  # noqa: E402
    clear_scoring_config_cache,
    get_scoring_config,
    get_scoring_value,
)
from app.services.missing_data_service import analyze_missing_data  # noqa: E402
from document_factories import complete_cv_payload  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def tearDown(self):
        clear_scoring_config_cache()

    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("missing_data.thresholds.min_description_chars"), 20)
        self.assertEqual(get_scoring_value("missing_data.thresholds.min_responsibilities"), 3)

    def test_unknown_path_returns_default(self):
        self.assertEqual(get_scoring_value("missing_data.thresholds.unknown", 7), 7)
        self.assertEqual(get_scoring_value("missing_data.thresholds.min_description_chars.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))

    def test_invalid_yaml_raises_runtime_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            bad = Path(tmp) / "scoring.yaml"
            bad.write_text("missing_data: [unclosed", encoding="utf-8")
            clear_scoring_config_cache()
            with patch.object(scoring, "_scoring_config_path", return_value=bad):
                with self.assertRaises(RuntimeError):
                    get_scoring_config()

    def test_non_mapping_yaml_raises_runtime_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            bad = Path(tmp) / "scoring.yaml"
            bad.write_text("- just\n- a list\n", encoding="utf-8")
            clear_scoring_config_cache()
            with patch.object(scoring, "_scoring_config_path", return_value=bad):
                with self.assertRaises(RuntimeError):
                    get_scoring_config()

    def test_missing_file_raises_runtime_error(self):
        clear_scoring_config_cache()
        with patch.object(scoring, "_scoring_config_path", return_value=Path("/nonexistent/scoring.yaml")):
            with self.assertRaises(RuntimeError):
                get_scoring_config()

    def test_thresholds_drive_the_description_check(self):
        with tempfile.TemporaryDirectory() as tmp:
            strict = Path(tmp) / "scoring.yaml"
            strict.write_text(
                "missing_data:\n  thresholds:\n    min_description_chars: 500\n",
                encoding="utf-8",
            )
            clear_scoring_config_cache()
            with patch.object(scoring, "_scoring_config_path", return_value=strict):
                analysis = analyze_missing_data(complete_cv_payload(), "cv")

        self.assertEqual([field.id for field in analysis.recommended], ["experience[0].description"])
        self.assertEqual(analysis.overall_score, 95)


if __name__ == "__main__":
    unittest.main()
