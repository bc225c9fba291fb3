import importlib.util
import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from document_factories import complete_jd_payload  # noqa: E402


def _load_script():
    path = PROJECT_ROOT / "scripts" / "analyze_document.py"
    spec = importlib.util.spec_from_file_location("analyze_document_script", path)
    if spec is None or spec.loader is None:
        raise RuntimeError(f"Unable to load script at '{path}'.")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class AnalyzeDocumentScriptTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.script = _load_script()

    def _run(self, *argv):
        stdout = io.StringIO()
        with patch.object(sys, "argv", ["analyze_document.py", *argv]), redirect_stdout(stdout):
            code = self.script.main()
        return code, stdout.getvalue()

    def test_prints_analysis_json(self):
        payload = complete_jd_payload()
        del payload["company"]
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "jd.json"
            path.write_text(json.dumps(payload), encoding="utf-8")
            code, output = self._run("--type", "jd", "--input", str(path))

        self.assertEqual(code, 0)
        body = json.loads(output)
        self.assertEqual(body["overall_score"], 92)
        self.assertEqual(body["recommended"][0]["id"], "company")

    def test_unknown_type_exits_with_usage_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.json"
            path.write_text("{}", encoding="utf-8")
            with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
                self._run("--type", "letter", "--input", str(path))

        self.assertEqual(ctx.exception.code, 2)

    def test_invalid_json_exits_with_usage_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.json"
            path.write_text("{not json", encoding="utf-8")
            with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
                self._run("--type", "cv", "--input", str(path))

        self.assertEqual(ctx.exception.code, 2)

    def test_missing_input_file_exits_with_usage_error(self):
        with tempfile.TemporaryDirectory() as tmp:
            stderr = io.StringIO()
            with redirect_stderr(stderr), self.assertRaises(SystemExit) as ctx:
                self._run("--type", "cv", "--input", str(Path(tmp) / "missing.json"))

        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("cannot read --input", stderr.getvalue())

    def test_max_actions_must_be_positive(self):
        for value in ("0", "-2", "three"):
            with self.subTest(value=value), tempfile.TemporaryDirectory() as tmp:
                path = Path(tmp) / "cv.json"
                path.write_text("{}", encoding="utf-8")
                with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as ctx:
                    self._run("--type", "cv", "--input", str(path), "--max-actions", value)

                self.assertEqual(ctx.exception.code, 2)

    def test_max_actions_limits_the_ranking(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "cv.json"
            path.write_text("{}", encoding="utf-8")
            code, output = self._run("--type", "cv", "--input", str(path), "--max-actions", "2")

        self.assertEqual(code, 0)
        self.assertEqual(
            [action["id"] for action in json.loads(output)["priority_actions"]],
            ["add-full-name", "add-work-experience"],
        )


if __name__ == "__main__":
    unittest.main()
