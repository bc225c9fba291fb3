from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.normalize.document import SUPPORTED_DOCUMENT_TYPES, InvalidDocumentType  # noqa: E402
from app.services.missing_data_service import analyze_missing_data  # noqa: E402


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}") from exc
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {raw!r}")
    return value


def main() -> int:
    parser = argparse.ArgumentParser(description="Score the completeness of an extracted CV or job description.")
    parser.add_argument("--type", dest="document_type", required=True, help="Document type: cv or jd")
    parser.add_argument("--input", required=True, help="Path to the extraction JSON ('-' for stdin)")
    parser.add_argument("--max-actions", type=_positive_int, default=None, help="Keep only the top N priority actions")
    parser.add_argument("--indent", type=int, default=2, help="JSON indent for the output")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING, format="%(message)s")

    if args.input == "-":
        raw = sys.stdin.read()
    else:
        try:
            raw = Path(args.input).read_text(encoding="utf-8")
        except OSError as exc:
            parser.error(f"cannot read --input '{args.input}': {exc.strerror or exc}")

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        parser.error(f"input is not valid JSON: {exc}")

    try:
        analysis = analyze_missing_data(payload, args.document_type, max_actions=args.max_actions)
    except InvalidDocumentType:
        parser.error(f"--type must be one of: {', '.join(SUPPORTED_DOCUMENT_TYPES)}")

    print(analysis.model_dump_json(indent=args.indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
