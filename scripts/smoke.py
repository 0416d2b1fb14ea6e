# scripts/smoke.py
"""
Smoke Test Script for the Legible scoring stack.

Usage
-----
1. Score the built-in sample text:
    $ python scripts/smoke.py

2. Score a local file (TXT/HTML/PDF/DOCX) through the full extractor:
    $ python scripts/smoke.py --file samples/essay.pdf
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from legible.core.calculator import ReadabilityCalculator
from legible.core.contracts.resource import RESOURCE_TYPE_FILE, FileResource
from legible.core.contracts.scores import ScoreSet
from legible.core.errors import LegibleError
from legible.core.settings import load_settings
from legible.extraction.extractor import ReadabilityExtractor

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_TEXT = """
The concept of 'Distributed Confidence' in AI safety suggests that reliance
should not be placed on a single component but spread across multiple
heterogeneous systems. Instead of treating confidence as a fixed trait of
one model, it sees confidence as a social signal.
"""


def _print_scores(scores: ScoreSet) -> None:
    for key, value in scores.model_dump().items():
        print(f"  - {key:<28} {value}")
    print(f"\n⏱️  Reading time: {ReadabilityCalculator.format_time(scores.readingtime)}")


def main() -> int:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run Legible Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to input file")
    args = parser.parse_args()

    config = load_settings()

    if not args.file:
        print("\n📝 Using default test text (No --file provided)")
        _print_scores(ReadabilityCalculator.from_settings(config).calculate_scores(DEFAULT_TEXT))
        return 0

    resource = FileResource.from_path(args.file)
    print(f"\n📂 Using input file: {resource.path}")
    extractor = ReadabilityExtractor.from_settings(config)

    try:
        if not extractor.validate_resource(resource, RESOURCE_TYPE_FILE):
            print("❌ Unsupported file type")
            return 1
        metadata = extractor.extract_file_metadata(resource)
    except LegibleError as exc:
        print(f"\n❌ Extraction failed: {exc}")
        return 1

    if metadata is None:
        print("⚠️  No readable text found.")
        return 0

    print(f"🔑 Resource hash: {metadata.resourcehash}")
    _print_scores(metadata.scores)
    return 0


if __name__ == "__main__":
    sys.exit(main())
