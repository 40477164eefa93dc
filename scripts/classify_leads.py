"""
scripts/classify_leads.py — CLI to classify a file of leads offline.

Input is a JSON file holding one lead object or an array of leads.

Usage:
    python scripts/classify_leads.py leads.json
    python scripts/classify_leads.py leads.json --output results.json
    cat leads.json | python scripts/classify_leads.py -
"""

import sys
import os
import argparse
import json
import logging

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from app.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("classify_leads")

from app.services.lead_service import classify_leads, summarize


def load_leads(path: str) -> list:
    """Read leads from a file path or '-' for stdin. A single object becomes a one-item list."""
    if path == "-":
        data = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    return data if isinstance(data, list) else [data]


def run(input_path: str, output_path: str | None) -> int:
    try:
        leads = load_leads(input_path)
    except json.JSONDecodeError as e:
        logger.error("Input %s is not valid JSON: %s", input_path, e)
        return 1

    results = classify_leads(leads)
    payload = json.dumps(results, indent=2)

    if output_path:
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(payload + "\n")
        logger.info("Wrote %d results to %s", len(results), output_path)
    else:
        print(payload)

    stats = summarize(results)
    print(
        f"Classified {stats['total']} leads: {stats['junk']} junk, "
        f"{stats['valid']} valid ({stats['junk_rate']:.0%} junk).",
        file=sys.stderr,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Classify leads from a JSON file.")
    parser.add_argument("input", help="Path to a JSON file of leads, or '-' for stdin")
    parser.add_argument(
        "--output", "-o", default=None,
        help="Write results to this file instead of stdout"
    )
    args = parser.parse_args(argv)
    return run(args.input, args.output)


if __name__ == "__main__":
    sys.exit(main())
