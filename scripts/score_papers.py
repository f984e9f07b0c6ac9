#!/usr/bin/env python3
"""Score a paper collection for one user profile.

Run from project root:
  python scripts/score_papers.py input.json [--exploration 0.3] [--limit 20] [--output out.json]

The input file holds {"profile": {...}, "papers": [{...}, ...]}. The result
is printed (or written to --output) as JSON: the scored papers, the summary
line and the number of highly relevant papers.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Ensure relevance_engine is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv
from loguru import logger as loguru_logger

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

from pydantic import ValidationError

from relevance_engine.config import get_settings
from relevance_engine.models.schemas import Paper, UserProfile
from relevance_engine.services.batch_orchestrator import process_papers

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score papers for a user profile.")
    parser.add_argument("input", type=Path, help="JSON file with 'profile' and 'papers'")
    parser.add_argument(
        "--exploration",
        type=float,
        default=None,
        help="Override the profile's exploration level (0 = focused, 1 = broad)",
    )
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of papers to output")
    parser.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")
    parser.add_argument("--workers", type=int, default=1, help="Scoring threads")
    return parser.parse_args(argv)


def load_request(path: Path, exploration: float | None = None) -> tuple[UserProfile, list[Paper]]:
    """Read and validate the input file."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError("input must be a JSON object with 'profile' and 'papers'")

    profile_data = dict(payload.get("profile") or {})
    if exploration is not None:
        profile_data["exploration_level"] = exploration
    profile = UserProfile.model_validate(profile_data)
    papers = [Paper.model_validate(p) for p in payload.get("papers") or []]
    return profile, papers


def configure_logging(level: str) -> None:
    """Apply one level to both the stdlib and the loguru loggers."""
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    loguru_logger.remove()
    loguru_logger.add(sys.stderr, level=level)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        profile, papers = load_request(args.input, args.exploration)
    except FileNotFoundError:
        logger.error("Input file not found: %s", args.input)
        return 1
    except ValueError as e:
        # JSONDecodeError and ValidationError are both ValueError subclasses
        kind = "Invalid input record" if isinstance(e, ValidationError) else "Could not read input"
        logger.error("%s: %s", kind, e)
        return 1

    batch = process_papers(profile, papers, max_results=args.limit, max_workers=args.workers)
    result = batch.to_response()
    result["high_relevance_count"] = sum(
        1 for p in batch.papers if p.relevance_score >= settings.high_relevance_threshold
    )

    output = json.dumps(result, indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        logger.info("Wrote %d scored papers to %s", len(batch.papers), args.output)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
