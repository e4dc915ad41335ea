#!/usr/bin/env python3
"""Main entry point for HabitDNA.

Reads a JSON array of habit entries and prints the fingerprint as JSON.

    python main.py entries.json [--active-streaks N --total-streaks M]
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from habit_dna.common.config import get_settings
from habit_dna.common.exceptions import HabitDNAException, ValidationError
from habit_dna.common.logging import configure_logging, get_logger
from habit_dna.data.schemas import HabitEntry, StreakSummary
from habit_dna.services import HabitDNAService

logger = get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compute a Habit DNA fingerprint")
    parser.add_argument("entries", type=Path, help="JSON file with a list of habit entries")
    parser.add_argument("--active-streaks", type=int, default=None)
    parser.add_argument("--total-streaks", type=int, default=None)
    return parser.parse_args(argv)


def load_entries(path: Path) -> list:
    """Read and validate the entries file.

    Raises:
        ValidationError: If the file is not JSON or not a list of entries
    """
    try:
        with open(path, "r") as f:
            raw_entries = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValidationError(
            f"Could not read entries from {path}",
            details={"path": str(path), "reason": str(e)},
        ) from e

    if not isinstance(raw_entries, list):
        raise ValidationError(
            "Entries file must contain a JSON array",
            details={"path": str(path), "found": type(raw_entries).__name__},
        )

    try:
        return [HabitEntry.model_validate(item) for item in raw_entries]
    except PydanticValidationError as e:
        raise ValidationError(
            "Entries file contains an invalid entry",
            details={"path": str(path), "reason": str(e)},
        ) from e


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.effective_log_level)
    logger.setLevel(settings.effective_log_level)
    logger.info(f"HabitDNA initialized in {settings.environment.value} mode")

    try:
        entries = load_entries(args.entries)
    except HabitDNAException as e:
        logger.error(e.message)
        print(json.dumps(e.to_dict()), file=sys.stderr)
        return 1

    streak_summary = None
    if args.total_streaks is not None:
        streak_summary = StreakSummary(
            active_streaks=args.active_streaks or 0,
            total_streaks=args.total_streaks,
        )

    service = HabitDNAService(settings=settings)
    vector = service.analyze(entries, streak_summary)
    fingerprint = service.build_fingerprint(vector, empty_log=not entries)
    print(fingerprint.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
