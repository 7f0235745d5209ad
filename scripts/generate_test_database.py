#!/usr/bin/env python3
"""
Test Recipe Database Generator

Writes a database of deterministic mock recipes to data/testRecipeDatabase.json
so the app can be exercised offline without calling OpenAI.

Usage:
    python scripts/generate_test_database.py        # 50 recipes
    python scripts/generate_test_database.py 200    # 200 recipes

Set TEST_RECIPE_COUNT in .env to change the default count.
"""

import argparse
import json
import os
import re
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from utils.mock_recipes import build_database, build_mock_recipe
from utils.summary_formatter import (
    format_error,
    format_generation_summary,
    format_progress,
)

# Paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_FILE = DATA_DIR / "testRecipeDatabase.json"

DEFAULT_TARGET_COUNT = 50
PROGRESS_INTERVAL = 10

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class DatabaseGenerationError(Exception):
    """Raised when the test database could not be generated or written."""


def utc_timestamp() -> str:
    """Return the current UTC time as an ISO-8601 string with milliseconds."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_target_count(raw: str | None, default: int = DEFAULT_TARGET_COUNT) -> int:
    """
    Parse a recipe count from user input.

    Reads the leading base-10 integer, so "25" and "25abc" both give 25.
    Empty or non-numeric input falls back to ``default``.
    """
    if not raw:
        return default
    match = _LEADING_INT_RE.match(raw)
    if not match:
        return default
    return int(match.group(1))


class TestRecipeDatabaseGenerator:
    """Generates the offline test recipe database."""

    # Keep pytest from collecting this as a test class
    __test__ = False

    def __init__(self, output_path: Path | None = None):
        self.output_path = Path(output_path) if output_path else OUTPUT_FILE

    def generate(self, target_count: int = DEFAULT_TARGET_COUNT) -> dict:
        """
        Generate ``target_count`` mock recipes and write them to disk.

        A count of zero or less writes an empty database.

        Returns:
            The database dict that was written

        Raises:
            DatabaseGenerationError: If the directory or file could not be written
        """
        print(f"Generating {target_count} test recipes (no OpenAI required)...")
        start_time = time.time()

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

            recipes = []
            for index in range(1, target_count + 1):
                recipes.append(build_mock_recipe(index))

                if index % PROGRESS_INTERVAL == 0:
                    print(format_progress(index, target_count))

            database = build_database(recipes, utc_timestamp())

            # Serialize before write_text truncates the existing file
            content = json.dumps(database, indent=2)
            self.output_path.write_text(content, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise DatabaseGenerationError(str(e)) from e

        duration = time.time() - start_time
        print(format_generation_summary(len(recipes), duration, self.output_path))

        return database


# Shared instance for reuse from other scripts
test_recipe_database_generator = TestRecipeDatabaseGenerator()


def resolve_default_count() -> int:
    """Read the default recipe count from TEST_RECIPE_COUNT, falling back to 50."""
    return parse_target_count(os.getenv("TEST_RECIPE_COUNT"), DEFAULT_TARGET_COUNT)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a mock recipe database for offline testing.",
        add_help=False,
    )
    parser.add_argument(
        "count",
        nargs="?",
        default=None,
        help=f"Number of recipes to generate (default: {DEFAULT_TARGET_COUNT})",
    )
    args, extras = parser.parse_known_args(argv)

    # Dash-prefixed values like "-abc" or "-1.5e3" are left over as unknown flags
    if args.count is None and extras:
        args.count = extras[0]

    return args


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    args = parse_args(argv)
    target_count = parse_target_count(args.count, resolve_default_count())

    try:
        test_recipe_database_generator.generate(target_count)
    except Exception as e:
        print(
            format_error(f"Test database generation failed: {e}"),
            file=sys.stderr,
        )
        sys.exit(1)

    print("Test database generation completed successfully!")
    sys.exit(0)


if __name__ == "__main__":
    main()
