"""Command line interface for generating the pet image catalog."""
from __future__ import annotations

import argparse
import logging
import os
import pathlib
import sys
from typing import Iterable, Mapping, Optional

from petgen.batch import (
    DEFAULT_OUTPUT_DIR,
    REQUEST_DELAY_SECONDS,
    BatchConfig,
    run_batch,
)
from petgen.catalog import DEFAULT_CATALOG_PATH, load_catalog
from petgen.errors import ConfigError, PetgenError
from petgen.prompts import build_prompt

API_KEY_ENV = "RUNWARE_API_KEY"
LOG_LEVEL_NAMES = {
    "CRITICAL",
    "ERROR",
    "WARNING",
    "INFO",
    "DEBUG",
}

logger = logging.getLogger("petgen.cli")


def normalize_log_level(value: str) -> str:
    """Normalize user-provided log level strings."""

    upper_value = value.strip().upper()
    if upper_value == "WARN":
        upper_value = "WARNING"
    if upper_value not in LOG_LEVEL_NAMES:
        valid = ", ".join(sorted(LOG_LEVEL_NAMES))
        raise argparse.ArgumentTypeError(f"Invalid log level '{value}'. Choose one of: {valid}")
    return upper_value


def non_negative_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number") from exc
    if number < 0:
        raise argparse.ArgumentTypeError("delay must not be negative")
    return number


def configure_logging(level_name: str) -> None:
    """Configure root logging once based on the requested level."""

    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def load_env_file(path: pathlib.Path) -> None:
    """Load environment variables from a .env style file if it exists."""

    if not path.exists():
        return

    for line in path.read_text().splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export "):].strip()
        value = value.strip().strip("\"'")
        os.environ.setdefault(key, value)


def resolve_api_key(environ: Mapping[str, str]) -> str:
    api_key = (environ.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise ConfigError(
            f"{API_KEY_ENV} is not set. Provide it in the environment or via the .env file. "
            "Get an API key at https://runware.ai"
        )
    return api_key


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Generate cartoon pet images for every pet in the catalog using the "
            "Runware image API. Pets that already have an image are skipped."
        )
    )
    parser.add_argument(
        "--catalog",
        default=str(DEFAULT_CATALOG_PATH),
        help="JSON file containing the pet catalog (defaults to the bundled catalog).",
    )
    parser.add_argument(
        "--output-dir",
        default=str(DEFAULT_OUTPUT_DIR),
        help="Directory where generated images will be stored.",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help=f"Path to a .env file containing {API_KEY_ENV}.",
    )
    parser.add_argument(
        "--delay",
        default=REQUEST_DELAY_SECONDS,
        type=non_negative_float,
        metavar="SECONDS",
        help="Pause after each generated image before the next request.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print prompts without calling the Runware API.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=normalize_log_level,
        help="Logging level to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)

    configure_logging(args.log_level)

    load_env_file(pathlib.Path(args.env_file))

    try:
        records = load_catalog(pathlib.Path(args.catalog))
    except PetgenError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    logger.debug("Loaded %d pets from %s", len(records), args.catalog)

    if args.dry_run:
        for record in records:
            print(f"=== {record.label} ===")
            print(build_prompt(record))
            print()
        return 0

    try:
        api_key = resolve_api_key(os.environ)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    config = BatchConfig(
        api_key=api_key,
        output_dir=pathlib.Path(args.output_dir),
        delay_seconds=args.delay,
    )
    try:
        summary = run_batch(records, config)
    except PetgenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for record_id, message in summary.failures.items():
        print(f"Failed to generate image for {record_id}: {message}", file=sys.stderr)

    print()
    for line in summary.format_lines():
        print(line)
    return 1 if summary.failed else 0


if __name__ == "__main__":
    sys.exit(main())
