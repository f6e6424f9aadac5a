"""Sequential batch driver: one generated image per catalog record.

An asset already present on disk marks its record as done, so re-running a
batch only performs work for records still missing their image. A failure on
one record is logged and counted; the batch always continues to the end.
"""
from __future__ import annotations

import logging
import pathlib
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

from petgen import client, fetcher
from petgen.catalog import EXPRESSIONS, CatalogRecord
from petgen.errors import ServiceError, StorageError, TransportError
from petgen.prompts import build_prompt

DEFAULT_OUTPUT_DIR = pathlib.Path("images")
ASSET_EXTENSION = client.OUTPUT_FORMAT.lower()
# Pause after each successful round trip to bound the request rate.
REQUEST_DELAY_SECONDS = 0.2

ITEM_ERRORS = (TransportError, ServiceError, StorageError)

logger = logging.getLogger("petgen.batch")


@dataclass
class BatchConfig:
    """Explicit settings for one batch run."""

    api_key: str
    output_dir: pathlib.Path = DEFAULT_OUTPUT_DIR
    delay_seconds: float = REQUEST_DELAY_SECONDS
    timeout: float = client.DEFAULT_TIMEOUT
    expressions: Mapping[str, str] = field(default_factory=lambda: dict(EXPRESSIONS))


@dataclass
class RunSummary:
    """Counters accumulated over a batch run.

    ``generated`` includes records whose asset already existed (also counted
    in ``skipped``); ``total_cost`` only covers images generated in this run.
    """

    generated: int = 0
    failed: int = 0
    total_cost: float = 0.0
    skipped: int = 0
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def processed(self) -> int:
        return self.generated + self.failed

    def format_lines(self) -> List[str]:
        return [
            "--- Summary ---",
            f"Generated: {self.generated}",
            f"Failed: {self.failed}",
            f"Total cost: ${self.total_cost:.4f}",
        ]


def format_cost(cost: object) -> str:
    if isinstance(cost, (int, float)) and not isinstance(cost, bool):
        return f"${cost:.4f}"
    return "?"


def asset_path(output_dir: pathlib.Path, record_id: str) -> pathlib.Path:
    return output_dir / f"{record_id}.{ASSET_EXTENSION}"


def ensure_output_dir(path: pathlib.Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"Unable to create output directory {path}: {exc}") from exc


def process_record(
    record: CatalogRecord,
    destination: pathlib.Path,
    config: BatchConfig,
) -> client.GenerationResult:
    """Generate, download and persist the image for one record."""

    prompt = build_prompt(record, config.expressions)
    result = client.generate_image(config.api_key, prompt, timeout=config.timeout)
    fetcher.download_image(result.image_url, destination, timeout=config.timeout)
    return result


def run_batch(records: Iterable[CatalogRecord], config: BatchConfig) -> RunSummary:
    """Process every record in catalog order and return the accumulated summary."""

    records = list(records)
    logger.info("Starting generation of %d pet images into %s", len(records), config.output_dir)
    ensure_output_dir(config.output_dir)

    summary = RunSummary()
    for record in records:
        destination = asset_path(config.output_dir, record.id)

        if destination.exists():
            logger.info("[SKIP] %s - already exists", record.id)
            summary.generated += 1
            summary.skipped += 1
            continue

        logger.info("[GEN] %s...", record.label)
        try:
            result = process_record(record, destination, config)
        except ITEM_ERRORS as exc:
            logger.error(
                "[FAIL] %s - %s: %s",
                record.id,
                type(exc).__name__,
                exc,
                exc_info=logger.isEnabledFor(logging.DEBUG),
            )
            summary.failed += 1
            summary.failures[record.id] = str(exc)
            continue

        summary.total_cost += result.cost or 0.0
        summary.generated += 1
        logger.info("Saved %s (cost: %s)", destination, format_cost(result.cost))

        if config.delay_seconds > 0:
            time.sleep(config.delay_seconds)

    logger.info(
        "Finished batch generated=%d skipped=%d failed=%d total_cost=%.4f",
        summary.generated,
        summary.skipped,
        summary.failed,
        summary.total_cost,
    )
    return summary
