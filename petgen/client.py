"""Runware image inference client.

One call to :func:`generate_image` is one HTTP round trip: a single
``imageInference`` task is posted and the first result is returned. There is
no retry; callers decide what a failed attempt means.
"""
from __future__ import annotations

import json
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Any, Optional

import requests

from petgen.errors import ServiceError, TransportError

API_URL = "https://api.runware.ai/v1"
# FLUX.1 schnell is a distilled model that works with very few steps.
MODEL = "runware:100@1"
IMAGE_SIZE = 512
STEPS = 4
OUTPUT_FORMAT = "WEBP"
OUTPUT_QUALITY = 80
DEFAULT_TIMEOUT = 60.0

logger = logging.getLogger("petgen.client")


@dataclass
class GenerationResult:
    """Image location and cost reported for one inference task."""

    image_url: str
    cost: Optional[float]
    task_uuid: str
    image_uuid: Optional[str] = None


def build_task(prompt: str, task_uuid: Optional[str] = None) -> dict:
    return {
        "taskType": "imageInference",
        "taskUUID": task_uuid or str(uuid.uuid4()),
        "model": MODEL,
        "positivePrompt": prompt,
        "width": IMAGE_SIZE,
        "height": IMAGE_SIZE,
        "steps": STEPS,
        "outputType": "URL",
        "outputFormat": OUTPUT_FORMAT,
        "outputQuality": OUTPUT_QUALITY,
        "numberResults": 1,
    }


def _parse_cost(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def generate_image(
    api_key: str,
    prompt: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> GenerationResult:
    """Submit one inference task for ``prompt`` and return its first result."""

    headers = {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }
    task = build_task(prompt)
    task_uuid = task["taskUUID"]

    prompt_preview = prompt.strip().replace("\n", " ")[:160]
    logger.debug(
        "Submitting task=%s model=%s size=%dx%d steps=%d prompt_preview=%r",
        task_uuid,
        MODEL,
        IMAGE_SIZE,
        IMAGE_SIZE,
        STEPS,
        prompt_preview,
    )
    request_start = time.perf_counter()
    try:
        response = requests.post(API_URL, headers=headers, json=[task], timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"Failed to call Runware API: {exc}") from exc
    elapsed = time.perf_counter() - request_start
    logger.debug(
        "Received response for task=%s status=%s in %.2fs",
        task_uuid,
        response.status_code,
        elapsed,
    )

    if response.status_code >= 400:
        logger.debug(
            "Runware API responded with status=%s for task=%s: %s",
            response.status_code,
            task_uuid,
            response.text[:500],
        )
        raise TransportError(
            f"Runware API returned status {response.status_code}: {response.text}"
        )

    try:
        data = response.json()
    except ValueError as exc:
        raise ServiceError("Failed to parse Runware response as JSON") from exc

    if not isinstance(data, dict):
        raise ServiceError("Runware response was not a JSON object")

    if data.get("errors"):
        raise ServiceError(f"Runware API error: {json.dumps(data['errors'])}")

    results = data.get("data")
    if not isinstance(results, list) or not results:
        raise ServiceError("Runware response did not include any results")

    first = results[0]
    if not isinstance(first, dict):
        raise ServiceError("Runware response result was not a JSON object")
    image_url = first.get("imageURL")
    if not isinstance(image_url, str) or not image_url.strip():
        raise ServiceError("Runware response did not include an imageURL")

    image_uuid = first.get("imageUUID")
    return GenerationResult(
        image_url=image_url.strip(),
        cost=_parse_cost(first.get("cost")),
        task_uuid=task_uuid,
        image_uuid=image_uuid if isinstance(image_uuid, str) else None,
    )
