"""Download generated images and persist them to disk."""
from __future__ import annotations

import logging
import os
import pathlib

import requests

from petgen.client import DEFAULT_TIMEOUT
from petgen.errors import StorageError, TransportError

PARTIAL_SUFFIX = ".part"

logger = logging.getLogger("petgen.fetcher")


def write_asset(content: bytes, destination: pathlib.Path) -> pathlib.Path:
    """Write ``content`` to ``destination`` without exposing a partial file.

    The bytes go to a sibling ``.part`` file first and are renamed onto the
    destination once fully written.
    """

    partial = destination.with_name(destination.name + PARTIAL_SUFFIX)
    try:
        partial.write_bytes(content)
        os.replace(partial, destination)
    except OSError as exc:
        try:
            partial.unlink(missing_ok=True)
        except OSError as cleanup_exc:
            logger.debug("Unable to remove partial file %s: %s", partial, cleanup_exc)
        raise StorageError(f"Failed to write {destination}: {exc}") from exc
    return destination


def download_image(
    url: str,
    destination: pathlib.Path,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> pathlib.Path:
    """Download the image at ``url`` and persist it to ``destination``."""

    logger.debug("Downloading image from %s to %s", url, destination)
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        raise TransportError(f"Download failed: {exc}") from exc
    if response.status_code >= 400:
        raise TransportError(f"Download failed: status {response.status_code}")
    return write_asset(response.content, destination)
