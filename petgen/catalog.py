"""Pet catalog records and the temperament to expression table."""
from __future__ import annotations

import json
import pathlib
from dataclasses import dataclass
from typing import List, Mapping, Optional

from petgen.errors import CatalogError

_PACKAGE_DIR = pathlib.Path(__file__).parent
DEFAULT_CATALOG_PATH = _PACKAGE_DIR / "data" / "pets.json"

DEFAULT_EXPRESSION = "friendly"

# Facial expression used in the prompt for each temperament.
EXPRESSIONS: Mapping[str, str] = {
    "calm": "peaceful",
    "playful": "happy",
    "affectionate": "friendly",
    "shy": "gentle",
    "energetic": "excited",
    "independent": "confident",
}


@dataclass(frozen=True)
class CatalogRecord:
    """One pet from the catalog.

    ``id`` doubles as the asset filename stem and ``description`` is the
    visual description substituted into the prompt.
    """

    id: str
    description: str
    temperament: str = ""
    name: str = ""
    species: str = ""

    @classmethod
    def from_dict(cls, entry: Mapping[str, object]) -> "CatalogRecord":
        missing = [key for key in ("id", "description") if not entry.get(key)]
        if missing:
            raise CatalogError(
                f"Catalog entry {dict(entry)!r} is missing required field(s): {', '.join(missing)}"
            )
        return cls(
            id=str(entry["id"]),
            description=str(entry["description"]),
            temperament=str(entry.get("temperament") or ""),
            name=str(entry.get("name") or ""),
            species=str(entry.get("species") or ""),
        )

    @property
    def label(self) -> str:
        if self.name:
            return f"{self.id} - {self.name}"
        return self.id


def load_catalog(path: Optional[pathlib.Path] = None) -> List[CatalogRecord]:
    """Load catalog records from a JSON array, preserving file order."""

    catalog_path = path or DEFAULT_CATALOG_PATH
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Unable to read catalog {catalog_path}: {exc}") from exc
    try:
        entries = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog {catalog_path} is not valid JSON: {exc}") from exc

    if not isinstance(entries, list):
        raise CatalogError(f"Catalog {catalog_path} must contain a JSON array of pets.")

    records: List[CatalogRecord] = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise CatalogError(f"Catalog {catalog_path} contains a non-object entry: {entry!r}")
        records.append(CatalogRecord.from_dict(entry))
    return records
