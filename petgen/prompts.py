"""Prompt compilation for catalog records."""
from __future__ import annotations

from typing import Mapping

from petgen.catalog import DEFAULT_EXPRESSION, EXPRESSIONS, CatalogRecord

PROMPT_TEMPLATE = (
    "simple cartoon illustration of a {description}, white background, "
    "{expression} expression, flat colors"
)


def expression_for(temperament: str, expressions: Mapping[str, str] = EXPRESSIONS) -> str:
    return expressions.get(temperament) or DEFAULT_EXPRESSION


def build_prompt(record: CatalogRecord, expressions: Mapping[str, str] = EXPRESSIONS) -> str:
    """Build the image prompt for a pet from its description and temperament."""

    return PROMPT_TEMPLATE.format(
        description=record.description,
        expression=expression_for(record.temperament, expressions),
    )
