import pytest

from petgen.catalog import DEFAULT_EXPRESSION, EXPRESSIONS, CatalogRecord
from petgen.prompts import build_prompt, expression_for


def test_build_prompt_uses_mapped_expression():
    record = CatalogRecord(id="x1", description="orange cat", temperament="playful")

    assert build_prompt(record) == (
        "simple cartoon illustration of a orange cat, white background, "
        "happy expression, flat colors"
    )


def test_build_prompt_falls_back_to_friendly_for_unknown_temperament():
    record = CatalogRecord(id="x2", description="blue bird", temperament="unknown")

    assert build_prompt(record) == (
        "simple cartoon illustration of a blue bird, white background, "
        "friendly expression, flat colors"
    )


@pytest.mark.parametrize("temperament,expected", sorted(EXPRESSIONS.items()))
def test_expression_for_known_temperaments(temperament, expected):
    assert expression_for(temperament) == expected


def test_expression_for_missing_temperament():
    assert expression_for("") == DEFAULT_EXPRESSION
    assert DEFAULT_EXPRESSION == "friendly"


def test_build_prompt_accepts_custom_expression_table():
    record = CatalogRecord(id="x3", description="green turtle", temperament="sleepy")

    prompt = build_prompt(record, {"sleepy": "drowsy"})

    assert "green turtle" in prompt
    assert "drowsy expression" in prompt
