import json

import pytest

from petgen.catalog import CatalogRecord, load_catalog
from petgen.errors import CatalogError, ConfigError


def test_bundled_catalog_loads_all_pets_in_order():
    records = load_catalog()

    assert len(records) == 48
    assert records[0] == CatalogRecord(
        id="a3f8c1",
        description="fluffy orange tabby cat with green eyes",
        temperament="affectionate",
        name="Whisker",
        species="cat",
    )
    ids = [record.id for record in records]
    assert len(set(ids)) == len(ids)


def test_load_catalog_from_custom_file(tmp_path):
    path = tmp_path / "pets.json"
    path.write_text(
        json.dumps(
            [
                {"id": "x1", "description": "orange cat", "temperament": "playful"},
                {"id": "x2", "description": "blue bird"},
            ]
        ),
        encoding="utf-8",
    )

    records = load_catalog(path)

    assert [record.id for record in records] == ["x1", "x2"]
    assert records[1].temperament == ""
    assert records[1].label == "x2"


def test_load_catalog_missing_file_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_catalog(tmp_path / "missing.json")


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"id": "x1"}),
        json.dumps(["x1"]),
        json.dumps([{"id": "x1"}]),
    ],
)
def test_load_catalog_rejects_malformed_content(tmp_path, content):
    path = tmp_path / "pets.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(CatalogError):
        load_catalog(path)
