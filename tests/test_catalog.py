"""Tests for the catalog store, invariant checks, and JSON catalog loading."""

from __future__ import annotations

import json

import pytest

from component_hub.catalog import (
    CatalogError,
    CatalogStore,
    count_blocks,
    load_catalog_file,
    parse_catalog_data,
)


def _raw_entry(**overrides):
    data = {
        "id": "1",
        "name": "Button",
        "description": "A button",
        "category": "UI",
        "tags": ["button"],
        "version": "1.0.0",
        "file_path": "src/Button.tsx",
        "code": "export {}",
    }
    data.update(overrides)
    return data


class TestCatalogStore:
    def test_preserves_order_and_lookup(self, make_entry):
        store = CatalogStore([make_entry(id="b"), make_entry(id="a")])

        assert [e.id for e in store.entries] == ["b", "a"]
        assert store.get("a").id == "a"
        assert store.get("missing") is None
        assert "b" in store
        assert len(store) == 2

    def test_entries_for_ids_uses_catalog_order(self, make_entry):
        store = CatalogStore([make_entry(id=str(i)) for i in range(1, 4)])
        assert [e.id for e in store.entries_for_ids(["3", "1", "zzz"])] == ["1", "3"]

    def test_duplicate_ids_rejected(self, make_entry):
        with pytest.raises(CatalogError, match="Duplicate entry id"):
            CatalogStore([make_entry(id="1"), make_entry(id="1", name="Other")])

    def test_invalid_category_rejected(self, make_entry):
        with pytest.raises(CatalogError, match="invalid category"):
            CatalogStore([make_entry(category="Widgets")])

    def test_empty_variant_list_rejected(self, make_entry):
        with pytest.raises(CatalogError, match="empty variant list"):
            CatalogStore([make_entry(variants=())])

    def test_duplicate_variant_names_rejected(self, make_entry, make_variant):
        with pytest.raises(CatalogError, match="duplicate variant name"):
            CatalogStore([make_entry(variants=(make_variant("A"), make_variant("A")))])

    def test_composite_flags(self, make_entry, make_variant):
        plain = make_entry()
        composite = make_entry(variants=(make_variant("A"), make_variant("B")))

        assert not plain.is_composite
        assert plain.variant_names == []
        assert composite.is_composite
        assert composite.variant_names == ["A", "B"]


class TestParseCatalogData:
    def test_list_root(self):
        entries = parse_catalog_data([_raw_entry()])

        assert len(entries) == 1
        assert entries[0].tags == ("button",)
        assert entries[0].variants is None
        assert entries[0].preview is None

    def test_components_object_root(self):
        entries = parse_catalog_data({"components": [_raw_entry(), _raw_entry(id="2")]})
        assert [e.id for e in entries] == ["1", "2"]

    def test_camel_case_keys(self):
        raw = _raw_entry(
            category="Pages",
            subPages=[{"name": "Login", "filePath": "src/Login.tsx", "code": "login"}],
        )
        del raw["file_path"]
        raw["filePath"] = "src/pages/"

        entry = parse_catalog_data([raw])[0]

        assert entry.file_path == "src/pages/"
        assert entry.variants[0].file_path == "src/Login.tsx"
        assert entry.variants[0].code == "login"

    def test_optional_fields_default(self):
        raw = _raw_entry()
        del raw["description"], raw["version"], raw["tags"]

        entry = parse_catalog_data([raw])[0]

        assert entry.description == ""
        assert entry.version == ""
        assert entry.tags == ()

    @pytest.mark.parametrize(
        ("payload", "message"),
        [
            ("oops", "Catalog must be a list"),
            ({"items": []}, "Catalog must be a list"),
            (["not-an-object"], "expected an object"),
            ([_raw_entry(code=12)], "must be a string"),
            ([{"id": "1", "name": "x", "category": "UI", "code": ""}], "missing required field 'file_path'"),
            ([_raw_entry(tags="button")], "'tags' must be a list of strings"),
            ([_raw_entry(variants={"name": "A"})], "'variants' must be a list"),
            ([_raw_entry(variants=[{"name": "A", "code": ""}])], "missing required field"),
            ([_raw_entry(), _raw_entry()], "Duplicate entry id"),
        ],
    )
    def test_invalid_payloads(self, payload, message):
        with pytest.raises(CatalogError, match=message):
            parse_catalog_data(payload)


class TestLoadCatalogFile:
    def test_loads_valid_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([_raw_entry()]), encoding="utf-8")

        entries = load_catalog_file(path)

        assert entries[0].name == "Button"

    def test_bad_json_raises_catalog_error(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog_file(path)

    def test_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(OSError):
            load_catalog_file(tmp_path / "missing.json")


def test_count_blocks(make_entry, make_variant):
    entries = [
        make_entry(id="1"),
        make_entry(id="2", variants=(make_variant("A"), make_variant("B"), make_variant("C"))),
    ]
    assert count_blocks(entries) == 4
    assert count_blocks([]) == 0
