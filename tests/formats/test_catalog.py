"""Tests for the type catalog models in mapnames/formats/."""

import json
from pathlib import Path

import pytest

from mapnames.formats.catalog import (
    CatalogError,
    PropertySpec,
    TypeCatalog,
    TypeSpec,
    load_catalog,
)


class TestPropertySpec:
    def test_defaults(self) -> None:
        prop = PropertySpec(name="city")
        assert prop.type == "String"
        assert prop.getter is None
        assert prop.presence_check is None

    def test_derived_getter(self) -> None:
        assert PropertySpec(name="city").read_accessor == "getCity"

    def test_boolean_getter(self) -> None:
        assert PropertySpec(name="active", type="boolean").read_accessor == "isActive"

    def test_explicit_getter(self) -> None:
        prop = PropertySpec(name="class", getter="getClazz")
        assert prop.read_accessor == "getClazz"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError):
            PropertySpec(name="")


class TestTypeCatalog:
    def test_lookup(self, sample_catalog: TypeCatalog) -> None:
        customer = sample_catalog.get_type("Customer")
        assert customer is not None
        assert customer.get_property("address") is not None
        assert customer.get_property("missing") is None
        assert sample_catalog.get_type("Order") is None

    def test_property_names_ordered(self) -> None:
        spec = TypeSpec(properties=[PropertySpec(name="b"), PropertySpec(name="a")])
        assert spec.property_names() == ["b", "a"]


class TestLoadCatalog:
    def test_yaml(self, catalog_file: Path) -> None:
        catalog = load_catalog(catalog_file)
        assert set(catalog.types) == {"Customer", "Address"}
        address = catalog.types["Customer"].get_property("address")
        assert address is not None
        assert address.type == "Address"
        assert address.presence_check == "hasAddress"

    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "catalog.json"
        path.write_text(
            json.dumps({"types": {"Order": {"properties": [{"name": "id", "type": "long"}]}}})
        )
        catalog = load_catalog(path)
        order = catalog.get_type("Order")
        assert order is not None
        assert order.property_names() == ["id"]

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert load_catalog(path).types == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogError, match="Cannot read catalog"):
            load_catalog(tmp_path / "nope.yaml")

    def test_malformed_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(CatalogError, match="Cannot parse catalog"):
            load_catalog(path)

    def test_invalid_shape(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("types:\n  Customer:\n    properties:\n      - type: String\n")
        with pytest.raises(CatalogError, match="Invalid catalog"):
            load_catalog(path)
