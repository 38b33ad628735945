"""Shared test fixtures for mapnames tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from mapnames.formats.catalog import PropertySpec, TypeCatalog, TypeSpec


@pytest.fixture
def sample_catalog() -> TypeCatalog:
    return TypeCatalog(
        types={
            "Customer": TypeSpec(
                properties=[
                    PropertySpec(name="name"),
                    PropertySpec(name="number", type="int"),
                    PropertySpec(
                        name="address",
                        type="Address",
                        presence_check="hasAddress",
                    ),
                    PropertySpec(name="active", type="boolean"),
                    PropertySpec(name="class", type="String", getter="getClazz"),
                    PropertySpec(name="tags", type="List<String>"),
                ]
            ),
            "Address": TypeSpec(
                properties=[
                    PropertySpec(name="street"),
                    PropertySpec(name="city"),
                    PropertySpec(name="country", type="Country"),
                ]
            ),
        }
    )


@pytest.fixture
def catalog_file(tmp_path: Path, sample_catalog: TypeCatalog) -> Path:
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.safe_dump(sample_catalog.model_dump(exclude_none=True)))
    return path
