"""Pydantic models for the type catalog format (.yaml / .json).

A catalog describes the properties of each source type::

    types:
      Customer:
        properties:
          - name: name
          - name: address
            type: Address
            presence_check: hasAddress
      Address:
        properties:
          - name: city
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
import yaml

from mapnames.helpers.strings import capitalize


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or does not validate."""


class PropertySpec(BaseModel):
    name: str = Field(min_length=1)
    type: str = "String"
    getter: str | None = None
    presence_check: str | None = None

    @property
    def read_accessor(self) -> str:
        """The getter name, derived from the property name when not given."""
        if self.getter:
            return self.getter
        prefix = "is" if self.type == "boolean" else "get"
        return prefix + capitalize(self.name)  # type: ignore[operator]


class TypeSpec(BaseModel):
    properties: list[PropertySpec] = []

    def get_property(self, name: str) -> PropertySpec | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def property_names(self) -> list[str]:
        return [p.name for p in self.properties]


class TypeCatalog(BaseModel):
    types: dict[str, TypeSpec] = Field(default_factory=dict)

    def get_type(self, name: str) -> TypeSpec | None:
        return self.types.get(name)


def load_catalog(path: str | Path) -> TypeCatalog:
    """Load a catalog from a YAML (``.yaml``/``.yml``) or JSON file."""
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise CatalogError(f"Cannot read catalog {path}: {e}") from e

    try:
        if path.suffix.lower() in (".yaml", ".yml"):
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise CatalogError(f"Cannot parse catalog {path}: {e}") from e

    try:
        return TypeCatalog.model_validate(data or {})
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog {path}: {e}") from e
