"""Value types produced by source-reference resolution."""

from __future__ import annotations

from mapnames.model.property_entry import PropertyEntry as PropertyEntry

__all__ = [
    "PropertyEntry",
]
