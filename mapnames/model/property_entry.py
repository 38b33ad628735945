"""A single resolved step of a dotted property path."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from mapnames.helpers.strings import join


@dataclass(frozen=True)
class PropertyEntry:
    """Name, read accessor, presence check and type of one property step.

    Equality and hashing only look at ``path``: two entries addressing the
    same property are the same entry however they were resolved.  The
    accessors and type are opaque values owned by the caller.
    """

    path: tuple[str, ...]
    read_accessor: Any = field(compare=False)
    presence_checker: Any = field(default=None, compare=False)
    type: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.path, str):
            raise TypeError("path must be a sequence of segments, not a string")
        object.__setattr__(self, "path", tuple(self.path))
        if not self.path:
            raise ValueError("A property entry needs at least one path segment")

    @classmethod
    def for_source_reference(
        cls,
        name: Sequence[str],
        read_accessor: Any,
        presence_checker: Any,
        type: Any,
    ) -> PropertyEntry:
        """Create the entry for one step of a source reference."""
        return cls(name, read_accessor, presence_checker, type)  # type: ignore[arg-type]

    @property
    def name(self) -> str:
        return self.path[-1]

    @property
    def full_name(self) -> str:
        """The dotted path, e.g. ``address.city``."""
        return join(self.path, ".")

    def __str__(self) -> str:
        return f"{self.type} {self.full_name}"
