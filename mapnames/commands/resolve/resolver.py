"""Resolve dotted source references against a type catalog."""

from __future__ import annotations

from collections.abc import Iterable

from mapnames.formats.catalog import TypeCatalog
from mapnames.helpers.naming import JAVA_KEYWORDS, get_safe_variable_name
from mapnames.helpers.similarity import get_most_similar_word
from mapnames.model import PropertyEntry


class ResolutionError(Exception):
    """Raised when a source reference cannot be resolved."""

    def __init__(self, message: str, suggestion: str | None = None):
        if suggestion is not None:
            message = f'{message} Did you mean "{suggestion}"?'
        super().__init__(message)
        self.suggestion = suggestion


class UnknownTypeError(ResolutionError):
    """The source type is not part of the catalog."""


class UnknownPropertyError(ResolutionError):
    """A path segment does not name a property of the type it is read from."""


def resolve_source_reference(
    catalog: TypeCatalog, source_type: str, path: str
) -> list[PropertyEntry]:
    """Resolve *path* (``address.city``) on *source_type*.

    Returns one entry per segment; entry *i* addresses the first *i + 1*
    segments and carries that step's getter, presence check and type.
    """
    type_spec = catalog.get_type(source_type)
    if type_spec is None:
        raise UnknownTypeError(
            f'Unknown source type "{source_type}".',
            get_most_similar_word(source_type, catalog.types),
        )

    segments = path.split(".")
    if not path or not all(segments):
        raise ResolutionError(f'Invalid property path "{path}".')

    entries: list[PropertyEntry] = []
    current_name = source_type
    current = type_spec
    for i, segment in enumerate(segments):
        if current is None:
            raise UnknownPropertyError(
                f'Unknown property "{segment}" in type {current_name}'
                f' for path "{path}": {current_name} has no known properties.'
            )
        prop = current.get_property(segment)
        if prop is None:
            raise UnknownPropertyError(
                f'Unknown property "{segment}" in type {current_name} for path "{path}".',
                get_most_similar_word(segment, current.property_names()),
            )
        entries.append(
            PropertyEntry.for_source_reference(
                segments[: i + 1], prop.read_accessor, prop.presence_check, prop.type
            )
        )
        current_name = prop.type
        current = catalog.get_type(prop.type)

    return entries


def assign_local_names(
    entries: Iterable[PropertyEntry],
    existing_names: Iterable[str] = (),
    *,
    keywords: frozenset[str] = JAVA_KEYWORDS,
) -> dict[PropertyEntry, str]:
    """Pick a distinct local variable name for each property entry.

    Entries addressing the same path share one name.  Names are derived
    from the dotted path and never clash with *existing_names*, with each
    other, or with a keyword.
    """
    used = set(existing_names)
    names: dict[PropertyEntry, str] = {}
    for entry in entries:
        if entry in names:
            continue
        local_name = get_safe_variable_name(entry.full_name, used, keywords=keywords)
        names[entry] = local_name
        used.add(local_name)
    return names
