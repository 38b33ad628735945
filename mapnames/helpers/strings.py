"""Case and join helpers shared by the naming utilities."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def capitalize(string: str | None) -> str | None:
    """Upper-case the first character, leaving the rest untouched.

    Unlike ``str.capitalize`` the remainder keeps its case.  ``None`` is
    passed through; an empty string raises ``IndexError``.
    """
    if string is None:
        return None
    return string[0].upper() + string[1:]


def decapitalize(string: str | None) -> str | None:
    """Lower-case the first character, leaving the rest untouched."""
    if string is None:
        return None
    return string[0].lower() + string[1:]


def join(
    iterable: Iterable[T],
    separator: str,
    extractor: Callable[[T], Any] | None = None,
) -> str:
    """Join the string form of each element with *separator*.

    When *extractor* is given, each element is mapped through it first.
    """
    if extractor is None:
        return separator.join(str(item) for item in iterable)
    return separator.join(str(extractor(item)) for item in iterable)


def join_and_camelize(iterable: Iterable[Any]) -> str:
    """Join name segments into one camelCase identifier.

    ``["foo", "bar", "baz"]`` becomes ``"fooBarBaz"``: the first segment is
    kept as-is, every following one is capitalized.
    """
    parts: list[str] = []
    for item in iterable:
        parts.append(capitalize(str(item)) if parts else str(item))  # type: ignore[arg-type]
    return "".join(parts)


def is_empty(string: str | None) -> bool:
    return string is None or len(string) == 0


def is_not_empty(string: str | None) -> bool:
    return not is_empty(string)


def stub_property_name(fully_qualified_name: str) -> str:
    """Derive a property name from a qualified class name.

    ``com.foo.bar.baz.FooBar`` gives ``fooBar``.
    """
    simple_name = fully_qualified_name.rsplit(".", 1)[-1]
    return decapitalize(simple_name)  # type: ignore[return-value]


def extract_parts(name: str) -> list[str]:
    """Split a dotted name into its non-empty segments.

    ``props.font`` gives ``["props", "font"]``.
    """
    return [part for part in name.split(".") if part]
