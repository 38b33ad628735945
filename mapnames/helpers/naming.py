"""Identifier sanitizing and unique local-variable naming for generated code."""

from __future__ import annotations

from collections.abc import Iterable
import keyword
import re

from mapnames.helpers.strings import decapitalize, extract_parts, join_and_camelize

JAVA_KEYWORDS = frozenset({
    "abstract", "continue", "for", "new", "switch",
    "assert", "default", "goto", "package", "synchronized",
    "boolean", "do", "if", "private", "this",
    "break", "double", "implements", "protected", "throw",
    "byte", "else", "import", "public", "throws",
    "case", "enum", "instanceof", "return", "transient",
    "catch", "extends", "int", "short", "try",
    "char", "final", "interface", "static", "void",
    "class", "finally", "long", "strictfp", "volatile",
    "const", "float", "native", "super", "while",
})

PYTHON_KEYWORDS = frozenset(keyword.kwlist) | frozenset(keyword.softkwlist)

_KEYWORDS_BY_TARGET = {
    "java": JAVA_KEYWORDS,
    "python": PYTHON_KEYWORDS,
}

TARGETS = tuple(_KEYWORDS_BY_TARGET)

_ILLEGAL_PART = re.compile(r"[^a-zA-Z0-9_.]")


def keywords_for(target: str) -> frozenset[str]:
    """Return the reserved words of a target language (``java`` or ``python``)."""
    try:
        return _KEYWORDS_BY_TARGET[target]
    except KeyError:
        raise ValueError(
            f"Unknown target language: {target!r} (expected one of {', '.join(TARGETS)})"
        ) from None


def sanitize_identifier_name(identifier: str | None) -> str | None:
    """Strip characters that may not appear in an identifier.

    Leading underscores and digits are dropped, ``[]`` becomes ``Array`` and
    any other illegal character becomes ``_``.  Dots are kept so a dotted
    name can still be split into its segments afterwards.  A string made
    only of underscores and digits keeps them, with just the ``[]``
    substitution applied.
    """
    if not identifier:
        return identifier

    first = 0
    while first < len(identifier) and (
        identifier[first] == "_" or identifier[first].isdecimal()
    ):
        first += 1
    if first == len(identifier):
        return identifier.replace("[]", "Array")

    name = identifier[first:].replace("[]", "Array")
    return _ILLEGAL_PART.sub("_", name)


def get_safe_variable_name(
    name: str,
    existing_names: Iterable[str] = (),
    *,
    keywords: frozenset[str] = JAVA_KEYWORDS,
    fallback: str = "var",
) -> str:
    """Return a variable name that conflicts neither with *existing_names* nor a keyword.

    The name is sanitized, decapitalized and its dotted segments are joined
    in camelCase (``address.city`` gives ``addressCity``).  On a conflict a
    counter is appended, separated by ``_`` when the name already ends in a
    digit (``fooBar1``, ``item2_1``).

    A name with nothing usable left (``""``, ``"..."``) falls back to
    *fallback*.  A name made only of digits and underscores is kept as-is
    and may not be a legal identifier.
    """
    name = sanitize_identifier_name(name) or ""
    if name:
        name = decapitalize(name)  # type: ignore[assignment]
    name = join_and_camelize(extract_parts(name)) or fallback

    conflicting = set(keywords)
    conflicting.update(existing_names)

    if name not in conflicting:
        return name

    separator = "_" if name and name[-1].isdigit() else ""
    counter = 1
    while f"{name}{separator}{counter}" in conflicting:
        counter += 1
    return f"{name}{separator}{counter}"
