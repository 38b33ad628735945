"""Edit-distance matching for "did you mean" suggestions."""

from __future__ import annotations

from collections.abc import Iterable


def levenshtein_distance(s: str, t: str) -> int:
    """Return the Levenshtein distance between *s* and *t*.

    Insertions, deletions and substitutions each cost 1.  The full
    ``(len(t) + 1) x (len(s) + 1)`` table is built, which is fine for
    identifier-sized strings.
    """
    s_length = len(s) + 1
    t_length = len(t) + 1

    distances = [[0] * s_length for _ in range(t_length)]
    for i in range(t_length):
        distances[i][0] = i
    for j in range(s_length):
        distances[0][j] = j

    for i in range(1, t_length):
        for j in range(1, s_length):
            cost = 0 if s[j - 1] == t[i - 1] else 1
            distances[i][j] = min(
                distances[i - 1][j] + 1,
                distances[i][j - 1] + 1,
                distances[i - 1][j - 1] + cost,
            )

    return distances[t_length - 1][s_length - 1]


def get_most_similar_word(word: str, candidates: Iterable[str]) -> str | None:
    """Return the candidate closest to *word*, or ``None`` if there are none.

    Ties go to the candidate seen first, so pass an ordered collection when
    the result must be reproducible.
    """
    best: str | None = None
    best_distance: int | None = None
    for candidate in candidates:
        distance = levenshtein_distance(candidate, word)
        if best_distance is None or distance < best_distance:
            best, best_distance = candidate, distance
    return best
