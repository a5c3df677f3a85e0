"""
Structural field paths and environment key derivation.

A FieldName is the path from the root configuration object down to a leaf
field, e.g. ("Cassandra", "SslCert"). Its keys() are every environment
variable spelling that may hold the field's value.
"""

from typing import List


class FieldName(tuple):
    """Immutable path of structural field names."""

    __slots__ = ()

    def __str__(self) -> str:
        return ".".join(self)

    def __repr__(self) -> str:
        return f"FieldName({list(self)!r})"

    def append(self, name: str) -> "FieldName":
        """Return a new path with name added as the innermost segment."""
        return FieldName(tuple(self) + (name,))

    def keys(self) -> List[str]:
        """
        Derive the environment keys for this path.

        Two spellings are built: a compact one joining segments with "_",
        and a word-boundary one that also splits camel case inside a
        segment. Both are returned in upper and lower case, deduplicated
        and sorted.

        Returns:
            Sorted list of distinct keys
        """
        words: List[str] = []    # extra "_" on word boundaries
        compact: List[str] = []  # segments joined as-is

        for j, part in enumerate(self):
            if j > 0:
                words.append("_")
                compact.append("_")

            for i, ch in enumerate(part):
                if i > 0 and ch.isupper() and _next_to_lower(part, i):
                    words.append("_")
                words.append(ch)
                compact.append(ch)

        spelled = "".join(words)
        plain = "".join(compact)
        return sorted({
            spelled.lower(),
            spelled.upper(),
            plain.lower(),
            plain.upper(),
        })


def _next_to_lower(part: str, i: int) -> bool:
    # Neither the first two nor the last character start a new word.
    if not (1 < i < len(part) - 1):
        return False
    return part[i + 1].islower() or part[i - 1].islower()
