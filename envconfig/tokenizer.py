"""Comma tokenizer for list values."""

from typing import Iterator, List


def split_tokens(s: str) -> List[str]:
    """
    Split a list value on commas that are not inside parentheses.

    "1,2,3" gives ["1", "2", "3"]; "(a,1),(b,2)" gives ["(a,1)", "(b,2)"].
    Tokens are returned verbatim, without trimming.
    """
    return list(iter_tokens(s))


def iter_tokens(s: str) -> Iterator[str]:
    depth = 0
    buf: List[str] = []
    for ch in s:
        if ch == "(":
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1
        elif ch == "," and depth == 0:
            yield "".join(buf)
            buf = []
            continue
        buf.append(ch)
    yield "".join(buf)
