from __future__ import annotations

from typing import Optional

A = ord("a")
B = ord("b")
Z = ord("z")
# Virtual bytes read past the end of ``prev`` and ``next`` respectively.
BEFORE_START = A - 1
AFTER_END = Z + 1


def _at(key: bytes, i: int, sentinel: int) -> int:
    return key[i] if i < len(key) else sentinel


def generate(prev: bytes, next: bytes) -> bytes:
    """Return the key halfway between ``prev`` and ``next``.

    Both arguments are raw byte strings; an empty ``prev`` means "before
    everything" and an empty ``next`` means "after everything". The caller
    guarantees ``prev < next``. Ordering is only guaranteed for bytes in
    ``a``..``z``, other bytes go through the same arithmetic.
    """
    out = bytearray()
    i = 0
    p = n = 0
    while p == n:
        p = _at(prev, i, BEFORE_START)
        n = _at(next, i, AFTER_END)
        if p == n:
            out.append(p)
            i += 1

    if p == BEFORE_START:
        # prev ran out: a's in next can't be split
        while n == A:
            out.append(A)
            i += 1
            n = _at(next, i, AFTER_END)
        if n == B:
            out.append(A)
            i += 1
            n = AFTER_END
    elif p + 1 == n:
        # consecutive characters, continue below prev
        out.append(p)
        i += 1
        n = AFTER_END
        p = _at(prev, i, BEFORE_START)
        while p == Z:
            out.append(Z)
            i += 1
            p = _at(prev, i, BEFORE_START)

    out.append(n - (n - p) // 2)
    return bytes(out)


def mid_string(prev: Optional[str], next: Optional[str]) -> str:
    """Return a sort key strictly between ``prev`` and ``next``.

    ``prev`` or ``next`` may be ``None`` or empty to indicate unbounded on
    that side.

    >>> mid_string("aaa", "aaz")
    'aan'
    >>> mid_string(None, "b")
    'an'
    """
    left = (prev or "").encode("utf-8")
    right = (next or "").encode("utf-8")
    return generate(left, right).decode("utf-8")


def is_valid_key(key: str) -> bool:
    """Whether ``key`` only uses the lowercase ASCII letters ordering is proven for.

    Library-only helper for callers holding keys of their own; ``mid_string``
    never calls it and the HTTP schemas check ``KEY_PATTERN`` instead.
    """
    return all("a" <= ch <= "z" for ch in key)
