"""Right triangle pattern driven by a single counter.

Row k ends at the kth triangular number T(k) = k(k+1)/2, so one running
glyph counter is enough to know where to break lines:

    row 1: glyph 1        T(1) = 1
    row 2: glyphs 2-3     T(2) = 3
    row 3: glyphs 4-6     T(3) = 6
    row 4: glyphs 7-10    T(4) = 10
"""

from typing import Iterator

from tp.errors import require_positive

GLYPH = "* "


def triangular(k: int) -> int:
    return k * (k + 1) // 2


def _glyph_rows(n: int) -> Iterator[str]:
    total = triangular(n)
    current = []
    row = 1
    for i in range(1, total + 1):
        current.append(GLYPH)
        if i == triangular(row):
            yield "".join(current)
            current = []
            row += 1


def iter_rows(n: int) -> Iterator[str]:
    """Yield the triangle's rows as each one is completed.

    Raises InvalidInputError on the call when n is not a positive integer.
    """
    require_positive(n)
    return _glyph_rows(n)


def render(n: int) -> list[str]:
    """Render a right triangle of height n as text rows.

    Raises InvalidInputError when n is not a positive integer.
    """
    return list(iter_rows(n))
