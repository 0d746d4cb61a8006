"""Concentric square pattern using diagonal decomposition.

The (2n-1)x(2n-1) grid is split along the anti-diagonal i + j = m - 1.
Cells above it take their ring number from the distance to the top or left
edge, cells below it from the distance past the centre. Together they give
the usual concentric rings without computing four edge distances per cell.

Example for n=4:

    4 4 4 4 4 4 4
    4 3 3 3 3 3 4
    4 3 2 2 2 3 4
    4 3 2 1 2 3 4
    4 3 2 2 2 3 4
    4 3 3 3 3 3 4
    4 4 4 4 4 4 4
"""

from typing import Iterator

from tp.errors import require_positive


def cell_value(n: int, i: int, j: int) -> int:
    """Ring number of the cell at row i, column j."""
    m = 2 * n - 1
    if i + j < m:
        return max(n - i, n - j)
    # +2 lines the lower-right half up with the upper-left half
    return max(i - n, j - n) + 2


def grid(n: int) -> list[list[int]]:
    """Build the integer grid for size n."""
    require_positive(n)
    m = 2 * n - 1
    return [[cell_value(n, i, j) for j in range(m)] for i in range(m)]


def _format_rows(n: int) -> Iterator[str]:
    m = 2 * n - 1
    for i in range(m):
        yield "".join(f"{cell_value(n, i, j)} " for j in range(m))


def iter_rows(n: int) -> Iterator[str]:
    """Yield the text rows one at a time, so large grids are never held whole.

    Validation happens on the call, before the first row is produced.
    """
    require_positive(n)
    return _format_rows(n)


def render(n: int) -> list[str]:
    """Render the concentric square as text rows.

    Every value is followed by a single space, so rows keep a trailing space.
    Raises InvalidInputError when n is not a positive integer.
    """
    return list(iter_rows(n))


def region_map(n: int) -> list[str]:
    """Show which formula each cell uses: U for upper-left, L for lower-right."""
    require_positive(n)
    m = 2 * n - 1
    return [
        "".join("U " if i + j < m else "L " for j in range(m))
        for i in range(m)
    ]
