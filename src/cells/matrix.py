"""
Operations on an already built cells matrix.

Every operation returns new values; a matrix is never modified.
"""

from functools import cmp_to_key
from typing import Any

from cells.builder import CellsMatrix, Row, build
from cells.config.settings import CellsConfig
from cells.errors import ValidationError
from cells.ordering import Comparator
from cells.utils.logging import get_logger

log = get_logger(__name__)


def get_column_titles(matrix: CellsMatrix) -> list[str]:
    """Return the column titles in matrix order."""
    return [column.title for column in matrix.header]


def get_data(matrix: CellsMatrix) -> list[Row]:
    """Return the data rows without the header."""
    return list(matrix.rows)


def _pair_comparator(comparator: Comparator, col_index: int) -> Comparator:
    """
    Compare two rows by sorting the pair of their values at col_index.

    The row whose value comes out first is ordered first. Ties, and the
    same object on both sides, resolve to the left-hand row. Positions are
    tracked, so cell values are never compared with ==.
    """

    def compare_rows(lhs: Row, rhs: Row) -> int:
        lhs_val = lhs[col_index]
        rhs_val = rhs[col_index]
        pair = (lhs_val, rhs_val)
        first = sorted((0, 1), key=cmp_to_key(lambda i, j: comparator(pair[i], pair[j])))[0]
        if first == 0 or rhs_val is lhs_val:
            return -1
        return 1

    return compare_rows


def sort_column(matrix: CellsMatrix, col_index: int, comparator: Comparator) -> CellsMatrix:
    """
    Sort the data rows by the values of one column.

    Args:
        matrix: Matrix to sort.
        col_index: Index of the column to sort by.
        comparator: Two-argument function over cell values returning a
            negative number if lhs comes first, positive if rhs comes
            first and 0 for a tie.

    Returns:
        A new matrix with the same header and reordered rows.

    Raises:
        ValidationError: If comparator is not callable or col_index is not a
            valid column index.
    """
    if not callable(comparator):
        msg = "parameter `comparator` must be a function"
        raise ValidationError(msg)

    n_columns = len(matrix.header)
    if not 0 <= col_index < n_columns:
        msg = (
            f"The index of the column you want to sort ({col_index}) must be "
            f"between 0 and {n_columns - 1}"
        )
        raise ValidationError(msg)

    rows = sorted(matrix.rows, key=cmp_to_key(_pair_comparator(comparator, col_index)))

    log.debug("Sorted cells matrix", column=matrix.header[col_index].title, rows=len(rows))
    return CellsMatrix(header=matrix.header, rows=tuple(rows))


def change_column_ordering(
    matrix: CellsMatrix,
    order: Any,
    *,
    config: CellsConfig | None = None,
) -> CellsMatrix:
    """
    Rebuild a matrix with a different column order.

    The header supplies the defaults, the rows are mapped back to records
    by the current titles, and the whole thing goes through build() again.

    Args:
        matrix: Matrix to reorder.
        order: New ordering, see resolve_column_order().
        config: Optional configuration passed to build().

    Returns:
        A new matrix with the requested column order.
    """
    titles = get_column_titles(matrix)
    records = [dict(zip(titles, row)) for row in get_data(matrix)]
    return build(records, matrix.defaults, order, config=config)
