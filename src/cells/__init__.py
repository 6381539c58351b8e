"""
Cells: normalize heterogeneous records into a uniform cells matrix.

A cells matrix is a header row of column titles with their default values,
followed by data rows aligned to that header. Missing fields are filled
with column defaults and the column order is configurable.
"""

from importlib.metadata import version

from cells.builder import CellsMatrix, ColumnHeader, build
from cells.errors import ValidationError
from cells.matrix import (
    change_column_ordering,
    get_column_titles,
    get_data,
    sort_column,
)
from cells.ordering import ComparatorOrder, ExplicitOrder, resolve_column_order

__version__ = version("cells")

__all__ = [
    "CellsMatrix",
    "ColumnHeader",
    "ComparatorOrder",
    "ExplicitOrder",
    "ValidationError",
    "__version__",
    "build",
    "change_column_ordering",
    "get_column_titles",
    "get_data",
    "resolve_column_order",
    "sort_column",
]
