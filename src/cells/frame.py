"""
Conversion between cells matrices and pandas DataFrames.
"""

from typing import Any

import pandas as pd
import pandera.pandas as pa

from cells.builder import CellsMatrix, DefaultsMap, build
from cells.config.settings import CellsConfig
from cells.matrix import get_column_titles, get_data
from cells.utils.logging import get_logger

log = get_logger(__name__)


def to_dataframe(matrix: CellsMatrix) -> pd.DataFrame:
    """
    Convert a matrix to a DataFrame.

    Columns follow the matrix order and cell values keep their Python
    types (object dtype).
    """
    return pd.DataFrame(get_data(matrix), columns=get_column_titles(matrix), dtype=object)


def header_schema(matrix: CellsMatrix) -> pa.DataFrameSchema:
    """
    Build a Pandera schema describing the matrix columns.

    A column accepts nulls only when its default value is None, which is
    the same rule build() applies when filling rows.

    Args:
        matrix: Matrix whose header defines the schema.

    Returns:
        Strict, ordered DataFrameSchema.
    """
    columns = {
        column.title: pa.Column(nullable=column.default_value is None)
        for column in matrix.header
    }
    return pa.DataFrameSchema(columns, strict=True, ordered=True)


def from_dataframe(
    df: pd.DataFrame,
    defaults: DefaultsMap,
    order: Any = None,
    *,
    config: CellsConfig | None = None,
) -> CellsMatrix:
    """
    Build a matrix from the rows of a DataFrame.

    Missing values (NaN, NA, NaT) are passed to build() as None so that
    column defaults replace them.

    Args:
        df: Source frame, one record per row.
        defaults: Column title to default value.
        order: Optional ordering, see resolve_column_order().
        config: Optional configuration passed to build().

    Returns:
        A new CellsMatrix.
    """
    cleaned = df.astype(object).where(df.notna(), None)
    records = cleaned.to_dict(orient="records")
    log.debug("Converting DataFrame to records", rows=len(records))
    return build(records, defaults, order, config=config)
