"""
Cells matrix construction.

Builds a header row of (title, default value) pairs and one data row per
record, aligned to the resolved column order.
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from cells.config.settings import CellsConfig
from cells.errors import ValidationError
from cells.ordering import resolve_column_order
from cells.utils.logging import get_logger

log = get_logger(__name__)

Record: TypeAlias = Mapping[str, Any]
DefaultsMap: TypeAlias = Mapping[str, Any]
Row: TypeAlias = tuple[Any, ...]


@dataclass(frozen=True)
class ColumnHeader:
    """A resolved column: its title and the value used when data is missing."""

    title: str
    default_value: Any


@dataclass(frozen=True)
class CellsMatrix:
    """
    Header row followed by data rows.

    Behaves like the sequence [header, *rows]: index 0 is the header and
    every following element is a data row with one value per header column.
    """

    header: tuple[ColumnHeader, ...]
    rows: tuple[Row, ...] = ()

    def __len__(self) -> int:
        return len(self.rows) + 1

    def __iter__(self) -> Iterator[Any]:
        yield self.header
        yield from self.rows

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return [self.header, *self.rows][index]
        if index < 0:
            index += len(self)
        if index == 0:
            return self.header
        if not 0 < index < len(self):
            raise IndexError("CellsMatrix index out of range")
        return self.rows[index - 1]

    @property
    def defaults(self) -> dict[str, Any]:
        """Defaults mapping reconstructed from the header."""
        return {column.title: column.default_value for column in self.header}


def _fill_record(
    record: Record,
    columns: Sequence[str],
    defaults: DefaultsMap,
) -> dict[str, Any]:
    """Return a copy of record with missing columns and nulls replaced by defaults."""
    filled = dict(record)

    for title in columns:
        if title not in filled:
            filled[title] = defaults[title]

    # Nulls are only kept where the column default is itself null
    for key in record:
        if filled[key] is None and defaults.get(key) is not None:
            filled[key] = defaults[key]

    return filled


def build(
    records: Sequence[Record],
    defaults: DefaultsMap,
    order: Any = None,
    *,
    config: CellsConfig | None = None,
) -> CellsMatrix:
    """
    Build a cells matrix from a list of records.

    Args:
        records: Mappings of column title to value. They are never modified.
        defaults: Column title to default value. Its keys are the complete
            set of columns the matrix may contain.
        order: Optional ordering: a comparator over titles or a (partial)
            sequence of titles. See resolve_column_order().
        config: Optional configuration passed to the order resolver.

    Returns:
        A new CellsMatrix.

    Raises:
        ValidationError: If the ordering is invalid or a record has more keys
            than there are columns.
    """
    columns = resolve_column_order(list(defaults.keys()), order, config=config)
    header = tuple(ColumnHeader(title, defaults[title]) for title in columns)

    rows: list[Row] = []
    for record in records:
        if len(record) > len(columns):
            extra_keys = [key for key in record if key not in columns]
            msg = (
                f"You have extra keys: {', '.join(map(str, extra_keys))} "
                "in your data that are not in your defaults"
            )
            raise ValidationError(msg)

        filled = _fill_record(record, columns, defaults)
        rows.append(tuple(filled[title] for title in columns))

    log.debug("Built cells matrix", columns=len(header), rows=len(rows))
    return CellsMatrix(header=header, rows=tuple(rows))
