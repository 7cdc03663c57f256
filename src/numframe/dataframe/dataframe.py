"""The DataFrame object itself.

A :class:`DataFrame` is made of named :class:`numframe.dataframe.column.Column`
objects that all share the same number of rows. Both rows and columns
have a name and a position, and every lookup accepts either of them:

>>> df = DataFrame({"A": [1, 2, 3], "B": [4, 5, 6]})
>>> df.dim()
(3, 2)
>>> df.get(1, "B"), df.get("R1", 1)
(5.0, 5.0)

Rows that were not given a name get a default one, made of
the ``"R"`` prefix and the position the row was inserted at:

>>> df.add_row([7, 8])
>>> df.row_names
['R0', 'R1', 'R2', 'R3']
>>> df.get_row(3)
[7.0, 8.0]

Passing lists of rows and columns to :meth:`DataFrame.get`
extracts a new and independent dataframe,
rows and columns are emitted in the requested order:

>>> sliced = df.get([3, 0], ["B"])
>>> sliced.row_names
['R3', 'R0']
>>> sliced.get_column("B").as_doubles()
[8.0, 4.0]

Internally the dataframe keeps four structures in sync:
the column name to column mapping, the column order with its
position to name index, the row names with their name to position
index and the row/column counts. They are only ever modified
by the public mutation methods, which rebuild the derived
indices every time the structure changes.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Self

import numpy as np
import pyarrow as pa

from ..errors import InvalidArgumentError
from ..utils.tabulate import tabulate
from .column import Column, ColumnType

logger = logging.getLogger(__name__)

ROW_NAME_PREFIX = "R"
"""Prefix of the row names generated when a row is not explicitly named."""

COLLISION_SUFFIX = "_2"
"""Suffix added by :meth:`DataFrame.concatenate` to colliding column names."""

Key = int | str
Selector = Sequence[int | str]


class DataFrame:
    """Data structure that handles numeric data in rows and columns.

    The data is fully held in memory. Each column stores its values
    under its own :class:`ColumnType`, but values are always read
    and written as floats.
    """

    def __init__(
        self,
        columns: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
        row_names: Iterable[str] | None = None,
        types: Sequence[ColumnType] | None = None,
    ) -> None:
        """
        :param columns: The columns of the dataframe, as ``(name, values)`` pairs
                        or as a ``{name: values}`` mapping. Values can be
                        :class:`Column` objects or sequences of numbers.
                        ``None`` creates an empty dataframe.
        :param row_names: The names of the rows, by default ``R0, R1, ...``.
        :param types: The :class:`ColumnType` of each column,
                      by default all columns are :attr:`ColumnType.DOUBLE`.
        """
        self._columns: dict[str, Column] = {}
        self._column_names: list[str] = []
        self._col_index_to_name: dict[int, str] = {}
        self._row_names: list[str] = []
        self._row_name_to_index: dict[str, int] = {}
        self._num_rows = 0
        self._num_columns = 0

        if columns is None:
            if row_names or types:
                raise InvalidArgumentError(
                    "Row names and types can only be provided together with columns"
                )
            return

        if isinstance(columns, Mapping):
            columns = list(columns.items())
        else:
            columns = list(columns)
        if not columns:
            raise InvalidArgumentError(
                "For DataFrame initialization some data is needed"
            )
        if types is not None and len(types) != len(columns):
            raise InvalidArgumentError(
                "Number of types does not match number of columns"
            )

        named_columns = []
        for idx, (name, values) in enumerate(columns):
            _check_name(name, "Column")
            if types is not None:
                values = values.as_doubles() if isinstance(values, Column) else values
                column = Column(types[idx], values)
            elif isinstance(values, Column):
                column = values.copy()
            else:
                column = Column(ColumnType.DOUBLE, values)
            named_columns.append((name, column))

        num_rows = len(named_columns[0][1])
        for name, column in named_columns:
            if len(column) != num_rows:
                raise InvalidArgumentError(
                    "All columns must have the same number of elements."
                )
            if name in self._columns:
                raise InvalidArgumentError(f"Duplicate column name: {name}")
            self._columns[name] = column

        row_names = list(row_names) if row_names is not None else []
        if row_names:
            if len(row_names) != num_rows:
                raise InvalidArgumentError(
                    "Number of rows does not match number of row names"
                )
            for name in row_names:
                _check_name(name, "Row")
        else:
            row_names = _default_row_names(num_rows)

        self._column_names = [name for name, _ in named_columns]
        self._num_columns = len(self._column_names)
        self._num_rows = num_rows
        self._row_names = row_names
        self._rebuild_column_index()
        self._rebuild_row_index()

    @classmethod
    def from_arrow(
        cls, table: pa.Table | pa.RecordBatch, row_names_column: str | None = None
    ) -> Self:
        """Create a DataFrame out of the data of a :class:`pyarrow.Table`.

        Integer Arrow columns become :attr:`ColumnType.INT` columns,
        single and half precision floats become :attr:`ColumnType.FLOAT`,
        double precision floats :attr:`ColumnType.DOUBLE`.

        :param table: The Arrow table or record batch with the data.
        :param row_names_column: The column holding the row names, if any.
                                 It won't be part of the dataframe columns.
        """
        row_names = None
        if row_names_column is not None:
            if row_names_column not in table.column_names:
                raise InvalidArgumentError(
                    f"Could not find a column with name: {row_names_column}"
                )
            row_names = [
                str(name) for name in table.column(row_names_column).to_pylist()
            ]

        columns = [
            (name, Column.from_arrow(table.column(idx)))
            for idx, name in enumerate(table.column_names)
            if name != row_names_column
        ]
        if not columns:
            return cls()
        return cls(columns, row_names=row_names)

    def to_arrow(self, row_names_column: str | None = None) -> pa.Table:
        """Return the data as a :class:`pyarrow.Table`.

        Each column keeps the Arrow type matching its :class:`ColumnType`.

        :param row_names_column: When provided, the row names are
                                 included as the first column, with this name.
        """
        arrays = []
        names = []
        if row_names_column is not None:
            arrays.append(pa.array(self._row_names, type=pa.string()))
            names.append(row_names_column)
        for name in self._column_names:
            arrays.append(self._columns[name].to_arrow())
            names.append(name)
        if not arrays:
            return pa.table({})
        return pa.Table.from_arrays(arrays, names=names)

    def to_numpy(self) -> np.ndarray:
        """Return the data as a float64 matrix with one row per dataframe row."""
        if not self._num_columns:
            return np.empty((self._num_rows, 0), dtype=np.float64)
        return np.column_stack(
            [self._columns[name].to_numpy() for name in self._column_names]
        )

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_columns(self) -> int:
        return self._num_columns

    @property
    def column_names(self) -> list[str]:
        """The names of the columns, in order. A copy is returned."""
        return list(self._column_names)

    @property
    def row_names(self) -> list[str]:
        """The names of the rows, in order. A copy is returned."""
        return list(self._row_names)

    @property
    def empty(self) -> bool:
        """If the dataframe has no rows or no columns."""
        return self._num_rows == 0 or self._num_columns == 0

    def dim(self) -> tuple[int, int]:
        """The dimensions of the dataframe as ``(rows, columns)``."""
        return (self._num_rows, self._num_columns)

    def get_row(self, row: Key) -> list[float]:
        """Return the values of a row, one per column in column order.

        :param row: The position or the name of the row.
        """
        idx = self._resolve_row(row)
        return [self._columns[name].value_at(idx) for name in self._column_names]

    def get_column(self, col: Key) -> Column:
        """Return a copy of a column.

        :param col: The position or the name of the column.
        """
        return self._columns[self._resolve_column(col)].copy()

    def get_column_type(self, col: Key) -> ColumnType:
        """Return the :class:`ColumnType` the column stores its values as."""
        return self._columns[self._resolve_column(col)].column_type

    def get(self, row: Key | Selector, col: Key | Selector) -> "float | DataFrame":
        """Get a single value or extract a sub dataframe.

        When ``row`` and ``col`` are a position or a name,
        the value of that cell is returned.

        When any of them is a list of positions and/or names,
        a new :class:`DataFrame` with only those rows and columns
        is returned. Rows and columns will be in the requested order,
        requesting the same row multiple times repeats it,
        requesting the same column multiple times keeps only the first.

        :param row: The position or name of the row, or a list of them.
        :param col: The position or name of the column, or a list of them.
        """
        if _is_selector(row) or _is_selector(col):
            rows = list(row) if _is_selector(row) else [row]
            cols = list(col) if _is_selector(col) else [col]
            return self._slice(rows, cols)

        name = self._resolve_column(col)
        idx = self._resolve_row(row)
        return self._columns[name].value_at(idx)

    def _slice(self, rows: list[Key], cols: list[Key]) -> "DataFrame":
        row_indices = np.asarray([self._resolve_row(r) for r in rows], dtype=np.intp)
        names = [self._resolve_column(c) for c in cols]

        result = DataFrame()
        for name in names:
            source = self._columns[name]
            result.add_column(source.to_numpy()[row_indices], name, source.column_type)
        if result.num_columns:
            result.set_row_names([self._row_names[idx] for idx in row_indices])
        return result

    def set(self, value: float, row: Key, col: Key) -> None:
        """Overwrite the value of a single cell.

        :param value: The new value, converted to the column type.
        :param row: The position or the name of the row.
        :param col: The position or the name of the column.
        """
        name = self._resolve_column(col)
        idx = self._resolve_row(row)
        self._columns[name].set_at(_to_float(value), idx)

    def add_column(
        self,
        values: Iterable[float],
        name: str,
        column_type: ColumnType = ColumnType.DOUBLE,
    ) -> None:
        """Append a new column at the end of the dataframe.

        If a column with the same name already exists, the dataframe
        is left unchanged and a warning is logged. Use :meth:`set` to
        change the values of an existing column.

        :param values: The values of the column, one per row.
        :param name: The name of the new column.
        :param column_type: The type the values should be stored as.
        """
        _check_name(name, "Column")
        column = Column(column_type, values)

        if self._num_rows == 0 and self._num_columns == 0:
            self._num_rows = len(column)
        elif len(column) != self._num_rows:
            raise InvalidArgumentError(
                "New column has to have the same number of rows, as the data frame"
            )

        if name in self._columns:
            logger.warning(
                "Column with name %s already exists. "
                "If you want to overwrite it, please use the set function",
                name,
            )
            return

        self._columns[name] = column
        self._column_names.append(name)
        self._col_index_to_name[self._num_columns] = name
        self._num_columns += 1
        if not self._row_names:
            self._row_names = _default_row_names(self._num_rows)
            self._rebuild_row_index()

    def add_row(self, values: Iterable[float], name: str = "") -> None:
        """Append a new row at the end of the dataframe.

        Rows can only be added once the dataframe has columns.

        :param values: The values of the row, one per column in column order.
        :param name: The name of the new row,
                     by default ``"R"`` followed by the number of rows.
        """
        if self._num_columns == 0:
            raise InvalidArgumentError(
                "A new row can only be added, if columns do already exist"
            )
        values = [_to_float(v) for v in values]
        if len(values) != self._num_columns:
            raise InvalidArgumentError(
                "New row has to have the same number of cols, as the data frame"
            )
        if name:
            _check_name(name, "Row")
        else:
            name = f"{ROW_NAME_PREFIX}{self._num_rows}"

        for idx, value in enumerate(values):
            self._columns[self._col_index_to_name[idx]].append(value)
        self._row_names.append(name)
        self._row_name_to_index[name] = self._num_rows
        self._num_rows += 1

    def drop_column(self, col: Key) -> None:
        """Remove a column from the dataframe.

        The remaining columns keep their relative order.

        :param col: The position or the name of the column.
        """
        name = self._resolve_column(col)
        del self._columns[name]
        self._column_names.remove(name)
        self._num_columns = len(self._column_names)
        self._rebuild_column_index()

    def drop_row(self, row: Key) -> None:
        """Remove a row from the dataframe.

        The remaining rows keep their relative order.

        :param row: The position or the name of the row.
        """
        idx = self._resolve_row(row)
        for column in self._columns.values():
            column.delete_at(idx)
        del self._row_names[idx]
        self._num_rows -= 1
        self._rebuild_row_index()

    def concatenate(self, other: "DataFrame", keep_first_only: bool = False) -> None:
        """Append the columns of another dataframe to this one.

        Rows are aligned by position, so both dataframes must
        have the same number of rows.

        Columns of ``other`` whose name is already in use are
        discarded when ``keep_first_only`` is true, otherwise they are
        added with the ``"_2"`` suffix appended to their name.

        :param other: The dataframe whose columns should be appended.
        :param keep_first_only: Discard colliding columns instead of renaming them.
        """
        if other.num_rows != self._num_rows:
            raise InvalidArgumentError(
                "Both dataframes need to have the same number of rows"
            )

        for name in other.column_names:
            new_name = name
            if name in self._columns:
                if keep_first_only:
                    continue
                new_name = name + COLLISION_SUFFIX
            column = other.get_column(name)
            self.add_column(column.as_doubles(), new_name, column.column_type)

    def set_column_names(self, names: Iterable[str]) -> None:
        """Rename all the columns.

        :param names: The new names, one per column in column order.
        """
        names = list(names)
        if len(names) != self._num_columns:
            raise InvalidArgumentError(
                "New column names has to have the same number of columns, as the data frame"
            )
        for name in names:
            _check_name(name, "Column")
        if len(set(names)) != len(names):
            raise InvalidArgumentError("Column names must be unique")

        self._columns = {
            new: self._columns[old] for old, new in zip(self._column_names, names)
        }
        self._column_names = names
        self._rebuild_column_index()

    def set_row_names(self, names: Iterable[str]) -> None:
        """Rename all the rows.

        :param names: The new names, one per row in row order.
        """
        names = list(names)
        if len(names) != self._num_rows:
            raise InvalidArgumentError(
                "New row names has to have the same number of rows, as the data frame"
            )
        for name in names:
            _check_name(name, "Row")
        self._row_names = names
        self._rebuild_row_index()

    def equals(self, other: "DataFrame") -> bool:
        """Check if two dataframes have the same names, types and values."""
        if not isinstance(other, DataFrame):
            return False
        if (
            self.dim() != other.dim()
            or self._column_names != other._column_names
            or self._row_names != other._row_names
        ):
            return False
        return all(
            self._columns[name] == other._columns[name] for name in self._column_names
        )

    def copy(self) -> Self:
        """Return an independent copy of the dataframe."""
        result = self.__class__.__new__(self.__class__)
        result._columns = {
            name: column.copy() for name, column in self._columns.items()
        }
        result._column_names = list(self._column_names)
        result._col_index_to_name = dict(self._col_index_to_name)
        result._row_names = list(self._row_names)
        result._row_name_to_index = dict(self._row_name_to_index)
        result._num_rows = self._num_rows
        result._num_columns = self._num_columns
        return result

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> Self:
        return self.copy()

    def print(self, max_rows: int | None = None) -> None:
        """Print the dataframe as a text table."""
        print(self.format(max_rows))

    def format(self, max_rows: int | None = None) -> str:
        """Format the dataframe as a text table, with row names first.

        :param max_rows: Show at most this number of rows,
                         by default all of them.
        """
        if max_rows is None:
            max_rows = self._num_rows
        return tabulate(self.to_arrow(), max_rows=max_rows, row_names=self._row_names)

    def __getitem__(self, key: tuple[Key | Selector, Key | Selector]) -> "float | DataFrame":
        row, col = _unpack_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[Key, Key], value: float) -> None:
        row, col = _unpack_key(key)
        self.set(value, row, col)

    def __len__(self) -> int:
        return self._num_rows

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"DataFrame(columns={self._column_names}, rows={self._num_rows})"

    def _resolve_row(self, row: Key) -> int:
        if isinstance(row, str):
            try:
                return self._row_name_to_index[row]
            except KeyError:
                raise InvalidArgumentError(
                    f"Could not find a row with name: {row}"
                ) from None
        if isinstance(row, bool) or not isinstance(row, int | np.integer):
            raise InvalidArgumentError(f"Invalid row key: {row!r}")
        if not 0 <= row < self._num_rows:
            raise InvalidArgumentError(f"Could not find a row with index: {row}")
        return int(row)

    def _resolve_column(self, col: Key) -> str:
        if isinstance(col, str):
            if col not in self._columns:
                raise InvalidArgumentError(f"Could not find a column with name: {col}")
            return col
        if isinstance(col, bool) or not isinstance(col, int | np.integer):
            raise InvalidArgumentError(f"Invalid column key: {col!r}")
        if not 0 <= col < self._num_columns:
            raise InvalidArgumentError(f"Could not find a column with index: {col}")
        return self._col_index_to_name[int(col)]

    def _rebuild_column_index(self) -> None:
        self._col_index_to_name = dict(enumerate(self._column_names))

    def _rebuild_row_index(self) -> None:
        # With duplicated row names the last row wins.
        self._row_name_to_index = {name: idx for idx, name in enumerate(self._row_names)}


def _default_row_names(num_rows: int) -> list[str]:
    return [f"{ROW_NAME_PREFIX}{idx}" for idx in range(num_rows)]


def _check_name(name: Any, kind: str) -> None:
    if not isinstance(name, str):
        raise InvalidArgumentError(f"{kind} names must be strings, got {name!r}")


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"Not a numeric value: {value!r}") from None


def _is_selector(key: Any) -> bool:
    return isinstance(key, list | tuple | range | np.ndarray)


def _unpack_key(key: Any) -> tuple[Any, Any]:
    if not isinstance(key, tuple) or len(key) != 2:
        raise InvalidArgumentError("DataFrame keys must be (row, column) pairs")
    return key

