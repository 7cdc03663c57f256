"""Format tabular data into a text table for print.

the `tabulate` function takes a `pyarrow.Table` or `pyarrow.RecordBatch` and formats it into a text table.
It will truncate long strings, format floats to 6 significant digits, and limit the number of rows to display.
The function is used to display the content of a :class:`numframe.dataframe.DataFrame`,
in which case the row names are shown as the first, unnamed, column.

Example:

    >>> import pyarrow as pa
    >>> data = {
    ...     "Sepal": [5.1, 4.9, 4.7],
    ...     "Petal": [1.4, 1.4, 1.3],
    ...     "Count": [8, 8, 7],
    ... }
    >>> table = pa.RecordBatch.from_pydict(data)
    >>> print(tabulate(table))
    Sepal | Petal | Count
    ----- | ----- | -----
    5.1   | 1.4   | 8
    4.9   | 1.4   | 8
    4.7   | 1.3   | 7
    >>> print(tabulate(table, max_rows=1, row_names=["a", "b", "c"]))
      | Sepal | Petal | Count
    - | ----- | ----- | -----
    a | 5.1   | 1.4   | 8
    ... and 2 more rows
"""

from collections.abc import Sequence
from typing import Any

from pyarrow import RecordBatch, Table


def tabulate(
    data: RecordBatch | Table,
    max_rows: int = 20,
    row_names: Sequence[str] | None = None,
) -> str:
    """Format a RecordBatch or Table into a text table.

    Will produce a string like::

           | Sepal | Petal | Count
        -- | ----- | ----- | -----
        R0 | 5.1   | 1.4   | 8
        R1 | 4.9   | 1.4   | 8

    :param data: The data to format.
    :param max_rows: How many rows to show at most.
    :param row_names: If provided, the names of the rows shown as first column.
    """
    cols = data.column_names
    rows = [
        [format_value(row[c]) for c in cols]
        for row in data.slice(length=max_rows).to_pylist()
    ]
    if row_names is not None:
        cols = [""] + cols
        rows = [[str(name)] + row for name, row in zip(row_names, rows)]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if data.num_rows > max_rows:
        table += f"\n... and {data.num_rows - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    ).rstrip()


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 6 significant digits,
    and truncate long strings.
    """
    if isinstance(v, float):
        return f"{v:.6g}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
