"""Read and write dataframes as CSV files.

The CSV files are expected to have a header row with the names
of the columns and only numeric values in the other rows.
Optionally the first field of each row can be the name of the row,
in which case the first field of the header is ignored::

    RowNames,sepal.length,sepal.width
    flower1,5.1,3.5
    flower2,4.9,3.0

Values are separated by a delimiter, usually ``,`` or ``;``.

Parsing is strict: a value that is not a number, a missing value
or a row with the wrong number of fields cause a :class:`CSVParseError`,
rows are never skipped.

The heavy lifting is done by :mod:`pyarrow.csv`, the data is then
moved into :attr:`numframe.dataframe.ColumnType.DOUBLE` columns.
"""

import logging
import os

import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.csv

from ..dataframe import Column, ColumnType, DataFrame
from ..errors import InvalidArgumentError

logger = logging.getLogger(__name__)

ROW_NAMES_HEADER = "RowNames"
"""Header of the row names column when writing row names."""


def read_csv(filename: str, has_row_names: bool = False, delimiter: str = ",") -> DataFrame:
    """Load a CSV file into a :class:`DataFrame`.

    All the columns will be of type :attr:`ColumnType.DOUBLE`.
    When the file has no row names, rows are named ``R0, R1, ...``.

    :param filename: The path of the local CSV file.
    :param has_row_names: If the first field of each row is the row name.
    :param delimiter: The character separating the values.
    """
    if not os.path.exists(filename):
        raise FileNotFoundError(f"{filename} does not exist")

    parse_options = pa.csv.ParseOptions(delimiter=delimiter)
    try:
        # Only empty cells are missing, "nan" is a valid number.
        convert_options = pa.csv.ConvertOptions(null_values=[""])
        if has_row_names:
            # Row names must stay text, even when they look like numbers.
            row_names_column = poll_schema(filename, parse_options).names[0]
            convert_options = pa.csv.ConvertOptions(
                null_values=[""], column_types={row_names_column: pa.string()}
            )
        table = pa.csv.read_csv(
            filename, parse_options=parse_options, convert_options=convert_options
        )
    except pa.ArrowInvalid as e:
        raise CSVParseError(f"Unable to parse {filename}: {e}") from e

    row_names = None
    first_column = 0
    if has_row_names:
        row_names = table.column(0).to_pylist()
        first_column = 1

    columns = []
    for idx in range(first_column, table.num_columns):
        name = table.column_names[idx].strip()
        values = _numeric_values(name, table.column(idx))
        columns.append((name, Column(ColumnType.DOUBLE, values)))

    logger.debug(
        "Read %d rows and %d columns from %s", table.num_rows, len(columns), filename
    )
    if not columns:
        return DataFrame()
    return DataFrame(columns, row_names=row_names)


def write_csv(
    df: DataFrame, filename: str, include_row_names: bool = False, delimiter: str = ","
) -> None:
    """Write a :class:`DataFrame` to a CSV file.

    The column names are written as the header row.

    :param df: The dataframe to write.
    :param filename: The path of the local CSV file.
    :param include_row_names: Write the row names as the first field of each row.
    :param delimiter: The character separating the values.
    """
    table = df.to_arrow(row_names_column=ROW_NAMES_HEADER if include_row_names else None)
    # The header is written by hand, pyarrow would quote it.
    header = delimiter.join(table.column_names) + "\n"
    write_options = pa.csv.WriteOptions(
        include_header=False, delimiter=delimiter, quoting_style="none"
    )
    with open(filename, "wb") as f:
        f.write(header.encode("utf-8"))
        try:
            pa.csv.write_csv(table, f, write_options=write_options)
        except pa.ArrowInvalid as e:
            raise InvalidArgumentError(f"Unable to write {filename}: {e}") from e
    logger.debug("Wrote %d rows to %s", df.num_rows, filename)


def poll_schema(filename: str, parse_options: pa.csv.ParseOptions) -> pa.Schema:
    """Poll the schema of the CSV file without loading all of it."""
    with pa.csv.open_csv(filename, parse_options=parse_options) as reader:
        return reader.schema


def _numeric_values(name: str, column: pa.ChunkedArray) -> list[float]:
    if column.null_count:
        raise CSVParseError(f"Column {name} has missing values")

    if pa.types.is_string(column.type) or pa.types.is_large_string(column.type):
        # Values that were not recognized as numbers, possibly
        # due to surrounding whitespace. Anything else is an error.
        try:
            column = pc.cast(pc.utf8_trim_whitespace(column), pa.float64())
        except pa.ArrowInvalid as e:
            raise CSVParseError(f"Failed to convert values of column {name}: {e}") from e
    elif not (
        pa.types.is_integer(column.type)
        or pa.types.is_floating(column.type)
        or pa.types.is_null(column.type)
    ):
        raise CSVParseError(f"Column {name} has non numeric values of type {column.type}")

    return column.to_pylist()


class CSVParseError(InvalidArgumentError):
    """An exception raised when a CSV file can't be parsed into a dataframe."""

    pass
