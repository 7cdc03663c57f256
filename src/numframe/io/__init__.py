"""Loading and saving dataframes.

Dataframes only live in memory, this module provides the
functions to persist them to CSV files and load them back::

    df = read_csv("iris.csv")
    write_csv(df, "iris-copy.csv", include_row_names=True)

See :mod:`numframe.io.csv` for the details of the supported format.
"""

from .csv import CSVParseError, read_csv, write_csv

__all__ = ("CSVParseError", "read_csv", "write_csv")
