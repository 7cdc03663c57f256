"""In-memory numeric dataframe.

A dataframe is a tool designed to handle and manipulate structured data,
in the form of a table made of rows and columns.
It allows users to load data from various sources (like CSV files),
explore it, slice it, and feed it to analyses like
descriptive statistics or a principal component analysis.

The numframe dataframe only holds numeric data, but each column
can decide how to store it: as integers, single precision floats
or double precision floats. See :class:`ColumnType`.
Regardless of the storage, values are always read back as floats.

Rows and columns can both be addressed by position or by name:

>>> df = DataFrame([("A", [1, 2, 3]), ("B", [4, 5, 6])], row_names=["x", "y", "z"])
>>> df.get("y", "A")
2.0
>>> df.get(1, 0)
2.0

The dataframe is eager, all data is materialized in memory,
and every operation that takes data from another dataframe copies it.
Two dataframes never share their columns.
"""

from .column import Column, ColumnType, TypedColumn
from .dataframe import DataFrame

__all__ = ("Column", "ColumnType", "DataFrame", "TypedColumn")
