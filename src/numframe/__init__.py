"""numframe

An in memory dataframe for numeric data, with descriptive statistics,
standardization and principal component analysis.

The library is split into multiple components, each isolated within its own
package and each self documented in literate programming style:

* :mod:`numframe.dataframe`, the dataframe and its typed columns.
* :mod:`numframe.io`, reading and writing dataframes as CSV files.
* :mod:`numframe.stats`, statistics and principal component analysis.
* :mod:`numframe.commands`, the shell commands.

A quick tour:

>>> from numframe import DataFrame, PCA, describe
>>> df = DataFrame({"X": [1, 2, 3], "Y": [2, 4, 7]})
>>> print(describe(df))
  | mean    | variance | std
- | ------- | -------- | -------
X | 2       | 1        | 1
Y | 4.33333 | 6.33333  | 2.51661
>>> PCA().fit_transform(df, dim=1).column_names
['PrincipalComponent0']

For the user guide and code documentation of each component,
refer to the component itself.
"""

from .dataframe import Column, ColumnType, DataFrame
from .errors import (
    IllegalStateError,
    InvalidArgumentError,
    NumframeError,
    OutOfRangeError,
)
from .io import read_csv, write_csv
from .stats import PCA, StandardScaler, describe

__version__ = "0.1.0"

__all__ = (
    "Column",
    "ColumnType",
    "DataFrame",
    "IllegalStateError",
    "InvalidArgumentError",
    "NumframeError",
    "OutOfRangeError",
    "PCA",
    "StandardScaler",
    "describe",
    "read_csv",
    "write_csv",
)
