"""Descriptive statistics of the columns of a dataframe.

All the functions compute one statistic for each column of the dataframe,
in column order. Variances and covariances are sample statistics,
thus divided by ``n - 1``:

>>> from numframe.dataframe import DataFrame
>>> df = DataFrame({"A": [1, 2, 3], "B": [4, 6, 8]})
>>> means(df)
[2.0, 6.0]
>>> variances(df)
[1.0, 4.0]
>>> print(describe(df))
  | mean | variance | std
- | ---- | -------- | ---
A | 2    | 1        | 1
B | 6    | 4        | 2
"""

import numpy as np

from ..dataframe import Column, DataFrame
from ..errors import InvalidArgumentError


def means(df: DataFrame) -> list[float]:
    """The mean of each column."""
    if df.empty:
        raise InvalidArgumentError("Cannot calculate means on empty DataFrame.")
    return [float(np.mean(values)) for values in _column_values(df)]


def variances(df: DataFrame) -> list[float]:
    """The sample variance of each column."""
    if df.empty:
        raise InvalidArgumentError("Cannot calculate variances on empty DataFrame.")
    _check_enough_rows(df, "variances")
    return [float(np.var(values, ddof=1)) for values in _column_values(df)]


def standard_deviations(df: DataFrame) -> list[float]:
    """The sample standard deviation of each column."""
    return [float(np.sqrt(v)) for v in variances(df)]


def covariance_matrix(df: DataFrame) -> np.ndarray:
    """The sample covariance matrix of the columns, as a numpy array.

    Element ``[i, j]`` is the covariance between column ``i`` and column ``j``.
    """
    if df.empty:
        raise InvalidArgumentError(
            "Cannot calculate covariance for an empty DataFrame."
        )
    _check_enough_rows(df, "covariances")
    return np.atleast_2d(np.cov(df.to_numpy(), rowvar=False, ddof=1))


def covariances(df: DataFrame) -> DataFrame:
    """The sample covariance matrix of the columns, as a dataframe.

    Both the columns and the rows of the result are named
    after the columns of ``df``, so that the covariance between
    ``A`` and ``B`` can be retrieved as ``covariances(df).get("A", "B")``.
    """
    matrix = covariance_matrix(df)
    names = df.column_names
    result = DataFrame()
    for idx, name in enumerate(names):
        result.add_column(matrix[:, idx], name)
    result.set_row_names(names)
    return result


def describe(df: DataFrame) -> DataFrame:
    """Summarize each column with its mean, variance and standard deviation.

    The result has one row for each column of ``df``.
    """
    result = DataFrame(
        [
            ("mean", means(df)),
            ("variance", variances(df)),
            ("std", standard_deviations(df)),
        ],
        row_names=df.column_names,
    )
    return result


def is_constant(column: Column) -> bool:
    """If all the values in the column are equal.

    Empty columns and columns with a single value are constant.
    """
    values = column.to_numpy()
    if len(values) == 0:
        return True
    return bool(np.all(values == values[0]))


def _column_values(df: DataFrame) -> list[np.ndarray]:
    return [df.get_column(name).to_numpy() for name in df.column_names]


def _check_enough_rows(df: DataFrame, statistic: str) -> None:
    if df.num_rows < 2:
        raise InvalidArgumentError(
            f"Cannot calculate {statistic} with fewer than 2 rows."
        )
