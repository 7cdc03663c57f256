"""Conversions between dataframes and numpy matrices.

The numeric algorithms operate on :class:`numpy.ndarray` matrices,
where each row is an observation and each column is a variable,
exactly like the rows and columns of a dataframe:

>>> from numframe.dataframe import DataFrame
>>> df = DataFrame({"A": [1, 2], "B": [3, 4]})
>>> dataframe_to_matrix(df).tolist()
[[1.0, 3.0], [2.0, 4.0]]
>>> matrix_to_dataframe(dataframe_to_matrix(df) * 2).column_names
['Col0', 'Col1']
"""

from collections.abc import Sequence

import numpy as np

from ..dataframe import Column, ColumnType, DataFrame
from ..errors import InvalidArgumentError


def dataframe_to_matrix(df: DataFrame) -> np.ndarray:
    """Convert the dataframe to a ``rows x columns`` float64 matrix."""
    return df.to_numpy()


def dataframe_to_columns(df: DataFrame) -> list[list[float]]:
    """Convert the dataframe to a list with the values of each column.

    There is one entry for each column, each entry has one value per row.
    """
    return [df.get_column(idx).as_doubles() for idx in range(df.num_columns)]


def matrix_to_dataframe(
    matrix: np.ndarray, column_names: Sequence[str] | None = None
) -> DataFrame:
    """Convert a 2D matrix to a dataframe with one column per matrix column.

    :param matrix: The matrix to convert.
    :param column_names: The names of the columns. When not provided,
                         or when they don't match the number of columns,
                         columns are named ``Col0, Col1, ...``.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2:
        raise InvalidArgumentError(f"Expected a 2D matrix, got {matrix.ndim} dimensions")

    num_rows, num_columns = matrix.shape
    if num_rows == 0 or num_columns == 0:
        return DataFrame()

    names = list(column_names) if column_names is not None else []
    if len(names) != num_columns:
        names = [f"Col{idx}" for idx in range(num_columns)]

    return DataFrame(
        [
            (name, Column(ColumnType.DOUBLE, matrix[:, idx]))
            for idx, name in enumerate(names)
        ]
    )


def symmetric_matrix(df: DataFrame, tol: float = 1e-8) -> np.ndarray:
    """Convert a dataframe holding a symmetric matrix, like a covariance matrix.

    The dataframe must be square and each value must be within ``tol``
    of its mirrored value. The upper triangle is mirrored to the
    lower one, so that the result is exactly symmetric.

    :param df: The dataframe with the matrix.
    :param tol: The allowed difference between mirrored values.
    """
    matrix = df.to_numpy()
    num_rows, num_columns = matrix.shape
    if num_rows != num_columns:
        raise InvalidArgumentError("Input is not an nxn matrix")
    if not np.allclose(matrix, matrix.T, rtol=0, atol=tol):
        raise InvalidArgumentError("Input matrix is not symmetric")
    upper = np.triu(matrix)
    return upper + np.triu(matrix, k=1).T
