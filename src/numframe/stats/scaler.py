"""Standardization of the columns of a dataframe.

The :class:`StandardScaler` learns the mean and the standard deviation
of each column during :meth:`StandardScaler.fit` and then
uses them to center and scale the columns of any dataframe
with the same number of columns:

>>> from numframe.dataframe import DataFrame
>>> df = DataFrame({"A": [1, 2, 3], "B": [4, 5, 6]})
>>> scaler = StandardScaler().fit(df)
>>> scaler.means, scaler.stdevs
([2.0, 5.0], [1.0, 1.0])
>>> scaler.transform(df).get_column("A").as_doubles()
[-1.0, 0.0, 1.0]
"""

import logging
from typing import Self

from ..dataframe import DataFrame
from ..errors import IllegalStateError
from . import descriptive

logger = logging.getLogger(__name__)


class StandardScaler:
    """Center each column on its mean and scale it to unit standard deviation."""

    def __init__(self) -> None:
        self._means: list[float] = []
        self._stdevs: list[float] = []
        self._fitted = False

    @property
    def fitted(self) -> bool:
        return self._fitted

    @property
    def means(self) -> list[float]:
        """The means learned by the last fit, empty if never fitted."""
        return list(self._means)

    @property
    def stdevs(self) -> list[float]:
        """The standard deviations learned by the last fit, empty if never fitted."""
        return list(self._stdevs)

    def fit(self, df: DataFrame) -> Self:
        """Learn mean and standard deviation of each column of ``df``.

        Raises :class:`numframe.errors.InvalidArgumentError` if ``df``
        is empty or has fewer than two rows.
        """
        means = descriptive.means(df)
        stdevs = descriptive.standard_deviations(df)
        self._means = means
        self._stdevs = stdevs
        self._fitted = True
        return self

    def transform(self, df: DataFrame) -> DataFrame:
        """Return a new dataframe with the columns of ``df`` standardized.

        Each value becomes ``(value - mean) / stdev`` using the statistics
        learned during :meth:`fit`. Columns whose standard deviation was
        zero are copied unchanged. The result has the same column
        and row names as ``df``, all columns are doubles.

        :param df: The data to scale, it must have as many columns
                   as the data used in :meth:`fit`.
        """
        if not self._fitted:
            raise IllegalStateError(
                "StandardScaler has to be fitted first, before transforming data!"
            )
        if df.num_columns != len(self._means):
            raise IllegalStateError(
                "Input data needs to have the same number of columns "
                "as the data which was used in fit"
            )
        if df.empty:
            logger.warning("Input DataFrame was empty!")
            return DataFrame()

        scaled = DataFrame()
        for idx, name in enumerate(df.column_names):
            values = df.get_column(name).to_numpy()
            if self._stdevs[idx] == 0:
                logger.warning(
                    "Cannot scale column %s, because the standard deviation is 0 "
                    "(please check if the column is constant)",
                    name,
                )
            else:
                values = (values - self._means[idx]) / self._stdevs[idx]
            scaled.add_column(values, name)
        scaled.set_row_names(df.row_names)
        return scaled

    def fit_transform(self, df: DataFrame) -> DataFrame:
        """Fit on ``df`` and return ``df`` standardized."""
        return self.fit(df).transform(df)
