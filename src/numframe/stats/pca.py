"""Principal component analysis.

The :class:`PCA` finds the directions of maximum variance of the data,
the principal components, as the eigenvectors of the covariance matrix
of the columns. The eigenvalue of each eigenvector is the variance of
the data along that direction, components are kept sorted from the
largest to the smallest eigenvalue.

Once fitted, :meth:`PCA.transform` projects data onto the first
principal components:

>>> from numframe.dataframe import DataFrame
>>> df = DataFrame({"X": [1, 2, 3, 4], "Y": [2, 4, 6, 8]})
>>> pca = PCA()
>>> projected = pca.fit_transform(df, dim=1)
>>> projected.column_names
['PrincipalComponent0']
>>> round(pca.eigenvalues[0], 6)
8.333333

The eigen decomposition can be computed in three ways:

* from the covariance matrix of the data (the default),
* from a singular value decomposition of the data, passing ``svd=True``,
  which never builds the covariance matrix,
* directly from a covariance matrix, when the dataframe passed to
  :meth:`PCA.fit` already is one, passing ``is_covariance=True``.

Columns measured on different scales can be standardized first with
``center_and_scale=True``, in which case a :class:`StandardScaler`
is fitted on the data and reused to scale the data being transformed.
"""

import logging
from typing import Self

import numpy as np

from ..dataframe import DataFrame
from ..errors import IllegalStateError, InvalidArgumentError
from . import casting, descriptive, linalg
from .scaler import StandardScaler

logger = logging.getLogger(__name__)

COMPONENT_PREFIX = "PrincipalComponent"
"""Prefix of the column names of the projected data."""


class PCA:
    """Principal component analysis of the columns of a dataframe."""

    def __init__(self) -> None:
        self._eigenvalues = np.empty(0, dtype=np.float64)
        self._eigenvectors = np.empty((0, 0), dtype=np.float64)
        self._scaler: StandardScaler | None = None
        self._center_and_scale = False
        self._num_columns = 0
        self._fitted = False

    @property
    def fitted(self) -> bool:
        return self._fitted

    @property
    def eigenvalues(self) -> list[float]:
        """The eigenvalues, from the largest to the smallest."""
        return self._eigenvalues.tolist()

    @property
    def eigenvectors(self) -> list[list[float]]:
        """The eigenvectors, in the same order as :attr:`eigenvalues`."""
        return [self._eigenvectors[:, idx].tolist() for idx in range(len(self._eigenvalues))]

    def fit(
        self,
        df: DataFrame,
        center_and_scale: bool = False,
        svd: bool = False,
        is_covariance: bool = False,
    ) -> Self:
        """Compute the principal components of ``df``.

        Fitting again replaces the result of any previous fit.

        :param df: The data, one row per observation. It needs at least
                   two columns.
        :param center_and_scale: Standardize the columns before computing
                                 the components. Constant columns can't be
                                 standardized and are refused.
        :param svd: Use a singular value decomposition of the data instead
                    of an eigen decomposition of its covariance matrix.
        :param is_covariance: ``df`` is a symmetric covariance matrix,
                              which is decomposed as is. Both
                              ``center_and_scale`` and ``svd`` are ignored.
        """
        if df.num_rows == 0 or df.num_columns < 2:
            raise InvalidArgumentError(
                "DataFrame has to have at least two variables for the PCA to be calculated"
            )

        scaler = None
        if is_covariance:
            eigenvalues, eigenvectors = linalg.spectral_decomposition(
                casting.symmetric_matrix(df)
            )
        else:
            self._check_constant_columns(df, center_and_scale)
            data = df
            if center_and_scale:
                scaler = StandardScaler()
                data = scaler.fit_transform(df)

            if svd:
                matrix = casting.dataframe_to_matrix(data)
                matrix = matrix - matrix.mean(axis=0)
                eigenvalues, eigenvectors = linalg.singular_value_decomposition(matrix)
            else:
                eigenvalues, eigenvectors = linalg.spectral_decomposition(
                    descriptive.covariance_matrix(data)
                )

        order = np.argsort(eigenvalues, kind="stable")[::-1]
        self._eigenvalues = np.asarray(eigenvalues)[order]
        self._eigenvectors = np.asarray(eigenvectors)[:, order]
        self._scaler = scaler
        self._center_and_scale = center_and_scale and not is_covariance
        self._num_columns = df.num_columns
        self._fitted = True
        logger.debug("Fitted PCA with eigenvalues %s", self.eigenvalues)
        return self

    def transform(self, df: DataFrame, dim: int = 2) -> DataFrame:
        """Project ``df`` onto the first ``dim`` principal components.

        When the PCA was fitted with ``center_and_scale``, ``df`` is first
        standardized with the means and standard deviations of the fitted data.

        The result has one column per component, named ``PrincipalComponent0``,
        ``PrincipalComponent1`` and so on, and keeps the row names of ``df``.

        :param df: The data to project, with as many columns as the fitted data.
        :param dim: The number of components to keep. When more components are
                    requested than available, all of them are kept.
        """
        if not self._fitted:
            raise IllegalStateError(
                "PCA has to be fitted first, before transforming data!"
            )
        if df.num_columns != self._num_columns:
            raise IllegalStateError(
                "Input data needs to have the same number of columns "
                "as the data which was used in fit"
            )
        if dim <= 0:
            raise InvalidArgumentError("Dim has to be greater than 0")

        available = len(self._eigenvalues)
        if dim > available:
            logger.warning("Only %d Principal Components available", available)
            dim = available

        if self._center_and_scale:
            df = self._scaler.transform(df)
        if df.num_rows == 0:
            return DataFrame()

        projected = casting.dataframe_to_matrix(df) @ self._eigenvectors[:, :dim]
        result = casting.matrix_to_dataframe(
            projected, [f"{COMPONENT_PREFIX}{idx}" for idx in range(dim)]
        )
        result.set_row_names(df.row_names)
        return result

    def fit_transform(
        self,
        df: DataFrame,
        center_and_scale: bool = False,
        svd: bool = False,
        is_covariance: bool = False,
        dim: int = 2,
    ) -> DataFrame:
        """Fit on ``df`` and project it onto the first ``dim`` components."""
        self.fit(df, center_and_scale=center_and_scale, svd=svd, is_covariance=is_covariance)
        return self.transform(df, dim=dim)

    def eigen_information(self) -> DataFrame:
        """The eigenvectors as a dataframe, one column per eigenvector.

        Each column is named after its eigenvalue, like ``EV=7.074673``.
        Eigenvalues that are equal to the sixth decimal produce the same
        name, only the first of their eigenvectors is kept and a warning
        is logged for the others.
        """
        result = DataFrame()
        for value, vector in zip(self.eigenvalues, self.eigenvectors):
            result.add_column(vector, f"EV={value:f}")
        return result

    def _check_constant_columns(self, df: DataFrame, center_and_scale: bool) -> None:
        for name in df.column_names:
            if not descriptive.is_constant(df.get_column(name)):
                continue
            if center_and_scale:
                raise InvalidArgumentError(
                    "DataFrame has constant columns and can thus not be centered and scaled, "
                    "because of 0 variance of constant Columns. Please remove constant columns"
                )
            logger.warning(
                "DataFrame has constant columns. Constant columns do not influence "
                "the variance and thus the PCA, consider removing them."
            )
            return
