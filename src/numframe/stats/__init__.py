"""Statistics and dimensionality reduction over dataframes.

The statistics are computed column by column, each column
being a variable and each row an observation:

- :mod:`numframe.stats.descriptive` provides means, variances,
  standard deviations and covariances of the columns.
- :class:`StandardScaler` centers and scales the columns.
- :class:`PCA` computes the principal components of the columns
  and projects data on them.

The numeric work is delegated to :mod:`numpy`,
:mod:`numframe.stats.casting` moves the data between dataframes
and numpy matrices.
"""

from .descriptive import (
    covariance_matrix,
    covariances,
    describe,
    is_constant,
    means,
    standard_deviations,
    variances,
)
from .pca import PCA
from .scaler import StandardScaler

__all__ = [
    "PCA",
    "StandardScaler",
    "covariance_matrix",
    "covariances",
    "describe",
    "is_constant",
    "means",
    "standard_deviations",
    "variances",
]
