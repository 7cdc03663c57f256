"""Matrix decompositions used by the principal component analysis.

Both decompositions return the eigenvalues together with the
eigenvectors of the covariance matrix of the data, stored as the
columns of a matrix. The only difference is the input they accept:

* :func:`spectral_decomposition` decomposes a symmetric matrix,
  usually the covariance matrix itself.
* :func:`singular_value_decomposition` works directly on the
  (centered) data and never builds the covariance matrix.

The decompositions themselves are provided by :mod:`numpy.linalg`.
"""

import numpy as np

from ..errors import InvalidArgumentError


def spectral_decomposition(matrix: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Eigenvalues and eigenvectors of a symmetric matrix.

    Eigenvalues are returned in ascending order,
    the eigenvector for ``eigenvalues[i]`` is ``eigenvectors[:, i]``.

    >>> values, vectors = spectral_decomposition(np.array([[2.0, 0.0], [0.0, 3.0]]))
    >>> values.tolist()
    [2.0, 3.0]
    """
    eigenvalues, eigenvectors = np.linalg.eigh(matrix)
    return eigenvalues, eigenvectors


def singular_value_decomposition(matrix: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """Covariance eigenvalues and eigenvectors of a data matrix.

    The singular values ``s`` of a centered ``n x p`` data matrix
    relate to the eigenvalues of its covariance matrix as ``s**2 / (n - 1)``,
    while the right singular vectors are the eigenvectors.

    Eigenvalues are returned in descending order,
    the eigenvector for ``eigenvalues[i]`` is ``eigenvectors[:, i]``.

    :param matrix: The data, one row per observation.
    """
    num_rows = matrix.shape[0]
    if num_rows < 2:
        raise InvalidArgumentError(
            "At least 2 rows are needed to compute the singular value decomposition"
        )
    _, singular_values, vt = np.linalg.svd(matrix, full_matrices=False)
    return singular_values**2 / (num_rows - 1), vt.T
