# mcpathgen/utils/linalg.py
"""
Pseudo-square-root of correlation (or covariance) matrices.

Given a symmetric matrix C, returns L with L @ L.T ≈ C. The factor is used to
turn independent Gaussian draws into correlated ones: z = L @ w.

Salvaging modes:
    - "none": Cholesky factor (lower triangular); C must be positive definite.
    - "spectral": eigenvalues clipped at zero, rows rescaled so that the
      diagonal of L @ L.T reproduces the diagonal of C. Works for matrices
      that lost positive semi-definiteness through estimation noise.
"""

import logging

import numpy as np
import scipy.linalg as la

from mcpathgen.exceptions.montecarlo_exceptions import ConfigurationError

logger = logging.getLogger(__name__)

SALVAGING_ALGORITHMS = ("none", "spectral")


def check_correlation_matrix(matrix, size: int = None, tol: float = 1e-10) -> np.ndarray:
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ConfigurationError(
            f"correlation matrix must be square, got shape {matrix.shape}"
        )
    if size is not None and matrix.shape[0] != size:
        raise ConfigurationError(
            f"correlation matrix is {matrix.shape[0]}x{matrix.shape[1]}, "
            f"expected {size}x{size}"
        )
    if not np.allclose(matrix, matrix.T, atol=tol, rtol=0.0):
        raise ConfigurationError("correlation matrix must be symmetric")
    return matrix


def pseudo_sqrt(matrix, salvaging: str = "none") -> np.ndarray:
    """
    Pseudo-square-root of a symmetric matrix.

    Args:
        matrix: Symmetric n x n matrix.
        salvaging: "none" (Cholesky) or "spectral".

    Returns:
        n x n matrix L with L @ L.T ≈ matrix.

    Raises:
        ConfigurationError: For non-square or non-symmetric input, an unknown
            salvaging mode, or a matrix that is not positive definite when
            salvaging is "none".
    """
    if salvaging not in SALVAGING_ALGORITHMS:
        raise ConfigurationError(
            f"Unknown salvaging algorithm '{salvaging}'. "
            f"Supported: {', '.join(SALVAGING_ALGORITHMS)}"
        )
    matrix = check_correlation_matrix(matrix)

    if salvaging == "none":
        try:
            return np.linalg.cholesky(matrix)
        except np.linalg.LinAlgError as e:
            raise ConfigurationError(
                f"matrix is not positive definite; use salvaging='spectral' ({e})"
            ) from e

    eigenvalues, eigenvectors = la.eigh(matrix)
    if np.any(eigenvalues < 0.0):
        logger.warning(
            "pseudo_sqrt: clipping %d negative eigenvalue(s), smallest %.3e",
            int(np.sum(eigenvalues < 0.0)),
            eigenvalues.min(),
        )
        eigenvalues = np.maximum(eigenvalues, 0.0)

    result = eigenvectors * np.sqrt(eigenvalues)

    # Restore the original diagonal
    row_norms = np.sqrt(np.sum(result * result, axis=1))
    target = np.sqrt(np.diag(matrix))
    scale = np.divide(target, row_norms, out=np.zeros_like(target), where=row_norms > 0)
    return result * scale[:, None]
