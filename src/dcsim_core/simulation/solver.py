# src/dcsim_core/simulation/solver.py
import logging
import warnings
from typing import List, Optional, Tuple

import numpy as np
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from .exceptions import SingularMatrixError

logger = logging.getLogger(__name__)

LuFactorization = Tuple[np.ndarray, np.ndarray]


def factorize_conductance_matrix(G: np.ndarray, node_names: Optional[List[str]] = None) -> LuFactorization:
    """
    Factorizes a dense conductance matrix using LU decomposition with partial pivoting.

    Args:
        G: The square conductance matrix of the unknown nodes.
        node_names: Names matching the rows of G, used only for diagnostics.

    Returns:
        The `(lu, piv)` pair produced by `scipy.linalg.lu_factor`.

    Raises:
        SingularMatrixError: If a pivot is exactly zero or the matrix is not finite.
        ValueError: If G is not square or is empty.
    """
    G = np.asarray(G, dtype=float)
    if G.ndim != 2 or G.shape[0] != G.shape[1]:
        raise ValueError(f"Conductance matrix must be square, got shape {G.shape}.")
    if G.shape[0] == 0:
        raise ValueError("Cannot factorize an empty conductance matrix.")
    if not np.all(np.isfinite(G)):
        raise SingularMatrixError(details="Conductance matrix contains NaN or Inf entries.")

    logger.debug(f"Factorizing conductance matrix {G.shape}...")
    with warnings.catch_warnings():
        # A zero pivot is reported below as a SingularMatrixError.
        warnings.simplefilter("ignore", LinAlgWarning)
        lu, piv = lu_factor(G)

    zero_pivots = np.flatnonzero(np.diag(lu) == 0)
    if zero_pivots.size:
        node = None
        if node_names is not None and zero_pivots[0] < len(node_names):
            node = node_names[zero_pivots[0]]
        logger.error(f"LU factorization found a zero pivot at row {zero_pivots[0]}: matrix is singular.")
        raise SingularMatrixError(
            details=(
                f"The conductance matrix is singular (zero pivot at row {zero_pivots[0]}). "
                "No resistive path connects the node to the reference node."
            ),
            node=node,
        )
    logger.debug("LU factorization successful.")
    return lu, piv


def solve_nodal_system(factorization: LuFactorization, I: np.ndarray) -> np.ndarray:
    """
    Solves `G * V = I` using a pre-computed LU factorization.
    """
    V = lu_solve(factorization, np.asarray(I, dtype=float))

    if np.any(np.isnan(V)) or np.any(np.isinf(V)):
        logger.error("NaN or Inf detected in nodal solution vector.")
        raise SingularMatrixError(details="Nodal system solve resulted in NaN/Inf values.")

    return V
