# src/dcsim_core/simulation/__init__.py
from .exceptions import (
    NodalInputError,
    UnsupportedTopologyError,
    SingularMatrixError,
)
from .mna import NodalAssembler, NodalSystem
from .solver import factorize_conductance_matrix, solve_nodal_system
from .results import SolveResult
from .engine import NodalAnalyzer
from .execution import solve_circuit

__all__ = [
    # Exceptions
    "NodalInputError",
    "UnsupportedTopologyError",
    "SingularMatrixError",
    # Core Classes
    "NodalAssembler",
    "NodalSystem",
    "NodalAnalyzer",
    "SolveResult",
    "factorize_conductance_matrix",
    "solve_nodal_system",
    "solve_circuit",
]
