# src/dcsim_core/simulation/exceptions.py
"""
Defines the diagnosable exceptions raised while assembling and solving the nodal
system.

All exceptions here inherit from `DiagnosableError`, so they can be caught
individually (`except SingularMatrixError:`), collectively
(`except DiagnosableError:`), and always provide `get_diagnostic_report()`.
"""
import numpy as np
from typing import Optional
from dataclasses import dataclass

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class NodalInputError(DiagnosableError):
    """
    Raised when the element list cannot be turned into a nodal system at all,
    before any matrix is assembled.
    """
    circuit_name: str
    details: str

    def __str__(self):
        return f"Circuit '{self.circuit_name}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Nodal Input Error",
            details=self.details,
            suggestion="Add at least one resistor, capacitor, inductor or current source between a node and the reference node.",
            context={'element': self.circuit_name}
        )


@dataclass()
class UnsupportedTopologyError(NodalInputError):
    """
    Raised when the elements describe a topology the single-node solver cannot
    represent. The assembler rejects such input instead of collapsing every
    element onto one node.
    """
    node: Optional[str] = None

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Unsupported Topology",
            details=self.details,
            suggestion="Connect every element between the same node and the reference node. Multi-node circuits are not supported by this solver.",
            context={'element': self.circuit_name, 'node': self.node}
        )


@dataclass()
class SingularMatrixError(DiagnosableError, np.linalg.LinAlgError):
    """
    Raised when the conductance matrix cannot be factorised or the solution is not
    finite. Catchable as `DiagnosableError` and as numpy's `LinAlgError`.
    """
    details: str
    node: Optional[str] = None

    def __str__(self):
        node_str = f" at node '{self.node}'" if self.node is not None else ""
        return f"Singular conductance matrix{node_str}: {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Singular Matrix Encountered",
            details=self.details,
            suggestion="This is usually caused by a node with no resistive path to the reference node (for example a current source with no resistor). Add a resistor across the node.",
            context={'node': self.node}
        )
