# src/dcsim_core/errors.py
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# --- User-Facing Exception Hierarchy ---

class DCSimError(Exception):
    """Base class for all user-facing errors raised by the DCSim Core facades."""
    pass

class CircuitBuildError(DCSimError):
    """
    Raised when a circuit cannot be built from a netlist, from file loading through
    element construction. The message is a pre-formatted diagnostic report.
    """
    pass

class SimulationRunError(DCSimError):
    """
    Raised by `solve_circuit` when the nodal solve fails, whether through an
    unsupported topology, a singular conductance matrix, or an invalid element.
    The message is a pre-formatted diagnostic report.
    """
    pass


# --- Diagnostic Protocol & Base Exception ---

@runtime_checkable
class Diagnosable(Protocol):
    """
    A protocol for exceptions that can render their own diagnostic report.
    """
    def get_diagnostic_report(self) -> str:
        """Generates a complete, user-friendly, multi-line report string."""
        ...

class DiagnosableError(Exception, Diagnosable):
    """
    Concrete base class for every internal, reportable exception.

    It is a real `Exception` so it can be caught in `except` clauses; every
    subclass provides its own `get_diagnostic_report`.
    """
    @abstractmethod
    def get_diagnostic_report(self) -> str:
        """Subclasses MUST implement this."""
        raise NotImplementedError


# --- Stateless Formatting Utility ---

def format_diagnostic_report(
    error_type: str,
    details: str,
    suggestion: str,
    context: Dict[str, Any]
) -> str:
    """
    Formats the multi-line report string shared by all diagnosable errors.

    Args:
        error_type: The high-level category of the error (e.g., "Singular Matrix").
        details: A detailed, potentially multi-line description of the problem.
        suggestion: Actionable advice for the user to resolve the issue.
        context: Optional contextual information. Recognised keys are 'element',
                 'node', 'source_file' and 'user_input'.

    Returns:
        The formatted report, ready for display.
    """
    lines = [
        "\n",
        "================ DCSim Core: Actionable Diagnostic Report ================",
        f"Error Type:     {error_type}",
    ]
    if element := context.get('element'):
        lines.append(f"Element:        {element}")
    if node := context.get('node'):
        lines.append(f"Node:           {node}")
    if source_file := context.get('source_file'):
        lines.append(f"Source File:    {source_file}")
    if user_input := context.get('user_input'):
        lines.append(f"User Input:     '{user_input}'")

    lines.append("\nDetails:")
    for line in details.splitlines():
        lines.append(f"  {line}")

    if suggestion:
        lines.append("\nSuggestion:")
        for line in suggestion.splitlines():
            lines.append(f"  {line}")

    lines.append("========================================================================")
    return "\n".join(lines)
