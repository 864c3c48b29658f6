# src/dcsim_core/simulation/execution.py
"""
Provides the public facade for solving a circuit.

`Circuit.solve()` raises the low-level, diagnosable errors directly. `solve_circuit`
is the entry point for applications: it logs the run and turns any failure into a
single `SimulationRunError` whose message is the full diagnostic report, with the
original exception chained for debugging.
"""
import logging

from ..data_structures import Circuit
from ..errors import SimulationRunError, DiagnosableError, format_diagnostic_report
from .results import SolveResult

logger = logging.getLogger(__name__)


def solve_circuit(circuit: Circuit) -> SolveResult:
    """
    Solves `circuit` and returns its `SolveResult`.

    Raises:
        SimulationRunError: If the solve fails for any reason.
    """
    try:
        logger.info(f"--- Starting DC nodal solve for '{circuit.name}' ({len(circuit)} elements) ---")
        result = circuit.solve()
        logger.info(f"DC nodal solve for '{circuit.name}' successful.")
        return result

    except DiagnosableError as e:
        logger.error(f"A diagnosable error occurred during the solve: {e}")
        raise SimulationRunError(e.get_diagnostic_report()) from e

    except Exception as e:
        logger.critical(f"An unexpected internal error occurred during the solve: {e}", exc_info=True)
        report = format_diagnostic_report(
            error_type=f"An Unexpected Simulation Error Occurred ({type(e).__name__})",
            details=f"The solver encountered an unexpected internal error: {e}",
            suggestion="This may be a bug. Review the traceback and consider filing a bug report.",
            context={}
        )
        raise SimulationRunError(report) from e
