# src/dcsim_core/__init__.py
import logging
from .log_config import setup_logging

setup_logging(logging.WARNING)
logger = logging.getLogger(__name__)
logger.debug("DCSim Core package initialized.")

from .units import ureg, pint, Quantity
from .constants import REFERENCE_NODE, DEFAULT_NODE
from .components import (
    ElementKind, Element, Resistor, Capacitor, Inductor, VoltageSource, CurrentSource,
    ComponentError, DivideByZeroError,
)
from .data_structures import Circuit
from .simulation import (
    NodalAssembler, NodalAnalyzer, SolveResult, solve_circuit,
    NodalInputError, UnsupportedTopologyError, SingularMatrixError,
)
from .parser import NetlistParser, ParsingError, SchemaValidationError
from .circuit_builder import CircuitBuilder, load_circuit
from .reporting import ResultsFormatter, format_results
from .errors import DCSimError, CircuitBuildError, SimulationRunError, DiagnosableError

__all__ = [
    # Units
    "ureg", "pint", "Quantity",
    # Topology constants
    "REFERENCE_NODE", "DEFAULT_NODE",
    # Elements
    "ElementKind", "Element",
    "Resistor", "Capacitor", "Inductor", "VoltageSource", "CurrentSource",
    # Data Structures
    "Circuit",
    # Solver
    "NodalAssembler", "NodalAnalyzer", "SolveResult", "solve_circuit",
    # Netlists
    "NetlistParser", "CircuitBuilder", "load_circuit",
    # Reporting
    "ResultsFormatter", "format_results",
    # Errors
    "ComponentError", "DivideByZeroError",
    "NodalInputError", "UnsupportedTopologyError", "SingularMatrixError",
    "ParsingError", "SchemaValidationError",
    "DiagnosableError", "DCSimError", "CircuitBuildError", "SimulationRunError",
]
