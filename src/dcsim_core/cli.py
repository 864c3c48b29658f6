# src/dcsim_core/cli.py
"""
Command-line entry point: solves a YAML netlist, or the built-in demonstration
circuit when no netlist is given, and prints the report.
"""
import argparse
import logging
import sys
from typing import List, Optional

from .components.elements import CurrentSource, Resistor
from .circuit_builder import load_circuit
from .data_structures import Circuit
from .errors import DCSimError
from .log_config import setup_logging
from .reporting import format_results
from .simulation.execution import solve_circuit

logger = logging.getLogger(__name__)


def build_demo_circuit() -> Circuit:
    """A 100 ohm resistor fed by a 0.1 A current source: V = 10 V."""
    circuit = Circuit(name="demo")
    circuit.add_element(Resistor("100 ohm", name="R1"))
    circuit.add_element(CurrentSource("0.1 A", name="I1"))
    return circuit


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dcsim",
        description="Steady-state DC nodal analysis of a single-node circuit.",
    )
    parser.add_argument("netlist", nargs="?", help="YAML netlist to solve (default: built-in demo circuit)")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    try:
        setup_logging(args.log_level)
    except ValueError as e:
        print(f"dcsim: {e}", file=sys.stderr)
        return 2

    try:
        circuit = load_circuit(args.netlist) if args.netlist else build_demo_circuit()
        result = solve_circuit(circuit)
    except DCSimError as e:
        print(str(e), file=sys.stderr)
        return 1

    print(format_results(result), end="")
    return 0
