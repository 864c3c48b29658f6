# src/dcsim_core/circuit_builder.py

"""
Defines the CircuitBuilder, which turns a parsed netlist IR into a `Circuit`.

The builder is the gatekeeper for build-time errors: any diagnosable failure raised
while parsing a file or constructing its elements is re-raised as a single
`CircuitBuildError` whose message is the full diagnostic report.
"""

import logging
from pathlib import Path
from typing import Tuple, Union

from .components.base_enums import ElementKind
from .components.elements import Element
from .constants import REFERENCE_NODE
from .data_structures import Circuit
from .parser.parser import NetlistParser
from .parser.raw_data import ParsedCircuit, ParsedElementData
from .errors import CircuitBuildError, DiagnosableError, format_diagnostic_report


logger = logging.getLogger(__name__)


class CircuitBuilder:
    """
    Synthesizes a simulation-ready `Circuit` from a `ParsedCircuit`.
    """

    def build(self, parsed: ParsedCircuit) -> Circuit:
        logger.info(f"--- Building circuit '{parsed.circuit_name}' from {parsed.source_yaml_path} ---")
        try:
            circuit = Circuit(name=parsed.circuit_name)
            for element_data in parsed.elements:
                circuit.add_element(self._build_element(element_data, parsed.ground_net_name))
            logger.info(f"--- Circuit '{circuit.name}' built with {len(circuit)} elements. ---")
            return circuit

        except DiagnosableError as e:
            raise CircuitBuildError(e.get_diagnostic_report()) from e

        except (TypeError, ValueError) as e:
            report = format_diagnostic_report(
                error_type=f"Invalid Netlist Content ({type(e).__name__})",
                details=str(e),
                suggestion="Check the element definitions in the netlist for duplicate ids and valid values.",
                context={'source_file': parsed.source_yaml_path}
            )
            raise CircuitBuildError(report) from e

    def _build_element(self, data: ParsedElementData, ground_net_name: str) -> Element:
        return Element(
            kind=ElementKind(data.element_type),
            value=data.raw_value,
            name=data.instance_id,
            ports=self._unify_ground(data.ports, ground_net_name),
        )

    @staticmethod
    def _unify_ground(ports: Tuple[str, str], ground_net_name: str) -> Tuple[str, str]:
        """Maps the netlist's ground net onto the solver's reference node."""
        return tuple(REFERENCE_NODE if net == ground_net_name else net for net in ports)


def load_circuit(netlist_path: Union[str, Path]) -> Circuit:
    """
    Parses and builds the circuit described by a YAML netlist.

    Raises:
        CircuitBuildError: If the file cannot be parsed or an element is invalid.
    """
    try:
        parsed = NetlistParser().parse(netlist_path)
    except DiagnosableError as e:
        logger.error(f"Failed to parse netlist '{netlist_path}': {e}")
        raise CircuitBuildError(e.get_diagnostic_report()) from e
    return CircuitBuilder().build(parsed)
