# src/dcsim_core/simulation/results.py
"""
Defines the immutable result contract returned by a DC nodal solve.

`SolveResult` replaces loose tuples and dictionaries between the solver and its
consumers (the reporter, the CLI, tests). It is frozen so a result cannot be
altered after it has been produced, and it carries copies of the assembled system
so a consumer never needs the analyzer that created it.
"""
from dataclasses import dataclass
from typing import Dict, List

import numpy as np

from ..components.base_enums import ElementKind
from ..constants import REFERENCE_NODE
from ..units import Quantity


@dataclass(frozen=True)
class SolveResult:
    """
    The result of solving one circuit.

    Attributes:
        circuit_name: Name of the solved circuit.
        node_names: Non-reference nodes, in the order of `node_voltages`.
        node_voltages: Voltage of each node relative to the reference node (V).
        element_currents: Current of every element (A), in circuit insertion order.
                          Resistor currents flow from the node to the reference;
                          source currents are delivered into the node.
        element_kinds: Kind of every element, keyed like `element_currents`.
        conductance_matrix: The assembled conductance matrix G (S).
        source_vector: The assembled source vector I (A).
        reference_node: Name of the reference node.
    """
    circuit_name: str
    node_names: List[str]
    node_voltages: np.ndarray
    element_currents: Dict[str, float]
    element_kinds: Dict[str, ElementKind]
    conductance_matrix: np.ndarray
    source_vector: np.ndarray
    reference_node: str = REFERENCE_NODE

    def node_voltage(self, node: str) -> float:
        if node == self.reference_node:
            return 0.0
        if node not in self.node_names:
            raise KeyError(f"Unknown node '{node}'.")
        return float(self.node_voltages[self.node_names.index(node)])

    def current(self, element_name: str) -> float:
        if element_name not in self.element_currents:
            raise KeyError(f"Element '{element_name}' not present in the result.")
        return self.element_currents[element_name]

    @property
    def resistor_currents(self) -> Dict[str, float]:
        """Currents of the resistive elements only, in circuit insertion order."""
        return {
            name: current for name, current in self.element_currents.items()
            if self.element_kinds[name] is ElementKind.RESISTOR
        }

    def as_quantities(self) -> Dict[str, Dict[str, Quantity]]:
        """Node voltages and element currents as pint Quantities."""
        return {
            "node_voltages": {
                name: Quantity(float(v), "volt") for name, v in zip(self.node_names, self.node_voltages)
            },
            "element_currents": {
                name: Quantity(i, "ampere") for name, i in self.element_currents.items()
            },
        }
