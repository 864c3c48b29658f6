# src/dcsim_core/simulation/mna.py

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from ..components.base_enums import ElementKind
from ..components.elements import Element
from ..constants import MAX_INDEPENDENT_NODES, REFERENCE_NODE
from ..data_structures import Circuit
from .exceptions import NodalInputError, UnsupportedTopologyError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NodalSystem:
    """
    The assembled linear system `G * V = I` for one solve.

    Attributes:
        node_names: Non-reference nodes, in first-seen element order.
        node_index: Mapping node name -> row/column index.
        conductance: The dense, symmetric conductance matrix G (siemens).
        sources: The source vector I (amperes injected into each node).
        fixed_voltages: Node index -> voltage for nodes held by a voltage source.
        voltage_source_nodes: Voltage-source name -> the node index it drives, or
                              None when it drives no candidate node.
    """
    node_names: List[str]
    node_index: Dict[str, int]
    conductance: np.ndarray
    sources: np.ndarray
    fixed_voltages: Dict[int, float]
    voltage_source_nodes: Dict[str, Optional[int]]

    @property
    def size(self) -> int:
        return len(self.node_names)

    @property
    def unknown_indices(self) -> List[int]:
        return [i for i in range(self.size) if i not in self.fixed_voltages]

    @property
    def fixed_indices(self) -> List[int]:
        return sorted(self.fixed_voltages)


class NodalAssembler:
    """
    Builds the nodal system for a circuit from its element list.

    The assembler keeps no state between calls: every `assemble()` enumerates the
    nodes again and allocates a fresh matrix and vector.

    It is responsible for:
    1.  Enumerating the candidate nodes from every element that is not a voltage
        source, and rejecting topologies the solver cannot represent.
    2.  Stamping each resistor's conductance onto the diagonal of G.
    3.  Accumulating each current source into I.
    4.  Recording which nodes are held at a fixed voltage by a voltage source.
    """
    def __init__(self, circuit: Circuit, reference_node: str = REFERENCE_NODE):
        if not isinstance(circuit, Circuit):
            raise TypeError(f"NodalAssembler expects a Circuit, got {type(circuit).__name__}.")
        self.circuit: Circuit = circuit
        self.reference_node: str = reference_node

    def assemble(self) -> NodalSystem:
        elements = self.circuit.elements
        node_names = self._enumerate_nodes(elements)
        node_index = {name: idx for idx, name in enumerate(node_names)}
        size = len(node_names)

        G = np.zeros((size, size), dtype=float)
        I = np.zeros(size, dtype=float)

        for element in elements:
            if element.kind is ElementKind.RESISTOR:
                idx = node_index[element.node]
                G[idx, idx] += element.conductance()
            elif element.kind is ElementKind.CURRENT_SOURCE:
                I[node_index[element.node]] += element.value

        fixed_voltages, voltage_source_nodes = self._collect_fixed_voltages(elements, node_index)

        logger.debug(
            f"Assembled nodal system for '{self.circuit.name}': nodes={node_names}, "
            f"G={G.tolist()}, I={I.tolist()}, fixed={fixed_voltages}"
        )
        return NodalSystem(
            node_names=node_names,
            node_index=node_index,
            conductance=G,
            sources=I,
            fixed_voltages=fixed_voltages,
            voltage_source_nodes=voltage_source_nodes,
        )

    def _check_terminals(self, element: Element) -> None:
        if element.node == element.reference:
            raise UnsupportedTopologyError(
                circuit_name=self.circuit.name,
                details=f"Element '{element.label}' has both terminals on net '{element.node}'.",
                node=element.node,
            )
        if element.reference != self.reference_node:
            raise UnsupportedTopologyError(
                circuit_name=self.circuit.name,
                details=(
                    f"Element '{element.label}' connects '{element.node}' to '{element.reference}' "
                    f"instead of the reference node '{self.reference_node}'."
                ),
                node=element.reference,
            )

    def _enumerate_nodes(self, elements: List[Element]) -> List[str]:
        """Collects the non-reference nodes of every non-voltage-source element."""
        node_names: List[str] = []
        for element in elements:
            self._check_terminals(element)
            if element.kind is ElementKind.VOLTAGE_SOURCE:
                continue
            if element.node not in node_names:
                node_names.append(element.node)

        if not node_names:
            raise NodalInputError(
                circuit_name=self.circuit.name,
                details="The circuit has no node to solve: it contains no resistor, capacitor, inductor or current source.",
            )
        if len(node_names) > MAX_INDEPENDENT_NODES:
            raise UnsupportedTopologyError(
                circuit_name=self.circuit.name,
                details=(
                    f"The elements require {len(node_names)} independent nodes ({', '.join(node_names)}), "
                    f"but at most {MAX_INDEPENDENT_NODES} is supported."
                ),
                node=node_names[MAX_INDEPENDENT_NODES],
            )
        return node_names

    def _collect_fixed_voltages(self, elements: List[Element], node_index: Dict[str, int]):
        fixed_voltages: Dict[int, float] = {}
        voltage_source_nodes: Dict[str, Optional[int]] = {}
        for element in elements:
            if element.kind is not ElementKind.VOLTAGE_SOURCE:
                continue
            idx = node_index.get(element.node)
            voltage_source_nodes[element.name] = idx
            if idx is None:
                logger.warning(f"Voltage source '{element.label}' drives net '{element.node}', which has no other element.")
                continue
            voltage = element.voltage_given(0.0)
            if idx in fixed_voltages and fixed_voltages[idx] != voltage:
                raise UnsupportedTopologyError(
                    circuit_name=self.circuit.name,
                    details=(
                        f"Voltage source '{element.label}' tries to hold node '{element.node}' at {voltage} V, "
                        f"but another source already holds it at {fixed_voltages[idx]} V."
                    ),
                    node=element.node,
                )
            fixed_voltages[idx] = voltage
        return fixed_voltages, voltage_source_nodes
