# src/dcsim_core/simulation/engine.py

"""
Defines the `NodalAnalyzer`, the service that turns a circuit into a `SolveResult`.

The analyzer holds a reference to the circuit it solves and nothing else: the nodal
system, the factorization and the derived currents are all local to one call of
`analyze()`, so solving the same circuit twice yields identical results.
"""
import logging
from typing import Dict

import numpy as np

from ..components.base_enums import ElementKind
from ..data_structures import Circuit
from .mna import NodalAssembler, NodalSystem
from .results import SolveResult
from .solver import factorize_conductance_matrix, solve_nodal_system


logger = logging.getLogger(__name__)


class NodalAnalyzer:
    """
    Runs the DC steady-state nodal analysis of a single circuit.
    """
    def __init__(self, circuit: Circuit):
        self.circuit: Circuit = circuit
        self.assembler = NodalAssembler(circuit)

    def analyze(self) -> SolveResult:
        system = self.assembler.assemble()
        V = self._solve_node_voltages(system)
        currents = self._derive_element_currents(system, V)

        logger.debug(f"Solved '{self.circuit.name}': V={V.tolist()}, currents={currents}")
        return SolveResult(
            circuit_name=self.circuit.name,
            node_names=list(system.node_names),
            node_voltages=V,
            element_currents=currents,
            element_kinds={element.name: element.kind for element in self.circuit.elements},
            conductance_matrix=system.conductance.copy(),
            source_vector=system.sources.copy(),
            reference_node=self.assembler.reference_node,
        )

    def _solve_node_voltages(self, system: NodalSystem) -> np.ndarray:
        """
        Solves for the unknown node voltages, with source-fixed nodes moved to the
        right-hand side: G_uu * V_u = I_u - G_uk * V_k.
        """
        V = np.zeros(system.size, dtype=float)
        known = system.fixed_indices
        unknown = system.unknown_indices
        for idx in known:
            V[idx] = system.fixed_voltages[idx]

        if not unknown:
            logger.debug("Every node is held by a voltage source; no linear solve needed.")
            return V

        G_uu = system.conductance[np.ix_(unknown, unknown)]
        rhs = system.sources[unknown]
        if known:
            rhs = rhs - system.conductance[np.ix_(unknown, known)] @ V[known]

        factorization = factorize_conductance_matrix(G_uu, [system.node_names[i] for i in unknown])
        V[unknown] = solve_nodal_system(factorization, rhs)
        return V

    def _derive_element_currents(self, system: NodalSystem, V: np.ndarray) -> Dict[str, float]:
        currents: Dict[str, float] = {}
        for element in self.circuit.elements:
            idx = system.node_index.get(element.node)
            if element.kind is ElementKind.VOLTAGE_SOURCE:
                # Filled in below once every other branch current is known.
                currents[element.name] = 0.0
            else:
                currents[element.name] = float(element.current_given(float(V[idx])))

        self._balance_voltage_source_currents(system, currents)
        return currents

    def _balance_voltage_source_currents(self, system: NodalSystem, currents: Dict[str, float]) -> None:
        """
        Assigns each voltage source the current it must deliver into its node for
        Kirchhoff's current law to hold there. Sources sharing a node split it evenly.
        """
        for idx in system.fixed_indices:
            node = system.node_names[idx]
            drivers = [name for name, i in system.voltage_source_nodes.items() if i == idx]
            leaving = 0.0
            for element in self.circuit.elements:
                if element.node != node:
                    continue
                if element.kind is ElementKind.CURRENT_SOURCE:
                    leaving -= currents[element.name]
                elif element.kind is not ElementKind.VOLTAGE_SOURCE:
                    leaving += currents[element.name]
            for name in drivers:
                currents[name] = leaving / len(drivers)
