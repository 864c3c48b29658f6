# src/dcsim_core/reporting.py
"""
Renders a `SolveResult` as human-readable text.

The formatter sits outside the solver: it only reads the result object, so the
layout can change without touching the nodal analysis.
"""

import logging
import math

from .components.base_enums import ElementKind
from .simulation.results import SolveResult
from .units import Quantity

logger = logging.getLogger(__name__)


class ResultsFormatter:
    """
    Formats node voltages and element currents of a solved circuit.
    """

    def __init__(self, result: SolveResult, precision: int = 4):
        self.result = result
        self.precision = precision

    def describe(self) -> str:
        lines = [f"DC Simulation Results for '{self.result.circuit_name}':"]
        lines.extend(self._format_node_voltages())
        lines.append("")
        lines.extend(self._format_element_currents())
        return "\n".join(lines) + "\n"

    def _format_node_voltages(self):
        lines = ["Node Voltages:"]
        if not self.result.node_names:
            return lines + ["  No node voltage data."]
        lines.append(f"  Node {self.result.reference_node} (reference): {self._format_value(0.0, 'volt')}")
        for name, voltage in zip(self.result.node_names, self.result.node_voltages):
            lines.append(f"  Node {name}: {self._format_value(float(voltage), 'volt')}")
        return lines

    def _format_element_currents(self):
        lines = ["Element Currents:"]
        if not self.result.element_currents:
            return lines + ["  No element current data."]
        for name, current in self.result.element_currents.items():
            kind = self.result.element_kinds[name]
            note = ""
            if kind in (ElementKind.CAPACITOR, ElementKind.INDUCTOR):
                note = " (not characterised in DC steady state)"
            lines.append(f"  {name} [{kind.value}]: {self._format_value(current, 'ampere')}{note}")
        return lines

    def _format_value(self, value: float, unit: str) -> str:
        if not math.isfinite(value):
            return "N/A"
        if value == 0:
            return f"{Quantity(0.0, unit):~P}"
        compact = Quantity(value, unit).to_compact()
        return f"{compact:.{self.precision}g~P}"


def format_results(result: SolveResult) -> str:
    """Shortcut for `ResultsFormatter(result).describe()`."""
    return ResultsFormatter(result).describe()
