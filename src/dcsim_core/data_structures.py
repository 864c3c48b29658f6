# src/dcsim_core/data_structures.py
# Required for forward references in type hints (e.g., 'SolveResult')
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterator, List, Optional, TYPE_CHECKING

from .components.base_enums import ElementKind
from .components.elements import Element

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from .simulation.results import SolveResult


class Circuit:
    """
    An ordered collection of circuit elements.

    The circuit owns its elements: `add_element` stores the (possibly renamed)
    element and callers never hold a reference that could outlive or alter it.
    Insertion order is preserved and used for reporting; it never affects the
    computed voltages. Nodes are not stored here, they are derived from the
    element terminals on every `solve()`.
    """

    def __init__(self, name: str = "circuit", elements: Optional[List[Element]] = None):
        self.name: str = name
        self._elements: List[Element] = []
        self._names: Dict[str, Element] = {}
        self._kind_counters: Dict[ElementKind, int] = {kind: 0 for kind in ElementKind}
        for element in elements or []:
            self.add_element(element)

    @property
    def elements(self) -> List[Element]:
        """A copy of the element list, in insertion order."""
        return list(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(list(self._elements))

    def __getitem__(self, name: str) -> Element:
        if name not in self._names:
            raise KeyError(f"Element '{name}' not present in circuit '{self.name}'.")
        return self._names[name]

    def add_element(self, element: Element) -> Element:
        """
        Adds an element and returns the stored instance. Unnamed elements receive a
        reference designator built from their kind ('R1', 'C2', ...).

        Raises:
            TypeError: If `element` is not an `Element`.
            ValueError: If an element with the same name already exists.
        """
        if not isinstance(element, Element):
            raise TypeError(f"Expected an Element, got {type(element).__name__}.")

        index = self._kind_counters[element.kind] + 1
        if element.name is None:
            element = replace(element, name=self._next_free_name(element.kind, index))

        if element.name in self._names:
            raise ValueError(f"Element '{element.name}' already exists in circuit '{self.name}'.")

        self._kind_counters[element.kind] = index
        self._elements.append(element)
        self._names[element.name] = element
        logger.debug(f"Added {element} to circuit '{self.name}'.")
        return element

    def _next_free_name(self, kind: ElementKind, index: int) -> str:
        while f"{kind.prefix}{index}" in self._names:
            index += 1
        return f"{kind.prefix}{index}"

    def solve(self) -> SolveResult:
        """
        Runs a DC nodal analysis over the current element list.

        Raises:
            UnsupportedTopologyError: The elements need more than one independent node.
            NodalInputError: There is no node to solve for.
            SingularMatrixError: The conductance matrix cannot be factorised.
            DivideByZeroError: A resistor has zero resistance.
        """
        from .simulation.engine import NodalAnalyzer

        return NodalAnalyzer(self).analyze()

    def __repr__(self) -> str:
        return f"Circuit(name='{self.name}', elements={len(self._elements)})"
