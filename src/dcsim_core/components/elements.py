# src/dcsim_core/components/elements.py
"""
This module provides the single, immutable `Element` type used for every circuit
component, together with the per-kind electrical relations of the resistive DC
steady-state model.

Each element is a tagged value: the `ElementKind` selects the behaviour of
`voltage_given` and `current_given`, which are dispatched over the tag rather than
through a class hierarchy. The reactive kinds (capacitor, inductor) return exactly
zero from both relations; in DC steady state they cannot be characterised without a
time derivative, and the zero must not be read as "no component present".
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np
import pint

from ..constants import DEFAULT_NODE, REFERENCE_NODE
from ..units import ureg, Quantity
from .base_enums import ElementKind
from .exceptions import ComponentError, DivideByZeroError


logger = logging.getLogger(__name__)

ValueLike = Union[float, int, str, Quantity]


def _parse_quantity_string(value: str, kind: ElementKind, label: str) -> Quantity:
    """
    Parses a quantity string such as '2.2 kohm'. Any failure of pint's expression
    parser (tokenizer errors, dangling operators, division by zero) becomes a
    `ComponentError`.
    """
    if "[" in value or "]" in value:
        raise ComponentError(
            element_name=label,
            details=f"{kind.value} value {value!r} must be a single number with an optional unit."
        )
    try:
        return ureg.Quantity(value)
    except Exception as e:
        raise ComponentError(
            element_name=label,
            details=f"Could not parse {value!r} as a quantity: {type(e).__name__}: {e}"
        ) from e


def _to_si_magnitude(value: ValueLike, kind: ElementKind, label: str) -> float:
    """
    Converts a user-supplied value into a real, finite float in the SI unit of
    `kind`. Bare numbers are taken to already be in SI units.
    """
    if isinstance(value, str):
        value = _parse_quantity_string(value, kind, label)

    try:
        if isinstance(value, Quantity):
            if value.dimensionless and not value.unitless:
                raise pint.DimensionalityError(value.units, ureg.Unit(kind.unit))
            if not value.dimensionless:
                value = value.to(kind.unit)
            magnitude = value.magnitude
        else:
            magnitude = value

        if np.ndim(magnitude) != 0:
            raise ComponentError(
                element_name=label,
                details=f"{kind.value} value must be a scalar, but received {magnitude!r}."
            )

        if np.iscomplexobj(magnitude):
            if np.imag(magnitude) != 0:
                raise ComponentError(
                    element_name=label,
                    details=f"{kind.value} value must be real, but received {magnitude}."
                )
            magnitude = np.real(magnitude)

        magnitude = float(magnitude)
    except ComponentError:
        raise
    except (pint.DimensionalityError, pint.UndefinedUnitError) as e:
        raise ComponentError(
            element_name=label,
            details=f"{kind.value} value must be expressed in '{kind.unit}': {e}"
        ) from e
    except (TypeError, ValueError, AttributeError) as e:
        raise ComponentError(
            element_name=label,
            details=f"Could not interpret {value!r} as a {kind.value} value: {e}"
        ) from e

    if not math.isfinite(magnitude):
        raise ComponentError(
            element_name=label,
            details=f"{kind.value} value must be finite, got {magnitude}."
        )
    return magnitude


@dataclass(frozen=True)
class Element:
    """
    One circuit component: a kind, a nominal SI value and the pair of nets it
    connects. `ports[0]` is the node side and `ports[1]` the reference side; a
    current source injects its value into `ports[0]` and a voltage source holds
    `ports[0]` at `value` volts above `ports[1]`.
    """
    kind: ElementKind
    value: float
    name: Optional[str] = None
    ports: Tuple[str, str] = field(default=(DEFAULT_NODE, REFERENCE_NODE))

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ElementKind):
            raise TypeError(f"Element kind must be an ElementKind, got {self.kind!r}.")
        label = self.name or f"<unnamed {self.kind.value}>"
        object.__setattr__(self, "value", _to_si_magnitude(self.value, self.kind, label))

        ports = () if isinstance(self.ports, str) else tuple(self.ports or ())
        if len(ports) != 2 or not all(isinstance(p, str) and p for p in ports):
            raise ComponentError(
                element_name=label,
                details=f"An element needs exactly two non-empty net names, got {self.ports!r}."
            )
        object.__setattr__(self, "ports", ports)

    @property
    def label(self) -> str:
        return self.name or f"<unnamed {self.kind.value}>"

    @property
    def node(self) -> str:
        return self.ports[0]

    @property
    def reference(self) -> str:
        return self.ports[1]

    @property
    def quantity(self) -> Quantity:
        """The nominal value as a pint Quantity in the kind's SI unit."""
        return Quantity(self.value, self.kind.unit)

    def voltage_given(self, current: float) -> float:
        """Terminal voltage implied by `current` flowing through the element."""
        return _VOLTAGE_RELATIONS[self.kind](self, current)

    def current_given(self, voltage: float) -> float:
        """Branch current implied by `voltage` across the element."""
        return _CURRENT_RELATIONS[self.kind](self, voltage)

    def conductance(self) -> float:
        """Contribution of this element to the diagonal of the conductance matrix."""
        if self.kind is not ElementKind.RESISTOR:
            return 0.0
        if self.value == 0:
            raise DivideByZeroError(
                element_name=self.label,
                details="Cannot compute the conductance of a resistor with zero resistance."
            )
        return 1.0 / self.value

    def __str__(self) -> str:
        return f"{self.kind.value}('{self.label}', {self.quantity:~P})"


# --- Per-kind electrical relations ---

def _resistor_current(element: Element, voltage: float) -> float:
    if element.value == 0:
        raise DivideByZeroError(
            element_name=element.label,
            details=f"Cannot derive the current through a zero-ohm resistor at V={voltage!r}."
        )
    return voltage / element.value


def _zero(element: Element, _: float) -> float:
    return 0.0


def _source_value(element: Element, _: float) -> float:
    return element.value


_VOLTAGE_RELATIONS: Dict[ElementKind, Callable[[Element, float], float]] = {
    ElementKind.RESISTOR: lambda element, current: current * element.value,
    ElementKind.CAPACITOR: _zero,
    ElementKind.INDUCTOR: _zero,
    ElementKind.VOLTAGE_SOURCE: _source_value,
    ElementKind.CURRENT_SOURCE: _zero,
}

_CURRENT_RELATIONS: Dict[ElementKind, Callable[[Element, float], float]] = {
    ElementKind.RESISTOR: _resistor_current,
    ElementKind.CAPACITOR: _zero,
    ElementKind.INDUCTOR: _zero,
    ElementKind.VOLTAGE_SOURCE: _zero,
    ElementKind.CURRENT_SOURCE: _source_value,
}


# --- Convenience constructors ---

def Resistor(value: ValueLike, name: Optional[str] = None, ports: Tuple[str, str] = (DEFAULT_NODE, REFERENCE_NODE)) -> Element:
    return Element(ElementKind.RESISTOR, value, name, ports)


def Capacitor(value: ValueLike, name: Optional[str] = None, ports: Tuple[str, str] = (DEFAULT_NODE, REFERENCE_NODE)) -> Element:
    return Element(ElementKind.CAPACITOR, value, name, ports)


def Inductor(value: ValueLike, name: Optional[str] = None, ports: Tuple[str, str] = (DEFAULT_NODE, REFERENCE_NODE)) -> Element:
    return Element(ElementKind.INDUCTOR, value, name, ports)


def VoltageSource(value: ValueLike, name: Optional[str] = None, ports: Tuple[str, str] = (DEFAULT_NODE, REFERENCE_NODE)) -> Element:
    return Element(ElementKind.VOLTAGE_SOURCE, value, name, ports)


def CurrentSource(value: ValueLike, name: Optional[str] = None, ports: Tuple[str, str] = (DEFAULT_NODE, REFERENCE_NODE)) -> Element:
    return Element(ElementKind.CURRENT_SOURCE, value, name, ports)
