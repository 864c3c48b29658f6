# src/dcsim_core/components/base_enums.py
from enum import Enum


class ElementKind(Enum):
    """
    The closed set of element kinds understood by the nodal solver. The value of
    each member is the type string used in YAML netlists.
    """
    RESISTOR = "Resistor"
    CAPACITOR = "Capacitor"
    INDUCTOR = "Inductor"
    VOLTAGE_SOURCE = "VoltageSource"
    CURRENT_SOURCE = "CurrentSource"

    @property
    def unit(self) -> str:
        """SI unit of the element's nominal value."""
        return _KIND_UNITS[self]

    @property
    def prefix(self) -> str:
        """Reference-designator prefix used when auto-naming elements."""
        return _KIND_PREFIXES[self]


_KIND_UNITS = {
    ElementKind.RESISTOR: "ohm",
    ElementKind.CAPACITOR: "farad",
    ElementKind.INDUCTOR: "henry",
    ElementKind.VOLTAGE_SOURCE: "volt",
    ElementKind.CURRENT_SOURCE: "ampere",
}

_KIND_PREFIXES = {
    ElementKind.RESISTOR: "R",
    ElementKind.CAPACITOR: "C",
    ElementKind.INDUCTOR: "L",
    ElementKind.VOLTAGE_SOURCE: "V",
    ElementKind.CURRENT_SOURCE: "I",
}
