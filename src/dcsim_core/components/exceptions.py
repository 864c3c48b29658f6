# src/dcsim_core/components/exceptions.py
"""
Defines the diagnosable exceptions raised by circuit elements.
"""
from dataclasses import dataclass

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class ComponentError(DiagnosableError):
    """
    Raised when an element is given a value it cannot represent, such as a
    quantity with the wrong dimension or a complex magnitude.
    """
    element_name: str
    details: str

    def __str__(self):
        return f"Element '{self.element_name}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Invalid Element",
            details=self.details,
            suggestion="Check the element's value: it must be a finite, real number in the element's SI unit (ohm, farad, henry, volt or ampere) or a quantity convertible to it.",
            context={'element': self.element_name}
        )


@dataclass()
class DivideByZeroError(ComponentError, ZeroDivisionError):
    """
    Raised when a zero-ohm resistor has to be turned into a conductance or asked
    for its current. Catchable both as a `ComponentError` and as the builtin
    `ZeroDivisionError`.
    """

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Division By Zero",
            details=self.details,
            suggestion="A resistor of 0 ohm is an ideal short, which the nodal solver cannot express as a conductance. Use a small, non-zero resistance instead.",
            context={'element': self.element_name}
        )
