# src/dcsim_core/parser/exceptions.py
"""
Defines the diagnosable exceptions for netlist loading and schema validation.

`ParsingError` covers file-level and YAML syntax problems; `SchemaValidationError`
covers documents that load but do not match the netlist schema. Both derive from
`DiagnosableError` through `BaseParsingError`, so the CircuitBuilder can catch the
whole family with a single clause.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from ..errors import DiagnosableError, format_diagnostic_report


class BaseParsingError(DiagnosableError):
    """Common base class for all netlist parsing errors."""
    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Generic Parsing Error",
            details=str(self),
            suggestion="Please check the format and content of the YAML netlist file.",
            context={}
        )


@dataclass()
class ParsingError(BaseParsingError):
    """
    Raised when a netlist file is missing, unreadable, or not valid YAML, or when
    its root is not a mapping.
    """
    details: str
    file_path: Path

    def __str__(self):
        return f"Parsing error in file '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="YAML Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, has the correct read permissions, and contains valid YAML syntax.",
            context={'source_file': self.file_path}
        )


@dataclass()
class SchemaValidationError(BaseParsingError):
    """
    Raised when the YAML loads but does not conform to the netlist schema (missing
    keys, invalid identifiers, duplicate element ids, unknown element types).
    """
    errors: Dict[str, Any]
    file_path: Path

    def _error_lines(self, prefix: str) -> str:
        return "\n".join(
            f"  - {prefix} '{field}': {messages[0] if isinstance(messages, list) and messages else messages}"
            for field, messages in sorted(self.errors.items(), key=lambda item: str(item[0]))
        )

    def __str__(self):
        return (
            f"YAML schema validation failed for file '{self.file_path}':\n"
            + self._error_lines("In field")
        )

    def get_diagnostic_report(self) -> str:
        details = (
            "The structure of the YAML file does not conform to the netlist schema.\n"
            f"See details for {len(self.errors)} issue(s) below:\n\n{self._error_lines('Field')}"
        )
        return format_diagnostic_report(
            error_type="YAML Schema Validation Error",
            details=details,
            suggestion="Correct the listed fields. Element ids must be identifiers (letters, digits, underscores), unique, and each element needs a 'type' and a 'value'.",
            context={'source_file': self.file_path}
        )
