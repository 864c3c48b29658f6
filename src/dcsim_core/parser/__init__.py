# src/dcsim_core/parser/__init__.py
from .raw_data import ParsedCircuit, ParsedElementData
from .parser import NetlistParser
from .exceptions import ParsingError, SchemaValidationError

__all__ = [
    # IR Data Structures
    "ParsedCircuit",
    "ParsedElementData",
    # Parser and Exceptions
    "NetlistParser",
    "ParsingError",
    "SchemaValidationError",
]
