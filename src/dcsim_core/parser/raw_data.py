# src/dcsim_core/parser/raw_data.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

# These frozen dataclasses are the Intermediate Representation (IR) passed from the
# NetlistParser to the CircuitBuilder. They hold validated, but not yet interpreted,
# netlist data.

@dataclass(frozen=True)
class ParsedElementData:
    """IR for one element entry of a netlist."""
    instance_id: str
    element_type: str
    raw_value: Union[str, int, float]
    ports: Tuple[str, str]
    source_yaml_path: Path

@dataclass(frozen=True)
class ParsedCircuit:
    """IR for a whole netlist file."""
    circuit_name: str
    ground_net_name: str
    source_yaml_path: Path
    elements: List[ParsedElementData]
