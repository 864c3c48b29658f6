# tests/conftest.py
import pytest
from pathlib import Path

from dcsim_core import (
    Circuit, Resistor, Capacitor, Inductor, CurrentSource, VoltageSource,
)


# Common fixtures for hand-built circuits

@pytest.fixture
def single_resistor_circuit() -> Circuit:
    """Resistor(100 ohm) + CurrentSource(0.1 A): V = 10 V."""
    return Circuit(name="SingleResistor", elements=[
        Resistor(100.0, name="R1"),
        CurrentSource(0.1, name="I1"),
    ])


@pytest.fixture
def parallel_resistors_circuit() -> Circuit:
    """Two 50 ohm resistors in parallel fed by 1 A: V = 25 V."""
    return Circuit(name="ParallelResistors", elements=[
        Resistor(50.0, name="Ra"),
        Resistor(50.0, name="Rb"),
        CurrentSource(1.0, name="Is"),
    ])


@pytest.fixture
def reactive_circuit() -> Circuit:
    """The single-resistor circuit with a capacitor and an inductor added."""
    return Circuit(name="Reactive", elements=[
        Resistor(100.0, name="R1"),
        Capacitor("1 uF", name="C1"),
        CurrentSource(0.1, name="I1"),
        Inductor("10 mH", name="L1"),
    ])


# Helper to write a netlist into the pytest tmp_path
def write_netlist(tmp_path: Path, content: str, filename: str = "netlist.yaml") -> Path:
    path = tmp_path / filename
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def netlist_writer(tmp_path):
    def _write(content: str, filename: str = "netlist.yaml") -> Path:
        return write_netlist(tmp_path, content, filename)
    return _write
