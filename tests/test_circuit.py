# tests/test_circuit.py
import pytest

from dcsim_core import Circuit, Resistor, Capacitor, CurrentSource, VoltageSource, ElementKind


class TestCircuitConstruction:

    def test_insertion_order_is_preserved(self):
        circuit = Circuit()
        circuit.add_element(CurrentSource(1.0, name="I1"))
        circuit.add_element(Resistor(10.0, name="R2"))
        circuit.add_element(Resistor(20.0, name="R1"))
        assert [e.name for e in circuit.elements] == ["I1", "R2", "R1"]

    def test_unnamed_elements_get_designators(self):
        circuit = Circuit()
        r_a = circuit.add_element(Resistor(10.0))
        r_b = circuit.add_element(Resistor(20.0))
        c = circuit.add_element(Capacitor(1e-6))
        i = circuit.add_element(CurrentSource(1.0))
        v = circuit.add_element(VoltageSource(1.0))
        assert [r_a.name, r_b.name, c.name, i.name, v.name] == ["R1", "R2", "C1", "I1", "V1"]

    def test_generated_name_skips_taken_names(self):
        circuit = Circuit()
        circuit.add_element(Resistor(10.0, name="R2"))
        # Second resistor: counter says 2, which is taken.
        generated = circuit.add_element(Resistor(20.0))
        assert generated.name == "R3"

    def test_duplicate_names_are_rejected(self):
        circuit = Circuit()
        circuit.add_element(Resistor(10.0, name="R1"))
        with pytest.raises(ValueError, match="already exists"):
            circuit.add_element(Resistor(20.0, name="R1"))

    def test_rejected_element_does_not_consume_a_designator(self):
        circuit = Circuit()
        circuit.add_element(Resistor(10.0, name="R1"))
        with pytest.raises(ValueError):
            circuit.add_element(Resistor(20.0, name="R1"))
        assert circuit.add_element(Resistor(30.0)).name == "R2"
        assert len(circuit) == 2

    def test_only_elements_can_be_added(self):
        with pytest.raises(TypeError):
            Circuit().add_element(("Resistor", 10.0))

    def test_lookup_by_name(self, single_resistor_circuit):
        assert single_resistor_circuit["R1"].kind is ElementKind.RESISTOR
        with pytest.raises(KeyError):
            single_resistor_circuit["missing"]

    def test_elements_property_is_a_copy(self, single_resistor_circuit):
        elements = single_resistor_circuit.elements
        elements.clear()
        assert len(single_resistor_circuit) == 2

    def test_stored_element_is_unchanged_when_named(self):
        original = Resistor(10.0, name="Rx")
        circuit = Circuit(elements=[original])
        assert circuit["Rx"] is original
