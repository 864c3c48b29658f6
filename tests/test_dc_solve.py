# tests/test_dc_solve.py
import pytest
import numpy as np

from dcsim_core import (
    Circuit, Resistor, Capacitor, Inductor, CurrentSource, VoltageSource,
    SingularMatrixError, DivideByZeroError, UnsupportedTopologyError, ElementKind,
)


class TestGoldenReferenceCircuits:

    def test_single_resistor_with_current_source(self, single_resistor_circuit):
        """
        R = 100 ohm, Is = 0.1 A.
        V = Is * R = 10 V, I_R = V / R = 0.1 A.
        """
        result = single_resistor_circuit.solve()
        assert result.node_names == ["n1"]
        np.testing.assert_allclose(result.node_voltage("n1"), 10.0, rtol=1e-12)
        np.testing.assert_allclose(result.current("R1"), 0.1, rtol=1e-12)
        np.testing.assert_allclose(result.current("I1"), 0.1, rtol=1e-12)

    def test_parallel_resistors_conserve_current(self, parallel_resistors_circuit):
        """
        Ra = Rb = 50 ohm, Is = 1 A.
        G = 1/50 + 1/50 = 0.04 S, V = 1 / 0.04 = 25 V, each branch 0.5 A.
        """
        result = parallel_resistors_circuit.solve()
        np.testing.assert_allclose(result.conductance_matrix, [[0.04]], rtol=1e-12)
        np.testing.assert_allclose(result.node_voltage("n1"), 25.0, rtol=1e-12)
        np.testing.assert_allclose(result.current("Ra"), 0.5, rtol=1e-12)
        np.testing.assert_allclose(result.current("Rb"), 0.5, rtol=1e-12)
        np.testing.assert_allclose(sum(result.resistor_currents.values()), 1.0, rtol=1e-12)

    @pytest.mark.parametrize("resistance, source_current", [
        (1.0, 1.0), (4.7e3, 2e-3), (0.5, -3.0), (1e6, 1e-9),
    ])
    def test_kirchhoff_consistency(self, resistance, source_current):
        circuit = Circuit(elements=[Resistor(resistance, name="R"), CurrentSource(source_current, name="I")])
        result = circuit.solve()
        np.testing.assert_allclose(result.node_voltage("n1"), source_current * resistance, rtol=1e-12)
        np.testing.assert_allclose(result.current("R"), source_current, rtol=1e-12)

    def test_reactive_elements_never_change_the_solution(self, single_resistor_circuit, reactive_circuit):
        plain = single_resistor_circuit.solve()
        reactive = reactive_circuit.solve()
        assert reactive.node_voltage("n1") == plain.node_voltage("n1")
        assert reactive.current("R1") == plain.current("R1")
        assert reactive.current("C1") == 0.0
        assert reactive.current("L1") == 0.0

    def test_reference_node_is_zero_volts(self, single_resistor_circuit):
        result = single_resistor_circuit.solve()
        assert result.node_voltage("gnd") == 0.0
        with pytest.raises(KeyError):
            result.node_voltage("n7")
        with pytest.raises(KeyError):
            result.current("R99")

    def test_resistor_currents_keep_insertion_order(self):
        circuit = Circuit(elements=[
            Resistor(20.0, name="Rz"), CurrentSource(1.0), Capacitor(1e-9), Resistor(20.0, name="Ra"),
        ])
        result = circuit.solve()
        assert list(result.resistor_currents) == ["Rz", "Ra"]
        assert list(result.element_currents) == ["Rz", "I1", "C1", "Ra"]
        assert result.element_kinds["C1"] is ElementKind.CAPACITOR


class TestVoltageSourceHandling:

    def test_voltage_source_fixes_the_node(self):
        circuit = Circuit(elements=[Resistor(100.0, name="R1"), VoltageSource(12.0, name="V1")])
        result = circuit.solve()
        np.testing.assert_allclose(result.node_voltage("n1"), 12.0)
        np.testing.assert_allclose(result.current("R1"), 0.12)
        # The source delivers exactly what the resistor draws.
        np.testing.assert_allclose(result.current("V1"), 0.12)

    def test_voltage_source_balances_current_sources(self):
        circuit = Circuit(elements=[
            Resistor(10.0, name="R1"), CurrentSource(0.3, name="I1"), VoltageSource(2.0, name="V1"),
        ])
        result = circuit.solve()
        np.testing.assert_allclose(result.current("R1"), 0.2)
        # 0.3 A comes in from I1, 0.2 A leaves through R1: V1 absorbs 0.1 A.
        np.testing.assert_allclose(result.current("V1"), -0.1)

    def test_voltage_source_removes_the_singularity(self):
        circuit = Circuit(elements=[CurrentSource(1.0, name="I1"), VoltageSource(3.0, name="V1")])
        result = circuit.solve()
        np.testing.assert_allclose(result.node_voltage("n1"), 3.0)
        np.testing.assert_allclose(result.current("V1"), -1.0)

    def test_parallel_sources_share_the_current(self):
        circuit = Circuit(elements=[
            Resistor(1.0, name="R1"), VoltageSource(1.0, name="Va"), VoltageSource(1.0, name="Vb"),
        ])
        result = circuit.solve()
        np.testing.assert_allclose(result.current("Va"), 0.5)
        np.testing.assert_allclose(result.current("Vb"), 0.5)

    def test_floating_voltage_source_carries_no_current(self):
        circuit = Circuit(elements=[
            Resistor(10.0, name="R1"), CurrentSource(1.0, name="I1"),
            VoltageSource(9.0, name="V1", ports=("other", "gnd")),
        ])
        result = circuit.solve()
        np.testing.assert_allclose(result.node_voltage("n1"), 10.0)
        assert result.current("V1") == 0.0


class TestSolveFailures:

    def test_no_resistive_path_is_singular(self):
        circuit = Circuit(elements=[CurrentSource(0.5, name="I1")])
        with pytest.raises(SingularMatrixError) as exc_info:
            circuit.solve()
        assert exc_info.value.node == "n1"
        assert isinstance(exc_info.value, np.linalg.LinAlgError)

    def test_only_reactive_elements_is_singular(self):
        circuit = Circuit(elements=[Capacitor(1e-6), Inductor(1e-3), CurrentSource(1.0)])
        with pytest.raises(SingularMatrixError):
            circuit.solve()

    def test_zero_ohm_resistor_is_surfaced(self):
        circuit = Circuit(elements=[Resistor(0.0, name="R0"), CurrentSource(1.0)])
        with pytest.raises(DivideByZeroError):
            circuit.solve()

    def test_multi_node_circuit_is_rejected(self):
        circuit = Circuit(elements=[
            Resistor(1.0, ports=("a", "gnd")), Resistor(1.0, ports=("b", "gnd")), CurrentSource(1.0, ports=("a", "gnd")),
        ])
        with pytest.raises(UnsupportedTopologyError):
            circuit.solve()


class TestSolveIsStateless:

    def test_solving_twice_gives_identical_results(self, parallel_resistors_circuit):
        first = parallel_resistors_circuit.solve()
        second = parallel_resistors_circuit.solve()
        assert first is not second
        assert first.node_names == second.node_names
        np.testing.assert_array_equal(first.node_voltages, second.node_voltages)
        assert first.element_currents == second.element_currents
        np.testing.assert_array_equal(first.conductance_matrix, second.conductance_matrix)
        np.testing.assert_array_equal(first.source_vector, second.source_vector)

    def test_solve_does_not_mutate_elements(self, single_resistor_circuit):
        before = single_resistor_circuit.elements
        single_resistor_circuit.solve()
        assert single_resistor_circuit.elements == before

    def test_adding_an_element_is_seen_by_the_next_solve(self, single_resistor_circuit):
        np.testing.assert_allclose(single_resistor_circuit.solve().node_voltage("n1"), 10.0)
        single_resistor_circuit.add_element(Resistor(100.0, name="R2"))
        np.testing.assert_allclose(single_resistor_circuit.solve().node_voltage("n1"), 5.0)

    def test_results_as_quantities(self, single_resistor_circuit):
        quantities = single_resistor_circuit.solve().as_quantities()
        assert quantities["node_voltages"]["n1"].to("mV").magnitude == pytest.approx(10000.0)
        assert quantities["element_currents"]["R1"].to("mA").magnitude == pytest.approx(100.0)
