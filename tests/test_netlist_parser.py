# tests/test_netlist_parser.py
import pytest
from pathlib import Path

from dcsim_core.parser import (
    NetlistParser,
    ParsingError,
    SchemaValidationError,
    ParsedCircuit,
    ParsedElementData,
)


VALID_NETLIST = """
circuit_name: Divider
ground_net: gnd
components:
  - id: R1
    type: Resistor
    value: "100 ohm"
  - id: I1
    type: CurrentSource
    value: 0.1
    ports: {p1: n1, p2: gnd}
"""


class TestNetlistParser:

    def test_parses_valid_netlist(self, netlist_writer):
        path = netlist_writer(VALID_NETLIST)
        parsed = NetlistParser().parse(path)

        assert isinstance(parsed, ParsedCircuit)
        assert parsed.circuit_name == "Divider"
        assert parsed.ground_net_name == "gnd"
        assert parsed.source_yaml_path == path.resolve()
        assert [e.instance_id for e in parsed.elements] == ["R1", "I1"]

        r1, i1 = parsed.elements
        assert isinstance(r1, ParsedElementData)
        assert r1.element_type == "Resistor"
        assert r1.raw_value == "100 ohm"
        assert r1.ports == ("n1", "gnd")
        assert i1.raw_value == 0.1

    def test_defaults_for_name_ground_and_ports(self, netlist_writer):
        path = netlist_writer("""
components:
  - {id: R1, type: Resistor, value: 10}
""", filename="my_circuit.yaml")
        parsed = NetlistParser().parse(path)
        assert parsed.circuit_name == "my_circuit"
        assert parsed.ground_net_name == "gnd"
        assert parsed.elements[0].ports == ("n1", "gnd")

    def test_custom_ground_is_used_for_default_ports(self):
        parsed = NetlistParser().parse_document({
            "ground_net": "GND0",
            "components": [{"id": "R1", "type": "Resistor", "value": 10}],
        })
        assert parsed.ground_net_name == "GND0"
        assert parsed.elements[0].ports == ("n1", "GND0")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ParsingError, match="not found"):
            NetlistParser().parse(tmp_path / "does_not_exist.yaml")

    def test_empty_file(self, netlist_writer):
        with pytest.raises(ParsingError, match="empty"):
            NetlistParser().parse(netlist_writer(""))

    def test_non_mapping_root(self, netlist_writer):
        with pytest.raises(ParsingError, match="dictionary"):
            NetlistParser().parse(netlist_writer("- just\n- a list\n"))

    def test_invalid_yaml_syntax(self, netlist_writer):
        with pytest.raises(ParsingError, match="Invalid YAML syntax"):
            NetlistParser().parse(netlist_writer("components: [unclosed\n"))

    @pytest.mark.parametrize("document", [
        {},  # missing components
        {"components": []},  # empty list
        {"components": [{"id": "R1", "type": "Transistor", "value": 1}]},  # unknown type
        {"components": [{"id": "R1", "type": "Resistor"}]},  # missing value
        {"components": [{"id": "R-1", "type": "Resistor", "value": 1}]},  # bad identifier
        {"components": [{"id": "R1", "type": "Resistor", "value": 1, "color": "red"}]},  # unknown key
        {"components": [{"id": "R1", "type": "Resistor", "value": 1, "ports": {"p1": "n1"}}]},  # missing p2
        {"components": [{"id": "R1", "type": "Resistor", "value": 1}], "sweep": {}},  # unknown top-level key
    ])
    def test_schema_violations(self, document):
        with pytest.raises(SchemaValidationError):
            NetlistParser().parse_document(document)

    def test_duplicate_ids_are_reported(self):
        document = {"components": [
            {"id": "R1", "type": "Resistor", "value": 1},
            {"id": "R1", "type": "Resistor", "value": 2},
        ]}
        with pytest.raises(SchemaValidationError) as exc_info:
            NetlistParser().parse_document(document, Path("dup.yaml"))
        assert "components" in exc_info.value.errors
        report = exc_info.value.get_diagnostic_report()
        assert "Duplicate values found for key 'id'" in report
        assert "dup.yaml" in report
