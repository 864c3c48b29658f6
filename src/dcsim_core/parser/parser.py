# src/dcsim_core/parser/parser.py
import logging
import re
import string
from pathlib import Path
from typing import Any, Dict, List, Union

import cerberus
import yaml

from ..components.base_enums import ElementKind
from ..constants import DEFAULT_NODE, REFERENCE_NODE
from .raw_data import ParsedCircuit, ParsedElementData
from .exceptions import ParsingError, SchemaValidationError

logger = logging.getLogger(__name__)

# A valid identifier for ids and net names: a letter or underscore followed by
# letters, digits and underscores.
ID_REGEX = r"^[a-zA-Z_][a-zA-Z0-9_]*$"
ALLOWED_ID_CHARS = set(string.ascii_letters + string.digits + "_")


class EnhancedValidator(cerberus.Validator):
    """Cerberus validator with the netlist's naming and uniqueness rules."""

    def _validate_id_regex(self, constraint, field, value):
        """
        Validates that a string is a valid identifier.
        The rule's arguments are validated against this schema:
        {'type': 'boolean'}
        """
        if not constraint:
            return
        if not isinstance(value, str):
            self._error(field, "must be a string to be validated by id_regex.")
            return

        if not re.match(ID_REGEX, value):
            invalid_chars = sorted(set(value) - ALLOWED_ID_CHARS)
            self._error(
                field,
                f"Identifier '{value}' is invalid. Identifiers must start with a letter or underscore "
                f"and contain only letters, numbers and underscores. Forbidden character(s): {invalid_chars}"
            )

    def _validate_unique_elements_by_key(self, key_for_uniqueness, field, value):
        """
        Validates that all dictionaries in a list have a unique value for a given key.
        The rule's arguments are validated against this schema:
        {'type': 'string'}
        """
        if not isinstance(value, list):
            return # Let the 'type: list' rule handle this.

        seen_keys = set()
        duplicates = []
        for item in value:
            if not isinstance(item, dict):
                continue
            item_key = item.get(key_for_uniqueness)
            if item_key is None:
                continue
            if item_key in seen_keys:
                duplicates.append(item_key)
            else:
                seen_keys.add(item_key)

        if duplicates:
            self._error(field, f"Duplicate values found for key '{key_for_uniqueness}': {sorted(set(duplicates))}")


class NetlistParser:
    """
    Loads and validates a YAML netlist, producing a `ParsedCircuit` IR.
    """
    _id_rule = {"type": "string", "required": True, "empty": False, "id_regex": True}
    _net_name_rule = {"type": "string", "required": True, "empty": False, "id_regex": True}

    _element_schema = {
        "id": _id_rule,
        "type": {"type": "string", "required": True, "allowed": [kind.value for kind in ElementKind]},
        "value": {"type": ["string", "number"], "required": True, "empty": False},
        "ports": {
            "type": "dict",
            "required": False,
            "schema": {"p1": _net_name_rule, "p2": _net_name_rule},
        },
    }

    _schema = {
        "circuit_name": {"type": "string", "required": False, "id_regex": True},
        "ground_net": {"type": "string", "required": False, "id_regex": True, "default": REFERENCE_NODE},
        "components": {
            "type": "list",
            "required": True,
            "minlength": 1,
            "unique_elements_by_key": "id",
            "schema": {"type": "dict", "schema": _element_schema},
        },
    }

    def __init__(self):
        self._validator = EnhancedValidator(self._schema)
        self._validator.allow_unknown = False
        logger.debug("NetlistParser initialized with strict structural validation rules.")

    def parse(self, yaml_path: Union[str, Path]) -> ParsedCircuit:
        """Parses and validates one netlist file."""
        resolved_path = Path(yaml_path).resolve()
        logger.info(f"Parsing netlist file: {resolved_path}")

        yaml_content = self._load_yaml(resolved_path)
        return self.parse_document(yaml_content, resolved_path)

    def parse_document(self, document: Dict[str, Any], source_path: Union[str, Path] = Path("<memory>")) -> ParsedCircuit:
        """Validates an already-loaded netlist mapping and converts it into the IR."""
        source_path = Path(source_path)
        if not self._validator.validate(document):
            raise SchemaValidationError(self._validator.errors, source_path)

        validated_data = self._validator.document
        ground_net = validated_data["ground_net"]

        parsed_elements: List[ParsedElementData] = []
        for element_raw in validated_data["components"]:
            ports_raw = element_raw.get("ports") or {"p1": DEFAULT_NODE, "p2": ground_net}
            parsed_elements.append(
                ParsedElementData(
                    instance_id=element_raw["id"],
                    element_type=element_raw["type"],
                    raw_value=element_raw["value"],
                    ports=(ports_raw["p1"], ports_raw["p2"]),
                    source_yaml_path=source_path,
                )
            )

        return ParsedCircuit(
            circuit_name=validated_data.get("circuit_name", source_path.stem),
            ground_net_name=ground_net,
            source_yaml_path=source_path,
            elements=parsed_elements,
        )

    def _load_yaml(self, source: Path) -> Dict[str, Any]:
        """Loads and performs basic sanity checks on a YAML file."""
        if not source.is_file():
            raise ParsingError(details=f"Netlist file not found at path: {source}", file_path=source)
        try:
            with source.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except PermissionError as e:
            raise ParsingError(details=f"Permission denied when trying to read file: {e}", file_path=source) from e
        except yaml.YAMLError as e:
            raise ParsingError(details=f"Invalid YAML syntax: {e}", file_path=source) from e

        if content is None:
            raise ParsingError(details="The YAML file is empty or contains no valid content.", file_path=source)
        if not isinstance(content, dict):
            raise ParsingError(details="The root of the YAML file must be a dictionary (mapping).", file_path=source)
        return content
