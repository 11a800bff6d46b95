"""
JSON Schema Contract Validators

Validation of JSON payloads against the formal contracts shipped in the
schema/ directory of this package. Uses the jsonschema library (Draft 2020-12).

Schemas:
- quantity.json — serialised Quantity: {"amount": {...}, "uom": {...}}
"""

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema resource loader.

    Reads schema/<name>.json from an importable package, so the contracts
    travel with the installed distribution. Nothing is read until the first
    load_schema() call.
    """

    def __init__(self, package: str = __package__):
        self._package = package

        # Loaded schema cache
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema resource.

        Args:
            schema_name: Schema name without extension (e.g. 'quantity')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the package ships no such schema
            json.JSONDecodeError: If the resource is not valid JSON
            ValueError: If the resource is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        resource = resources.files(self._package) / "schema" / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {self._package}/schema/{schema_name}.json")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_quantity(data: Dict[str, Any]) -> None:
    """
    Validate a serialised quantity.

    Args:
        data: Data to validate

    Raises:
        ValidationError: If data does not match the schema
    """
    Draft202012Validator(_SCHEMA_LOADER.load_schema("quantity")).validate(data)
