"""
JSON Schema Contract Validators

Validation of raw registry data against formal JSON Schema contracts before
it is parsed into domain models. Uses the jsonschema library.

Schemas (src/core/contracts/schema/):
- registry_snapshot.json (tokens, synths and users of one network)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema file loader.

    Schemas are shipped inside the package, next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'registry_snapshot')

        Returns:
            The schema as a dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class of contract validators.

    Wraps validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Check validity without raising"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over every validation error of `data`"""
        return self.validator.iter_errors(data)


class RegistrySnapshotValidator(ContractValidator):
    """Validator of a registry snapshot (tokens, synths, users)"""

    def __init__(self):
        super().__init__("registry_snapshot")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_registry_snapshot(data: Dict[str, Any]) -> None:
    """
    Validate registry snapshot data.

    Raises:
        ValidationError: If the data does not match the schema
    """
    RegistrySnapshotValidator().validate(data)
