"""File-backed registry snapshots of one network.

A snapshot is a JSON or YAML document with three collections:

    {
      "network": "mainnet",            # optional
      "tokens": [{"symbol", "name", "address", "decimals", ...}],
      "synths": [{"name", "desc", "asset", "inverted"?, "index"?, "feed"?}],
      "users":  [{"name", "address"}]
    }

The document is validated against the `registry_snapshot` JSON Schema, then
parsed into domain models. JSON floats are read as Decimal so that the
written precision of inversion limits is preserved.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from pydantic import ValidationError

from src.core.contracts import RegistrySnapshotValidator
from src.core.domain import RegistryUser, SynthRecord, TokenRecord
from src.registry.errors import RegistryLoadError
from src.registry.provider import InMemoryRegistry

LOGGER = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def _decimalize(value: Any) -> Any:
    """Replace floats of a YAML document with Decimals of the same text."""
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {key: _decimalize(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_decimalize(item) for item in value]
    return value


def read_snapshot_document(path: Path) -> dict[str, Any]:
    """
    Read a snapshot file without validating it.

    Raises:
        RegistryLoadError: If the file is missing, unreadable or not a mapping
    """
    if not path.exists():
        raise RegistryLoadError(f"Registry snapshot not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            if path.suffix.lower() in YAML_SUFFIXES:
                data = _decimalize(yaml.safe_load(f))
            else:
                data = json.load(f, parse_float=Decimal)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise RegistryLoadError(f"Cannot read registry snapshot {path}: {e}") from e

    if not isinstance(data, dict):
        raise RegistryLoadError(f"{path} must contain an object at the top level.")
    return data


def _error_location(error: jsonschema.ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


class SnapshotRegistry(InMemoryRegistry):
    """Registry loaded from a snapshot document."""

    @classmethod
    def from_document(cls, data: dict[str, Any], network: str = "mainnet") -> "SnapshotRegistry":
        """
        Build a registry from an already read snapshot document.

        Raises:
            RegistryLoadError: If the document breaks the registry contract,
                or was taken from another network
        """
        errors = sorted(RegistrySnapshotValidator().iter_errors(data), key=_error_location)
        if errors:
            problems = "; ".join(f"{_error_location(e)}: {e.message}" for e in errors)
            raise RegistryLoadError(f"Registry snapshot invalid at {problems}")

        snapshot_network = data.get("network")
        if snapshot_network is not None and snapshot_network != network:
            raise RegistryLoadError(
                f"Registry snapshot is for network '{snapshot_network}', expected '{network}'"
            )

        try:
            tokens = [TokenRecord.model_validate(item) for item in data["tokens"]]
            synths = [SynthRecord.model_validate(item) for item in data["synths"]]
            users = [RegistryUser.model_validate(item) for item in data["users"]]
        except ValidationError as e:
            raise RegistryLoadError(f"Registry snapshot rejected: {e}") from e

        LOGGER.debug(
            "Parsed %s registry: %d tokens, %d synths, %d users",
            network,
            len(tokens),
            len(synths),
            len(users),
        )
        return cls(tokens=tokens, synths=synths, users=users, network=network)

    @classmethod
    def from_path(cls, path: Path, network: str = "mainnet") -> "SnapshotRegistry":
        """
        Load the registry of `network` from a JSON or YAML snapshot file.

        Raises:
            RegistryLoadError: If the file cannot be read or breaks the contract
        """
        LOGGER.info("Loading %s registry from %s", network, path)
        return cls.from_document(read_snapshot_document(path), network=network)
