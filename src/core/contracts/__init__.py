"""
Contract Validation Module

Validation of raw registry snapshots against JSON Schema contracts.
"""

from .validators import (
    ContractValidator,
    RegistrySnapshotValidator,
    SchemaLoader,
    validate_registry_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RegistrySnapshotValidator",
    # Functions
    "validate_registry_snapshot",
]
