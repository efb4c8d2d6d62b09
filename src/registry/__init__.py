"""Read-only access to the token/synth registry of one network.

- RegistryProvider interface and an in-memory implementation
- File-backed snapshots (JSON / YAML) validated against a JSON Schema
- Fail-fast registry errors
"""

from .errors import RegistryError, RegistryIntegrityError, RegistryLoadError
from .provider import InMemoryRegistry, RegistryProvider
from .snapshot import SnapshotRegistry, read_snapshot_document

__all__ = [
    "RegistryProvider",
    "InMemoryRegistry",
    "SnapshotRegistry",
    "read_snapshot_document",
    "RegistryError",
    "RegistryLoadError",
    "RegistryIntegrityError",
]
