"""Registry errors.

A failed load or an inconsistent registry aborts the build before any output
is written; these errors are never recovered from inside the pipeline.
"""


class RegistryError(Exception):
    """Base class of registry failures."""


class RegistryLoadError(RegistryError):
    """Snapshot missing, unreadable, or not matching the registry contract."""


class RegistryIntegrityError(RegistryError):
    """Collections of the registry do not reference each other consistently.

    Raised for a token with no matching synth (and no native description)
    and for a missing privileged user role.
    """
