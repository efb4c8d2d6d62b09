"""
Domain models and value objects.

Contains the registry entities: TokenRecord, SynthRecord and its nested
InversionParams / IndexComponent, RegistryUser.
"""

from src.core.domain.synth import (
    IndexComponent,
    InversionParams,
    SynthKind,
    SynthRecord,
)
from src.core.domain.token import RegistryUser, TokenRecord

__all__ = [
    # Synth model
    "SynthRecord",
    "SynthKind",
    "InversionParams",
    "IndexComponent",
    # Token model
    "TokenRecord",
    "RegistryUser",
]
