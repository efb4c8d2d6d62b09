"""Source of tokens, synths and privileged users of the registry.

The build pipeline only sees the `RegistryProvider` interface, so tests can
supply fixed fixtures through `InMemoryRegistry`.
"""

from typing import Iterable, Protocol, Sequence

from src.core.domain import RegistryUser, SynthRecord, TokenRecord
from src.registry.errors import RegistryIntegrityError


class RegistryProvider(Protocol):
    """Read-only view of the registry of one network."""

    def list_tokens(self) -> Sequence[TokenRecord]: ...

    def list_synths(self) -> Sequence[SynthRecord]: ...

    def operator_address(self, role: str) -> str: ...


class InMemoryRegistry:
    """Registry backed by already parsed records."""

    def __init__(
        self,
        tokens: Iterable[TokenRecord],
        synths: Iterable[SynthRecord],
        users: Iterable[RegistryUser] = (),
        network: str = "mainnet",
    ):
        self.network = network
        self._tokens = tuple(tokens)
        self._synths = tuple(synths)
        self._users = {user.name: user for user in users}

    def list_tokens(self) -> Sequence[TokenRecord]:
        return self._tokens

    def list_synths(self) -> Sequence[SynthRecord]:
        return self._synths

    def operator_address(self, role: str) -> str:
        """
        Address of the privileged user holding `role`.

        Raises:
            RegistryIntegrityError: If no user has that role
        """
        user = self._users.get(role)
        if user is None:
            raise RegistryIntegrityError(
                f"No user with role '{role}' in the {self.network} registry "
                f"(known roles: {sorted(self._users)})"
            )
        return user.address
