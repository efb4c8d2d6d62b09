"""
Token — Registry models of deployed tokens and privileged users

Immutable Pydantic models for the `tokens` and `users` collections of the
registry snapshot. A token is either a synth (joined to its SynthRecord by
symbol) or a native protocol token such as SNX.
"""

from pydantic import BaseModel, Field


class TokenRecord(BaseModel):
    """
    Deployed token.

    `display_name` arrives under the wire key `name`
    (e.g. 'Synth sETH' / 'Synthetix Network Token').
    """

    symbol: str = Field(..., min_length=1, description="Token symbol (e.g. 'sETH')")
    display_name: str = Field(..., alias="name", min_length=1, description="Display name")
    address: str = Field(..., min_length=1, description="Token (proxy) contract address")
    decimals: int = Field(..., ge=0, description="ERC20 decimals")

    # Native tokens carry their own pricing info; synths take it from SynthRecord
    asset: str | None = Field(None, description="Underlying ticker, defaults to the symbol")
    feed: str | None = Field(None, description="Decentralized oracle aggregator address")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def asset_or_symbol(self) -> str:
        return self.asset or self.symbol


class RegistryUser(BaseModel):
    """Privileged account of the protocol, keyed by role (e.g. 'oracle')"""

    name: str = Field(..., min_length=1, description="Role name")
    address: str = Field(..., min_length=1, description="Account address")

    model_config = {"frozen": True}
