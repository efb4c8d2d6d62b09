"""
Synth — Registry model of a synthetic asset

Immutable Pydantic models for synth entries of the registry snapshot
(the `synths` collection).

A synth is one of four mutually exclusive kinds for description purposes:
- the stable unit (sUSD)
- inverted: moves opposite to its underlying, frozen at upper/lower limits
- index: tracks a weighted basket of other assets
- plain: tracks the price of a single underlying

Numeric parameters are Decimal so that the textual precision of the source
(e.g. `150.0` vs `150`) survives parsing.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class SynthKind(str, Enum):
    """Kind of a synth, in description priority order"""

    STABLE = "stable"
    INVERTED = "inverted"
    INDEX = "index"
    PLAIN = "plain"


# =============================================================================
# NESTED MODELS
# =============================================================================


class InversionParams(BaseModel):
    """
    Parameters of an inverted synth.

    lower_limit < entry_point < upper_limit is assumed, not validated:
    contradictory limits still render, with economically meaningless thresholds.
    """

    entry_point: Decimal = Field(..., alias="entryPoint", description="Underlying price at creation")
    upper_limit: Decimal = Field(..., alias="upperLimit", description="Upper freeze price")
    lower_limit: Decimal = Field(..., alias="lowerLimit", description="Lower freeze price")

    model_config = {"frozen": True, "populate_by_name": True}


class IndexComponent(BaseModel):
    """One weighted asset of an index synth"""

    symbol: str = Field(..., min_length=1, description="Component ticker (e.g. 'BTC')")
    name: str = Field(..., min_length=1, description="Component display name")
    units: Decimal = Field(..., description="Units of the component held by one index unit")

    model_config = {"frozen": True}


# =============================================================================
# SYNTH MODEL
# =============================================================================


class SynthRecord(BaseModel):
    """
    Registry entry of a synth.

    Identity is `name` (the synth symbol, e.g. 'sETH'); `desc` is the human
    description of the underlying ('Ether', 'Inverted Bitcoin', ...).
    """

    name: str = Field(..., min_length=1, description="Synth symbol (e.g. 'sETH')")
    desc: str = Field(..., min_length=1, description="Description of the underlying")
    asset: str = Field(..., min_length=1, description="Underlying ticker (e.g. 'ETH')")
    category: str | None = Field(None, description="Registry category (crypto, forex, ...)")
    sign: str | None = Field(None, description="Display sign of the quote currency")

    inverted: InversionParams | None = Field(None, description="Inversion parameters")
    index: tuple[IndexComponent, ...] | None = Field(None, description="Index composition")
    feed: str | None = Field(None, description="Decentralized oracle aggregator address")

    model_config = {"frozen": True}

    def kind(self, stable_symbol: str = "sUSD") -> SynthKind:
        """
        Description kind of the synth.

        Inversion is checked before index membership: an inverted index is INVERTED.
        """
        if self.name == stable_symbol:
            return SynthKind.STABLE
        if self.inverted is not None:
            return SynthKind.INVERTED
        if self.index:
            return SynthKind.INDEX
        return SynthKind.PLAIN

    @property
    def underlying(self) -> str:
        """Underlying description without the 'Inverted ' prefix"""
        return self.desc.removeprefix("Inverted ")
