"""One-paragraph prose description of a synth.

Variant selection, in priority order:
1. stable unit (sUSD): fixed constant-value sentence
2. inverted: entry point, limits and the underlying prices at which they freeze
3. index: the basket composition
4. plain: tracks the price of the underlying

An inverted index is described as inverted; the index composition is then
only reachable through the long asset's section.

Dollar signs are escaped (`\\$`) so that markdown math extensions leave them alone.
"""

from src.core.domain import InversionParams, SynthKind, SynthRecord
from src.core.math import freeze_threshold, plain_number

STABLE_DESCRIPTION = (
    "Tracks the price of a single US Dollar (USD). This Synth always remains constant at 1."
)


def _asset_suffix(synth: SynthRecord) -> str:
    return f" ({synth.asset})" if synth.name != synth.underlying else ""


def _describe_inverted(synth: SynthRecord, params: InversionParams) -> str:
    underlying = synth.underlying
    entry = plain_number(params.entry_point)
    upper = plain_number(params.upper_limit)
    lower = plain_number(params.lower_limit)
    upper_at = freeze_threshold(params.entry_point, params.upper_limit)
    lower_at = freeze_threshold(params.entry_point, params.lower_limit)

    return (
        f"Inversely tracks the price of {underlying}{_asset_suffix(synth)} through price feeds "
        f"supplied by an oracle. "
        f"The entry point is \\${entry} (the approximate market price at time of creation). "
        f"This Synth freezes when it reaches its upper limit of \\${upper} (i.e. when {underlying}'s "
        f"value reaches \\${upper_at}) or its lower limit of \\${lower} (i.e. when {underlying}’s value "
        f"reaches \\${lower_at}). If it reaches either of its limits and gets frozen, it will no longer be "
        "able to be purchased on Synthetix.Exchange, but can still be traded for other Synths at its frozen "
        f"value. At some point after it has reached either of its limits, it will be substituted for "
        f"another {synth.name} with different limits."
    )


def _describe_index(synth: SynthRecord) -> str:
    components = ", ".join(
        f"{plain_number(item.units)} of {item.symbol}"
        + (f" ({item.name})" if item.name != item.symbol else "")
        for item in synth.index or ()
    )
    return (
        f"Tracks the price of the index: {synth.underlying}{_asset_suffix(synth)} through price feeds "
        "supplied by an oracle. This index is made up of the following assets and weights: "
        f"{components}."
    )


def describe_synth(synth: SynthRecord, stable_symbol: str = "sUSD") -> str:
    """
    Natural-language description of a synth.

    Args:
        synth: Registry entry to describe
        stable_symbol: Symbol of the base stable unit

    Returns:
        Single paragraph of markdown text
    """
    kind = synth.kind(stable_symbol)
    if kind is SynthKind.STABLE:
        return STABLE_DESCRIPTION
    if kind is SynthKind.INVERTED and synth.inverted is not None:
        return _describe_inverted(synth, synth.inverted)
    if kind is SynthKind.INDEX:
        return _describe_index(synth)
    return (
        f"Tracks the price of {synth.underlying}{_asset_suffix(synth)} through price feeds "
        "supplied by an oracle."
    )
