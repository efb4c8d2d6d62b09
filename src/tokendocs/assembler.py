"""Assembly of the Token List markdown document.

Each token becomes one section; sections appear sorted by display name.
Tokens are joined to their synth by symbol. Native tokens (e.g. SNX) take a
configured description instead; any other token without a synth breaks the
registry's referential integrity and aborts the build.

The assembler is pure: identical records and settings always produce a
byte-identical document.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from src.core.domain import IndexComponent, InversionParams, SynthRecord, TokenRecord
from src.registry import RegistryIntegrityError, RegistryProvider
from src.tokendocs.config import BuildSettings
from src.tokendocs.describer import describe_synth
from src.tokendocs.oracle import oracle_block
from src.tokendocs.sections import (
    admonition,
    asset_anchor,
    heading_anchor,
    index_parameters,
    inverse_parameters,
    suspension_notice,
)

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenEntry:
    """Token joined with its synth and description, ready for rendering."""

    display_name: str
    symbol: str
    asset: str
    address: str
    decimals: int
    description: str
    inverted: InversionParams | None = None
    index: tuple[IndexComponent, ...] | None = None
    feed: str | None = None


def _synths_by_name(synths: Iterable[SynthRecord]) -> dict[str, SynthRecord]:
    by_name: dict[str, SynthRecord] = {}
    for synth in synths:
        if synth.name in by_name:
            raise RegistryIntegrityError(f"Duplicate synth '{synth.name}' in registry")
        by_name[synth.name] = synth
    return by_name


def join_token(token: TokenRecord, synths: dict[str, SynthRecord], settings: BuildSettings) -> TokenEntry:
    """
    Join a token to its synth and describe it.

    Raises:
        RegistryIntegrityError: If the token is neither native nor a known synth
    """
    native_description = settings.native_descriptions.get(token.symbol)
    if native_description is not None:
        return TokenEntry(
            display_name=token.display_name,
            symbol=token.symbol,
            asset=token.asset_or_symbol,
            address=token.address,
            decimals=token.decimals,
            description=native_description,
            feed=token.feed,
        )

    synth = synths.get(token.symbol)
    if synth is None:
        raise RegistryIntegrityError(
            f"Token '{token.symbol}' ({token.display_name}) has no matching synth entry"
        )

    return TokenEntry(
        display_name=token.display_name,
        symbol=token.symbol,
        asset=synth.asset,
        address=token.address,
        decimals=token.decimals,
        description=describe_synth(synth, settings.stable_symbol),
        inverted=synth.inverted,
        index=synth.index,
        feed=synth.feed or token.feed,
    )


def collect_entries(
    tokens: Iterable[TokenRecord],
    synths: Iterable[SynthRecord],
    settings: BuildSettings,
) -> list[TokenEntry]:
    """
    Join every token and order the result.

    Entries are sorted by asset ticker first, then (stably) by display name,
    so display name decides the order and the asset only breaks ties.
    """
    by_name = _synths_by_name(synths)
    entries = [join_token(token, by_name, settings) for token in tokens]
    entries.sort(key=lambda entry: entry.asset)
    entries.sort(key=lambda entry: entry.display_name)
    return entries


def section_heading(entry: TokenEntry) -> str:
    return f"{entry.display_name} ({entry.symbol})"


def long_asset_anchor(entry: TokenEntry, anchors: Mapping[str, str]) -> str:
    """Anchor of the section of the long synth of `entry`'s asset"""
    anchor = anchors.get(f"s{entry.asset}")
    if anchor is None:
        LOGGER.warning("No s%s section on the page, guessing the anchor of %s", entry.asset, entry.symbol)
        return asset_anchor(entry.display_name, entry.asset)
    return anchor


def render_section(
    entry: TokenEntry,
    operator_address: str,
    settings: BuildSettings,
    anchors: Mapping[str, str] | None = None,
) -> str:
    """
    Markdown section of one token, without trailing separator.

    `anchors` maps token symbols to the anchors of their sections on the page.
    """
    links = settings.links
    parts = [f"## {section_heading(entry)}\n\n"]

    notice = settings.suspended_assets.get(entry.asset)
    if notice is not None:
        parts.append(suspension_notice(notice))

    parts.append(
        f"**Contract:** [{entry.address}]({links.etherscan}/token/{entry.address})\n\n"
        f"**Decimals:** {entry.decimals}\n\n"
        f"**Price:** [{entry.symbol} on synthetix.exchange]({links.exchange}/{entry.symbol})\n\n"
    )
    parts.append(oracle_block(entry.asset, entry.feed, operator_address, settings))
    if entry.inverted is not None or entry.index:
        anchor = long_asset_anchor(entry, anchors or {})
        parts.append(inverse_parameters(entry.inverted, entry.asset, anchor))
        parts.append(index_parameters(entry.index, entry.inverted is not None, entry.asset, anchor))
    parts.append(f">{entry.description}")
    return "".join(parts)


def build_token_list(
    tokens: Sequence[TokenRecord],
    synths: Sequence[SynthRecord],
    operator_address: str,
    settings: BuildSettings,
) -> str:
    """
    Assemble the full Token List document.

    Args:
        tokens: Every deployed token of the network
        synths: Every synth of the network
        operator_address: Address of the centralized oracle operator
        settings: Rendering settings

    Returns:
        The markdown document

    Raises:
        RegistryIntegrityError: If a token has no synth and no native description
    """
    entries = collect_entries(tokens, synths, settings)
    LOGGER.debug("Rendering %d token sections", len(entries))

    header = f"\n# {settings.title}\n\n" + "".join(admonition(block) for block in settings.preamble)
    anchors = {entry.symbol: heading_anchor(section_heading(entry)) for entry in entries}
    body = "\n\n".join(
        render_section(entry, operator_address, settings, anchors) for entry in entries
    )
    return f"{header}{body}\n\n"


def build_from_registry(registry: RegistryProvider, settings: BuildSettings) -> str:
    """Assemble the Token List document out of a registry provider"""
    tokens = registry.list_tokens()
    synths = registry.list_synths()
    LOGGER.info("Describing %d tokens against %d synths", len(tokens), len(synths))
    return build_token_list(tokens, synths, registry.operator_address(settings.oracle_role), settings)
