"""Oracle block: which price feed prices an asset.

- no feed address: the protocol's own centralized oracle, operated by the
  account holding the oracle role
- feed address: a decentralized aggregator; its network overview page slug
  defaults to `<asset>-usd`, with per-asset overrides from the settings
"""

from src.tokendocs.config import BuildSettings


def feed_slug(asset: str, settings: BuildSettings) -> str:
    """Slug of the decentralized feed overview page of `asset`"""
    return settings.oracle_feed_slugs.get(asset, f"{asset.lower()}-usd")


def oracle_block(asset: str, feed: str | None, operator_address: str, settings: BuildSettings) -> str:
    """
    Markdown block describing the price feed of an asset.

    Args:
        asset: Underlying ticker
        feed: Aggregator address, None for centrally priced assets
        operator_address: Address of the centralized oracle operator
        settings: Link targets and slug overrides
    """
    links = settings.links
    if not feed:
        return (
            "**Price Feed**: Synthetix (centralized)\n\n"
            f"- Oracle: [{operator_address}]({links.etherscan}/address/{operator_address})\n"
            f"- Contract: [ExchangeRates]({links.contracts}/ExchangeRates)\n\n"
        )
    return (
        "**Price Feed**: Chainlink (decentralized)\n\n"
        f"- Oracles: [Network overview]({links.feeds}/{feed_slug(asset, settings)})\n"
        f"- Contract: [Aggregator]({links.etherscan}/address/{feed})\n\n"
    )
