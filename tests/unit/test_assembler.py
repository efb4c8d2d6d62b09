"""
Tests for the Token List page assembler

Checks:
1. Token/synth join, native tokens, referential integrity failures
2. Section order by display name
3. Section layout (suspension notice, oracle, inversion and index blocks)
4. Page header and determinism
"""

import re
from decimal import Decimal
from pathlib import Path

import pytest

from src.core.domain import SynthRecord, TokenRecord
from src.registry import InMemoryRegistry, RegistryIntegrityError, SnapshotRegistry
from src.tokendocs.assembler import (
    TokenEntry,
    build_from_registry,
    build_token_list,
    collect_entries,
    join_token,
)
from src.tokendocs.config import BuildSettings
from src.tokendocs.describer import STABLE_DESCRIPTION
from src.tokendocs.sections import heading_anchor

FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "registry_mainnet.json"
OPERATOR = "0xaC1ED4Fabbd5204E02950D68b6FC8c446AC95362"


# =============================================================================
# FIXTURES / HELPERS
# =============================================================================


@pytest.fixture
def settings() -> BuildSettings:
    return BuildSettings.default()


@pytest.fixture
def registry() -> SnapshotRegistry:
    return SnapshotRegistry.from_path(FIXTURE)


@pytest.fixture
def page(registry: SnapshotRegistry, settings: BuildSettings) -> str:
    return build_from_registry(registry, settings)


def section_of(page: str, symbol: str) -> str:
    """Section of `page` whose heading ends with `(symbol)`."""
    match = re.search(rf"^## [^\n]* \({re.escape(symbol)}\)\n", page, flags=re.MULTILINE)
    assert match is not None, f"No section for {symbol}"
    end = page.find("\n\n## ", match.start())
    section = page[match.start():] if end == -1 else page[match.start():end]
    return section.rstrip("\n")


def make_token(symbol: str, name: str) -> TokenRecord:
    return TokenRecord(symbol=symbol, name=name, address="0x" + "ab" * 20, decimals=18)


# =============================================================================
# JOIN
# =============================================================================


class TestJoin:
    def test_synth_token(self, settings: BuildSettings) -> None:
        synths = {"sETH": SynthRecord(name="sETH", desc="Ether", asset="ETH", feed="0xfeed")}
        entry = join_token(make_token("sETH", "Synth Ether"), synths, settings)
        assert isinstance(entry, TokenEntry)
        assert entry.asset == "ETH"
        assert entry.feed == "0xfeed"
        assert entry.description.startswith("Tracks the price of Ether (ETH)")

    def test_native_token(self, settings: BuildSettings) -> None:
        token = TokenRecord(
            symbol="SNX", name="Synthetix Network Token", address="0x1", decimals=18, asset="SNX"
        )
        entry = join_token(token, {}, settings)
        assert entry.description == settings.native_descriptions["SNX"]
        assert entry.inverted is None
        assert entry.index is None

    def test_unmatched_token_rejected(self, settings: BuildSettings) -> None:
        with pytest.raises(RegistryIntegrityError, match="sXYZ"):
            join_token(make_token("sXYZ", "Synth XYZ"), {}, settings)

    def test_duplicate_synth_rejected(self, settings: BuildSettings) -> None:
        synth = SynthRecord(name="sETH", desc="Ether", asset="ETH")
        with pytest.raises(RegistryIntegrityError, match="Duplicate"):
            collect_entries([make_token("sETH", "Synth Ether")], [synth, synth], settings)


# =============================================================================
# ORDERING
# =============================================================================


class TestOrdering:
    def test_sections_sorted_by_display_name(self, page: str) -> None:
        headings = re.findall(r"^## (.*)$", page, flags=re.MULTILINE)
        assert headings == [
            "Synth DeFi Index (sDEFI)",
            "Synth Ether (sETH)",
            "Synth FTSE 100 Index (sFTSE)",
            "Synth Inverse DeFi Index (iDEFI)",
            "Synth Inverse Ether (iETH)",
            "Synth Maker (sMKR)",
            "Synth sUSD (sUSD)",
            "Synthetix Network Token (SNX)",
        ]

    def test_sort_is_case_sensitive(self, settings: BuildSettings) -> None:
        synths = [
            SynthRecord(name="sa", desc="Lower", asset="A"),
            SynthRecord(name="sB", desc="Upper", asset="B"),
        ]
        tokens = [make_token("sa", "Synth alpha"), make_token("sB", "Synth Beta")]
        entries = collect_entries(tokens, synths, settings)
        assert [entry.symbol for entry in entries] == ["sB", "sa"]

    def test_asset_breaks_display_name_ties(self, settings: BuildSettings) -> None:
        synths = [
            SynthRecord(name="sY", desc="Y", asset="Y"),
            SynthRecord(name="sX", desc="X", asset="X"),
        ]
        tokens = [make_token("sY", "Synth Same"), make_token("sX", "Synth Same")]
        entries = collect_entries(tokens, synths, settings)
        assert [entry.asset for entry in entries] == ["X", "Y"]


# =============================================================================
# SECTIONS
# =============================================================================


class TestSections:
    def test_plain_decentralized_section(self, page: str) -> None:
        address = "0x5e74C9036fb86BD7eCdcb084a0673EFc32eA31cb"
        feed = "0xF79D6aFBb6dA890132F9D7c355e3015f15F3406F"
        assert section_of(page, "sETH") == (
            "## Synth Ether (sETH)\n\n"
            f"**Contract:** [{address}](https://etherscan.io/token/{address})\n\n"
            "**Decimals:** 18\n\n"
            "**Price:** [sETH on synthetix.exchange](https://synthetix.exchange/#/synths/sETH)\n\n"
            "**Price Feed**: Chainlink (decentralized)\n\n"
            "- Oracles: [Network overview](https://feeds.chain.link/eth-usd)\n"
            f"- Contract: [Aggregator](https://etherscan.io/address/{feed})\n\n"
            ">Tracks the price of Ether (ETH) through price feeds supplied by an oracle."
        )

    def test_suspension_notice_only_for_configured_asset(self, page: str) -> None:
        mkr = section_of(page, "sMKR")
        assert '!!! warning "Suspended"' in mkr
        assert "sip-34" in mkr
        assert page.count('!!! warning "Suspended"') == 1

    def test_centralized_oracle_names_operator(self, page: str) -> None:
        mkr = section_of(page, "sMKR")
        assert "**Price Feed**: Synthetix (centralized)" in mkr
        assert f"- Oracle: [{OPERATOR}](https://etherscan.io/address/{OPERATOR})" in mkr

    def test_ftse_slug_override(self, page: str) -> None:
        assert "https://feeds.chain.link/ftse-gbp" in section_of(page, "sFTSE")

    def test_inverted_section(self, page: str) -> None:
        ieth = section_of(page, "iETH")
        assert "**Inverse of**: [sETH](#synth-ether-seth)" in ieth
        assert "| $100 | $150 | $50.25000|\n" in ieth
        assert "when Ether's value reaches \\$50.0" in ieth
        assert "when Ether’s value reaches \\$149.75" in ieth
        assert "**Index of**" not in ieth

    def test_index_section_has_table(self, page: str) -> None:
        sdefi = section_of(page, "sDEFI")
        assert "**Index of**: [sDEFI](#synth-defi-index-sdefi)" in sdefi
        assert "| Compound | COMP | 1.12000 |" in sdefi
        assert "**Inverse of**" not in sdefi

    def test_inverted_index_links_without_table(self, page: str) -> None:
        idefi = section_of(page, "iDEFI")
        assert "**Inverse of**: [sDEFI](#synth-defi-index-sdefi)" in idefi
        assert "**Index of**: [sDEFI](#synth-defi-index-sdefi)" in idefi
        assert "| Token | Symbol | Units |" not in idefi
        assert ">Inversely tracks the price of DeFi Index (DEFI)" in idefi

    def test_cross_links_resolve_to_headings(self, page: str) -> None:
        slugs = {heading_anchor(text) for text in re.findall(r"^## (.*)$", page, flags=re.MULTILINE)}
        anchors = re.findall(r"\]\(#([^)]+)\)", page)
        assert len(anchors) == 4
        assert [anchor for anchor in anchors if anchor not in slugs] == []

    def test_cross_link_follows_long_asset_heading(self, settings: BuildSettings) -> None:
        synths = [
            SynthRecord(name="sBTC", desc="Bitcoin", asset="BTC"),
            SynthRecord(
                name="iBTC",
                desc="Inverted Bitcoin",
                asset="BTC",
                inverted={"entryPoint": 9000, "upperLimit": 13500, "lowerLimit": 4500},
            ),
        ]
        tokens = [make_token("sBTC", "Bitcoin"), make_token("iBTC", "Inverse Bitcoin")]
        page = build_token_list(tokens, synths, OPERATOR, settings)
        assert "## Bitcoin (sBTC)" in page
        assert "**Inverse of**: [sBTC](#bitcoin-sbtc)" in page

    def test_stable_and_native_descriptions(self, page: str, settings: BuildSettings) -> None:
        assert section_of(page, "sUSD").endswith(f">{STABLE_DESCRIPTION}")
        assert section_of(page, "SNX").endswith(f">{settings.native_descriptions['SNX']}")


# =============================================================================
# PAGE
# =============================================================================


class TestPage:
    def test_header(self, page: str) -> None:
        assert page.startswith(
            "\n# Token List\n\n"
            '!!! Tip "Decentralizing the remaining price feeds"\n\n'
            "    We're in the process of migrating all price feeds to Chainlink's decentralized network.\n"
            "    This change is coming with [SIP-36](https://sips.synthetix.io/sips/sip-36).\n\n"
            "## Synth DeFi Index (sDEFI)\n\n"
        )

    def test_trailer(self, page: str) -> None:
        assert page.endswith(">" + BuildSettings.default().native_descriptions["SNX"] + "\n\n")

    def test_deterministic(self, registry: SnapshotRegistry, settings: BuildSettings) -> None:
        assert build_from_registry(registry, settings) == build_from_registry(registry, settings)

    def test_input_order_irrelevant(self, registry: SnapshotRegistry, settings: BuildSettings) -> None:
        forward = build_token_list(registry.list_tokens(), registry.list_synths(), OPERATOR, settings)
        backward = build_token_list(
            list(reversed(registry.list_tokens())),
            list(reversed(registry.list_synths())),
            OPERATOR,
            settings,
        )
        assert forward == backward

    def test_empty_registry(self, settings: BuildSettings) -> None:
        page = build_token_list([], [], OPERATOR, settings)
        assert page.startswith("\n# Token List\n\n")
        assert "## " not in page

    def test_missing_oracle_role(self, settings: BuildSettings) -> None:
        registry = InMemoryRegistry(
            tokens=[make_token("sETH", "Synth Ether")],
            synths=[SynthRecord(name="sETH", desc="Ether", asset="ETH")],
        )
        with pytest.raises(RegistryIntegrityError, match="oracle"):
            build_from_registry(registry, settings)

    def test_unmatched_token_aborts_page(self, settings: BuildSettings) -> None:
        with pytest.raises(RegistryIntegrityError):
            build_token_list(
                [make_token("sETH", "Synth Ether"), make_token("sGONE", "Synth Gone")],
                [SynthRecord(name="sETH", desc="Ether", asset="ETH", inverted=None)],
                OPERATOR,
                settings,
            )

    def test_inverted_values_rendered_from_decimals(self, settings: BuildSettings) -> None:
        synth = SynthRecord.model_validate(
            {
                "name": "iBTC",
                "desc": "Inverted Bitcoin",
                "asset": "BTC",
                "inverted": {
                    "entryPoint": Decimal("9000"),
                    "upperLimit": Decimal("13500"),
                    "lowerLimit": Decimal("4500"),
                },
            }
        )
        page = build_token_list([make_token("iBTC", "Synth Inverse Bitcoin")], [synth], OPERATOR, settings)
        assert "| $9,000 | $13,500 | $4,500|\n" in page
        assert "**Inverse of**: [sBTC](#inverse-bitcoin-sbtc)" in page
