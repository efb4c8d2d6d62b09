"""Build configuration.

A YAML file is deep-merged over DEFAULT_CONFIG and materialised into frozen
dataclasses. Everything the page depends on besides the registry (network,
link targets, special-case tables) lives here and is passed explicitly into
the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "network": "mainnet",
    "registry_path": "registry/{network}.json",
    "output_path": "content/tokens/list.md",
    "oracle_role": "oracle",
    "stable_symbol": "sUSD",
    "title": "Token List",
    "links": {
        "etherscan": "https://etherscan.io",
        "feeds": "https://feeds.chain.link",
        "exchange": "https://synthetix.exchange/#/synths",
        "contracts": "https://contracts.synthetix.io",
    },
    "suspended_assets": {
        "MKR": "MKR has been suspended due to [SIP-34](https://sips.synthetix.io/sips/sip-34)",
    },
    "oracle_feed_slugs": {
        "FTSE100": "ftse-gbp",
        "NIKKEI225": "n225-jpy",
    },
    "native_descriptions": {
        "SNX": (
            "The Synthetix Network Token (SNX) gets staked as collateral to back Synths "
            "and entitles stakers to receive fees generated by Synth trades on Synthetix.Exchange."
        ),
    },
    "preamble": [
        {
            "kind": "Tip",
            "title": "Decentralizing the remaining price feeds",
            "lines": [
                "We're in the process of migrating all price feeds to Chainlink's decentralized network.",
                "This change is coming with [SIP-36](https://sips.synthetix.io/sips/sip-36).",
            ],
        },
    ],
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _str_mapping(value: Any, key: str) -> dict[str, str]:
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be a mapping, got {type(value).__name__}")
    return {str(k): str(v) for k, v in value.items()}


@dataclass(frozen=True, slots=True)
class LinkSettings:
    etherscan: str
    feeds: str
    exchange: str
    contracts: str


@dataclass(frozen=True, slots=True)
class Admonition:
    """Admonition block (`!!! kind "title"`) of the rendered page."""

    kind: str
    title: str
    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BuildSettings:
    """Rendering settings of the token list page."""

    title: str
    stable_symbol: str
    oracle_role: str
    links: LinkSettings
    suspended_assets: Mapping[str, str]
    oracle_feed_slugs: Mapping[str, str]
    native_descriptions: Mapping[str, str]
    preamble: tuple[Admonition, ...]

    @classmethod
    def default(cls) -> BuildSettings:
        return settings_from_mapping(DEFAULT_CONFIG)


@dataclass(frozen=True, slots=True)
class BuildConfig:
    network: str
    registry_path: Path
    output_path: Path
    settings: BuildSettings
    config_path: Path | None = None


def settings_from_mapping(merged: Mapping[str, Any]) -> BuildSettings:
    """Rendering settings out of a merged configuration mapping."""
    links = merged["links"]
    if not isinstance(links, dict):
        raise ValueError("links must be a mapping")

    preamble_items = merged.get("preamble") or []
    if not isinstance(preamble_items, list):
        raise ValueError("preamble must be a list of admonitions")
    preamble = []
    for item in preamble_items:
        if not isinstance(item, dict) or "title" not in item:
            raise ValueError(f"Invalid preamble entry: {item!r}")
        preamble.append(
            Admonition(
                kind=str(item.get("kind", "Note")),
                title=str(item["title"]),
                lines=tuple(str(line) for line in item.get("lines") or ()),
            )
        )

    return BuildSettings(
        title=str(merged["title"]),
        stable_symbol=str(merged["stable_symbol"]),
        oracle_role=str(merged["oracle_role"]),
        links=LinkSettings(
            etherscan=str(links["etherscan"]).rstrip("/"),
            feeds=str(links["feeds"]).rstrip("/"),
            exchange=str(links["exchange"]).rstrip("/"),
            contracts=str(links["contracts"]).rstrip("/"),
        ),
        suspended_assets=_str_mapping(merged["suspended_assets"], "suspended_assets"),
        oracle_feed_slugs=_str_mapping(merged["oracle_feed_slugs"], "oracle_feed_slugs"),
        native_descriptions=_str_mapping(merged["native_descriptions"], "native_descriptions"),
        preamble=tuple(preamble),
    )


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a YAML object at the top level.")
        return data


PATH_KEYS = ("registry_path", "output_path")


def _expand_network(template: Any, key: str, network: str) -> str:
    try:
        return str(template).format(network=network)
    except (KeyError, IndexError, ValueError) as e:
        raise ValueError(f"{key} may only use the {{network}} placeholder: {template!r}") from e


def _resolve_path(path_text: str, base_dir: Path) -> Path:
    path = Path(path_text)
    if path.is_absolute():
        return path
    return base_dir / path


def load_config(config_path: Path | None = None, overrides: Mapping[str, Any] | None = None) -> BuildConfig:
    """
    Load the build configuration.

    Args:
        config_path: YAML file; a missing file means defaults only
        overrides: Values applied last (command-line flags); path overrides
            are taken literally, without {network} expansion

    Relative paths resolve against the config file's directory, or the
    current directory when no config file is given.
    """
    override = _read_config_file(config_path) if config_path is not None else {}
    merged = _deep_merge(DEFAULT_CONFIG, override)
    given = {k: v for k, v in (overrides or {}).items() if v is not None}
    literal_paths = {key: str(given.pop(key)) for key in PATH_KEYS if key in given}
    merged = _deep_merge(merged, given)

    network = str(merged["network"])
    if not network:
        raise ValueError("network must be configured")

    base_dir = config_path.parent if config_path is not None else Path.cwd()
    registry_text = literal_paths.get("registry_path") or _expand_network(
        merged["registry_path"], "registry_path", network
    )
    output_text = literal_paths.get("output_path") or _expand_network(
        merged["output_path"], "output_path", network
    )
    if not output_text:
        raise ValueError("output_path must be configured")

    return BuildConfig(
        network=network,
        registry_path=_resolve_path(registry_text, base_dir),
        output_path=_resolve_path(output_text, base_dir),
        settings=settings_from_mapping(merged),
        config_path=config_path,
    )
