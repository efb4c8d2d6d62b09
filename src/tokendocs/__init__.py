"""Markdown documentation of the token/synth registry.

Pipeline: registry → describer / freeze thresholds → page assembler → writer.
"""

from .assembler import (
    TokenEntry,
    build_from_registry,
    build_token_list,
    collect_entries,
    join_token,
    render_section,
)
from .config import Admonition, BuildConfig, BuildSettings, LinkSettings, load_config
from .describer import STABLE_DESCRIPTION, describe_synth
from .oracle import feed_slug, oracle_block
from .sections import asset_anchor, heading_anchor, index_parameters, inverse_parameters

__all__ = [
    # Assembler
    "TokenEntry",
    "build_from_registry",
    "build_token_list",
    "collect_entries",
    "join_token",
    "render_section",
    # Config
    "Admonition",
    "BuildConfig",
    "BuildSettings",
    "LinkSettings",
    "load_config",
    # Describer
    "STABLE_DESCRIPTION",
    "describe_synth",
    # Oracle
    "feed_slug",
    "oracle_block",
    # Sections
    "asset_anchor",
    "heading_anchor",
    "index_parameters",
    "inverse_parameters",
]
