"""Markdown building blocks of a token section.

Cross-links point at the section heading of the long asset `s<ASSET>`. Their
anchor is the slug the site renderer derives from that heading text
(`heading_anchor`); `asset_anchor` is the fallback when the long asset has no
section on the page.
"""

import re
import unicodedata
from typing import Sequence

from src.core.domain import IndexComponent, InversionParams
from src.core.math import format_amount
from src.tokendocs.config import Admonition


def admonition(block: Admonition) -> str:
    body = "\n".join(f"    {line}" for line in block.lines)
    return f'!!! {block.kind} "{block.title}"\n\n{body}\n\n'


def suspension_notice(message: str) -> str:
    return admonition(Admonition(kind="warning", title="Suspended", lines=(message,)))


def heading_anchor(heading: str) -> str:
    """
    Slug of a markdown heading, as the table-of-contents extension renders it.

    Examples:
        >>> heading_anchor("Synth Ether (sETH)")
        'synth-ether-seth'
    """
    text = unicodedata.normalize("NFKD", heading).encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\s-]", "", text).strip().lower()
    return re.sub(r"[-\s]+", "-", text)


def asset_anchor(display_name: str, asset: str) -> str:
    """
    Anchor guessed from the display name when the long asset is not on the page.

    The first word of the display name (the 'Inverse' of an inverse synth) is
    dropped.

    Examples:
        >>> asset_anchor("Inverse Bitcoin", "BTC")
        'bitcoin-sbtc'
    """
    rest = "-".join(display_name.split(" ")[1:])
    return f"{rest}-s{asset}".lower()


def inverse_parameters(inverted: InversionParams | None, asset: str, anchor: str) -> str:
    if inverted is None:
        return ""
    return (
        f"**Inverse of**: [s{asset}](#{anchor})\n\n"
        "| Entry Point | Upper Limit | Lower Limit |\n"
        "| - | - | - |\n"
        f"| ${format_amount(inverted.entry_point)} "
        f"| ${format_amount(inverted.upper_limit)} "
        f"| ${format_amount(inverted.lower_limit)}|\n\n"
    )


def index_parameters(
    index: Sequence[IndexComponent] | None,
    inverted: bool,
    asset: str,
    anchor: str,
) -> str:
    if not index:
        return ""
    header = f"**Index of**: [s{asset}](#{anchor})\n\n"
    if inverted:
        # the long asset's section carries the composition table
        return header
    rows = "".join(
        f"| {item.name} | {item.symbol} | {format_amount(item.units)} |\n" for item in index
    )
    return header + "| Token | Symbol | Units |\n| - | - | - |\n" + rows + "\n"
