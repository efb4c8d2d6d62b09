"""Output of the rendered page.

The page is only written once fully assembled, and replaces the previous
file in one step (temp file + rename), so a failed build leaves the old page
untouched.
"""

import logging
from pathlib import Path

LOGGER = logging.getLogger(__name__)


def write_page(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(content, encoding="utf-8")
    tmp.replace(path)
    LOGGER.info("Wrote %s (%d bytes)", path, len(content.encode("utf-8")))


def page_is_current(path: Path, content: str) -> bool:
    """True when `path` already holds exactly `content`"""
    if not path.exists():
        return False
    return path.read_text(encoding="utf-8") == content
