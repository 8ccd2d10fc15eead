"""
Persistence of report text.

Both directions are exact passthroughs: the text written is the text
read back, byte for byte (UTF-8, no newline translation).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def write_report(text: str, directory: Union[str, Path], name: str, suffix: str = ".txt") -> Path:
    """
    Write report text to ``directory/name + suffix``.

    Args:
        text:      Formatted report text
        directory: Destination directory (created if missing)
        name:      File stem
        suffix:    File extension

    Returns:
        The written path.
    """
    path = Path(directory) / f"{name}{suffix}"
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)
    logger.debug("Wrote report %s (%d characters)", path, len(text))
    return path


def read_report(path: Union[str, Path]) -> str:
    """
    Read report text written by write_report().

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Report file not found: {path}")
    with path.open("r", encoding="utf-8", newline="") as f:
        return f.read()


__all__ = ["write_report", "read_report"]
