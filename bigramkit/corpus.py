#!/usr/bin/env python3
"""
Corpus Loading
==============
Reads newline-delimited name lists (one name per line, UTF-8).
"""

import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def parse_names(text: str, keep_blank: bool = False) -> list[str]:
    """
    Split corpus text into names.

    Args:
        text: File contents
        keep_blank: Keep empty lines (they normalize to '..')
    """
    names = text.split('\n')
    names = [n.rstrip('\r') for n in names]
    if not keep_blank:
        names = [n for n in names if n.strip()]
    return names


def load_names(path: Union[str, Path], keep_blank: bool = False) -> list[str]:
    """
    Load a name corpus from disk.

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus not found: {path}")
    names = parse_names(path.read_text(encoding='utf-8'), keep_blank=keep_blank)
    logger.debug(f"Loaded {len(names)} names from {path}")
    return names


__all__ = ["load_names", "parse_names"]
