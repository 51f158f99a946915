# Override-block removal: find `"name": { ... }` entries by brace counting,
# cut them out of the text and tidy up the separators left behind.

from __future__ import annotations

import logging
import re
from typing import List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

_OVERRIDES_RE = re.compile(r"overrides:\s*\{", re.MULTILINE)

# `}` directly followed by another `"key": {` with no comma in between.
_MISSING_SEPARATOR_RE = re.compile(r"""\}(\s*["'][\w-]+["']:\s*\{)""")
_EMPTY_OVERRIDES_RE = re.compile(r"overrides:\s*\{\s*,?\s*\}", re.MULTILINE)
_DANGLING_COMMA_RE = re.compile(r",(\s*)\}")


def has_overrides(text: str) -> bool:
    """True if an `overrides: {` object appears anywhere in text."""
    return _OVERRIDES_RE.search(text) is not None


def _override_key_pattern(name: str) -> re.Pattern:
    # Leading separators and one comment line directly above the key belong
    # to the entry and go with it.
    return re.compile(
        r"""[\s,]*(?://[^\n]*\n\s*)?["']""" + re.escape(name) + r"""["']:\s*\{"""
    )


def _matching_brace(text: str, open_pos: int) -> int:
    """
    Return the index just past the `}` that balances the `{` at open_pos.

    Returns -1 if the braces never balance.
    """
    depth = 0
    for i in range(open_pos, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return -1


def find_override_block(text: str, name: str) -> Optional[Tuple[int, int]]:
    """
    Locate the override entry for name.

    Returns (start, end) such that text[start:end] is the entry including any
    leading separators/comment and a single trailing comma, or None when the
    name has no override entry (or its braces never balance).
    """
    match = _override_key_pattern(name).search(text)
    if match is None:
        return None

    end = _matching_brace(text, match.end() - 1)
    if end == -1:
        logger.warning("Override block for %s has unbalanced braces; leaving it", name)
        return None
    if end < len(text) and text[end] == ",":
        end += 1
    return match.start(), end


def normalize_overrides(text: str) -> str:
    """Repair separators and drop an `overrides` object left empty."""
    text = _MISSING_SEPARATOR_RE.sub(r"},\1", text)
    text = _EMPTY_OVERRIDES_RE.sub("", text, count=1)
    text = _DANGLING_COMMA_RE.sub(r"\1}", text)
    return text


def strip_overrides(text: str, names: Sequence[str]) -> Tuple[str, List[str]]:
    """
    Remove the override entries for names from text.

    Names are handled in the order given; each lookup runs on the text as
    already modified by the previous removals. Returns the new text and the
    names whose entries were actually removed. Text without an `overrides`
    object is returned unchanged.
    """
    if not has_overrides(text):
        return text, []

    removed: List[str] = []
    for name in names:
        span = find_override_block(text, name)
        if span is None:
            logger.debug("No override entry for %s", name)
            continue
        start, end = span
        text = text[:start] + text[end:]
        removed.append(name)
        logger.debug("Removed override entry for %s (%d chars)", name, end - start)

    return normalize_overrides(text), removed
