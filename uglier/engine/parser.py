# Target-list parsing: locate the `with: [ ... ]` array in generated config
# text and read the target names listed in it.

import logging
import re
from typing import List, Optional

logger = logging.getLogger(__name__)

# The closing bracket has to start its own line, so a `with` array written on
# a single line is not recognized. Generated files never look like that.
WITH_ARRAY_RE = re.compile(r"with:\s*\[([\s\S]*?)\n\s*\]", re.MULTILINE)

# First quoted token at the start of a line, either quote style.
_TARGET_LINE_RE = re.compile(r"""^\s*(['"])([^'"]+)\1""")


def find_with_array(text: str) -> Optional[re.Match]:
    """
    Return the match for the `with` array, or None if there is none.

    Group 1 is the interior of the array: everything after `[` up to (not
    including) the newline that precedes the closing `]`.
    """
    return WITH_ARRAY_RE.search(text)


def parse_target_lines(interior: str) -> List[str]:
    """Extract target names from the interior text of a `with` array."""
    targets: List[str] = []
    for line in interior.split("\n"):
        match = _TARGET_LINE_RE.match(line)
        if match:
            targets.append(match.group(2))
    return targets


def parse_targets(text: str) -> List[str]:
    """
    Parse the ordered list of targets from full config text.

    Args:
        text: Source of a generated config file.

    Returns:
        Target names in file order. Empty if no multi-line `with` array was
        found, which callers treat as "could not parse existing config".
    """
    match = find_with_array(text)
    if match is None:
        logger.debug("No multi-line `with` array found")
        return []
    targets = parse_target_lines(match.group(1))
    logger.debug("Parsed %d target(s): %s", len(targets), ", ".join(targets))
    return targets
