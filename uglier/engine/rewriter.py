# Rendering and rewriting of the `with` array: generate a new config file,
# append targets to an existing one, rebuild the array after a removal.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Sequence

from uglier.config import PACKAGE_NAME
from uglier.engine.overrides import strip_overrides
from uglier.engine.parser import find_with_array
from uglier.errors import EmptyTargetListError, UnparseableConfigError

logger = logging.getLogger(__name__)

EMPTY_PATTERN = "[]"
TARGET_INDENT = "      "
CLOSE_INDENT = "    "

CONFIG_TEMPLATE = """import uglify from "{package_name}"

export default [
  ...uglify({{
    {with_array}
  }})
]
"""


@dataclass
class RemovalEdit:
    """New config text after a removal, plus the override entries cut out."""

    text: str
    removed_overrides: List[str] = field(default_factory=list)


def render_target_line(name: str, patterns: Mapping[str, str]) -> str:
    pattern = patterns.get(name) or EMPTY_PATTERN
    return f'{TARGET_INDENT}"{name}", // default files: {pattern}'


def render_with_array(names: Sequence[str], patterns: Mapping[str, str]) -> str:
    lines = "\n".join(render_target_line(name, patterns) for name in names)
    return f"with: [\n{lines}\n{CLOSE_INDENT}]"


def render_config(
    names: Sequence[str],
    patterns: Mapping[str, str],
    package_name: str = PACKAGE_NAME,
) -> str:
    """Render a complete config file listing names in the `with` array."""
    return CONFIG_TEMPLATE.format(
        package_name=package_name,
        with_array=render_with_array(names, patterns),
    )


def _line_ending(region: str) -> str:
    """The newline sequence used inside the matched `with` region."""
    return "\r\n" if "\r\n" in region else "\n"


def add_targets(
    text: str,
    new_targets: Sequence[str],
    patterns: Mapping[str, str],
) -> str:
    """
    Append new_targets to the `with` array of text.

    The existing entries (including any hand-written comments) are kept as
    they are and the new lines go after them. If the array interior holds no
    comma at all, one is added after the last existing entry first. Text
    outside the `with: [ ... ]` region is not touched.

    Raises:
        UnparseableConfigError: text has no multi-line `with` array.
    """
    match = find_with_array(text)
    if match is None:
        raise UnparseableConfigError("No multi-line `with` array found")
    if not new_targets:
        return text

    newline = _line_ending(match.group(0))
    interior = match.group(1)
    if interior.endswith("\r"):
        interior = interior[:-1]
    if interior.rfind(",") == -1:
        interior = interior.rstrip() + ","

    new_lines = newline.join(render_target_line(name, patterns) for name in new_targets)
    region = f"with: [{interior}{newline}{new_lines}{newline}{CLOSE_INDENT}]"
    logger.debug("Appending %d target(s) to `with` array", len(new_targets))
    return text[: match.start()] + region + text[match.end() :]


def remove_targets(
    text: str,
    remaining: Sequence[str],
    removed: Sequence[str],
    patterns: Mapping[str, str],
) -> RemovalEdit:
    """
    Rebuild the `with` array from remaining and strip overrides for removed.

    The array is regenerated from scratch, so custom comments on the kept
    lines are replaced by the standard "default files" comment.

    Raises:
        EmptyTargetListError: remaining is empty.
        UnparseableConfigError: text has no multi-line `with` array.
    """
    if not remaining:
        raise EmptyTargetListError("At least one target must remain")

    match = find_with_array(text)
    if match is None:
        raise UnparseableConfigError("No multi-line `with` array found")

    region = render_with_array(remaining, patterns).replace("\n", _line_ending(match.group(0)))
    text = text[: match.start()] + region + text[match.end() :]
    text, removed_overrides = strip_overrides(text, removed)
    return RemovalEdit(text=text, removed_overrides=removed_overrides)
