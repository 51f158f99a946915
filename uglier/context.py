# Per-file state for config edits: path, raw text, and the parsed `with` array.
# Reading happens once per operation; the engine works on the text in memory.
# Text is read and written as raw UTF-8 so line endings survive a rewrite.

import logging
from pathlib import Path
from typing import List, Optional

from uglier.engine.parser import parse_targets

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read path as UTF-8 without newline translation."""
    return path.read_bytes().decode("utf-8")


def write_text(path: Path, text: str) -> None:
    """Write text to path as UTF-8 without newline translation."""
    path.write_bytes(text.encode("utf-8"))


class ConfigFileContext:
    """
    A generated config file loaded into memory.

    Operations use context.text for rewriting and context.targets for the
    current `with` list. is_parseable is False when no multi-line `with`
    array (or no target in it) was found.
    """

    def __init__(self, path: Path, text: str) -> None:
        self.path = path
        self.text = text
        self.targets: List[str] = parse_targets(text)

    @property
    def is_parseable(self) -> bool:
        return bool(self.targets)

    def write(self, text: str) -> None:
        """Replace the file contents with text."""
        write_text(self.path, text)
        self.text = text
        logger.info("Wrote %s (%d bytes)", self.path, len(text.encode("utf-8")))


def load_config_file(path: Path) -> Optional[ConfigFileContext]:
    """
    Read a config file into a ConfigFileContext.

    - Missing file: returns None (callers report "not found").
    - Unparseable text: still returns a context with is_parseable=False.
    - Any other I/O failure (permissions, bad encoding) propagates.
    """
    if not path.is_file():
        logger.debug("Config file %s does not exist", path)
        return None

    ctx = ConfigFileContext(path=path, text=read_text(path))
    if not ctx.is_parseable:
        logger.warning("Could not find a multi-line `with` array in %s", path)
    else:
        logger.info("Loaded %s: %d target(s)", path, len(ctx.targets))
    return ctx
