from __future__ import annotations

"""
Block registry: which config blocks exist and how they are composed.

The registry is the lookup table the text engine is fed with (name -> default
file pattern literal) and the place `compose()` resolves `with` names from.
Operations take a Registry argument so tests can swap in a smaller one.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from uglier.blocks.base import Block, BlockInfo
from uglier.blocks.environments import (
    LanguageOptionsBlock,
    NodeBlock,
    ReactBlock,
    TauriBlock,
    VscodeExtensionBlock,
    WebBlock,
)
from uglier.blocks.file_overrides import CjsOverrideBlock, MjsOverrideBlock
from uglier.blocks.lints import LintsJsBlock, LintsJsdocBlock
from uglier.errors import UnknownBlockError

logger = logging.getLogger(__name__)

LINT_PREFIX = "lints-"
BASE_LANGUAGE_OPTIONS = "languageOptions"
OVERRIDE_SUFFIX = "-override"


def is_environment_target(name: str) -> bool:
    """Environments are everything that is not a lint ruleset or a file override."""
    return not (
        name.startswith(LINT_PREFIX)
        or name == BASE_LANGUAGE_OPTIONS
        or name.endswith(OVERRIDE_SUFFIX)
    )


class Registry:
    """Ordered collection of blocks keyed by name."""

    def __init__(self, blocks: Iterable[Block]) -> None:
        self._blocks: Dict[str, Block] = {}
        for block in blocks:
            self._blocks[block.id] = block

    def __contains__(self, name: object) -> bool:
        return name in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)

    @property
    def names(self) -> List[str]:
        return list(self._blocks)

    def get(self, name: str) -> Block:
        try:
            return self._blocks[name]
        except KeyError:
            raise UnknownBlockError(name, self.names) from None

    def infos(self) -> List[BlockInfo]:
        return [block.info() for block in self._blocks.values()]

    def file_patterns(self) -> Dict[str, str]:
        """Map of name -> default files literal, for blocks that have one."""
        patterns: Dict[str, str] = {}
        for info in self.infos():
            literal = info.files_literal
            if literal is not None:
                patterns[info.name] = literal
        return patterns

    def environment_targets(self) -> List[str]:
        return [name for name in self._blocks if is_environment_target(name)]

    def compose(
        self,
        with_: Sequence[str],
        without: Sequence[str] = (),
        overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Build the flat-config array for the named blocks.

        Args:
            with_: Block names to include, in order.
            without: Names to leave out even if listed in with_.
            overrides: Per-block options, keyed by block name.

        Returns:
            One config object per included block.

        Raises:
            UnknownBlockError: a name in with_ is not registered.
        """
        overrides = overrides or {}
        configs: List[Dict[str, Any]] = []
        for name in with_:
            if name in without:
                logger.debug("Skipping %s (excluded)", name)
                continue
            block = self.get(name)
            configs.append(block.build(dict(overrides.get(name, {}))))
        return configs


def get_default_registry() -> Registry:
    """Return a registry holding every built-in block."""
    return Registry([
        LintsJsBlock(),
        LintsJsdocBlock(),
        LanguageOptionsBlock(),
        WebBlock(),
        VscodeExtensionBlock(),
        NodeBlock(),
        ReactBlock(),
        CjsOverrideBlock(),
        MjsOverrideBlock(),
        TauriBlock(),
    ])


def compose(
    with_: Sequence[str] = ("lints-js", "lints-jsdoc"),
    without: Sequence[str] = (),
    overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
) -> List[Dict[str, Any]]:
    """Compose blocks from the default registry (the `uglify(...)` call)."""
    return get_default_registry().compose(with_, without=without, overrides=overrides)
