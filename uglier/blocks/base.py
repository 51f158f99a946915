# Block interface (abstract base class): the contract every named config block
# implements. Concrete blocks (lints-js, node, tauri, ...) subclass Block and
# implement build().

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field

NAME_PREFIX = "gesslar/uglier/"


class BlockInfo(BaseModel):
    """Registry entry as seen by the CLI: name, description, default files."""

    name: str
    description: str
    files: Optional[List[str]] = Field(None, description="Default file globs")

    @property
    def files_literal(self) -> Optional[str]:
        """The default file globs as they appear in generated config text."""
        if self.files is None:
            return None
        return json.dumps(self.files)


def as_file_list(files: Union[str, Sequence[str]]) -> List[str]:
    if isinstance(files, str):
        return [files]
    return list(files)


class Block(ABC):
    """
    Abstract base class for all named config blocks.

    Subclasses must define:
    - id (str): name used in `with` arrays (e.g. "lints-js")
    - description (str): one-line summary shown by `uglier list`
    - files: default file globs, or None for blocks that apply everywhere
    - build(options) -> dict: the ESLint flat-config object for this block
    """

    id: str
    description: str
    files: Optional[Sequence[str]] = None

    def info(self) -> BlockInfo:
        return BlockInfo(
            name=self.id,
            description=self.description,
            files=list(self.files) if self.files is not None else None,
        )

    def config_name(self) -> str:
        return NAME_PREFIX + self.id

    def resolve_files(self, options: Dict[str, Any]) -> List[str]:
        """Files from options (string or list), falling back to the defaults."""
        return as_file_list(options.get("files", self.files or []))

    @abstractmethod
    def build(self, options: Dict[str, Any]) -> Dict[str, Any]:
        """
        Build the flat-config object for this block.

        Args:
            options: Per-block options taken from the `overrides` map
                     (files, indent, additional_globals, ...).

        Returns:
            A JSON-serializable ESLint config object.
        """
        ...
