from __future__ import annotations

"""
Tool configuration: where the generated file lives and what gets installed.

Everything that used to be a hardcoded constant in the CLI is collected here
so operations and tests can point the tool at a temporary project directory.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

PACKAGE_NAME = "@gesslar/uglier"
CONFIG_FILE_NAME = "eslint.config.js"
CONFIG_FILE_ENV = "UGLIER_CONFIG_FILE"

# Only peer dependencies need to be installed next to the package.
PEER_DEPS: Tuple[str, ...] = ("eslint",)

# Lint rulesets every generated file starts with.
DEFAULT_LINT_TARGETS: Tuple[str, ...] = ("lints-js", "lints-jsdoc")

DOCS_URL = "https://github.com/gesslar/uglier#readme"


@dataclass
class Config:
    """
    Settings shared by the CLI commands.

    cwd is the project root; the generated file and package.json are looked
    up relative to it.
    """

    cwd: Path = field(default_factory=Path.cwd)
    config_file_name: str = CONFIG_FILE_NAME
    package_name: str = PACKAGE_NAME
    peer_deps: Tuple[str, ...] = PEER_DEPS
    default_targets: Tuple[str, ...] = DEFAULT_LINT_TARGETS

    @property
    def config_path(self) -> Path:
        return self.cwd / self.config_file_name

    @property
    def package_json_path(self) -> Path:
        return self.cwd / "package.json"


def get_default_config(cwd: Optional[Path] = None) -> Config:
    """
    Return the default configuration rooted at cwd (or the process cwd).

    UGLIER_CONFIG_FILE overrides the name of the generated file.
    """
    config = Config(cwd=cwd if cwd is not None else Path.cwd())
    file_name = os.environ.get(CONFIG_FILE_ENV)
    if file_name:
        config.config_file_name = file_name
    return config
