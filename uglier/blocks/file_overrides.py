# File-type overrides: CommonJS (.cjs) and ES module (.mjs) handling.

from __future__ import annotations

from typing import Any, Dict

from uglier.blocks.base import Block


class _SourceTypeBlock(Block):
    source_type: str

    def build(self, options: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "name": self.config_name(),
            "files": self.resolve_files(options),
            "languageOptions": {
                "sourceType": self.source_type,
                "ecmaVersion": 2021,
            },
        }


class CjsOverrideBlock(_SourceTypeBlock):
    id = "cjs-override"
    description = "CommonJS file override"
    files = ("**/*.cjs",)
    source_type = "script"


class MjsOverrideBlock(_SourceTypeBlock):
    id = "mjs-override"
    description = "ES Module file override"
    files = ("**/*.mjs",)
    source_type = "module"
