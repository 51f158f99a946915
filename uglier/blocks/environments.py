# Environment blocks: language options and the global variables each runtime
# (browser, Node.js, React, Tauri, VSCode webviews) provides.

from __future__ import annotations

from typing import Any, Dict

from uglier.blocks.base import Block

READONLY = "readonly"

# Subsets of the `globals` package presets that matter for linting app code.
BROWSER_GLOBALS: Dict[str, str] = {
    name: READONLY
    for name in (
        "window", "document", "navigator", "location", "history", "console",
        "localStorage", "sessionStorage", "fetch", "Headers", "Request",
        "Response", "URL", "URLSearchParams", "setTimeout", "clearTimeout",
        "setInterval", "clearInterval", "requestAnimationFrame", "Event",
        "CustomEvent", "HTMLElement", "Node", "FormData", "Blob", "WebSocket",
    )
}

NODE_GLOBALS: Dict[str, str] = {
    name: READONLY
    for name in (
        "process", "require", "module", "exports", "__dirname", "__filename",
        "Buffer", "global", "console", "setTimeout", "clearTimeout",
        "setInterval", "clearInterval", "setImmediate", "clearImmediate",
        "URL", "URLSearchParams", "structuredClone",
    )
}


class _GlobalsBlock(Block):
    """Block that only contributes `languageOptions.globals`."""

    base_globals: Dict[str, str] = {}

    def build(self, options: Dict[str, Any]) -> Dict[str, Any]:
        globals_ = dict(self.base_globals)
        globals_.update(options.get("additionalGlobals", {}))
        return {
            "name": self.config_name(),
            "files": self.resolve_files(options),
            "languageOptions": {"globals": globals_},
        }


class LanguageOptionsBlock(Block):
    id = "languageOptions"
    description = "Base ECMAScript language configuration"

    def build(self, options: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "name": self.config_name(),
            "languageOptions": {
                "ecmaVersion": options.get("ecmaVersion", "latest"),
                "sourceType": options.get("sourceType", "module"),
                "globals": dict(options.get("additionalGlobals", {})),
            },
        }


class WebBlock(_GlobalsBlock):
    id = "web"
    description = "Browser/web globals configuration"
    files = ("src/**/*.{js,mjs,cjs}",)
    base_globals = BROWSER_GLOBALS


class VscodeExtensionBlock(_GlobalsBlock):
    id = "vscode-extension"
    description = "VSCode extension globals"
    files = ("src/**/*.{js,mjs,cjs}",)
    base_globals = {"acquireVsCodeApi": READONLY}


class NodeBlock(_GlobalsBlock):
    id = "node"
    description = "Node.js globals"
    files = ("**/*.{js,mjs,cjs}",)
    base_globals = {**NODE_GLOBALS, "fetch": READONLY, "Headers": READONLY}


class ReactBlock(_GlobalsBlock):
    id = "react"
    description = "React/JSX browser configuration"
    files = ("**/*.{js,jsx,mjs,cjs}",)
    base_globals = BROWSER_GLOBALS

    def build(self, options: Dict[str, Any]) -> Dict[str, Any]:
        config = super().build(options)
        config["languageOptions"]["parserOptions"] = {
            "ecmaFeatures": {"jsx": True},
        }
        return config


class TauriBlock(_GlobalsBlock):
    id = "tauri"
    description = "Tauri application configuration (browser + Tauri APIs, no Node.js)"
    files = ("src/**/*.{js,mjs,cjs}",)
    base_globals = {
        **BROWSER_GLOBALS,
        "__TAURI__": READONLY,
        "__TAURI_METADATA__": READONLY,
    }
