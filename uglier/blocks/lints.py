# Lint rulesets: stylistic rules (lints-js) and JSDoc requirements (lints-jsdoc).

from __future__ import annotations

from typing import Any, Dict

from uglier.blocks.base import Block

JS_FILES = ("**/*.{js,mjs,cjs}",)

# keyword-spacing exceptions: control statements first, then keywords
_KEYWORD_SPACING_OVERRIDES: Dict[str, Dict[str, bool]] = {
    "return": {"before": True, "after": True},
    "if": {"after": False},
    "else": {"before": True, "after": True},
    "for": {"after": False},
    "while": {"before": True, "after": False},
    "do": {"after": True},
    "switch": {"after": False},
    "case": {"before": True, "after": True},
    "throw": {"before": True, "after": False},
    "as": {"before": True, "after": True},
    "of": {"before": True, "after": True},
    "from": {"before": True, "after": True},
    "async": {"before": True, "after": True},
    "await": {"before": True, "after": False},
    "class": {"before": True, "after": True},
    "const": {"before": True, "after": True},
    "let": {"before": True, "after": True},
    "var": {"before": True, "after": True},
    "catch": {"before": True, "after": True},
    "finally": {"before": True, "after": True},
}

_PADDED_STATEMENTS = ("if", "while", "for", "switch", "do", "directive")


def _padding_rule() -> list:
    entries: list = ["error"]
    for prev in _PADDED_STATEMENTS:
        entries.append({"blankLine": "always", "prev": prev, "next": "*"})
        if prev == "if":
            entries.append({"blankLine": "always", "prev": "*", "next": "return"})
    entries.append({"blankLine": "any", "prev": "directive", "next": "directive"})
    return entries


class LintsJsBlock(Block):
    id = "lints-js"
    description = "Core stylistic linting rules"
    files = JS_FILES

    def build(self, options: Dict[str, Any]) -> Dict[str, Any]:
        indent = options.get("indent", 2)
        max_len = options.get("maxLen", 80)

        rules: Dict[str, Any] = {
            "@stylistic/arrow-parens": ["error", "as-needed"],
            "@stylistic/arrow-spacing": ["error", {"before": True, "after": True}],
            "@stylistic/brace-style": ["error", "1tbs", {"allowSingleLine": False}],
            "@stylistic/nonblock-statement-body-position": ["error", "below"],
            "@stylistic/padding-line-between-statements": _padding_rule(),
            "@stylistic/eol-last": ["error", "always"],
            "@stylistic/indent": ["error", indent, {"SwitchCase": 1}],
            "@stylistic/key-spacing": ["error", {"beforeColon": False, "afterColon": True}],
            "@stylistic/keyword-spacing": ["error", {
                "before": False,
                "after": True,
                "overrides": dict(_KEYWORD_SPACING_OVERRIDES),
            }],
            "@stylistic/space-before-blocks": ["error", "always"],
            "@stylistic/max-len": ["warn", {
                "code": max_len,
                "ignoreComments": True,
                "ignoreUrls": True,
                "ignoreStrings": True,
                "ignoreTemplateLiterals": True,
                "ignoreRegExpLiterals": True,
                "tabWidth": indent,
            }],
            "@stylistic/no-tabs": "error",
            "@stylistic/no-trailing-spaces": ["error"],
            "@stylistic/object-curly-spacing": ["error", "never", {
                "objectsInObjects": False,
                "arraysInObjects": False,
            }],
            "@stylistic/quotes": ["error", "double", {
                "avoidEscape": True,
                "allowTemplateLiterals": True,
            }],
            "@stylistic/semi": ["error", "never"],
            "@stylistic/space-before-function-paren": ["error", "never"],
            "@stylistic/yield-star-spacing": ["error", {"before": True, "after": False}],
            "constructor-super": "error",
            "no-unexpected-multiline": "error",
            "no-unused-vars": ["error", {
                "caughtErrors": "all",
                "caughtErrorsIgnorePattern": "^_+",
                "argsIgnorePattern": "^_+",
                "destructuredArrayIgnorePattern": "^_+",
                "varsIgnorePattern": "^_+",
            }],
            "no-useless-assignment": "error",
            "prefer-const": "error",
            "@stylistic/no-multiple-empty-lines": ["error", {"max": 1}],
            "@stylistic/array-bracket-spacing": ["error", "never"],
        }
        rules.update(options.get("overrides", {}))

        return {
            "name": self.config_name(),
            "files": self.resolve_files(options),
            "plugins": {"@stylistic": "@stylistic/eslint-plugin"},
            "rules": rules,
        }


class LintsJsdocBlock(Block):
    id = "lints-jsdoc"
    description = "JSDoc linting rules"
    files = JS_FILES

    def build(self, options: Dict[str, Any]) -> Dict[str, Any]:
        rules: Dict[str, Any] = {
            "jsdoc/require-description": "error",
            "jsdoc/tag-lines": ["error", "any", {"startLines": 1}],
            "jsdoc/require-jsdoc": ["error", {"publicOnly": True}],
            "jsdoc/check-tag-names": "error",
            "jsdoc/check-types": "error",
            "jsdoc/require-param-type": "error",
            "jsdoc/require-returns-type": "error",
        }
        rules.update(options.get("overrides", {}))

        return {
            "name": self.config_name(),
            "files": self.resolve_files(options),
            "plugins": {"jsdoc": "eslint-plugin-jsdoc"},
            "rules": rules,
        }
