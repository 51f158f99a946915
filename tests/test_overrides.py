"""Tests for uglier.engine.overrides: brace-matched block removal and cleanup."""

import re

from uglier.engine.overrides import (
    find_override_block,
    has_overrides,
    normalize_overrides,
    strip_overrides,
)
from uglier.engine.parser import parse_targets
from uglier.engine.rewriter import remove_targets

SIMPLE = """    overrides: {
      "node": {
        files: ["server/**/*.js"]
      },
      "react": {
        files: ["client/**/*.js"]
      }
    }
"""


def _has_block(text: str, name: str) -> bool:
    return re.search(r"""["']""" + re.escape(name) + r"""["']:\s*\{""", text) is not None


def test_has_overrides():
    assert has_overrides(SIMPLE)
    assert has_overrides("overrides:\n    {")
    assert not has_overrides('with: [\n  "node"\n]')


def test_find_block_includes_trailing_comma():
    start, end = find_override_block(SIMPLE, "node")
    block = SIMPLE[start:end]
    assert block.rstrip().endswith("},")
    assert '"react"' not in block


def test_find_block_missing_name():
    assert find_override_block(SIMPLE, "web") is None


def test_find_block_handles_nested_braces():
    text = """overrides: {
      "react": {
        files: ["client/**/*.{js,jsx}"],
        overrides: {
          "@stylistic/jsx-quotes": ["error", "prefer-double"]
        }
      },
      "web": {}
    }"""
    start, end = find_override_block(text, "react")
    removed = text[start:end]
    assert "jsx-quotes" in removed
    assert '"web": {}' in text[end:]


def test_find_block_unbalanced_braces_is_left_alone():
    text = 'overrides: {\n  "node": {\n    files: ["a"]\n'
    assert find_override_block(text, "node") is None
    assert strip_overrides(text, ["node"]) == (text, [])


def test_find_block_takes_comment_line_above_key():
    text = 'overrides: {\n  // why node differs\n  "node": {\n    indent: 4\n  }\n}'
    result, removed = strip_overrides(text, ["node"])
    assert removed == ["node"]
    assert "why node differs" not in result


def test_name_is_matched_literally():
    text = 'overrides: {\n  "vscodeXextension": {\n    files: []\n  }\n}'
    assert find_override_block(text, "vscode.extension") is None


def test_strip_middle_entry_repairs_separator():
    text = """overrides: {
      "node": {
        indent: 4
      },
      // react tweaks
      "react": {
        indent: 2
      },
      "web": {
        indent: 8
      }
    }"""
    result, removed = strip_overrides(text, ["react"])
    assert removed == ["react"]
    assert not _has_block(result, "react")
    assert re.search(r'\},\s*"web": \{', result)


def test_strip_without_overrides_object_is_noop():
    text = 'with: [\n  "node",\n]\n'
    assert strip_overrides(text, ["node"]) == (text, [])


def test_strip_follows_request_order():
    _, removed = strip_overrides(SIMPLE, ["react", "web", "node"])
    assert removed == ["react", "node"]


def test_strip_last_override_drops_overrides_key():
    text = """    with: [
      "lints-js",
      "node",
    ],
    overrides: {
      "node": {
        files: ["x/**/*.js"]
      }
    }
  })
"""
    edit = remove_targets(text, ["lints-js"], ["node"], {})
    assert edit.removed_overrides == ["node"]
    assert "overrides" not in edit.text
    assert parse_targets(edit.text) == ["lints-js"]
    # the comma that separated `with` from `overrides` goes as well
    assert not re.search(r"\],\s*\}\)", edit.text)


def test_normalize_inserts_missing_comma():
    text = 'overrides: {\n  "a": {\n  }\n  "b": {\n  }\n}'
    assert re.search(r'\},\s*"b": \{', normalize_overrides(text))


def test_normalize_collapses_empty_overrides():
    assert normalize_overrides("x: 1,\noverrides: { , }\n}") == "x: 1\n\n}"


def test_normalize_drops_dangling_commas():
    assert normalize_overrides('{\n  files: ["a"],\n}') == '{\n  files: ["a"]\n}'


def test_weird_spacing_removal(fixture_text):
    text = fixture_text("weird-spacing-config.js")
    edit = remove_targets(text, ["lints-js", "node"], ["react"], {})
    assert edit.removed_overrides == ["react"]
    assert not re.search(r'^\s*"react"', edit.text, re.MULTILINE)
    assert _has_block(edit.text, "node")


def test_quote_style_does_not_matter(fixture_text):
    text = fixture_text("string-variations-config.js")
    edit = remove_targets(text, ["lints-js", "lints-jsdoc", "web", "react"], ["node"], {})
    assert edit.removed_overrides == ["node"]
    assert not _has_block(edit.text, "node")
    assert _has_block(edit.text, "react")


def test_messy_multiple_removals_keep_unrelated_override(fixture_text):
    text = fixture_text("messy-config.js")
    edit = remove_targets(text, ["lints-js", "lints-jsdoc", "web"], ["node", "react"], {})
    assert sorted(edit.removed_overrides) == ["node", "react"]
    assert not _has_block(edit.text, "node")
    assert not _has_block(edit.text, "react")
    assert '"web": {\n        files: ["public/**/*.js"]\n      }' in edit.text
    # content after the uglify call is untouched
    assert '"no-console": "off"' in edit.text
