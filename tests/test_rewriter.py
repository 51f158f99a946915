"""Tests for uglier.engine.rewriter: rendering, appending and rebuilding targets."""

import pytest

from uglier.engine.parser import find_with_array, parse_targets
from uglier.engine.rewriter import (
    add_targets,
    remove_targets,
    render_config,
    render_target_line,
)
from uglier.errors import EmptyTargetListError, UnparseableConfigError

PATTERNS = {
    "lints-js": '["**/*.{js,mjs,cjs}"]',
    "node": '["**/*.{js,mjs,cjs}"]',
    "web": '["src/**/*.{js,mjs,cjs}"]',
    "tauri": '["src/**/*.{js,mjs,cjs}"]',
}


def _outside_with(text: str) -> tuple[str, str]:
    match = find_with_array(text)
    assert match is not None
    return text[: match.start()], text[match.end() :]


def test_render_target_line_uses_pattern():
    line = render_target_line("node", PATTERNS)
    assert line == '      "node", // default files: ["**/*.{js,mjs,cjs}"]'


def test_render_target_line_unknown_falls_back_to_empty_array():
    assert render_target_line("mystery", PATTERNS).endswith("// default files: []")


def test_render_config_shape():
    text = render_config(["lints-js", "node"], PATTERNS)
    assert text.startswith('import uglify from "@gesslar/uglier"\n\nexport default [\n  ...uglify({\n')
    assert "    with: [\n" in text
    assert text.endswith("    ]\n  })\n]\n")


def test_add_appends_in_request_order(fixture_text):
    text = fixture_text("config-with-overrides.js")
    result = add_targets(text, ["web", "tauri"], PATTERNS)
    assert parse_targets(result) == ["lints-js", "node", "react", "web", "tauri"]


def test_add_leaves_text_outside_with_region_untouched(fixture_text):
    text = fixture_text("messy-config.js")
    result = add_targets(text, ["tauri"], PATTERNS)
    assert _outside_with(result) == _outside_with(text)
    # hand-written comments inside the array survive an add
    assert "// React + JSX support" in result


def test_add_inserts_comma_when_interior_has_none():
    text = 'export default [\n  ...uglify({\n    with: [\n      "node"\n    ]\n  })\n]\n'
    result = add_targets(text, ["web"], PATTERNS)
    assert '"node",\n' in result
    assert parse_targets(result) == ["node", "web"]


def test_add_uses_file_line_ending():
    text = 'export default [\r\n  ...uglify({\r\n    with: [\r\n      "node"\r\n    ]\r\n  })\r\n]\r\n'
    result = add_targets(text, ["web"], PATTERNS)
    assert '"node",\r\n      "web", // default files: ["src/**/*.{js,mjs,cjs}"]\r\n    ]' in result
    assert "\n" not in result.replace("\r\n", "")
    assert _outside_with(result) == _outside_with(text)


def test_remove_uses_file_line_ending():
    text = render_config(["lints-js", "node", "web"], PATTERNS).replace("\n", "\r\n")
    edit = remove_targets(text, ["lints-js", "web"], ["node"], PATTERNS)
    assert "\n" not in edit.text.replace("\r\n", "")
    assert parse_targets(edit.text) == ["lints-js", "web"]


def test_add_without_new_targets_returns_text():
    text = render_config(["node"], PATTERNS)
    assert add_targets(text, [], PATTERNS) == text


def test_add_unparseable_raises(fixture_text):
    with pytest.raises(UnparseableConfigError):
        add_targets(fixture_text("single-line-config.js"), ["web"], PATTERNS)


def test_remove_rebuilds_array_in_file_order(fixture_text):
    text = fixture_text("messy-config.js")
    edit = remove_targets(text, ["lints-js", "node", "web"], ["lints-jsdoc", "react"], PATTERNS)
    assert parse_targets(edit.text) == ["lints-js", "node", "web"]
    # rebuilt lines use the generated comment, not the hand-written one
    assert "// Node.js environment globals" not in edit.text
    assert '"node", // default files: ["**/*.{js,mjs,cjs}"]' in edit.text


def test_remove_all_targets_raises(fixture_text):
    with pytest.raises(EmptyTargetListError):
        remove_targets(fixture_text("config-with-overrides.js"), [], ["lints-js"], PATTERNS)


def test_remove_unparseable_raises(fixture_text):
    with pytest.raises(UnparseableConfigError):
        remove_targets(fixture_text("single-line-config.js"), ["node"], ["web"], PATTERNS)


def test_remove_example_scenario(fixture_text):
    text = fixture_text("config-with-overrides.js")
    edit = remove_targets(text, ["lints-js", "node"], ["react"], PATTERNS)

    assert parse_targets(edit.text) == ["lints-js", "node"]
    assert edit.removed_overrides == ["react"]
    assert '"node": {\n        files: ["server/**/*.js"]\n      }' in edit.text
    assert '"react"' not in edit.text
