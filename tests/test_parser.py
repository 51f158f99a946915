"""Tests for uglier.engine.parser: locating the with array and reading targets."""

from uglier.engine.parser import find_with_array, parse_target_lines, parse_targets
from uglier.engine.rewriter import render_config


def test_parse_generated_config_round_trip():
    targets = ["lints-js", "lints-jsdoc", "node", "web"]
    text = render_config(targets, {"node": '["**/*.{js,mjs,cjs}"]'})
    assert parse_targets(text) == targets


def test_parse_config_with_overrides(fixture_text):
    assert parse_targets(fixture_text("config-with-overrides.js")) == ["lints-js", "node", "react"]


def test_parse_messy_config_ignores_comments(fixture_text):
    targets = parse_targets(fixture_text("messy-config.js"))
    assert targets == ["lints-js", "lints-jsdoc", "node", "web", "react"]


def test_parse_weird_spacing_skips_blank_lines(fixture_text):
    assert parse_targets(fixture_text("weird-spacing-config.js")) == ["lints-js", "node", "react"]


def test_parse_mixed_quotes(fixture_text):
    targets = parse_targets(fixture_text("string-variations-config.js"))
    assert targets == ["lints-js", "lints-jsdoc", "node", "web", "react"]


def test_single_line_with_array_is_not_recognized(fixture_text):
    text = fixture_text("single-line-config.js")
    assert find_with_array(text) is None
    assert parse_targets(text) == []


def test_missing_with_key():
    assert parse_targets("export default []\n") == []


def test_parse_target_lines_skips_stray_lines():
    interior = '\n  "a",\n  ,\n\n  // note\n  \'b\' // x\n'
    assert parse_target_lines(interior) == ["a", "b"]


def test_with_array_interior_stops_at_first_closing_line():
    text = 'with: [\n  "a",\n  "b",\n]\nother: [\n  "c"\n]\n'
    match = find_with_array(text)
    assert match is not None
    assert match.group(1) == '\n  "a",\n  "b",'
