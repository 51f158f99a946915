from __future__ import annotations

"""
The three file operations behind the CLI: create, add to, and remove from a
generated config file.

Each call validates its input, reads the current file (add/remove), computes
the change with the text engine and writes the whole file back. Validation
and parse failures are reported on the console and returned as a False /
RemovalResult(success=False) sentinel; the file is left untouched in that
case. I/O errors are not caught here.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from rich.markup import escape

from uglier.blocks.registry import Registry, get_default_registry
from uglier.config import Config, get_default_config
from uglier.context import load_config_file, write_text
from uglier.engine.rewriter import add_targets, remove_targets, render_config
from uglier.installer import detect_package_manager
from uglier.reporting import console as report
from uglier.results.models import RemovalResult

logger = logging.getLogger(__name__)


def _unique(names: Iterable[str]) -> List[str]:
    """Drop repeated names, keeping the first occurrence."""
    seen: set[str] = set()
    result: List[str] = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
    return result


def _resolve(config: Optional[Config], registry: Optional[Registry]) -> tuple[Config, Registry]:
    return (
        config if config is not None else get_default_config(),
        registry if registry is not None else get_default_registry(),
    )


def _file_label(config: Config) -> str:
    return escape(config.config_file_name)


def _check_targets(
    targets: Sequence[str],
    registry: Registry,
    example: str,
) -> bool:
    """Report an empty or invalid target list; True if the targets are usable."""
    environments = registry.environment_targets()
    if not targets:
        report.print_no_targets(environments, example)
        return False

    invalid = [t for t in targets if t not in environments]
    if invalid:
        logger.debug("Rejected unknown targets: %s", ", ".join(invalid))
        report.print_invalid_targets(invalid, environments)
        return False
    return True


def _report_missing_file(config: Config) -> None:
    report.print_error(
        f"[bold]{_file_label(config)}[/bold] not found",
        f"Use [bold]npx {config.package_name} init <targets>[/bold] to create one first",
    )


def _report_unparseable() -> None:
    report.print_error(
        "Could not parse existing config",
        "The config file may have a non-standard format",
    )


def generate_config(
    targets: Sequence[str],
    config: Optional[Config] = None,
    registry: Optional[Registry] = None,
) -> bool:
    """
    Create a new config file with the default lint rulesets plus targets.

    Returns:
        True if the file was written; False if it already exists or the
        targets are empty or unknown.
    """
    config, registry = _resolve(config, registry)
    path = config.config_path

    if path.exists():
        report.print_error(
            f"[bold]{_file_label(config)}[/bold] already exists",
            f"Use [bold]npx {config.package_name} add <targets>[/bold] to add config blocks to it",
        )
        return False

    environments = registry.environment_targets()
    example = f"npx {config.package_name} init {environments[0] if environments else 'node'}"
    if not _check_targets(targets, registry, example):
        return False

    with_targets = _unique([*config.default_targets, *targets])
    text = render_config(with_targets, registry.file_patterns(), config.package_name)
    write_text(path, text)
    logger.info("Created %s with %d target(s)", path, len(with_targets))

    report.print_success(f"Created [bold]{_file_label(config)}[/bold]")
    report.print_target_list("Configuration includes:", with_targets)
    report.print_lint_hint(detect_package_manager(config.cwd).eslint_cmd)
    return True


def add_to_config(
    targets: Sequence[str],
    config: Optional[Config] = None,
    registry: Optional[Registry] = None,
) -> bool:
    """
    Append targets to the `with` array of an existing config file.

    Returns:
        True if at least one target was added; False if the file is missing
        or unparseable, the targets are empty or unknown, or every target is
        already present (the file is not modified).
    """
    config, registry = _resolve(config, registry)

    ctx = load_config_file(config.config_path)
    if ctx is None:
        _report_missing_file(config)
        return False

    if not _check_targets(targets, registry, f"npx {config.package_name} add react"):
        return False

    if not ctx.is_parseable:
        _report_unparseable()
        return False

    new_targets = [t for t in _unique(targets) if t not in ctx.targets]
    if not new_targets:
        report.print_warning("All specified targets already exist in config")
        report.print_current_targets(ctx.targets)
        return False

    ctx.write(add_targets(ctx.text, new_targets, registry.file_patterns()))

    report.print_success(f"Added config blocks to [bold]{_file_label(config)}[/bold]")
    report.print_target_list("Added targets:", new_targets)
    report.print_lint_hint(detect_package_manager(config.cwd).eslint_cmd)
    return True


def remove_from_config(
    targets: Sequence[str],
    config: Optional[Config] = None,
    registry: Optional[Registry] = None,
) -> RemovalResult:
    """
    Remove targets (and their override entries) from an existing config file.

    Requested names that are not in the file are reported but do not fail
    the call as long as at least one requested name is present. Removing
    every target is refused.
    """
    config, registry = _resolve(config, registry)

    ctx = load_config_file(config.config_path)
    if ctx is None:
        _report_missing_file(config)
        return RemovalResult.failure()

    if not targets:
        report.print_no_targets(
            registry.environment_targets(),
            f"npx {config.package_name} remove react",
        )
        return RemovalResult.failure()

    if not ctx.is_parseable:
        _report_unparseable()
        return RemovalResult.failure()

    requested = _unique(targets)
    to_remove = [t for t in requested if t in ctx.targets]
    not_found = [t for t in requested if t not in ctx.targets]

    if not_found:
        report.print_not_found(not_found)

    if not to_remove:
        report.print_error("None of the specified targets exist in config")
        report.print_current_targets(ctx.targets)
        return RemovalResult(success=False, not_found=not_found)

    remaining = [t for t in ctx.targets if t not in to_remove]
    if not remaining:
        report.print_error(
            "Cannot remove all targets from config",
            "At least one target must remain",
        )
        return RemovalResult(success=False, not_found=not_found)

    edit = remove_targets(ctx.text, remaining, to_remove, registry.file_patterns())
    ctx.write(edit.text)

    report.print_success(f"Removed config blocks from [bold]{_file_label(config)}[/bold]")
    report.print_target_list("Removed targets:", to_remove)
    if edit.removed_overrides:
        report.print_target_list("Also removed overrides for:", edit.removed_overrides)
    report.print_lint_hint(detect_package_manager(config.cwd).eslint_cmd)

    return RemovalResult(
        success=True,
        removed_targets=to_remove,
        removed_overrides=edit.removed_overrides,
        not_found=not_found,
    )
