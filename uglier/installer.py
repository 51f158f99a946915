"""
Package installation: detect the project's package manager and install the
ESLint config package plus its peer dependencies.

Typical usage:
    from uglier.config import get_default_config
    from uglier.installer import detect_package_manager, install

    info = detect_package_manager(Path("./my_project"))
    print(info.eslint_cmd)   # e.g. "pnpm eslint ."

    install(get_default_config())
"""

import json
import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from uglier.config import Config
from uglier.errors import InstallError

logger = logging.getLogger(__name__)

DEFAULT_MANAGER = "npm"

INSTALL_COMMANDS: Dict[str, str] = {
    "npm": "npm i -D --legacy-peer-deps",
    "pnpm": "pnpm add -D --no-strict-peer-dependencies",
    "yarn": "yarn add -D",
    "bun": "bun add -d",
}

ESLINT_COMMANDS: Dict[str, str] = {
    "npm": "npx eslint .",
    "pnpm": "pnpm eslint .",
    "yarn": "yarn eslint .",
    "bun": "bunx eslint .",
}

# Checked in order; the first lock file found wins.
LOCK_FILES: Tuple[Tuple[str, str], ...] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("bun.lockb", "bun"),
    ("bun.lock", "bun"),
    ("package-lock.json", "npm"),
)

USER_AGENT_ENV = "npm_config_user_agent"

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "peerDependencies")


@dataclass(frozen=True)
class PackageManagerInfo:
    """Detected package manager and the commands to use with it."""

    manager: str
    install_cmd: str
    eslint_cmd: str


def _manager_from_user_agent(user_agent: Optional[str]) -> Optional[str]:
    """
    Return the manager named in an npm_config_user_agent string.

    The user agent looks like "pnpm/9.1.0 npm/? node/v20.11.0 linux x64".
    """
    if not user_agent:
        return None
    name = user_agent.split("/", 1)[0].strip()
    return name if name in INSTALL_COMMANDS else None


def _manager_from_lock_files(cwd: Path) -> Optional[str]:
    for lock_file, manager in LOCK_FILES:
        if (cwd / lock_file).is_file():
            return manager
    return None


def detect_package_manager(cwd: Path) -> PackageManagerInfo:
    """
    Detect which package manager the project at cwd uses.

    The user agent of the invoking package manager takes precedence, then
    lock files in cwd. Falls back to npm.
    """
    manager = (
        _manager_from_user_agent(os.environ.get(USER_AGENT_ENV))
        or _manager_from_lock_files(cwd)
        or DEFAULT_MANAGER
    )
    logger.debug("Detected package manager %s for %s", manager, cwd)
    return PackageManagerInfo(
        manager=manager,
        install_cmd=INSTALL_COMMANDS[manager],
        eslint_cmd=ESLINT_COMMANDS[manager],
    )


def load_package_json(path: Path) -> Dict:
    """
    Read package.json at path.

    Raises:
        InstallError: package.json does not exist.
    """
    if not path.is_file():
        raise InstallError(
            f"No package.json found in {path.parent}. Please initialize your project first."
        )
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error("Failed to read %s: %s", path, e)
        return {}


def is_installed(package_name: str, package_json: Path) -> bool:
    """True if package_name is listed in any dependency section of package_json."""
    data = load_package_json(package_json)
    for section in DEPENDENCY_SECTIONS:
        deps = data.get(section) or {}
        if package_name in deps:
            return True
    return False


def missing_packages(config: Config) -> List[str]:
    """Return the package and peer dependencies not yet in package.json."""
    wanted = [config.package_name, *config.peer_deps]
    return [name for name in wanted if not is_installed(name, config.package_json_path)]


def run_command(args: Sequence[str], cwd: Path) -> str:
    """
    Run a command in cwd and return its stdout.

    Raises:
        InstallError: the command could not be started or exited non-zero.
    """
    cmd = shlex.join(args)
    logger.info("Running: %s", cmd)
    try:
        completed = subprocess.run(
            list(args),
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise InstallError(
            f"Failed to execute command: {cmd}\n{(e.stderr or '').strip()}"
        ) from e
    except OSError as e:
        raise InstallError(f"Failed to execute command: {cmd}") from e
    return completed.stdout


def install(config: Config) -> Tuple[List[str], PackageManagerInfo]:
    """
    Install the package and its peer dependencies if they are missing.

    Returns:
        The packages that were installed (empty if everything was present)
        and the package manager that was used.

    Raises:
        InstallError: no package.json, or the install command failed.
    """
    info = detect_package_manager(config.cwd)
    to_install = missing_packages(config)
    if not to_install:
        logger.info("All packages already installed")
        return [], info

    args = [*shlex.split(info.install_cmd), *to_install]
    run_command(args, config.cwd)
    return to_install, info
