# Exception types raised by the engine, the block registry and the installer.
# Validation failures in the operations layer are reported and returned as
# sentinels instead; these exceptions cover programmer errors and hard faults.

from __future__ import annotations

from typing import Sequence


class UglierError(Exception):
    """Base class for all uglier errors."""


class UnparseableConfigError(UglierError):
    """The config text has no multi-line ``with: [ ... ]`` array."""


class EmptyTargetListError(UglierError):
    """A rewrite would leave the ``with`` array without any target."""


class UnknownBlockError(UglierError):
    """A requested config block is not in the registry."""

    def __init__(self, name: str, available: Sequence[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(
            f'Unknown config: "{name}". Available: {", ".join(self.available)}'
        )


class InstallError(UglierError):
    """Installing packages into the project failed."""
