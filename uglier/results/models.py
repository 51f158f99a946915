# Pydantic data models for operation results: RemovalResult.

from typing import List

from pydantic import BaseModel, Field


class RemovalResult(BaseModel):
    """Outcome of removing targets from a generated config file."""

    success: bool
    removed_targets: List[str] = Field(default_factory=list)
    removed_overrides: List[str] = Field(default_factory=list)
    not_found: List[str] = Field(
        default_factory=list,
        description="Requested targets that were not in the file",
    )

    @classmethod
    def failure(cls) -> "RemovalResult":
        return cls(success=False)
