"""CleanupAction data class."""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any

DONE = "DONE"
NOT_FOUND = "NOT_FOUND"
SKIPPED = "SKIPPED"
DRY_RUN_STATUS = "DRY_RUN"


@dataclass
class CleanupAction:
    """Outcome of a single cleanup step."""

    resource_type: str
    resource_id: str
    action: str
    status: str = DONE
    region: str = ""
    reason: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)
