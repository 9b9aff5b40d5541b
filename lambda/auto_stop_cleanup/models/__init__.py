"""Data models and configuration."""

from .cleanup_action import (
    CleanupAction,
    DONE,
    NOT_FOUND,
    SKIPPED,
    DRY_RUN_STATUS,
)

__all__ = ["CleanupAction", "DONE", "NOT_FOUND", "SKIPPED", "DRY_RUN_STATUS"]
