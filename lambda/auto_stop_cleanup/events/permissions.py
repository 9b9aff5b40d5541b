"""CloudWatch Events bus resource-policy cleanup."""

from __future__ import annotations
from typing import Any

from ..models import CleanupAction, DONE, NOT_FOUND, DRY_RUN_STATUS
from ..models.config import DRY_RUN
from ..utils import event_bus_kwargs, get_logger, ignore_not_found

logger = get_logger()


def remove_event_bus_permission(
    events: Any, statement_id: str, event_bus_name: str = ""
) -> CleanupAction:
    """Remove the event bus policy statement granted for the identifier."""
    if DRY_RUN:
        logger.info(
            "Would REMOVE event bus permission",
            extra={"dry_run": True, "statement_id": statement_id},
        )
        return CleanupAction(
            "events_permission", statement_id, "REMOVE_PERMISSION", DRY_RUN_STATUS
        )

    removed = ignore_not_found(
        lambda: events.remove_permission(
            StatementId=statement_id, **event_bus_kwargs(event_bus_name)
        ),
        f"EventBus does not have a policy for StatementId: {statement_id}",
    )
    return CleanupAction(
        "events_permission",
        statement_id,
        "REMOVE_PERMISSION",
        DONE if removed else NOT_FOUND,
    )
