"""CloudWatch Events rule and target cleanup."""

from __future__ import annotations
from typing import Any

from botocore.exceptions import ClientError

from ..models import CleanupAction, DONE, NOT_FOUND, DRY_RUN_STATUS
from ..models.config import DRY_RUN
from ..utils import event_bus_kwargs, get_logger, ignore_not_found, is_not_found

logger = get_logger()


def list_rule_target_ids(events: Any, rule: str, event_bus_name: str = "") -> list[str]:
    """List the ids of every target attached to a rule."""
    target_ids: list[str] = []
    paginator = events.get_paginator("list_targets_by_rule")
    for page in paginator.paginate(Rule=rule, **event_bus_kwargs(event_bus_name)):
        target_ids.extend(
            target["Id"] for target in page.get("Targets", []) if target.get("Id")
        )
    return target_ids


def remove_rule_targets(
    events: Any, rule: str, event_bus_name: str = ""
) -> list[CleanupAction]:
    """Remove all targets of a rule in a single RemoveTargets call."""
    try:
        target_ids = list_rule_target_ids(events, rule, event_bus_name)
    except ClientError as e:
        if not is_not_found(e):
            raise
        logger.warning(f"Rule does not exist: {rule}")
        return [CleanupAction("events_rule", rule, "REMOVE_TARGETS", NOT_FOUND)]

    if not target_ids:
        return []

    if DRY_RUN:
        logger.info(
            "Would REMOVE targets",
            extra={"dry_run": True, "rule": rule, "target_ids": target_ids},
        )
        status = DRY_RUN_STATUS
    else:
        response = events.remove_targets(
            Rule=rule, Ids=target_ids, **event_bus_kwargs(event_bus_name)
        )
        logger.info("REMOVE targets", extra={"rule": rule, "target_ids": target_ids})
        if response.get("FailedEntryCount", 0):
            logger.warning(
                "Failed to remove some targets",
                extra={
                    "rule": rule,
                    "failed_entries": response.get("FailedEntries", []),
                },
            )
        status = DONE

    return [
        CleanupAction("events_target", target_id, "REMOVE_TARGETS", status, reason=rule)
        for target_id in target_ids
    ]


def delete_rule(events: Any, rule: str, event_bus_name: str = "") -> CleanupAction:
    """Delete a rule; an already-deleted rule is not an error."""
    if DRY_RUN:
        logger.info("Would DELETE rule", extra={"dry_run": True, "rule": rule})
        return CleanupAction("events_rule", rule, "DELETE_RULE", DRY_RUN_STATUS)

    deleted = ignore_not_found(
        lambda: events.delete_rule(Name=rule, **event_bus_kwargs(event_bus_name)),
        f"Rule does not exist: {rule}",
    )
    if deleted:
        logger.info("DELETE rule", extra={"rule": rule})
    return CleanupAction(
        "events_rule", rule, "DELETE_RULE", DONE if deleted else NOT_FOUND
    )


def remove_trigger(
    events: Any, rule: str, target_id: str, event_bus_name: str = ""
) -> CleanupAction:
    """Remove the trigger target named after the identifier."""
    if DRY_RUN:
        logger.info(
            "Would REMOVE trigger",
            extra={"dry_run": True, "rule": rule, "target_id": target_id},
        )
        return CleanupAction(
            "events_target", target_id, "REMOVE_TARGETS", DRY_RUN_STATUS, reason=rule
        )

    removed = ignore_not_found(
        lambda: events.remove_targets(
            Rule=rule, Ids=[target_id], **event_bus_kwargs(event_bus_name)
        ),
        f"Failed to remove trigger for Rule: {rule}",
    )
    return CleanupAction(
        "events_target",
        target_id,
        "REMOVE_TARGETS",
        DONE if removed else NOT_FOUND,
        reason=rule,
    )
