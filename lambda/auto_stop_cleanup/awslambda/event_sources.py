"""Lambda event source mapping cleanup."""

from __future__ import annotations
from typing import Any, Iterable

from ..models import CleanupAction, DONE, NOT_FOUND, DRY_RUN_STATUS
from ..models.config import DRY_RUN
from ..utils import get_logger, ignore_not_found

logger = get_logger()


def source_matches(event_source_arn: str, identifier: str) -> bool:
    """Check if an event source ARN names the identifier as its last segment."""
    return event_source_arn.endswith(f":{identifier}") or event_source_arn.endswith(
        f"/{identifier}"
    )


def find_event_source_mappings(
    lambda_client: Any, function_name: str, identifier: str
) -> list[str]:
    """Find UUIDs of the function's mappings whose source is named after the identifier."""
    if not function_name:
        return []

    uuids: list[str] = []
    paginator = lambda_client.get_paginator("list_event_source_mappings")
    for page in paginator.paginate(FunctionName=function_name):
        for mapping in page.get("EventSourceMappings", []):
            if source_matches(mapping.get("EventSourceArn", ""), identifier):
                uuids.append(mapping["UUID"])

    logger.debug(
        f"Found {len(uuids)} event source mappings",
        extra={"function_name": function_name, "identifier": identifier},
    )
    return uuids


def delete_event_source_mapping(lambda_client: Any, uuid: str) -> CleanupAction:
    """Delete one event source mapping; a missing mapping is not an error."""
    if DRY_RUN:
        logger.info(
            "Would DELETE event source mapping", extra={"dry_run": True, "uuid": uuid}
        )
        return CleanupAction(
            "event_source_mapping", uuid, "DELETE_EVENT_SOURCE_MAPPING", DRY_RUN_STATUS
        )

    deleted = ignore_not_found(
        lambda: lambda_client.delete_event_source_mapping(UUID=uuid),
        f"Event source mapping does not exist: {uuid}",
    )
    if deleted:
        logger.info("DELETE event source mapping", extra={"uuid": uuid})
    return CleanupAction(
        "event_source_mapping",
        uuid,
        "DELETE_EVENT_SOURCE_MAPPING",
        DONE if deleted else NOT_FOUND,
    )


def delete_event_source_mappings(
    lambda_client: Any, uuids: Iterable[str]
) -> list[CleanupAction]:
    """Delete each mapping once, in the given order."""
    unique_uuids = list(dict.fromkeys(uuid for uuid in uuids if uuid))
    return [delete_event_source_mapping(lambda_client, uuid) for uuid in unique_uuids]
