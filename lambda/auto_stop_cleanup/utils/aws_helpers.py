"""AWS helper functions."""

from __future__ import annotations
from typing import Any, Callable

import boto3
from botocore.exceptions import ClientError

from ..models.config import get_credentials
from .logging_config import get_logger

logger = get_logger()

NOT_FOUND_CODES = {"ResourceNotFoundException"}


def create_session(region: str = "") -> boto3.session.Session:
    """Build a boto3 session from the environment-supplied credentials."""
    credentials = get_credentials()
    return boto3.session.Session(region_name=region or None, **credentials)


def cluster_kwargs(cluster: str) -> dict[str, str]:
    """ECS `cluster` argument, omitted to target the default cluster."""
    return {"cluster": cluster} if cluster else {}


def event_bus_kwargs(event_bus_name: str) -> dict[str, str]:
    """CloudWatch Events `EventBusName` argument, omitted for the default bus."""
    return {"EventBusName": event_bus_name} if event_bus_name else {}


def is_not_found(error: ClientError) -> bool:
    """Check whether a ClientError means the resource is already absent."""
    return error.response.get("Error", {}).get("Code", "") in NOT_FOUND_CODES


def ignore_not_found(call: Callable[[], Any], message: str) -> bool:
    """
    Run an idempotent delete, tolerating an already-absent resource.

    Returns:
        True when the call succeeded, False when the resource was not found.
        Any other error propagates.
    """
    try:
        call()
    except ClientError as e:
        if not is_not_found(e):
            raise
        logger.warning(message)
        return False
    return True
