"""Pytest configuration and shared fixtures for auto-stop cleanup tests."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any
from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError


class ClientBuilder:
    """Builder pattern for mocked ECS, CloudWatch Events and Lambda clients.

    Paginated list calls are served from the pages configured here so tests
    never reach AWS. The same paginator mock is returned for an operation on
    every call, so tests can assert on its paginate() arguments.
    """

    def __init__(self):
        self._client = Mock()
        self._paginators: dict[str, Mock] = {}
        self._client.get_paginator.side_effect = self.paginator
        self._client.remove_targets.return_value = {
            "FailedEntryCount": 0,
            "FailedEntries": [],
        }

    def paginator(self, operation: str) -> Mock:
        """Return the paginator mock for an operation."""
        if operation not in self._paginators:
            paginator = Mock()
            paginator.paginate.return_value = [{}]
            self._paginators[operation] = paginator
        return self._paginators[operation]

    def with_pages(self, operation: str, *pages: dict[str, Any]) -> ClientBuilder:
        """Serve these pages for a paginated operation."""
        self.paginator(operation).paginate.return_value = list(pages)
        return self

    def with_task_arns(self, *task_arns: str) -> ClientBuilder:
        """ListTasks returns these task ARNs in a single page."""
        return self.with_pages("list_tasks", {"taskArns": list(task_arns)})

    def with_target_ids(self, *target_ids: str) -> ClientBuilder:
        """ListTargetsByRule returns targets with these ids."""
        return self.with_pages(
            "list_targets_by_rule",
            {"Targets": [{"Id": target_id, "Arn": "arn"} for target_id in target_ids]},
        )

    def with_mappings(self, *mappings: tuple[str, str]) -> ClientBuilder:
        """ListEventSourceMappings returns (uuid, event source ARN) pairs."""
        return self.with_pages(
            "list_event_source_mappings",
            {
                "EventSourceMappings": [
                    {"UUID": uuid, "EventSourceArn": arn} for uuid, arn in mappings
                ]
            },
        )

    def with_error(self, operation: str, code: str) -> ClientBuilder:
        """Make a client method raise a ClientError with the given code."""
        getattr(self._client, operation).side_effect = make_client_error(
            code, operation
        )
        return self

    def with_paginator_error(self, operation: str, code: str) -> ClientBuilder:
        """Make a paginated operation raise a ClientError with the given code."""
        self.paginator(operation).paginate.side_effect = make_client_error(
            code, operation
        )
        return self

    def build(self) -> Mock:
        """Build and return the mock client."""
        return self._client


def make_client_error(code: str, operation: str = "Operation") -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@dataclass
class LambdaContext:
    """Minimal Lambda context accepted by Powertools inject_lambda_context."""

    function_name: str = "LambdaAutoStopTaskCleanup"
    memory_limit_in_mb: int = 256
    invoked_function_arn: str = (
        "arn:aws:lambda:us-east-1:123456789012:function:LambdaAutoStopTaskCleanup"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: str | None = None


# Shared fixtures


@pytest.fixture
def client_builder():
    """Fixture that returns the ClientBuilder class; call it for a fresh builder."""
    return ClientBuilder


@pytest.fixture
def client_error():
    """Fixture that returns the ClientError factory."""
    return make_client_error


@pytest.fixture
def lambda_context():
    """Lambda context for entry point tests."""
    return LambdaContext()


@pytest.fixture
def not_found():
    """ResourceNotFoundException error code."""
    return "ResourceNotFoundException"


DRY_RUN_TARGETS = [
    "auto_stop_cleanup.handler.DRY_RUN",
    "auto_stop_cleanup.ecs.tasks.DRY_RUN",
    "auto_stop_cleanup.events.rules.DRY_RUN",
    "auto_stop_cleanup.events.permissions.DRY_RUN",
    "auto_stop_cleanup.awslambda.permissions.DRY_RUN",
    "auto_stop_cleanup.awslambda.event_sources.DRY_RUN",
]


def _patch_dry_run(value: bool):
    patchers = [patch(target, value) for target in DRY_RUN_TARGETS]
    for patcher in patchers:
        patcher.start()
    return patchers


@pytest.fixture
def live_mode():
    """Run every cleanup module with DRY_RUN disabled."""
    patchers = _patch_dry_run(False)
    yield
    for patcher in patchers:
        patcher.stop()


@pytest.fixture
def dry_run_mode():
    """Run every cleanup module with DRY_RUN enabled."""
    patchers = _patch_dry_run(True)
    yield
    for patcher in patchers:
        patcher.stop()
