"""Fixtures specific to integration tests."""

from types import SimpleNamespace

import pytest
from unittest.mock import Mock, patch

FUNCTION_ARN = "arn:aws:lambda:us-east-1:123456789012:function:auto-stop"


@pytest.fixture(autouse=True)
def _mark_as_integration(request):
    """Automatically mark all tests in integration/ as integration tests."""
    request.node.add_marker(pytest.mark.integration)


@pytest.fixture
def aws_clients(client_builder):
    """Mock ECS, Events and Lambda clients wired into the handler.

    Every client is attached to one manager mock so tests can assert the
    relative order of calls across services.

    Example:
        clients = aws_clients(task_arns=[TASK_ARN], target_ids=["task-42"])
        clients.manager.mock_calls
    """
    patchers = []

    def _create(task_arns=(), target_ids=(), mappings=(), errors=None):
        ecs = client_builder().with_task_arns(*task_arns).build()
        events = client_builder().with_target_ids(*target_ids).build()
        lambda_client = client_builder().with_mappings(*mappings).build()

        for (service, operation), error in (errors or {}).items():
            client = {"ecs": ecs, "events": events, "lambda": lambda_client}[service]
            getattr(client, operation).side_effect = error

        manager = Mock()
        manager.attach_mock(ecs, "ecs")
        manager.attach_mock(events, "events")
        manager.attach_mock(lambda_client, "lambda_")

        patcher = patch(
            "auto_stop_cleanup.handler.create_clients",
            return_value=(ecs, events, lambda_client),
        )
        patcher.start()
        patchers.append(patcher)
        return SimpleNamespace(
            ecs=ecs, events=events, lambda_=lambda_client, manager=manager
        )

    yield _create

    for patcher in patchers:
        patcher.stop()


@pytest.fixture
def configured_function():
    """Configure LAMBDA_ARN for the handler."""
    with patch("auto_stop_cleanup.handler.LAMBDA_ARN", FUNCTION_ARN):
        yield FUNCTION_ARN

