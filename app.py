#!/usr/bin/env python3
"""CDK app for the auto-stop cleanup Lambdas."""

import os
import aws_cdk as cdk
from stacks.auto_stop_cleanup_stack import AutoStopCleanupStack

app = cdk.App()

AutoStopCleanupStack(
    app,
    "AutoStopCleanupStack",
    description="Cleanup of ECS tasks, CloudWatch Events rules and Lambda permissions after auto-stop",
    env=cdk.Environment(
        account=os.getenv('CDK_DEFAULT_ACCOUNT'),
        region=os.getenv('CDK_DEFAULT_REGION')
    ),
)

app.synth()
