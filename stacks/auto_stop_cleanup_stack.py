"""CDK Stack for the auto-stop cleanup Lambdas."""

from aws_cdk import (
    Stack,
    Duration,
    aws_lambda as lambda_,
    aws_iam as iam,
    aws_logs as logs,
    aws_cloudwatch as cloudwatch,
    CfnParameter,
    CfnOutput,
    Tags
)
from constructs import Construct

# (construct id, function name suffix, handler, description)
CLEANUP_FUNCTIONS = [
    (
        "TaskCleanup",
        "Task",
        "auto_stop_cleanup.handler.task_cleanup_handler",
        "Stops tasks started for a taskID and removes its auto-stop rule",
    ),
    (
        "ClientCleanup",
        "Client",
        "auto_stop_cleanup.handler.client_cleanup_handler",
        "Stops tasks started for a clientId, removes its rule and event source mappings",
    ),
    (
        "RuleCleanup",
        "Rule",
        "auto_stop_cleanup.handler.rule_cleanup_handler",
        "Removes an auto-stop rule, its targets and permissions",
    ),
    (
        "EventSourceCleanup",
        "EventSource",
        "auto_stop_cleanup.handler.event_source_cleanup_handler",
        "Deletes event source mappings and the invoke permission of a clientId",
    ),
]


class AutoStopCleanupStack(Stack):
    """
    CDK Stack for auto-stop resource cleanup.

    Deploys one Lambda per cleanup entry point, sharing the same code asset:
    - ECS/Fargate task stop by startedBy
    - CloudWatch Events rule, target and bus policy removal
    - Lambda permission and event source mapping removal
    """

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Parameters
        access_key_param = CfnParameter(
            self, "AccessKey",
            type="String",
            no_echo=True,
            description="[CREDENTIALS] Access key id used by the cleanup functions for ECS, CloudWatch Events and Lambda calls."
        )

        secret_key_param = CfnParameter(
            self, "SecretKey",
            type="String",
            no_echo=True,
            description="[CREDENTIALS] Secret access key matching AccessKey."
        )

        cluster_param = CfnParameter(
            self, "FargateCluster",
            type="String",
            default="",
            description="[ECS] Cluster holding the auto-stopped tasks. Leave empty for the default cluster."
        )

        lambda_arn_param = CfnParameter(
            self, "TargetLambdaArn",
            type="String",
            default="",
            description="[LAMBDA] Function whose invoke permissions and event source mappings are removed. Leave empty to skip."
        )

        event_bus_param = CfnParameter(
            self, "EventBusName",
            type="String",
            default="",
            description="[EVENTS] Event bus holding the auto-stop rules. Leave empty for the default bus."
        )

        dry_run_param = CfnParameter(
            self, "DryRunMode",
            type="String",
            default="false",
            allowed_values=["true", "false"],
            description="[SAFETY] Log every delete/stop call without executing it."
        )

        log_level_param = CfnParameter(
            self, "LogLevel",
            type="String",
            default="INFO",
            allowed_values=["DEBUG", "INFO", "WARNING", "ERROR"],
            description="[LOGGING] Log verbosity."
        )

        # IAM Role shared by the cleanup functions
        lambda_role = iam.Role(
            self, "AutoStopCleanupRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                )
            ]
        )

        lambda_role.add_to_policy(iam.PolicyStatement(
            effect=iam.Effect.ALLOW,
            actions=[
                "ecs:ListTasks",
                "ecs:StopTask",
                "events:ListTargetsByRule",
                "events:RemoveTargets",
                "events:DeleteRule",
                "events:RemovePermission",
                "lambda:RemovePermission",
                "lambda:ListEventSourceMappings",
                "lambda:DeleteEventSourceMapping",
            ],
            resources=["*"]
        ))

        environment = {
            "ACCESS_KEY": access_key_param.value_as_string,
            "SECRET_KEY": secret_key_param.value_as_string,
            "FARGATE_CLUSTER": cluster_param.value_as_string,
            "LAMBDA_ARN": lambda_arn_param.value_as_string,
            "EVENT_BUS_NAME": event_bus_param.value_as_string,
            "DRY_RUN": dry_run_param.value_as_string,
            "LOG_LEVEL": log_level_param.value_as_string,
        }

        self.functions = {}
        for construct_name, suffix, handler, description in CLEANUP_FUNCTIONS:
            function = lambda_.Function(
                self, f"{construct_name}Lambda",
                function_name=f"LambdaAutoStop{suffix}Cleanup",
                description=description,
                runtime=lambda_.Runtime.PYTHON_3_13,
                architecture=lambda_.Architecture.ARM_64,
                handler=handler,
                code=lambda_.Code.from_asset("lambda"),
                role=lambda_role,
                timeout=Duration.seconds(60),
                memory_size=256,
                log_retention=logs.RetentionDays.ONE_MONTH,
                environment=environment
            )
            self.functions[construct_name] = function

            cloudwatch.Alarm(
                self, f"{construct_name}ErrorsAlarm",
                alarm_name=f"AutoStop{suffix}Cleanup-LambdaErrors",
                alarm_description=f"Alert when the {suffix} cleanup Lambda fails",
                metric=function.metric_errors(
                    period=Duration.minutes(15),
                    statistic="Sum"
                ),
                threshold=1,
                evaluation_periods=1,
                treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING
            )

            CfnOutput(
                self, f"{construct_name}FunctionArn",
                description=f"ARN of the {suffix} cleanup Lambda",
                value=function.function_arn
            )

        Tags.of(self).add("service", "auto-stop-cleanup")
