"""
Lambda Stack (Serverless Compute)

Lambda Functions:
- Movies Handler (API Gateway → DynamoDB)
"""
from aws_cdk import (
    BundlingOptions,
    NestedStack,
    Duration,
    aws_lambda as lambda_,
    aws_dynamodb as dynamodb,
    aws_logs as logs,
)
from constructs import Construct

# 依存パッケージごとリポジトリをバンドルする
BUNDLING_COMMAND = [
    'bash', '-c',
    'pip install --no-cache-dir . -t /asset-output',
]

ASSET_EXCLUDES = [
    '.git',
    'cdk.out',
    'tests',
    '**/__pycache__',
    '.venv',
]


class ComputeStack(NestedStack):
    """Lambda ベースのサーバレスコンピュートスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        movies_table: dynamodb.Table,
        asset_path: str = '.',
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # Movies Handler Lambda
        # =================================================================

        self.movies_fn = lambda_.Function(
            self, 'MoviesFn',
            function_name='movies-api-handler',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='src.handlers.movies.handler.lambda_handler',
            code=lambda_.Code.from_asset(
                asset_path,
                exclude=ASSET_EXCLUDES,
                bundling=BundlingOptions(
                    image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                    command=BUNDLING_COMMAND,
                ),
            ),
            memory_size=256,
            timeout=Duration.seconds(10),
            environment={
                'TABLE_NAME': movies_table.table_name,
                'ENVIRONMENT': 'production',
                'LOG_LEVEL': 'INFO',
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        movies_table.grant_read_write_data(self.movies_fn)
