"""
Movies API Main Stack (Serverless)

Lambda + API Gateway + DynamoDB のメインスタック。
"""
from aws_cdk import (
    Stack,
    CfnOutput,
)
from constructs import Construct

from infra.stacks.data_stack import DataStack
from infra.stacks.compute_stack import ComputeStack
from infra.stacks.api_stack import ApiStack


class MoviesApiStack(Stack):
    """Movies API のメインスタック (Serverless)。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        asset_path: str = '.',
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Data Stack (DynamoDB)
        self.data_stack = DataStack(self, 'Data')

        # Compute Stack (Lambda Function)
        self.compute_stack = ComputeStack(
            self, 'Compute',
            movies_table=self.data_stack.movies_table,
            asset_path=asset_path,
        )

        # API Stack (API Gateway)
        self.api_stack = ApiStack(
            self, 'Api',
            movies_fn=self.compute_stack.movies_fn,
        )

        # Outputs
        CfnOutput(self, 'ApiEndpoint', value=self.api_stack.api_url)
        CfnOutput(self, 'MoviesTableName', value=self.data_stack.movies_table.table_name)
