"""
Data Stack (Serverless)

DynamoDB (On-Demand)
- Movies Table (パーティションキー: ID)
"""
from aws_cdk import (
    NestedStack,
    RemovalPolicy,
    aws_dynamodb as dynamodb,
)
from constructs import Construct


class DataStack(NestedStack):
    """サーバレスデータ層のリソースを管理するスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        table_name: str = 'movies',
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # DynamoDB Tables
        # =================================================================

        # Movies Table (単一テーブル、ID のみをキーとする)
        self.movies_table = dynamodb.Table(
            self, 'MoviesTable',
            table_name=table_name,
            partition_key=dynamodb.Attribute(
                name='ID',
                type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            point_in_time_recovery=True,
            encryption=dynamodb.TableEncryption.AWS_MANAGED,
            removal_policy=RemovalPolicy.RETAIN,
        )
