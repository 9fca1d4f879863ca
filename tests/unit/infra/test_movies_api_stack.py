"""Movies API CDK Stack Unit Tests"""
from pathlib import Path

import pytest

cdk = pytest.importorskip("aws_cdk")
assertions = pytest.importorskip("aws_cdk.assertions")

from infra.stacks.movies_api_stack import MoviesApiStack  # noqa: E402

REPO_ROOT = Path(__file__).resolve().parents[3]


@pytest.fixture(scope="module")
def stack() -> MoviesApiStack:
    # バンドリング（Docker）を行わずに合成する
    app = cdk.App(context={"aws:cdk:bundling-stacks": []})
    return MoviesApiStack(app, "TestMoviesApiStack", asset_path=str(REPO_ROOT))


class TestMoviesApiStack:
    """MoviesApiStack のテスト"""

    def test_movies_table(self, stack):
        """正常: ID をパーティションキーとするテーブル"""
        template = assertions.Template.from_stack(stack.data_stack)

        template.has_resource_properties("AWS::DynamoDB::Table", {
            "KeySchema": [{"AttributeName": "ID", "KeyType": "HASH"}],
            "BillingMode": "PAY_PER_REQUEST",
        })

    def test_lambda_function(self, stack):
        """正常: ハンドラと TABLE_NAME 環境変数"""
        template = assertions.Template.from_stack(stack.compute_stack)

        template.has_resource_properties("AWS::Lambda::Function", {
            "Handler": "src.handlers.movies.handler.lambda_handler",
            "Environment": {
                "Variables": assertions.Match.object_like({
                    "TABLE_NAME": assertions.Match.any_value(),
                }),
            },
        })

    def test_api_methods(self, stack):
        """正常: /movies と /movies/{id} のメソッド"""
        template = assertions.Template.from_stack(stack.api_stack)

        for method in ("GET", "POST", "PUT", "DELETE"):
            template.has_resource_properties("AWS::ApiGateway::Method", {
                "HttpMethod": method,
            })
        template.has_resource_properties("AWS::ApiGateway::Resource", {
            "PathPart": "{id}",
        })
