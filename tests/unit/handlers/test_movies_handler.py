"""Movies Lambda Handler Unit Tests"""
import json
from types import SimpleNamespace

import pytest

from src.handlers.movies import handler
from src.infrastructure.config import get_settings
from src.presentation.api.request import ApiRequest
from src.presentation.api.router import Router


@pytest.fixture
def context():
    """Lambda コンテキストのスタブ"""
    return SimpleNamespace(aws_request_id="req-123")


@pytest.fixture
def router(monkeypatch, movie_repository) -> Router:
    """インメモリ Repository を使う Router を注入"""
    router = Router(movie_repository)
    monkeypatch.setattr(handler, "_router", router)
    return router


def api_gateway_event(method, path="/movies", path_parameters=None, query=None, body=None):
    return {
        "httpMethod": method,
        "path": path,
        "pathParameters": path_parameters,
        "queryStringParameters": query,
        "body": body,
        "isBase64Encoded": False,
    }


class TestLambdaHandler:
    """lambda_handler のテスト"""

    def test_create_and_find_one(self, router, context):
        """正常: API Gateway イベントで作成と取得ができる"""
        # Arrange
        create_event = api_gateway_event("POST", body=json.dumps({"id": "m1", "name": "Alpha"}))
        get_event = api_gateway_event("GET", path="/movies/m1", path_parameters={"id": "m1"})

        # Act
        created = handler.lambda_handler(create_event, context)
        found = handler.lambda_handler(get_event, context)

        # Assert
        assert created["statusCode"] == 200
        assert found["statusCode"] == 200
        assert json.loads(found["body"]) == {"id": "m1", "name": "Alpha"}
        assert found["headers"]["Content-Type"] == "application/json"

    def test_null_parameters_are_list(self, router, context):
        """正常: null のパスパラメータは一覧扱い"""
        response = handler.lambda_handler(api_gateway_event("GET"), context)

        # 空のテーブルはページ 1 も範囲外
        assert response["statusCode"] == 400

    def test_request_id_header(self, router, context):
        """正常: X-Request-ID に Lambda のリクエストIDを設定"""
        response = handler.lambda_handler(api_gateway_event("OPTIONS"), context)

        assert response["statusCode"] == 405
        assert response["headers"]["X-Request-ID"] == "req-123"

    def test_http_api_v2_event(self, router, movie_repository, context):
        """正常: HTTP API (v2) 形式のイベント"""
        event = {
            "rawPath": "/movies",
            "requestContext": {"http": {"method": "DELETE"}},
            "body": '{"id": "m1"}',
        }

        response = handler.lambda_handler(event, context)

        assert response["statusCode"] == 200
        assert movie_repository.call_count == 1


class TestApiRequestFromEvent:
    """ApiRequest.from_event のテスト"""

    def test_rest_event(self):
        """正常: REST (v1) イベント"""
        request = ApiRequest.from_event(
            api_gateway_event("get", path_parameters={"id": "m1"}, query={"page": "2"})
        )

        assert request.method == "GET"
        assert request.resource_id == "m1"
        assert request.query_parameters == {"page": "2"}

    def test_missing_fields(self):
        """正常: 欠けたフィールドは空として扱う"""
        request = ApiRequest.from_event({})

        assert request.method == ""
        assert request.has_id is False
        assert request.body is None


class TestGetRouter:
    """get_router のテスト"""

    @pytest.fixture(autouse=True)
    def fresh_state(self, monkeypatch):
        monkeypatch.setattr(handler, "_router", None)
        monkeypatch.setenv("TABLE_NAME", "movies-test")
        monkeypatch.setenv("AWS_REGION", "us-east-1")
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_router_is_built_once(self):
        """正常: Router はプロセス内で一度だけ生成される"""
        first = handler.get_router()
        second = handler.get_router()

        assert isinstance(first, Router)
        assert first is second

    def test_build_router_uses_settings(self, monkeypatch):
        """正常: 設定のテーブル名とリージョンで Repository を作成"""
        captured = {}

        def fake_from_table_name(table_name, region=None):
            captured.update(table_name=table_name, region=region)
            return object()

        monkeypatch.setattr(
            handler.DynamoDBMovieRepository, "from_table_name", staticmethod(fake_from_table_name)
        )

        handler.build_router(get_settings())

        assert captured == {"table_name": "movies-test", "region": "us-east-1"}
