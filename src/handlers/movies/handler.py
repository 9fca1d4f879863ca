"""
Movies API Lambda Handler

API Gateway プロキシイベントを受け取り、映画リソースの
CRUD + 一覧（ページング）を処理する:
- GET    /movies          一覧（?page=n）
- GET    /movies/{id}     1 件取得
- POST   /movies          作成
- PUT    /movies          名前の更新
- DELETE /movies          削除
"""
from __future__ import annotations

import threading
from typing import Any

import structlog

from src.infrastructure.config import Settings, get_settings
from src.infrastructure.repositories import DynamoDBMovieRepository
from src.presentation.api.request import ApiRequest
from src.presentation.api.router import Router
from src.presentation.middleware.logging import configure_logging, log_invocation

logger = structlog.get_logger()

# ウォームスタート間で再利用する（コールドスタート時に一度だけ生成）
_router: Router | None = None
_router_lock = threading.Lock()


def build_router(settings: Settings) -> Router:
    """設定から Router を組み立てる"""
    repository = DynamoDBMovieRepository.from_table_name(
        table_name=settings.table_name,
        region=settings.aws_region,
    )
    return Router(repository, page_size=settings.page_size)


def get_router() -> Router:
    """プロセス共有の Router を取得（遅延初期化）"""
    global _router
    if _router is None:
        with _router_lock:
            if _router is None:
                settings = get_settings()
                configure_logging(settings.log_level)
                logger.info(
                    "handler_initialized",
                    service=settings.service_name,
                    environment=settings.environment,
                    table_name=settings.table_name,
                )
                _router = build_router(settings)
    return _router


@log_invocation
def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    request = ApiRequest.from_event(event)
    return get_router().handle(request).to_dict()
