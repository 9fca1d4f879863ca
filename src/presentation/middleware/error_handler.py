"""Error Handler Middleware"""
from __future__ import annotations

from typing import Callable

import structlog

from src.application.ports.repositories import RepositoryError
from src.application.use_cases.movie import MovieNotFoundError, PageOutOfRangeError
from src.presentation.api.exceptions import (
    InvalidPageError,
    InvalidPayloadError,
    MethodNotAllowedError,
)
from src.presentation.api.responses import ApiResponse, error_response

logger = structlog.get_logger()

# ストレージ操作ごとの利用者向けメッセージ（バックエンドの詳細は返さない）
REPOSITORY_ERROR_MESSAGES = {
    "get_item": "error retrieving item",
    "scan": "error retrieving items",
    "put_item": "error inserting resource",
    "update_item": "error updating resource",
    "delete_item": "error deleting resource",
}


def invalid_payload_handler(exc: InvalidPayloadError) -> ApiResponse:
    """不正なリクエストボディ"""
    logger.warning("invalid_payload", error=str(exc))
    return error_response(400, "invalid payload")


def invalid_page_handler(exc: InvalidPageError) -> ApiResponse:
    """
    不正な page パラメータ

    既存クライアントとの互換性のため 400 ではなく 500 を返す。
    """
    logger.warning("invalid_page_parameter", page=exc.raw_value)
    return error_response(500, "only numbers accepted in page parameter")


def page_out_of_range_handler(exc: PageOutOfRangeError) -> ApiResponse:
    """総ページ数を超えたページ要求"""
    logger.warning(
        "page_out_of_range",
        page=exc.page_number,
        total_pages=exc.total_pages,
    )
    return error_response(400, "requested page exceeds total pages")


def movie_not_found_handler(exc: MovieNotFoundError) -> ApiResponse:
    """映画が見つからない"""
    logger.warning("movie_not_found", movie_id=exc.movie_id)
    return error_response(404, "resource not found with the ID provided")


def repository_error_handler(exc: RepositoryError) -> ApiResponse:
    """ストレージ層の失敗"""
    logger.error("repository_error", operation=exc.operation, error=exc.detail)
    message = REPOSITORY_ERROR_MESSAGES.get(exc.operation, "error accessing storage")
    return error_response(500, message)


def method_not_allowed_handler(exc: MethodNotAllowedError) -> ApiResponse:
    """サポート外の HTTP メソッド"""
    logger.warning("method_not_allowed", method=exc.method)
    return error_response(405, "method not allowed")


def generic_error_handler(exc: Exception) -> ApiResponse:
    """汎用エラーハンドラ"""
    logger.error("unhandled_error", error=str(exc), exc_info=exc)
    return error_response(500, "internal server error")


# エラーハンドラのマッピング
error_handlers: dict[type[Exception], Callable[[Exception], ApiResponse]] = {
    InvalidPayloadError: invalid_payload_handler,
    InvalidPageError: invalid_page_handler,
    PageOutOfRangeError: page_out_of_range_handler,
    MovieNotFoundError: movie_not_found_handler,
    RepositoryError: repository_error_handler,
    MethodNotAllowedError: method_not_allowed_handler,
    Exception: generic_error_handler,
}


def handle_error(exc: Exception) -> ApiResponse:
    """例外の型（MRO 順）に対応するハンドラでレスポンスを作成"""
    for exc_type in type(exc).__mro__:
        handler = error_handlers.get(exc_type)
        if handler is not None:
            return handler(exc)
    return generic_error_handler(exc)
