"""Logging Middleware"""
from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable
from uuid import uuid4

import structlog

logger = structlog.get_logger()

LambdaHandler = Callable[[dict, Any], dict]


def configure_logging(log_level: str = "INFO") -> None:
    """構造化ログを設定"""
    level = getattr(logging, log_level.upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(),
    )


def log_invocation(handler: LambdaHandler) -> LambdaHandler:
    """
    リクエスト/レスポンス ログデコレータ

    12-Factor App の Logs 原則に従い、
    1 回の Lambda 呼び出しを構造化ログとして出力する。
    """

    @functools.wraps(handler)
    def wrapper(event: dict, context: Any) -> dict:
        # Lambda のリクエストIDをログコンテキストに設定
        request_id = getattr(context, "aws_request_id", None) or str(uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        method = event.get("httpMethod") or event.get("requestContext", {}).get("http", {}).get("method")
        path = event.get("path") or event.get("rawPath")

        start_time = time.perf_counter()
        logger.info("request_started", method=method, path=path)

        response = handler(event, context)

        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "request_completed",
            method=method,
            path=path,
            status_code=response.get("statusCode"),
            duration_ms=round(duration_ms, 2),
        )

        response.setdefault("headers", {})["X-Request-ID"] = request_id
        return response

    return wrapper
