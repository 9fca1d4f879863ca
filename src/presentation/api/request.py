"""API Request"""
from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ApiRequest:
    """
    フロントドアから渡される 1 リクエスト

    API Gateway REST (v1) と HTTP API (v2) のプロキシイベントの
    どちらからでも組み立てられる。
    """

    method: str
    path_parameters: dict[str, str] = field(default_factory=dict)
    query_parameters: dict[str, str] = field(default_factory=dict)
    body: str | None = None
    is_base64_encoded: bool = False
    path: str = ""

    @property
    def resource_id(self) -> str | None:
        """パスパラメータの id（空文字は未指定扱い）"""
        return self.path_parameters.get("id") or None

    @property
    def has_id(self) -> bool:
        return self.resource_id is not None

    def decoded_body(self) -> str | None:
        """
        ボディを文字列として取得

        Raises:
            ValueError: Base64 またはUTF-8 としてデコードできない場合
        """
        if self.body is None or not self.is_base64_encoded:
            return self.body
        return base64.b64decode(self.body, validate=True).decode("utf-8")

    @classmethod
    def from_event(cls, event: dict[str, Any]) -> ApiRequest:
        """API Gateway プロキシイベントから作成"""
        method = event.get("httpMethod") or (
            event.get("requestContext", {}).get("http", {}).get("method", "")
        )
        path = event.get("path") or event.get("rawPath", "")

        return cls(
            method=method.upper(),
            # API Gateway はパラメータがない場合 null を送る
            path_parameters=event.get("pathParameters") or {},
            query_parameters=event.get("queryStringParameters") or {},
            body=event.get("body"),
            is_base64_encoded=bool(event.get("isBase64Encoded", False)),
            path=path,
        )
