"""API Response Envelope"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

JSON_HEADERS = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
}


@dataclass
class ApiResponse:
    """フロントドアへ返すレスポンス"""

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    def json(self) -> Any:
        """ボディを JSON として解釈"""
        return json.loads(self.body)

    def to_dict(self) -> dict[str, Any]:
        """API Gateway レスポンス形式"""
        return {
            'statusCode': self.status_code,
            'headers': self.headers,
            'body': self.body,
        }


def json_response(status_code: int, body: Any) -> ApiResponse:
    """任意の JSON ボディでレスポンスを作成"""
    return ApiResponse(
        status_code=status_code,
        body=json.dumps(body, ensure_ascii=False),
    )


def feedback_response(status_code: int, success: bool, message: str) -> ApiResponse:
    """{success, message} 形式のレスポンスを作成"""
    return json_response(status_code, {'success': success, 'message': message})


def success_response(message: str) -> ApiResponse:
    return feedback_response(200, True, message)


def error_response(status_code: int, message: str) -> ApiResponse:
    return feedback_response(status_code, False, message)
