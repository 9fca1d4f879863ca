"""API Request Schemas"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.presentation.api.exceptions import InvalidPageError, InvalidPayloadError
from src.presentation.api.request import ApiRequest

DEFAULT_PAGE = "1"


class MoviePayload(BaseModel):
    """映画リクエストボディ"""

    model_config = ConfigDict(strict=True)

    id: str = Field(min_length=1, description="映画ID")
    name: str = Field(default="", description="表示名")


def parse_movie_payload(request: ApiRequest) -> MoviePayload:
    """
    リクエストボディを MoviePayload として解釈

    JSON として不正、オブジェクトでない、id が空などの場合は
    ストレージに触れる前に InvalidPayloadError を送出する。
    """
    try:
        body = request.decoded_body()
    except ValueError as e:
        raise InvalidPayloadError("Body is not valid base64/UTF-8") from e

    if body is None:
        raise InvalidPayloadError("Body is required")

    try:
        return MoviePayload.model_validate_json(body)
    except ValidationError as e:
        raise InvalidPayloadError(str(e)) from e


def parse_page(request: ApiRequest) -> int:
    """page クエリパラメータを 1 以上の整数として解釈"""
    raw = request.query_parameters.get("page") or DEFAULT_PAGE

    if not (raw.isascii() and raw.isdigit()):
        raise InvalidPageError(raw)

    page = int(raw)
    if page < 1:
        raise InvalidPageError(raw)

    return page
