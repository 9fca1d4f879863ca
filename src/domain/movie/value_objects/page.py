"""Page Value Object"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Sequence, TypeVar

from ..entities.movie import Movie

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 3


def paginate(
    sorted_items: Sequence[T],
    page_number: int,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> tuple[list[T], int]:
    """
    ソート済みコレクションから 1 ページ分を切り出す

    Args:
        sorted_items: ID 順にソート済みのコレクション
        page_number: 1 始まりのページ番号
        page_size: 1 ページあたりの件数

    Returns:
        (ページ内のアイテム, 総ページ数)
    """
    if page_size <= 0:
        raise ValueError("Page size must be positive")

    length = len(sorted_items)
    total_pages = math.ceil(length / page_size)

    start = (page_number - 1) * page_size
    end = start + page_size

    # start と end はそれぞれ独立に [0, length] へ丸める
    start = min(max(start, 0), length)
    end = min(max(end, 0), length)

    return list(sorted_items[start:end]), total_pages


@dataclass(frozen=True)
class Page:
    """
    ページ（値オブジェクト）

    一覧取得リクエストごとに計算される一時的な結果。
    """

    page_number: int
    total_pages: int
    items: list[Movie] = field(default_factory=list)

    def __post_init__(self) -> None:
        """バリデーション"""
        if self.page_number < 1:
            raise ValueError("Page number must be at least 1")

        if self.total_pages < 0:
            raise ValueError("Total pages cannot be negative")

    def to_dict(self) -> dict[str, Any]:
        """JSON 用の辞書に変換"""
        return {
            "data": [movie.to_dict() for movie in self.items],
            "actual_page": self.page_number,
            "total_pages": self.total_pages,
        }
