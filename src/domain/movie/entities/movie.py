"""Movie Entity"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Movie:
    """
    映画（エンティティ）

    呼び出し側が指定する ID をキーとする唯一のリソース。
    サーバ側で生成するフィールドやバージョンは持たない。
    """

    id: str
    name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON 用の辞書に変換"""
        return {
            "id": self.id,
            "name": self.name,
        }
