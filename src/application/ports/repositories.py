"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.movie.entities import Movie


class RepositoryError(Exception):
    """
    ストレージ層の失敗

    バックエンド固有のエラー内容はログにのみ残し、呼び出し側には
    どの操作が失敗したかだけを伝える。
    """

    def __init__(self, operation: str, detail: str = ""):
        super().__init__(f"{operation} failed: {detail}" if detail else f"{operation} failed")
        self.operation = operation
        self.detail = detail


class IMovieRepository(ABC):
    """
    Movie Repository Interface

    依存性逆転の原則に従い、アプリケーション層から参照可能な抽象インターフェース。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    各メソッドは失敗時に RepositoryError を送出する。
    """

    @abstractmethod
    def find_by_id(self, movie_id: str) -> Movie | None:
        """IDで映画を取得"""
        pass

    @abstractmethod
    def find_all(self) -> list[Movie]:
        """全件取得（順序は保証しない）"""
        pass

    @abstractmethod
    def save(self, movie: Movie) -> None:
        """映画を保存（既存IDは上書き）"""
        pass

    @abstractmethod
    def update_name(self, movie_id: str, name: str) -> None:
        """名前のみを更新（存在しないIDではレコードが作成される）"""
        pass

    @abstractmethod
    def delete(self, movie_id: str) -> None:
        """映画を削除（存在しないIDでも成功）"""
        pass
