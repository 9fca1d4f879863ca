"""Shared pytest fixtures"""
from __future__ import annotations

import pytest

from src.application.ports.repositories import IMovieRepository, RepositoryError
from src.domain.movie.entities import Movie


class InMemoryMovieRepository(IMovieRepository):
    """
    テスト用のインメモリ Repository

    DynamoDB と同じく create は上書き、update は存在しない ID でも
    レコードを作成し、delete は冪等。
    """

    def __init__(self, movies: list[Movie] | None = None):
        self.items: dict[str, str] = {m.id: m.name for m in movies or []}
        self.call_count = 0
        self.fail_with: str | None = None

    def _call(self, operation: str) -> None:
        self.call_count += 1
        if self.fail_with is not None:
            raise RepositoryError(operation, self.fail_with)

    def find_by_id(self, movie_id: str) -> Movie | None:
        self._call("get_item")
        if movie_id not in self.items:
            return None
        return Movie(id=movie_id, name=self.items[movie_id])

    def find_all(self) -> list[Movie]:
        self._call("scan")
        # 実ストレージと同じく順序は保証しない
        return [Movie(id=k, name=v) for k, v in reversed(list(self.items.items()))]

    def save(self, movie: Movie) -> None:
        self._call("put_item")
        self.items[movie.id] = movie.name

    def update_name(self, movie_id: str, name: str) -> None:
        self._call("update_item")
        self.items[movie_id] = name

    def delete(self, movie_id: str) -> None:
        self._call("delete_item")
        self.items.pop(movie_id, None)


@pytest.fixture
def movie_repository() -> InMemoryMovieRepository:
    """空のインメモリ Repository"""
    return InMemoryMovieRepository()


@pytest.fixture
def seven_movies() -> list[Movie]:
    """ID 順に m1〜m7 の 7 件"""
    return [Movie(id=f"m{i}", name=f"Movie {i}") for i in range(1, 8)]
