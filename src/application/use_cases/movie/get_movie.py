"""Get Movie Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.repositories import IMovieRepository
from src.domain.movie.entities import Movie

logger = structlog.get_logger()


class MovieNotFoundError(Exception):
    """映画が見つからないエラー"""

    def __init__(self, movie_id: str):
        super().__init__(f"Movie {movie_id} not found")
        self.movie_id = movie_id


@dataclass
class GetMovieInput:
    """取得入力DTO"""

    movie_id: str


class GetMovieUseCase:
    """映画取得 ユースケース"""

    def __init__(self, movie_repository: IMovieRepository):
        self._movie_repo = movie_repository

    def execute(self, input_data: GetMovieInput) -> Movie:
        """ユースケースを実行"""
        log = logger.bind(movie_id=input_data.movie_id)
        log.info("get_movie_started")

        movie = self._movie_repo.find_by_id(input_data.movie_id)
        if movie is None:
            log.warning("movie_not_found")
            raise MovieNotFoundError(input_data.movie_id)

        log.info("get_movie_completed")
        return movie
