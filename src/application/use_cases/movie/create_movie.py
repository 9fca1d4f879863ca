"""Create Movie Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.repositories import IMovieRepository
from src.domain.movie.entities import Movie

logger = structlog.get_logger()


@dataclass
class CreateMovieInput:
    """作成入力DTO"""

    movie_id: str
    name: str = ""


class CreateMovieUseCase:
    """
    映画作成 ユースケース

    既存 ID の存在確認は行わない（上書き保存）。
    """

    def __init__(self, movie_repository: IMovieRepository):
        self._movie_repo = movie_repository

    def execute(self, input_data: CreateMovieInput) -> Movie:
        """ユースケースを実行"""
        log = logger.bind(movie_id=input_data.movie_id)
        log.info("create_movie_started")

        movie = Movie(id=input_data.movie_id, name=input_data.name)
        self._movie_repo.save(movie)

        log.info("create_movie_completed")
        return movie
