"""Delete Movie Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.repositories import IMovieRepository

logger = structlog.get_logger()


@dataclass
class DeleteMovieInput:
    """削除入力DTO"""

    movie_id: str


class DeleteMovieUseCase:
    """映画削除 ユースケース（冪等）"""

    def __init__(self, movie_repository: IMovieRepository):
        self._movie_repo = movie_repository

    def execute(self, input_data: DeleteMovieInput) -> None:
        log = logger.bind(movie_id=input_data.movie_id)
        log.info("delete_movie_started")

        self._movie_repo.delete(input_data.movie_id)

        log.info("delete_movie_completed")
