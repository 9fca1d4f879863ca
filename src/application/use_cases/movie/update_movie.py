"""Update Movie Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.repositories import IMovieRepository

logger = structlog.get_logger()


@dataclass
class UpdateMovieInput:
    """更新入力DTO"""

    movie_id: str
    name: str = ""


class UpdateMovieUseCase:
    """
    映画更新 ユースケース

    name 属性のみを書き換える部分更新。事前の存在確認は行わず、
    未登録の ID の場合はストレージ側でレコードが作成される。
    """

    def __init__(self, movie_repository: IMovieRepository):
        self._movie_repo = movie_repository

    def execute(self, input_data: UpdateMovieInput) -> None:
        """ユースケースを実行"""
        log = logger.bind(movie_id=input_data.movie_id)
        log.info("update_movie_started")

        self._movie_repo.update_name(input_data.movie_id, input_data.name)

        log.info("update_movie_completed")
