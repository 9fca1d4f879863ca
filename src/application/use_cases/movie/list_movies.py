"""List Movies Use Case"""
from __future__ import annotations

from dataclasses import dataclass

import structlog

from src.application.ports.repositories import IMovieRepository
from src.domain.movie.value_objects import DEFAULT_PAGE_SIZE, Page, paginate

logger = structlog.get_logger()


class PageOutOfRangeError(Exception):
    """要求ページが総ページ数を超えているエラー"""

    def __init__(self, page_number: int, total_pages: int):
        super().__init__(
            f"Requested page {page_number} exceeds total pages {total_pages}"
        )
        self.page_number = page_number
        self.total_pages = total_pages


@dataclass
class ListMoviesInput:
    """一覧入力DTO"""

    page_number: int = 1


class ListMoviesUseCase:
    """
    映画一覧 ユースケース

    1. 全件をスキャン
    2. ID 昇順（辞書順）でソート
    3. 固定ページサイズでページング
    """

    def __init__(
        self,
        movie_repository: IMovieRepository,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._movie_repo = movie_repository
        self._page_size = page_size

    def execute(self, input_data: ListMoviesInput) -> Page:
        """ユースケースを実行"""
        log = logger.bind(page_number=input_data.page_number, page_size=self._page_size)
        log.info("list_movies_started")

        movies = sorted(self._movie_repo.find_all(), key=lambda m: m.id)
        items, total_pages = paginate(movies, input_data.page_number, self._page_size)

        if input_data.page_number > total_pages:
            log.warning("page_out_of_range", total_pages=total_pages)
            raise PageOutOfRangeError(input_data.page_number, total_pages)

        log.info("list_movies_completed", count=len(items), total_pages=total_pages)

        return Page(
            page_number=input_data.page_number,
            total_pages=total_pages,
            items=items,
        )
