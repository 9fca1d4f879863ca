"""Movie API Router"""
from __future__ import annotations

from typing import Callable

import structlog

from src.application.ports.repositories import IMovieRepository
from src.application.use_cases.movie import (
    CreateMovieInput,
    CreateMovieUseCase,
    DeleteMovieInput,
    DeleteMovieUseCase,
    GetMovieInput,
    GetMovieUseCase,
    ListMoviesInput,
    ListMoviesUseCase,
    UpdateMovieInput,
    UpdateMovieUseCase,
)
from src.domain.movie.value_objects import DEFAULT_PAGE_SIZE
from src.presentation.api.exceptions import MethodNotAllowedError
from src.presentation.api.request import ApiRequest
from src.presentation.api.responses import ApiResponse, json_response, success_response
from src.presentation.api.schemas import parse_movie_payload, parse_page
from src.presentation.middleware.error_handler import handle_error

logger = structlog.get_logger()

RouteHandler = Callable[[ApiRequest], ApiResponse]


class Router:
    """
    映画リソースのリクエストルータ

    (HTTP メソッド, id の有無) の固定テーブルで 5 つの操作に振り分け、
    結果またはドメインエラーを正規化されたレスポンスに変換する。
    ルータは常に整形済みのレスポンスを返し、例外を外へ送出しない。
    """

    def __init__(
        self,
        movie_repository: IMovieRepository,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        self._get_movie = GetMovieUseCase(movie_repository)
        self._list_movies = ListMoviesUseCase(movie_repository, page_size=page_size)
        self._create_movie = CreateMovieUseCase(movie_repository)
        self._update_movie = UpdateMovieUseCase(movie_repository)
        self._delete_movie = DeleteMovieUseCase(movie_repository)

        self._routes: dict[tuple[str, bool], RouteHandler] = {
            ("GET", False): self.list_movies,
            ("GET", True): self.get_movie,
        }
        # 書き込み系はパスの id を参照せずボディの id を使う
        for has_id in (False, True):
            self._routes[("POST", has_id)] = self.create_movie
            self._routes[("PUT", has_id)] = self.update_movie
            self._routes[("DELETE", has_id)] = self.delete_movie

    def handle(self, request: ApiRequest) -> ApiResponse:
        """リクエストを処理してレスポンスを返す"""
        route = self._routes.get((request.method.upper(), request.has_id))

        try:
            if route is None:
                raise MethodNotAllowedError(request.method)
            response = route(request)
        except Exception as exc:
            response = handle_error(exc)

        logger.info(
            "request_routed",
            method=request.method,
            has_id=request.has_id,
            status_code=response.status_code,
        )
        return response

    def get_movie(self, request: ApiRequest) -> ApiResponse:
        """GET /movies/{id}"""
        movie = self._get_movie.execute(GetMovieInput(movie_id=request.resource_id))
        return json_response(200, movie.to_dict())

    def list_movies(self, request: ApiRequest) -> ApiResponse:
        """GET /movies?page=n"""
        page_number = parse_page(request)
        page = self._list_movies.execute(ListMoviesInput(page_number=page_number))
        return json_response(200, page.to_dict())

    def create_movie(self, request: ApiRequest) -> ApiResponse:
        """POST /movies"""
        payload = parse_movie_payload(request)
        self._create_movie.execute(CreateMovieInput(movie_id=payload.id, name=payload.name))
        return success_response("resource created successfully")

    def update_movie(self, request: ApiRequest) -> ApiResponse:
        """PUT /movies"""
        payload = parse_movie_payload(request)
        self._update_movie.execute(UpdateMovieInput(movie_id=payload.id, name=payload.name))
        return success_response("resource updated successfully")

    def delete_movie(self, request: ApiRequest) -> ApiResponse:
        """DELETE /movies"""
        payload = parse_movie_payload(request)
        self._delete_movie.execute(DeleteMovieInput(movie_id=payload.id))
        return success_response("resource deleted successfully")
