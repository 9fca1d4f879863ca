"""Movie Use Cases"""
from .create_movie import CreateMovieInput, CreateMovieUseCase
from .delete_movie import DeleteMovieInput, DeleteMovieUseCase
from .get_movie import GetMovieInput, GetMovieUseCase, MovieNotFoundError
from .list_movies import ListMoviesInput, ListMoviesUseCase, PageOutOfRangeError
from .update_movie import UpdateMovieInput, UpdateMovieUseCase

__all__ = [
    "CreateMovieInput",
    "CreateMovieUseCase",
    "DeleteMovieInput",
    "DeleteMovieUseCase",
    "GetMovieInput",
    "GetMovieUseCase",
    "MovieNotFoundError",
    "ListMoviesInput",
    "ListMoviesUseCase",
    "PageOutOfRangeError",
    "UpdateMovieInput",
    "UpdateMovieUseCase",
]
