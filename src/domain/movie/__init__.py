"""Movie Domain Module"""
from .entities.movie import Movie
from .value_objects.page import DEFAULT_PAGE_SIZE, Page, paginate

__all__ = [
    "Movie",
    "Page",
    "DEFAULT_PAGE_SIZE",
    "paginate",
]
