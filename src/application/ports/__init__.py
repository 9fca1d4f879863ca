"""Application Ports (Interfaces)"""
from .repositories import IMovieRepository, RepositoryError

__all__ = [
    "IMovieRepository",
    "RepositoryError",
]
