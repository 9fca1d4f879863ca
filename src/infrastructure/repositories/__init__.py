"""Infrastructure Repositories"""
from .dynamodb_movie_repository import DynamoDBMovieRepository

__all__ = ["DynamoDBMovieRepository"]
