"""DynamoDB Movie Repository Implementation"""
from __future__ import annotations

from typing import Any

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from src.application.ports.repositories import IMovieRepository, RepositoryError
from src.domain.movie.entities import Movie

logger = structlog.get_logger()

ID_ATTRIBUTE = "ID"
NAME_ATTRIBUTE = "Name"


class DynamoDBMovieRepository(IMovieRepository):
    """
    DynamoDB ベースの Movie Repository

    単一テーブル（パーティションキー ``ID``）に映画を保存する。
    テーブルハンドルはプロセス単位で生成し、呼び出しをまたいで再利用する。
    """

    def __init__(self, table: Any):
        self._table = table

    @classmethod
    def from_table_name(
        cls,
        table_name: str,
        region: str | None = None,
    ) -> DynamoDBMovieRepository:
        """テーブル名から Repository を作成"""
        dynamodb = boto3.resource("dynamodb", region_name=region)
        return cls(dynamodb.Table(table_name))

    def find_by_id(self, movie_id: str) -> Movie | None:
        log = logger.bind(movie_id=movie_id)

        try:
            response = self._table.get_item(Key={ID_ATTRIBUTE: movie_id})
        except (ClientError, BotoCoreError) as e:
            log.error("dynamodb_error", operation="get_item", error=str(e))
            raise RepositoryError("get_item", str(e)) from e

        item = response.get("Item")
        if not item:
            return None

        return self._deserialize(item)

    def find_all(self) -> list[Movie]:
        """
        テーブル全件をスキャン

        1 回の Scan は最大 1MB までしか返さないため、
        LastEvaluatedKey がなくなるまで続けて読む。
        """
        movies: list[Movie] = []
        scan_kwargs: dict[str, Any] = {}

        try:
            while True:
                response = self._table.scan(**scan_kwargs)
                movies.extend(self._deserialize(item) for item in response.get("Items", []))

                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                scan_kwargs["ExclusiveStartKey"] = last_key
        except (ClientError, BotoCoreError) as e:
            logger.error("dynamodb_error", operation="scan", error=str(e))
            raise RepositoryError("scan", str(e)) from e

        logger.info("movies_scanned", count=len(movies))
        return movies

    def save(self, movie: Movie) -> None:
        try:
            self._table.put_item(Item=self._serialize(movie))
        except (ClientError, BotoCoreError) as e:
            logger.error("dynamodb_error", operation="put_item", movie_id=movie.id, error=str(e))
            raise RepositoryError("put_item", str(e)) from e

    def update_name(self, movie_id: str, name: str) -> None:
        try:
            self._table.update_item(
                Key={ID_ATTRIBUTE: movie_id},
                UpdateExpression="SET #NAME = :name",
                ExpressionAttributeNames={"#NAME": NAME_ATTRIBUTE},
                ExpressionAttributeValues={":name": name},
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("dynamodb_error", operation="update_item", movie_id=movie_id, error=str(e))
            raise RepositoryError("update_item", str(e)) from e

    def delete(self, movie_id: str) -> None:
        try:
            self._table.delete_item(Key={ID_ATTRIBUTE: movie_id})
        except (ClientError, BotoCoreError) as e:
            logger.error("dynamodb_error", operation="delete_item", movie_id=movie_id, error=str(e))
            raise RepositoryError("delete_item", str(e)) from e

    def _serialize(self, movie: Movie) -> dict[str, Any]:
        """MovieをDynamoDBアイテムにシリアライズ"""
        return {
            ID_ATTRIBUTE: movie.id,
            NAME_ATTRIBUTE: movie.name,
        }

    def _deserialize(self, item: dict[str, Any]) -> Movie:
        """DynamoDBアイテムをMovieにデシリアライズ"""
        return Movie(
            id=item[ID_ATTRIBUTE],
            name=item.get(NAME_ATTRIBUTE, ""),
        )
