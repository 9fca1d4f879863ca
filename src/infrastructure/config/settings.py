"""Application Settings"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    service_name: str = "movies-api"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS (Lambda 実行環境では AWS_REGION が自動設定される)
    aws_region: Optional[str] = None

    # DynamoDB
    table_name: str = "movies"

    # Pagination
    page_size: int = Field(default=3, gt=0)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
