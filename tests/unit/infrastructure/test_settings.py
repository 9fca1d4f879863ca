"""Settings Unit Tests"""
import pytest
from pydantic import ValidationError

from src.infrastructure.config import Settings


class TestSettings:
    """環境変数からの設定読み込みのテスト"""

    def test_defaults(self, monkeypatch):
        """正常: デフォルト値"""
        for name in ("TABLE_NAME", "PAGE_SIZE", "LOG_LEVEL", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.table_name == "movies"
        assert settings.page_size == 3
        assert settings.log_level == "INFO"
        assert settings.is_production is False

    def test_from_environment(self, monkeypatch):
        """正常: 環境変数を読み込む"""
        monkeypatch.setenv("TABLE_NAME", "movies-prod")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings(_env_file=None)

        assert settings.table_name == "movies-prod"
        assert settings.is_production is True

    def test_invalid_page_size(self, monkeypatch):
        """異常: ページサイズ 0"""
        monkeypatch.setenv("PAGE_SIZE", "0")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
