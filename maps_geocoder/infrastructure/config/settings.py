"""アプリケーション設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    environment: str = Field(
        default="development",
        description="環境 (development, staging, production)",
    )

    # Geocoding
    geocoder_use_https: bool = Field(
        default=False,
        description="HTTPSエンドポイントを使用するか",
    )
    geocoder_format: str = Field(
        default="json",
        description="レスポンスフォーマット (json, xml)",
    )
    geocoder_region: Optional[str] = Field(
        default=None,
        description="地域バイアス（ccTLDの2文字コード、例: jp）",
    )
    geocoder_language: Optional[str] = Field(
        default=None,
        description="結果の言語コード（例: ja）",
    )
    geocoder_sensor: bool = Field(
        default=False,
        description="位置センサーを持つ端末からのリクエストか",
    )

    # HTTP
    http_timeout: float = Field(
        default=20,
        description="HTTPリクエストのタイムアウト（秒）",
    )
    http_user_agent: Optional[str] = Field(
        default=None,
        description="HTTPリクエストのUser-Agent（未設定時は既定値）",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("geocoder_format")
    @classmethod
    def _validate_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "xml"):
            raise ValueError(f"Unsupported response format: {value}")
        return value
