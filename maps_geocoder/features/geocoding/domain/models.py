"""ジオコーディング機能のドメインモデル"""
from dataclasses import dataclass
from typing import Optional

from .enums import ResponseFormat


@dataclass
class GeocodeRequestParameters:
    """
    ジオコーディングリクエストのパラメータ

    address と latitude/longitude の両方が設定された場合は address を優先する。
    どちらも未設定の空リクエストも構築自体は可能。
    """

    address: Optional[str] = None  # 住所
    latitude: Optional[float] = None  # 緯度（逆ジオコーディング用）
    longitude: Optional[float] = None  # 経度（逆ジオコーディング用）

    # バウンディングボックス（南西・北東）
    bounds_southwest_latitude: Optional[float] = None
    bounds_southwest_longitude: Optional[float] = None
    bounds_northeast_latitude: Optional[float] = None
    bounds_northeast_longitude: Optional[float] = None

    region: Optional[str] = None  # 地域バイアス（ccTLD）
    language: Optional[str] = None  # 言語コード
    sensor: bool = False  # 位置センサーの有無
    format: ResponseFormat = ResponseFormat.JSON


@dataclass
class BoundingBox:
    """中心点と半径から求めた矩形領域"""

    south: float  # 最小緯度
    west: float  # 最小経度
    north: float  # 最大緯度
    east: float  # 最大経度

    def __repr__(self) -> str:
        return (
            f"BoundingBox(south={self.south}, west={self.west}, "
            f"north={self.north}, east={self.east})"
        )

    @property
    def southwest(self) -> tuple[float, float]:
        """南西端の(緯度, 経度)"""
        return (self.south, self.west)

    @property
    def northeast(self) -> tuple[float, float]:
        """北東端の(緯度, 経度)"""
        return (self.north, self.east)

    def to_dict(self) -> dict[str, dict[str, float]]:
        """{"lat": {"max", "min"}, "lon": {"max", "min"}} 形式の辞書に変換"""
        return {
            "lat": {"max": self.north, "min": self.south},
            "lon": {"max": self.east, "min": self.west},
        }
