"""Geocoding APIリクエストビルダー"""
from typing import TYPE_CHECKING, Optional, Union
from urllib.parse import urlencode

from ..domain.enums import URL_HTTP, URL_HTTPS, ResponseFormat
from ..domain.models import BoundingBox, GeocodeRequestParameters
from ....shared.logging.config import get_logger

if TYPE_CHECKING:
    from ....infrastructure.config.settings import Settings

logger = get_logger(__name__)


def _format_coordinate(latitude: Optional[float], longitude: Optional[float]) -> Optional[str]:
    """「{緯度},{経度}」形式に変換（どちらかが未設定ならNone）"""
    if latitude is None or longitude is None:
        return None
    return f"{latitude},{longitude}"


class GeocodeRequest:
    """
    Geocoding APIのリクエストパラメータを保持し、URLを組み立てる

    set_* メソッドは自身を返すため連結して呼び出せる。

    Example:
        >>> request = GeocodeRequest("1600 Amphitheatre Parkway, Mountain View, CA")
        >>> request.set_region("us").set_language("en").render(https=True)
    """

    def __init__(
        self,
        address: Optional[str] = None,
        format: Union[str, ResponseFormat] = ResponseFormat.JSON,
        sensor: Union[bool, str] = False,
    ) -> None:
        """
        Args:
            address: 住所
            format: レスポンスフォーマット（json / xml）
            sensor: 位置センサーの有無
        """
        self.params = GeocodeRequestParameters()
        self.set_address(address).set_format(format).set_sensor(sensor)

    @classmethod
    def from_settings(cls, settings: "Settings", address: Optional[str] = None) -> "GeocodeRequest":
        """設定のデフォルト値（フォーマット、地域、言語、センサー）でリクエストを作成"""
        return (
            cls(address, format=settings.geocoder_format, sensor=settings.geocoder_sensor)
            .set_region(settings.geocoder_region)
            .set_language(settings.geocoder_language)
        )

    # Format

    def set_format(self, format: Union[str, ResponseFormat]) -> "GeocodeRequest":
        self.params.format = ResponseFormat.from_value(format)
        return self

    @property
    def format(self) -> ResponseFormat:
        return self.params.format

    @property
    def is_format_json(self) -> bool:
        return self.params.format == ResponseFormat.JSON

    @property
    def is_format_xml(self) -> bool:
        return self.params.format == ResponseFormat.XML

    # Address / coordinates

    def set_address(self, address: Optional[str]) -> "GeocodeRequest":
        self.params.address = address
        return self

    @property
    def address(self) -> Optional[str]:
        return self.params.address

    def set_latitude(self, latitude: Optional[float]) -> "GeocodeRequest":
        self.params.latitude = latitude
        return self

    @property
    def latitude(self) -> Optional[float]:
        return self.params.latitude

    def set_longitude(self, longitude: Optional[float]) -> "GeocodeRequest":
        self.params.longitude = longitude
        return self

    @property
    def longitude(self) -> Optional[float]:
        return self.params.longitude

    def set_latitude_longitude(
        self, latitude: Optional[float], longitude: Optional[float]
    ) -> "GeocodeRequest":
        """逆ジオコーディング用の座標を設定"""
        return self.set_latitude(latitude).set_longitude(longitude)

    @property
    def latitude_longitude(self) -> Optional[str]:
        """「{緯度},{経度}」形式の座標（未設定ならNone）"""
        return _format_coordinate(self.params.latitude, self.params.longitude)

    # Bounds

    def set_bounds(
        self,
        southwest_latitude: Optional[float],
        southwest_longitude: Optional[float],
        northeast_latitude: Optional[float],
        northeast_longitude: Optional[float],
    ) -> "GeocodeRequest":
        """結果を優先する矩形領域（南西端・北東端）を設定"""
        return self.set_bounds_southwest(southwest_latitude, southwest_longitude).set_bounds_northeast(
            northeast_latitude, northeast_longitude
        )

    def set_bounds_from_box(self, box: BoundingBox) -> "GeocodeRequest":
        """bounding_box() の計算結果を矩形領域として設定"""
        return self.set_bounds(box.south, box.west, box.north, box.east)

    def set_bounds_southwest(
        self, latitude: Optional[float], longitude: Optional[float]
    ) -> "GeocodeRequest":
        self.params.bounds_southwest_latitude = latitude
        self.params.bounds_southwest_longitude = longitude
        return self

    def set_bounds_northeast(
        self, latitude: Optional[float], longitude: Optional[float]
    ) -> "GeocodeRequest":
        self.params.bounds_northeast_latitude = latitude
        self.params.bounds_northeast_longitude = longitude
        return self

    @property
    def bounds_southwest(self) -> Optional[str]:
        return _format_coordinate(
            self.params.bounds_southwest_latitude, self.params.bounds_southwest_longitude
        )

    @property
    def bounds_northeast(self) -> Optional[str]:
        return _format_coordinate(
            self.params.bounds_northeast_latitude, self.params.bounds_northeast_longitude
        )

    @property
    def bounds(self) -> Optional[str]:
        """「{南西}|{北東}」形式の矩形（どちらかの端が未設定ならNone）"""
        southwest = self.bounds_southwest
        northeast = self.bounds_northeast
        if southwest and northeast:
            return f"{southwest}|{northeast}"
        return None

    # Region / language / sensor

    def set_region(self, region: Optional[str]) -> "GeocodeRequest":
        self.params.region = region
        return self

    @property
    def region(self) -> Optional[str]:
        return self.params.region

    def set_language(self, language: Optional[str]) -> "GeocodeRequest":
        self.params.language = language
        return self

    @property
    def language(self) -> Optional[str]:
        return self.params.language

    def set_sensor(self, sensor: Union[bool, str]) -> "GeocodeRequest":
        """
        センサーフラグを設定

        文字列 "true" / "false" はそのまま解釈し、"0" と空文字は偽とする。
        それ以外は真偽値として評価する。
        """
        if sensor == "true":
            self.params.sensor = True
        elif sensor in ("false", "0", ""):
            self.params.sensor = False
        else:
            self.params.sensor = bool(sensor)
        return self

    @property
    def sensor(self) -> str:
        """クエリに載せるセンサーフラグ（"true" / "false"）"""
        return "true" if self.params.sensor else "false"

    # Rendering

    def query_params(self) -> list[tuple[str, str]]:
        """
        クエリパラメータを送信順に取得

        未設定・空文字のパラメータは含めない。sensorは常に含める。

        Returns:
            list[tuple[str, str]]: (キー, 値) のリスト
        """
        params: list[tuple[str, Optional[str]]] = []

        # address と latlng のどちらかが必須（両方ある場合は address を優先）
        if self.address:
            params.append(("address", self.address))
        elif self.latitude_longitude:
            params.append(("latlng", self.latitude_longitude))

        params.append(("bounds", self.bounds))
        params.append(("region", self.region))
        params.append(("language", self.language))
        params.append(("sensor", self.sensor))

        return [(key, value) for key, value in params if value]

    def query_string(self) -> str:
        """URLエンコード済みのクエリ文字列"""
        return urlencode(self.query_params())

    def render(self, https: bool = False) -> str:
        """
        リクエストURLを組み立てる

        Args:
            https: HTTPSエンドポイントを使用するか

        Returns:
            str: リクエストURL
        """
        base_url = URL_HTTPS if https else URL_HTTP
        url = f"{base_url}{self.format.value}?{self.query_string()}"
        logger.debug(f"Rendered geocode URL: {url}")
        return url

    def __repr__(self) -> str:
        return f"GeocodeRequest({self.query_params()!r}, format={self.format.value})"
