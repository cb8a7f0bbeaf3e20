"""ジオコーディングサービス"""

from typing import Any, Optional, Union

from bs4 import BeautifulSoup

from ..builders.request_builder import GeocodeRequest
from ..domain.enums import ResponseFormat
from ..parsers.address_components import get_address_components
from ..parsers.response_parser import parse_response
from ....infrastructure.config.settings import Settings
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


class GeocodingService:
    """
    GeocodeRequest を実行し、レスポンスを返すサービス

    APIのstatusフィールド（OK, ZERO_RESULTS など）は解釈しない。
    """

    def __init__(
        self,
        http_client: Optional[HTTPClient] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        """
        Args:
            http_client: HTTPクライアント（省略時は設定から作成）
            settings: アプリケーション設定（省略時は環境変数から読み込み）
        """
        self.settings = settings or Settings()

        self._owns_client = http_client is None
        self.http_client = http_client or HTTPClient(
            timeout=self.settings.http_timeout,
            user_agent=self.settings.http_user_agent,
        )

        logger.debug(
            f"GeocodingService initialized: https={self.settings.geocoder_use_https}"
        )

    def fetch(
        self,
        url: str,
        response_format: Union[str, ResponseFormat] = ResponseFormat.JSON,
        raw: bool = False,
    ) -> Union[str, dict[str, Any], BeautifulSoup]:
        """
        URLを取得し、本文またはパース結果を返す

        Args:
            url: リクエストURL
            response_format: レスポンスフォーマット
            raw: Trueの場合は本文の文字列をそのまま返す

        Returns:
            本文文字列、辞書（JSON）またはドキュメントツリー（XML）

        Raises:
            TransportError: HTTPリクエストに失敗した場合
            ParseError: 本文がフォーマットと一致しない場合
        """
        response = self.http_client.get(url)
        body = response.text

        if raw:
            return body

        return parse_response(body, response_format)

    def geocode(
        self,
        request: GeocodeRequest,
        https: Optional[bool] = None,
        raw: bool = False,
    ) -> Union[str, dict[str, Any], BeautifulSoup]:
        """
        リクエストを実行

        Args:
            request: ジオコーディングリクエスト
            https: HTTPSを使用するか（Noneの場合は設定値）
            raw: Trueの場合は本文の文字列をそのまま返す

        Returns:
            本文文字列、辞書（JSON）またはドキュメントツリー（XML）
        """
        if https is None:
            https = self.settings.geocoder_use_https

        url = request.render(https=https)
        logger.info(f"Geocoding request: {request.address or request.latitude_longitude}")

        return self.fetch(url, request.format, raw=raw)

    def geocode_address_components(
        self,
        request: GeocodeRequest,
        https: Optional[bool] = None,
        strict: bool = False,
    ) -> dict[str, Any]:
        """
        リクエストを実行し、先頭の結果を正規化した住所として返す

        住所コンポーネントの抽出にはJSONが必要なため、フォーマットはJSONに切り替える。
        """
        if not request.is_format_json:
            logger.debug("Switching response format to json for address components")
            request.set_format(ResponseFormat.JSON)

        response = self.geocode(request, https=https)
        return get_address_components(response, strict=strict)

    def close(self) -> None:
        """所有しているHTTPセッションをクローズ"""
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "GeocodingService":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
