"""HTTPクライアント"""

from typing import Any, Optional

import requests

from ..exceptions.errors import TransportError
from ..logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = "maps-geocoder/1.0 (+https://pypi.org/project/maps-geocoder/)"


class HTTPClient:
    """
    セッションを保持するHTTPクライアント

    リトライは行わない。1回のGETで成功するか、TransportErrorを送出する。
    """

    def __init__(
        self,
        timeout: float = 20,
        user_agent: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            timeout: リクエストタイムアウト（秒）
            user_agent: User-Agentヘッダー
            session: 既存のセッション（テスト用に差し替え可能）
        """
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT

        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()
        session.headers.update({"User-Agent": self.user_agent})
        return session

    def get(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        encoding: Optional[str] = None,
    ) -> requests.Response:
        """
        GETリクエスト

        Args:
            url: リクエストURL
            params: クエリパラメータ
            headers: 追加ヘッダー
            encoding: レスポンスのエンコーディング（Noneの場合は自動検出）

        Returns:
            レスポンスオブジェクト

        Raises:
            TransportError: リクエスト失敗時
        """
        try:
            logger.debug(f"GET request to {url}")
            response = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )

            if encoding:
                response.encoding = encoding

            response.raise_for_status()
            logger.debug(f"GET request successful: {url} (status={response.status_code})")
            return response

        except requests.RequestException as e:
            logger.error(f"GET request failed: {url} - {e}")
            raise TransportError(f"Failed to GET {url}: {e}") from e

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
