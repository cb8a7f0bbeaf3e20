"""カスタム例外定義"""


class GeocoderError(Exception):
    """ジオコーダー基底例外"""

    pass


class TransportError(GeocoderError):
    """HTTP通信のエラー（接続失敗、タイムアウト、非2xxレスポンス）"""

    pass


class ParseError(GeocoderError):
    """レスポンス本文が宣言されたフォーマットと一致しない"""

    pass


class InvalidInputError(GeocoderError):
    """正規化対象のレスポンスが構造化データではない"""

    pass


class NoComponentsError(GeocoderError):
    """
    先頭の結果にaddress_componentsが存在しない

    通常は警告ログのみで処理を継続する（strictモード時のみ送出）
    """

    pass
