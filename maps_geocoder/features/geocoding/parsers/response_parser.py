"""レスポンス本文のパース"""

import json
from typing import Any, Union

from bs4 import BeautifulSoup

from ..domain.enums import ResponseFormat
from ....shared.exceptions.errors import ParseError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


def parse_json(body: str) -> dict[str, Any]:
    """
    JSONレスポンスを辞書に変換

    Raises:
        ParseError: JSONとして解釈できない、またはオブジェクトでない場合
    """
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid JSON response: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(f"Unexpected JSON response type: {type(data).__name__}")

    return data


def parse_xml(body: str) -> BeautifulSoup:
    """
    XMLレスポンスをドキュメントツリーに変換

    Raises:
        ParseError: ルート要素が存在しない場合
    """
    if not body or not body.strip():
        raise ParseError("Empty XML response")

    soup = BeautifulSoup(body, "xml")

    if soup.find() is None:
        raise ParseError("Invalid XML response: no root element")

    return soup


def parse_response(
    body: str, response_format: Union[str, ResponseFormat]
) -> Union[dict[str, Any], BeautifulSoup]:
    """
    宣言されたフォーマットに従ってレスポンス本文をパース

    Args:
        body: レスポンス本文
        response_format: json / xml

    Returns:
        JSONの場合は辞書、XMLの場合はBeautifulSoupのドキュメントツリー

    Raises:
        ParseError: 本文がフォーマットと一致しない場合
    """
    response_format = ResponseFormat.from_value(response_format)
    logger.debug(f"Parsing {response_format.value} response ({len(body or '')} chars)")

    if response_format == ResponseFormat.XML:
        return parse_xml(body)
    return parse_json(body)
