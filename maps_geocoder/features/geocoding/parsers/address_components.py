"""住所コンポーネントの正規化"""

from collections.abc import Mapping
from typing import Any

from ..domain.enums import ADDRESS_COMPONENT_FIELDS
from ....shared.exceptions.errors import InvalidInputError, NoComponentsError
from ....shared.logging.config import get_logger

logger = get_logger(__name__)


def get_address_components(
    response: Any,
    strict: bool = False,
    use_long_name: bool = False,
) -> dict[str, Any]:
    """
    Geocoding APIのレスポンスから住所コンポーネントを平坦な辞書に変換

    - 先頭の結果のみを使用
    - 各コンポーネントの先頭のtypeでフィールド名を決定し、対応がなければスキップ
    - 先頭の結果の geometry.location から latitude / longitude を追加

    Args:
        response: parse_json() 済みのレスポンス
        strict: address_components が無い場合に例外を送出するか
        use_long_name: short_name の代わりに long_name を使用するか

    Returns:
        dict[str, Any]: 正規化した住所（存在しないフィールドは含まない）

    Raises:
        InvalidInputError: レスポンスが辞書でない、results を持たない、
            または先頭の結果・geometry・location が辞書でない場合
        NoComponentsError: strict=True で住所コンポーネントが無い場合
    """
    if not isinstance(response, Mapping):
        raise InvalidInputError(
            f"No response given to get_address_components: {type(response).__name__}"
        )

    results = response.get("results")
    if not isinstance(results, list):
        raise InvalidInputError("Response has no results list")

    out: dict[str, Any] = {}

    if not results:
        _no_components("No results found in response", strict)
        return out

    # 最初の結果を使用
    result = results[0]
    if not isinstance(result, Mapping):
        raise InvalidInputError(f"Malformed result: {type(result).__name__}")

    components = result.get("address_components")
    name_key = "long_name" if use_long_name else "short_name"

    if isinstance(components, list) and components:
        for component in components:
            # 辞書でないコンポーネントは未知のtypeと同様にスキップ
            if not isinstance(component, Mapping):
                continue

            types = component.get("types")
            if not isinstance(types, list) or not types:
                continue

            field = ADDRESS_COMPONENT_FIELDS.get(types[0])
            if field:
                out[field] = component.get(name_key)
    else:
        _no_components("No address components found for this address", strict)

    geometry = result.get("geometry") or {}
    if not isinstance(geometry, Mapping):
        raise InvalidInputError(f"Malformed geometry: {type(geometry).__name__}")

    location = geometry.get("location") or {}
    if not isinstance(location, Mapping):
        raise InvalidInputError(f"Malformed location: {type(location).__name__}")

    if "lat" in location:
        out["latitude"] = location["lat"]
    if "lng" in location:
        out["longitude"] = location["lng"]

    return out


def _no_components(message: str, strict: bool) -> None:
    if strict:
        raise NoComponentsError(message)
    logger.warning(message)
