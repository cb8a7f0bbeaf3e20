"""ジオコーディング機能のEnum・定数定義"""
from enum import Enum

URL_HTTP = "http://maps.googleapis.com/maps/api/geocode/"
URL_HTTPS = "https://maps.googleapis.com/maps/api/geocode/"

# 緯度1度あたりのマイル数
EQUATOR_LAT_DEGREE_IN_MILES = 69.172


class ResponseFormat(str, Enum):
    """レスポンスフォーマット（URLのパスセグメント）"""

    JSON = "json"
    XML = "xml"

    @classmethod
    def from_value(cls, value: "str | ResponseFormat") -> "ResponseFormat":
        """文字列またはEnumから取得（大文字小文字は区別しない）"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Invalid response format: {value}")


class GeocodeStatus(str, Enum):
    """APIレスポンスのstatusフィールド"""

    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    INVALID_REQUEST = "INVALID_REQUEST"


class LocationType(str, Enum):
    """geometry.location_type の値"""

    ROOFTOP = "ROOFTOP"
    RANGE_INTERPOLATED = "RANGE_INTERPOLATED"
    GEOMETRIC_CENTER = "GEOMETRIC_CENTER"
    APPROXIMATE = "APPROXIMATE"


class AddressType(str, Enum):
    """結果および住所コンポーネントのtypes"""

    STREET_ADDRESS = "street_address"
    ROUTE = "route"
    INTERSECTION = "intersection"
    POLITICAL = "political"
    COUNTRY = "country"
    ADMIN_AREA_1 = "administrative_area_level_1"
    ADMIN_AREA_2 = "administrative_area_level_2"
    ADMIN_AREA_3 = "administrative_area_level_3"
    COLLOQUIAL_AREA = "colloquial_area"
    LOCALITY = "locality"
    SUB_LOCALITY = "sublocality"
    NEIGHBORHOOD = "neighborhood"
    PREMISE = "premise"
    SUB_PREMISE = "subpremise"
    POSTAL_CODE = "postal_code"
    NATURAL_FEATURE = "natural_feature"
    AIRPORT = "airport"
    PARK = "park"
    POINT_OF_INTEREST = "point_of_interest"
    POST_BOX = "post_box"
    STREET_NUMBER = "street_number"
    FLOOR = "floor"
    ROOM = "room"


# APIのtype文字列 → 正規化後のフィールド名
ADDRESS_COMPONENT_FIELDS: dict[str, str] = {
    AddressType.SUB_PREMISE.value: "apt",
    AddressType.STREET_NUMBER.value: "street_number",
    AddressType.ROUTE.value: "street",
    AddressType.NEIGHBORHOOD.value: "neighborhood",
    AddressType.LOCALITY.value: "city",
    AddressType.ADMIN_AREA_1.value: "state",
    AddressType.ADMIN_AREA_2.value: "county",
    AddressType.COUNTRY.value: "country",
    AddressType.POSTAL_CODE.value: "postal_code",
}
