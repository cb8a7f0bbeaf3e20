"""GeocodeRequest のテスト"""

from urllib.parse import parse_qs, urlsplit

import pytest

from maps_geocoder.features.geocoding.builders.request_builder import GeocodeRequest
from maps_geocoder.features.geocoding.calculators.bounding_box import bounding_box
from maps_geocoder.features.geocoding.domain.enums import ResponseFormat
from maps_geocoder.infrastructure.config.settings import Settings


def query_of(url: str) -> dict[str, list[str]]:
    return parse_qs(urlsplit(url).query)


def test_render_address_example() -> None:
    """住所のみのリクエストURL"""
    request = GeocodeRequest("1600 Amphitheatre Parkway, Mountain View, CA")

    assert request.render() == (
        "http://maps.googleapis.com/maps/api/geocode/json"
        "?address=1600+Amphitheatre+Parkway%2C+Mountain+View%2C+CA&sensor=false"
    )


def test_render_https_and_xml() -> None:
    """スキームとフォーマットのパスセグメント"""
    url = GeocodeRequest("Tokyo", format="xml").render(https=True)

    assert url.startswith("https://maps.googleapis.com/maps/api/geocode/xml?")


def test_latlng_without_address() -> None:
    """座標のみの場合は latlng を送信"""
    request = GeocodeRequest().set_latitude_longitude(40.714224, -73.961452)
    query = query_of(request.render())

    assert query["latlng"] == ["40.714224,-73.961452"]
    assert "address" not in query


def test_address_takes_precedence_over_latlng() -> None:
    """住所と座標の両方がある場合は住所を優先"""
    request = GeocodeRequest("Kyoto").set_latitude_longitude(35.0, 135.7)
    query = query_of(request.render())

    assert query["address"] == ["Kyoto"]
    assert "latlng" not in query


def test_empty_address_falls_back_to_latlng() -> None:
    """空文字の住所は未設定として扱う"""
    request = GeocodeRequest("").set_latitude_longitude(35.0, 135.7)

    assert query_of(request.render())["latlng"] == ["35.0,135.7"]


def test_zero_coordinates_are_set() -> None:
    """0度の座標も有効な値として送信"""
    request = GeocodeRequest().set_latitude_longitude(0, 0)

    assert query_of(request.render())["latlng"] == ["0,0"]


def test_latlng_requires_both_values() -> None:
    """緯度のみでは latlng を送信しない"""
    request = GeocodeRequest().set_latitude(35.0)

    assert request.latitude_longitude is None
    assert request.query_params() == [("sensor", "false")]


def test_empty_request_is_valid() -> None:
    """パラメータ未設定でもURLは組み立てられる"""
    assert GeocodeRequest().render() == (
        "http://maps.googleapis.com/maps/api/geocode/json?sensor=false"
    )


def test_parameter_order() -> None:
    """address, bounds, region, language, sensor の順に送信"""
    request = (
        GeocodeRequest("Winnetka")
        .set_bounds(34.172684, -118.604794, 34.236144, -118.500938)
        .set_region("us")
        .set_language("en")
        .set_sensor(True)
    )

    keys = [key for key, _ in request.query_params()]
    assert keys == ["address", "bounds", "region", "language", "sensor"]
    assert request.bounds == "34.172684,-118.604794|34.236144,-118.500938"
    assert "bounds=34.172684%2C-118.604794%7C34.236144%2C-118.500938" in request.render()


def test_bounds_require_both_corners() -> None:
    """片方の端のみでは bounds を送信しない"""
    request = GeocodeRequest("Winnetka").set_bounds_southwest(34.1, -118.6)

    assert request.bounds_southwest == "34.1,-118.6"
    assert request.bounds_northeast is None
    assert request.bounds is None
    assert "bounds" not in query_of(request.render())


def test_bounds_from_box() -> None:
    """bounding_box() の結果を矩形として設定"""
    box = bounding_box(35.0, 135.0, 10)
    request = GeocodeRequest("Kyoto").set_bounds_from_box(box)

    assert request.bounds == f"{box.south},{box.west}|{box.north},{box.east}"


@pytest.mark.parametrize(
    "sensor,expected",
    [
        (False, "false"),
        (True, "true"),
        ("true", "true"),
        ("false", "false"),
        (0, "false"),
        (1, "true"),
        ("0", "false"),
        ("", "false"),
        ("1", "true"),
        ("yes", "true"),
    ],
)
def test_sensor_is_always_literal(sensor: object, expected: str) -> None:
    """sensor は常に "true" / "false" の文字列で送信"""
    request = GeocodeRequest("Osaka", sensor=sensor)  # type: ignore[arg-type]

    assert request.sensor == expected
    assert query_of(request.render())["sensor"] == [expected]


def test_last_write_wins() -> None:
    """同じパラメータの再設定は後勝ち"""
    request = GeocodeRequest("Nara").set_region("jp").set_region("us").set_address("Kobe")

    assert request.region == "us"
    assert query_of(request.render())["address"] == ["Kobe"]


def test_unset_optional_parameters_are_dropped() -> None:
    """None・空文字のパラメータは送信しない"""
    request = GeocodeRequest("Nara").set_region("").set_language(None)

    assert query_of(request.render()).keys() == {"address", "sensor"}


def test_format_helpers() -> None:
    """フォーマットの判定"""
    request = GeocodeRequest("Nara")
    assert request.is_format_json
    assert not request.is_format_xml

    request.set_format(ResponseFormat.XML)
    assert request.format == ResponseFormat.XML
    assert request.is_format_xml


def test_invalid_format() -> None:
    """未知のフォーマットは ValueError"""
    with pytest.raises(ValueError):
        GeocodeRequest("Nara", format="yaml")


def test_from_settings() -> None:
    """設定のデフォルト値でリクエストを作成"""
    settings = Settings(
        _env_file=None,
        geocoder_format="xml",
        geocoder_region="jp",
        geocoder_language="ja",
        geocoder_sensor=True,
    )

    request = GeocodeRequest.from_settings(settings, address="京都市")

    assert request.is_format_xml
    assert request.query_params() == [
        ("address", "京都市"),
        ("region", "jp"),
        ("language", "ja"),
        ("sensor", "true"),
    ]
