"""中心点と半径（マイル）からバウンディングボックスを計算"""
import math

from ..domain.enums import EQUATOR_LAT_DEGREE_IN_MILES
from ..domain.models import BoundingBox


def bounding_box(latitude: float, longitude: float, mile_radius: float) -> BoundingBox:
    """
    中心点から半径mile_radiusマイルを囲む矩形を計算

    経度方向の幅は、中心ではなく南端の緯度で補正する。
    極付近や±180度の経線をまたぐ場合の正規化は行わない。

    Args:
        latitude: 中心の緯度
        longitude: 中心の経度
        mile_radius: 半径（マイル）

    Returns:
        BoundingBox: 計算した矩形
    """
    north = latitude + mile_radius / EQUATOR_LAT_DEGREE_IN_MILES
    south = latitude - (north - latitude)

    east = longitude + mile_radius / (
        math.cos(math.radians(south)) * EQUATOR_LAT_DEGREE_IN_MILES
    )
    west = longitude - (east - longitude)

    return BoundingBox(south=south, west=west, north=north, east=east)
