"""CLIエントリーポイント"""
import argparse
import json
import sys
from typing import Optional

from .features.geocoding.builders.request_builder import GeocodeRequest
from .features.geocoding.calculators.bounding_box import bounding_box
from .features.geocoding.services.geocoding_service import GeocodingService
from .infrastructure.config.settings import Settings
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成"""
    parser = argparse.ArgumentParser(
        prog="maps-geocoder",
        description="Google Maps Geocoding APIクライアント",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # geocode
    geocode_parser = subparsers.add_parser("geocode", help="住所または座標をジオコーディング")
    target = geocode_parser.add_mutually_exclusive_group()
    target.add_argument("--address", type=str, help="住所")
    target.add_argument(
        "--latlng",
        type=float,
        nargs=2,
        metavar=("LAT", "LNG"),
        help="逆ジオコーディングする座標",
    )
    geocode_parser.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("SW_LAT", "SW_LNG", "NE_LAT", "NE_LNG"),
        help="結果を優先する矩形領域",
    )
    geocode_parser.add_argument("--region", type=str, help="地域バイアス（例: jp）")
    geocode_parser.add_argument("--language", type=str, help="言語コード（例: ja）")
    geocode_parser.add_argument(
        "--sensor",
        action="store_true",
        default=None,
        help="位置センサーを持つ端末からのリクエストとして送信",
    )
    geocode_parser.add_argument(
        "--format",
        type=str,
        choices=["json", "xml"],
        help="レスポンスフォーマット",
    )
    geocode_parser.add_argument(
        "--https",
        action="store_true",
        default=None,
        help="HTTPSエンドポイントを使用",
    )
    output = geocode_parser.add_mutually_exclusive_group()
    output.add_argument("--raw", action="store_true", help="レスポンス本文をそのまま出力")
    output.add_argument(
        "--components",
        action="store_true",
        help="先頭の結果を正規化した住所として出力",
    )
    output.add_argument(
        "--url-only",
        action="store_true",
        help="リクエストURLのみ出力（通信しない）",
    )

    # bbox
    bbox_parser = subparsers.add_parser("bbox", help="中心点と半径からバウンディングボックスを計算")
    bbox_parser.add_argument("latitude", type=float, help="中心の緯度")
    bbox_parser.add_argument("longitude", type=float, help="中心の経度")
    bbox_parser.add_argument("miles", type=float, help="半径（マイル）")

    return parser


def build_request(args: argparse.Namespace, settings: Settings) -> GeocodeRequest:
    """引数と設定からリクエストを作成（引数が優先）"""
    request = GeocodeRequest.from_settings(settings, address=args.address)

    if args.latlng:
        request.set_latitude_longitude(*args.latlng)
    if args.bounds:
        request.set_bounds(*args.bounds)
    if args.region:
        request.set_region(args.region)
    if args.language:
        request.set_language(args.language)
    if args.sensor is not None:
        request.set_sensor(args.sensor)
    if args.format:
        request.set_format(args.format)

    return request


def run_geocode(args: argparse.Namespace, settings: Settings) -> None:
    """geocodeサブコマンド"""
    request = build_request(args, settings)
    https = settings.geocoder_use_https if args.https is None else args.https

    if args.url_only:
        print(request.render(https=https))
        return

    with GeocodingService(settings=settings) as service:
        if args.components:
            components = service.geocode_address_components(request, https=https)
            print(json.dumps(components, ensure_ascii=False, indent=2))
            return

        result = service.geocode(request, https=https, raw=args.raw)

    if isinstance(result, dict):
        print(json.dumps(result, ensure_ascii=False, indent=2))
    elif isinstance(result, str):
        print(result)
    else:
        print(result.prettify())


def run_bbox(args: argparse.Namespace) -> None:
    """bboxサブコマンド"""
    box = bounding_box(args.latitude, args.longitude, args.miles)
    print(json.dumps(box.to_dict(), indent=2))


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗）
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        # 設定を読み込み
        settings = Settings(_env_file=args.env_file)

        # ログレベルを上書き
        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(level=settings.log_level)

        logger.debug(f"Environment: {settings.environment}")

        if args.command == "bbox":
            run_bbox(args)
        else:
            run_geocode(args, settings)

        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
