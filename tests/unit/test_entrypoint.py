"""CLIエントリーポイントのテスト"""

import json
from pathlib import Path

import pytest

from maps_geocoder import entrypoint


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """カレントディレクトリの .env や環境変数を読み込まない"""
    monkeypatch.chdir(tmp_path)
    # ルートロガーのハンドラーを差し替えない
    monkeypatch.setattr(entrypoint, "setup_logging", lambda level: None)
    for name in ("GEOCODER_USE_HTTPS", "GEOCODER_REGION", "GEOCODER_LANGUAGE", "GEOCODER_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def test_url_only(capsys: pytest.CaptureFixture[str]) -> None:
    """--url-only は通信せずにURLを出力"""
    exit_code = entrypoint.main(
        ["geocode", "--address", "1600 Amphitheatre Parkway, Mountain View, CA", "--url-only"]
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        "http://maps.googleapis.com/maps/api/geocode/json"
        "?address=1600+Amphitheatre+Parkway%2C+Mountain+View%2C+CA&sensor=false"
    )


def test_url_only_with_options(capsys: pytest.CaptureFixture[str]) -> None:
    """座標・地域・言語・フォーマット指定"""
    exit_code = entrypoint.main(
        [
            "geocode",
            "--latlng", "35.0", "135.5",
            "--region", "jp",
            "--language", "ja",
            "--sensor",
            "--format", "xml",
            "--https",
            "--url-only",
        ]
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        "https://maps.googleapis.com/maps/api/geocode/xml"
        "?latlng=35.0%2C135.5&region=jp&language=ja&sensor=true"
    )


def test_env_file_defaults(isolated_env: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """環境変数ファイルの設定をデフォルト値として使用"""
    env_file = isolated_env / "geocoder.env"
    env_file.write_text("GEOCODER_REGION=jp\nGEOCODER_USE_HTTPS=true\n", encoding="utf-8")

    exit_code = entrypoint.main(
        ["--env-file", str(env_file), "geocode", "--address", "Kyoto", "--url-only"]
    )

    assert exit_code == 0
    assert capsys.readouterr().out.strip() == (
        "https://maps.googleapis.com/maps/api/geocode/json?address=Kyoto&region=jp&sensor=false"
    )


def test_bbox(capsys: pytest.CaptureFixture[str]) -> None:
    """bbox はJSONで矩形を出力"""
    exit_code = entrypoint.main(["bbox", "0", "0", "69.172"])

    assert exit_code == 0
    box = json.loads(capsys.readouterr().out)
    assert box["lat"]["max"] == pytest.approx(1.0)
    assert box["lat"]["min"] == pytest.approx(-1.0)


def test_failure_returns_one(monkeypatch: pytest.MonkeyPatch) -> None:
    """例外発生時は終了コード1"""

    def fail(*args: object) -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(entrypoint, "run_geocode", fail)

    assert entrypoint.main(["geocode", "--address", "Kyoto"]) == 1
