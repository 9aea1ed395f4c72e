"""설정 파일 로더 모듈."""

import copy
import json
from pathlib import Path

from content.export import DEFAULT_JPEG_QUALITY
from renderer.merge import MergeOptions
from renderer.raster import Color

# 기본 설정 경로
_CONFIG_PATH = Path(__file__).parent / "config.json"

# 기본값: config.json에 누락된 키가 있을 때 사용
_DEFAULTS = {
    "merge": {
        "direction": "horizontal",
        "alignment": "center",
        "gap": 0,
        "background": None,
    },
    "grid": {
        "columns": 3,
        "gap": 0,
        "background": None,
    },
    "export": {
        "jpeg_quality": DEFAULT_JPEG_QUALITY,
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """base 딕셔너리에 override 값을 병합한다 (깊은 병합)."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict:
    """설정 파일을 읽어 딕셔너리로 반환한다.

    파일이 없으면 기본값을 사용한다.
    """
    config_path = path or _CONFIG_PATH
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            user_config = json.load(f)
        return _deep_merge(copy.deepcopy(_DEFAULTS), user_config)
    return copy.deepcopy(_DEFAULTS)


def merge_options(config: dict) -> MergeOptions:
    """merge 섹션으로 병합 옵션을 만든다."""
    return MergeOptions.from_config(config["merge"])


def grid_settings(config: dict) -> dict:
    """grid 섹션을 grid()의 키워드 인자로 변환한다.

    사용 예: grid(images, **grid_settings(config))
    """
    section = config["grid"]
    background = section.get("background")
    return {
        "columns": int(section["columns"]),
        "gap": int(section.get("gap", 0)),
        "background": Color.of(background) if background is not None else None,
    }


def jpeg_quality(config: dict) -> int:
    """export 섹션의 JPEG 품질 값."""
    return int(config["export"].get("jpeg_quality", DEFAULT_JPEG_QUALITY))
