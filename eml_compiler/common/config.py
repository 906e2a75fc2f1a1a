"""Compiler configuration loader"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet, Optional, Union

import yaml

from .constants import DEFAULT_VALID_TAGS, PASSTHROUGH_ATTRIBUTES
from .errors import ConfigError


@dataclass(frozen=True)
class CompilerConfig:
    """컴파일러 설정 - 생성 후 변경되지 않으며 모든 호출이 공유

    YAML 예시::

        valid_tags: [view, card]
        passthrough_attributes: [style, class]
        trace_file: trace.json
    """

    valid_tags: FrozenSet[str] = DEFAULT_VALID_TAGS
    passthrough_attributes: FrozenSet[str] = PASSTHROUGH_ATTRIBUTES
    trace_file: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "CompilerConfig":
        if not isinstance(raw, dict):
            raise ConfigError(f"config must be a mapping, got {type(raw).__name__}")

        unknown = set(raw) - {"valid_tags", "passthrough_attributes", "trace_file"}
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")

        kwargs: Dict[str, Any] = {}
        for key in ("valid_tags", "passthrough_attributes"):
            if key in raw:
                kwargs[key] = _string_set(key, raw[key])

        trace_file = raw.get("trace_file")
        if trace_file is not None and not isinstance(trace_file, str):
            raise ConfigError("trace_file must be a string")
        kwargs["trace_file"] = trace_file
        return cls(**kwargs)


def _string_set(key: str, value: Any) -> FrozenSet[str]:
    if isinstance(value, str) or not isinstance(value, (list, tuple, set)):
        raise ConfigError(f"{key} must be a list of strings")
    if not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key} must be a list of strings")
    return frozenset(value)


def load_config(config_path: Union[str, Path]) -> CompilerConfig:
    """YAML 설정 파일을 읽어 CompilerConfig 생성

    Raises
    ------
    FileNotFoundError
        설정 파일이 없을 때
    ConfigError
        YAML 문법 오류 또는 필드 형식 오류
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"malformed config {config_path}: {e}") from e

    # 빈 파일은 기본 설정
    if raw is None:
        return CompilerConfig()
    return CompilerConfig.from_dict(raw)
