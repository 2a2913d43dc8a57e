"""プロバイダー設定（pydantic BaseModel）と YAML ローダー"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ProviderError, ProviderErrorCodes


class KameleoonClientConfig(BaseModel):
    """Kameleoon クライアント設定。"""

    client_id: str
    client_secret: str
    refresh_interval_minute: int = Field(default=60, ge=1)
    session_duration_minute: int = Field(default=30, ge=1)
    default_timeout_millisecond: int = Field(default=10_000, ge=1)
    tracking_interval_millisecond: int = Field(default=1_000, ge=100, le=1_000)
    environment: str | None = None
    top_level_domain: str | None = None


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class ProviderConfig(BaseModel):
    """プロバイダー設定全体。"""

    site_code: str
    client: KameleoonClientConfig
    log: LogSection = Field(default_factory=LogSection)


def merge_layers(*layers: dict[str, Any]) -> dict[str, Any]:
    """設定レイヤーを順に重ねた新しい辞書を返す。

    後のレイヤーが優先される。辞書同士は再帰的に重ね、リストなどは置き換える。
    """
    merged: dict[str, Any] = {}
    for layer in layers:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(current, dict) and isinstance(value, dict):
                merged[key] = merge_layers(current, value)
            else:
                merged[key] = value
    return merged


def _parse_layer(path: Path) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as stream:
            data = yaml.safe_load(stream)
    except OSError as e:
        raise ProviderError(
            code=ProviderErrorCodes.READ_FILE,
            message=f"Cannot open provider config: {path}",
            cause=e,
        ) from e
    except yaml.YAMLError as e:
        raise ProviderError(
            code=ProviderErrorCodes.PARSE_YAML,
            message=f"Provider config is not valid YAML: {path}",
            cause=e,
        ) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ProviderError(
            code=ProviderErrorCodes.VALIDATION,
            message=f"Provider config root must be a mapping: {path}",
        )
    return data


def load_config(base_path: Path, env_path: Path | None = None) -> ProviderConfig:
    """設定ファイルを読み込んで ProviderConfig を返す。

    base_path: ベース設定ファイルパス（必須）
    env_path: 環境別設定ファイルパス（オプション）。存在すればベースの上に重ねる。
    """
    layers = [_parse_layer(base_path)]
    if env_path is not None and env_path.exists():
        layers.append(_parse_layer(env_path))
    try:
        return ProviderConfig.model_validate(merge_layers(*layers))
    except ValidationError as e:
        raise ProviderError(
            code=ProviderErrorCodes.VALIDATION,
            message=f"Provider config is invalid: {e}",
            cause=e,
        ) from e
