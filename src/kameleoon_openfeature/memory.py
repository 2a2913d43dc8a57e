"""InMemoryKameleoonClient 実装"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .data import KameleoonData
from .exceptions import (
    FeatureEnvironmentDisabled,
    FeatureNotFound,
    FeatureVariationNotFound,
    KameleoonError,
    VisitorCodeInvalid,
)

MAX_VISITOR_CODE_LENGTH = 255


@dataclass
class _Feature:
    variations: dict[str, dict[str, Any]]
    default_variation: str
    enabled: bool = True
    assignments: dict[str, str] = field(default_factory=dict)


class InMemoryKameleoonClient:
    """テスト・ローカル開発用インメモリ Kameleoon クライアント。"""

    def __init__(self, init_error: KameleoonError | None = None) -> None:
        self._features: dict[str, _Feature] = {}
        self._data: dict[str, list[KameleoonData]] = {}
        self._init_error = init_error

    def set_feature(
        self,
        feature_key: str,
        variations: Mapping[str, Mapping[str, Any]],
        *,
        default_variation: str | None = None,
        enabled: bool = True,
    ) -> None:
        """フィーチャーフラグを設定する。

        default_variation 省略時は variations の先頭キーを使う。
        """
        if default_variation is None:
            default_variation = next(iter(variations), "off")
        self._features[feature_key] = _Feature(
            variations={key: dict(variables) for key, variables in variations.items()},
            default_variation=default_variation,
            enabled=enabled,
        )

    def assign(self, visitor_code: str, feature_key: str, variation_key: str) -> None:
        """訪問者にバリエーションを割り当てる。"""
        self._get_feature(feature_key).assignments[visitor_code] = variation_key

    def get_data(self, visitor_code: str) -> list[KameleoonData]:
        """訪問者に追加されたデータを返す。"""
        return list(self._data.get(visitor_code, []))

    def add_data(self, visitor_code: str, *data: KameleoonData) -> None:
        _validate_visitor_code(visitor_code)
        self._data.setdefault(visitor_code, []).extend(data)

    def get_feature_variation_key(self, visitor_code: str, feature_key: str) -> str:
        _validate_visitor_code(visitor_code)
        feature = self._get_feature(feature_key)
        if not feature.enabled:
            raise FeatureEnvironmentDisabled(
                f"Feature flag '{feature_key}' is disabled for the current environment"
            )
        return feature.assignments.get(visitor_code, feature.default_variation)

    def get_feature_variation_variables(
        self, feature_key: str, variation_key: str
    ) -> dict[str, Any]:
        feature = self._get_feature(feature_key)
        variables = feature.variations.get(variation_key)
        if variables is None:
            raise FeatureVariationNotFound(
                f"Variation key '{variation_key}' not found for feature '{feature_key}'"
            )
        return dict(variables)

    async def wait_init(self) -> None:
        if self._init_error is not None:
            raise self._init_error

    def _get_feature(self, feature_key: str) -> _Feature:
        feature = self._features.get(feature_key)
        if feature is None:
            raise FeatureNotFound(f"Feature flag '{feature_key}' not found")
        return feature


def _validate_visitor_code(visitor_code: str) -> None:
    if not visitor_code:
        raise VisitorCodeInvalid("Visitor code is empty")
    if len(visitor_code) > MAX_VISITOR_CODE_LENGTH:
        raise VisitorCodeInvalid(
            f"Visitor code is longer than {MAX_VISITOR_CODE_LENGTH} characters"
        )
