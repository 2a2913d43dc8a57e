"""プロバイダーのデータモデル"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorType(StrEnum):
    """解決エラーの種別。"""

    NONE = "NONE"
    PROVIDER_NOT_READY = "PROVIDER_NOT_READY"
    FLAG_NOT_FOUND = "FLAG_NOT_FOUND"
    PARSE_ERROR = "PARSE_ERROR"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    TARGETING_KEY_MISSING = "TARGETING_KEY_MISSING"
    INVALID_CONTEXT = "INVALID_CONTEXT"
    GENERAL = "GENERAL"


class ProviderStatus(StrEnum):
    """プロバイダーの状態。"""

    NOT_READY = "NOT_READY"
    READY = "READY"
    ERROR = "ERROR"


@dataclass(frozen=True)
class ProviderMetadata:
    """プロバイダーのメタデータ。"""

    name: str


@dataclass
class ResolutionDetails(Generic[T]):
    """フラグ解決結果。

    error_type が NONE 以外の場合、value は呼び出し元のデフォルト値。
    """

    flag_key: str
    value: T
    error_type: ErrorType = ErrorType.NONE
    error_message: str | None = None
    variant: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error_type is not ErrorType.NONE
