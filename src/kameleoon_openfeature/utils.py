"""解決処理の補助関数"""

from __future__ import annotations

from .exceptions import FeatureError, KameleoonError, VisitorCodeInvalid
from .models import ErrorType
from .types import VARIABLE_KEY
from .value import EvaluationContext


def try_get_variable_key(context: EvaluationContext | None = None) -> str | None:
    """コンテキストの variableKey を返す。無い、または文字列でなければ None。"""
    if context is None:
        return None
    value = context.get(VARIABLE_KEY)
    return value.as_string if value is not None else None


def make_error_description(variant: str, variable_key: str | None) -> str:
    if not variable_key:
        return f"The variation '{variant}' has no variables"
    return (
        f"The value for provided variable key '{variable_key}' "
        f"isn't found in variation '{variant}'"
    )


def to_openfeature_error(exception: KameleoonError) -> tuple[ErrorType, str]:
    """Kameleoon の例外を ErrorType とメッセージに変換する。"""
    if isinstance(exception, FeatureError):
        return ErrorType.FLAG_NOT_FOUND, exception.message
    if isinstance(exception, VisitorCodeInvalid):
        return ErrorType.INVALID_CONTEXT, exception.message
    return ErrorType.GENERAL, exception.message
