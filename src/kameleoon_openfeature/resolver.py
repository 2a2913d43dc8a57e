"""フラグ解決エンジン"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog

from .casting import Caster, caster_for
from .client import KameleoonClientProtocol
from .converter import to_kameleoon
from .exceptions import KameleoonError
from .metrics import flag_evaluation_errors_total, flag_evaluation_total
from .models import ErrorType, ResolutionDetails
from .utils import make_error_description, to_openfeature_error, try_get_variable_key
from .value import EvaluationContext

T = TypeVar("T")

logger = structlog.get_logger(__name__)

TARGETING_KEY_MISSING_MESSAGE = "The TargetingKey is required in context and cannot be ommited."
TYPE_MISMATCH_MESSAGE = "The type of value received is different from the requested value."


class Resolver:
    """コンテキストとフラグキーから型付きの解決結果を求める。"""

    def __init__(self, client: KameleoonClientProtocol) -> None:
        self._client = client

    def resolve(
        self,
        flag_key: str,
        default_value: T,
        context: EvaluationContext | None = None,
        *,
        cast: Caster[Any] | None = None,
    ) -> ResolutionDetails[T]:
        """フラグを解決する。例外は送出せず、失敗は ResolutionDetails で返す。

        Args:
            flag_key: フィーチャーフラグキー
            default_value: 失敗時に返すデフォルト値
            context: 評価コンテキスト（targeting_key 必須）
            cast: 変数値の変換関数。省略時は default_value の型から選ぶ

        Returns:
            解決結果
        """
        if cast is None:
            cast = caster_for(default_value)
        try:
            details = self._resolve(flag_key, default_value, context, cast)
        except KameleoonError as e:
            error_type, message = to_openfeature_error(e)
            details = ResolutionDetails(flag_key, default_value, error_type, message)
        except Exception as e:
            logger.exception("Unexpected error from Kameleoon client", flag_key=flag_key)
            details = ResolutionDetails(flag_key, default_value, ErrorType.GENERAL, str(e))
        self._record(details)
        return details

    def _resolve(
        self,
        flag_key: str,
        default_value: T,
        context: EvaluationContext | None,
        cast: Caster[Any],
    ) -> ResolutionDetails[T]:
        visitor_code = context.targeting_key if context is not None else None
        if not visitor_code:
            return ResolutionDetails(
                flag_key,
                default_value,
                ErrorType.TARGETING_KEY_MISSING,
                TARGETING_KEY_MISSING_MESSAGE,
            )

        self._client.add_data(visitor_code, *to_kameleoon(context))
        variant = self._client.get_feature_variation_key(visitor_code, flag_key)
        variables = self._client.get_feature_variation_variables(flag_key, variant)

        # variableKey が無ければ先頭の変数を使う（1 バリエーション 1 変数が前提）
        variable_key = try_get_variable_key(context)
        if variable_key is None:
            variable_key = next(iter(variables), None)
        if variable_key is None or variable_key not in variables:
            return ResolutionDetails(
                flag_key,
                default_value,
                ErrorType.FLAG_NOT_FOUND,
                make_error_description(variant, variable_key),
                variant,
            )

        result = cast(variables[variable_key])
        if not result.ok:
            return ResolutionDetails(
                flag_key,
                default_value,
                ErrorType.TYPE_MISMATCH,
                TYPE_MISMATCH_MESSAGE,
                variant,
            )
        return ResolutionDetails(flag_key, result.value, variant=variant)

    @staticmethod
    def _record(details: ResolutionDetails[Any]) -> None:
        attributes = {"flag_key": details.flag_key, "error_type": details.error_type.value}
        flag_evaluation_total.add(1, attributes)
        if details.is_error:
            flag_evaluation_errors_total.add(1, attributes)
            logger.warning(
                "Flag resolution failed",
                flag_key=details.flag_key,
                error_type=details.error_type.value,
                error_message=details.error_message,
                variant=details.variant,
            )
        else:
            logger.debug(
                "Flag resolved",
                flag_key=details.flag_key,
                variant=details.variant,
            )
