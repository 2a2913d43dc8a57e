"""KameleoonProvider: Kameleoon 用 OpenFeature プロバイダー"""

from __future__ import annotations

from typing import Any

import structlog

from .casting import to_bool, to_float, to_int, to_object, to_str
from .client import KameleoonClientProtocol
from .config import KameleoonClientConfig, ProviderConfig
from .converter import to_openfeature
from .exceptions import KameleoonError, ProviderError, ProviderErrorCodes, SiteCodeIsEmpty
from .logger import new_logger
from .models import ProviderMetadata, ProviderStatus, ResolutionDetails
from .registry import KameleoonClientRegistry
from .resolver import Resolver
from .value import EvaluationContext, Value

PROVIDER_NAME = "Kameleoon Provider"

logger = structlog.get_logger(__name__)


class KameleoonProvider:
    """Kameleoon クライアントを使ってフラグを解決する OpenFeature プロバイダー。

    使用例::

        registry = KameleoonClientRegistry(factory)
        config = KameleoonClientConfig(client_id="id", client_secret="secret")
        provider = KameleoonProvider("site-code", config, registry)
        await provider.initialize()
        details = await provider.resolve_boolean_details_async("flag", False, context)
    """

    def __init__(
        self,
        site_code: str,
        config: KameleoonClientConfig,
        registry: KameleoonClientRegistry,
        *,
        resolver: Resolver | None = None,
    ) -> None:
        try:
            self._client = registry.get_or_create(site_code, config)
        except SiteCodeIsEmpty as e:
            raise ProviderError(
                code=ProviderErrorCodes.PROVIDER_NOT_READY,
                message=e.message,
                cause=e,
            ) from e
        self._site_code = site_code
        self._registry = registry
        self._resolver = resolver or Resolver(self._client)
        self._status = ProviderStatus.NOT_READY

    @classmethod
    def from_config(
        cls, config: ProviderConfig, registry: KameleoonClientRegistry
    ) -> KameleoonProvider:
        """ProviderConfig から生成する。log セクションでロガーも設定する。"""
        new_logger(config.log.level, config.log.format)
        return cls(config.site_code, config.client, registry)

    @property
    def client(self) -> KameleoonClientProtocol:
        """Kameleoon クライアント。OpenFeature 以外の機能を直接使う場合に利用する。"""
        return self._client

    @property
    def site_code(self) -> str:
        return self._site_code

    def get_metadata(self) -> ProviderMetadata:
        return ProviderMetadata(name=PROVIDER_NAME)

    def get_status(self) -> ProviderStatus:
        return self._status

    async def initialize(self, context: EvaluationContext | None = None) -> None:
        """クライアントの初期化完了を待つ。

        Raises:
            ProviderError: クライアントの初期化に失敗した場合
        """
        try:
            await self._client.wait_init()
        except KameleoonError as e:
            self._status = ProviderStatus.ERROR
            logger.error("Kameleoon client initialization failed", site_code=self._site_code, error=str(e))
            raise ProviderError(
                code=ProviderErrorCodes.PROVIDER_NOT_READY,
                message=e.message,
                cause=e,
            ) from e
        self._status = ProviderStatus.READY
        logger.info("Kameleoon provider ready", site_code=self._site_code)

    async def shutdown(self) -> None:
        """サイトコードのクライアントをレジストリから破棄する。"""
        self._registry.remove(self._site_code)
        self._status = ProviderStatus.NOT_READY

    def resolve_boolean_details(
        self,
        flag_key: str,
        default_value: bool,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[bool]:
        return self._resolver.resolve(flag_key, default_value, evaluation_context, cast=to_bool)

    def resolve_float_details(
        self,
        flag_key: str,
        default_value: float,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[float]:
        return self._resolver.resolve(flag_key, default_value, evaluation_context, cast=to_float)

    def resolve_integer_details(
        self,
        flag_key: str,
        default_value: int,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[int]:
        return self._resolver.resolve(flag_key, default_value, evaluation_context, cast=to_int)

    def resolve_string_details(
        self,
        flag_key: str,
        default_value: str,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[str]:
        return self._resolver.resolve(flag_key, default_value, evaluation_context, cast=to_str)

    def resolve_object_details(
        self,
        flag_key: str,
        default_value: Value,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[Value]:
        """構造化値を解決する。変数の生値は Value に変換して返す。"""
        result: ResolutionDetails[Any] = self._resolver.resolve(
            flag_key, default_value, evaluation_context, cast=to_object
        )
        return ResolutionDetails(
            flag_key=result.flag_key,
            value=to_openfeature(result.value),
            error_type=result.error_type,
            error_message=result.error_message,
            variant=result.variant,
        )

    async def resolve_boolean_details_async(
        self,
        flag_key: str,
        default_value: bool,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[bool]:
        return self.resolve_boolean_details(flag_key, default_value, evaluation_context)

    async def resolve_float_details_async(
        self,
        flag_key: str,
        default_value: float,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[float]:
        return self.resolve_float_details(flag_key, default_value, evaluation_context)

    async def resolve_integer_details_async(
        self,
        flag_key: str,
        default_value: int,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[int]:
        return self.resolve_integer_details(flag_key, default_value, evaluation_context)

    async def resolve_string_details_async(
        self,
        flag_key: str,
        default_value: str,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[str]:
        return self.resolve_string_details(flag_key, default_value, evaluation_context)

    async def resolve_object_details_async(
        self,
        flag_key: str,
        default_value: Value,
        evaluation_context: EvaluationContext | None = None,
    ) -> ResolutionDetails[Value]:
        return self.resolve_object_details(flag_key, default_value, evaluation_context)
