"""kameleoon_openfeature の例外型定義

KameleoonError 系はベンダークライアント（KameleoonClientProtocol 実装）が送出する例外。
ProviderError はプロバイダー自身の構築・設定エラー。
"""

from __future__ import annotations


class KameleoonError(Exception):
    """Kameleoon クライアントのエラー基底クラス。"""

    code: str = "KAMELEOON_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class FeatureError(KameleoonError):
    """フィーチャーフラグに関するエラー基底クラス。"""

    code = "FEATURE_ERROR"


class FeatureNotFound(FeatureError):
    """フィーチャーフラグが存在しない。"""

    code = "FEATURE_NOT_FOUND"


class FeatureEnvironmentDisabled(FeatureError):
    """フィーチャーフラグが現在の環境で無効。"""

    code = "FEATURE_ENVIRONMENT_DISABLED"


class FeatureVariationNotFound(FeatureError):
    """バリエーションが存在しない。"""

    code = "FEATURE_VARIATION_NOT_FOUND"


class VisitorCodeInvalid(KameleoonError):
    """訪問者コードが不正（空文字または 255 文字超）。"""

    code = "VISITOR_CODE_INVALID"


class SiteCodeIsEmpty(KameleoonError):
    """サイトコードが空。"""

    code = "SITE_CODE_IS_EMPTY"


class ConfigError(KameleoonError):
    """クライアント設定エラー。"""

    code = "CONFIG_ERROR"


class ProviderError(Exception):
    """プロバイダーのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ProviderErrorCodes:
    """ProviderError のエラーコード定数。"""

    PROVIDER_NOT_READY: str = "PROVIDER_NOT_READY"
    READ_FILE: str = "READ_FILE_ERROR"
    PARSE_YAML: str = "PARSE_YAML_ERROR"
    VALIDATION: str = "VALIDATION_ERROR"
