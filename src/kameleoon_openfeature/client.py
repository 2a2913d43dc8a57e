"""KameleoonClient プロトコル"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from .data import KameleoonData


class KameleoonClientProtocol(Protocol):
    """プロバイダーが利用する Kameleoon クライアントのプロトコル。

    実装は失敗時に exceptions.KameleoonError のサブクラスを送出すること。
    """

    def add_data(self, visitor_code: str, *data: KameleoonData) -> None: ...

    def get_feature_variation_key(self, visitor_code: str, feature_key: str) -> str: ...

    def get_feature_variation_variables(
        self, feature_key: str, variation_key: str
    ) -> Mapping[str, Any]: ...

    async def wait_init(self) -> None: ...
