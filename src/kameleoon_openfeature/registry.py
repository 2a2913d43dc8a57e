"""サイトコードごとの Kameleoon クライアントレジストリ"""

from __future__ import annotations

import threading
from collections.abc import Callable

import structlog

from .client import KameleoonClientProtocol
from .config import KameleoonClientConfig
from .exceptions import SiteCodeIsEmpty

ClientFactory = Callable[[str, KameleoonClientConfig], KameleoonClientProtocol]

logger = structlog.get_logger(__name__)


class KameleoonClientRegistry:
    """Kameleoon クライアントをサイトコード単位で保持する。

    同じサイトコードには同じインスタンスを返し、remove() で明示的に破棄する。
    """

    def __init__(self, factory: ClientFactory) -> None:
        self._factory = factory
        self._clients: dict[str, KameleoonClientProtocol] = {}
        self._lock = threading.Lock()

    def get_or_create(
        self, site_code: str, config: KameleoonClientConfig
    ) -> KameleoonClientProtocol:
        """クライアントを取得する。無ければ factory で生成して登録する。

        Raises:
            SiteCodeIsEmpty: サイトコードが空の場合
        """
        if not site_code or not site_code.strip():
            raise SiteCodeIsEmpty("Provided siteCode is empty")
        with self._lock:
            client = self._clients.get(site_code)
            if client is None:
                client = self._factory(site_code, config)
                self._clients[site_code] = client
                logger.info("Kameleoon client created", site_code=site_code)
            return client

    def get(self, site_code: str) -> KameleoonClientProtocol | None:
        with self._lock:
            return self._clients.get(site_code)

    def remove(self, site_code: str) -> bool:
        """クライアントを破棄する。破棄できたら True。"""
        with self._lock:
            removed = self._clients.pop(site_code, None) is not None
        if removed:
            logger.info("Kameleoon client removed", site_code=site_code)
        return removed

    def __contains__(self, site_code: object) -> bool:
        with self._lock:
            return site_code in self._clients

    def __len__(self) -> int:
        with self._lock:
            return len(self._clients)
