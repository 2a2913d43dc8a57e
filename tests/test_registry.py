"""KameleoonClientRegistry のユニットテスト"""

from unittest.mock import MagicMock

import pytest
from kameleoon_openfeature import (
    InMemoryKameleoonClient,
    KameleoonClientConfig,
    KameleoonClientRegistry,
    SiteCodeIsEmpty,
)

CONFIG = KameleoonClientConfig(client_id="id", client_secret="secret")


def test_get_or_create_creates_once() -> None:
    """同じサイトコードでは factory は 1 回だけ呼ばれる。"""
    factory = MagicMock(side_effect=lambda site_code, config: InMemoryKameleoonClient())
    registry = KameleoonClientRegistry(factory)

    first = registry.get_or_create("site", CONFIG)
    second = registry.get_or_create("site", CONFIG)

    assert first is second
    factory.assert_called_once_with("site", CONFIG)
    assert len(registry) == 1


def test_different_site_codes() -> None:
    """サイトコードごとに別のクライアント。"""
    registry = KameleoonClientRegistry(lambda site_code, config: InMemoryKameleoonClient())
    assert registry.get_or_create("a", CONFIG) is not registry.get_or_create("b", CONFIG)
    assert "a" in registry
    assert "b" in registry


@pytest.mark.parametrize("site_code", ["", "   "])
def test_empty_site_code_raises(site_code: str) -> None:
    """空のサイトコードは SiteCodeIsEmpty。"""
    registry = KameleoonClientRegistry(lambda site_code, config: InMemoryKameleoonClient())
    with pytest.raises(SiteCodeIsEmpty):
        registry.get_or_create(site_code, CONFIG)


def test_get_missing_returns_none() -> None:
    """未登録のサイトコードは None。"""
    registry = KameleoonClientRegistry(lambda site_code, config: InMemoryKameleoonClient())
    assert registry.get("missing") is None


def test_remove() -> None:
    """remove で破棄され、次回は新しいインスタンスが作られる。"""
    registry = KameleoonClientRegistry(lambda site_code, config: InMemoryKameleoonClient())
    first = registry.get_or_create("site", CONFIG)

    assert registry.remove("site") is True
    assert registry.remove("site") is False
    assert "site" not in registry
    assert registry.get_or_create("site", CONFIG) is not first
