"""変数値の型変換

各関数は変数の生値を要求型へ変換し、成否を CastResult で返す。
型不一致は例外ではなく CastResult.ok == False で表す。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CastResult(Generic[T]):
    """型変換の結果。"""

    ok: bool
    value: T | None = None

    @classmethod
    def success(cls, value: T) -> CastResult[T]:
        return cls(ok=True, value=value)

    @classmethod
    def mismatch(cls) -> CastResult[T]:
        return cls(ok=False)


Caster = Callable[[Any], CastResult[T]]


def to_bool(raw: Any) -> CastResult[bool]:
    if isinstance(raw, bool):
        return CastResult.success(raw)
    return CastResult.mismatch()


def to_int(raw: Any) -> CastResult[int]:
    if isinstance(raw, int) and not isinstance(raw, bool):
        return CastResult.success(raw)
    return CastResult.mismatch()


def to_float(raw: Any) -> CastResult[float]:
    """float はそのまま、bool 以外の int は float に拡張する。

    JSON の整数（例: 10）は Python では int になるため、double 要求でも受け付ける。
    型を厳密に比較する実装とは異なり、この場合は TYPE_MISMATCH にならない。
    float に収まらない int は不一致とする。
    """
    if isinstance(raw, float):
        return CastResult.success(raw)
    if isinstance(raw, int) and not isinstance(raw, bool):
        try:
            return CastResult.success(float(raw))
        except OverflowError:
            return CastResult.mismatch()
    return CastResult.mismatch()


def to_str(raw: Any) -> CastResult[str]:
    if isinstance(raw, str):
        return CastResult.success(raw)
    return CastResult.mismatch()


def to_object(raw: Any) -> CastResult[Any]:
    return CastResult.success(raw)


def caster_for(default_value: Any) -> Caster[Any]:
    """デフォルト値の型から変換関数を選ぶ。"""
    if isinstance(default_value, bool):
        return to_bool
    if isinstance(default_value, int):
        return to_int
    if isinstance(default_value, float):
        return to_float
    if isinstance(default_value, str):
        return to_str
    return to_object
