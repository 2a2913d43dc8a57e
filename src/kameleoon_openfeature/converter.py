"""OpenFeature と Kameleoon 間のデータ変換"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from .data import Conversion, CustomData, KameleoonData
from .types import ConversionType, CustomDataType, DataType
from .value import EvaluationContext, Structure, Value


def _make_custom_data(structure: Structure) -> CustomData:
    index = structure.get(CustomDataType.INDEX, Value.null()).as_integer
    raw_values = structure.get(CustomDataType.VALUES)
    values: tuple[str, ...]
    if raw_values is None:
        values = ()
    elif raw_values.is_string:
        values = (raw_values.raw,)
    else:
        values = tuple(
            item.raw for item in raw_values.as_list or () if item.is_string
        )
    return CustomData(id=index or 0, values=values)


def _make_conversion(structure: Structure) -> Conversion:
    goal_id = structure.get(ConversionType.GOAL_ID, Value.null()).as_integer
    revenue = structure.get(ConversionType.REVENUE, Value.null()).as_double
    return Conversion(goal_id=goal_id or 0, revenue=revenue or 0.0)


_CONVERSION_METHODS: dict[str, Callable[[Structure], KameleoonData]] = {
    DataType.CONVERSION: _make_conversion,
    DataType.CUSTOM_DATA: _make_custom_data,
}


def _structures(value: Value) -> Iterable[Structure]:
    """単一の構造体、または構造体のリストを構造体の列として返す。"""
    if value.is_structure:
        return (value.raw,)
    return tuple(item.raw for item in value.as_list or () if item.is_structure)


def to_kameleoon(context: EvaluationContext | None = None) -> list[KameleoonData]:
    """EvaluationContext の予約キーを Kameleoon データに変換する。

    コンテキストの挿入順に走査し、conversion / customData 以外のキーは無視する。

    Args:
        context: 評価コンテキスト（None の場合は空リスト）

    Returns:
        Kameleoon データのリスト
    """
    if context is None:
        return []

    data: list[KameleoonData] = []
    for key, value in context.items():
        method = _CONVERSION_METHODS.get(key)
        if method is None:
            continue
        for structure in _structures(value):
            data.append(method(structure))
    return data


def to_openfeature(raw: Any) -> Value:
    """Kameleoon の変数値を Value に変換する。

    変換は失敗しない。未知の型（None を含む）は NULL になる。
    """
    if isinstance(raw, Value):
        return raw
    # bool は int のサブクラスなので数値より先に判定する
    if isinstance(raw, bool):
        return Value.of(raw)
    if isinstance(raw, int):
        # float に収まらない整数は NULL
        try:
            return Value.of(float(raw))
        except OverflowError:
            return Value.null()
    if isinstance(raw, float):
        return Value.of(raw)
    if isinstance(raw, (str, datetime)):
        return Value.of(raw)
    if isinstance(raw, Mapping):
        return Value.of(
            Structure(
                {str(key): to_openfeature(item) for key, item in raw.items()}
            )
        )
    if isinstance(raw, (list, tuple)):
        return Value.of(tuple(to_openfeature(item) for item in raw))
    return Value.null()
