"""OpenFeature 汎用値モデル

Value は 7 種類のバリアントのうち 1 つだけを保持するタグ付き共用体。
NUMBER は常に float で保持し、bool は決して NUMBER に変換しない。
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class ValueType(Enum):
    """Value のバリアント。"""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    DATETIME = "datetime"
    STRUCTURE = "structure"
    LIST = "list"


class Structure(Mapping[str, "Value"]):
    """文字列キーから Value への読み取り専用・順序付きマッピング。"""

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any] | None = None) -> None:
        self._fields: dict[str, Value] = {}
        for key, item in (fields or {}).items():
            if not isinstance(key, str):
                raise TypeError(f"Structure key must be str: {key!r}")
            self._fields[key] = Value.of(item)

    def __getitem__(self, key: str) -> Value:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"Structure({self._fields!r})"


@dataclass(frozen=True)
class Value:
    """タグ付き汎用値。

    直接コンストラクタを呼ばず、Value.of() で Python オブジェクトから生成する。
    """

    type: ValueType = ValueType.NULL
    raw: Any = None

    @classmethod
    def null(cls) -> Value:
        return cls()

    @classmethod
    def of(cls, obj: Any) -> Value:
        """Python オブジェクトを Value に正規化する。

        Args:
            obj: None, bool, int, float, str, datetime, Mapping, list/tuple, Value

        Returns:
            正規化された Value

        Raises:
            TypeError: サポートされない型の場合
        """
        if obj is None:
            return cls()
        if isinstance(obj, Value):
            return obj
        # bool は int のサブクラスなので数値より先に判定する
        if isinstance(obj, bool):
            return cls(ValueType.BOOLEAN, obj)
        if isinstance(obj, (int, float)):
            return cls(ValueType.NUMBER, float(obj))
        if isinstance(obj, str):
            return cls(ValueType.STRING, obj)
        if isinstance(obj, datetime):
            return cls(ValueType.DATETIME, obj)
        if isinstance(obj, Mapping):
            structure = obj if isinstance(obj, Structure) else Structure(obj)
            return cls(ValueType.STRUCTURE, structure)
        if isinstance(obj, (list, tuple)):
            return cls(ValueType.LIST, tuple(cls.of(item) for item in obj))
        raise TypeError(f"{obj!r} has unsupported type")

    @property
    def is_null(self) -> bool:
        return self.type is ValueType.NULL

    @property
    def is_boolean(self) -> bool:
        return self.type is ValueType.BOOLEAN

    @property
    def is_number(self) -> bool:
        return self.type is ValueType.NUMBER

    @property
    def is_string(self) -> bool:
        return self.type is ValueType.STRING

    @property
    def is_datetime(self) -> bool:
        return self.type is ValueType.DATETIME

    @property
    def is_structure(self) -> bool:
        return self.type is ValueType.STRUCTURE

    @property
    def is_list(self) -> bool:
        return self.type is ValueType.LIST

    @property
    def as_boolean(self) -> bool | None:
        return self.raw if self.is_boolean else None

    @property
    def as_double(self) -> float | None:
        return self.raw if self.is_number else None

    @property
    def as_integer(self) -> int | None:
        """NUMBER を四捨五入（偶数丸め）した整数。NUMBER 以外と非有限値は None。"""
        if not self.is_number or not math.isfinite(self.raw):
            return None
        return round(self.raw)

    @property
    def as_string(self) -> str | None:
        return self.raw if self.is_string else None

    @property
    def as_datetime(self) -> datetime | None:
        return self.raw if self.is_datetime else None

    @property
    def as_structure(self) -> Structure | None:
        return self.raw if self.is_structure else None

    @property
    def as_list(self) -> tuple[Value, ...] | None:
        return self.raw if self.is_list else None


class EvaluationContext(Mapping[str, Value]):
    """フラグ評価コンテキスト。

    属性は挿入順を保持する。targeting_key は評価対象（訪問者）の識別子。
    """

    __slots__ = ("_targeting_key", "_attributes")

    def __init__(
        self,
        targeting_key: str | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self._targeting_key = targeting_key
        self._attributes = Structure(attributes)

    @property
    def targeting_key(self) -> str | None:
        return self._targeting_key

    def __getitem__(self, key: str) -> Value:
        return self._attributes[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EvaluationContext):
            return NotImplemented
        return (
            self._targeting_key == other._targeting_key
            and dict(self._attributes) == dict(other._attributes)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"EvaluationContext(targeting_key={self._targeting_key!r}, "
            f"attributes={dict(self._attributes)!r})"
        )


class EvaluationContextBuilder:
    """EvaluationContext のビルダークラス。"""

    def __init__(self) -> None:
        self._targeting_key: str | None = None
        self._attributes: dict[str, Any] = {}

    def targeting_key(self, key: str | None) -> EvaluationContextBuilder:
        """ターゲティングキーを設定する。"""
        self._targeting_key = key
        return self

    def set(self, key: str, value: Any) -> EvaluationContextBuilder:
        """属性を設定する。同じキーは上書きされる。"""
        self._attributes[key] = value
        return self

    def build(self) -> EvaluationContext:
        """EvaluationContext を生成する。"""
        return EvaluationContext(self._targeting_key, self._attributes)
