"""Kameleoon クライアントへ送信するデータモデル"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CustomData:
    """カスタムデータ。"""

    id: int
    values: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Conversion:
    """ゴール達成（コンバージョン）。"""

    goal_id: int
    revenue: float = 0.0


KameleoonData = CustomData | Conversion
