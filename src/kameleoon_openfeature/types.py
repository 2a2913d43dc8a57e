"""EvaluationContext で使用する予約キー定義"""

from __future__ import annotations


class DataType:
    """Kameleoon データに変換されるコンテキストキー。"""

    CONVERSION: str = "conversion"
    CUSTOM_DATA: str = "customData"


class CustomDataType:
    """customData 構造体のフィールド名。"""

    INDEX: str = "index"
    VALUES: str = "values"


class ConversionType:
    """conversion 構造体のフィールド名。"""

    GOAL_ID: str = "goalId"
    REVENUE: str = "revenue"


# バリエーション内の変数を選択するキー
VARIABLE_KEY: str = "variableKey"
