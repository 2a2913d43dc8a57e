"""補助関数と予約キーのユニットテスト"""

import pytest
from kameleoon_openfeature import (
    VARIABLE_KEY,
    ConfigError,
    ConversionType,
    CustomDataType,
    DataType,
    ErrorType,
    EvaluationContext,
    FeatureNotFound,
    KameleoonError,
    VisitorCodeInvalid,
)
from kameleoon_openfeature.utils import (
    make_error_description,
    to_openfeature_error,
    try_get_variable_key,
)


def test_reserved_keys() -> None:
    """予約キーの値。"""
    assert DataType.CONVERSION == "conversion"
    assert DataType.CUSTOM_DATA == "customData"
    assert CustomDataType.INDEX == "index"
    assert CustomDataType.VALUES == "values"
    assert ConversionType.GOAL_ID == "goalId"
    assert ConversionType.REVENUE == "revenue"
    assert VARIABLE_KEY == "variableKey"


def test_try_get_variable_key() -> None:
    """variableKey を取得する。"""
    ctx = EvaluationContext(attributes={VARIABLE_KEY: "variableValue"})
    assert try_get_variable_key(ctx) == "variableValue"


def test_try_get_variable_key_missing_or_not_string() -> None:
    """コンテキストが無い、キーが無い、文字列でない場合は None。"""
    assert try_get_variable_key(None) is None
    assert try_get_variable_key(EvaluationContext()) is None
    assert try_get_variable_key(EvaluationContext(attributes={VARIABLE_KEY: 1})) is None


def test_make_error_description_with_key() -> None:
    """variableKey がある場合のメッセージ。"""
    assert make_error_description("testVariant", "testVariableKey") == (
        "The value for provided variable key 'testVariableKey' isn't found in variation 'testVariant'"
    )


@pytest.mark.parametrize("variable_key", [None, ""])
def test_make_error_description_without_key(variable_key: str | None) -> None:
    """variableKey が無い場合のメッセージ。"""
    assert make_error_description("testVariant", variable_key) == (
        "The variation 'testVariant' has no variables"
    )


@pytest.mark.parametrize(
    ("exception_type", "expected"),
    [
        (FeatureNotFound, ErrorType.FLAG_NOT_FOUND),
        (VisitorCodeInvalid, ErrorType.INVALID_CONTEXT),
        (ConfigError, ErrorType.GENERAL),
        (KameleoonError, ErrorType.GENERAL),
    ],
)
def test_to_openfeature_error(exception_type: type[KameleoonError], expected: ErrorType) -> None:
    """例外型ごとの ErrorType。"""
    error_type, message = to_openfeature_error(exception_type("The exception"))
    assert error_type is expected
    assert message == "The exception"


def test_kameleoon_error_str_contains_code() -> None:
    """str() はコードとメッセージを含む。"""
    error = FeatureNotFound("missing")
    assert str(error) == "FEATURE_NOT_FOUND: missing"
    assert error.message == "missing"
