"""設定ローダーのユニットテスト"""

from pathlib import Path

import pytest
from kameleoon_openfeature import ProviderError, ProviderErrorCodes, load_config
from kameleoon_openfeature.config import merge_layers

MINIMAL = "site_code: site\nclient:\n  client_id: id\n  client_secret: secret\n"


def test_load_minimal_config(tmp_path: Path) -> None:
    """最小設定ファイルの読み込み。"""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(MINIMAL)
    config = load_config(config_file)
    assert config.site_code == "site"
    assert config.client.client_id == "id"
    assert config.client.refresh_interval_minute == 60
    assert config.log.format == "json"


def test_load_with_env_override(tmp_path: Path) -> None:
    """環境別設定のマージ確認。"""
    base_file = tmp_path / "base.yaml"
    base_file.write_text(MINIMAL)
    env_file = tmp_path / "prod.yaml"
    env_file.write_text("client:\n  environment: production\nlog:\n  level: DEBUG\n")
    config = load_config(base_file, env_file)
    assert config.client.client_id == "id"
    assert config.client.environment == "production"
    assert config.log.level == "DEBUG"


def test_load_env_not_exists(tmp_path: Path) -> None:
    """env_path が存在しない場合は base のみ使用。"""
    base_file = tmp_path / "base.yaml"
    base_file.write_text(MINIMAL)
    config = load_config(base_file, tmp_path / "nonexistent.yaml")
    assert config.client.environment is None


def test_load_file_not_found(tmp_path: Path) -> None:
    """存在しないファイルで READ_FILE_ERROR。"""
    with pytest.raises(ProviderError) as exc_info:
        load_config(tmp_path / "missing.yaml")
    assert exc_info.value.code == ProviderErrorCodes.READ_FILE


def test_load_invalid_yaml(tmp_path: Path) -> None:
    """不正 YAML で PARSE_YAML_ERROR。"""
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("client: {invalid: yaml: content:\n")
    with pytest.raises(ProviderError) as exc_info:
        load_config(bad_file)
    assert exc_info.value.code == ProviderErrorCodes.PARSE_YAML


def test_load_validation_error(tmp_path: Path) -> None:
    """バリデーション失敗で VALIDATION_ERROR。"""
    bad_config = tmp_path / "bad_config.yaml"
    bad_config.write_text(MINIMAL + "log:\n  format: xml\n")
    with pytest.raises(ProviderError) as exc_info:
        load_config(bad_config)
    assert exc_info.value.code == ProviderErrorCodes.VALIDATION


def test_merge_layers_nested() -> None:
    """ネストした辞書は重ねられ、リストは置換される。"""
    base = {"a": {"x": 1, "y": 2}, "l": [1, 2]}
    override = {"a": {"y": 3}, "l": [9]}
    assert merge_layers(base, override) == {"a": {"x": 1, "y": 3}, "l": [9]}
    assert base == {"a": {"x": 1, "y": 2}, "l": [1, 2]}


def test_merge_layers_three_layers() -> None:
    """後のレイヤーほど優先される。"""
    assert merge_layers({"a": 1}, {"a": 2, "b": 1}, {"b": 3}) == {"a": 2, "b": 3}


def test_load_non_mapping_root(tmp_path: Path) -> None:
    """ルートがマッピングでなければ VALIDATION_ERROR。"""
    list_file = tmp_path / "list.yaml"
    list_file.write_text("- a\n- b\n")
    with pytest.raises(ProviderError) as exc_info:
        load_config(list_file)
    assert exc_info.value.code == ProviderErrorCodes.VALIDATION


def test_load_empty_file_fails_validation(tmp_path: Path) -> None:
    """空ファイルは必須項目不足で VALIDATION_ERROR。"""
    empty_file = tmp_path / "empty.yaml"
    empty_file.write_text("")
    with pytest.raises(ProviderError) as exc_info:
        load_config(empty_file)
    assert exc_info.value.code == ProviderErrorCodes.VALIDATION
