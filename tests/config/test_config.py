import json
from pathlib import Path

import pytest

from threshold_secrets import ConfigurationError
from threshold_secrets.config import CONFIG_ENV_VAR, SharingConfig, load_sharing_config, resolve_config_path


def test_defaults() -> None:
    config = SharingConfig.from_dict(None)
    assert config.share_count == 3
    assert config.threshold == 2
    assert config.log_level == "INFO"
    assert config.json_logs is False


def test_from_dict_overrides_and_normalises() -> None:
    config = SharingConfig.from_dict({"share_count": "5", "threshold": 3, "log_level": "debug"})
    assert config.share_count == 5
    assert config.threshold == 3
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "data",
    [
        {"share_count": 1},
        {"share_count": 256},
        {"share_count": 3, "threshold": 4},
        {"threshold": 1},
        {"log_level": "chatty"},
        {"share_count": "many"},
        {"shares": 3},
    ],
)
def test_invalid_values_rejected(data) -> None:
    with pytest.raises(ConfigurationError):
        SharingConfig.from_dict(data)


def test_from_file(tmp_path: Path) -> None:
    path = tmp_path / "sharing.json"
    path.write_text(json.dumps({"share_count": 7, "threshold": 4, "json_logs": True}))
    config = SharingConfig.from_file(path)
    assert (config.share_count, config.threshold, config.json_logs) == (7, 4, True)


def test_from_file_rejects_bad_json(tmp_path: Path) -> None:
    path = tmp_path / "sharing.json"
    path.write_text("{not json")
    with pytest.raises(ConfigurationError):
        SharingConfig.from_file(path)


def test_from_file_rejects_non_object(tmp_path: Path) -> None:
    path = tmp_path / "sharing.json"
    path.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        SharingConfig.from_file(path)


def test_env_var_points_at_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"share_count": 9, "threshold": 5}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert resolve_config_path() == path
    assert load_sharing_config().share_count == 9


def test_relative_path_resolves_against_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert resolve_config_path(Path("cfg.json")) == (tmp_path / "cfg.json").resolve()


def test_missing_file_yields_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert resolve_config_path() is None
    assert load_sharing_config(tmp_path / "absent.json") == SharingConfig()
