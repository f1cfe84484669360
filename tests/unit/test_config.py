"""Tests for settings/profile configuration and path resolution."""

import json
import pytest
import yaml

from benefitscalc.sdk.config import (
    DEFAULT_COMPANY_ID,
    DEFAULT_PACKAGE_ID,
    ProfileNotFoundError,
    clear_data_dir,
    get_config_dir,
    get_data_path,
    get_profile_path,
    get_records_dir,
    get_recognized_ids,
    load_profile,
    load_settings,
    set_data_dir,
    set_profile_value,
)


@pytest.fixture
def isolated_env(tmp_path, monkeypatch):
    """Point config and XDG data paths at tmp_path."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("BENEFITS_CALC_CONFIG_PATH", str(config_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "xdg-data"))
    return {"config_dir": config_dir, "tmp_path": tmp_path}


def write_settings(isolated_env, settings):
    isolated_env["config_dir"].mkdir(parents=True, exist_ok=True)
    (isolated_env["config_dir"] / "settings.json").write_text(json.dumps(settings))


class TestConfigDir:

    def test_env_var_wins(self, isolated_env):
        assert get_config_dir() == isolated_env["config_dir"]

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("BENEFITS_CALC_CONFIG_PATH", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_dir() == tmp_path / "benefits-calc"

    def test_missing_settings_is_empty(self, isolated_env):
        assert load_settings() == {}


class TestDataDir:

    def test_default_is_xdg(self, isolated_env):
        expected = isolated_env["tmp_path"] / "xdg-data" / "benefits-calc"

        assert get_data_path() == expected
        assert expected.is_dir()
        assert not (isolated_env["config_dir"] / "settings.json").exists()

    def test_set_data_dir_moves_records_dir(self, isolated_env):
        custom = isolated_env["tmp_path"] / "custom"

        assert set_data_dir(str(custom)) == custom.resolve()

        assert load_settings() == {"data_dir": str(custom.resolve())}
        assert get_records_dir() == custom.resolve() / "records"
        assert (custom / "records").is_dir()

    def test_set_data_dir_keeps_other_settings(self, isolated_env):
        write_settings(isolated_env, {"profile": "/etc/benefits/profile.yaml"})

        set_data_dir(str(isolated_env["tmp_path"] / "custom"))

        assert load_settings()["profile"] == "/etc/benefits/profile.yaml"

    def test_set_data_dir_rejects_a_file(self, isolated_env):
        not_a_dir = isolated_env["tmp_path"] / "records.txt"
        not_a_dir.write_text("")

        with pytest.raises(ValueError, match="not a directory"):
            set_data_dir(str(not_a_dir))

        assert load_settings() == {}

    def test_clear_data_dir(self, isolated_env):
        set_data_dir(str(isolated_env["tmp_path"] / "custom"))

        assert clear_data_dir() is True
        assert clear_data_dir() is False
        assert get_data_path() == isolated_env["tmp_path"] / "xdg-data" / "benefits-calc"


class TestProfile:

    def test_missing_profile_required(self, isolated_env):
        with pytest.raises(ProfileNotFoundError):
            load_profile(require_exists=True)

    def test_missing_profile_optional(self, isolated_env):
        assert load_profile(require_exists=False) == {}

    def test_custom_profile_path(self, isolated_env):
        custom = isolated_env["tmp_path"] / "elsewhere.yaml"
        custom.write_text(yaml.dump({"company_id": "acme"}))
        write_settings(isolated_env, {"profile": str(custom)})

        assert get_profile_path() == custom
        assert load_profile()["company_id"] == "acme"

    def test_set_profile_value(self, isolated_env):
        set_profile_value("package_id", "gold")

        assert load_profile() == {"package_id": "gold"}

    def test_set_unknown_profile_key(self, isolated_env):
        with pytest.raises(ValueError):
            set_profile_value("employees", "[]")

    def test_set_empty_id_rejected(self, isolated_env):
        with pytest.raises(ValueError):
            set_profile_value("company_id", "")


class TestRecognizedIds:

    def test_defaults(self, isolated_env):
        assert get_recognized_ids() == (DEFAULT_COMPANY_ID, DEFAULT_PACKAGE_ID)

    def test_from_profile(self, isolated_env):
        set_profile_value("company_id", "acme")

        assert get_recognized_ids() == ("acme", DEFAULT_PACKAGE_ID)

    def test_numeric_yaml_ids_are_strings(self, isolated_env):
        """package_id: 2 in YAML loads as int; the engine compares strings."""
        isolated_env["config_dir"].mkdir(parents=True)
        (isolated_env["config_dir"] / "profile.yaml").write_text("package_id: 2\n")

        assert get_recognized_ids()[1] == "2"

    def test_numeric_looking_id_is_saved_as_string(self, isolated_env):
        path = set_profile_value("package_id", "2")

        assert yaml.safe_load(path.read_text()) == {"package_id": "2"}
        assert get_recognized_ids()[1] == "2"
