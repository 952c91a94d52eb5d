import pytest

from tombkeeper.config import (
    ColorTheme,
    ConfigError,
    TombConfig,
    default_tomb_config_filename,
)


@pytest.fixture
def env(monkeypatch, tmp_path):
    monkeypatch.setenv("TOMB_CONFIG", str(tmp_path / "config.yaml"))
    monkeypatch.setenv("TOMB_LOG", str(tmp_path / "tomb.log"))
    monkeypatch.setenv("TOMB_KEY", str(tmp_path / "key.yaml"))
    monkeypatch.setenv("TOMB_FILE", str(tmp_path / "tomb.yaml"))
    return tmp_path


def test_default_config_filename(monkeypatch):
    monkeypatch.delenv("TOMB_CONFIG", raising=False)
    assert default_tomb_config_filename() == "~/.tomb.config.yaml"


def test_builtin_theme():
    theme = ColorTheme.builtin()
    assert theme.default == "#4f5d75"
    assert theme.error_bg == "#242423"


def test_builtin_uses_environment(env):
    config = TombConfig.builtin()
    assert config.key_filename == str(env / "key.yaml")
    assert config.tomb_filename == str(env / "tomb.yaml")
    assert config.log_filename == str(env / "tomb.log")
    assert config.version == "0.2.3"
    assert config.colors == ColorTheme.builtin()


def test_save_and_load_round_trip(env):
    config = TombConfig.builtin()
    theme = ColorTheme.builtin()
    theme.light = "yellow"
    config.set_colors(theme)
    config.save()
    loaded = TombConfig.load()
    assert loaded == config
    assert loaded.colors.light == "yellow"


def test_save_writes_log(env):
    config = TombConfig.builtin()
    config.save()
    assert TombConfig.from_file(str(env / "config.yaml")) == config
    log = (env / "tomb.log").read_text(encoding="utf-8")
    assert str(env / "config.yaml") in log


def test_load_falls_back_to_builtin(env):
    assert not (env / "config.yaml").exists()
    assert TombConfig.load() == TombConfig.builtin()


def test_export_and_from_file(env):
    config = TombConfig.create("k", "t", "l", ColorTheme.builtin())
    path = str(env / "other.yaml")
    config.export(path)
    assert TombConfig.from_file(path) == config


def test_from_file_missing_field(env):
    path = env / "broken.yaml"
    path.write_text("colors: {}\nkey_filename: k\n")
    with pytest.raises(ConfigError):
        TombConfig.from_file(str(path))


def test_from_file_not_a_mapping(env):
    path = env / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        TombConfig.from_file(str(path))


def test_save_into_missing_directory(monkeypatch, tmp_path):
    monkeypatch.setenv("TOMB_CONFIG", str(tmp_path / "nope" / "config.yaml"))
    monkeypatch.setenv("TOMB_LOG", str(tmp_path / "tomb.log"))
    with pytest.raises(ConfigError, match="cannot save config"):
        TombConfig.builtin().save()


def test_set_colors_copies(env):
    config = TombConfig.builtin()
    theme = ColorTheme.builtin()
    config.set_colors(theme)
    theme.default = "red"
    assert config.colors.default == ColorTheme.builtin().default