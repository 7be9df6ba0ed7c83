import pytest

from trendpages.settings import CONFIG_ENV_VAR, ConfigError, load_config


def test_bundled_config_loads_with_priority_order(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config()

    assert list(config["connectors"])[:3] == ["x_trends", "tiktok_hashtags", "google_trends"]
    assert config["output"]["bucket_hours"] == 4
    assert config["fallback"]["keywords"]


def test_missing_config_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_non_mapping_config_raises(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_bucket_hours_raises(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("output:\n  bucket_hours: 5\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_env_var_overrides_default(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("connectors:\n  hacker_news: {}\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config() == {"connectors": {"hacker_news": {}}}


def test_empty_sections_load_as_mappings(tmp_path):
    path = tmp_path / "sparse.yaml"
    path.write_text("connectors:\noutput:\nsite:\n", encoding="utf-8")

    assert load_config(path) == {"connectors": {}, "output": {}, "site": {}}


def test_unknown_output_format_raises(tmp_path):
    path = tmp_path / "formats.yaml"
    path.write_text("output:\n  formats: [html, xml]\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="xml"):
        load_config(path)
