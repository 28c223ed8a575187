import pytest

from cargo_tariff.constants import DEFAULT_TARIFF_CONFIG_PATH
from cargo_tariff.models import TariffConfigError
from cargo_tariff.settings import Settings, load_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("TARIFF_CONFIG_PATH", raising=False)
    s = Settings()
    assert s.LOG_LEVEL == "INFO"
    assert s.tariff_config_path == DEFAULT_TARIFF_CONFIG_PATH


def test_load_settings_reads_env_and_yaml(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text("borders:\n  X: {}\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("TARIFF_CONFIG_PATH", str(path))

    s = load_settings()
    assert s.LOG_LEVEL == "debug"
    assert s.tariff_config_path == path
    assert s.tariff_config == {"borders": {"X": {}}}


def test_missing_config_file_leaves_empty(tmp_path, monkeypatch):
    monkeypatch.setenv("TARIFF_CONFIG_PATH", str(tmp_path / "absent.yaml"))
    assert load_settings().tariff_config == {}


@pytest.mark.parametrize("text", ["borders: [\n", "- not a mapping\n", "other: 1\n"])
def test_malformed_config_file_raises_config_error(tmp_path, monkeypatch, text):
    path = tmp_path / "broken.yaml"
    path.write_text(text, encoding="utf-8")
    monkeypatch.setenv("TARIFF_CONFIG_PATH", str(path))
    with pytest.raises(TariffConfigError):
        load_settings()
