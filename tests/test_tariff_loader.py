import pytest

from cargo_tariff.constants import DEFAULT_TARIFF_CONFIG_PATH
from cargo_tariff.models import DuplicateDutyCode, TariffConfigError
from cargo_tariff.tariff import Border, load_borders
from cargo_tariff.tariff.loader import build_borders, load_tariff_config, parse_tariff_config


def write_yaml(tmp_path, text: str):
    path = tmp_path / "tariffs.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_bundled_config_loads():
    borders = load_borders(DEFAULT_TARIFF_CONFIG_PATH)
    assert set(borders) == {"FR-ES", "ES-MA"}
    fr_es = borders["FR-ES"]
    assert isinstance(fr_es, Border)
    assert fr_es.name == "FR-ES"
    assert fr_es.get_cross_price("8703", 1000) == pytest.approx(125.0)
    assert borders["ES-MA"].get_cross_price("0901", 1000) == pytest.approx(40.0)


def test_load_borders_uses_settings_schedule(monkeypatch):
    from cargo_tariff.settings import settings

    schedule = {"borders": {"X": {"duties": [{"code": "A", "rules": [{"factor": "*", "value": 3}]}]}}}
    monkeypatch.setattr(settings, "tariff_config", schedule)
    borders = load_borders()
    assert list(borders) == ["X"]
    assert borders["X"].get_cross_price("A", 50) == 150


def test_load_borders_reads_settings_path_when_schedule_empty(tmp_path, monkeypatch):
    from cargo_tariff.settings import settings

    path = write_yaml(tmp_path, "borders:\n  X:\n    duties:\n      - code: A\n")
    monkeypatch.setattr(settings, "tariff_config", {})
    monkeypatch.setattr(settings, "TARIFF_CONFIG_PATH", path)
    borders = load_borders()
    assert list(borders) == ["X"]
    assert borders["X"].get_cross_price("A", 50) == 50


def test_numeric_codes_and_word_factors(tmp_path):
    path = write_yaml(
        tmp_path,
        """
borders:
  DE-CH:
    duties:
      - code: 8703
        rules:
          - {factor: multiply, value: 2}
          - {factor: ADD, value: "5"}
""",
    )
    border = load_borders(path)["DE-CH"]
    assert border.codes == ("8703",)
    assert border.get_cross_price("8703", 10) == 25


def test_duplicate_codes_rejected():
    config = {"borders": {"X": {"duties": [{"code": "A"}, {"code": "A"}]}}}
    with pytest.raises(DuplicateDutyCode):
        build_borders(config)


@pytest.mark.parametrize(
    "config",
    [
        {"borders": {"X": {"duties": [{"code": "A", "rules": [{"factor": "/", "value": 2}]}]}}},
        {"borders": {"X": {"duties": [{"code": "A", "rules": [{"factor": "*", "value": "abc"}]}]}}},
        {"borders": {"X": {"duties": [{"code": "A", "rules": [{"factor": "+", "value": True}]}]}}},
        {"borders": {"X": {"duties": [{"code": "A", "rules": [{"factor": "*", "value": False}]}]}}},
        {"borders": {"X": {"duties": [{"rules": []}]}}},
        {"borders": ["X"]},
    ],
)
def test_invalid_schema(config):
    with pytest.raises(TariffConfigError):
        parse_tariff_config(config)


def test_missing_file(tmp_path):
    with pytest.raises(TariffConfigError):
        load_tariff_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("text", ["", "- just a list\n", "other: 1\n", "borders: [\n"])
def test_bad_documents(tmp_path, text):
    with pytest.raises(TariffConfigError):
        load_tariff_config(write_yaml(tmp_path, text))


def test_load_logs_path(tmp_path, caplog):
    path = write_yaml(tmp_path, "borders: {}\n")
    with caplog.at_level("INFO", logger="cargo_tariff.tariff.loader"):
        assert load_borders(path) == {}
    assert str(path) in caplog.text


def test_yaml_boolean_value_rejected(tmp_path):
    path = write_yaml(
        tmp_path,
        "borders:\n  X:\n    duties:\n      - code: A\n        rules:\n          - {factor: '+', value: true}\n",
    )
    with pytest.raises(TariffConfigError):
        load_borders(path)


@pytest.mark.parametrize("factor", ["*", "+", "multiply", "Add", " mul "])
def test_schema_accepts_every_rule_factor_token(factor):
    config = {"borders": {"X": {"duties": [{"code": "A", "rules": [{"factor": factor, "value": 1}]}]}}}
    assert parse_tariff_config(config).borders["X"].duties[0].rules[0].factor == factor
