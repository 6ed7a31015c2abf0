from datetime import date

import pytest
from pydantic import ValidationError

from csvtable import DEFAULT_CONFIGURATION, BoolStrategyKind, DateStrategyKind, EncoderSettings, encode_value, load_configuration


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATE_STRATEGY", "DATE_FORMAT", "BOOL_STRATEGY", "BOOL_TRUE", "BOOL_FALSE"):
        monkeypatch.delenv(f"CSVTABLE_{name}", raising=False)


def test_defaults_match_default_configuration():
    assert load_configuration(_env_file=None) == DEFAULT_CONFIGURATION


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("CSVTABLE_DATE_STRATEGY", "deferred_to_date")
    monkeypatch.setenv("CSVTABLE_BOOL_STRATEGY", "yes_no_uppercase")

    configuration = load_configuration(_env_file=None)

    assert configuration.date_strategy.kind is DateStrategyKind.DEFERRED_TO_DATE
    assert configuration.bool_strategy.kind is BoolStrategyKind.YES_NO_UPPERCASE
    assert encode_value(True, configuration) == "YES"


def test_formatted_dates_from_environment(monkeypatch):
    monkeypatch.setenv("CSVTABLE_DATE_STRATEGY", "formatted")
    monkeypatch.setenv("CSVTABLE_DATE_FORMAT", "%d.%m.%Y")

    configuration = load_configuration(_env_file=None)

    assert encode_value(date(2023, 11, 7), configuration) == "07.11.2023"


def test_custom_bools_from_environment(monkeypatch):
    monkeypatch.setenv("CSVTABLE_BOOL_STRATEGY", "custom")
    monkeypatch.setenv("CSVTABLE_BOOL_TRUE", "on")
    monkeypatch.setenv("CSVTABLE_BOOL_FALSE", "off")

    configuration = load_configuration(_env_file=None)

    assert configuration.bool_strategy.encoding_values == ("on", "off")


def test_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("CSVTABLE_BOOL_STRATEGY", "yes_no")
    configuration = load_configuration(_env_file=None, bool_strategy="integer")
    assert encode_value(False, configuration) == "0"


def test_environment_does_not_touch_default(monkeypatch):
    monkeypatch.setenv("CSVTABLE_BOOL_STRATEGY", "integer")
    load_configuration(_env_file=None)
    assert encode_value(True, DEFAULT_CONFIGURATION) == "true"


def test_unknown_strategy_rejected(monkeypatch):
    monkeypatch.setenv("CSVTABLE_DATE_STRATEGY", "julian")
    with pytest.raises(ValidationError):
        EncoderSettings(_env_file=None)


def test_formatted_requires_pattern():
    with pytest.raises(ValidationError, match="CSVTABLE_DATE_FORMAT"):
        EncoderSettings(_env_file=None, date_strategy="formatted")


def test_custom_bools_require_both_values():
    with pytest.raises(ValidationError, match="CSVTABLE_BOOL_TRUE"):
        EncoderSettings(_env_file=None, bool_strategy="custom", bool_true="on")
