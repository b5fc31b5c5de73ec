import pytest

from streamdesk import config
from streamdesk.config import Settings, build_hub, build_indicator, load_indicator_config
from streamdesk.indicators import AverageTrueRange, InvalidConfiguration, MovingAverageType


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("LOG_LEVEL", "ATR_PERIOD", "ATR_MA_TYPE", "ATR_VALUE_FLOOR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    def test_defaults(self, clean_env):
        s = Settings()
        assert s.log_level == "INFO"
        assert s.atr_period == 14
        assert s.atr_ma_type == "SIMPLE"
        assert s.atr_value_floor == 0.0
        s.validate()

    def test_reads_environment(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "DEBUG")
        clean_env.setenv("ATR_PERIOD", "20")
        clean_env.setenv("ATR_MA_TYPE", "wilder")
        clean_env.setenv("ATR_VALUE_FLOOR", "0.0005")

        s = Settings()

        assert s.log_level == "DEBUG"
        assert s.atr_period == 20
        assert s.atr_ma_type == "wilder"
        assert s.atr_value_floor == pytest.approx(0.0005)
        s.validate()

    def test_non_numeric_period_rejected(self, clean_env):
        clean_env.setenv("ATR_PERIOD", "fourteen")
        with pytest.raises(InvalidConfiguration):
            Settings()

    @pytest.mark.parametrize(
        "field, value",
        [("atr_period", 0), ("atr_ma_type", "hull"), ("atr_value_floor", -1.0)],
    )
    def test_validate_rejects_bad_values(self, clean_env, field, value):
        s = Settings()
        setattr(s, field, value)
        with pytest.raises(InvalidConfiguration):
            s.validate()


class TestLoadIndicatorConfig:
    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_indicator_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(InvalidConfiguration):
            load_indicator_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("indicators: [unclosed\n")
        with pytest.raises(InvalidConfiguration):
            load_indicator_config(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(InvalidConfiguration):
            load_indicator_config(path)

    def test_builds_hub_from_yaml(self, tmp_path):
        path = tmp_path / "indicators.yaml"
        path.write_text(
            "indicators:\n"
            "  - epic: CS.D.GBPUSD.TODAY.IP\n"
            "    period: 5MINUTE\n"
            "    indicator:\n"
            "      type: atr\n"
            "      period: 3\n"
            "      ma_type: exponential\n"
            "      use_previous: false\n"
            "      value_floor: 0.25\n"
        )

        hub = build_hub(load_indicator_config(path))

        [atr] = hub.indicators("CS.D.GBPUSD.TODAY.IP", "5MINUTE")
        assert isinstance(atr, AverageTrueRange)
        assert repr(atr) == "AverageTrueRange(3,EXPONENTIAL,False,0.25)"
        assert hub.warmup_plan() == {("CS.D.GBPUSD.TODAY.IP", "5MINUTE"): 3}


class TestBuildIndicator:
    def test_defaults_come_from_settings(self, monkeypatch):
        monkeypatch.setattr(config.settings, "atr_period", 21)
        monkeypatch.setattr(config.settings, "atr_ma_type", "wilder")
        monkeypatch.setattr(config.settings, "atr_value_floor", 0.1)

        atr = build_indicator({})

        assert atr.period == 21
        assert atr.ma_type is MovingAverageType.WILDER
        assert atr.use_previous is True
        assert atr.value_floor == pytest.approx(0.1)

    def test_string_use_previous_rejected(self):
        with pytest.raises(InvalidConfiguration):
            build_indicator({"type": "atr", "period": 3, "use_previous": "false"})

    def test_unknown_type(self):
        with pytest.raises(InvalidConfiguration):
            build_indicator({"type": "rsi"})

    def test_invalid_period(self):
        with pytest.raises(InvalidConfiguration):
            build_indicator({"type": "ATR", "period": 0})

    def test_hub_entry_requires_chart_key(self):
        with pytest.raises(InvalidConfiguration):
            build_hub({"indicators": [{"epic": "EPIC", "indicator": {"period": 3}}]})

    def test_hub_indicators_must_be_list(self):
        with pytest.raises(InvalidConfiguration):
            build_hub({"indicators": {"epic": "EPIC"}})
