"""Tests for the reducer and the end-to-end pipeline."""

import asyncio

import httpx
import pytest

from weather_rules.config import Settings
from weather_rules.models.forecast import Forecast
from weather_rules.pipeline import reduce_forecast, run_pipeline
from weather_rules.providers.base import ForecastUnavailableError
from weather_rules.rules.predicates import PredicateError
from weather_rules.rules.registry import Rule, RuleSet


class TestReduceForecast:
    """Tests for reduce_forecast."""

    def test_keeps_first_two_periods(self, sample_forecast: Forecast):
        reduced = reduce_forecast(sample_forecast)
        assert [p.name for p in reduced.periods] == ["Today", "Tonight"]

    @pytest.mark.parametrize("count", [0, 1, 2, 3, 10])
    def test_yields_min_of_two_and_length(self, count, make_forecast):
        forecast = make_forecast(*range(60, 60 + count))
        assert len(reduce_forecast(forecast).periods) == min(2, count)

    def test_custom_period_count(self, sample_forecast: Forecast):
        reduced = reduce_forecast(sample_forecast, periods=3)
        assert [p.temperature for p in reduced.periods] == [62, 48, 71]

    def test_other_fields_pass_through(self, sample_forecast: Forecast):
        reduced = reduce_forecast(sample_forecast)

        assert reduced.model_extra == sample_forecast.model_extra
        assert reduced.properties.units == "us"
        assert reduced.properties.generated_at == sample_forecast.properties.generated_at
        assert reduced.properties.model_extra == sample_forecast.properties.model_extra

    def test_original_untouched(self, sample_forecast: Forecast):
        reduce_forecast(sample_forecast)
        assert len(sample_forecast.periods) == 4

    def test_negative_count_rejected(self, sample_forecast: Forecast):
        with pytest.raises(ValueError):
            reduce_forecast(sample_forecast, periods=-1)


class TestRunPipeline:
    """Tests for run_pipeline with a mocked API."""

    def test_end_to_end(self, make_provider, forecast_payload):
        provider = make_provider(lambda request: httpx.Response(200, json=forecast_payload))

        result = asyncio.run(run_pipeline(provider=provider, settings=Settings()))

        # Today 62, Tonight 48; later periods (71) are dropped before evaluation
        assert result == {
            "HOT_TODAY": False,
            "COLD_TODAY": False,
            "MODERATE_TODAY": True,
            "GETTING_COLDER": True,
        }
        assert str(provider.requests[0].url) == (
            "https://api.weather.gov/gridpoints/MKX/88,63/forecast"
        )

    def test_more_periods_changes_result(self, make_provider, forecast_payload):
        provider = make_provider(lambda request: httpx.Response(200, json=forecast_payload))
        settings = Settings(periods_to_keep=3)

        result = asyncio.run(run_pipeline(provider=provider, settings=settings))

        assert result["GETTING_COLDER"] is False  # 71 > 62

    def test_explicit_url_and_rules(self, make_provider, forecast_payload):
        provider = make_provider(lambda request: httpx.Response(200, json=forecast_payload))
        rules = RuleSet([Rule("ALWAYS", lambda forecast: True)])

        result = asyncio.run(
            run_pipeline(
                url="https://example.test/forecast",
                rules=rules,
                provider=provider,
                settings=Settings(),
            )
        )

        assert result == {"ALWAYS": True}
        assert str(provider.requests[0].url) == "https://example.test/forecast"

    def test_thresholds_from_settings(self, make_provider, forecast_payload):
        provider = make_provider(lambda request: httpx.Response(200, json=forecast_payload))
        settings = Settings(hot_threshold_f=60, cold_threshold_f=40)

        result = asyncio.run(run_pipeline(provider=provider, settings=settings))

        assert result["HOT_TODAY"] is True

    def test_fetch_failure_propagates(self, make_provider):
        provider = make_provider(lambda request: httpx.Response(404))

        with pytest.raises(ForecastUnavailableError):
            asyncio.run(run_pipeline(provider=provider, settings=Settings()))

    def test_empty_forecast_fails_evaluation(self, make_provider):
        payload = {"properties": {"periods": []}}
        provider = make_provider(lambda request: httpx.Response(200, json=payload))

        with pytest.raises(PredicateError):
            asyncio.run(run_pipeline(provider=provider, settings=Settings()))
