"""Forecast rules pipeline: fetch, reduce, evaluate.

```
fetch(url) -> Forecast -> reduce_forecast() -> evaluate_rules() -> {name: bool}
```
"""

from __future__ import annotations

import logging

from weather_rules.config import Settings, get_settings
from weather_rules.models.forecast import Forecast
from weather_rules.providers.base import ForecastProvider
from weather_rules.providers.nws import NWSProvider
from weather_rules.rules.engine import evaluate_rules
from weather_rules.rules.registry import RuleSet, build_default_rules

logger = logging.getLogger(__name__)

# Today, tonight (the first two periods of the NWS forecast)
DEFAULT_PERIODS_TO_KEEP = 2


def reduce_forecast(
    forecast: Forecast,
    periods: int = DEFAULT_PERIODS_TO_KEEP,
) -> Forecast:
    """Keep only the first `periods` periods of a forecast.

    All other fields are carried over unchanged. The input is not modified.

    Args:
        forecast: Full forecast
        periods: Number of leading periods to keep

    Returns:
        Forecast with exactly min(periods, len(forecast.periods)) periods
    """
    if periods < 0:
        raise ValueError(f"periods must be non-negative, got {periods}")

    properties = forecast.properties.model_copy(
        update={"periods": forecast.properties.periods[:periods]}
    )
    return forecast.model_copy(update={"properties": properties})


async def run_pipeline(
    url: str | None = None,
    rules: RuleSet | None = None,
    provider: ForecastProvider | None = None,
    settings: Settings | None = None,
) -> dict[str, bool]:
    """Fetch a forecast, reduce it and evaluate the rules against it.

    Args:
        url: Forecast endpoint (defaults to the configured grid point)
        rules: Rule registry (defaults to rules built from settings thresholds)
        provider: Forecast provider (defaults to a new NWSProvider)
        settings: Settings (defaults to get_settings())

    Returns:
        Mapping of rule name to boolean result

    Raises:
        ForecastUnavailableError: If the forecast cannot be fetched
        PredicateError: If a rule cannot be evaluated on the forecast
    """
    settings = settings or get_settings()
    url = url or settings.resolved_forecast_url
    if rules is None:
        rules = build_default_rules(
            hot_threshold=settings.hot_threshold_f,
            cold_threshold=settings.cold_threshold_f,
        )

    if provider is None:
        provider = NWSProvider(
            user_agent=settings.user_agent,
            timeout=settings.request_timeout,
        )

    async with provider:
        forecast = await provider.fetch(url)

    reduced = reduce_forecast(forecast, settings.periods_to_keep)
    logger.info(
        f"Reduced forecast from {len(forecast.periods)} to {len(reduced.periods)} periods"
    )
    return evaluate_rules(rules, reduced)
