"""Named weather rules and the immutable registry that holds them.

The default rule set answers four questions about the reduced forecast:

| Rule | Meaning |
|------|---------|
| HOT_TODAY | period 0 temperature > hot threshold (75°F) |
| COLD_TODAY | period 0 temperature < cold threshold (50°F) |
| MODERATE_TODAY | neither hot nor cold |
| GETTING_COLDER | no period is warmer than period 0 |

`colder_than_today` is an element predicate used inside GETTING_COLDER.
It needs a period to compare, so it is not registered as a rule of its own.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass

from weather_rules.models.forecast import Forecast, Period
from weather_rules.rules.predicates import (
    Predicate,
    every,
    greater_than,
    less_than,
    less_than_or_equal,
    not_,
    or_,
)

DEFAULT_HOT_THRESHOLD_F = 75.0
DEFAULT_COLD_THRESHOLD_F = 50.0


class RuleError(Exception):
    """Raised when a rule set is built incorrectly."""


@dataclass(frozen=True)
class Rule:
    """A named predicate over a forecast."""

    name: str
    predicate: Callable[[Forecast], bool]
    description: str | None = None

    def __call__(self, forecast: Forecast) -> bool:
        return self.predicate(forecast)


class RuleSet(Mapping[str, Rule]):
    """Immutable mapping of rule name to `Rule`.

    Built once and never mutated afterwards. Iteration follows
    registration order.
    """

    def __init__(self, rules: Iterable[Rule] = ()):
        registry: dict[str, Rule] = {}
        for rule in rules:
            if rule.name in registry:
                raise RuleError(f"Duplicate rule name: {rule.name}")
            registry[rule.name] = rule
        self._rules = registry

    def __getitem__(self, name: str) -> Rule:
        return self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({list(self._rules)})"

    def with_rules(self, *rules: Rule) -> RuleSet:
        """Return a new rule set with extra rules appended."""
        return RuleSet([*self._rules.values(), *rules])


# Accessors

def today_temperature(forecast: Forecast) -> float:
    return forecast.today.temperature


def forecast_periods(forecast: Forecast) -> tuple[Period, ...]:
    return forecast.periods


def colder_than_today(period: Period, forecast: Forecast) -> bool:
    """Period is no warmer than period 0."""

    def period_temperature(_: Forecast) -> float:
        return period.temperature

    return less_than_or_equal(period_temperature, today_temperature)(forecast)


def build_default_rules(
    hot_threshold: float = DEFAULT_HOT_THRESHOLD_F,
    cold_threshold: float = DEFAULT_COLD_THRESHOLD_F,
) -> RuleSet:
    """Build the standard rule set.

    Args:
        hot_threshold: Temperature above which today counts as hot
        cold_threshold: Temperature below which today counts as cold

    Returns:
        RuleSet with HOT_TODAY, COLD_TODAY, MODERATE_TODAY, GETTING_COLDER
    """
    if cold_threshold > hot_threshold:
        raise RuleError(
            f"Cold threshold ({cold_threshold}) is above hot threshold ({hot_threshold})"
        )

    hot_today: Predicate[Forecast] = greater_than(today_temperature, hot_threshold)
    cold_today: Predicate[Forecast] = less_than(today_temperature, cold_threshold)
    moderate_today = not_(or_(hot_today, cold_today))
    getting_colder = every(forecast_periods, colder_than_today)

    return RuleSet(
        [
            Rule("HOT_TODAY", hot_today, f"Today is above {hot_threshold:g}°"),
            Rule("COLD_TODAY", cold_today, f"Today is below {cold_threshold:g}°"),
            Rule("MODERATE_TODAY", moderate_today, "Today is neither hot nor cold"),
            Rule(
                "GETTING_COLDER",
                getting_colder,
                "No upcoming period is warmer than today",
            ),
        ]
    )


DEFAULT_RULES = build_default_rules()
