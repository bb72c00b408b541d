"""Rule engine for evaluating named rules against forecast data.

Every rule is evaluated exactly once against the same data. Rules do not
short-circuit each other: a true HOT_TODAY does not skip COLD_TODAY.
A rule that cannot be evaluated raises, and no partial result is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from weather_rules.models.forecast import Forecast
from weather_rules.rules.registry import DEFAULT_RULES, Rule, RuleSet

logger = logging.getLogger(__name__)


@dataclass
class EvaluationResult:
    """Result of evaluating a rule set against a forecast."""

    forecast: Forecast
    results: dict[str, bool] = field(default_factory=dict)

    @property
    def matched(self) -> list[str]:
        """Names of rules that evaluated true."""
        return [name for name, passed in self.results.items() if passed]

    @property
    def unmatched(self) -> list[str]:
        """Names of rules that evaluated false."""
        return [name for name, passed in self.results.items() if not passed]


def evaluate_rules(
    rules: Mapping[str, Rule],
    data: Forecast,
) -> dict[str, bool]:
    """Evaluate every rule against the data.

    Args:
        rules: Mapping of rule name to rule
        data: Forecast to evaluate, usually already reduced

    Returns:
        Mapping of rule name to boolean result

    Raises:
        PredicateError: If any rule cannot be evaluated
    """
    results: dict[str, bool] = {}
    for name, rule in rules.items():
        results[name] = bool(rule(data))
        logger.debug(f"Rule {name}: {results[name]}")
    return results


class RuleEngine:
    """Evaluates a fixed rule set against forecasts.

    Example:
        ```python
        engine = RuleEngine()
        result = engine.evaluate(forecast)
        result.results  # {"HOT_TODAY": False, ...}
        ```
    """

    def __init__(self, rules: RuleSet | None = None):
        """Initialize the engine.

        Args:
            rules: Rule registry to evaluate (defaults to DEFAULT_RULES)
        """
        self.rules = rules if rules is not None else DEFAULT_RULES

    def evaluate(self, forecast: Forecast) -> EvaluationResult:
        """Evaluate all rules against a forecast."""
        results = evaluate_rules(self.rules, forecast)
        evaluation = EvaluationResult(forecast=forecast, results=results)
        logger.info(
            f"Evaluated {len(results)} rules, matched: {', '.join(evaluation.matched) or 'none'}"
        )
        return evaluation
