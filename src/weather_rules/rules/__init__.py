"""Rule engine for evaluating weather rules against forecast data."""

from weather_rules.rules.engine import (
    EvaluationResult,
    RuleEngine,
    evaluate_rules,
)
from weather_rules.rules.predicates import (
    ComparisonOperator,
    Predicate,
    PredicateError,
)
from weather_rules.rules.registry import (
    DEFAULT_RULES,
    Rule,
    RuleError,
    RuleSet,
    build_default_rules,
)

__all__ = [
    "RuleEngine",
    "EvaluationResult",
    "evaluate_rules",
    "ComparisonOperator",
    "Predicate",
    "PredicateError",
    "DEFAULT_RULES",
    "Rule",
    "RuleError",
    "RuleSet",
    "build_default_rules",
]
