"""Composable boolean predicates over forecast data.

A predicate is a pure callable ``(data) -> bool``. Predicates are built
from operands, which are either literal values or accessor callables that
pull a value out of the data, and combined with `not_`, `or_`, `and_` and
`every`.

Example:
    ```python
    hot = greater_than(today_temperature, 75)
    cold = less_than(today_temperature, 50)
    moderate = not_(or_(hot, cold))

    moderate(forecast)  # -> True / False
    ```

Predicates never fall back to a default when data is missing. If an
accessor cannot resolve (no such period, no such attribute) or the two
sides cannot be compared, a `PredicateError` is raised.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class PredicateError(Exception):
    """Raised when a predicate cannot be evaluated against its data."""

    def __init__(self, message: str, predicate: str | None = None):
        super().__init__(message)
        self.predicate = predicate


class ComparisonOperator(str, Enum):
    """Operators for comparing values."""

    LESS_THAN = "lt"
    LESS_THAN_OR_EQUAL = "lte"
    GREATER_THAN = "gt"
    GREATER_THAN_OR_EQUAL = "gte"
    EQUAL = "eq"
    NOT_EQUAL = "neq"


COMPARISONS: dict[ComparisonOperator, Callable[[Any, Any], bool]] = {
    ComparisonOperator.LESS_THAN: lambda a, e: a < e,
    ComparisonOperator.LESS_THAN_OR_EQUAL: lambda a, e: a <= e,
    ComparisonOperator.GREATER_THAN: lambda a, e: a > e,
    ComparisonOperator.GREATER_THAN_OR_EQUAL: lambda a, e: a >= e,
    ComparisonOperator.EQUAL: lambda a, e: a == e,
    ComparisonOperator.NOT_EQUAL: lambda a, e: a != e,
}

SYMBOLS: dict[ComparisonOperator, str] = {
    ComparisonOperator.LESS_THAN: "<",
    ComparisonOperator.LESS_THAN_OR_EQUAL: "<=",
    ComparisonOperator.GREATER_THAN: ">",
    ComparisonOperator.GREATER_THAN_OR_EQUAL: ">=",
    ComparisonOperator.EQUAL: "==",
    ComparisonOperator.NOT_EQUAL: "!=",
}


@dataclass(frozen=True)
class Predicate(Generic[T]):
    """A named boolean function over data of type T."""

    fn: Callable[[T], bool]
    description: str

    def __call__(self, data: T) -> bool:
        return self.fn(data)

    def __str__(self) -> str:
        return self.description


def describe_operand(operand: Any) -> str:
    """Human-readable form of an operand, used in descriptions and errors."""
    if callable(operand):
        return getattr(operand, "__name__", repr(operand))
    return repr(operand)


def resolve(operand: Any, data: Any, predicate: str | None = None) -> Any:
    """Resolve an operand against data.

    Accessor callables are invoked with the data; literals are returned
    unchanged.

    Raises:
        PredicateError: If the accessor fails or resolves to None
    """
    if not callable(operand):
        return operand

    try:
        value = operand(data)
    except (LookupError, AttributeError, TypeError) as e:
        raise PredicateError(
            f"Cannot resolve {describe_operand(operand)}: {e}",
            predicate=predicate,
        ) from e

    if value is None:
        raise PredicateError(
            f"{describe_operand(operand)} resolved to None",
            predicate=predicate,
        )
    return value


def compare(left: Any, operator: ComparisonOperator, right: Any) -> Predicate[Any]:
    """Build a predicate comparing two operands with an operator."""
    description = (
        f"{describe_operand(left)} {SYMBOLS[operator]} {describe_operand(right)}"
    )
    comparator = COMPARISONS[operator]

    def evaluate(data: Any) -> bool:
        actual = resolve(left, data, description)
        expected = resolve(right, data, description)
        try:
            return bool(comparator(actual, expected))
        except TypeError as e:
            raise PredicateError(
                f"Cannot compare {actual!r} with {expected!r}: {e}",
                predicate=description,
            ) from e

    return Predicate(evaluate, description)


def greater_than(left: Any, right: Any) -> Predicate[Any]:
    return compare(left, ComparisonOperator.GREATER_THAN, right)


def greater_than_or_equal(left: Any, right: Any) -> Predicate[Any]:
    return compare(left, ComparisonOperator.GREATER_THAN_OR_EQUAL, right)


def less_than(left: Any, right: Any) -> Predicate[Any]:
    return compare(left, ComparisonOperator.LESS_THAN, right)


def less_than_or_equal(left: Any, right: Any) -> Predicate[Any]:
    return compare(left, ComparisonOperator.LESS_THAN_OR_EQUAL, right)


def equals(left: Any, right: Any) -> Predicate[Any]:
    return compare(left, ComparisonOperator.EQUAL, right)


def not_equals(left: Any, right: Any) -> Predicate[Any]:
    return compare(left, ComparisonOperator.NOT_EQUAL, right)


def not_(predicate: Callable[[T], bool]) -> Predicate[T]:
    """Negate a predicate."""
    return Predicate(
        lambda data: not predicate(data),
        f"not ({_describe(predicate)})",
    )


def or_(*predicates: Callable[[T], bool]) -> Predicate[T]:
    """True if any of the predicates is true (evaluated left to right)."""
    if not predicates:
        raise ValueError("or_() requires at least one predicate")
    return Predicate(
        lambda data: any(p(data) for p in predicates),
        " or ".join(f"({_describe(p)})" for p in predicates),
    )


def and_(*predicates: Callable[[T], bool]) -> Predicate[T]:
    """True if all of the predicates are true (evaluated left to right)."""
    if not predicates:
        raise ValueError("and_() requires at least one predicate")
    return Predicate(
        lambda data: all(p(data) for p in predicates),
        " and ".join(f"({_describe(p)})" for p in predicates),
    )


def every(
    select: Callable[[T], Iterable[E]],
    element_predicate: Callable[[E, T], bool],
) -> Predicate[T]:
    """True if `element_predicate` holds for every selected element.

    Args:
        select: Accessor returning the sequence to quantify over
        element_predicate: Called as ``element_predicate(element, data)``
            so it can compare the element against the enclosing document

    An empty sequence satisfies the predicate.
    """
    description = f"every {describe_operand(select)}: {describe_operand(element_predicate)}"

    def evaluate(data: T) -> bool:
        elements = resolve(select, data, description)
        try:
            iterator = iter(elements)
        except TypeError as e:
            raise PredicateError(
                f"{describe_operand(select)} is not a sequence: {elements!r}",
                predicate=description,
            ) from e
        return all(element_predicate(element, data) for element in iterator)

    return Predicate(evaluate, description)


def _describe(predicate: Callable[..., bool]) -> str:
    if isinstance(predicate, Predicate):
        return predicate.description
    return describe_operand(predicate)
