"""Composable filter conditions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union


class ConditionError(Exception):
    """Raised when a condition cannot be evaluated."""

    pass


@dataclass(frozen=True)
class Constant:
    value: bool


@dataclass(frozen=True)
class Not:
    condition: Condition


@dataclass(frozen=True)
class And:
    conditions: tuple[Condition, ...]


@dataclass(frozen=True)
class Or:
    conditions: tuple[Condition, ...]


@dataclass(frozen=True)
class Equal:
    value: Any


@dataclass(frozen=True)
class FieldCondition:
    """Applies ``condition`` to the value of field ``name``."""

    name: str
    condition: Condition


Condition = Union[Constant, Not, And, Or, Equal, FieldCondition]

TRUE = Constant(True)
FALSE = Constant(False)


def true() -> Constant:
    return TRUE


def false() -> Constant:
    return FALSE


def and_(*conditions: Condition) -> Condition:
    """
    Combine conditions with a logical AND.

    Neutral ``true`` operands are dropped, so ``and_(c, true())`` is ``c``.
    """
    remaining = tuple(c for c in conditions if c != TRUE)
    if not remaining:
        return TRUE
    if len(remaining) == 1:
        return remaining[0]
    return And(remaining)


def or_(*conditions: Condition) -> Condition:
    remaining = tuple(c for c in conditions if c != FALSE)
    if not remaining:
        return FALSE
    if len(remaining) == 1:
        return remaining[0]
    return Or(remaining)


def not_(condition: Condition) -> Not:
    return Not(condition)


def equal(value: Any) -> Equal:
    return Equal(value)


def field_equals(name: str, value: Any) -> FieldCondition:
    return FieldCondition(name, Equal(value))


def evaluate(condition: Condition, value: Any) -> bool:
    """Test a value against a condition."""
    if isinstance(condition, Constant):
        return condition.value
    if isinstance(condition, Not):
        return not evaluate(condition.condition, value)
    if isinstance(condition, And):
        return all(evaluate(c, value) for c in condition.conditions)
    if isinstance(condition, Or):
        return any(evaluate(c, value) for c in condition.conditions)
    if isinstance(condition, Equal):
        return value == condition.value
    if isinstance(condition, FieldCondition):
        if not isinstance(value, Mapping):
            raise ConditionError(f"Field condition on non-object value: {value!r}")
        return evaluate(condition.condition, value.get(condition.name))
    raise ConditionError(f"Unknown condition: {condition!r}")
