"""
Summary: Named strategies composed with a first-success-wins combinator.
Why: Keep every fallback chain explicit and ordered while introspection failures degrade to "no result".
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from settingpath.platform.logging import logger

S = TypeVar("S")
R = TypeVar("R")


@dataclass(slots=True, frozen=True)
class Strategy(Generic[S, R]):
    """A named resolution step returning a result or None."""

    name: str
    run: Callable[[S], R | None]


def first_success(strategies: Iterable[Strategy[S, R]], subject: S) -> R | None:
    """Run ``strategies`` in order and return the first non-None result.

    A strategy that raises contributes nothing; the failure is logged at debug
    level and the next strategy is tried.

    Args:
        strategies: Ordered strategies to attempt.
        subject: Value handed to every strategy.

    Returns:
        R | None: First successful result, or None when every strategy declined.
    """
    for strategy in strategies:
        try:
            result = strategy.run(subject)
        except Exception as exc:
            logger.debug("Strategy '%s' failed: %s", strategy.name, exc)
            continue
        if result is not None:
            return result
    return None


def attempt(step: str, func: Callable[[], R]) -> R | None:
    """Call ``func`` and turn any introspection failure into None."""

    try:
        return func()
    except Exception as exc:
        logger.debug("Introspection step '%s' failed: %s", step, exc)
        return None


__all__ = ["Strategy", "attempt", "first_success"]
