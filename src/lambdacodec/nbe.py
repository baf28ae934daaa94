"""
Normalization by evaluation.

A term is evaluated into Python closures, so that beta-reduction is done by
Python's own function calls. The resulting value is then read back into a
term by feeding it neutral placeholders and observing what it does with them.

```
reduce(from_bruijn("((LL(0 1) LL(1 (1 0))) LL(1 (1 (1 0))))"))  # 2 ** 3
```
"""

from __future__ import annotations

import logging
import os
import sys
from contextlib import contextmanager
from typing import Any, Callable, Optional

from .errors import ResourceExhausted
from .term import App, Lam, Term, Var

__all__ = [
    "evaluate",
    "reify",
    "reduce",
    "to_function",
    "from_function",
    "Neutral",
    "END",
    "recursion_guard",
]

logger = logging.getLogger(__name__)

DEFAULT_RECURSION_LIMIT = int(os.getenv("LAMBDACODEC_RECURSION_LIMIT", "10000"))

Builder = Callable[[int], Term]


class _End:
    def __repr__(self):
        return "END"


# Passed to a placeholder instead of an argument to retrieve what it has built.
END = _End()


class Neutral:
    """
    A stand-in for a variable whose value is unknown during read-back.

    Applying a placeholder to a value records the application and returns a
    new placeholder for the longer chain. Applying it to `END` returns the
    builder of the term accumulated so far, which takes the depth at which
    the term is read back.

    Attributes:
        head:
            Builds the accumulated term: a `Var` when the placeholder was
            never applied, a left-nested chain of `App` around it otherwise.
        arity:
            The number of arguments applied so far.
    """

    def __init__(self, head: Builder, arity: int = 0):
        self.head = head
        self.arity = arity

    def __call__(self, arg: Any):
        if arg is END:
            return self.head
        head = self.head
        return Neutral(
            lambda depth: App(head(depth), _reify(arg, depth)), self.arity + 1
        )

    def __repr__(self):
        return f"Neutral(arity={self.arity})"


def _variable(level: int) -> Neutral:
    """A placeholder for the binder introduced at depth `level`."""
    return Neutral(lambda depth: Var(depth - 1 - level))


def evaluate(term: Term, env: tuple = ()) -> Any:
    """
    Turn a term into a native value.

    Lambdas become Python closures over `env`, the values bound by the
    enclosing lambdas (innermost last). Variables that reach past `env` are
    free: they evaluate to placeholders for the binders outside the term.
    """
    if isinstance(term, Var):
        if term.index < len(env):
            return env[-1 - term.index]
        return _variable(len(env) - 1 - term.index)
    if isinstance(term, Lam):
        body = term.body
        return lambda value: evaluate(body, env + (value,))
    if isinstance(term, App):
        func = evaluate(term.func, env)
        return func(evaluate(term.argm, env))
    raise TypeError(f"not a term: {term!r}")


def _reify(value: Any, depth: int) -> Term:
    if isinstance(value, Neutral):
        return value(END)(depth)
    if callable(value):
        return Lam(_reify(value(_variable(depth)), depth + 1))
    raise TypeError(f"cannot read back a {type(value).__name__} as a term: {value!r}")


def reify(value: Any) -> Term:
    """Read a native value back into a term in normal form."""
    return _reify(value, 0)


to_function = evaluate
from_function = reify


@contextmanager
def recursion_guard(recursion_limit: Optional[int] = None):
    """
    Run a block of evaluation under a recursion limit.

    Without `recursion_limit`, the limit is raised to `DEFAULT_RECURSION_LIMIT`
    but never lowered below what the caller already set. An explicit
    `recursion_limit` is used as given. The previous limit is restored on exit.

    Raises:
        ResourceExhausted: the recursion limit was reached inside the block.
    """
    previous = sys.getrecursionlimit()
    if recursion_limit is None:
        limit = max(DEFAULT_RECURSION_LIMIT, previous)
    else:
        limit = recursion_limit
    logger.debug("evaluating with a recursion limit of %d", limit)
    try:
        # too low a limit for the current depth raises RecursionError here too
        sys.setrecursionlimit(limit)
        yield limit
    except RecursionError as e:
        logger.warning("evaluation stopped at the recursion limit of %d", limit)
        raise ResourceExhausted(
            f"maximum recursion depth of {limit} exceeded, "
            "the term might not have a normal form"
        ) from e
    finally:
        sys.setrecursionlimit(previous)


def reduce(term: Term, recursion_limit: Optional[int] = None) -> Term:
    """
    Compute the normal form of a term.

    Terms without a normal form recurse until the interpreter's recursion
    limit, see `recursion_guard` for how `recursion_limit` applies.

    Raises:
        ResourceExhausted: the recursion limit was reached.
    """
    with recursion_guard(recursion_limit):
        return reify(evaluate(term))
