"""Church numerals: n is `λf.λx.f (f (... (f x)))` with n applications of f."""

from typing import Optional

from .nbe import evaluate, recursion_guard
from .term import App, Lam, Term, Var

__all__ = ["from_number", "to_number"]


def from_number(number: int) -> Term:
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise ValueError(f"only natural numbers supported, got {number!r}")
    body: Term = Var(0)
    for _ in range(number):
        body = App(Var(1), body)
    return Lam(Lam(body))


def to_number(term: Term, recursion_limit: Optional[int] = None):
    """
    Count the applications of a Church numeral.

    The term does not need to be in normal form, but it must normalize to a
    numeral: any other term gives a meaningless result. Evaluation runs under
    `recursion_guard(recursion_limit)`, like `reduce`.

    Raises:
        ResourceExhausted: the recursion limit was reached.
    """
    with recursion_guard(recursion_limit):
        return evaluate(term)(lambda x: x + 1)(0)
