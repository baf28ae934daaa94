"""
Lambda calculus term representation using De Bruijn indices.

A term is one of three immutable shapes:
- `Var(index)`, a reference to the binder `index` lambdas up
- `Lam(body)`, an abstraction introducing one binder for its body
- `App(func, argm)`, the application of `func` to `argm`

Indices pointing past the outermost lambda are free variables. They are kept
as they are: nothing in this module checks scoping.

Every traversal of a term goes through `fold` (or `fold_scoped`, built on top
of it), which replaces each constructor by a function.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TypeVar

__all__ = ["Term", "Var", "Lam", "App", "fold", "fold_scoped"]

A = TypeVar("A")


class Term:
    """
    Base class for lambda calculus terms.

    Terms are frozen dataclasses: they compare and hash structurally and are
    never mutated once built.
    """

    def __call__(self, arg: Term) -> Term:
        """Apply this term to an argument"""
        return App(self, arg)

    def __str__(self):
        from .named import to_string

        return to_string(self)

    def _repr_html_(self):
        from .display import display

        return f"<div>{display(self).as_str()}</div>"


@dataclass(frozen=True)
class Var(Term):
    """
    A variable reference, as a De Bruijn index.

    The index indicates how many lambda binders to traverse upward
    to find the binding lambda:
    - index=0: bound by the immediately enclosing lambda
    - index=1: bound by the next outer lambda
    - etc.

    Example:
        λx. λy. x  =>  Lam(Lam(Var(1)))
        λx. λy. y  =>  Lam(Lam(Var(0)))
    """

    index: int

    def __post_init__(self):
        if self.index < 0:
            raise ValueError(f"Variable index must be non-negative, got {self.index}")


@dataclass(frozen=True)
class Lam(Term):
    """
    Lambda abstraction.

    Example:
        λx. x      =>  Lam(Var(0))
        λx. λy. x  =>  Lam(Lam(Var(1)))
    """

    body: Term


@dataclass(frozen=True)
class App(Term):
    """
    Function application.

    Example:
        (λx. x) (λy. y)  =>  App(Lam(Var(0)), Lam(Var(0)))
    """

    func: Term
    argm: Term


def fold(
    on_var: Callable[[int], A],
    on_lam: Callable[[A], A],
    on_app: Callable[[A, A], A],
) -> Callable[[Term], A]:
    """
    Replace the constructors of a term by functions.

    The recursion is depth-first, and the function of an application is
    always folded before its argument.
    """

    def go(term: Term) -> A:
        if isinstance(term, Var):
            return on_var(term.index)
        if isinstance(term, Lam):
            return on_lam(go(term.body))
        if isinstance(term, App):
            func = go(term.func)
            return on_app(func, go(term.argm))
        raise TypeError(f"not a term: {term!r}")

    return go


def fold_scoped(
    on_var: Callable[[int], A],
    on_lam: Callable[[int, A], A],
    on_app: Callable[[A, A], A],
) -> Callable[[Term], A]:
    """
    Fold a term while tracking how many lambdas enclose each node.

    Binders are numbered by the depth at which they are introduced, starting
    from 0 at the root. `on_lam` receives that number along with its folded
    body, and `on_var` receives the number of the binder it refers to
    (`depth - 1 - index`) instead of its raw index. Free variables get
    negative numbers: -1 for the first binder outside the term, and so on.
    """
    scoped = fold(
        lambda index: lambda depth: on_var(depth - 1 - index),
        lambda body: lambda depth: on_lam(depth, body(depth + 1)),
        lambda func, argm: lambda depth: on_app(func(depth), argm(depth)),
    )
    return lambda term: scoped(term)(0)
