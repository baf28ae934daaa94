"""
Named syntax, the human-readable form of terms.

```
x.y.(x y)          # an abstraction binding x, then y
f.a.b.(f a b)      # f applied to a, then to b
id:x.x (id id)     # a let-alias: both `id` are replaced by the term `x.x`
```

Identifiers are runs of letters, digits and underscores. Every other
character except parentheses separates tokens and is otherwise ignored.
"""

from __future__ import annotations

import logging
import string
from typing import NamedTuple, Optional

from .cursor import Cursor
from .errors import ParseError, UnboundReferenceError
from .render import ALPHABET, FREE_PREFIX, from_name, render
from .term import App, Lam, Term, Var

__all__ = ["from_string", "to_string"]

logger = logging.getLogger(__name__)

IDENTIFIER = frozenset(string.ascii_letters + string.digits + "_")


class Binder(NamedTuple):
    name: str
    # the aliased term for `name:term` bindings, None for lambdas
    alias: Optional[Term]


def _skip_separators(cursor: Cursor):
    while not cursor.at_end():
        char = cursor.peek()
        if char in IDENTIFIER or char in "()":
            return
        cursor.advance()


def _resolve(cursor: Cursor, name: str, start: int, binders: tuple[Binder, ...]):
    depth = len(binders)
    for i in reversed(range(depth)):
        binder = binders[i]
        if binder.name == name:
            if binder.alias is not None:
                return binder.alias
            return Var(depth - i - 1)

    suffix = name[len(FREE_PREFIX) :]
    if name.startswith(FREE_PREFIX) and suffix and all(c in ALPHABET for c in suffix):
        return Var(depth + from_name(suffix))
    raise UnboundReferenceError(f"unbound name {name!r}", cursor.source, start)


def _parse(cursor: Cursor, binders: tuple[Binder, ...]) -> Term:
    _skip_separators(cursor)
    char = cursor.peek()
    if char is None:
        cursor.fail("unexpected end of input")

    if char == "(":
        start = cursor.index
        cursor.advance()
        term = _parse(cursor, binders)
        while True:
            _skip_separators(cursor)
            char = cursor.peek()
            if char is None:
                cursor.fail("unmatched '('", start)
            if char == ")":
                cursor.advance()
                return term
            term = App(term, _parse(cursor, binders))

    if char == ")":
        cursor.fail("unmatched ')'")

    start = cursor.index
    name = cursor.take_while(IDENTIFIER)
    assert name, "separators are skipped before reading a name"

    follow = cursor.peek()
    if follow == ".":
        cursor.advance()
        return Lam(_parse(cursor, binders + (Binder(name, None),)))
    if follow == ":":
        cursor.advance()
        value = _parse(cursor, binders)
        # the alias takes a slot on the binder stack, like a lambda would
        return _parse(cursor, binders + (Binder(name, value),))
    return _resolve(cursor, name, start, binders)


def from_string(source: str) -> Term:
    """
    Parse a term written in named syntax.

    Names resolve to the closest binder with the same name. Names of the form
    `_a`, `_b`, ... that are not bound refer to variables bound outside the
    term, as written by `to_string`.
    """
    logger.debug("parsing %d characters of named syntax", len(source))
    cursor = Cursor(source, ParseError)
    term = _parse(cursor, ())
    _skip_separators(cursor)
    if not cursor.at_end():
        cursor.fail("unexpected trailing input")
    return term


_write = render(
    lambda name, body: f"{name}.{body}",
    lambda func, argm: f"({func} {argm})",
)


def to_string(term: Term) -> str:
    """Write a term in named syntax, naming binders a, b, c, ..."""
    return _write(term)
