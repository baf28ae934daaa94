"""De Bruijn syntax: `L<body>`, `(<func> <argm>)` and decimal indices."""

import logging
import string

from .cursor import Cursor
from .errors import ParseError
from .term import App, Lam, Term, Var, fold

__all__ = ["from_bruijn", "to_bruijn"]

logger = logging.getLogger(__name__)


def _parse(cursor: Cursor) -> Term:
    char = cursor.peek()
    if char is None:
        cursor.fail("unexpected end of input")

    if char == "L":
        cursor.advance()
        return Lam(_parse(cursor))

    if char == "(":
        start = cursor.index
        cursor.advance()
        func = _parse(cursor)
        separator = cursor.peek()
        if separator is None:
            cursor.fail("unmatched '('", start)
        if separator == ")":
            cursor.fail("expected an argument after the function")
        cursor.advance()
        argm = _parse(cursor)
        if cursor.peek() is None:
            cursor.fail("unmatched '('", start)
        cursor.expect(")")
        return App(func, argm)

    if char in string.digits:
        return Var(int(cursor.take_while(string.digits)))

    cursor.fail(f"unexpected character {char!r}")


def from_bruijn(source: str) -> Term:
    """
    Parse a term written in De Bruijn syntax.

    Any single character other than `)` separates the function of an
    application from its argument, so `(1 0)` and `(1,0)` are the same term.

    ```
    from_bruijn("LL(1 0)")  # Lam(Lam(App(Var(1), Var(0))))
    ```
    """
    logger.debug("parsing %d characters of De Bruijn syntax", len(source))
    cursor = Cursor(source, ParseError)
    cursor.skip_whitespace()
    term = _parse(cursor)
    cursor.skip_whitespace()
    if not cursor.at_end():
        cursor.fail("unexpected trailing input")
    return term


_write = fold(
    str,
    lambda body: "L" + body,
    lambda func, argm: f"({func} {argm})",
)


def to_bruijn(term: Term) -> str:
    """Write a term in De Bruijn syntax."""
    return _write(term)
