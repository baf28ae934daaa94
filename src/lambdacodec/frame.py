"""
Flat node tables for terms.

A term is listed in prefix order, one row per node:
- `id`: the position of the node in prefix order, 0 being the root
- `type`: "lambda", "variable" or "application"
- `ref`: for variables, the id of the lambda they are bound to (null when free)
- `arg`: for applications, the id of the argument

The body of a lambda and the function of an application are always at `id + 1`.
"""

from typing import Optional

import polars as pl
from polars import Schema, String, UInt32

from .term import App, Lam, Term, Var

__all__ = ["SCHEMA", "to_frame"]

SCHEMA = Schema(
    {
        "id": UInt32,
        "type": String,
        "ref": UInt32,
        "arg": UInt32,
    },
)

Row = tuple[int, str, Optional[int], Optional[int]]


def _visit(term: Term, binders: tuple[int, ...], rows: list[Row]):
    node = len(rows)
    if isinstance(term, Var):
        ref = binders[-1 - term.index] if term.index < len(binders) else None
        rows.append((node, "variable", ref, None))
    elif isinstance(term, Lam):
        rows.append((node, "lambda", None, None))
        _visit(term.body, binders + (node,), rows)
    elif isinstance(term, App):
        rows.append((node, "application", None, None))
        _visit(term.func, binders, rows)
        rows[node] = (node, "application", None, len(rows))
        _visit(term.argm, binders, rows)
    else:
        raise TypeError(f"not a term: {term!r}")


def to_frame(term: Term) -> pl.DataFrame:
    rows: list[Row] = []
    _visit(term, (), rows)
    return pl.from_records(rows, orient="row", schema=SCHEMA)
