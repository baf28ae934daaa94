from typing import Iterable, NamedTuple, Optional

import polars as pl
import svg

from .frame import to_frame
from .term import Term

__all__ = ["display", "compute_layout"]

# prefered size of a cell in pixels
CELL_PIXELS = 40


class Interval(NamedTuple):
    low: int
    high: int

    def __or__(self, other: Optional["Interval"]) -> "Interval":
        if other is None:
            return self
        return Interval(min(self.low, other.low), max(self.high, other.high))

    def shift(self, offset: int) -> "Interval":
        return Interval(self.low + offset, self.high + offset)


def compute_layout(
    nodes: pl.DataFrame,
) -> tuple[dict[int, Interval], dict[int, Interval]]:
    """
    Place every node of a node table on a grid.

    Variables get one column each, from left to right. A lambda spans the
    columns of its body and of the variables bound to it, an application
    spans the columns of its function.
    """
    rows = nodes.select("id", "type", "ref", "arg").rows()

    y = {0: Interval(0, 0)}
    for node, kind, _ref, arg in rows:
        child = node + 1
        if kind == "lambda":
            y[child] = y[node].shift(1)
        elif kind == "application":
            y[child] = y[node].shift(1 if rows[child][1] == "application" else 0)
            y[arg] = y[node]

    x = {}
    next_var_x = sum(1 for row in rows if row[1] == "variable") - 1
    for node, kind, ref, _arg in reversed(rows):
        if kind == "variable":
            x[node] = Interval(next_var_x, next_var_x)
            next_var_x -= 1
            if ref is not None:
                x[ref] = x[node] | x.get(ref)
        else:
            child = node + 1
            x[node] = x[child] | x.get(node)
            y[node] = y[child] | y[node]
    return x, y


def draw(
    x: dict[int, Interval],
    y: dict[int, Interval],
    node: int,
    kind: str,
    ref: Optional[int],
    arg: Optional[int],
) -> Iterable[svg.Element]:
    x_node = x[node]
    y_node = y[node]

    if kind == "application":
        yield svg.Rect(
            x=0.1 + x_node.low,
            y=0.1 + y_node.low,
            width=0.8 + x_node.high - x_node.low,
            height=0.8,
            fill="none",
            stroke="orange",
            stroke_width=0.1,
        )
        assert arg is not None
        yield svg.Line(
            x1=0.5 + x_node.high,
            y1=0.5 + y_node.low,
            x2=0.5 + x[arg].low,
            y2=0.5 + y[arg].low,
            stroke="black",
            stroke_width=0.05,
        )
        yield svg.Circle(cx=0.5 + x_node.high, cy=0.5 + y_node.low, r=0.1, fill="black")
        return

    yield svg.Rect(
        x=0.1 + x_node.low,
        y=0.1 + y_node.low,
        width=0.8 + x_node.high - x_node.low,
        height=0.8,
        fill="blue" if kind == "lambda" else "red",
        stroke="gray",
        stroke_width=0.05,
    )
    if ref is not None:
        yield svg.Line(
            x1=0.5 + x_node.low,
            y1=0.1 + y_node.low,
            x2=0.5 + x_node.low,
            y2=0.9 + y[ref].low,
            stroke="gray",
            stroke_width=0.2,
        )


def display(term: Term) -> svg.SVG:
    """
    Draw a term: lambdas are blue bars over the variables they bind,
    variables are red cells linked to their lambda, and applications are
    orange boxes linked to their argument.
    """
    nodes = to_frame(term)
    x, y = compute_layout(nodes)

    elements = []
    for node, kind, ref, arg in (
        nodes.select("id", "type", "ref", "arg").sort("id", descending=True).iter_rows()
    ):
        elements.extend(draw(x, y, node, kind, ref, arg))

    width = max(interval.high for interval in x.values()) + 1
    height = max(interval.high for interval in y.values()) + 1
    return svg.SVG(
        xmlns="http://www.w3.org/2000/svg",
        viewBox=f"-1 0 {width + 2} {height}",  # type: ignore
        style=f"max-height:{height * CELL_PIXELS}px",
        elements=elements,
    )
