"""
Terms of the untyped lambda calculus, their encodings and their normal forms.

```
from lambdacodec import from_bruijn, from_number, reduce, to_bruijn

power = from_bruijn("LL(0 1)")
to_bruijn(reduce(power(from_number(2))(from_number(3))))  # "LL(1 (1 (1 (1 (1 (1 (1 (1 0))))))))"
```
"""

try:
    import polars  # noqa: F401
except ImportError:
    raise ImportError(
        "lambdacodec needs the `polars` library. \n Please install it, typically with `pip install polars`"
    )

from .blc import from_blc, from_blc64, to_blc, to_blc64
from .bruijn import from_bruijn, to_bruijn
from .church import from_number, to_number
from .display import display
from .errors import (
    DecodeError,
    LambdaError,
    ParseError,
    ResourceExhausted,
    UnboundReferenceError,
)
from .frame import to_frame
from .named import from_string, to_string
from .nbe import (
    END,
    Neutral,
    evaluate,
    from_function,
    recursion_guard,
    reduce,
    reify,
    to_function,
)
from .render import from_name, render, to_name
from .term import App, Lam, Term, Var, fold, fold_scoped

__all__ = [
    "Term",
    "Var",
    "Lam",
    "App",
    "fold",
    "fold_scoped",
    "to_name",
    "from_name",
    "render",
    "from_number",
    "to_number",
    "from_bruijn",
    "to_bruijn",
    "from_string",
    "to_string",
    "from_blc",
    "to_blc",
    "from_blc64",
    "to_blc64",
    "evaluate",
    "reify",
    "to_function",
    "from_function",
    "reduce",
    "recursion_guard",
    "Neutral",
    "END",
    "to_frame",
    "display",
    "LambdaError",
    "ParseError",
    "UnboundReferenceError",
    "DecodeError",
    "ResourceExhausted",
]
