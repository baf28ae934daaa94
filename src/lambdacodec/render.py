import string
from typing import Callable

from .term import Term, fold_scoped

__all__ = ["to_name", "from_name", "render", "FREE_PREFIX"]

ALPHABET = string.ascii_lowercase

# Names of variables bound outside the rendered term start with this prefix.
FREE_PREFIX = "_"


def to_name(n: int) -> str:
    """
    Name the binder number `n`.

    This is `n` written in base 26 with the digits a..z, most significant
    first. Digit 0 is "a" at every position, so 25 is "z" and 26 is "ba".
    """
    if n < 0:
        raise ValueError(f"cannot name negative binder {n}")
    name = ""
    while True:
        name = ALPHABET[n % len(ALPHABET)] + name
        n //= len(ALPHABET)
        if n == 0:
            return name


def from_name(name: str) -> int:
    """Inverse of `to_name`."""
    if not name or any(c not in ALPHABET for c in name):
        raise ValueError(f"not a binder name: {name!r}")
    n = 0
    for c in name:
        n = n * len(ALPHABET) + ALPHABET.index(c)
    return n


def _name_variable(binder: int) -> str:
    if binder < 0:
        return FREE_PREFIX + to_name(-binder - 1)
    return to_name(binder)


def render(
    lam: Callable[[str, str], str], app: Callable[[str, str], str]
) -> Callable[[Term], str]:
    """
    Build a printer from the way abstractions and applications are written.

    Variables are named after the binder that introduced them, so the output
    does not depend on how deeply a variable is nested.
    """
    return fold_scoped(
        _name_variable,
        lambda binder, body: lam(to_name(binder), body),
        app,
    )
