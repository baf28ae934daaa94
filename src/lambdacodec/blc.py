"""
Binary lambda calculus.

```
Var(i)     =>  "1" * (i + 1) + "0"
Lam(b)     =>  "00" + blc(b)
App(f, a)  =>  "01" + blc(f) + blc(a)
```

The base64 variant packs these bits six at a time, starting from the end of
the bit string. The first symbol carries a unary length marker: the bits
after its first `1` are the leading bits of the BLC string.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from .cursor import Cursor
from .errors import DecodeError
from .term import App, Lam, Term, Var, fold

__all__ = ["from_blc", "to_blc", "from_blc64", "to_blc64", "BASE64_TABLE"]

logger = logging.getLogger(__name__)

BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
CHUNK = 6

# Maps every symbol to its 6-bit string and every 6-bit string to its symbol.
BASE64_TABLE: Mapping[str, str] = MappingProxyType(
    {
        **{symbol: format(i, f"0{CHUNK}b") for i, symbol in enumerate(BASE64_ALPHABET)},
        **{format(i, f"0{CHUNK}b"): symbol for i, symbol in enumerate(BASE64_ALPHABET)},
    }
)


def _decode(cursor: Cursor) -> Term:
    head = cursor.peek()
    if head is None:
        cursor.fail("truncated input, expected a term")

    if head == "0":
        tag = cursor.peek(1)
        if tag is None:
            cursor.fail("truncated input after '0'")
        if tag not in "01":
            cursor.fail(f"invalid bit {tag!r}", cursor.index + 1)
        cursor.advance(2)
        if tag == "0":
            return Lam(_decode(cursor))
        func = _decode(cursor)
        return App(func, _decode(cursor))

    if head == "1":
        start = cursor.index
        ones = cursor.take_while("1")
        end = cursor.peek()
        if end is None:
            cursor.fail("truncated variable, expected a terminating '0'", start)
        if end != "0":
            cursor.fail(f"invalid bit {end!r}")
        cursor.advance()
        return Var(len(ones) - 1)

    cursor.fail(f"invalid bit {head!r}")


def from_blc(source: str) -> Term:
    """Decode a binary lambda calculus bit string."""
    logger.debug("decoding %d bits of BLC", len(source))
    cursor = Cursor(source, DecodeError)
    term = _decode(cursor)
    if not cursor.at_end():
        cursor.fail("trailing bits after the term")
    return term


_write = fold(
    lambda index: "1" * (index + 1) + "0",
    lambda body: "00" + body,
    lambda func, argm: "01" + func + argm,
)


def to_blc(term: Term) -> str:
    """Encode a term as a binary lambda calculus bit string."""
    return _write(term)


def from_blc64(digits: str) -> Term:
    """Decode a base64-packed binary lambda calculus string."""
    logger.debug("decoding %d symbols of base64 BLC", len(digits))
    if not digits:
        raise DecodeError("empty input", digits, 0)

    chunks = []
    for position, symbol in enumerate(digits):
        bits = BASE64_TABLE.get(symbol)
        if bits is None:
            raise DecodeError(f"invalid base64 symbol {symbol!r}", digits, position)
        chunks.append(bits)

    marker = chunks[0].find("1")
    if marker == -1:
        raise DecodeError("first symbol carries no length marker", digits, 0)
    chunks[0] = chunks[0][marker + 1 :]
    try:
        return from_blc("".join(chunks))
    except DecodeError as e:
        # point at the symbol holding the offending bit, not into the bit string
        position = e.position
        if position is not None:
            lead = len(chunks[0])
            position = 0 if position < lead else 1 + (position - lead) // CHUNK
            position = min(position, len(digits) - 1)
        raise DecodeError(e.msg, digits, position) from e


def to_blc64(term: Term) -> str:
    """
    Encode a term as base64-packed binary lambda calculus.

    When the bit count is a multiple of 6, the length marker takes a whole
    symbol of its own ("B").
    """
    bits = to_blc(term)
    marker = CHUNK - len(bits) % CHUNK
    packed = "0" * (marker - 1) + "1" + bits
    return "".join(
        BASE64_TABLE[packed[i : i + CHUNK]] for i in range(0, len(packed), CHUNK)
    )
