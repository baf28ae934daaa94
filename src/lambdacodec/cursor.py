from typing import Container, NoReturn, Optional, Type

from .errors import LambdaError


class Cursor:
    """
    A read position over a source string, shared by the textual decoders.

    Failures are raised as `error`, carrying the source and the current position.
    """

    def __init__(self, source: str, error: Type[LambdaError]):
        self.source = source
        self.index = 0
        self.error = error

    def peek(self, offset: int = 0) -> Optional[str]:
        i = self.index + offset
        if i < len(self.source):
            return self.source[i]
        return None

    def advance(self, n: int = 1):
        self.index += n

    def at_end(self) -> bool:
        return self.index >= len(self.source)

    def take_while(self, chars: Container[str]) -> str:
        start = self.index
        while not self.at_end() and self.source[self.index] in chars:
            self.index += 1
        return self.source[start : self.index]

    def skip_whitespace(self):
        while not self.at_end() and self.source[self.index].isspace():
            self.index += 1

    def expect(self, char: str):
        found = self.peek()
        if found is None:
            self.fail(f"expected {char!r}, got end of input")
        if found != char:
            self.fail(f"expected {char!r}, got {found!r}")
        self.index += 1

    def fail(self, msg: str, position: Optional[int] = None) -> NoReturn:
        raise self.error(
            msg, self.source, self.index if position is None else position
        )
