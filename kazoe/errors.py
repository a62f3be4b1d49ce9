from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from kazoe.token import TokenType


class KazoeError(Exception):
    """Base class for every failure raised while evaluating a line."""

    def __init__(self, message: str, location: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location


class InvalidTokenKind(KazoeError):
    def __init__(self, kind: object, message: Optional[str] = None) -> None:
        super().__init__(message or f"unknown token type {kind!r}")
        self.kind = kind


class UnrecognizedSymbol(KazoeError):
    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"unrecognized symbol {char!r}", position)
        self.char = char
        self.position = position


class UnexpectedToken(KazoeError):
    def __init__(
        self, actual: "TokenType", expected: "TokenType", position: int
    ) -> None:
        super().__init__(f"expected {expected.name}, got {actual.name}", position)
        self.actual = actual
        self.expected = expected
        self.position = position


class DivisionByZero(KazoeError, ZeroDivisionError):
    def __init__(self, position: int) -> None:
        super().__init__("division by zero", position)
        self.position = position
