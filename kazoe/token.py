from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from kazoe.errors import InvalidTokenKind


class TokenType(IntEnum):
    Number = 1
    Plus = 2
    Minus = 3
    Star = 4
    Slash = 5
    EOF = 6


@dataclass(frozen=True)
class Token:
    kind: TokenType
    value: Optional[int] = None
    location: int = 0
    expression: str = ""

    def __post_init__(self) -> None:
        try:
            kind = TokenType(self.kind)
        except ValueError:
            raise InvalidTokenKind(self.kind) from None
        object.__setattr__(self, "kind", kind)
        if kind == TokenType.Number and self.value is None:
            raise InvalidTokenKind(kind, "number token without a value")
        if kind == TokenType.Number and (
            type(self.value) is not int or self.value < 0
        ):
            raise InvalidTokenKind(kind, f"invalid number value {self.value!r}")
        if kind != TokenType.Number and self.value is not None:
            raise InvalidTokenKind(kind, f"{kind.name} token cannot carry a value")


def new_token(
    token_type: TokenType,
    start: int,
    end: int,
    expression: str,
    value: Optional[int] = None,
) -> Token:
    return Token(token_type, value, start, expression[start:end])


def equal(token: Token, kind: TokenType) -> bool:
    return token.kind == kind
