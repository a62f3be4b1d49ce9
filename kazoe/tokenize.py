import logging
from enum import IntEnum
from typing import Iterator, Optional

from kazoe.errors import UnrecognizedSymbol
from kazoe.token import Token, TokenType, new_token

logger = logging.getLogger(__name__)


class CharClass(IntEnum):
    Plus = 1
    Minus = 2
    Star = 3
    Slash = 4
    DigitStart = 5
    Space = 6
    End = 7
    Unrecognized = 8


PUNCTUATORS = {
    CharClass.Plus: TokenType.Plus,
    CharClass.Minus: TokenType.Minus,
    CharClass.Star: TokenType.Star,
    CharClass.Slash: TokenType.Slash,
}


def classify(char: Optional[str]) -> CharClass:
    if char is None:
        return CharClass.End
    match char:
        case "+":
            return CharClass.Plus
        case "-":
            return CharClass.Minus
        case "*":
            return CharClass.Star
        case "/":
            return CharClass.Slash
        case " ":
            return CharClass.Space
    if "0" <= char <= "9":
        return CharClass.DigitStart
    return CharClass.Unrecognized


class Lexer:
    """Turns one line of input into tokens, one token per call.

    The cursor starts before the first character and every scanner leaves it
    on the last character it consumed, so each call begins with a single
    ``advance``.
    """

    expression: str
    position: int
    current_char: Optional[str]

    def __init__(self, expression: str) -> None:
        self.expression = expression
        self.position = -1
        self.current_char = None

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()).kind != TokenType.EOF:
            yield token

    def advance(self) -> None:
        self.position += 1
        if self.position < len(self.expression):
            self.current_char = self.expression[self.position]
            return
        self.position = len(self.expression)
        self.current_char = None

    def peek(self) -> Optional[str]:
        if self.position + 1 < len(self.expression):
            return self.expression[self.position + 1]
        return None

    def skip_whitespace(self) -> None:
        while classify(self.current_char) == CharClass.Space:
            self.advance()

    def read_number(self) -> Token:
        start = self.position
        value = ord(self.current_char) - ord("0")
        while classify(self.peek()) == CharClass.DigitStart:
            self.advance()
            value = value * 10 + ord(self.current_char) - ord("0")
        return new_token(
            TokenType.Number,
            start,
            self.position + 1,
            self.expression,
            value,
        )

    def next_token(self) -> Token:
        self.advance()
        if classify(self.current_char) == CharClass.Space:
            self.skip_whitespace()
        token = self.scan()
        logger.debug("token %s at %d: %r", token.kind.name, token.location, token)
        return token

    def scan(self) -> Token:
        char_class = classify(self.current_char)
        match char_class:
            case CharClass.End:
                return new_token(
                    TokenType.EOF, self.position, self.position, self.expression
                )
            case CharClass.Plus | CharClass.Minus | CharClass.Star | CharClass.Slash:
                return new_token(
                    PUNCTUATORS[char_class],
                    self.position,
                    self.position + 1,
                    self.expression,
                )
            case CharClass.DigitStart:
                return self.read_number()
        raise UnrecognizedSymbol(self.current_char, self.position)


def tokenize(expression: str) -> list[Token]:
    lexer = Lexer(expression)
    tokens = list(lexer)
    tokens.append(lexer.next_token())
    return tokens
