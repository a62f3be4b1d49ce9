import logging
from fractions import Fraction
from typing import Optional

from kazoe.errors import DivisionByZero, UnexpectedToken
from kazoe.token import Token, TokenType, equal
from kazoe.tokenize import Lexer

logger = logging.getLogger(__name__)


class Evaluator:
    """Recursive-descent parser that computes the value while it parses.

    factor := MINUS? NUMBER
    term   := factor ((STAR | SLASH) factor)*
    expr   := term ((PLUS | MINUS) term)*

    All values are exact rationals, so ``10 / 4`` is ``Fraction(5, 2)``.
    """

    lexer: Lexer
    current_token: Token

    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.current_token = lexer.next_token()

    def expect(self, kind: TokenType) -> Optional[int]:
        token = self.current_token
        if not equal(token, kind):
            raise UnexpectedToken(token.kind, kind, token.location)
        self.current_token = self.lexer.next_token()
        return token.value

    def factor(self) -> Fraction:
        negative = equal(self.current_token, TokenType.Minus)
        if negative:
            self.expect(TokenType.Minus)
        value = Fraction(self.expect(TokenType.Number))
        return -value if negative else value

    def term(self) -> Fraction:
        result = self.factor()
        while True:
            token = self.current_token
            if equal(token, TokenType.Star):
                self.expect(TokenType.Star)
                result *= self.factor()
                continue
            if equal(token, TokenType.Slash):
                self.expect(TokenType.Slash)
                divisor = self.factor()
                if divisor == 0:
                    raise DivisionByZero(token.location)
                result /= divisor
                continue
            return result

    def expr(self) -> Fraction:
        result = self.term()
        while True:
            if equal(self.current_token, TokenType.Plus):
                self.expect(TokenType.Plus)
                result += self.term()
                continue
            if equal(self.current_token, TokenType.Minus):
                self.expect(TokenType.Minus)
                result -= self.term()
                continue
            return result

    def evaluate(self) -> Fraction:
        result = self.expr()
        # trailing input after a complete expression is an error
        self.expect(TokenType.EOF)
        logger.debug("%r = %s", self.lexer.expression, result)
        return result


def evaluate(line: str) -> Fraction:
    return Evaluator(Lexer(line)).evaluate()


def format_value(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"
