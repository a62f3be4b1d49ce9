import pytest

from kazoe.errors import UnrecognizedSymbol
from kazoe.token import TokenType
from kazoe.tokenize import CharClass, Lexer, classify, tokenize


def kinds(expression):
    return [token.kind for token in tokenize(expression)]


@pytest.mark.parametrize(
    "char, expected",
    [
        ("+", CharClass.Plus),
        ("-", CharClass.Minus),
        ("*", CharClass.Star),
        ("/", CharClass.Slash),
        ("0", CharClass.DigitStart),
        ("9", CharClass.DigitStart),
        (" ", CharClass.Space),
        (None, CharClass.End),
        ("\t", CharClass.Unrecognized),
        ("&", CharClass.Unrecognized),
        ("٣", CharClass.Unrecognized),
    ],
)
def test_classify(char, expected):
    assert classify(char) == expected


def test_operators_and_numbers():
    assert kinds("12+3-4*5/6") == [
        TokenType.Number,
        TokenType.Plus,
        TokenType.Number,
        TokenType.Minus,
        TokenType.Number,
        TokenType.Star,
        TokenType.Number,
        TokenType.Slash,
        TokenType.Number,
        TokenType.EOF,
    ]


def test_number_values_and_locations():
    tokens = tokenize("  007 + 12345678901234567890")
    assert [t.value for t in tokens] == [7, None, 12345678901234567890, None]
    assert [t.location for t in tokens] == [2, 6, 8, 28]
    assert tokens[0].expression == "007"


@pytest.mark.parametrize("expression", ["", " ", "     "])
def test_blank_input_is_end_of_input(expression):
    lexer = Lexer(expression)
    token = lexer.next_token()
    assert token.kind == TokenType.EOF
    assert token.location == len(expression)


def test_end_of_input_repeats():
    lexer = Lexer("1")
    assert lexer.next_token().kind == TokenType.Number
    assert lexer.next_token().kind == TokenType.EOF
    assert lexer.next_token().kind == TokenType.EOF


def test_cursor_stays_on_last_consumed_char():
    lexer = Lexer("123+4")
    lexer.next_token()
    assert lexer.position == 2
    lexer.next_token()
    assert lexer.position == 3


def test_iteration_stops_before_eof():
    assert [t.value for t in Lexer("1 2 3")] == [1, 2, 3]


def test_unrecognized_symbol_reports_char_and_position():
    lexer = Lexer("3 & 4")
    lexer.next_token()
    with pytest.raises(UnrecognizedSymbol) as exc_info:
        lexer.next_token()
    assert exc_info.value.char == "&"
    assert exc_info.value.position == 2
    assert exc_info.value.location == 2


def test_tab_is_not_whitespace():
    with pytest.raises(UnrecognizedSymbol) as exc_info:
        tokenize("1\t+ 2")
    assert exc_info.value.char == "\t"


def test_number_beyond_int_string_limit():
    token, eof = tokenize("1" * 5000)
    assert token.value == (10**5000 - 1) // 9
    assert eof.location == 5000
